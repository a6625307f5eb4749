from __future__ import annotations

import pytest

from polyline_codec import PolylineError, decode, validate


@pytest.mark.parametrize(
    "polyline",
    [
        "",
        "??",
        "_p~iF~ps|U_ulLnnqC_mqNvxq`@",
        "ewl}zAwthf^ctAobBsUnl@",
        "??~~~~~~B?",
    ],
)
def test_valid_polylines_pass(polyline):
    assert validate(polyline) is None


@pytest.mark.parametrize(
    "polyline,code",
    [
        ("a", "unterminated_group"),
        ("_p~iF~ps|U_p", "unterminated_group"),
        ("_p~iF", "odd_value_count"),
        ("_p~iF ps|U", "invalid_character"),
        ("??é?", "invalid_character"),
        ("~~~~~~~?", "group_too_long"),
    ],
)
def test_invalid_polylines_raise(polyline, code):
    with pytest.raises(PolylineError) as exc:
        validate(polyline)
    assert exc.value.code == code
    assert exc.value.detail["code"] == code


def test_decode_stays_lenient_where_validate_is_strict():
    with pytest.raises(PolylineError):
        validate("_p~iF~ps|U_p")
    assert len(decode("_p~iF~ps|U_p", 5)) == 1


def test_polyline_error_is_a_value_error():
    with pytest.raises(ValueError):
        validate("a")

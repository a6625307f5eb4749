from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional

from polyline_codec.core.chunks import Chunks, int32, uint32
from polyline_codec.core.contracts import Point, PolylineGeometry
from polyline_codec.core.errors import bad_polyline

logger = logging.getLogger(__name__)

_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1

_CONTINUATION = 0x20
_ASCII_OFFSET = 63
_ASCII_MAX = 126

# A 32-bit value never needs more than seven 5-bit groups.
_MAX_GROUP_LEN = 7


# ──────────────────────────────────────────────────────────────
# Rounding
# ──────────────────────────────────────────────────────────────

def _round_half_away(value: float) -> int:
    whole = math.trunc(value)
    if abs(value - whole) >= 0.5:
        whole += 1 if value > 0 else -1
    return whole


def round_to(value: float, precision: int) -> float:
    """Round to `precision` decimals, ties away from zero."""
    factor = float(10 ** precision)
    return _round_half_away(value * factor) / factor


# ──────────────────────────────────────────────────────────────
# Encode
# ──────────────────────────────────────────────────────────────

def _encode_element(element: float, precision: int) -> str:
    scaled = _round_half_away(element * float(10 ** precision))
    # float -> i32 casts saturate
    scaled = max(_INT32_MIN, min(_INT32_MAX, scaled))

    value = int32(scaled << 1)
    # sign comes from the unscaled delta: -0.000001 @5 still complements
    if element < 0:
        value = ~value

    c = Chunks()
    c.parse(uint32(value))
    return c.string()


def encode(points: Iterable[Point], precision: int) -> str:
    """
    Encode points to the "Encoded Polyline Algorithm Format".

    precision: usually 5 or 6. Google's original algorithm uses 5 decimal
    digits (about a meter); 6 gives roughly 10cm and is what OSRM and
    Valhalla emit as "polyline6".

    Deltas are taken against the previous *input* coordinate, not the
    rounded one, so rounding error does not accumulate along the line.
    """
    out: List[str] = []
    last_lat = 0.0
    last_lng = 0.0
    for p in points:
        out.append(_encode_element(p.latitude - last_lat, precision))
        out.append(_encode_element(p.longitude - last_lng, precision))
        last_lat = p.latitude
        last_lng = p.longitude
    return "".join(out)


def encode5(points: Iterable[Point]) -> str:
    """encode() with precision 5 (about one meter)."""
    return encode(points, 5)


def encode6(points: Iterable[Point]) -> str:
    """encode() with precision 6 (about ten centimeters)."""
    return encode(points, 6)


# ──────────────────────────────────────────────────────────────
# Decode
# ──────────────────────────────────────────────────────────────

def _decode_element(group: str, precision: int) -> float:
    c = Chunks()
    c.parse_line(group)
    return c.coordinate(precision)


def decode(polyline: str, precision: int) -> List[Point]:
    """
    Decode a polyline back into points.

    Never raises on malformed input: an unterminated trailing group and an
    unpaired trailing value are dropped. Use `validate` for a strict check.
    """
    group: List[str] = []
    values: List[float] = []

    for letter in polyline:
        group.append(letter)
        if (ord(letter) - _ASCII_OFFSET) & _CONTINUATION == 0:
            values.append(_decode_element("".join(group), precision))
            group = []

    if group:
        logger.debug("polyline_decode dropped_unterminated chars=%d", len(group))
    if len(values) % 2:
        logger.debug("polyline_decode dropped_unpaired values=%d", len(values))

    deltas = []
    i = 1
    while i < len(values):
        deltas.append((round_to(values[i - 1], precision), round_to(values[i], precision)))
        i += 2

    points: List[Point] = []
    lat = 0.0
    lng = 0.0
    for dlat, dlng in deltas:
        # accumulate the rounded sum; the deltas are all the decoder has
        lat = round_to(lat + dlat, precision)
        lng = round_to(lng + dlng, precision)
        points.append(Point(lat, lng))
    return points


def decode5(polyline: str) -> List[Point]:
    """decode() with precision 5 (about one meter)."""
    return decode(polyline, 5)


def decode6(polyline: str) -> List[Point]:
    """decode() with precision 6 (about ten centimeters)."""
    return decode(polyline, 6)


# ──────────────────────────────────────────────────────────────
# Strict checks
# ──────────────────────────────────────────────────────────────

def validate(polyline: str) -> None:
    """
    Strict counterpart of `decode`'s best-effort parsing.

    Raises PolylineError (codes: invalid_character, group_too_long,
    unterminated_group, odd_value_count) for anything `decode` would
    silently truncate or misread.
    """
    values = 0
    group_len = 0
    for idx, letter in enumerate(polyline):
        code = ord(letter)
        if code < _ASCII_OFFSET or code > _ASCII_MAX:
            bad_polyline(
                "invalid_character",
                f"character {letter!r} at index {idx} is outside '?'..'~'",
            )
        group_len += 1
        if (code - _ASCII_OFFSET) & _CONTINUATION == 0:
            values += 1
            group_len = 0
        elif group_len >= _MAX_GROUP_LEN:
            bad_polyline(
                "group_too_long",
                f"group ending at index {idx} exceeds {_MAX_GROUP_LEN} characters",
            )

    if group_len:
        bad_polyline("unterminated_group", f"last {group_len} character(s) never terminate a value")
    if values % 2:
        bad_polyline("odd_value_count", f"{values} values cannot be paired into points")


# ──────────────────────────────────────────────────────────────
# Contracts
# ──────────────────────────────────────────────────────────────

def geometry_from_points(points: Iterable[Point], precision: Optional[int] = None) -> PolylineGeometry:
    kwargs = {} if precision is None else {"precision": precision}
    geom = PolylineGeometry(geometry="", **kwargs)
    geom.geometry = encode(points, geom.precision)
    return geom


def geometry_points(geom: PolylineGeometry) -> List[Point]:
    return decode(geom.geometry, geom.precision)

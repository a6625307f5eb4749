"""
Encode/decode coordinate paths in the "Encoded Polyline Algorithm Format".

ref: https://developers.google.com/maps/documentation/utilities/polylinealgorithm
"""
from polyline_codec.core.contracts import Point, PolylineGeometry
from polyline_codec.core.errors import PolylineError
from polyline_codec.core.polyline import (
    decode,
    decode5,
    decode6,
    encode,
    encode5,
    encode6,
    geometry_from_points,
    geometry_points,
    round_to,
    validate,
)

__all__ = [
    "Point",
    "PolylineGeometry",
    "PolylineError",
    "decode",
    "decode5",
    "decode6",
    "encode",
    "encode5",
    "encode6",
    "geometry_from_points",
    "geometry_points",
    "round_to",
    "validate",
]

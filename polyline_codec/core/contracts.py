from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from pydantic import BaseModel, Field, field_validator

from polyline_codec.core.errors import bad_polyline
from polyline_codec.core.settings import settings


# ──────────────────────────────────────────────────────────────
# Coordinates
# ──────────────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class Point:
    """Single coordinate of a point on the polyline."""

    latitude: float
    longitude: float

    @classmethod
    def from_pair(cls, pair: Sequence[float]) -> "Point":
        """Build from a `(lat, lng)` pair."""
        lat, lng = pair
        return cls(float(lat), float(lng))

    def as_pair(self) -> Tuple[float, float]:
        return (self.latitude, self.longitude)


# ──────────────────────────────────────────────────────────────
# Geometry
# ──────────────────────────────────────────────────────────────

class PolylineGeometry(BaseModel):
    geometry: str                   # encoded polyline
    precision: int = Field(default_factory=lambda: settings.default_precision)

    @field_validator("precision")
    @classmethod
    def _check_precision(cls, v: int) -> int:
        if v < 0 or v > settings.max_precision:
            bad_polyline(
                "invalid_precision",
                f"precision must be between 0 and {settings.max_precision}, got {v}",
            )
        return v

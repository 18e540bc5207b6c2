"""Points and bounding boxes on the Earth's surface."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Mapping


def _format_float(value: float) -> str:
    """Format a float in plain decimal notation with the fewest digits that round-trip."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _parse_float(text: str) -> float:
    if not text or text != text.strip() or "_" in text:
        raise ValueError(f"invalid number: {text!r}")
    return float(text)


@dataclass(frozen=True)
class LatLng:
    """A latitude/longitude pair in degrees."""

    lat: float = 0.0
    lng: float = 0.0

    def __str__(self) -> str:
        return f"{_format_float(self.lat)},{_format_float(self.lng)}"

    def almost_equal(self, other: LatLng, epsilon: float) -> bool:
        """Return True when both coordinates differ by less than epsilon."""
        return abs(self.lat - other.lat) < epsilon and abs(self.lng - other.lng) < epsilon

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> LatLng:
        """Build from a JSON object using lat/lng or latitude/longitude keys."""
        if not data:
            return cls()
        lat = data.get("lat", data.get("latitude", 0.0))
        lng = data.get("lng", data.get("longitude", 0.0))
        return cls(float(lat), float(lng))


@dataclass(frozen=True)
class LatLngBounds:
    """A rectangular area given by its north-east and south-west corners."""

    northeast: LatLng = field(default_factory=LatLng)
    southwest: LatLng = field(default_factory=LatLng)

    def __str__(self) -> str:
        return f"{self.southwest}|{self.northeast}"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> LatLngBounds:
        """Build from a JSON object with northeast and southwest corners."""
        if not data:
            return cls()
        return cls(
            northeast=LatLng.from_dict(data.get("northeast")),
            southwest=LatLng.from_dict(data.get("southwest")),
        )


def parse_latlng(location: str) -> LatLng:
    """Parse a "lat,lng" string."""
    parts = location.split(",")
    if len(parts) < 2:
        raise ValueError(f"missing longitude in {location!r}")
    return LatLng(_parse_float(parts[0]), _parse_float(parts[1]))


def parse_latlng_list(locations: str) -> list[LatLng]:
    """Parse a "|"-separated list of "lat,lng" pairs."""
    return [parse_latlng(item) for item in locations.split("|")]
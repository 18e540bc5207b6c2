"""Snap to Roads, Nearest Roads and Speed Limits requests and responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Union

from .api import ApiConfig
from .latlng import LatLng

SNAP_TO_ROADS_API = ApiConfig(
    host="https://roads.googleapis.com",
    path="/v1/snapToRoads",
    accepts_client_id=False,
    accepts_signature=False,
)

NEAREST_ROADS_API = ApiConfig(
    host="https://roads.googleapis.com",
    path="/v1/nearestRoads",
    accepts_client_id=False,
    accepts_signature=False,
)

SPEED_LIMITS_API = ApiConfig(
    host="https://roads.googleapis.com",
    path="/v1/speedLimits",
    accepts_client_id=False,
    accepts_signature=False,
)


class SpeedLimitUnit(str, Enum):
    """Units in which speed limits are given."""

    MPH = "MPH"
    KPH = "KPH"


def _join_path(points: list[LatLng]) -> str:
    return "|".join(str(point) for point in points)


@dataclass
class SnapToRoadRequest:
    """A path to be snapped to the roads most likely travelled."""

    path: list[LatLng] = field(default_factory=list)
    interpolate: bool = False

    def params(self) -> dict[str, list[str]]:
        """Return the query parameters for this request."""
        query = {"path": [_join_path(self.path)]}
        if self.interpolate:
            query["interpolate"] = ["true"]
        return query

    def validate(self) -> None:
        """Raise ValueError unless the request has a path."""
        if not self.path:
            raise ValueError("maps: Path empty")


@dataclass
class SnappedPoint:
    """A point of the original path snapped to a road."""

    location: LatLng = field(default_factory=LatLng)
    original_index: int | None = None
    place_id: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> SnappedPoint:
        """Build from a JSON object."""
        data = data or {}
        index = data.get("originalIndex")
        return cls(
            location=LatLng.from_dict(data.get("location")),
            original_index=None if index is None else int(index),
            place_id=data.get("placeId", ""),
        )


def _snapped_points(data: Mapping[str, Any]) -> list[SnappedPoint]:
    return [SnappedPoint.from_dict(item) for item in data.get("snappedPoints") or []]


@dataclass
class SnapToRoadResponse:
    """The snapped points of a Snap to Roads request."""

    snapped_points: list[SnappedPoint] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> SnapToRoadResponse:
        """Build from a JSON object."""
        return cls(snapped_points=_snapped_points(data or {}))


@dataclass
class NearestRoadsRequest:
    """Independent points to be snapped to their nearest road segments."""

    points: list[LatLng] = field(default_factory=list)

    def params(self) -> dict[str, list[str]]:
        """Return the query parameters for this request."""
        return {"points": [_join_path(self.points)]}

    def validate(self) -> None:
        """Raise ValueError unless the request has points."""
        if not self.points:
            raise ValueError("maps: Points empty")


@dataclass
class NearestRoadsResponse:
    """The snapped points of a Nearest Roads request."""

    snapped_points: list[SnappedPoint] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> NearestRoadsResponse:
        """Build from a JSON object."""
        return cls(snapped_points=_snapped_points(data or {}))


@dataclass
class SpeedLimitsRequest:
    """A path or a set of place IDs to look up speed limits for."""

    path: list[LatLng] = field(default_factory=list)
    place_id: list[str] = field(default_factory=list)
    units: Union[SpeedLimitUnit, str, None] = None

    def params(self) -> dict[str, list[str]]:
        """Return the query parameters for this request."""
        query: dict[str, list[str]] = {}
        if self.path:
            query["path"] = [_join_path(self.path)]
        if self.place_id:
            query["placeId"] = list(self.place_id)
        if self.units:
            units = self.units
            query["units"] = [units.value if isinstance(units, Enum) else str(units)]
        return query

    def validate(self) -> None:
        """Raise ValueError unless a path or place IDs are given."""
        if not self.path and not self.place_id:
            raise ValueError("maps: Path and PlaceID both empty")


@dataclass
class SpeedLimit:
    """The speed limit of one road segment."""

    place_id: str = ""
    speed_limit: float = 0.0
    units: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> SpeedLimit:
        """Build from a JSON object."""
        data = data or {}
        return cls(
            place_id=data.get("placeId", ""),
            speed_limit=float(data.get("speedLimit", 0.0)),
            units=data.get("units", ""),
        )


@dataclass
class SpeedLimitsResponse:
    """Speed limits and, for path requests, the snapped points."""

    speed_limits: list[SpeedLimit] = field(default_factory=list)
    snapped_points: list[SnappedPoint] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> SpeedLimitsResponse:
        """Build from a JSON object."""
        data = data or {}
        return cls(
            speed_limits=[SpeedLimit.from_dict(item) for item in data.get("speedLimits") or []],
            snapped_points=_snapped_points(data),
        )
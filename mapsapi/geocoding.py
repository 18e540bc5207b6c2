"""Geocoding and reverse geocoding requests and results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Union

from .api import ApiConfig
from .latlng import LatLng, LatLngBounds

GEOCODING_API = ApiConfig(
    host="https://maps.googleapis.com",
    path="/maps/api/geocode/json",
    accepts_client_id=True,
    accepts_signature=False,
)

_ACCEPTED_STATUSES = ("OK", "ZERO_RESULTS")


class GeocodeAccuracy(str, Enum):
    """How precisely a geocoded location is known."""

    ROOFTOP = "ROOFTOP"
    RANGE_INTERPOLATED = "RANGE_INTERPOLATED"
    GEOMETRIC_CENTER = "GEOMETRIC_CENTER"
    APPROXIMATE = "APPROXIMATE"


def _text(value: Union[Enum, str]) -> str:
    return value.value if isinstance(value, Enum) else str(value)


def _raise_for_status(data: Mapping[str, Any]) -> None:
    status = data.get("status", "")
    if status in _ACCEPTED_STATUSES:
        return
    message = data.get("error_message", "")
    detail = f"maps: {status}"
    if message:
        detail += f" - {message}"
    raise RuntimeError(detail)


@dataclass
class GeocodingRequest:
    """Parameters of a geocoding or reverse geocoding request."""

    address: str = ""
    components: dict[Union[str, Enum], str] = field(default_factory=dict)
    bounds: LatLngBounds | None = None
    region: str = ""
    latlng: LatLng | None = None
    result_type: list[str] = field(default_factory=list)
    location_type: list[Union[GeocodeAccuracy, str]] = field(default_factory=list)
    place_id: str = ""
    language: str = ""
    custom: dict[str, list[str]] = field(default_factory=dict)

    def params(self) -> dict[str, list[str]]:
        """Return the query parameters for this request."""
        query = {key: list(values) for key, values in self.custom.items()}
        if self.address:
            query["address"] = [self.address]
        filters = [f"{_text(name)}:{value}" for name, value in self.components.items()]
        if filters:
            query["components"] = ["|".join(filters)]
        if self.bounds is not None:
            query["bounds"] = [str(self.bounds)]
        if self.region:
            query["region"] = [self.region]
        if self.latlng is not None:
            query["latlng"] = [str(self.latlng)]
        if self.result_type:
            query["result_type"] = ["|".join(self.result_type)]
        if self.location_type:
            query["location_type"] = ["|".join(_text(item) for item in self.location_type)]
        if self.place_id:
            query["place_id"] = [self.place_id]
        if self.language:
            query["language"] = [self.language]
        return query

    def validate_geocode(self) -> None:
        """Raise ValueError unless the request can be sent as a forward geocode."""
        if not self.address and not self.components and self.latlng is None:
            raise ValueError("maps: address, components and LatLng are all missing")

    def validate_reverse(self) -> None:
        """Raise ValueError unless the request can be sent as a reverse geocode."""
        if self.latlng is None and not self.place_id:
            raise ValueError("maps: LatLng and PlaceID are both missing")


@dataclass
class AddressComponent:
    """One part of an address."""

    long_name: str = ""
    short_name: str = ""
    types: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> AddressComponent:
        """Build from a JSON object."""
        data = data or {}
        return cls(
            long_name=data.get("long_name", ""),
            short_name=data.get("short_name", ""),
            types=list(data.get("types") or []),
        )


@dataclass
class AddressGeometry:
    """The location and extent of an address."""

    location: LatLng = field(default_factory=LatLng)
    location_type: str = ""
    bounds: LatLngBounds = field(default_factory=LatLngBounds)
    viewport: LatLngBounds = field(default_factory=LatLngBounds)
    types: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> AddressGeometry:
        """Build from a JSON object."""
        data = data or {}
        return cls(
            location=LatLng.from_dict(data.get("location")),
            location_type=data.get("location_type", ""),
            bounds=LatLngBounds.from_dict(data.get("bounds")),
            viewport=LatLngBounds.from_dict(data.get("viewport")),
            types=list(data.get("types") or []),
        )


@dataclass
class AddressPlusCode:
    """An Open Location Code for an address, in global and compound form."""

    global_code: str = ""
    compound_code: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> AddressPlusCode:
        """Build from a JSON object."""
        data = data or {}
        return cls(
            global_code=data.get("global_code", ""),
            compound_code=data.get("compound_code", ""),
        )


@dataclass
class GeocodingResult:
    """A single geocoded address."""

    address_components: list[AddressComponent] = field(default_factory=list)
    formatted_address: str = ""
    geometry: AddressGeometry = field(default_factory=AddressGeometry)
    types: list[str] = field(default_factory=list)
    place_id: str = ""
    partial_match: bool = False
    plus_code: AddressPlusCode = field(default_factory=AddressPlusCode)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> GeocodingResult:
        """Build from a JSON object."""
        data = data or {}
        return cls(
            address_components=[
                AddressComponent.from_dict(item) for item in data.get("address_components") or []
            ],
            formatted_address=data.get("formatted_address", ""),
            geometry=AddressGeometry.from_dict(data.get("geometry")),
            types=list(data.get("types") or []),
            place_id=data.get("place_id", ""),
            partial_match=bool(data.get("partial_match", False)),
            plus_code=AddressPlusCode.from_dict(data.get("plus_code")),
        )


def parse_geocoding_results(data: Mapping[str, Any]) -> list[GeocodingResult]:
    """Return the results of a geocoding response, raising RuntimeError on a failed status."""
    _raise_for_status(data)
    return [GeocodingResult.from_dict(item) for item in data.get("results") or []]
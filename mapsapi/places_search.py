"""Nearby Search and Text Search requests and their results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Union

from .api import ApiConfig
from .geocoding import AddressGeometry
from .latlng import LatLng

PLACES_NEARBY_SEARCH_API = ApiConfig(
    host="https://maps.googleapis.com",
    path="/maps/api/place/nearbysearch/json",
    accepts_client_id=True,
    accepts_signature=False,
)

PLACES_TEXT_SEARCH_API = ApiConfig(
    host="https://maps.googleapis.com",
    path="/maps/api/place/textsearch/json",
    accepts_client_id=True,
)

RANK_BY_DISTANCE = "distance"

_ACCEPTED_STATUSES = ("OK", "ZERO_RESULTS")

Choice = Union[Enum, str]


def _text(value: Choice) -> str:
    return value.value if isinstance(value, Enum) else str(value)


def _raise_for_status(data: Mapping[str, Any]) -> None:
    status = data.get("status")
    if status is None or status in _ACCEPTED_STATUSES:
        return
    message = data.get("error_message", "")
    detail = f"maps: {status}"
    if message:
        detail += f" - {message}"
    raise RuntimeError(detail)


@dataclass
class NearbySearchRequest:
    """Parameters of a Nearby Search request."""

    location: LatLng | None = None
    radius: int = 0
    keyword: str = ""
    language: str = ""
    min_price: Choice = ""
    max_price: Choice = ""
    name: str = ""
    open_now: bool = False
    rank_by: Choice = ""
    type: Choice = ""
    page_token: str = ""

    def params(self) -> dict[str, list[str]]:
        """Return the query parameters for this request."""
        query: dict[str, list[str]] = {}
        if self.location is not None:
            query["location"] = [str(self.location)]
        if self.radius:
            query["radius"] = [str(self.radius)]
        if self.keyword:
            query["keyword"] = [self.keyword]
        if self.language:
            query["language"] = [self.language]
        if self.min_price:
            query["minprice"] = [_text(self.min_price)]
        if self.max_price:
            query["maxprice"] = [_text(self.max_price)]
        if self.name:
            query["name"] = [self.name]
        if self.open_now:
            query["opennow"] = ["true"]
        if self.rank_by:
            query["rankby"] = [_text(self.rank_by)]
        if self.type:
            query["type"] = [_text(self.type)]
        if self.page_token:
            query["pagetoken"] = [self.page_token]
        return query

    def validate(self) -> None:
        """Raise ValueError unless the request can be sent."""
        if self.page_token:
            return
        if self.location is None:
            raise ValueError("maps: Location and PageToken both missing")
        by_distance = bool(self.rank_by) and _text(self.rank_by) == RANK_BY_DISTANCE
        if self.radius == 0 and not by_distance:
            raise ValueError("maps: Radius and PageToken both missing")
        if self.radius > 0 and by_distance:
            raise ValueError("maps: Radius specified with RankByDistance")
        if by_distance and not self.keyword and not self.name and not self.type:
            raise ValueError("maps: RankBy=distance and Keyword, Name and Type are missing")


@dataclass
class TextSearchRequest:
    """Parameters of a Text Search request."""

    query: str = ""
    location: LatLng | None = None
    radius: int = 0
    language: str = ""
    min_price: Choice = ""
    max_price: Choice = ""
    open_now: bool = False
    type: Choice = ""
    page_token: str = ""
    region: str = ""

    def params(self) -> dict[str, list[str]]:
        """Return the query parameters for this request."""
        query: dict[str, list[str]] = {"query": [self.query]}
        if self.location is not None:
            query["location"] = [str(self.location)]
        if self.radius:
            query["radius"] = [str(self.radius)]
        if self.language:
            query["language"] = [self.language]
        if self.min_price:
            query["minprice"] = [_text(self.min_price)]
        if self.max_price:
            query["maxprice"] = [_text(self.max_price)]
        if self.open_now:
            query["opennow"] = ["true"]
        if self.type:
            query["type"] = [_text(self.type)]
        if self.page_token:
            query["pagetoken"] = [self.page_token]
        if self.region:
            query["region"] = [self.region]
        return query

    def validate(self) -> None:
        """Raise ValueError unless the request can be sent."""
        if not self.query and not self.page_token and not self.type:
            raise ValueError("maps: Query, PageToken and Type are all missing")
        if self.location is not None and self.radius == 0:
            raise ValueError("maps: Radius missing, required with Location")


@dataclass
class PlacesSearchResult:
    """A single place found by a search."""

    formatted_address: str = ""
    geometry: AddressGeometry = field(default_factory=AddressGeometry)
    name: str = ""
    icon: str = ""
    place_id: str = ""
    rating: float = 0.0
    user_ratings_total: int = 0
    types: list[str] = field(default_factory=list)
    opening_hours: dict[str, Any] | None = None
    photos: list[dict[str, Any]] = field(default_factory=list)
    price_level: int = 0
    vicinity: str = ""
    permanently_closed: bool = False
    business_status: str = ""
    id: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> PlacesSearchResult:
        """Build from a JSON object."""
        data = data or {}
        hours = data.get("opening_hours")
        return cls(
            formatted_address=data.get("formatted_address", ""),
            geometry=AddressGeometry.from_dict(data.get("geometry")),
            name=data.get("name", ""),
            icon=data.get("icon", ""),
            place_id=data.get("place_id", ""),
            rating=float(data.get("rating", 0.0)),
            user_ratings_total=int(data.get("user_ratings_total", 0)),
            types=list(data.get("types") or []),
            opening_hours=None if hours is None else dict(hours),
            photos=[dict(photo) for photo in data.get("photos") or []],
            price_level=int(data.get("price_level", 0)),
            vicinity=data.get("vicinity", ""),
            permanently_closed=bool(data.get("permanently_closed", False)),
            business_status=data.get("business_status", ""),
            id=data.get("id", ""),
        )


@dataclass
class PlacesSearchResponse:
    """The results of a Nearby or Text Search request."""

    results: list[PlacesSearchResult] = field(default_factory=list)
    html_attributions: list[str] = field(default_factory=list)
    next_page_token: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> PlacesSearchResponse:
        """Build from a JSON response, raising RuntimeError on a failed status."""
        data = data or {}
        _raise_for_status(data)
        return cls(
            results=[PlacesSearchResult.from_dict(item) for item in data.get("results") or []],
            html_attributions=list(data.get("html_attributions") or []),
            next_page_token=data.get("next_page_token", ""),
        )
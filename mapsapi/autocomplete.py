"""Place and query autocomplete requests and predictions."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Union

from .api import ApiConfig
from .latlng import LatLng

PLACES_QUERY_AUTOCOMPLETE_API = ApiConfig(
    host="https://maps.googleapis.com",
    path="/maps/api/place/queryautocomplete/json",
    accepts_client_id=True,
)

PLACES_PLACE_AUTOCOMPLETE_API = ApiConfig(
    host="https://maps.googleapis.com",
    path="/maps/api/place/autocomplete/json",
    accepts_client_id=True,
)

_NIL_UUID = uuid.UUID(int=0)


def _text(value: Union[Enum, str]) -> str:
    return value.value if isinstance(value, Enum) else str(value)


def new_session_token() -> uuid.UUID:
    """Return a new random autocomplete session token."""
    return uuid.uuid4()


@dataclass
class QueryAutocompleteRequest:
    """Parameters of a Query Autocomplete request."""

    input: str = ""
    offset: int = 0
    location: LatLng | None = None
    radius: int = 0
    language: str = ""

    def params(self) -> dict[str, list[str]]:
        """Return the query parameters for this request."""
        query = {"input": [self.input]}
        if self.offset > 0:
            query["offset"] = [str(self.offset)]
        if self.location is not None:
            query["location"] = [str(self.location)]
        if self.radius > 0:
            query["radius"] = [str(self.radius)]
        if self.language:
            query["language"] = [self.language]
        return query

    def validate(self) -> None:
        """Raise ValueError unless input is given."""
        if not self.input:
            raise ValueError("maps: Input missing")


@dataclass
class PlaceAutocompleteRequest:
    """Parameters of a Place Autocomplete request."""

    input: str = ""
    offset: int = 0
    location: LatLng | None = None
    origin: LatLng | None = None
    radius: int = 0
    language: str = ""
    region: str = ""
    types: Union[Enum, str] = ""
    components: dict[Union[Enum, str], list[str]] = field(default_factory=dict)
    strict_bounds: bool = False
    session_token: uuid.UUID | None = None

    def params(self) -> dict[str, list[str]]:
        """Return the query parameters for this request."""
        query = {"input": [self.input]}
        if self.session_token is not None and self.session_token != _NIL_UUID:
            query["sessiontoken"] = [str(self.session_token)]
        if self.offset > 0:
            query["offset"] = [str(self.offset)]
        if self.location is not None:
            query["location"] = [str(self.location)]
        if self.origin is not None:
            query["origin"] = [str(self.origin)]
        if self.radius > 0:
            query["radius"] = [str(self.radius)]
        if self.language:
            query["language"] = [self.language]
        if self.types:
            query["types"] = [_text(self.types)]
        if self.strict_bounds:
            query["strictbounds"] = ["true"]
        filters = [
            "|".join(f"{_text(name)}:{value}" for value in values)
            for name, values in self.components.items()
        ]
        if filters:
            query["components"] = ["|".join(filters)]
        return query

    def validate(self) -> None:
        """Raise ValueError unless input is given."""
        if not self.input:
            raise ValueError("maps: Input missing")


@dataclass
class AutocompleteMatchedSubstring:
    """Where the entered term matched in a prediction."""

    length: int = 0
    offset: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> AutocompleteMatchedSubstring:
        """Build from a JSON object."""
        data = data or {}
        return cls(length=int(data.get("length", 0)), offset=int(data.get("offset", 0)))


@dataclass
class AutocompleteTermOffset:
    """One section of a prediction's description."""

    value: str = ""
    offset: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> AutocompleteTermOffset:
        """Build from a JSON object."""
        data = data or {}
        return cls(value=data.get("value", ""), offset=int(data.get("offset", 0)))


def _substrings(items: Any) -> list[AutocompleteMatchedSubstring]:
    return [AutocompleteMatchedSubstring.from_dict(item) for item in items or []]


@dataclass
class AutocompleteStructuredFormatting:
    """The main and secondary text of a prediction."""

    main_text: str = ""
    main_text_matched_substrings: list[AutocompleteMatchedSubstring] = field(default_factory=list)
    secondary_text: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> AutocompleteStructuredFormatting:
        """Build from a JSON object."""
        data = data or {}
        return cls(
            main_text=data.get("main_text", ""),
            main_text_matched_substrings=_substrings(data.get("main_text_matched_substrings")),
            secondary_text=data.get("secondary_text", ""),
        )


@dataclass
class AutocompletePrediction:
    """A single autocomplete prediction."""

    description: str = ""
    distance_meters: int = 0
    place_id: str = ""
    types: list[str] = field(default_factory=list)
    matched_substrings: list[AutocompleteMatchedSubstring] = field(default_factory=list)
    terms: list[AutocompleteTermOffset] = field(default_factory=list)
    structured_formatting: AutocompleteStructuredFormatting = field(
        default_factory=AutocompleteStructuredFormatting
    )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> AutocompletePrediction:
        """Build from a JSON object."""
        data = data or {}
        return cls(
            description=data.get("description", ""),
            distance_meters=int(data.get("distance_meters", 0)),
            place_id=data.get("place_id", ""),
            types=list(data.get("types") or []),
            matched_substrings=_substrings(data.get("matched_substrings")),
            terms=[AutocompleteTermOffset.from_dict(item) for item in data.get("terms") or []],
            structured_formatting=AutocompleteStructuredFormatting.from_dict(
                data.get("structured_formatting")
            ),
        )


@dataclass
class AutocompleteResponse:
    """The predictions of an autocomplete request."""

    predictions: list[AutocompletePrediction] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> AutocompleteResponse:
        """Build from a JSON object."""
        data = data or {}
        return cls(
            predictions=[AutocompletePrediction.from_dict(item) for item in data.get("predictions") or []]
        )
"""Find Place From Text requests and Place Photo requests."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from io import BytesIO
from typing import Any, Mapping, Union

from PIL import Image

from .api import ApiConfig
from .latlng import LatLng
from .places_search import PlacesSearchResult

FIND_PLACE_FROM_TEXT_API = ApiConfig(
    host="https://maps.googleapis.com",
    path="/maps/api/place/findplacefromtext/json",
    accepts_client_id=False,
)

PLACES_PHOTO_API = ApiConfig(
    host="https://maps.googleapis.com",
    path="/maps/api/place/photo",
    accepts_client_id=True,
)

_ACCEPTED_STATUSES = ("OK", "ZERO_RESULTS")
_HTTP_FORBIDDEN = 403

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


class FindPlaceFromTextInputType(str, Enum):
    """The kind of text a Find Place request searches with."""

    TEXT_QUERY = "textquery"
    PHONE_NUMBER = "phonenumber"


class FindPlaceFromTextLocationBiasType(str, Enum):
    """The kind of location bias applied to a Find Place request."""

    IP = "ipbias"
    POINT = "point"
    CIRCULAR = "circle"
    RECTANGULAR = "rectangle"


def parse_location_bias_type(location_bias: str) -> FindPlaceFromTextLocationBiasType:
    """Parse a location bias name, ignoring case."""
    try:
        return FindPlaceFromTextLocationBiasType(location_bias.lower())
    except ValueError:
        raise ValueError(
            f'Unknown FindPlaceFromTextLocationBiasType "{location_bias}"'
        ) from None


@dataclass
class FindPlaceFromTextRequest:
    """Parameters of a Find Place From Text request."""

    input: str = ""
    input_type: Choice = ""
    fields: list[Choice] = field(default_factory=list)
    language: str = ""
    location_bias: Choice = ""
    location_bias_point: LatLng | None = None
    location_bias_center: LatLng | None = None
    location_bias_radius: int = 0
    location_bias_south_west: LatLng | None = None
    location_bias_north_east: LatLng | None = None

    def _bias(self) -> str:
        return _text(self.location_bias) if self.location_bias else ""

    def params(self) -> dict[str, list[str]]:
        """Return the query parameters for this request."""
        query: dict[str, list[str]] = {
            "input": [self.input],
            "inputtype": [_text(self.input_type) if self.input_type else ""],
        }
        if self.fields:
            query["fields"] = [",".join(_text(item) for item in self.fields)]
        if self.language:
            query["language"] = [self.language]
        bias = self._bias()
        if bias == FindPlaceFromTextLocationBiasType.IP.value:
            query["locationbias"] = ["ipbias"]
        elif bias == FindPlaceFromTextLocationBiasType.POINT.value:
            query["locationbias"] = [f"point:{self.location_bias_point}"]
        elif bias == FindPlaceFromTextLocationBiasType.CIRCULAR.value:
            query["locationbias"] = [
                f"circle:{self.location_bias_radius}@{self.location_bias_center}"
            ]
        elif bias == FindPlaceFromTextLocationBiasType.RECTANGULAR.value:
            query["locationbias"] = [
                f"rectangle:{self.location_bias_south_west}|{self.location_bias_north_east}"
            ]
        return query

    def validate(self) -> None:
        """Raise ValueError unless the request can be sent."""
        if not self.input:
            raise ValueError("maps: Input required")
        if not self.input_type:
            raise ValueError("maps: InputType required")
        bias = self._bias()
        if bias == FindPlaceFromTextLocationBiasType.POINT.value:
            if self.location_bias_point is None:
                raise ValueError(
                    "maps: LocationBiasPoint required when LocationBias set to "
                    "FindPlaceFromTextLocationBiasPoint"
                )
        elif bias == FindPlaceFromTextLocationBiasType.CIRCULAR.value:
            if self.location_bias_center is None or self.location_bias_radius == 0:
                raise ValueError(
                    "maps: LocationBiasCenter and LocationBiasRadius required when "
                    "LocationBias set to FindPlaceFromTextLocationBiasCircle"
                )
        elif bias == FindPlaceFromTextLocationBiasType.RECTANGULAR.value:
            if self.location_bias_south_west is None or self.location_bias_north_east is None:
                raise ValueError(
                    "maps: LocationBiasSouthWest and LocationBiasNorthEast required when "
                    "LocationBias set to FindPlaceFromTextLocationBiasRectangle"
                )


@dataclass
class FindPlaceFromTextResponse:
    """The candidate places of a Find Place From Text request."""

    candidates: list[PlacesSearchResult] = field(default_factory=list)
    html_attributions: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> FindPlaceFromTextResponse:
        """Build from a JSON response, raising RuntimeError on a failed status."""
        data = data or {}
        _raise_for_status(data)
        return cls(
            candidates=[PlacesSearchResult.from_dict(item) for item in data.get("candidates") or []],
            html_attributions=list(data.get("html_attributions") or []),
        )


@dataclass
class PlacePhotoRequest:
    """Parameters of a Place Photo request."""

    photo_reference: str = ""
    max_height: int = 0
    max_width: int = 0

    def params(self) -> dict[str, list[str]]:
        """Return the query parameters for this request."""
        query: dict[str, list[str]] = {"photoreference": [self.photo_reference]}
        if self.max_height > 0:
            query["maxheight"] = [str(self.max_height)]
        if self.max_width > 0:
            query["maxwidth"] = [str(self.max_width)]
        return query

    def validate(self) -> None:
        """Raise ValueError unless a reference and a size limit are given."""
        if not self.photo_reference:
            raise ValueError("maps: PhotoReference missing")
        if self.max_height == 0 and self.max_width == 0:
            raise ValueError("maps: both MaxHeight & MaxWidth missing")


@dataclass
class PlacePhotoResponse:
    """The image data returned for a Place Photo request."""

    content_type: str = ""
    data: bytes = b""

    @classmethod
    def from_http(cls, status_code: int, content_type: str, data: bytes) -> PlacePhotoResponse:
        """Build from an HTTP reply, raising RuntimeError when the quota is exceeded."""
        if status_code == _HTTP_FORBIDDEN:
            raise RuntimeError("maps: request exceeds your available quota")
        return cls(content_type=content_type, data=bytes(data))

    def image(self) -> Image.Image:
        """Decode the data as a JPEG image."""
        if self.content_type != "image/jpeg":
            raise ValueError("Image of unknown format: " + self.content_type)
        with Image.open(BytesIO(self.data), formats=["JPEG"]) as img:
            img.load()
            return img.copy()
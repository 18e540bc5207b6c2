"""Encoded polyline format for lists of coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from .latlng import LatLng

_INT64_MASK = (1 << 64) - 1


def _to_int64(value: int) -> int:
    value &= _INT64_MASK
    return value - (1 << 64) if value >= 1 << 63 else value


def _decode_int(data: Iterator[int]) -> int | None:
    """Read one encoded integer; None when the input runs out."""
    result = 0
    shift = 0
    for raw in data:
        chunk = (raw - 63) & 0xFF
        if shift < 64:
            result = _to_int64(result + ((chunk & 0x1F) << shift))
        shift = (shift + 5) & 0xFF
        if chunk < 0x20:
            negative = result & 1
            result >>= 1
            return ~result if negative else result
    return None


def _encode_int(value: int) -> str:
    value = ~(value << 1) if value < 0 else value << 1
    chars = []
    while value >= 0x20:
        chars.append(chr((0x20 | (value & 0x1F)) + 63))
        value >>= 5
    chars.append(chr(value + 63))
    return "".join(chars)


@dataclass
class Polyline:
    """A path of coordinates in encoded polyline form."""

    points: str = ""

    def decode(self) -> list[LatLng]:
        """Decode the encoded points into coordinates."""
        data = iter(self.points.encode("utf-8"))
        lat = lng = 0
        path: list[LatLng] = []
        while True:
            dlat = _decode_int(data)
            dlng = _decode_int(data)
            if dlng is None:
                return path
            lat, lng = lat + (dlat or 0), lng + dlng
            path.append(LatLng(lat * 1e-5, lng * 1e-5))


def decode_polyline(poly: str) -> list[LatLng]:
    """Decode an encoded polyline string into coordinates."""
    return Polyline(poly).decode()


def encode(path: Iterable[LatLng]) -> str:
    """Encode coordinates as a polyline string."""
    parts = []
    prev_lat = prev_lng = 0
    for point in path:
        lat = int(point.lat * 1e5)
        lng = int(point.lng * 1e5)
        parts.append(_encode_int(lat - prev_lat))
        parts.append(_encode_int(lng - prev_lng))
        prev_lat, prev_lng = lat, lng
    return "".join(parts)
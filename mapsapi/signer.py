"""Request signing with a URL-safe HMAC-SHA1 signature."""

from __future__ import annotations

import base64
import hashlib
import hmac
from typing import Iterable, Mapping, Union
from urllib.parse import quote_plus

ParamValue = Union[str, Iterable[str]]


def generate_signature(key: bytes, message: str) -> str:
    """Return the URL-safe base64 HMAC-SHA1 of message under key."""
    digest = hmac.new(key, message.encode("utf-8"), hashlib.sha1).digest()
    return base64.urlsafe_b64encode(digest).decode("ascii")


def encode_query(params: Mapping[str, ParamValue]) -> str:
    """Encode query parameters sorted by key, keeping the order of repeated values."""
    pairs = []
    for key in sorted(params):
        values = params[key]
        if isinstance(values, str):
            values = [values]
        escaped_key = quote_plus(key, safe="")
        pairs.extend(f"{escaped_key}={quote_plus(value, safe='')}" for value in values)
    return "&".join(pairs)


def sign_url(path: str, signature: bytes, params: Mapping[str, ParamValue]) -> str:
    """Return the encoded query for path with its signature appended."""
    encoded = encode_query(params)
    mac = generate_signature(signature, f"{path}?{encoded}")
    return f"{encoded}&signature={mac}"
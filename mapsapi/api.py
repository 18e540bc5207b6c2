"""Endpoint description for a web service API."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ApiConfig:
    """Where an API lives and which credentials it accepts."""

    host: str
    path: str
    accepts_client_id: bool = False
    accepts_signature: bool = False

    def url(self) -> str:
        """Return the full endpoint URL."""
        return self.host + self.path
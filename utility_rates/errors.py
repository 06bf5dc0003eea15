"""Errors raised while talking to the upstream weather service.

Every failure of a weather fetch is a `WeatherServiceError`, so callers that
only care about "did we get a reading" catch the base class.
"""

from __future__ import annotations


class WeatherServiceError(Exception):
    """Base class for weather fetch failures."""

    def __init__(self, message: str, city: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.city = city


class TransportError(WeatherServiceError):
    """Connection refused, DNS failure, timeout or other network-level error."""


class InvalidResponseError(WeatherServiceError):
    """Upstream body is not JSON or does not describe a weather reading."""


class UpstreamReportedError(WeatherServiceError):
    """Upstream answered with an explicit ``error`` field."""

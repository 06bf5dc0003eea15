from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol
from urllib.parse import quote

import requests
import structlog
from pydantic import ValidationError

from ..errors import InvalidResponseError, TransportError, UpstreamReportedError
from ..schemas.weather import WeatherReading


logger = structlog.get_logger()


class WeatherClient(Protocol):
    """Source of current weather readings, keyed by city."""

    def fetch(self, city: str) -> WeatherReading:
        """Fetch the current reading for `city`.

        Raises
        ------
        TransportError
            The request never produced a response (connection refused, DNS, timeout).
        InvalidResponseError
            The body is not JSON or does not describe a weather reading.
        UpstreamReportedError
            The body carries an explicit ``error`` field.
        """
        ...


@dataclass
class HttpWeatherClient:
    """`WeatherClient` backed by the weather service REST API.

    Notes:
    - One GET per call to ``<base_url>/api/weather/<city>``; no retries.
    - The body is interpreted regardless of HTTP status: an ``error`` field wins
      over the status code, so a 404 with ``{"error": "..."}`` becomes an
      `UpstreamReportedError`.
    - The city is percent-encoded as a single path segment and not otherwise
      validated.
    """

    base_url: str = "http://weather-service:3001"
    timeout_s: Optional[float] = None

    def _session(self) -> requests.Session:
        return requests.Session()

    def _url(self, city: str) -> str:
        return f"{self.base_url.rstrip('/')}/api/weather/{quote(city, safe='')}"

    def fetch(self, city: str) -> WeatherReading:
        url = self._url(city)
        logger.debug("weather_fetch", city=city, url=url)

        try:
            with self._session() as s:
                resp = s.get(url, timeout=self.timeout_s)
        except requests.RequestException as e:
            raise TransportError(str(e), city=city) from e

        try:
            body = resp.json()
        except ValueError as e:
            raise InvalidResponseError(f"Invalid JSON from weather service: {e}", city=city) from e

        if not isinstance(body, dict):
            raise InvalidResponseError("Weather service returned a non-object body", city=city)
        if body.get("error") is not None:
            raise UpstreamReportedError(str(body["error"]), city=city)

        try:
            return WeatherReading.model_validate({"city": city, **body})
        except ValidationError as e:
            raise InvalidResponseError(
                f"Malformed weather reading: {e.error_count()} invalid field(s)", city=city
            ) from e

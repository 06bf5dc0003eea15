# Ensure repo root is on sys.path for absolute imports like `utility_rates.services.*`
import sys
import os

import pytest

REPO_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from utility_rates.errors import UpstreamReportedError  # noqa: E402
from utility_rates.schemas.weather import WeatherReading  # noqa: E402


class StubWeatherClient:
    """Serves canned readings; cities mapped to an exception raise it."""

    def __init__(self, readings):
        self.readings = readings
        self.calls = []

    def fetch(self, city):
        self.calls.append(city)
        outcome = self.readings.get(city)
        if outcome is None:
            raise UpstreamReportedError("not found", city=city)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def reading(city="new-york", temperature=70.0, conditions="clear", humidity=50.0):
    return WeatherReading(city=city, temperature=temperature, conditions=conditions, humidity=humidity)


@pytest.fixture
def stub_client():
    return StubWeatherClient({
        "new-york": reading("new-york", 90, "sunny", 20),
        "london": reading("london", 70, "cloudy, light rain", 60),
        "tokyo": reading("tokyo", 25, "clear", 50),
        "sydney": reading("sydney", 78, "partly cloudy", 55),
        "paris": reading("paris", 45, "overcast", 80),
    })

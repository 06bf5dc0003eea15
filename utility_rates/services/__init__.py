"""Services for the utility rates API.

- weather_client: fetches readings from the upstream weather service.
- rate_calculator: derives adjusted utility rates from a reading.
- quote_service: composes the two per request.
"""

from .quote_service import QuoteService
from .rate_calculator import RateCalculator, RateRule, UtilityRules
from .weather_client import HttpWeatherClient, WeatherClient

__all__ = [
    "QuoteService",
    "RateCalculator",
    "RateRule",
    "UtilityRules",
    "HttpWeatherClient",
    "WeatherClient",
]

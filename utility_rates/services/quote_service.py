from datetime import datetime, timezone
from typing import List, Sequence

import structlog

from ..errors import WeatherServiceError
from ..schemas.rates import AllRatesResponse, BaseRateTable, CityRateQuote
from ..schemas.weather import WeatherSummary
from .rate_calculator import RateCalculator
from .weather_client import WeatherClient


logger = structlog.get_logger()


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class QuoteService:
    def __init__(self, weather_client: WeatherClient, calculator: RateCalculator, cities: Sequence[str]):
        self.weather_client = weather_client
        self.calculator = calculator
        self.cities = tuple(cities)

    def base_rates(self) -> BaseRateTable:
        return self.calculator.base_rates

    def quote_for_city(self, city: str) -> CityRateQuote:
        """Fetch the weather for `city` and price every utility against it.

        Weather failures propagate as `WeatherServiceError`.
        """
        reading = self.weather_client.fetch(city)
        return CityRateQuote(
            city=reading.city,
            weather=WeatherSummary(
                temperature=reading.temperature,
                conditions=reading.conditions,
                humidity=reading.humidity,
            ),
            rates=self.calculator.calculate(reading),
            generated_at=_now_iso(),
        )

    def quote_all(self) -> AllRatesResponse:
        # Sequential; a failing city is dropped from the response and only logged
        quotes: List[CityRateQuote] = []
        for city in self.cities:
            try:
                quotes.append(self.quote_for_city(city))
            except WeatherServiceError as e:
                logger.warning("rates_city_skipped", city=city, error=str(e), error_type=type(e).__name__)
        return AllRatesResponse(quotes=quotes, generated_at=_now_iso())

from .health import StatusResponse
from .rates import (
    AllRatesResponse,
    BaseRate,
    BaseRateTable,
    CityRateQuote,
    Utility,
    UtilityRateQuote,
)
from .weather import WeatherReading, WeatherSummary

__all__ = [
    "StatusResponse",
    "AllRatesResponse",
    "BaseRate",
    "BaseRateTable",
    "CityRateQuote",
    "Utility",
    "UtilityRateQuote",
    "WeatherReading",
    "WeatherSummary",
]

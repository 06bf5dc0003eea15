from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .weather import WeatherSummary


class Utility(str, Enum):
    ELECTRICITY = "Electricity"
    NATURAL_GAS = "Natural Gas"
    WATER = "Water"
    SOLAR_BUYBACK = "Solar Buyback"


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BaseRate(CamelModel):
    model_config = ConfigDict(frozen=True)

    rate: float = Field(..., ge=0)
    unit: str


class BaseRateTable(CamelModel):
    """Unadjusted price per unit for each utility. Read-only for the process lifetime."""

    model_config = ConfigDict(frozen=True)

    electricity: BaseRate = BaseRate(rate=0.12, unit="kWh")
    natural_gas: BaseRate = BaseRate(rate=1.05, unit="therm")
    water: BaseRate = BaseRate(rate=0.004, unit="gallon")
    solar: BaseRate = BaseRate(rate=0.08, unit="kWh")


class UtilityRateQuote(CamelModel):
    utility: Utility
    base_rate: float
    unit: str
    weather_adjustment: float
    adjusted_rate: float
    reason: str


class CityRateQuote(CamelModel):
    city: str
    weather: WeatherSummary
    rates: List[UtilityRateQuote]
    generated_at: str
    valid_for: str = "1 hour"

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "city": "new-york",
                    "weather": {"temperature": 90, "conditions": "sunny", "humidity": 20},
                    "rates": [
                        {
                            "utility": "Electricity",
                            "baseRate": 0.12,
                            "unit": "kWh",
                            "weatherAdjustment": 0.04,
                            "adjustedRate": 0.16,
                            "reason": "High cooling demand due to heat",
                        }
                    ],
                    "generatedAt": "2026-01-21T19:00:00+00:00",
                    "validFor": "1 hour",
                }
            ]
        }
    }


class AllRatesResponse(CamelModel):
    quotes: List[CityRateQuote]
    generated_at: str

"""Weather-driven utility rate adjustments.

Each utility has an ordered list of rules; the first rule whose predicate
matches the reading supplies the adjustment, otherwise the rate is unchanged.
Rule order is part of the observable behaviour: "cloudy, light rain" hits the
solar cloud rule before the rain rule, while water only looks for rain.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, List, Optional, Tuple

from ..schemas.rates import BaseRateTable, Utility, UtilityRateQuote
from ..schemas.weather import WeatherReading


Predicate = Callable[[WeatherReading], bool]


def _mentions(*words: str) -> Predicate:
    def check(reading: WeatherReading) -> bool:
        conditions = reading.conditions.lower()
        return any(w in conditions for w in words)

    return check


@dataclass(frozen=True)
class RateRule:
    applies: Predicate
    adjustment: Decimal
    reason: str


@dataclass(frozen=True)
class UtilityRules:
    utility: Utility
    # attribute of BaseRateTable holding this utility's base rate
    rate_key: str
    # decimals kept in adjustedRate
    precision: int
    rules: Tuple[RateRule, ...]
    default_reason: str = "Standard rate"

    def select(self, reading: WeatherReading) -> Tuple[Decimal, str]:
        for rule in self.rules:
            if rule.applies(reading):
                return rule.adjustment, rule.reason
        return Decimal("0"), self.default_reason


ELECTRICITY_RULES = UtilityRules(
    utility=Utility.ELECTRICITY,
    rate_key="electricity",
    precision=3,
    rules=(
        RateRule(lambda r: r.temperature > 85, Decimal("0.04"), "High cooling demand due to heat"),
        RateRule(lambda r: r.temperature < 40, Decimal("0.03"), "Increased heating demand"),
        RateRule(lambda r: 65 <= r.temperature <= 75, Decimal("-0.02"), "Low HVAC demand - mild weather"),
    ),
)

NATURAL_GAS_RULES = UtilityRules(
    utility=Utility.NATURAL_GAS,
    rate_key="natural_gas",
    precision=2,
    rules=(
        RateRule(lambda r: r.temperature < 32, Decimal("0.45"), "Peak heating season - extreme cold"),
        RateRule(lambda r: r.temperature < 50, Decimal("0.25"), "Heating demand increased"),
        RateRule(lambda r: r.temperature > 80, Decimal("-0.15"), "Reduced heating demand"),
    ),
)

WATER_RULES = UtilityRules(
    utility=Utility.WATER,
    rate_key="water",
    precision=4,
    rules=(
        RateRule(lambda r: r.humidity < 30 and r.temperature > 80, Decimal("0.002"), "Drought surcharge"),
        RateRule(_mentions("rain"), Decimal("-0.001"), "Reduced irrigation demand"),
    ),
)

SOLAR_BUYBACK_RULES = UtilityRules(
    utility=Utility.SOLAR_BUYBACK,
    rate_key="solar",
    precision=3,
    rules=(
        RateRule(_mentions("sunny", "clear"), Decimal("0.03"), "Peak solar production"),
        RateRule(_mentions("cloud", "overcast"), Decimal("-0.02"), "Reduced solar output"),
        RateRule(_mentions("rain", "storm"), Decimal("-0.04"), "Minimal solar production"),
    ),
    default_reason="Standard buyback rate",
)

DEFAULT_RULES: Tuple[UtilityRules, ...] = (
    ELECTRICITY_RULES,
    NATURAL_GAS_RULES,
    WATER_RULES,
    SOLAR_BUYBACK_RULES,
)


def _round(value: Decimal, precision: int) -> Decimal:
    return value.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP)


class RateCalculator:
    """Pure mapping from a weather reading to the four adjusted utility rates."""

    def __init__(
        self,
        base_rates: Optional[BaseRateTable] = None,
        rules: Tuple[UtilityRules, ...] = DEFAULT_RULES,
    ):
        self.base_rates = base_rates or BaseRateTable()
        self.rules = rules

    def calculate(self, reading: WeatherReading) -> List[UtilityRateQuote]:
        if not (math.isfinite(reading.temperature) and math.isfinite(reading.humidity)):
            raise ValueError(f"Non-finite weather reading for {reading.city!r}")

        quotes = []
        for utility_rules in self.rules:
            base = getattr(self.base_rates, utility_rules.rate_key)
            adjustment, reason = utility_rules.select(reading)
            adjusted = _round(Decimal(str(base.rate)) + adjustment, utility_rules.precision)
            quotes.append(UtilityRateQuote(
                utility=utility_rules.utility,
                base_rate=base.rate,
                unit=base.unit,
                weather_adjustment=float(adjustment),
                adjusted_rate=float(adjusted),
                reason=reason,
            ))
        return quotes

from fastapi import APIRouter, Request

import structlog
from ...schemas.rates import AllRatesResponse, BaseRateTable, CityRateQuote

router = APIRouter()
logger = structlog.get_logger()


@router.get(
    "/base",
    response_model=BaseRateTable,
    summary="Unadjusted base rates",
    responses={
        200: {
            "description": "Base price per unit for each utility",
            "content": {
                "application/json": {
                    "example": {
                        "electricity": {"rate": 0.12, "unit": "kWh"},
                        "naturalGas": {"rate": 1.05, "unit": "therm"},
                        "water": {"rate": 0.004, "unit": "gallon"},
                        "solar": {"rate": 0.08, "unit": "kWh"},
                    }
                }
            },
        }
    },
)
def base_rates(request: Request) -> BaseRateTable:
    return request.app.state.quote_service.base_rates()


@router.get(
    "/{city}",
    response_model=CityRateQuote,
    summary="Weather-adjusted rates for a city",
    responses={
        404: {
            "description": "Weather data could not be fetched",
            "content": {
                "application/json": {
                    "example": {"error": "Failed to fetch weather data", "message": "not found"}
                }
            },
        },
    },
)
def city_rates(request: Request, city: str) -> CityRateQuote:
    # WeatherServiceError is turned into a 404 by the app's exception handler
    quote = request.app.state.quote_service.quote_for_city(city)
    logger.info("rates_quoted", city=city)
    return quote


@router.get(
    "",
    response_model=AllRatesResponse,
    summary="Weather-adjusted rates for every configured city",
    description="Cities whose weather cannot be fetched are left out of the response.",
)
def all_rates(request: Request) -> AllRatesResponse:
    out = request.app.state.quote_service.quote_all()
    logger.info("rates_aggregated", quoted=len(out.quotes), cities=len(request.app.state.quote_service.cities))
    return out

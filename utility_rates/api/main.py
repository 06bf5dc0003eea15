from typing import Optional

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..config import AppSettings
from ..errors import WeatherServiceError
from ..logging import init_logging
from ..schemas.rates import BaseRateTable
from ..services.quote_service import QuoteService
from ..services.rate_calculator import RateCalculator
from ..services.weather_client import HttpWeatherClient, WeatherClient
from .middleware import (
    RequestIDMiddleware,
    http_exception_handler,
    weather_error_handler,
)
from .routes import health, rates


def create_app(
    settings: Optional[AppSettings] = None,
    weather_client: Optional[WeatherClient] = None,
    base_rates: Optional[BaseRateTable] = None,
) -> FastAPI:
    settings = settings or AppSettings()
    init_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        openapi_tags=[
            {"name": "health", "description": "Liveness and readiness checks"},
            {"name": "rates", "description": "Weather-adjusted utility rates"},
        ],
    )

    app.add_middleware(RequestIDMiddleware)
    app.add_exception_handler(WeatherServiceError, weather_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    app.include_router(health.router, tags=["health"])
    app.include_router(rates.router, prefix="/api/rates", tags=["rates"])

    app.state.settings = settings
    weather_client = weather_client or HttpWeatherClient(
        base_url=settings.weather_service_url,
        timeout_s=settings.weather_timeout_s,
    )
    app.state.quote_service = QuoteService(
        weather_client=weather_client,
        calculator=RateCalculator(base_rates),
        cities=settings.rate_cities,
    )

    return app


if __name__ == "__main__":
    import structlog
    import uvicorn

    s = AppSettings()
    app = create_app(s)
    structlog.get_logger().info("service_started", app_name=s.app_name, port=s.port)
    uvicorn.run(app, host=s.host, port=s.port)

from typing import Optional

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from utility_rates.api.middleware import RequestIDMiddleware, http_exception_handler
from utility_rates.api.routes import health
from utility_rates.logging import init_logging

from ..catalogue import QuoteCatalogue
from ..config import QuotesSettings
from .routes import quotes


def create_app(settings: Optional[QuotesSettings] = None, catalogue: Optional[QuoteCatalogue] = None) -> FastAPI:
    settings = settings or QuotesSettings()
    init_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        openapi_tags=[
            {"name": "health", "description": "Liveness and readiness checks"},
            {"name": "quotes", "description": "Static quote lookup"},
        ],
    )

    app.add_middleware(RequestIDMiddleware)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    app.include_router(health.router, tags=["health"])
    app.include_router(quotes.router, prefix="/api/quotes", tags=["quotes"])

    app.state.settings = settings
    app.state.catalogue = catalogue or QuoteCatalogue()

    return app


if __name__ == "__main__":
    import structlog
    import uvicorn

    s = QuotesSettings()
    app = create_app(s)
    structlog.get_logger().info("service_started", app_name=s.app_name, port=s.port)
    uvicorn.run(app, host=s.host, port=s.port)

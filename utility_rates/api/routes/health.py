from fastapi import APIRouter, Request

import structlog
from ...schemas.health import StatusResponse

router = APIRouter()
logger = structlog.get_logger()


@router.get(
    "/health",
    response_model=StatusResponse,
    summary="Liveness",
    responses={
        200: {
            "description": "Service is up",
            "content": {"application/json": {"example": {"status": "healthy"}}},
        }
    },
)
def health(request: Request) -> StatusResponse:
    logger.debug("health_check", env=request.app.state.settings.app_env)
    return StatusResponse(status="healthy")


@router.get("/ready", response_model=StatusResponse, summary="Readiness")
def ready() -> StatusResponse:
    return StatusResponse(status="ready")

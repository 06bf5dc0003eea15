from __future__ import annotations

import re
import time
import uuid
from http import HTTPStatus
from typing import Optional

import structlog
from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..errors import WeatherServiceError

log = structlog.get_logger()

REQUEST_ID_HEADER = b"x-request-id"
_VALID_REQUEST_ID = re.compile(r"[A-Za-z0-9._-]{1,64}")


class RequestIDMiddleware:
    """Tags each HTTP request with an id returned in ``x-request-id``.

    A well-formed id sent by the caller is reused, otherwise a fresh one is
    generated. The id is bound into structlog's context for the whole request,
    so every event logged while handling it carries ``request_id``.

    Exceptions that reach this layer are answered here with a JSON 500, which
    keeps the header on error responses too.
    """

    def __init__(self, app):
        self.app = app

    @staticmethod
    def _caller_id(scope) -> Optional[str]:
        for name, value in scope.get("headers") or ():
            if name == REQUEST_ID_HEADER:
                candidate = value.decode("latin-1")
                if _VALID_REQUEST_ID.fullmatch(candidate):
                    return candidate
        return None

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = self._caller_id(scope) or uuid.uuid4().hex
        scope.setdefault("state", {})["request_id"] = request_id
        status_code = 500
        response_started = False
        start = time.perf_counter()

        async def send_with_id(message):
            nonlocal status_code, response_started
            if message["type"] == "http.response.start":
                response_started = True
                status_code = message["status"]
                message.setdefault("headers", []).append((REQUEST_ID_HEADER, request_id.encode()))
            await send(message)

        with structlog.contextvars.bound_contextvars(request_id=request_id):
            try:
                await self.app(scope, receive, send_with_id)
            except Exception as exc:
                log.exception("unhandled_error", error=str(exc), path=scope.get("path", ""))
                if response_started:
                    raise
                body = {"error": "Internal server error", "message": str(exc)}
                await JSONResponse(status_code=500, content=body)(scope, receive, send_with_id)
            finally:
                log.info(
                    "request_completed",
                    method=scope.get("method", ""),
                    path=scope.get("path", ""),
                    status_code=status_code,
                    duration_ms=int((time.perf_counter() - start) * 1000),
                )


async def weather_error_handler(request: Request, exc: WeatherServiceError) -> JSONResponse:
    log.warning(
        "weather_fetch_failed",
        city=exc.city,
        error=exc.message,
        error_type=type(exc).__name__,
    )
    body = {"error": "Failed to fetch weather data", "message": exc.message}
    return JSONResponse(status_code=404, content=body)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    try:
        phrase = HTTPStatus(exc.status_code).phrase
    except ValueError:
        phrase = "HTTP error"
    body = {"error": phrase, "message": str(exc.detail)}
    return JSONResponse(status_code=exc.status_code, content=body, headers=getattr(exc, "headers", None))

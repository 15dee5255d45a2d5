"""
Exception handlers rendering every failure as ``{success: false, message}``.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from nimbus_tracker.core.errors import TrackingError
from nimbus_tracker.schemas import ErrorResponse

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the JSON error envelope."""
    body = ErrorResponse(message=message)
    return JSONResponse(status_code=int(status_code), content=body.model_dump())


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the handlers on ``app``."""

    @app.exception_handler(TrackingError)
    async def tracking_error_handler(request: Request, exc: TrackingError) -> JSONResponse:
        logger.warning(
            "%s on %s %s: %s (status=%s)",
            exc.__class__.__name__,
            request.method,
            request.url.path,
            exc.message,
            int(exc.status_code),
        )
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        message = exc.detail if isinstance(exc.detail, str) else "Request failed"
        return error_response(exc.status_code, message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return error_response(422, "Invalid request")

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled exception on %s %s", request.method, request.url.path
        )
        return error_response(500, "Internal server error")


__all__ = ["error_response", "setup_exception_handlers"]

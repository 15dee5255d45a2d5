"""
FastAPI application entrypoint for the NimbusPost tracking proxy.
"""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from nimbus_tracker.api.errors import setup_exception_handlers
from nimbus_tracker.api.routes import router as api_router
from nimbus_tracker.core.config import AppSettings, get_settings
from nimbus_tracker.core.logging import configure_logging

logger = logging.getLogger(__name__)

LIVENESS_MESSAGE = "NimbusPost Tracking API Backend is LIVE"


def _load_settings() -> AppSettings:
    """Load settings, exiting the process when required values are missing."""
    try:
        return get_settings()
    except ValidationError as exc:
        configure_logging()
        missing = sorted(
            str(error["loc"][-1]) for error in exc.errors() if error["type"] == "missing"
        )
        logger.error(
            "Invalid configuration (missing: %s); server cannot start",
            ", ".join(missing) or "none",
        )
        raise SystemExit(1) from exc


def create_app() -> FastAPI:
    """Factory for the FastAPI application."""
    settings = _load_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="NimbusPost Tracking API",
        version="0.1.0",
        description="Shipment tracking proxy in front of the NimbusPost API.",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    setup_exception_handlers(app)
    app.include_router(api_router, prefix="/api")

    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        """Plain-text liveness probe."""
        return LIVENESS_MESSAGE

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    settings = get_settings()
    logger.info("Server running at http://%s:%s", settings.host, settings.port)
    logger.info("Health check: http://%s:%s/api/health", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


__all__ = ["LIVENESS_MESSAGE", "app", "create_app", "run"]


if __name__ == "__main__":
    run()

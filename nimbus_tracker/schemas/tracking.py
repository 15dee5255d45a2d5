"""Response envelopes returned by the tracking API."""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, Field


class TrackingResponse(BaseModel):
    """Successful tracking lookup."""

    success: bool = True
    data: Dict[str, Any] = Field(
        ...,
        description="NimbusPost tracking payload merged with order details.",
    )


class HealthResponse(BaseModel):
    """Liveness payload for monitoring."""

    success: bool = True
    message: str = "Backend is running"


class ErrorResponse(BaseModel):
    """Uniform body for every failed request."""

    success: bool = False
    message: str


__all__ = ["ErrorResponse", "HealthResponse", "TrackingResponse"]

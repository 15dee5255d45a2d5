"""Public schema exports."""

from .tracking import ErrorResponse, HealthResponse, TrackingResponse

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "TrackingResponse",
]

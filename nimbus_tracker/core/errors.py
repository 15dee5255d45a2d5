"""
Error taxonomy for tracking lookups and the upstream status translation table.

Every error carries the HTTP status and the message shown to API callers, so the
exception handlers only need to render them.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Any, Optional


class TrackingError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR
    default_message: str = "Failed to fetch tracking information"

    def __init__(
        self, message: Optional[str] = None, *, status_code: Optional[int] = None
    ) -> None:
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(TrackingError):
    """The AWB supplied by the caller was rejected before any remote call."""

    status_code = HTTPStatus.BAD_REQUEST
    default_message = "Invalid AWB number (too short)"


class AuthenticationError(TrackingError):
    """Login failed, or NimbusPost rejected the bearer token."""

    status_code = HTTPStatus.UNAUTHORIZED
    default_message = "Authentication failed"


class NotFoundError(TrackingError):
    """NimbusPost answered but had nothing for the requested shipment."""

    status_code = HTTPStatus.NOT_FOUND
    default_message = "No tracking data found for this AWB number"


class UpstreamError(TrackingError):
    """Any other non-2xx answer from NimbusPost."""


class InternalError(TrackingError):
    """No response was received from NimbusPost."""

    @classmethod
    def from_exception(cls, exc: BaseException) -> "InternalError":
        return cls(f"Internal server error: {str(exc) or exc.__class__.__name__}")


def upstream_message(payload: Any) -> Optional[str]:
    """Extract the human readable message from an upstream error body."""
    if isinstance(payload, dict):
        message = payload.get("message")
        if isinstance(message, str) and message.strip():
            return message
    return None


def _mentions_missing_authorization(message: Optional[str]) -> bool:
    if not message:
        return False
    lowered = message.lower()
    return "authorization" in lowered and "missing" in lowered


def translate_upstream_error(status_code: Optional[int], payload: Any) -> TrackingError:
    """Map a non-2xx NimbusPost response onto the caller-facing error."""
    message = upstream_message(payload)

    if status_code == HTTPStatus.BAD_REQUEST:
        if _mentions_missing_authorization(message):
            return AuthenticationError(
                "Authorization missing or invalid",
                status_code=HTTPStatus.BAD_REQUEST,
            )
        return UpstreamError(message or "Bad request", status_code=HTTPStatus.BAD_REQUEST)
    if status_code == HTTPStatus.UNAUTHORIZED:
        return AuthenticationError()
    if status_code == HTTPStatus.FORBIDDEN:
        return UpstreamError("Access forbidden", status_code=HTTPStatus.FORBIDDEN)
    if status_code == HTTPStatus.NOT_FOUND:
        return NotFoundError("Not found")
    return UpstreamError(
        message,
        status_code=status_code or HTTPStatus.INTERNAL_SERVER_ERROR,
    )


__all__ = [
    "AuthenticationError",
    "InternalError",
    "NotFoundError",
    "TrackingError",
    "UpstreamError",
    "ValidationError",
    "translate_upstream_error",
    "upstream_message",
]

"""Service layer exports."""

from .token_cache import TokenCache
from .tracking import TrackingService

__all__ = [
    "TokenCache",
    "TrackingService",
]

"""
Factory functions to provide shared clients and services as FastAPI dependencies.
"""

from functools import lru_cache

from nimbus_tracker.clients import NimbusPostClient
from nimbus_tracker.services import TokenCache, TrackingService

from .config import get_app_settings


@lru_cache()
def get_nimbuspost_client() -> NimbusPostClient:
    """Create a singleton NimbusPost API client."""
    return NimbusPostClient(get_app_settings().nimbus)


@lru_cache()
def get_token_cache() -> TokenCache:
    """Provide the process-wide NimbusPost token cache."""
    return TokenCache(get_nimbuspost_client())


def get_tracking_service() -> TrackingService:
    """Build a tracking service around the shared client and token cache."""
    return TrackingService(
        client=get_nimbuspost_client(),
        token_cache=get_token_cache(),
        retry_on_unauthorized=get_app_settings().nimbus.retry_on_unauthorized,
    )


__all__ = [
    "get_nimbuspost_client",
    "get_token_cache",
    "get_tracking_service",
]

"""Expose dependency helpers for FastAPI routers."""

from .clients import get_nimbuspost_client, get_token_cache, get_tracking_service
from .config import get_app_settings

__all__ = [
    "get_app_settings",
    "get_nimbuspost_client",
    "get_token_cache",
    "get_tracking_service",
]

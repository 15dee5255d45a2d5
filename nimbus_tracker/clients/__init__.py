"""Expose constructed client wrappers."""

from .nimbuspost import NimbusPostAPIError, NimbusPostClient

__all__ = [
    "NimbusPostAPIError",
    "NimbusPostClient",
]

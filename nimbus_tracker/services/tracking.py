"""
Tracking lookups combining NimbusPost shipment and order data.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any, Dict

import httpx

from nimbus_tracker.clients.nimbuspost import NimbusPostAPIError, NimbusPostClient
from nimbus_tracker.core.errors import (
    AuthenticationError,
    InternalError,
    NotFoundError,
    ValidationError,
    translate_upstream_error,
)
from nimbus_tracker.services.token_cache import TokenCache

logger = logging.getLogger(__name__)

MIN_AWB_LENGTH = 5


def default_enrichment() -> Dict[str, Any]:
    """Placeholder order details used when the order lookup yields nothing."""
    return {
        "customer_name": "N/A",
        "customer_address": "N/A",
        "product_name": "N/A",
        "product_details": [],
    }


class TrackingService:
    """Resolve an AWB into tracking data enriched with order details."""

    def __init__(
        self,
        client: NimbusPostClient,
        token_cache: TokenCache,
        *,
        retry_on_unauthorized: bool = False,
    ) -> None:
        self._client = client
        self._tokens = token_cache
        self._retry_on_unauthorized = retry_on_unauthorized

    async def track(self, awb: str) -> Dict[str, Any]:
        """Return the tracking payload for ``awb`` merged with order details."""
        if not awb or len(awb) < MIN_AWB_LENGTH:
            raise ValidationError()

        token = await self._tokens.acquire_token()
        try:
            payload = await self._track_with_token(awb, token)
        except AuthenticationError as exc:
            if not self._retry_on_unauthorized or exc.status_code != HTTPStatus.UNAUTHORIZED:
                raise
            logger.info("Retrying tracking lookup for %s with a fresh token", awb)
            token = await self._tokens.acquire_token()
            payload = await self._track_with_token(awb, token)

        data = payload.get("data")
        if not payload.get("status") or not isinstance(data, dict) or not data.get("order_id"):
            raise NotFoundError()

        enrichment = await self.fetch_enrichment(data["order_id"], token=token)
        return {**data, **enrichment}

    async def fetch_enrichment(self, order_id: Any, *, token: str) -> Dict[str, Any]:
        """Look up order details; never raises, falling back to placeholders."""
        result = default_enrichment()
        try:
            payload = await self._client.fetch_order(order_id, token=token)
        except Exception as exc:
            logger.warning("Could not fetch order details for %s: %s", order_id, exc)
            return result

        order = payload.get("data")
        if not payload.get("status") or not isinstance(order, dict):
            logger.warning("Order lookup for %s returned no data", order_id)
            return result

        for field in result:
            if order.get(field):
                result[field] = order[field]
        return result

    async def _track_with_token(self, awb: str, token: str) -> Dict[str, Any]:
        try:
            return await self._client.track_shipment(awb, token=token)
        except NimbusPostAPIError as exc:
            error = translate_upstream_error(exc.status_code, exc.payload)
            logger.warning(
                "NimbusPost tracking for %s failed with HTTP %s: %s",
                awb,
                exc.status_code,
                error.message,
            )
            if isinstance(error, AuthenticationError):
                self._tokens.invalidate()
            raise error from exc
        except httpx.RequestError as exc:
            logger.error("NimbusPost tracking request for %s failed: %s", awb, exc)
            raise InternalError.from_exception(exc) from exc


__all__ = ["MIN_AWB_LENGTH", "TrackingService", "default_enrichment"]

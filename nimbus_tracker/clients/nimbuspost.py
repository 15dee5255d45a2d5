"""
Thin async client for the NimbusPost REST API.

Only the three endpoints the tracking proxy needs are wrapped. Non-2xx answers
raise :class:`NimbusPostAPIError`; transport failures surface as
``httpx.RequestError`` so callers can tell "no response" apart from "bad
response".
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from nimbus_tracker.core.config import NimbusSettings

logger = logging.getLogger(__name__)


class NimbusPostAPIError(Exception):
    """Raised when NimbusPost answers with a non-2xx status."""

    def __init__(self, status_code: int, payload: Any) -> None:
        self.status_code = status_code
        self.payload = payload
        super().__init__(f"NimbusPost responded with HTTP {status_code}")


class NimbusPostClient:
    """Issue login, shipment tracking and order lookup calls."""

    def __init__(
        self,
        settings: NimbusSettings,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._settings = settings
        self._base_url = settings.base_url.rstrip("/")
        self._transport = transport

    async def login(self) -> Dict[str, Any]:
        """Exchange the service credentials for a bearer token payload."""
        payload = {
            "email": self._settings.email,
            "password": self._settings.password.get_secret_value(),
        }
        return await self._request("POST", "/users/login", json=payload)

    async def track_shipment(self, awb: str, *, token: str) -> Dict[str, Any]:
        """Fetch tracking details for an air waybill."""
        return await self._request("GET", f"/shipments/track/{awb}", token=token)

    async def fetch_order(self, order_id: Any, *, token: str) -> Dict[str, Any]:
        """Fetch customer and product details for an order."""
        return await self._request("GET", f"/orders/{order_id}", token=token)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        token: Optional[str] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"

        url = f"{self._base_url}{path}"
        logger.info("Requesting NimbusPost %s %s", method, path)
        async with httpx.AsyncClient(
            timeout=self._settings.timeout_seconds,
            transport=self._transport,
        ) as client:
            response = await client.request(method, url, headers=headers, json=json)

        body = self._decode(response)
        if not response.is_success:
            raise NimbusPostAPIError(response.status_code, body)
        return body

    @staticmethod
    def _decode(response: httpx.Response) -> Dict[str, Any]:
        """Return the JSON object body, or an empty dict when there is none."""
        try:
            body = response.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {}


__all__ = ["NimbusPostAPIError", "NimbusPostClient"]

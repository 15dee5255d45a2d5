"""
Process-wide cache for the NimbusPost bearer token.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import httpx

from nimbus_tracker.clients.nimbuspost import NimbusPostAPIError, NimbusPostClient
from nimbus_tracker.core.errors import AuthenticationError

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenCache:
    """Hold a single NimbusPost token and log in again once it expires.

    The upstream account is one shared service credential, so there is exactly
    one slot. Concurrent refreshes are not serialized: a login is idempotent
    and the last writer wins.
    """

    _TOKEN_TTL = timedelta(hours=1)

    def __init__(
        self,
        client: NimbusPostClient,
        *,
        ttl: Optional[timedelta] = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._client = client
        self._ttl = ttl or self._TOKEN_TTL
        self._clock = clock
        self._token: Optional[str] = None
        self._expires_at: Optional[datetime] = None

    @property
    def token(self) -> Optional[str]:
        return self._token

    @property
    def expires_at(self) -> Optional[datetime]:
        return self._expires_at

    async def acquire_token(self) -> str:
        """Return a usable token, logging in when the cache is empty or stale."""
        if self._token and self._expires_at and self._clock() < self._expires_at:
            logger.debug("Using cached NimbusPost token")
            return self._token

        logger.info("Requesting new NimbusPost token")
        try:
            payload = await self._client.login()
        except NimbusPostAPIError as exc:
            self.invalidate()
            logger.error("NimbusPost login rejected with HTTP %s", exc.status_code)
            raise AuthenticationError("Failed to authenticate with NimbusPost") from exc
        except httpx.RequestError as exc:
            self.invalidate()
            logger.error("NimbusPost login failed: %s", exc)
            raise AuthenticationError("Failed to authenticate with NimbusPost") from exc

        token = payload.get("data")
        if not payload.get("status") or not token or not isinstance(token, str):
            self.invalidate()
            logger.error("NimbusPost login returned a malformed payload")
            raise AuthenticationError("Failed to authenticate with NimbusPost")

        self._token = token
        self._expires_at = self._clock() + self._ttl
        logger.info("NimbusPost token acquired, valid until %s", self._expires_at.isoformat())
        return token

    def invalidate(self) -> None:
        """Drop the cached token so the next acquisition logs in again."""
        self._token = None
        self._expires_at = None


__all__ = ["TokenCache"]

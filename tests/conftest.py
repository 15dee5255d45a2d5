"""Pytest configuration shared across the suite."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

try:
    from . import _bootstrap  # noqa: F401
except Exception:  # pragma: no cover - fallback for direct execution
    import _bootstrap  # type: ignore # noqa: F401

import httpx
import pytest

from nimbus_tracker.clients import NimbusPostClient
from nimbus_tracker.core.config import NimbusSettings

BASE_URL = "https://nimbus.test/v1"
LOGIN_PATH = "/v1/users/login"


class FakeNimbusUpstream:
    """Scripted stand-in for the NimbusPost API, served through MockTransport.

    Responses queued for a route are consumed in order; the last one keeps
    answering once the queue is down to a single entry.
    """

    def __init__(self) -> None:
        self._routes: dict[tuple[str, str], list[dict[str, Any]]] = {}
        self.requests: list[httpx.Request] = []

    def queue(
        self,
        method: str,
        path: str,
        *,
        status: int = 200,
        json: Any = None,
        error: str | None = None,
    ) -> None:
        self._routes.setdefault((method, path), []).append(
            {"status": status, "json": json, "error": error}
        )

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [
            request
            for request in self.requests
            if request.method == method and request.url.path == path
        ]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        queued = self._routes.get((request.method, request.url.path))
        if not queued:
            return httpx.Response(404, json={"status": False, "message": "Unmocked route"})
        entry = queued.pop(0) if len(queued) > 1 else queued[0]
        if entry["error"]:
            raise httpx.ConnectError(entry["error"], request=request)
        if entry["json"] is None:
            return httpx.Response(entry["status"])
        return httpx.Response(entry["status"], json=entry["json"])


class FakeClock:
    def __init__(self) -> None:
        self.now = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def anyio_backend() -> str:
    """Force AnyIO-powered tests to run against asyncio backend only."""
    return "asyncio"


@pytest.fixture
def nimbus_settings() -> NimbusSettings:
    return NimbusSettings(
        NIMBUS_EMAIL="ops@example.com",
        NIMBUS_PASSWORD="test-password",
        NIMBUS_BASE_URL=BASE_URL,
    )


@pytest.fixture
def upstream() -> FakeNimbusUpstream:
    return FakeNimbusUpstream()


@pytest.fixture
def nimbus_client(nimbus_settings, upstream) -> NimbusPostClient:
    return NimbusPostClient(
        nimbus_settings,
        transport=httpx.MockTransport(upstream.handler),
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()

from __future__ import annotations

import pytest

from nimbus_tracker import dependencies


def test_settings_and_token_cache_are_process_singletons() -> None:
    assert dependencies.get_app_settings() is dependencies.get_app_settings()
    assert dependencies.get_token_cache() is dependencies.get_token_cache()
    assert dependencies.get_nimbuspost_client() is dependencies.get_nimbuspost_client()


def test_tracking_service_reads_retry_switch_from_app_settings(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    settings = dependencies.get_app_settings()
    monkeypatch.setattr(settings.nimbus, "retry_on_unauthorized", True)

    service = dependencies.get_tracking_service()

    assert service._retry_on_unauthorized is True
    assert service._tokens is dependencies.get_token_cache()

from __future__ import annotations

import pytest

from mfnav_api.config.settings import (
    DEFAULT_MFAPI_BASE_URL,
    Environment,
    Settings,
    get_settings,
)
from mfnav_api.infrastructure.external_apis.mfapi.settings import MfapiSettings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    s = Settings(_env_file=None)  # type: ignore[call-arg]
    assert s.environment is Environment.TEST
    assert s.mfapi_base_url == DEFAULT_MFAPI_BASE_URL
    assert s.mfapi_timeout_s is None
    assert s.cron_secret_value() is None
    assert s.cors_allow_origins == []


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CRON_SECRET", "s3cret")
    monkeypatch.setenv("MFAPI_BASE_URL", "https://mirror.example.test/mf")
    monkeypatch.setenv("MFAPI_TIMEOUT_S", "2.5")
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example")

    s = get_settings()

    assert s.cron_secret_value() == "s3cret"
    assert "s3cret" not in repr(s)
    assert s.cors_allow_origins == ["https://a.example", "https://b.example"]

    client_cfg = MfapiSettings.from_app_settings(s)
    assert client_cfg.base_url == "https://mirror.example.test/mf"
    assert client_cfg.timeout_s == 2.5


def test_blank_cron_secret_counts_as_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CRON_SECRET", "")
    assert get_settings().cron_secret_value() is None


def test_wildcard_cors_rejected_in_production(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("ALLOWED_ORIGINS", "*")
    with pytest.raises(RuntimeError, match="Invalid configuration"):
        get_settings()


def test_invalid_timeout_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MFAPI_TIMEOUT_S", "0")
    with pytest.raises(RuntimeError):
        get_settings()

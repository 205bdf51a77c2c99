"""
Unit tests for API runtime configuration.
It asserts expected behavior and guards against regressions in the corresponding component.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from union_cms.api.api_config import ApiConfig, load_api_config


def test_defaults_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./defaults.db")
    for name in ("API_PORT", "UPLOAD_URL_PREFIX", "SESSION_MAX_AGE_SECONDS", "MAX_UPLOAD_BYTES"):
        monkeypatch.delenv(name, raising=False)

    config = load_api_config(load_env=False)

    assert config.port == 3000
    assert config.upload_url_prefix == "/assets/uploads"
    assert config.session_max_age_seconds == 86400
    assert config.max_upload_bytes == 5 * 1024 * 1024
    assert config.default_admin_username == "admin"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENV", "production")
    monkeypatch.setenv("API_ALLOWED_ORIGINS", "https://a.example, https://b.example")
    monkeypatch.setenv("API_ENABLE_REQUEST_LOGGING", "yes")
    monkeypatch.setenv("SEED_DEFAULT_CONTENT", "off")
    monkeypatch.setenv("UPLOAD_URL_PREFIX", "/media/")

    config = load_api_config(load_env=False)

    assert config.is_production is True
    assert config.allowed_origins == ["https://a.example", "https://b.example"]
    assert config.enable_request_logging is True
    assert config.seed_default_content is False
    assert config.upload_url_prefix == "/media"


def test_missing_database_url_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "")
    with pytest.raises(RuntimeError, match="DATABASE_URL is required"):
        load_api_config(load_env=False)


def test_bad_boolean_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("API_ENABLE_REQUEST_LOGGING", "sometimes")
    with pytest.raises(ValueError, match="boolean-like"):
        load_api_config(load_env=False)


@pytest.mark.parametrize(
    "overrides",
    [
        {"upload_url_prefix": "assets"},
        {"upload_url_prefix": "/"},
        {"session_cookie_name": "bad cookie;"},
        {"max_upload_bytes": 0},
    ],
)
def test_invalid_values_are_rejected(overrides: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        ApiConfig(database_url="sqlite://", **overrides)

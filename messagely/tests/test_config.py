from __future__ import annotations

import pytest
from pydantic import ValidationError

from messagely.shared.config.settings import AppConfig, AuthConfig, SecurityConfig


def test_nested_sections_read_environment() -> None:
    config = AppConfig()

    assert config.auth.password_hash_method == "pbkdf2:sha256:1000"
    assert config.security.enable_rate_limit is False
    assert config.database.url.startswith("sqlite:///")
    assert config.is_production() is False


def test_unknown_hash_method_rejected() -> None:
    with pytest.raises(ValidationError):
        AuthConfig(PASSWORD_HASH_METHOD="md5")


def test_origins_parsed_from_comma_list() -> None:
    security = SecurityConfig(ALLOWED_ORIGINS="https://a.example, https://b.example")

    assert security.allowed_origins == ["https://a.example", "https://b.example"]


def test_production_refuses_default_secret(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("SECRET_KEY", "dev")

    with pytest.raises(SystemExit):
        AppConfig()

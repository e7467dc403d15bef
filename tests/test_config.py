from __future__ import annotations

import pytest

from wallboard.config import DEFAULT_PORT, settings_from_env

ENV_VARS = [
    "WALLBOARD_HOST",
    "WALLBOARD_PORT",
    "WALLBOARD_LOG_LEVEL",
    "WALLBOARD_CORS_ORIGINS",
    "WALLBOARD_SEED",
]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = settings_from_env()
    assert settings.port == DEFAULT_PORT == 3001
    assert settings.host == "0.0.0.0"
    assert settings.log_level == "INFO"
    assert settings.cors_origins == ["*"]
    assert settings.seed is True


def test_overrides(monkeypatch):
    monkeypatch.setenv("WALLBOARD_PORT", "8080")
    monkeypatch.setenv("WALLBOARD_LOG_LEVEL", "debug")
    monkeypatch.setenv("WALLBOARD_CORS_ORIGINS", "http://a.test, http://b.test")
    monkeypatch.setenv("WALLBOARD_SEED", "FALSE")

    settings = settings_from_env()

    assert settings.port == 8080
    assert settings.log_level == "DEBUG"
    assert settings.cors_origins == ["http://a.test", "http://b.test"]
    assert settings.seed is False


def test_invalid_port(monkeypatch):
    monkeypatch.setenv("WALLBOARD_PORT", "not-a-port")
    with pytest.raises(ValueError):
        settings_from_env()

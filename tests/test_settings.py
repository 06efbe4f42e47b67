"""Tests for environment-driven settings."""

import pytest
from skipwire.config import get_settings, reset_settings_cache


@pytest.fixture(autouse=True)
def _fresh_settings():
    reset_settings_cache()
    yield
    reset_settings_cache()


def test_defaults(monkeypatch):
    monkeypatch.delenv("SNAPSHOT_STALE_MINUTES", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    settings = get_settings()
    assert settings.snapshot_stale_minutes == 60
    assert settings.log_level == "INFO"


def test_env_override(monkeypatch):
    monkeypatch.setenv("SNAPSHOT_STALE_MINUTES", "15")
    monkeypatch.setenv("SITE_URL", "https://dash.example.org")
    settings = get_settings()
    assert settings.snapshot_stale_minutes == 15
    assert settings.site_url == "https://dash.example.org"


def test_settings_are_cached():
    assert get_settings() is get_settings()

"""Tests for configuration."""

import pytest

from swasthyaq.config import Settings, get_settings


def test_settings_defaults():
    """Test that settings have correct default values."""
    settings = Settings()
    assert settings.app_name == "SwasthyaQ API"
    assert settings.app_version == "0.1.0"
    assert settings.environment in ["development", "staging", "production"]
    assert settings.api_prefix == "/api"
    assert settings.default_page_size == 20


def test_get_settings_returns_singleton():
    """Test that get_settings returns the same instance."""
    settings1 = get_settings()
    settings2 = get_settings()
    assert settings1 is settings2


def test_settings_cors_configuration():
    """Test CORS configuration defaults."""
    settings = Settings()
    assert settings.cors_origins == ["*"]
    assert settings.cors_credentials is True
    assert settings.cors_methods == ["*"]
    assert settings.cors_headers == ["*"]


def test_storage_backend_from_environment(monkeypatch: pytest.MonkeyPatch):
    """Test that the substrate is selected by environment variables."""
    monkeypatch.setenv("STORAGE_BACKEND", "redis")
    monkeypatch.setenv("REDIS_KEY_PREFIX", "test:")
    settings = Settings()
    assert settings.storage_backend == "redis"
    assert settings.redis_key_prefix == "test:"


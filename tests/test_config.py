# tests/test_config.py

"""
Configuration Tests - settings validation and logging setup
"""

import logging

import pytest
from pydantic import ValidationError

from blueprint.config import Settings, get_settings
from blueprint.core.logging_config import configure_logging


class TestSettings:

    def test_defaults(self):
        s = Settings()
        assert s.API_V1_PREFIX == "/api/v1"
        assert s.NOTIFICATION_TIMEOUT_SECONDS == 10.0
        assert s.RESEND_API_URL == "https://api.resend.com/emails"
        assert s.CTA_URL.startswith("https://")

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("NOTIFICATION_URL", "http://localhost:9000/notify")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.NOTIFICATION_URL == "http://localhost:9000/notify"
        assert s.LOG_LEVEL == "DEBUG"

    def test_resend_key_format(self):
        with pytest.raises(ValidationError, match="Resend API key"):
            Settings(RESEND_API_KEY="sk_live_123")

    def test_resend_key_is_secret(self):
        s = Settings(RESEND_API_KEY="re_abc")
        assert "re_abc" not in repr(s)
        assert s.RESEND_API_KEY.get_secret_value() == "re_abc"

    def test_production_forbids_debug(self):
        with pytest.raises(ValidationError, match="DEBUG"):
            Settings(APP_ENV="production", DEBUG=True)

    @pytest.mark.parametrize("timeout", [0.5, 61])
    def test_timeout_bounds(self, timeout):
        with pytest.raises(ValidationError):
            Settings(NOTIFICATION_TIMEOUT_SECONDS=timeout)

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()

    def test_registry_size_bounds(self):
        assert Settings().SESSION_REGISTRY_MAX_SIZE == 10_000
        with pytest.raises(ValidationError):
            Settings(SESSION_REGISTRY_MAX_SIZE=0)

    def test_routers_mounted_under_api_prefix(self):
        from blueprint.routers import assessments, notifications, questions, results

        prefix = get_settings().API_V1_PREFIX
        assert questions.router.prefix == prefix
        assert assessments.router.prefix == f"{prefix}/assessments"
        assert results.router.prefix == f"{prefix}/results"
        assert notifications.router.prefix == f"{prefix}/notifications"


class TestLoggingConfig:

    @pytest.mark.parametrize("fmt", ["json", "console"])
    def test_configure_sets_level(self, fmt):
        configure_logging(level="WARNING", fmt=fmt)
        assert logging.getLogger().level == logging.WARNING
        configure_logging(level="INFO", fmt="json")
        assert logging.getLogger().level == logging.INFO

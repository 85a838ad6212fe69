"""Tests for settings loading and logging configuration."""

import structlog

from accesskeys.config import Settings
from accesskeys.logging_config import configure_logging


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("ACCESSKEYS_LOG_LEVEL", raising=False)
        settings = Settings(_env_file=None)
        assert settings.api_prefix == "/api/v1"
        assert settings.log_level == "INFO"
        assert settings.log_json is True
        assert settings.debug is False

    def test_environment_overrides_use_prefix(self, monkeypatch):
        monkeypatch.setenv("ACCESSKEYS_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("ACCESSKEYS_LOG_JSON", "false")
        settings = Settings(_env_file=None)
        assert settings.log_level == "DEBUG"
        assert settings.log_json is False


class TestConfigureLogging:
    def test_console_renderer_when_json_disabled(self):
        configure_logging(log_level="debug", json=False)
        processors = structlog.get_config()["processors"]
        assert processors[0] is structlog.contextvars.merge_contextvars
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_json_renderer_by_default(self):
        configure_logging(json=True)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

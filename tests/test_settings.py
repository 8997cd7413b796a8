"""
Tests for configuration and logging setup.
"""

import logging

import pytest
import structlog
from pydantic import ValidationError

from geoinfo.logging import configure_logging, get_logger
from geoinfo.settings import Settings, get_settings


def test_defaults(monkeypatch):
    """Test settings default to the OS locale and INFO logging."""
    monkeypatch.delenv("GEOINFO_LOCALE_ID", raising=False)
    monkeypatch.delenv("GEOINFO_LOG_LEVEL", raising=False)
    monkeypatch.delenv("GEOINFO_LOG_JSON", raising=False)

    settings = Settings()

    assert settings.locale_id is None
    assert settings.log_level == "INFO"
    assert settings.log_json is True


def test_environment_override(monkeypatch):
    """Test GEOINFO_* environment variables are read."""
    monkeypatch.setenv("GEOINFO_LOCALE_ID", "1031")
    monkeypatch.setenv("GEOINFO_LOG_LEVEL", "DEBUG")

    settings = Settings()

    assert settings.locale_id == 0x0407
    assert settings.log_level == "DEBUG"


def test_invalid_log_level():
    with pytest.raises(ValidationError):
        Settings(log_level="LOUD")


def test_get_settings_cached():
    """Test the process-wide settings instance is reused."""
    assert get_settings() is get_settings()


def test_configure_logging():
    """Test logging configuration sets the level on both stacks."""
    try:
        configure_logging("WARNING", settings=Settings(log_level="INFO"))

        assert structlog.is_configured()
        assert logging.getLogger().level == logging.WARNING
        assert get_logger("geoinfo.test") is not None
    finally:
        structlog.reset_defaults()
        logging.getLogger().setLevel(logging.WARNING)


@pytest.mark.parametrize(
    "log_json,renderer",
    [(True, structlog.processors.JSONRenderer), (False, structlog.dev.ConsoleRenderer)],
)
def test_configure_logging_renderer(log_json, renderer):
    """Test the renderer follows the log_json setting."""
    try:
        configure_logging(settings=Settings(log_level="DEBUG", log_json=log_json))

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], renderer)
        assert logging.getLogger().level == logging.DEBUG
    finally:
        structlog.reset_defaults()
        logging.getLogger().setLevel(logging.WARNING)

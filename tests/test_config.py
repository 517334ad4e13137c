"""
Configuration tests: environment loading and logging setup
"""

import logging

import pytest

from roster.core import config
from roster.core.config import Settings, configure_logging


def test_defaults(clean_settings):
    assert clean_settings.app_name == "Flight Roster Engine"
    assert clean_settings.environment == "development"
    assert clean_settings.log_level == "INFO"
    assert clean_settings.use_json_logs() is False


def test_env_overrides(clean_settings, monkeypatch):
    monkeypatch.setenv("ROSTER_LOG_LEVEL", "debug")
    monkeypatch.setenv("ROSTER_ENVIRONMENT", "production")
    settings = config.reload_settings()

    assert settings.log_level == "DEBUG"
    assert settings.is_production()
    assert settings.use_json_logs() is True


def test_invalid_environment(clean_settings, monkeypatch):
    monkeypatch.setenv("ROSTER_ENVIRONMENT", "qa")
    with pytest.raises(ValueError, match="Failed to load settings"):
        config.reload_settings()


def test_settings_singleton(clean_settings):
    assert config.get_settings() is config.get_settings()


def test_log_config_formatters():
    plain = Settings(environment="development").get_log_config()
    json_logs = Settings(environment="development", log_json=True).get_log_config()

    assert plain["handlers"]["console"]["formatter"] == "default"
    assert json_logs["handlers"]["console"]["formatter"] == "json"


def test_debug_forces_debug_level():
    log_config = Settings(debug=True, log_level="WARNING").get_log_config()
    assert log_config["root"]["level"] == "DEBUG"


def test_configure_logging_json(clean_settings):
    configure_logging(Settings(log_json=True, log_level="WARNING"))
    root = logging.getLogger()

    assert root.level == logging.WARNING
    assert type(root.handlers[0].formatter).__name__ == "JsonFormatter"

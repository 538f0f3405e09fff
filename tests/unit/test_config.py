"""
AppSettings and user .env helper tests.

Run with: pytest tests/unit/test_config.py -v
"""

import logging

import pydantic
import pytest
from pythonjsonlogger.json import JsonFormatter

from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.logging_config import get_logger


class TestAppSettings:
    def test_reads_prefixed_env(self, monkeypatch):
        monkeypatch.setenv("ZENDESK_BASE_URL", "https://other.zendesk.com/api/v2/")
        monkeypatch.setenv("ZENDESK_HTTP_TIMEOUT_SECONDS", "7.5")

        settings = AppSettings()

        assert settings.base_url == "https://other.zendesk.com/api/v2"
        assert settings.http_timeout_seconds == 7.5

    def test_rejects_non_positive_timeout(self):
        with pytest.raises(pydantic.ValidationError):
            AppSettings(http_timeout_seconds=0)

    def test_normalizes_log_level(self):
        assert AppSettings(log_level=" debug ").log_level == "DEBUG"

    def test_rejects_unknown_log_level(self):
        with pytest.raises(pydantic.ValidationError):
            AppSettings(log_level="verbose")


class TestUserEnvFile:
    def test_write_creates_and_merges(self, monkeypatch, tmp_path):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        first = write_user_env_vars({"ZENDESK_BASE_URL": "https://a.zendesk.com/api/v2"})
        second = write_user_env_vars({"ZENDESK_HTTP_TIMEOUT_SECONDS": "3"})

        assert first == second == get_user_env_file()
        assert first.parent == tmp_path / "zendesk-tickets"
        lines = first.read_text(encoding="utf-8").splitlines()
        assert lines[0].startswith("#")
        assert "ZENDESK_BASE_URL=https://a.zendesk.com/api/v2" in lines
        assert "ZENDESK_HTTP_TIMEOUT_SECONDS=3" in lines


class TestLogger:
    def test_configures_handler_once(self):
        logger = get_logger("tests.config.once")
        again = get_logger("tests.config.once")

        assert logger is again
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_json_formatter_by_default(self):
        logger = get_logger("tests.config.json", AppSettings(log_json=True))

        assert isinstance(logger.handlers[0].formatter, JsonFormatter)

    def test_plain_formatter_when_json_disabled(self):
        logger = get_logger("tests.config.plain", AppSettings(log_json=False, log_level="ERROR"))

        assert not isinstance(logger.handlers[0].formatter, JsonFormatter)
        assert logger.level == logging.ERROR

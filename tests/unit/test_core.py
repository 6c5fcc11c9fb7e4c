"""Unit tests for settings and logging setup."""

import io
import json
import logging

import pytest

from app.core.config import Settings
from app.core.logging import configure_logging


class TestSettings:
    """Tests for Settings parsing."""

    def test_defaults(self):
        settings = Settings()
        assert settings.api_v1_prefix == "/api/v1"
        assert settings.prediction_cache_max_age == 300
        assert settings.is_development

    def test_comma_separated_cors_origins(self):
        settings = Settings(cors_origins="https://a.example, https://b.example,")
        assert settings.cors_origins == ["https://a.example", "https://b.example"]

    def test_json_cors_origins(self):
        settings = Settings(cors_origins='["https://a.example"]')
        assert settings.cors_origins == ["https://a.example"]

    def test_cors_origins_from_env(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "https://a.example,https://b.example")
        assert Settings().cors_origins == ["https://a.example", "https://b.example"]

    def test_log_level_is_upper_cased(self):
        assert Settings(log_level="debug").log_level == "DEBUG"


@pytest.fixture
def root_logger():
    """Restore root logger handlers and level after a test."""
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    yield root
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


class TestLogging:
    """Tests for configure_logging."""

    def test_json_lines(self, root_logger):
        stream = io.StringIO()
        configure_logging("info", "json", stream=stream)
        logging.getLogger("app.test").info(
            "Predicted %s", "Red vs Blue", extra={"request_id": "abc123"}
        )

        payload = json.loads(stream.getvalue().splitlines()[-1])

        assert payload["levelname"] == "INFO"
        assert payload["name"] == "app.test"
        assert payload["message"] == "Predicted Red vs Blue"
        assert payload["request_id"] == "abc123"
        assert "asctime" in payload

    def test_console_lines(self, root_logger):
        stream = io.StringIO()
        configure_logging("DEBUG", "console", stream=stream)
        logging.getLogger("app.test").debug("hello")

        line = stream.getvalue().splitlines()[-1]
        assert "DEBUG" in line
        assert line.endswith("app.test - hello")

    def test_unknown_level_falls_back_to_info(self, root_logger):
        configure_logging("verbose", stream=io.StringIO())
        assert root_logger.level == logging.INFO

"""
Configuration Tests
===================

Tests for settings loading and environment overrides.
"""

import logging

import pytest

from gated_constraints.config import (
    LOG_DATE_FORMAT,
    LOG_FORMATS,
    LoggingConfig,
    Settings,
    load_config,
    setup_logging,
)


class TestConfig:
    """Tests for load_config."""

    def test_defaults(self):
        settings = Settings()
        assert settings.constraints.definition_path == "./data/constraints/example.yaml"
        assert settings.logging.level == "INFO"
        assert settings.logging.format == "json"

    def test_yaml_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("GATED_CONSTRAINTS_PATH", raising=False)
        monkeypatch.delenv("GATED_LOG_LEVEL", raising=False)
        monkeypatch.delenv("GATED_LOG_FORMAT", raising=False)

        path = tmp_path / "config.yaml"
        path.write_text(
            "constraints:\n"
            "  definition_path: /srv/floor.json\n"
            "logging:\n"
            "  level: DEBUG\n"
            "  format: text\n"
        )

        settings = load_config(str(path))
        assert settings.constraints.definition_path == "/srv/floor.json"
        assert settings.logging.level == "DEBUG"
        assert settings.logging.format == "text"

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        """Environment variables take precedence over file values."""
        path = tmp_path / "config.yaml"
        path.write_text("logging:\n  level: DEBUG\n")

        monkeypatch.setenv("GATED_LOG_LEVEL", "WARNING")
        monkeypatch.setenv("GATED_CONSTRAINTS_PATH", "/tmp/override.yaml")

        settings = load_config(str(path))
        assert settings.logging.level == "WARNING"
        assert settings.constraints.definition_path == "/tmp/override.yaml"

    def test_missing_file_uses_defaults(self, tmp_path, monkeypatch):
        monkeypatch.delenv("GATED_LOG_LEVEL", raising=False)
        monkeypatch.delenv("GATED_CONSTRAINTS_PATH", raising=False)
        monkeypatch.delenv("GATED_LOG_FORMAT", raising=False)

        settings = load_config(str(tmp_path / "absent.yaml"))
        assert settings == Settings()

    def test_env_log_format(self, tmp_path, monkeypatch):
        monkeypatch.setenv("GATED_LOG_FORMAT", "text")

        settings = load_config(str(tmp_path / "absent.yaml"))
        assert settings.logging.format == "text"


class TestSetupLogging:
    """Tests for setup_logging."""

    @pytest.fixture
    def basic_config_calls(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        return calls

    @pytest.mark.parametrize("log_format", ["json", "text"])
    def test_format_selected(self, basic_config_calls, log_format):
        setup_logging(Settings(logging=LoggingConfig(level="debug", format=log_format)))

        assert basic_config_calls == [
            {
                "level": logging.DEBUG,
                "format": LOG_FORMATS[log_format],
                "datefmt": LOG_DATE_FORMAT,
            }
        ]

    def test_unknown_level_falls_back_to_info(self, basic_config_calls):
        setup_logging(Settings(logging=LoggingConfig(level="chatty")))
        assert basic_config_calls[0]["level"] == logging.INFO

"""Tests for configuration and logging setup."""

import dataclasses

import pytest
import structlog
from structlog.testing import capture_logs

from beautification.config import BeautificationConfig
from beautification.log import configure_logging


class TestBeautificationConfig:
    """Test configuration values."""

    def test_immutable(self, config):
        """Config is frozen."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.log_level = "INFO"

    def test_zero_timeout_means_none(self, config):
        """A non-positive timeout disables the deadline."""
        assert config.effective_provider_timeout is None

    def test_positive_timeout(self, config):
        """A positive timeout is passed through."""
        config = dataclasses.replace(config, provider_timeout=2.5)

        assert config.effective_provider_timeout == 2.5

    def test_providers_from_environment(self, monkeypatch):
        """BEAUTIFY_PROVIDERS is split on commas, blanks dropped."""
        monkeypatch.setenv("BEAUTIFY_PROVIDERS", "a.b:C, ,d:E")

        assert BeautificationConfig().providers == ("a.b:C", "d:E")


class TestConfigureLogging:
    """Test structlog configuration."""

    def test_level_filters(self, capsys):
        """Events below the level are dropped."""
        configure_logging("WARNING")
        logger = structlog.get_logger("test")

        logger.info("hidden_event")
        logger.warning("shown_event", key="value")

        err = capsys.readouterr().err
        assert "hidden_event" not in err
        assert "shown_event" in err
        assert "key=value" in err

    def test_json_output(self, capsys):
        """JSON mode renders one object per line."""
        configure_logging("INFO", json=True)

        structlog.get_logger("test").info("json_event", provider="p")

        err = capsys.readouterr().err
        assert '"event": "json_event"' in err
        assert '"provider": "p"' in err

    def test_from_config(self, config, capsys):
        """Level and format can come from a config object."""
        configure_logging(config=config)

        structlog.get_logger("test").debug("debug_event")

        assert "debug_event" in capsys.readouterr().err

    def test_capture_still_works(self):
        """Configured loggers are still captured in tests."""
        configure_logging("DEBUG")

        with capture_logs() as logs:
            structlog.get_logger("test").debug("captured")

        assert logs[0]["event"] == "captured"

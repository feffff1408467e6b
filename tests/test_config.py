"""
Tests for service configuration.
"""

import logging
from unittest.mock import patch

import pytest

from calendar_heatmap import config


class TestValidateConfig:
    """Tests for validate_config."""

    def test_defaults_are_valid(self):
        with patch.multiple(config, LOG_LEVEL="INFO", DEMO_START="2025-01", DEMO_END="2025-12", DEMO_SEED="42"):
            config.validate_config()

    def test_reports_every_invalid_setting(self):
        with patch.multiple(config, LOG_LEVEL="LOUD", DEMO_START="2025-13", DEMO_END="2025-12", DEMO_SEED="abc"):
            with pytest.raises(ValueError) as exc_info:
                config.validate_config()

        message = str(exc_info.value)
        assert "HEATMAP_LOG_LEVEL" in message
        assert "HEATMAP_DEMO_START" in message
        assert "HEATMAP_DEMO_SEED" in message
        assert "HEATMAP_DEMO_END" not in message


class TestGetLogLevel:
    """Tests for get_log_level."""

    def test_known_level(self):
        with patch.object(config, "LOG_LEVEL", "debug"):
            assert config.get_log_level() == logging.DEBUG

    def test_unknown_level_defaults_to_info(self):
        with patch.object(config, "LOG_LEVEL", "LOUD"):
            assert config.get_log_level() == logging.INFO

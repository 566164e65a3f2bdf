"""
Tests for environment-driven settings and logging setup.
"""

import logging
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from homebrew import logging_config
from homebrew.config import AppConfig


class TestAppConfig:
    """Test cases for AppConfig getters."""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            assert AppConfig.get_log_level() == "INFO"
            assert AppConfig.get_event_log_path() == Path("events.log")
            assert AppConfig.seed_sample_recipes() is True
            assert AppConfig.show_debug_panel() is False

    def test_overrides(self):
        env = {
            "HOMEBREW_LOG_LEVEL": " debug ",
            "HOMEBREW_EVENT_LOG": "/tmp/hbh/events.jsonl",
            "HOMEBREW_SEED_SAMPLE_RECIPES": "false",
            "HOMEBREW_SHOW_DEBUG_PANEL": "yes",
        }
        with patch.dict(os.environ, env, clear=True):
            assert AppConfig.get_log_level() == "DEBUG"
            assert AppConfig.get_event_log_path() == Path("/tmp/hbh/events.jsonl")
            assert AppConfig.seed_sample_recipes() is False
            assert AppConfig.show_debug_panel() is True

    @pytest.mark.parametrize("raw", ["", "   "])
    def test_blank_bool_uses_default(self, raw):
        with patch.dict(os.environ, {"HOMEBREW_SEED_SAMPLE_RECIPES": raw}, clear=True):
            assert AppConfig.seed_sample_recipes() is True


class TestConfigureLogging:
    """Test cases for configure_logging."""

    def test_configures_once(self):
        with patch.object(logging_config, "_configured", False), \
                patch("homebrew.logging_config.logging.basicConfig") as basic_config:
            logging_config.configure_logging("warning")
            logging_config.configure_logging("debug")

        basic_config.assert_called_once()
        assert basic_config.call_args.kwargs["level"] == logging.WARNING

    def test_unknown_level_falls_back_to_info(self):
        with patch.object(logging_config, "_configured", False), \
                patch("homebrew.logging_config.logging.basicConfig") as basic_config:
            logging_config.configure_logging("chatty")

        assert basic_config.call_args.kwargs["level"] == logging.INFO

"""
Configuration management for HomeBrew Helper.

This module centralizes environment variable loading from the .env file at the
project root. It is imported early by the Streamlit entry point so .env is
loaded before any other code reads the environment.

When no .env exists, load_dotenv() is a no-op and platform environment
variables are used as-is.

Environment Variables:
- HOMEBREW_LOG_LEVEL: Optional, defaults to "INFO"
- HOMEBREW_EVENT_LOG: Optional, path of the JSONL intent log (defaults to "events.log")
- HOMEBREW_SEED_SAMPLE_RECIPES: Optional, defaults to true
- HOMEBREW_SHOW_DEBUG_PANEL: Optional, defaults to false
"""

import os
from pathlib import Path

from dotenv import load_dotenv

_TRUTHY = {"1", "true", "yes", "on"}


def load_env_file() -> None:
    """
    Load environment variables from .env at the project root.

    Safe to call multiple times. Existing environment variables take precedence.
    """
    # homebrew/config.py -> homebrew/ -> project root
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env", override=False)


load_env_file()


def _get_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


class AppConfig:
    """Runtime settings for the recipe list app."""

    @staticmethod
    def get_log_level() -> str:
        """
        Get the root log level name.

        Returns:
            Upper-cased level name (default: "INFO")
        """
        return os.getenv("HOMEBREW_LOG_LEVEL", "INFO").strip().upper() or "INFO"

    @staticmethod
    def get_event_log_path() -> Path:
        """Path of the JSONL intent log (default: events.log in the working directory)."""
        return Path(os.getenv("HOMEBREW_EVENT_LOG", "events.log"))

    @staticmethod
    def seed_sample_recipes() -> bool:
        """Whether the in-memory view-model starts with the sample recipes."""
        return _get_bool("HOMEBREW_SEED_SAMPLE_RECIPES", True)

    @staticmethod
    def show_debug_panel() -> bool:
        """Initial visibility of the ingredient debug panel."""
        return _get_bool("HOMEBREW_SHOW_DEBUG_PANEL", False)

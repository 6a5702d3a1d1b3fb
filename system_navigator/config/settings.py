"""
Configuration settings for the navigator.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from system_navigator.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

DEFAULT_CHUNK_SIZE = 64 * 1024


def parse_log_level(name: str) -> int:
    """
    Map a level name such as ``debug`` or ``WARNING`` to its logging constant.

    Raises:
        ConfigurationError: If the name is not a standard logging level
    """
    level = getattr(logging, name.strip().upper(), None)
    if not isinstance(level, int) or isinstance(level, bool):
        raise ConfigurationError(f"Invalid log level: {name}")
    return level


class Settings:
    """Navigator settings loaded from environment variables."""

    def __init__(self, home_directory: Optional[str] = None):
        self.home_directory: str = os.path.abspath(
            home_directory
            or self._get_env("NAVIGATOR_HOME", os.path.expanduser("~"))
        )
        self.log_level: int = self._get_log_level("NAVIGATOR_LOG_LEVEL", "WARNING")
        self.chunk_size: int = self._get_positive_int(
            "NAVIGATOR_CHUNK_SIZE", DEFAULT_CHUNK_SIZE
        )
        self.history_file: Optional[str] = os.getenv("NAVIGATOR_HISTORY_FILE") or None

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key) or default

    def _get_log_level(self, key: str, default: str) -> int:
        """Get a logging level by name, raise error if unknown."""
        name = self._get_env(key, default)
        try:
            return parse_log_level(name)
        except ConfigurationError:
            raise ConfigurationError(f"Invalid log level in {key}: {name}")

    def _get_positive_int(self, key: str, default: int) -> int:
        """Get a positive integer environment variable, raise error if malformed."""
        raw = os.getenv(key)
        if not raw:
            return default
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(f"{key} must be an integer, got {raw!r}")
        if value <= 0:
            raise ConfigurationError(f"{key} must be positive, got {value}")
        return value

"""
Tests for the Settings configuration.
"""

import logging
import os

import pytest

from system_navigator.config.settings import (
    DEFAULT_CHUNK_SIZE,
    Settings,
    parse_log_level,
)
from system_navigator.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for key in (
        "NAVIGATOR_HOME",
        "NAVIGATOR_LOG_LEVEL",
        "NAVIGATOR_CHUNK_SIZE",
        "NAVIGATOR_HISTORY_FILE",
    ):
        monkeypatch.delenv(key, raising=False)


class TestSettings:
    """Test cases for Settings."""

    def test_defaults(self):
        """Without environment variables the user's home and defaults are used."""
        settings = Settings()

        assert settings.home_directory == os.path.abspath(os.path.expanduser("~"))
        assert settings.log_level == logging.WARNING
        assert settings.chunk_size == DEFAULT_CHUNK_SIZE
        assert settings.history_file is None

    def test_environment_overrides(self, monkeypatch, temp_directory):
        """Environment variables override the defaults."""
        monkeypatch.setenv("NAVIGATOR_HOME", temp_directory)
        monkeypatch.setenv("NAVIGATOR_LOG_LEVEL", "debug")
        monkeypatch.setenv("NAVIGATOR_CHUNK_SIZE", "1024")
        monkeypatch.setenv("NAVIGATOR_HISTORY_FILE", "/tmp/history")

        settings = Settings()

        assert settings.home_directory == temp_directory
        assert settings.log_level == logging.DEBUG
        assert settings.chunk_size == 1024
        assert settings.history_file == "/tmp/history"

    def test_explicit_home_wins(self, monkeypatch, temp_directory):
        """An explicit home directory beats NAVIGATOR_HOME."""
        monkeypatch.setenv("NAVIGATOR_HOME", "/somewhere/else")

        assert Settings(home_directory=temp_directory).home_directory == temp_directory

    def test_invalid_log_level(self, monkeypatch):
        """Unknown level names are a configuration error."""
        monkeypatch.setenv("NAVIGATOR_LOG_LEVEL", "chatty")

        with pytest.raises(ConfigurationError, match="Invalid log level"):
            Settings()

    @pytest.mark.parametrize("raw", ["abc", "0", "-5"])
    def test_invalid_chunk_size(self, monkeypatch, raw):
        """Chunk size must be a positive integer."""
        monkeypatch.setenv("NAVIGATOR_CHUNK_SIZE", raw)

        with pytest.raises(ConfigurationError, match="NAVIGATOR_CHUNK_SIZE"):
            Settings()


class TestParseLogLevel:
    """Test cases for parse_log_level."""

    @pytest.mark.parametrize(
        "name, level",
        [("debug", logging.DEBUG), (" Info ", logging.INFO), ("WARN", logging.WARNING)],
    )
    def test_level_names(self, name, level):
        assert parse_log_level(name) == level

    @pytest.mark.parametrize("name", ["chatty", "basic_format", "Level 5", ""])
    def test_non_level_names(self, name):
        """Only logging level constants are accepted."""
        with pytest.raises(ConfigurationError, match="Invalid log level"):
            parse_log_level(name)

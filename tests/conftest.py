"""
Pytest configuration and shared fixtures.
"""

import io
import os
import tempfile
from types import SimpleNamespace
from typing import Optional
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from system_navigator.adapters.console.console_output import ConsoleOutput
from system_navigator.config.settings import Settings
from system_navigator.container import DependencyContainer
from system_navigator.entities.Session import Session
from system_navigator.ports.console.line_reader_port import LineReaderPort


class ScriptedLineReader(LineReaderPort):
    """Line reader replaying a fixed list of lines, then reporting end of input."""

    def __init__(self, lines: list[str]):
        self.lines = list(lines)
        self.prompts: list[str] = []

    async def read_line(self, prompt: str) -> Optional[str]:
        self.prompts.append(prompt)
        if not self.lines:
            return None
        return self.lines.pop(0)


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        # Create some test files
        test_file1 = os.path.join(temp_dir, "test1.txt")
        test_file2 = os.path.join(temp_dir, "test2.py")

        with open(test_file1, "w") as f:
            f.write("This is a test file.")

        with open(test_file2, "w") as f:
            f.write("print('Hello, world!')")

        # Create a subdirectory with a file
        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)

        test_file3 = os.path.join(subdir, "test3.md")
        with open(test_file3, "w") as f:
            f.write("# Test Markdown\n\nThis is a test.")

        yield os.path.realpath(temp_dir)


@pytest.fixture
def empty_directory():
    """Create an empty temporary directory."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield os.path.realpath(temp_dir)


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def session(temp_directory):
    """Session whose home is the temporary directory."""
    return Session(temp_directory)


@pytest.fixture
def console_capture():
    """
    ConsoleOutput writing to in-memory buffers.

    Returns:
        Namespace with ``output``, ``out`` (stdout buffer) and ``err`` (stderr buffer)
    """
    out = io.StringIO()
    err = io.StringIO()
    output = ConsoleOutput(
        console=Console(file=out, width=300, soft_wrap=True),
        error_console=Console(file=err, width=300, soft_wrap=True),
    )
    return SimpleNamespace(output=output, out=out, err=err)


@pytest.fixture
def make_container(console_capture, mock_logger):
    """
    Factory building a container rooted at a directory with scripted input.

    Returns:
        Callable (home_directory, lines) -> DependencyContainer
    """

    def _make(home_directory: str, lines: Optional[list[str]] = None):
        container = DependencyContainer(Settings(home_directory=home_directory))
        container._logger = mock_logger
        container._instances["output"] = console_capture.output
        container._instances["line_reader"] = ScriptedLineReader(lines or [])
        return container

    return _make

"""
Tests for the TransferFileUseCase.
"""

import asyncio
import os

import pytest

from system_navigator.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from system_navigator.exceptions import (
    FileOperationError,
    InvalidArgumentError,
    NotFoundError,
    UnsupportedOperationError,
)
from system_navigator.use_cases.files.transfer_file import TransferFileUseCase


@pytest.fixture
def use_case(mock_logger):
    return TransferFileUseCase(
        LocalFileSystemAdapter(mock_logger), chunk_size=5, logger=mock_logger
    )


def _read(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()


class TestTransferFileUseCase:
    """Test cases for the TransferFileUseCase."""

    def test_copy_keeps_source(self, use_case, session, temp_directory):
        """cp writes an identical file into the directory and keeps the source."""
        written = asyncio.run(use_case.execute(session, "test1.txt", "subdir"))

        assert written == os.path.join(temp_directory, "subdir", "test1.txt")
        assert _read(written) == b"This is a test file."
        assert os.path.exists(os.path.join(temp_directory, "test1.txt"))

    def test_move_deletes_source(self, use_case, session, temp_directory):
        """mv copies byte-for-byte, then deletes the source."""
        original = os.path.join(temp_directory, "blob.bin")
        payload = bytes(range(256)) * 20
        with open(original, "wb") as f:
            f.write(payload)

        written = asyncio.run(use_case.execute(session, "blob.bin", "subdir", move=True))

        assert _read(written) == payload
        assert not os.path.exists(original)

    def test_destination_is_always_a_directory(self, use_case, session, temp_directory):
        """The file keeps its base name inside the destination directory."""
        session.change_directory(os.path.join(temp_directory, "subdir"))

        written = asyncio.run(use_case.execute(session, "test3.md", ".."))

        assert written == os.path.join(temp_directory, "test3.md")

    @pytest.mark.parametrize("move", [False, True])
    def test_identical_paths(self, use_case, session, move):
        """Copying a file onto itself is rejected."""
        with pytest.raises(
            InvalidArgumentError, match="Source and destination paths are identical."
        ):
            asyncio.run(use_case.execute(session, "test1.txt", ".", move=move))

    @pytest.mark.parametrize("move,verb", [(False, "copy"), (True, "move")])
    def test_directory_source(self, use_case, session, empty_directory, move, verb):
        """Directories are rejected regardless of the move flag."""
        with pytest.raises(
            UnsupportedOperationError, match=f"Cannot {verb} a directory"
        ):
            asyncio.run(use_case.execute(session, "subdir", empty_directory, move=move))
        assert os.listdir(empty_directory) == []

    def test_missing_source(self, use_case, session, empty_directory):
        """A missing source raises NotFoundError."""
        with pytest.raises(NotFoundError):
            asyncio.run(use_case.execute(session, "missing.txt", empty_directory))

    def test_missing_destination_directory(self, use_case, session, temp_directory):
        """A missing destination directory fails and a move keeps the source."""
        with pytest.raises(FileOperationError, match="Write stream error during move"):
            asyncio.run(use_case.execute(session, "test1.txt", "nowhere", move=True))
        assert os.path.exists(os.path.join(temp_directory, "test1.txt"))

    @pytest.mark.parametrize("args", [(None, "subdir"), ("test1.txt", None)])
    def test_missing_arguments(self, use_case, session, args):
        """Both arguments are required."""
        with pytest.raises(
            InvalidArgumentError, match="Source or destination not specified."
        ):
            asyncio.run(use_case.execute(session, *args))

"""
Tests for the ListDirectoryUseCase.
"""

import asyncio
import os
from unittest.mock import MagicMock

import pytest

from system_navigator.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from system_navigator.entities.DirectoryEntry import DirectoryEntry, EntryType
from system_navigator.entities.Session import Session
from system_navigator.exceptions import FileOperationError
from system_navigator.ports.files.file_system_port import FileSystemPort
from system_navigator.use_cases.files.list_directory import ListDirectoryUseCase


class TestListDirectoryUseCase:
    """Test cases for the ListDirectoryUseCase."""

    def test_execute_sorted(self, session, temp_directory, mock_logger):
        """Folders come first, then files, each sorted by name."""
        os.mkdir(os.path.join(temp_directory, "Archive"))
        use_case = ListDirectoryUseCase(LocalFileSystemAdapter(mock_logger), mock_logger)

        entries = asyncio.run(use_case.execute(session))

        assert [(e.name, e.entry_type) for e in entries] == [
            ("Archive", EntryType.FOLDER),
            ("subdir", EntryType.FOLDER),
            ("test1.txt", EntryType.FILE),
            ("test2.py", EntryType.FILE),
        ]
        mock_logger.info.assert_any_call(f"Listing directory: {temp_directory}")
        mock_logger.info.assert_any_call("Found 4 entries")

    def test_execute_mixed_case_names(self, empty_directory, mock_logger):
        """Upper- and lowercase names interleave alphabetically."""
        for name in ("b.txt", "C.txt", "a.txt"):
            open(os.path.join(empty_directory, name), "w").close()
        for name in ("docs", "Bin"):
            os.mkdir(os.path.join(empty_directory, name))
        use_case = ListDirectoryUseCase(LocalFileSystemAdapter(mock_logger), mock_logger)

        entries = asyncio.run(use_case.execute(Session(empty_directory)))

        assert [e.name for e in entries] == ["Bin", "docs", "a.txt", "b.txt", "C.txt"]

    def test_execute_empty_directory(self, empty_directory, mock_logger):
        """An empty directory yields no entries."""
        use_case = ListDirectoryUseCase(LocalFileSystemAdapter(mock_logger), mock_logger)

        assert asyncio.run(use_case.execute(Session(empty_directory))) == []

    def test_execute_uses_session_directory(self, session, temp_directory, mock_logger):
        """The port is asked for the session's current directory."""
        repository = MagicMock(spec=FileSystemPort)
        repository.list_entries.return_value = [DirectoryEntry("a", EntryType.FILE)]
        session.change_directory(os.path.join(temp_directory, "subdir"))

        asyncio.run(ListDirectoryUseCase(repository, mock_logger).execute(session))

        repository.list_entries.assert_called_once_with(
            os.path.join(temp_directory, "subdir")
        )

    def test_execute_unexpected_error(self, session, mock_logger):
        """Unexpected errors are wrapped in FileOperationError."""
        repository = MagicMock(spec=FileSystemPort)
        repository.list_entries.side_effect = RuntimeError("Unexpected error")

        with pytest.raises(FileOperationError, match="Failed to list"):
            asyncio.run(ListDirectoryUseCase(repository, mock_logger).execute(session))
        mock_logger.error.assert_called_once_with(
            "Error listing directory: Unexpected error"
        )

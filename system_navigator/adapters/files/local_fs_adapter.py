"""
Local file system adapter implementation for file operations.
"""

import logging
import os
import stat
from typing import BinaryIO, NoReturn, TextIO

from typing_extensions import override

from system_navigator.entities.DirectoryEntry import DirectoryEntry, EntryType
from system_navigator.exceptions import (
    AlreadyExistsError,
    FileOperationError,
    NotFoundError,
)
from system_navigator.ports.files.file_system_port import FileSystemPort


class LocalFileSystemAdapter(FileSystemPort):
    """Local file system implementation of the file system port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _raise_translated(self, error: OSError, action: str, path: str) -> NoReturn:
        """
        Re-raise an OSError as the matching navigator error.

        Args:
            error: Error raised by the operating system
            action: Short verb phrase naming the failed primitive
            path: Path the primitive was applied to

        Raises:
            NotFoundError, AlreadyExistsError or FileOperationError
        """
        reason = error.strerror or str(error)
        message = f"{reason}, {action} '{path}'"
        self._logger.debug(f"OS error during {action} on {path}: {error!r}")
        if isinstance(error, FileNotFoundError):
            raise NotFoundError(message) from error
        if isinstance(error, FileExistsError):
            raise AlreadyExistsError(message) from error
        raise FileOperationError(message) from error

    def _classify(self, entry: os.DirEntry) -> EntryType:
        """Classify a scandir entry without following symlinks."""
        try:
            if entry.is_dir(follow_symlinks=False):
                return EntryType.FOLDER
            if entry.is_file(follow_symlinks=False):
                return EntryType.FILE
        except OSError as e:
            # Log the error but keep the entry visible
            self._logger.warning(f"Could not classify {entry.path}: {e}")
        return EntryType.OTHER

    @override
    def is_directory(self, path: str) -> bool:
        try:
            return stat.S_ISDIR(os.stat(path).st_mode)
        except OSError as e:
            self._raise_translated(e, "stat", path)

    @override
    def list_entries(self, directory: str) -> list[DirectoryEntry]:
        try:
            with os.scandir(directory) as it:
                return [DirectoryEntry(e.name, self._classify(e)) for e in it]
        except OSError as e:
            self._raise_translated(e, "scandir", directory)

    @override
    def open_text(self, path: str) -> TextIO:
        try:
            return open(path, "r", encoding="utf-8", errors="replace", newline="")
        except OSError as e:
            self._raise_translated(e, "open", path)

    @override
    def open_binary_read(self, path: str) -> BinaryIO:
        try:
            return open(path, "rb")
        except OSError as e:
            self._raise_translated(e, "open", path)

    @override
    def open_binary_write(self, path: str) -> BinaryIO:
        try:
            return open(path, "wb")
        except OSError as e:
            self._raise_translated(e, "open", path)

    @override
    def create_empty(self, path: str) -> None:
        try:
            with open(path, "x", encoding="utf-8"):
                pass
        except OSError as e:
            self._raise_translated(e, "open", path)
        self._logger.info(f"Created empty file: {path}")

    @override
    def rename(self, source: str, destination: str) -> None:
        try:
            os.rename(source, destination)
        except OSError as e:
            self._raise_translated(e, "rename", f"{source}' -> '{destination}")
        self._logger.info(f"Renamed {source} to {destination}")

    @override
    def remove(self, path: str) -> None:
        try:
            if os.path.isdir(path) and not os.path.islink(path):
                os.rmdir(path)
            else:
                os.remove(path)
        except OSError as e:
            self._raise_translated(e, "remove", path)
        self._logger.info(f"Removed {path}")

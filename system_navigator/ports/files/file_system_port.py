"""
File system port interface defining the contract for file operations.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO, TextIO

from system_navigator.entities.DirectoryEntry import DirectoryEntry


class FileSystemPort(ABC):
    """Port interface for blocking filesystem primitives.

    Every path handed to this port is already absolute.
    """

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        """
        Check whether an existing path is a directory.

        Args:
            path: Absolute path to query

        Returns:
            True if the path is a directory

        Raises:
            NotFoundError: If nothing exists at the path
        """
        pass

    @abstractmethod
    def list_entries(self, directory: str) -> list[DirectoryEntry]:
        """
        List the entries of a directory, unsorted.

        Args:
            directory: Absolute path of the directory

        Returns:
            List of DirectoryEntry entities

        Raises:
            FileOperationError: If listing fails
        """
        pass

    @abstractmethod
    def open_text(self, path: str) -> TextIO:
        """
        Open a file for streamed UTF-8 reading.

        Args:
            path: Absolute path of the file

        Returns:
            A text stream; the caller closes it
        """
        pass

    @abstractmethod
    def open_binary_read(self, path: str) -> BinaryIO:
        """Open a file for streamed binary reading; the caller closes it."""
        pass

    @abstractmethod
    def open_binary_write(self, path: str) -> BinaryIO:
        """Open (truncating or creating) a file for binary writing; the caller closes it."""
        pass

    @abstractmethod
    def create_empty(self, path: str) -> None:
        """
        Create an empty file, failing if anything already exists there.

        Args:
            path: Absolute path of the new file

        Raises:
            AlreadyExistsError: If the path is taken
        """
        pass

    @abstractmethod
    def rename(self, source: str, destination: str) -> None:
        """Rename source to destination."""
        pass

    @abstractmethod
    def remove(self, path: str) -> None:
        """
        Remove a file or an empty directory with a single call.

        Raises:
            NotFoundError: If nothing exists at the path
            FileOperationError: If removal fails
        """
        pass

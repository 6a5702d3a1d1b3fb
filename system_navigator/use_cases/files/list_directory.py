"""
Use case for listing the current directory.
"""

import asyncio
import logging
from typing import Optional

from system_navigator.entities.DirectoryEntry import DirectoryEntry
from system_navigator.entities.Session import Session
from system_navigator.exceptions import FileOperationError, NavigatorError
from system_navigator.ports.files.file_system_port import FileSystemPort


class ListDirectoryUseCase:
    """Use case for the ``ls`` command."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_system: Port for filesystem operations
            logger: Logger instance to use for logging
        """
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    async def execute(self, session: Session) -> list[DirectoryEntry]:
        """
        List the entries of the session's current directory.

        Args:
            session: Session whose current directory is listed

        Returns:
            Entries with folders first, each group sorted by name

        Raises:
            FileOperationError: If listing fails
        """
        directory = session.current_directory
        try:
            self._logger.info(f"Listing directory: {directory}")
            entries = await asyncio.to_thread(self._file_system.list_entries, directory)
            self._logger.info(f"Found {len(entries)} entries")
            return sorted(entries, key=DirectoryEntry.sort_key)
        except NavigatorError:
            raise
        except Exception as e:
            self._logger.error(f"Error listing directory: {e}")
            raise FileOperationError(f"Failed to list {directory}: {str(e)}")

"""
Use case for changing the session's current directory.
"""

import asyncio
import logging
from typing import Optional

from system_navigator.entities.Session import Session
from system_navigator.exceptions import (
    FileOperationError,
    InvalidArgumentError,
    NavigatorError,
)
from system_navigator.ports.files.file_system_port import FileSystemPort


class ChangeDirectoryUseCase:
    """Use case for the ``cd`` command."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_system: Port for filesystem metadata queries
            logger: Logger instance to use for logging
        """
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    async def execute(self, session: Session, destination: Optional[str]) -> str:
        """
        Change the current directory of the session.

        Args:
            session: Session to mutate
            destination: Relative or absolute target path

        Returns:
            The new current directory

        Raises:
            InvalidArgumentError: If no destination is given
            NotFoundError: If the destination does not exist
            FileOperationError: If the destination is not a directory
        """
        if not destination:
            raise InvalidArgumentError("Directory path not specified.")

        target = session.resolve(destination)
        try:
            self._logger.info(f"Changing directory to: {target}")
            if not await asyncio.to_thread(self._file_system.is_directory, target):
                raise FileOperationError(f"Not a directory: {target}")
        except NavigatorError:
            raise
        except Exception as e:
            self._logger.error(f"Error changing directory: {e}")
            raise FileOperationError(f"Failed to change directory to {target}: {e}")

        session.change_directory(target)
        return session.current_directory

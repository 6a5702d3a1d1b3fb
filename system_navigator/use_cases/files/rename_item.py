"""
Use case for renaming an item inside its containing directory.
"""

import asyncio
import logging
import os
from typing import Optional

from system_navigator.entities.Session import Session
from system_navigator.exceptions import InvalidArgumentError
from system_navigator.ports.files.file_system_port import FileSystemPort


class RenameItemUseCase:
    """Use case for the ``rn`` command."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    @staticmethod
    def target_path(source: str, new_name: str) -> str:
        """
        Join the new name onto the source's parent directory.

        A leading separator in the new name does not escape the parent.
        """
        parent = os.path.dirname(source)
        return os.path.normpath(parent + os.sep + new_name)

    async def execute(
        self, session: Session, current_path: Optional[str], new_name: Optional[str]
    ) -> tuple[str, str]:
        """
        Rename an item, keeping it in the same parent directory.

        Args:
            session: Session used to resolve the source path
            current_path: Relative or absolute path of the item
            new_name: New name fragment, joined with the item's parent

        Returns:
            Tuple of (source, destination) absolute paths

        Raises:
            InvalidArgumentError: If either argument is missing
            NotFoundError: If the source does not exist
            FileOperationError: If the rename fails otherwise
        """
        if not current_path or not new_name:
            raise InvalidArgumentError("Original path or new name not specified.")

        source = session.resolve(current_path)
        destination = self.target_path(source, new_name)
        self._logger.info(f"Renaming {source} to {destination}")
        await asyncio.to_thread(self._file_system.rename, source, destination)
        return source, destination

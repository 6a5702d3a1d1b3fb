"""
Use case for creating a new empty file.
"""

import asyncio
import logging
from typing import Optional

from system_navigator.entities.Session import Session
from system_navigator.exceptions import InvalidArgumentError
from system_navigator.ports.files.file_system_port import FileSystemPort


class CreateFileUseCase:
    """Use case for the ``add`` command."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    async def execute(self, session: Session, file_name: Optional[str]) -> str:
        """
        Create an empty file without overwriting anything.

        Raises:
            InvalidArgumentError: If no name is given
            AlreadyExistsError: If the path is already taken
        """
        if not file_name:
            raise InvalidArgumentError("File name not specified.")

        path = session.resolve(file_name)
        self._logger.info(f"Creating file: {path}")
        await asyncio.to_thread(self._file_system.create_empty, path)
        return path

"""
Use case for deleting a file or an empty directory.
"""

import asyncio
import logging
from typing import Optional

from system_navigator.entities.Session import Session
from system_navigator.exceptions import InvalidArgumentError
from system_navigator.ports.files.file_system_port import FileSystemPort


class RemoveItemUseCase:
    """Use case for the ``rm`` command."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    async def execute(self, session: Session, item_path: Optional[str]) -> str:
        if not item_path:
            raise InvalidArgumentError("Item path not specified.")

        path = session.resolve(item_path)
        self._logger.info(f"Removing: {path}")
        await asyncio.to_thread(self._file_system.remove, path)
        return path

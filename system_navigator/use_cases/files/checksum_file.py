"""
Use case for computing a file's SHA-256 digest.
"""

import asyncio
import hashlib
import logging
from typing import Optional

from system_navigator.config.settings import DEFAULT_CHUNK_SIZE
from system_navigator.entities.Session import Session
from system_navigator.exceptions import FileOperationError, InvalidArgumentError
from system_navigator.ports.files.file_system_port import FileSystemPort


class ChecksumFileUseCase:
    """Use case for the ``hash`` command."""

    def __init__(
        self,
        file_system: FileSystemPort,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._chunk_size = chunk_size
        self._logger = logger or logging.getLogger(__name__)

    def _digest(self, path: str) -> str:
        digest = hashlib.sha256()
        with self._file_system.open_binary_read(path) as reader:
            while chunk := reader.read(self._chunk_size):
                digest.update(chunk)
        return digest.hexdigest()

    async def execute(self, session: Session, resource_path: Optional[str]) -> str:
        """
        Stream a file through SHA-256.

        Returns:
            Lowercase hexadecimal digest

        Raises:
            InvalidArgumentError: If no path is given
            FileOperationError: If the file cannot be read
        """
        if not resource_path:
            raise InvalidArgumentError("Resource path not specified.")

        path = session.resolve(resource_path)
        try:
            self._logger.info(f"Hashing file: {path}")
            return await asyncio.to_thread(self._digest, path)
        except Exception as e:
            self._logger.info(f"Error hashing {path}: {e}")
            raise FileOperationError(f"Error during hash calculation: {e}") from e

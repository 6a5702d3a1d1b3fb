"""
Use case for streaming a file's text content to an output callback.
"""

import asyncio
import logging
from typing import Callable, Optional

from system_navigator.config.settings import DEFAULT_CHUNK_SIZE
from system_navigator.entities.Session import Session
from system_navigator.exceptions import FileOperationError, InvalidArgumentError
from system_navigator.ports.files.file_system_port import FileSystemPort


class ReadFileUseCase:
    """Use case for the ``cat`` command."""

    def __init__(
        self,
        file_system: FileSystemPort,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_system: Port for filesystem operations
            chunk_size: Number of characters read per chunk
            logger: Logger instance to use for logging
        """
        self._file_system = file_system
        self._chunk_size = chunk_size
        self._logger = logger or logging.getLogger(__name__)

    async def execute(
        self, session: Session, resource_path: Optional[str], write: Callable[[str], None]
    ) -> None:
        """
        Stream a file chunk by chunk, then a trailing newline.

        Output written before a failure is left in place.

        Args:
            session: Session used to resolve the path
            resource_path: Relative or absolute file path
            write: Callback receiving each decoded chunk

        Raises:
            InvalidArgumentError: If no path is given
            FileOperationError: If opening or reading fails
        """
        if not resource_path:
            raise InvalidArgumentError("Resource path not specified.")

        path = session.resolve(resource_path)
        self._logger.info(f"Streaming file: {path}")
        try:
            stream = await asyncio.to_thread(self._file_system.open_text, path)
            try:
                while chunk := await asyncio.to_thread(stream.read, self._chunk_size):
                    write(chunk)
            finally:
                stream.close()
        except Exception as e:
            self._logger.info(f"Error reading {path}: {e}")
            raise FileOperationError(f"Error reading resource: {e}") from e
        write("\n")

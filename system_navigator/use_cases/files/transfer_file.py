"""
Use case for copying or moving a single file into a directory.
"""

import asyncio
import logging
import os
from typing import Optional

from system_navigator.config.settings import DEFAULT_CHUNK_SIZE
from system_navigator.entities.Session import Session
from system_navigator.exceptions import (
    FileOperationError,
    InvalidArgumentError,
    UnsupportedOperationError,
)
from system_navigator.ports.files.file_system_port import FileSystemPort


class TransferFileUseCase:
    """Use case shared by the ``cp`` and ``mv`` commands."""

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
            chunk_size: Number of bytes copied per chunk
            logger: Logger instance to use for logging
        """
        self._file_system = file_system
        self._chunk_size = chunk_size
        self._logger = logger or logging.getLogger(__name__)

    def _copy_stream(self, source: str, destination: str, verb: str) -> None:
        """Byte-for-byte streamed copy; both files are closed on return."""
        with self._file_system.open_binary_read(source) as reader:
            try:
                writer = self._file_system.open_binary_write(destination)
            except Exception as e:
                raise FileOperationError(
                    f"Write stream error during {verb}: {e}"
                ) from e
            with writer:
                while True:
                    try:
                        chunk = reader.read(self._chunk_size)
                    except OSError as e:
                        raise FileOperationError(
                            f"Read stream error during {verb}: {e}"
                        ) from e
                    if not chunk:
                        break
                    try:
                        writer.write(chunk)
                    except OSError as e:
                        raise FileOperationError(
                            f"Write stream error during {verb}: {e}"
                        ) from e

    async def execute(
        self,
        session: Session,
        source: Optional[str],
        destination_directory: Optional[str],
        move: bool = False,
    ) -> str:
        """
        Copy a file into a directory, deleting the source afterwards when moving.

        The destination argument always names the containing directory; the
        file keeps its base name.

        Args:
            session: Session used to resolve both paths
            source: Relative or absolute path of the file
            destination_directory: Directory receiving the file
            move: Delete the source after a successful copy

        Returns:
            Absolute path of the written file

        Raises:
            InvalidArgumentError: If an argument is missing or both paths are identical
            NotFoundError: If the source does not exist
            UnsupportedOperationError: If the source is a directory
            FileOperationError: If reading, writing or deleting fails
        """
        if not source or not destination_directory:
            raise InvalidArgumentError("Source or destination not specified.")

        verb = "move" if move else "copy"
        source_path = session.resolve(source)
        item_name = os.path.basename(source_path)
        destination_path = os.path.join(
            session.resolve(destination_directory), item_name
        )

        if source_path == destination_path:
            raise InvalidArgumentError("Source and destination paths are identical.")

        if await asyncio.to_thread(self._file_system.is_directory, source_path):
            raise UnsupportedOperationError(
                f"Cannot {verb} a directory with this command."
            )

        self._logger.info(f"Starting {verb}: {source_path} -> {destination_path}")
        try:
            await asyncio.to_thread(
                self._copy_stream, source_path, destination_path, verb
            )
        except FileOperationError:
            raise
        except Exception as e:
            self._logger.error(f"Error during {verb}: {e}")
            raise FileOperationError(f"Read stream error during {verb}: {e}") from e

        if move:
            await asyncio.to_thread(self._file_system.remove, source_path)
        self._logger.info(f"Finished {verb}: {destination_path}")
        return destination_path

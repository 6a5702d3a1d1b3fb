"""
Use case for Brotli compression and decompression of files.
"""

import asyncio
import logging
from enum import Enum
from typing import BinaryIO, Optional

import brotli

from system_navigator.config.settings import DEFAULT_CHUNK_SIZE
from system_navigator.entities.Session import Session
from system_navigator.exceptions import FileOperationError, InvalidArgumentError
from system_navigator.ports.files.file_system_port import FileSystemPort


class TransformMode(str, Enum):
    ENCODE = "encode"
    DECODE = "decode"

    @property
    def past_tense(self) -> str:
        return "compressed" if self is TransformMode.ENCODE else "decompressed"


class BrotliTransformUseCase:
    """Use case for the ``compress`` and ``decompress`` commands."""

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
            chunk_size: Number of bytes fed to the codec per chunk
            logger: Logger instance to use for logging
        """
        self._file_system = file_system
        self._chunk_size = chunk_size
        self._logger = logger or logging.getLogger(__name__)

    def _read(self, reader: BinaryIO, mode: TransformMode) -> bytes:
        try:
            return reader.read(self._chunk_size)
        except OSError as e:
            raise FileOperationError(
                f"Read stream error during Brotli {mode.value}: {e}"
            ) from e

    def _write(self, writer: BinaryIO, data: bytes, mode: TransformMode) -> None:
        if not data:
            return
        try:
            writer.write(data)
        except OSError as e:
            raise FileOperationError(
                f"Write stream error during Brotli {mode.value}: {e}"
            ) from e

    def _encode(self, reader: BinaryIO, writer: BinaryIO) -> None:
        compressor = brotli.Compressor()
        while chunk := self._read(reader, TransformMode.ENCODE):
            self._write(writer, compressor.process(chunk), TransformMode.ENCODE)
        self._write(writer, compressor.finish(), TransformMode.ENCODE)

    def _decode(self, reader: BinaryIO, writer: BinaryIO) -> None:
        decompressor = brotli.Decompressor()
        try:
            while chunk := self._read(reader, TransformMode.DECODE):
                self._write(writer, decompressor.process(chunk), TransformMode.DECODE)
            if not decompressor.is_finished():
                raise brotli.error("unexpected end of file")
        except brotli.error as e:
            raise FileOperationError(
                f"Brotli stream error during {TransformMode.DECODE.value}: {e}"
            ) from e

    def _transform(self, source: str, target: str, mode: TransformMode) -> None:
        with self._file_system.open_binary_read(source) as reader:
            try:
                writer = self._file_system.open_binary_write(target)
            except Exception as e:
                raise FileOperationError(
                    f"Write stream error during Brotli {mode.value}: {e}"
                ) from e
            with writer:
                if mode is TransformMode.ENCODE:
                    self._encode(reader, writer)
                else:
                    self._decode(reader, writer)

    async def execute(
        self,
        session: Session,
        source_path: Optional[str],
        target_path: Optional[str],
        mode: TransformMode,
    ) -> tuple[str, str]:
        """
        Stream the source file through the Brotli codec into the target file.

        A partially written target is left in place on failure.

        Returns:
            Tuple of (source, target) absolute paths

        Raises:
            InvalidArgumentError: If either path is missing
            FileOperationError: If reading, transforming or writing fails
        """
        if not source_path or not target_path:
            raise InvalidArgumentError(
                "Source or target path not specified for transformation."
            )

        source = session.resolve(source_path)
        target = session.resolve(target_path)
        try:
            self._logger.info(f"Brotli {mode.value}: {source} -> {target}")
            await asyncio.to_thread(self._transform, source, target, mode)
        except FileOperationError:
            raise
        except Exception as e:
            self._logger.info(f"Error during Brotli {mode.value}: {e}")
            raise FileOperationError(
                f"Read stream error during Brotli {mode.value}: {e}"
            ) from e
        return source, target

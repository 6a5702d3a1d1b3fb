"""
Line reader for non-interactive input such as a pipe or a file.
"""

import asyncio
import logging
import sys
from typing import Optional, TextIO

from typing_extensions import override

from system_navigator.ports.console.line_reader_port import LineReaderPort


class StreamLineReader(LineReaderPort):
    """Reads lines from a text stream on a worker thread."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        output: Optional[TextIO] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._stream = stream or sys.stdin
        self._output = output or sys.stdout
        self._logger = logger or logging.getLogger(__name__)

    @override
    async def read_line(self, prompt: str) -> Optional[str]:
        self._output.write(prompt)
        self._output.flush()
        line = await asyncio.to_thread(self._stream.readline)
        if not line:
            self._logger.info("Input stream closed")
            return None
        return line.rstrip("\r\n")

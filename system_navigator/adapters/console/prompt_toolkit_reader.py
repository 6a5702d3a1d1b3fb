"""
Interactive line reader built on prompt_toolkit.
"""

import logging
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory, History, InMemoryHistory
from typing_extensions import override

from system_navigator.ports.console.line_reader_port import LineReaderPort


class PromptToolkitLineReader(LineReaderPort):
    """Line reader for interactive terminals with history and line editing."""

    def __init__(
        self,
        history_file: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._logger = logger or logging.getLogger(__name__)
        history: History = (
            FileHistory(history_file) if history_file else InMemoryHistory()
        )
        self._session: PromptSession[str] = PromptSession(history=history)

    @override
    async def read_line(self, prompt: str) -> Optional[str]:
        try:
            return await self._session.prompt_async(prompt)
        except (EOFError, KeyboardInterrupt):
            # Ctrl-D / Ctrl-C close the input like a closed stdin
            self._logger.info("Interactive input closed")
            return None

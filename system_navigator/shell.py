"""
Read-eval-print loop of the navigator.
"""

import logging
from typing import Optional

from system_navigator.adapters.console.console_output import ConsoleOutput
from system_navigator.commands.registry import CommandRegistry
from system_navigator.entities.Session import Session
from system_navigator.exceptions import UnknownCommandError
from system_navigator.ports.console.line_reader_port import LineReaderPort

PROMPT = "> "
BANNER = "\n===== Advanced System Navigator Activated =====\n"
SESSION_ENDED_MESSAGE = "\nAdvanced System Navigator session ended."
UNKNOWN_COMMAND_WARNING = "Warning: Unknown operation entered. Please try a valid command."


class NavigatorShell:
    """Reads one line at a time and runs it to completion before reading the next.

    A failing command never ends the session; only ``.exit`` (SystemExit) and the
    end of input do.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        session: Session,
        reader: LineReaderPort,
        output: ConsoleOutput,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._registry = registry
        self._session = session
        self._reader = reader
        self._output = output
        self._logger = logger or logging.getLogger(__name__)

    @property
    def session(self) -> Session:
        return self._session

    def display_location(self) -> None:
        self._output.info(f"\n[Current Location]: {self._session.current_directory}")

    async def handle_line(self, line: str) -> None:
        """
        Run one input line, then show the current location again.

        Args:
            line: Raw line as read from the user
        """
        trimmed = line.strip()
        if trimmed:
            name, *args = trimmed.split()
            try:
                await self._registry.dispatch(name, args, self._session)
            except UnknownCommandError:
                self._logger.info(f"Unknown command: {name}")
                self._output.warning(UNKNOWN_COMMAND_WARNING)
            except Exception as e:
                self._logger.info(f"Command {name} failed: {e}")
                self._logger.debug("Command failure details", exc_info=True)
                self._output.error(f"Error: Operation failed. Details - {e}")
        self.display_location()

    async def run(self, show_banner: bool = True) -> int:
        """
        Loop until the input is closed.

        Returns:
            Process exit code
        """
        if show_banner:
            self._output.info(BANNER)
        self.display_location()
        while True:
            line = await self._reader.read_line(PROMPT)
            if line is None:
                self._output.info(SESSION_ENDED_MESSAGE)
                return 0
            await self.handle_line(line)

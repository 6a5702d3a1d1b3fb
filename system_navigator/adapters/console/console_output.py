"""
Console output adapter rendering navigator messages with rich.
"""

from typing import Any, Mapping, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table


class ConsoleOutput:
    """User-visible output of the shell.

    Status lines and tables go to stdout; warnings and errors go to stderr.
    User-supplied text is never interpreted as rich markup.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
    ) -> None:
        self._console = console or Console(soft_wrap=True)
        self._error_console = error_console or Console(stderr=True, soft_wrap=True)

    def info(self, message: str) -> None:
        self._console.print(message, markup=False, highlight=False)

    def warning(self, message: str) -> None:
        self._error_console.print(
            message, style="yellow", markup=False, highlight=False
        )

    def error(self, message: str) -> None:
        self._error_console.print(message, style="red", markup=False, highlight=False)

    def table(self, rows: Sequence[Mapping[str, Any]]) -> None:
        """Render rows as an indexed table, one column per key of the first row."""
        if not rows:
            return
        table = Table(box=box.SQUARE, show_lines=False)
        table.add_column("(index)", justify="right")
        columns = list(rows[0].keys())
        for column in columns:
            table.add_column(column)
        for index, row in enumerate(rows):
            table.add_row(str(index), *(str(row.get(c, "")) for c in columns))
        self._console.print(table)

    def write_raw(self, chunk: str) -> None:
        """Write streamed content untouched, as it arrives."""
        stream = self._console.file
        stream.write(chunk)
        stream.flush()

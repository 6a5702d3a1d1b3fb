"""
Line reader port interface.
"""

from abc import ABC, abstractmethod
from typing import Optional


class LineReaderPort(ABC):
    """Port interface for reading one line of user input at a time."""

    @abstractmethod
    async def read_line(self, prompt: str) -> Optional[str]:
        """
        Display the prompt and wait for the next line.

        Args:
            prompt: Prompt text shown before the cursor

        Returns:
            The line without its trailing newline, or None once input is closed
        """
        pass

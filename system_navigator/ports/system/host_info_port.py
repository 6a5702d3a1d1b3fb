"""
Host information port interface.
"""

from abc import ABC, abstractmethod
from typing import TypedDict


class CpuCore(TypedDict):
    """Model and clock speed of one logical CPU core."""

    model: str
    speed_mhz: int


class HostInfoPort(ABC):
    """Port interface for queries about the host operating system."""

    @abstractmethod
    def end_of_line(self) -> str:
        """Platform line-ending sequence."""
        pass

    @abstractmethod
    def cpus(self) -> list[CpuCore]:
        """One record per logical core."""
        pass

    @abstractmethod
    def home_directory(self) -> str:
        """Home directory of the current OS user."""
        pass

    @abstractmethod
    def username(self) -> str:
        """Name of the current OS user."""
        pass

    @abstractmethod
    def architecture(self) -> str:
        """CPU architecture string."""
        pass

"""
Directory entry domain entity.
"""

from dataclasses import dataclass
from enum import Enum


class EntryType(str, Enum):
    """Classification of a directory entry as shown by ``ls``."""

    FOLDER = "Folder"
    FILE = "File"
    OTHER = "Other"


@dataclass(frozen=True)
class DirectoryEntry:
    name: str
    entry_type: EntryType

    @property
    def is_folder(self) -> bool:
        return self.entry_type is EntryType.FOLDER

    def sort_key(self) -> tuple[int, str, str]:
        # Folders first, then files and other entries together. Names compare
        # case-insensitively; on a tie lowercase sorts before uppercase.
        return (0 if self.is_folder else 1, self.name.casefold(), self.name.swapcase())

    def get_details(self) -> dict[str, str]:
        return {"Name": self.name, "Type": self.entry_type.value}

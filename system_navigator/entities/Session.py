"""
Session domain entity.
"""

import os

from system_navigator.exceptions import HomeDirectoryError


class Session:
    """
    The single mutable record of the shell: where the user currently is.

    Every path argument is resolved against ``current_directory``; the process
    working directory is never consulted.
    """

    def __init__(self, home_directory: str):
        """
        Initialize the session at its home directory.

        Args:
            home_directory: Directory the session starts in and cannot ascend above

        Raises:
            HomeDirectoryError: If the home directory is unusable
        """
        if not home_directory or not isinstance(home_directory, str):
            raise HomeDirectoryError("Home directory must be a non-empty string")

        home = os.path.abspath(home_directory)
        if not os.path.exists(home):
            raise HomeDirectoryError(f"Home directory does not exist: {home}")
        if not os.path.isdir(home):
            raise HomeDirectoryError(f"Home directory is not a directory: {home}")

        self.home_directory = home
        self.current_directory = home

    def resolve(self, raw_path: str) -> str:
        """
        Resolve a user-supplied path against the current directory.

        Absolute inputs are only normalized.

        Args:
            raw_path: Relative or absolute path as typed by the user

        Returns:
            Absolute, normalized path
        """
        return os.path.normpath(os.path.join(self.current_directory, raw_path))

    def is_at_home(self) -> bool:
        """Check whether the current directory is the home directory."""
        return os.path.normpath(self.current_directory) == self.home_directory

    def change_directory(self, absolute_path: str) -> None:
        """Move the session to an already resolved absolute path."""
        self.current_directory = os.path.normpath(absolute_path)

    def __repr__(self) -> str:
        return (
            f"Session(home_directory='{self.home_directory}', "
            f"current_directory='{self.current_directory}')"
        )

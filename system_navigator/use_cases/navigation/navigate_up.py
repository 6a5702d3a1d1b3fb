"""
Use case for moving to the parent directory, bounded at home.
"""

import logging
import os
from typing import Optional

from system_navigator.entities.Session import Session


class NavigateUpUseCase:
    """Use case for the ``up`` command."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the use case.

        Args:
            logger: Logger instance to use for logging
        """
        self._logger = logger or logging.getLogger(__name__)

    async def execute(self, session: Session) -> bool:
        """
        Move the session one level up unless it sits at its home directory.

        Args:
            session: Session to mutate

        Returns:
            True if the session moved, False if it was already at home
        """
        if session.is_at_home():
            self._logger.info("Refusing to ascend above home directory")
            return False
        parent = os.path.dirname(session.current_directory)
        session.change_directory(parent)
        self._logger.info(f"Moved up to: {parent}")
        return True

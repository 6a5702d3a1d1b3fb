"""
Command registry mapping command names to their handlers.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Optional, Sequence

from system_navigator.entities.Session import Session
from system_navigator.exceptions import UnknownCommandError


class CommandKind(str, Enum):
    """Every command name the shell understands."""

    UP = "up"
    CD = "cd"
    LS = "ls"
    CAT = "cat"
    ADD = "add"
    RN = "rn"
    CP = "cp"
    MV = "mv"
    RM = "rm"
    OS = "os"
    HASH = "hash"
    COMPRESS = "compress"
    DECOMPRESS = "decompress"
    EXIT = ".exit"


CommandHandler = Callable[[Sequence[str], Session], Awaitable[None]]


@dataclass(frozen=True)
class CommandSpec:
    """Binds a command kind to the handler that runs it."""

    kind: CommandKind
    handler: CommandHandler


class CommandRegistry:
    """Looks up command names and dispatches to the registered handler."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._specs: dict[CommandKind, CommandSpec] = {}
        self._logger = logger or logging.getLogger(__name__)

    def register(self, spec: CommandSpec) -> None:
        if spec.kind in self._specs:
            raise ValueError(f"Command already registered: {spec.kind.value}")
        self._specs[spec.kind] = spec

    def register_all(self, specs: Sequence[CommandSpec]) -> None:
        for spec in specs:
            self.register(spec)

    def lookup(self, name: str) -> CommandSpec:
        """
        Find the spec registered for a command name.

        Raises:
            UnknownCommandError: If the name is not a registered command
        """
        try:
            kind = CommandKind(name)
        except ValueError:
            raise UnknownCommandError(f"Unknown operation: {name}")
        spec = self._specs.get(kind)
        if spec is None:
            raise UnknownCommandError(f"Unknown operation: {name}")
        return spec

    async def dispatch(self, name: str, args: Sequence[str], session: Session) -> None:
        spec = self.lookup(name)
        self._logger.debug(f"Dispatching {spec.kind.value} with args {list(args)}")
        await spec.handler(args, session)

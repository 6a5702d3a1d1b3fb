"""
Dependency injection container for managing navigator dependencies.
"""

import logging
import sys
from typing import Any, Optional

from system_navigator.adapters.console.console_output import ConsoleOutput
from system_navigator.adapters.console.prompt_toolkit_reader import (
    PromptToolkitLineReader,
)
from system_navigator.adapters.console.stream_reader import StreamLineReader
from system_navigator.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from system_navigator.adapters.system.local_host_info_adapter import (
    LocalHostInfoAdapter,
)
from system_navigator.commands.handlers import NavigatorCommands
from system_navigator.commands.registry import CommandRegistry
from system_navigator.config.settings import Settings
from system_navigator.entities.Session import Session
from system_navigator.ports.console.line_reader_port import LineReaderPort
from system_navigator.ports.files.file_system_port import FileSystemPort
from system_navigator.ports.system.host_info_port import HostInfoPort
from system_navigator.shell import NavigatorShell
from system_navigator.use_cases.files.brotli_transform import BrotliTransformUseCase
from system_navigator.use_cases.files.checksum_file import ChecksumFileUseCase
from system_navigator.use_cases.files.create_file import CreateFileUseCase
from system_navigator.use_cases.files.list_directory import ListDirectoryUseCase
from system_navigator.use_cases.files.read_file import ReadFileUseCase
from system_navigator.use_cases.files.remove_item import RemoveItemUseCase
from system_navigator.use_cases.files.rename_item import RenameItemUseCase
from system_navigator.use_cases.files.transfer_file import TransferFileUseCase
from system_navigator.use_cases.navigation.change_directory import (
    ChangeDirectoryUseCase,
)
from system_navigator.use_cases.navigation.navigate_up import NavigateUpUseCase
from system_navigator.use_cases.system.host_info import HostInfoUseCase


class DependencyContainer:
    """
    Container for managing navigator dependencies using dependency injection.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._instances: dict[str, Any] = {}
        self._settings = settings
        self._logger = logging.getLogger(__name__)

    def _get(self, key: str, factory: Any) -> Any:
        if key not in self._instances:
            self._instances[key] = factory()
        return self._instances[key]

    def get_settings(self) -> Settings:
        """
        Get navigator settings.

        Returns:
            Settings loaded from the environment unless injected

        Raises:
            ConfigurationError: If the environment holds invalid values
        """
        if self._settings is None:
            self._settings = Settings()
        return self._settings

    def get_file_system(self) -> FileSystemPort:
        return self._get("file_system", lambda: LocalFileSystemAdapter(self._logger))

    def get_host_info(self) -> HostInfoPort:
        return self._get("host_info", lambda: LocalHostInfoAdapter(self._logger))

    def get_output(self) -> ConsoleOutput:
        return self._get("output", ConsoleOutput)

    def get_session(self) -> Session:
        """
        Get the session, created at the configured home directory.

        Raises:
            HomeDirectoryError: If the home directory is unusable
        """
        return self._get(
            "session", lambda: Session(self.get_settings().home_directory)
        )

    def get_line_reader(self) -> LineReaderPort:
        """
        Get the line reader: prompt_toolkit on a terminal, plain stdin otherwise.
        """
        if "line_reader" not in self._instances:
            if sys.stdin.isatty():
                reader: LineReaderPort = PromptToolkitLineReader(
                    self.get_settings().history_file, self._logger
                )
            else:
                reader = StreamLineReader(logger=self._logger)
            self._instances["line_reader"] = reader
        return self._instances["line_reader"]

    def get_commands(self) -> NavigatorCommands:
        """
        Get the command handlers with every use case injected.
        """
        if "commands" not in self._instances:
            fs = self.get_file_system()
            chunk_size = self.get_settings().chunk_size
            self._instances["commands"] = NavigatorCommands(
                output=self.get_output(),
                navigate_up=NavigateUpUseCase(self._logger),
                change_directory=ChangeDirectoryUseCase(fs, self._logger),
                list_directory=ListDirectoryUseCase(fs, self._logger),
                read_file=ReadFileUseCase(fs, chunk_size, self._logger),
                create_file=CreateFileUseCase(fs, self._logger),
                rename_item=RenameItemUseCase(fs, self._logger),
                transfer_file=TransferFileUseCase(fs, chunk_size, self._logger),
                remove_item=RemoveItemUseCase(fs, self._logger),
                host_info=HostInfoUseCase(self.get_host_info(), self._logger),
                checksum_file=ChecksumFileUseCase(fs, chunk_size, self._logger),
                brotli_transform=BrotliTransformUseCase(fs, chunk_size, self._logger),
                logger=self._logger,
            )
        return self._instances["commands"]

    def get_command_registry(self) -> CommandRegistry:
        if "command_registry" not in self._instances:
            registry = CommandRegistry(self._logger)
            registry.register_all(self.get_commands().specs())
            self._instances["command_registry"] = registry
        return self._instances["command_registry"]

    def get_shell(self) -> NavigatorShell:
        """
        Get the shell wired to the session, registry, reader and output.

        Returns:
            Configured NavigatorShell
        """
        return self._get(
            "shell",
            lambda: NavigatorShell(
                self.get_command_registry(),
                self.get_session(),
                self.get_line_reader(),
                self.get_output(),
                self._logger,
            ),
        )

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()

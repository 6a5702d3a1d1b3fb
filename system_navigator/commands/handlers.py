"""
Command handlers binding use cases to console output.
"""

import json
import logging
import os
from typing import Optional, Sequence

from system_navigator.adapters.console.console_output import ConsoleOutput
from system_navigator.commands.registry import CommandKind, CommandSpec
from system_navigator.entities.Session import Session
from system_navigator.use_cases.files.brotli_transform import (
    BrotliTransformUseCase,
    TransformMode,
)
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
from system_navigator.use_cases.system.host_info import HostInfoUseCase, HostProperty

GOODBYE_MESSAGE = "Advanced System Navigator session terminated. Goodbye!"


def _arg(args: Sequence[str], index: int) -> Optional[str]:
    return args[index] if len(args) > index else None


class NavigatorCommands:
    """One handler per command, each with the signature ``(args, session)``.

    Handlers raise on failure; the shell reports the error.
    """

    def __init__(
        self,
        output: ConsoleOutput,
        navigate_up: NavigateUpUseCase,
        change_directory: ChangeDirectoryUseCase,
        list_directory: ListDirectoryUseCase,
        read_file: ReadFileUseCase,
        create_file: CreateFileUseCase,
        rename_item: RenameItemUseCase,
        transfer_file: TransferFileUseCase,
        remove_item: RemoveItemUseCase,
        host_info: HostInfoUseCase,
        checksum_file: ChecksumFileUseCase,
        brotli_transform: BrotliTransformUseCase,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._output = output
        self._navigate_up = navigate_up
        self._change_directory = change_directory
        self._list_directory = list_directory
        self._read_file = read_file
        self._create_file = create_file
        self._rename_item = rename_item
        self._transfer_file = transfer_file
        self._remove_item = remove_item
        self._host_info = host_info
        self._checksum_file = checksum_file
        self._brotli_transform = brotli_transform
        self._logger = logger or logging.getLogger(__name__)

    def specs(self) -> list[CommandSpec]:
        return [
            CommandSpec(CommandKind.UP, self.up),
            CommandSpec(CommandKind.CD, self.cd),
            CommandSpec(CommandKind.LS, self.ls),
            CommandSpec(CommandKind.CAT, self.cat),
            CommandSpec(CommandKind.ADD, self.add),
            CommandSpec(CommandKind.RN, self.rn),
            CommandSpec(CommandKind.CP, self.cp),
            CommandSpec(CommandKind.MV, self.mv),
            CommandSpec(CommandKind.RM, self.rm),
            CommandSpec(CommandKind.OS, self.os_info),
            CommandSpec(CommandKind.HASH, self.hash),
            CommandSpec(CommandKind.COMPRESS, self.compress),
            CommandSpec(CommandKind.DECOMPRESS, self.decompress),
            CommandSpec(CommandKind.EXIT, self.exit),
        ]

    async def up(self, args: Sequence[str], session: Session) -> None:
        if not await self._navigate_up.execute(session):
            self._output.info(
                "Already at the root user directory. Cannot go further up."
            )

    async def cd(self, args: Sequence[str], session: Session) -> None:
        await self._change_directory.execute(session, _arg(args, 0))

    async def ls(self, args: Sequence[str], session: Session) -> None:
        entries = await self._list_directory.execute(session)
        if not entries:
            self._output.info("This directory is empty.")
            return
        self._output.table([entry.get_details() for entry in entries])

    async def cat(self, args: Sequence[str], session: Session) -> None:
        await self._read_file.execute(session, _arg(args, 0), self._output.write_raw)

    async def add(self, args: Sequence[str], session: Session) -> None:
        name = _arg(args, 0)
        await self._create_file.execute(session, name)
        self._output.info(f'File "{name}" created successfully.')

    async def rn(self, args: Sequence[str], session: Session) -> None:
        current_path, new_name = _arg(args, 0), _arg(args, 1)
        await self._rename_item.execute(session, current_path, new_name)
        self._output.info(f'Renamed "{current_path}" to "{new_name}".')

    async def _transfer(
        self, args: Sequence[str], session: Session, move: bool
    ) -> None:
        source, destination = _arg(args, 0), _arg(args, 1)
        written = await self._transfer_file.execute(session, source, destination, move)
        shown = os.path.join(destination or "", os.path.basename(written))
        self._output.info(f'{"Moved" if move else "Copied"} "{source}" to "{shown}".')

    async def cp(self, args: Sequence[str], session: Session) -> None:
        await self._transfer(args, session, move=False)

    async def mv(self, args: Sequence[str], session: Session) -> None:
        await self._transfer(args, session, move=True)

    async def rm(self, args: Sequence[str], session: Session) -> None:
        item_path = _arg(args, 0)
        await self._remove_item.execute(session, item_path)
        self._output.info(f'Item "{item_path}" removed.')

    async def os_info(self, args: Sequence[str], session: Session) -> None:
        report = await self._host_info.execute(_arg(args, 0))
        if report.prop is HostProperty.EOL:
            self._output.info(
                f"Default End-Of-Line sequence: {json.dumps(report.value)}"
            )
        elif report.prop is HostProperty.CPUS:
            cores = report.value
            self._output.info(f"CPU Core Information (Total: {len(cores)}):")
            self._output.table(
                [
                    {"CoreModel": core["model"], "ClockSpeedMHz": core["speed_mhz"]}
                    for core in cores
                ]
            )
        elif report.prop is HostProperty.HOMEDIR:
            self._output.info(f"User Home Directory: {report.value}")
        elif report.prop is HostProperty.USERNAME:
            self._output.info(f"Current System User: {report.value}")
        else:
            self._output.info(f"System Architecture: {report.value}")

    async def hash(self, args: Sequence[str], session: Session) -> None:
        resource_path = _arg(args, 0)
        digest = await self._checksum_file.execute(session, resource_path)
        self._output.info(f'SHA256 Checksum for "{resource_path}": {digest}')

    async def _brotli(
        self, args: Sequence[str], session: Session, mode: TransformMode
    ) -> None:
        source, target = _arg(args, 0), _arg(args, 1)
        await self._brotli_transform.execute(session, source, target, mode)
        self._output.info(f'File "{source}" {mode.past_tense} to "{target}".')

    async def compress(self, args: Sequence[str], session: Session) -> None:
        await self._brotli(args, session, TransformMode.ENCODE)

    async def decompress(self, args: Sequence[str], session: Session) -> None:
        await self._brotli(args, session, TransformMode.DECODE)

    async def exit(self, args: Sequence[str], session: Session) -> None:
        self._logger.info("Exit requested")
        self._output.info(f"\n{GOODBYE_MESSAGE}")
        raise SystemExit(0)

"""
Use case for reporting a single host property.
"""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from system_navigator.exceptions import InvalidArgumentError
from system_navigator.ports.system.host_info_port import CpuCore, HostInfoPort


class HostProperty(str, Enum):
    """Closed set of keys accepted by the ``os`` command."""

    EOL = "--EOL"
    CPUS = "--cpus"
    HOMEDIR = "--homedir"
    USERNAME = "--username"
    ARCHITECTURE = "--architecture"


@dataclass(frozen=True)
class HostInfoReport:
    prop: HostProperty
    value: Union[str, list[CpuCore]]


class HostInfoUseCase:
    """Use case for the ``os`` command."""

    def __init__(
        self,
        host_info: HostInfoPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._host_info = host_info
        self._logger = logger or logging.getLogger(__name__)

    async def execute(self, property_key: Optional[str]) -> HostInfoReport:
        """
        Look up one host property.

        Args:
            property_key: One of the HostProperty values, e.g. ``--cpus``

        Returns:
            HostInfoReport carrying the property and its value

        Raises:
            InvalidArgumentError: If the key is missing or not recognized
        """
        if not property_key:
            raise InvalidArgumentError("OS property key not specified.")
        try:
            prop = HostProperty(property_key)
        except ValueError:
            raise InvalidArgumentError(f"Invalid OS property key: {property_key}")

        accessors = {
            HostProperty.EOL: self._host_info.end_of_line,
            HostProperty.CPUS: self._host_info.cpus,
            HostProperty.HOMEDIR: self._host_info.home_directory,
            HostProperty.USERNAME: self._host_info.username,
            HostProperty.ARCHITECTURE: self._host_info.architecture,
        }
        self._logger.info(f"Querying host property: {prop.value}")
        value = await asyncio.to_thread(accessors[prop])
        return HostInfoReport(prop, value)

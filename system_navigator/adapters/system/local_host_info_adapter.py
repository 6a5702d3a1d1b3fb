"""
Local host information adapter backed by the standard library and psutil.
"""

import getpass
import logging
import os
import platform
import sys
from typing import Optional

import psutil
from typing_extensions import override

from system_navigator.ports.system.host_info_port import CpuCore, HostInfoPort

CPUINFO_PATH = "/proc/cpuinfo"


class LocalHostInfoAdapter(HostInfoPort):
    """Host facts for the machine the navigator runs on."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    def _core_models(self, count: int) -> list[str]:
        """Per-core model names; falls back to platform.processor()."""
        models: list[str] = []
        if sys.platform.startswith("linux"):
            try:
                with open(CPUINFO_PATH, encoding="utf-8") as f:
                    for line in f:
                        key, _, value = line.partition(":")
                        if key.strip() == "model name":
                            models.append(value.strip())
            except OSError as e:
                self._logger.warning(f"Could not read {CPUINFO_PATH}: {e}")
        if len(models) != count:
            fallback = platform.processor() or platform.machine() or "unknown"
            models = [models[0] if models else fallback] * count
        return models

    def _core_speeds(self, count: int) -> list[int]:
        """Per-core clock speed in MHz, 0 where unknown."""
        try:
            freqs = psutil.cpu_freq(percpu=True) or []
        except Exception as e:
            self._logger.warning(f"Could not query CPU frequency: {e}")
            freqs = []
        speeds = [int(f.current) for f in freqs]
        if len(speeds) != count:
            speeds = [speeds[0] if speeds else 0] * count
        return speeds

    @override
    def end_of_line(self) -> str:
        return os.linesep

    @override
    def cpus(self) -> list[CpuCore]:
        count = psutil.cpu_count(logical=True) or os.cpu_count() or 1
        models = self._core_models(count)
        speeds = self._core_speeds(count)
        return [
            {"model": model, "speed_mhz": speed} for model, speed in zip(models, speeds)
        ]

    @override
    def home_directory(self) -> str:
        return os.path.expanduser("~")

    @override
    def username(self) -> str:
        return getpass.getuser()

    @override
    def architecture(self) -> str:
        return platform.machine()

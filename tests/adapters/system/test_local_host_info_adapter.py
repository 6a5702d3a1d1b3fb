"""
Tests for the LocalHostInfoAdapter.
"""

import os
import platform
from types import SimpleNamespace
from unittest.mock import patch

from system_navigator.adapters.system.local_host_info_adapter import (
    LocalHostInfoAdapter,
)

MODULE = "system_navigator.adapters.system.local_host_info_adapter"


class TestLocalHostInfoAdapter:
    """Test cases for the LocalHostInfoAdapter."""

    def test_simple_properties(self, mock_logger):
        """EOL, home directory and architecture come from the platform."""
        adapter = LocalHostInfoAdapter(mock_logger)

        assert adapter.end_of_line() == os.linesep
        assert adapter.home_directory() == os.path.expanduser("~")
        assert adapter.architecture() == platform.machine()

    @patch(f"{MODULE}.getpass.getuser", return_value="alice")
    def test_username(self, _getuser, mock_logger):
        """The current user name is reported."""
        assert LocalHostInfoAdapter(mock_logger).username() == "alice"

    @patch(f"{MODULE}.psutil")
    def test_cpus_one_record_per_core(self, mock_psutil, mock_logger):
        """Each logical core gets a model and a clock speed."""
        mock_psutil.cpu_count.return_value = 2
        mock_psutil.cpu_freq.return_value = [
            SimpleNamespace(current=2400.7),
            SimpleNamespace(current=1800.0),
        ]
        adapter = LocalHostInfoAdapter(mock_logger)

        with patch.object(adapter, "_core_models", return_value=["CPU A", "CPU A"]):
            cores = adapter.cpus()

        assert cores == [
            {"model": "CPU A", "speed_mhz": 2400},
            {"model": "CPU A", "speed_mhz": 1800},
        ]

    @patch(f"{MODULE}.psutil")
    def test_cpus_without_frequency(self, mock_psutil, mock_logger):
        """Unknown clock speeds are reported as 0."""
        mock_psutil.cpu_count.return_value = 3
        mock_psutil.cpu_freq.side_effect = RuntimeError("not supported")
        adapter = LocalHostInfoAdapter(mock_logger)

        cores = adapter.cpus()

        assert len(cores) == 3
        assert all(core["speed_mhz"] == 0 for core in cores)
        assert all(core["model"] for core in cores)
        mock_logger.warning.assert_called()

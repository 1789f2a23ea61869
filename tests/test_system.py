"""Tests for hostinfo/system.py"""
import subprocess
from unittest.mock import MagicMock

from hostinfo.system import COMPUTER_NAME_CMD, LOCAL_HOSTNAME_CMD, SystemInfo


class TestSystemInfo:
    """Tests for SystemInfo with subprocess mocked."""

    def test_computer_name(self, mock_subprocess):
        mock_subprocess.return_value = MagicMock(returncode=0, stdout="Office iMac\n", stderr="")
        assert SystemInfo().get_computer_name() == "Office iMac"
        assert mock_subprocess.call_args[0][0] == COMPUTER_NAME_CMD

    def test_local_hostname(self, mock_subprocess):
        mock_subprocess.return_value = MagicMock(returncode=0, stdout="  Office-iMac  ", stderr="")
        assert SystemInfo().get_local_hostname() == "Office-iMac"
        assert mock_subprocess.call_args[0][0] == LOCAL_HOSTNAME_CMD

    def test_no_shell(self, mock_subprocess):
        mock_subprocess.return_value = MagicMock(returncode=0, stdout="x", stderr="")
        SystemInfo().get_computer_name()
        assert mock_subprocess.call_args[1].get("shell", False) is False

    def test_nonzero_exit_is_none(self, mock_subprocess):
        mock_subprocess.return_value = MagicMock(
            returncode=1, stdout="", stderr="LocalHostName: not set"
        )
        assert SystemInfo().get_local_hostname() is None

    def test_empty_output_is_none(self, mock_subprocess):
        mock_subprocess.return_value = MagicMock(returncode=0, stdout="\n", stderr="")
        assert SystemInfo().get_computer_name() is None

    def test_missing_command_is_none(self, mock_subprocess):
        mock_subprocess.side_effect = FileNotFoundError("scutil")
        assert SystemInfo().get_computer_name() is None

    def test_timeout_is_none(self, mock_subprocess):
        mock_subprocess.side_effect = subprocess.TimeoutExpired(COMPUTER_NAME_CMD, 5)
        assert SystemInfo().get_computer_name() is None

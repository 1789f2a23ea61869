"""Computer name and local hostname queries.

Both values come from macOS ``scutil``. Any failure (command missing,
timeout, non-zero exit, empty output) yields None and the caller simply
leaves the value out of the menu.

Example:
    >>> info = SystemInfo()
    >>> info.get_computer_name()
    'Office iMac'
    >>> info.get_local_hostname()
    'Office-iMac'
"""

from __future__ import annotations

from typing import Optional

from config import get_logger, run_for_output

logger = get_logger(__name__)

COMPUTER_NAME_CMD = ['scutil', '--get', 'ComputerName']
LOCAL_HOSTNAME_CMD = ['scutil', '--get', 'LocalHostName']


class SystemInfo:
    """Queries host naming information from the operating system."""

    def get_computer_name(self) -> Optional[str]:
        """Get the user-facing computer name, or None if unavailable."""
        name = run_for_output(COMPUTER_NAME_CMD)
        if name is None:
            logger.info("Computer name unavailable")
        return name

    def get_local_hostname(self) -> Optional[str]:
        """Get the Bonjour local hostname, or None if unavailable."""
        hostname = run_for_output(LOCAL_HOSTNAME_CMD)
        if hostname is None:
            logger.info("Local hostname unavailable")
        return hostname


__all__ = ["COMPUTER_NAME_CMD", "LOCAL_HOSTNAME_CMD", "SystemInfo"]

"""Centralized constants and configuration for Hostname Menu.

This module contains the magic numbers, strings, and layout values used
across the application. Centralizing them keeps the menu-bar geometry and
file locations in one place.

Usage:
    from config.constants import STORAGE, UI

    config_dir = STORAGE.APP_SUPPORT_DIR / STORAGE.BUNDLE_ID
    icon_width = UI.ICON_WIDTH
"""
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Intervals:
    """Time intervals for various operations (in seconds)."""
    # Menu contents are re-queried this often while the app is idle
    MENU_REFRESH_SECONDS: float = 30.0

    # Subprocess timeouts
    SUBPROCESS_TIMEOUT_SECONDS: float = 5.0


@dataclass(frozen=True)
class StorageConfig:
    """Storage and file-related configuration."""
    # Per-application support directory
    APP_SUPPORT_DIR: Path = field(
        default_factory=lambda: Path.home() / "Library" / "Application Support"
    )
    BUNDLE_ID: str = "com.hostname-menu"

    CONFIG_FILE: str = "config.json"
    LOG_FILE: str = "hostname_menu.log"

    # Log rotation
    LOG_MAX_BYTES: int = 1_000_000  # 1MB
    LOG_BACKUP_COUNT: int = 3

    # Temp directories
    ICON_TEMP_DIR: str = "hostmenu-icons"

    @property
    def data_dir(self) -> Path:
        """Directory holding config.json and the log file."""
        return self.APP_SUPPORT_DIR / self.BUNDLE_ID


@dataclass(frozen=True)
class UIConfig:
    """Menu bar layout configuration (pixels unless noted)."""
    # Status item geometry
    ICON_WIDTH: float = 18.0
    ICON_SPACING: float = 10.0
    STATUS_ICON_SIZE: int = 18

    # Truncation
    MIN_TRUNCATED_CHARS: int = 10
    ELLIPSIS: str = "..."

    # Default budget for icon + spacing + text
    DEFAULT_MAX_WIDTH: float = 230.0


@dataclass(frozen=True)
class LabelDefaults:
    """Default label strings shown before menu bar values."""
    COMPUTER_NAME: str = "Computer Name: "
    LOCAL_HOSTNAME: str = "Local Hostname: "
    IP_ADDRESS: str = "IP Address: "
    SHOW_LABELS_IN_MENU_BAR: bool = False
    SHOW_INTERFACE_NAMES_IN_MENU_BAR: bool = True


# Global instances - import these
INTERVALS = Intervals()
STORAGE = StorageConfig()
UI = UIConfig()
LABELS = LabelDefaults()


# Allowed commands for subprocess safety
ALLOWED_SUBPROCESS_COMMANDS = frozenset({
    'scutil',
})

"""Preferences persistence for Hostname Menu.

Holds the label configuration, the maximum menu bar width and the last
selected display item, and keeps them in ``config.json`` inside the
application support directory.

A missing or unreadable file is replaced with defaults. Write failures are
logged and otherwise ignored so the menu bar keeps working.

Usage:
    from storage.config_store import ConfigStore

    store = ConfigStore(data_dir, event_bus=bus)
    store.update_last_display_item(LocalHostname("Office-iMac"))
"""
import copy
import json
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from config import LABELS, STORAGE, UI, get_logger
from config.exceptions import StorageError
from hostinfo.display_item import (
    DisplayItem,
    IPAddress,
    LocalHostname,
    parse_free_text,
    raw_text,
)

logger = get_logger(__name__)


@dataclass
class LabelConfig:
    """Label strings and menu bar display toggles."""
    computer_name: str = LABELS.COMPUTER_NAME
    local_hostname: str = LABELS.LOCAL_HOSTNAME
    ip_address: str = LABELS.IP_ADDRESS
    show_labels_in_menu_bar: bool = LABELS.SHOW_LABELS_IN_MENU_BAR
    show_interface_names_in_menu_bar: bool = LABELS.SHOW_INTERFACE_NAMES_IN_MENU_BAR

    def to_dict(self) -> dict:
        return {
            "computer_name": self.computer_name,
            "local_hostname": self.local_hostname,
            "ip_address": self.ip_address,
            "show_labels_in_menu_bar": self.show_labels_in_menu_bar,
            "show_interface_names_in_menu_bar": self.show_interface_names_in_menu_bar,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'LabelConfig':
        return cls(
            computer_name=_expect(data, "computer_name", str),
            local_hostname=_expect(data, "local_hostname", str),
            ip_address=_expect(data, "ip_address", str),
            show_labels_in_menu_bar=_expect(data, "show_labels_in_menu_bar", bool),
            show_interface_names_in_menu_bar=_expect(
                data, "show_interface_names_in_menu_bar", bool
            ),
        )


@dataclass
class AppConfig:
    """Complete application configuration as stored in config.json.

    The last display item is persisted in its raw text form, so a stored
    computer name or local hostname comes back as an address without
    interface.
    """
    labels: LabelConfig = field(default_factory=LabelConfig)
    last_display_item: DisplayItem = field(
        default_factory=lambda: IPAddress(interface=None, address="")
    )
    max_width: float = UI.DEFAULT_MAX_WIDTH

    def to_dict(self) -> dict:
        return {
            "labels": self.labels.to_dict(),
            "last_display_item": raw_text(self.last_display_item),
            "max_width": self.max_width,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'AppConfig':
        """Build a config from decoded JSON.

        Raises:
            ValueError: If a field is missing or has the wrong type.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected JSON object, got {type(data).__name__}")

        labels = data.get("labels")
        if not isinstance(labels, dict):
            raise ValueError("Missing 'labels' object")

        max_width = data.get("max_width")
        if isinstance(max_width, bool) or not isinstance(max_width, (int, float)):
            raise ValueError(f"Invalid 'max_width': {max_width!r}")
        try:
            max_width = float(max_width)
        except OverflowError:
            max_width = math.inf
        if not math.isfinite(max_width) or max_width <= 0:
            raise ValueError(f"'max_width' must be a positive number: {max_width!r}")

        return cls(
            labels=LabelConfig.from_dict(labels),
            last_display_item=parse_free_text(_expect(data, "last_display_item", str)),
            max_width=max_width,
        )

    def copy(self) -> 'AppConfig':
        """Independent copy for editing (settings form scratch copy)."""
        return copy.deepcopy(self)


def _expect(data: dict, key: str, kind: type):
    """Fetch ``data[key]`` and check its type."""
    if key not in data:
        raise ValueError(f"Missing '{key}'")
    value = data[key]
    if not isinstance(value, kind):
        raise ValueError(f"Invalid '{key}': expected {kind.__name__}, got {value!r}")
    return value


class ConfigStore:
    """Owns the AppConfig and its JSON file.

    Mutated from the main thread only. ``update`` announces changes on the
    event bus; ``update_last_display_item`` does not, the caller renders
    the new item itself.
    """

    def __init__(self, data_dir: Optional[Path] = None, event_bus=None):
        self.data_dir = data_dir or STORAGE.data_dir
        self.config_file = self.data_dir / STORAGE.CONFIG_FILE
        self._event_bus = event_bus
        self._config = AppConfig()
        self.load()
        logger.info(f"ConfigStore initialized at {self.config_file}")

    @property
    def config(self) -> AppConfig:
        """The currently committed configuration."""
        return self._config

    def load(self) -> AppConfig:
        """Load configuration from disk, falling back to defaults.

        A missing file is created with defaults. A file that cannot be read
        or decoded is overwritten with defaults.
        """
        if not self.config_file.exists():
            logger.info("No config file, writing defaults")
            self._config = AppConfig()
            self._save_quietly()
            return self._config

        try:
            with open(self.config_file, encoding='utf-8') as f:
                self._config = AppConfig.from_dict(json.load(f))
            logger.debug(f"Loaded config: {self._config}")
        except (OSError, ValueError) as e:
            # json.JSONDecodeError is a ValueError
            logger.warning(f"Could not load config, resetting to defaults: {e}")
            self._config = AppConfig()
            self._save_quietly()

        return self._config

    def _save(self) -> None:
        """Write the configuration to disk.

        Raises:
            StorageError: If the file can't be written.
        """
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            temp_file = self.config_file.with_suffix('.tmp')
            with open(temp_file, 'w', encoding='utf-8') as f:
                json.dump(self._config.to_dict(), f, indent=2, ensure_ascii=False)
            temp_file.replace(self.config_file)
        except OSError as e:
            raise StorageError(f"Failed to save config: {e}", {"path": str(self.config_file)})

    def _save_quietly(self) -> None:
        """Persist, logging instead of raising on failure."""
        try:
            self._save()
            logger.debug("Config saved")
        except StorageError as e:
            logger.error(str(e))

    def update(self, new_config: AppConfig) -> None:
        """Replace the whole configuration, persist it and announce the change."""
        self._config = new_config
        self._save_quietly()

        if self._event_bus is not None:
            # Import here to avoid circular imports
            from app.events import EventType
            self._event_bus.publish(EventType.CONFIG_CHANGED, source="ConfigStore")

    def update_last_display_item(self, item: DisplayItem) -> None:
        """Remember the selected display item and persist it."""
        self._config.last_display_item = item
        self._save_quietly()
        logger.debug(f"Last display item: {item}")

    def seed_last_display_item(self, local_hostname: Optional[str]) -> bool:
        """On first launch, show the local hostname.

        Only applies while no display item has been stored yet.

        Returns:
            True if the stored item was replaced.
        """
        if raw_text(self._config.last_display_item) or not local_hostname:
            return False
        self.update_last_display_item(LocalHostname(local_hostname))
        logger.info(f"First launch, displaying local hostname {local_hostname!r}")
        return True


__all__ = ["AppConfig", "ConfigStore", "LabelConfig"]

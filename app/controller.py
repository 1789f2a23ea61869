"""Application controller for Hostname Menu.

Coordinates the system queries, the display item model and the
configuration store, and hands plain data to the UI layer.

Usage:
    from app.controller import AppController
    from app.dependencies import create_dependencies

    controller = AppController(create_dependencies())
    controller.start()
    title = controller.current_title()
"""
from dataclasses import dataclass
from typing import List

from app.dependencies import AppDependencies
from config import get_logger
from hostinfo.display_item import (
    ItemKind,
    format_item,
    from_menu_selection,
    menu_title_computer_name,
    menu_title_ip_address,
    menu_title_local_hostname,
)
from storage.config_store import AppConfig

logger = get_logger(__name__)


@dataclass(frozen=True)
class MenuEntry:
    """One selectable dropdown entry.

    Attributes:
        title: Text shown in the dropdown (always labelled).
        kind: Which display item the entry selects.
        value: Value passed to from_menu_selection when picked.
    """
    title: str
    kind: ItemKind
    value: str


class AppController:
    """Central controller that keeps UI code free of business logic.

    The controller:
    - Seeds the first display item on first launch
    - Builds the dropdown entries from fresh system values
    - Turns a dropdown selection into formatted menu bar text
    - Commits settings edited in the settings form

    Attributes:
        deps: The dependency container with all components.
    """

    def __init__(self, deps: AppDependencies):
        self.deps = deps
        logger.info("AppController initialized")

    @property
    def config(self) -> AppConfig:
        return self.deps.config_store.config

    def start(self) -> None:
        """Seed the display item with the local hostname on first launch."""
        logger.info("Starting AppController...")
        self.deps.config_store.seed_last_display_item(
            self.deps.system_info.get_local_hostname()
        )

    def current_title(self) -> str:
        """Formatted menu bar text for the stored display item."""
        config = self.config
        return format_item(config.last_display_item, config.labels)

    def build_menu_entries(self) -> List[MenuEntry]:
        """Query the system and build the dropdown entries.

        Computer name and local hostname come first, each left out when the
        query fails, followed by the sorted interface addresses.
        """
        labels = self.config.labels
        entries: List[MenuEntry] = []

        computer_name = self.deps.system_info.get_computer_name()
        if computer_name is not None:
            entries.append(MenuEntry(
                title=menu_title_computer_name(computer_name, labels),
                kind=ItemKind.COMPUTER_NAME,
                value=computer_name,
            ))

        local_hostname = self.deps.system_info.get_local_hostname()
        if local_hostname is not None:
            entries.append(MenuEntry(
                title=menu_title_local_hostname(local_hostname, labels),
                kind=ItemKind.LOCAL_HOSTNAME,
                value=local_hostname,
            ))

        for info in self.deps.interface_provider.get_interfaces():
            title = menu_title_ip_address(info.interface, info.address)
            entries.append(MenuEntry(title=title, kind=ItemKind.IP_ADDRESS, value=title))

        logger.debug(f"Built {len(entries)} menu entries")
        return entries

    def select(self, kind, value: str) -> str:
        """Make a dropdown selection the menu bar value.

        Persists the new display item without a CONFIG_CHANGED broadcast;
        the caller renders the returned text directly.

        Returns:
            Formatted menu bar text for the selection.
        """
        item = from_menu_selection(kind, value)
        text = format_item(item, self.config.labels)
        self.deps.config_store.update_last_display_item(item)

        logger.info(f"Selected {item} -> {text!r}")
        return text

    def save_settings(self, new_config: AppConfig) -> None:
        """Commit settings from the settings form."""
        logger.info("Saving settings")
        self.deps.config_store.update(new_config)

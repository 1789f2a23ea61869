"""Menu building for Hostname Menu.

Turns the controller's MenuEntry list into rumps menu items. Selecting an
entry calls back with its kind and value.

Usage:
    from app.views.menu_builder import MenuBuilder, MenuCallbacks

    builder = MenuBuilder()
    app.menu.clear()
    app.menu = builder.build_main_menu(controller.build_menu_entries(), callbacks)
"""
from dataclasses import dataclass
from typing import Callable, List, Optional

import rumps

from app.controller import MenuEntry
from config import get_logger
from hostinfo.display_item import ItemKind

logger = get_logger(__name__)


@dataclass
class MenuCallbacks:
    """Container for menu item callbacks."""
    select_entry: Optional[Callable[[ItemKind, str], None]] = None
    show_settings: Optional[Callable] = None
    quit_app: Optional[Callable] = None


class MenuBuilder:
    """Builds the dropdown menu structure.

    Layout: computer name, local hostname, separator, interface addresses,
    separator, Settings..., separator, Quit.
    """

    def __init__(self):
        logger.debug("MenuBuilder initialized")

    def _make_entry_item(self, entry: MenuEntry, callbacks: MenuCallbacks) -> rumps.MenuItem:
        def on_click(_sender, kind=entry.kind, value=entry.value):
            if callbacks.select_entry:
                callbacks.select_entry(kind, value)

        return rumps.MenuItem(entry.title, callback=on_click)

    def build_main_menu(self, entries: List[MenuEntry], callbacks: MenuCallbacks) -> List:
        """Build the complete dropdown menu.

        Args:
            entries: Entries from AppController.build_menu_entries().
            callbacks: Container with callback functions for menu items.

        Returns:
            List of menu items for rumps.App.menu
        """
        names = [e for e in entries if e.kind is not ItemKind.IP_ADDRESS]
        addresses = [e for e in entries if e.kind is ItemKind.IP_ADDRESS]

        entry_items = [self._make_entry_item(e, callbacks) for e in names + addresses]
        name_items = entry_items[:len(names)]
        address_items = entry_items[len(names):]

        menu = list(name_items)
        menu.append(rumps.separator)
        menu.extend(address_items)
        menu.extend([
            rumps.separator,
            rumps.MenuItem("Settings...", callback=callbacks.show_settings, key=","),
            rumps.separator,
            rumps.MenuItem("Quit Hostname Menu", callback=callbacks.quit_app, key="q"),
        ])

        logger.debug(f"Built menu with {len(entry_items)} selectable entries")
        return menu

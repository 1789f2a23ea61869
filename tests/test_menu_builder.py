"""Tests for app/views/menu_builder.py"""
from unittest.mock import MagicMock

import pytest

rumps = pytest.importorskip("rumps")

from app.controller import MenuEntry  # noqa: E402
from app.views.menu_builder import MenuBuilder, MenuCallbacks  # noqa: E402
from hostinfo.display_item import ItemKind  # noqa: E402

pytestmark = pytest.mark.macos_only


ENTRIES = [
    MenuEntry("Computer Name: Office iMac", ItemKind.COMPUTER_NAME, "Office iMac"),
    MenuEntry("Local Hostname: Office-iMac", ItemKind.LOCAL_HOSTNAME, "Office-iMac"),
    MenuEntry("en0: 192.168.1.5", ItemKind.IP_ADDRESS, "en0: 192.168.1.5"),
]


class TestMenuCallbacks:
    """Tests for MenuCallbacks dataclass."""

    def test_default_callbacks_none(self):
        callbacks = MenuCallbacks()
        assert callbacks.select_entry is None
        assert callbacks.show_settings is None
        assert callbacks.quit_app is None


class TestMenuBuilder:
    """Tests for MenuBuilder class."""

    @pytest.fixture
    def builder(self):
        return MenuBuilder()

    @pytest.fixture
    def callbacks(self):
        return MenuCallbacks(
            select_entry=MagicMock(),
            show_settings=MagicMock(),
            quit_app=MagicMock(),
        )

    def test_layout(self, builder, callbacks):
        menu = builder.build_main_menu(ENTRIES, callbacks)
        titles = [None if item is rumps.separator else item.title for item in menu]
        assert titles == [
            "Computer Name: Office iMac",
            "Local Hostname: Office-iMac",
            None,
            "en0: 192.168.1.5",
            None,
            "Settings...",
            None,
            "Quit Hostname Menu",
        ]

    def test_selecting_entry_calls_back(self, builder, callbacks):
        menu = builder.build_main_menu(ENTRIES, callbacks)
        address_item = menu[3]

        address_item.callback(address_item)
        callbacks.select_entry.assert_called_once_with(ItemKind.IP_ADDRESS, "en0: 192.168.1.5")

    def test_shortcuts(self, builder, callbacks):
        menu = builder.build_main_menu([], callbacks)
        settings = next(i for i in menu if i is not rumps.separator and i.title == "Settings...")
        quit_item = menu[-1]
        assert settings.key == ","
        assert quit_item.key == "q"

    def test_empty_entries(self, builder, callbacks):
        menu = builder.build_main_menu([], callbacks)
        assert menu[0] is rumps.separator
        assert len(menu) == 5
        assert menu[-1].title == "Quit Hostname Menu"

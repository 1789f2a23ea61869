"""Tests for the app module (events, dependencies, controller)."""
from unittest.mock import patch

import pytest

from app.controller import AppController, MenuEntry
from app.dependencies import AppDependencies, create_dependencies
from app.events import Event, EventBus, EventType
from hostinfo.display_item import ComputerName, IPAddress, ItemKind, LocalHostname
from storage.config_store import AppConfig, ConfigStore, LabelConfig


class TestEventBus:
    """Tests for EventBus."""

    def test_subscribe_and_publish(self):
        """Events should be delivered to subscribers."""
        bus = EventBus()
        received = []

        bus.subscribe(EventType.CONFIG_CHANGED, received.append)
        bus.publish(EventType.CONFIG_CHANGED, {"max_width": 120.0}, source="ConfigStore")

        assert len(received) == 1
        assert received[0].data["max_width"] == 120.0
        assert received[0].source == "ConfigStore"

    def test_multiple_subscribers(self):
        """Multiple subscribers should all receive events."""
        bus = EventBus()
        count = [0]

        def handler1(event):
            count[0] += 1

        def handler2(event):
            count[0] += 10

        bus.subscribe(EventType.CONFIG_CHANGED, handler1)
        bus.subscribe(EventType.CONFIG_CHANGED, handler2)
        bus.publish(EventType.CONFIG_CHANGED)

        assert count[0] == 11

    def test_unsubscribe(self):
        """Unsubscribed handlers should not receive events."""
        bus = EventBus()
        received = []

        bus.subscribe(EventType.CONFIG_CHANGED, received.append)
        bus.publish(EventType.CONFIG_CHANGED)
        assert bus.unsubscribe(EventType.CONFIG_CHANGED, received.append) is True
        bus.publish(EventType.CONFIG_CHANGED)

        assert len(received) == 1

    def test_unsubscribe_unknown_handler(self):
        bus = EventBus()
        assert bus.unsubscribe(EventType.CONFIG_CHANGED, lambda e: None) is False

    def test_unsubscribe_bound_method(self):
        """A bound method subscribed once can be removed by a fresh reference."""
        class Listener:
            def __init__(self):
                self.events = []

            def on_event(self, event):
                self.events.append(event)

        bus = EventBus()
        listener = Listener()
        bus.subscribe(EventType.CONFIG_CHANGED, listener.on_event)

        assert bus.unsubscribe(EventType.CONFIG_CHANGED, listener.on_event) is True
        bus.publish(EventType.CONFIG_CHANGED)
        assert listener.events == []

    def test_handler_error_does_not_stop_others(self):
        """A failing handler is logged and delivery continues."""
        bus = EventBus()
        received = []

        def broken(event):
            raise RuntimeError("boom")

        bus.subscribe(EventType.CONFIG_CHANGED, broken)
        bus.subscribe(EventType.CONFIG_CHANGED, received.append)
        bus.publish(EventType.CONFIG_CHANGED)

        assert len(received) == 1

    def test_event_str(self):
        event = Event(EventType.CONFIG_CHANGED, source="ConfigStore")
        assert "CONFIG_CHANGED" in str(event)
        assert event.data == {}


class TestDependencies:
    """Tests for the dependency container."""

    def test_create_dependencies(self, temp_data_dir):
        deps = create_dependencies(data_dir=temp_data_dir)
        assert isinstance(deps, AppDependencies)
        assert isinstance(deps.config_store, ConfigStore)
        assert deps.config_store.data_dir == temp_data_dir
        assert (temp_data_dir / "config.json").exists()

    def test_shared_event_bus(self, temp_data_dir):
        bus = EventBus()
        deps = create_dependencies(data_dir=temp_data_dir, event_bus=bus)
        assert deps.event_bus is bus

        received = []
        bus.subscribe(EventType.CONFIG_CHANGED, received.append)
        deps.config_store.update(AppConfig())
        assert len(received) == 1


class TestAppController:
    """Tests for AppController with mock dependencies."""

    @pytest.fixture
    def controller(self, mock_deps):
        return AppController(mock_deps)

    def test_start_seeds_local_hostname(self, controller, mock_deps):
        controller.start()
        assert mock_deps.config_store.config.last_display_item == LocalHostname("Office-iMac")
        assert controller.current_title() == "Office-iMac"

    def test_start_keeps_stored_item(self, controller, mock_deps):
        mock_deps.config_store.update_last_display_item(IPAddress("en0", "10.0.0.2"))
        controller.start()
        assert mock_deps.config_store.config.last_display_item == IPAddress("en0", "10.0.0.2")

    def test_start_without_hostname(self, controller, mock_deps):
        mock_deps.system_info.local_hostname = None
        controller.start()
        assert controller.current_title() == ""

    def test_start_leaves_seeding_to_store(self, controller, mock_deps):
        mock_deps.config_store.update_last_display_item(IPAddress("en0", "10.0.0.2"))
        with patch.object(mock_deps.config_store, "seed_last_display_item") as seed:
            controller.start()
        seed.assert_called_once_with("Office-iMac")

    def test_build_menu_entries(self, controller):
        entries = controller.build_menu_entries()
        assert entries == [
            MenuEntry("Computer Name: Office iMac", ItemKind.COMPUTER_NAME, "Office iMac"),
            MenuEntry("Local Hostname: Office-iMac", ItemKind.LOCAL_HOSTNAME, "Office-iMac"),
            MenuEntry("en0: 192.168.1.5", ItemKind.IP_ADDRESS, "en0: 192.168.1.5"),
            MenuEntry("en0: fd00::5", ItemKind.IP_ADDRESS, "en0: fd00::5"),
        ]

    def test_build_menu_entries_omits_failed_queries(self, controller, mock_deps):
        mock_deps.system_info.computer_name = None
        mock_deps.system_info.local_hostname = None
        mock_deps.interface_provider.clear()
        assert controller.build_menu_entries() == []

    def test_menu_titles_always_labelled(self, controller, mock_deps):
        """Dropdown titles use labels even when the menu bar hides them."""
        assert mock_deps.config_store.config.labels.show_labels_in_menu_bar is False
        titles = [e.title for e in controller.build_menu_entries()]
        assert titles[0].startswith("Computer Name: ")

    def test_select_ip_address(self, controller, mock_deps):
        text = controller.select(ItemKind.IP_ADDRESS, "en0: 192.168.1.5")
        assert text == "en0: 192.168.1.5"
        assert mock_deps.config_store.config.last_display_item == IPAddress("en0", "192.168.1.5")

    def test_select_respects_labels(self, controller, mock_deps):
        mock_deps.config_store.update(AppConfig(
            labels=LabelConfig(show_labels_in_menu_bar=True, show_interface_names_in_menu_bar=False)
        ))
        assert controller.select(ItemKind.IP_ADDRESS, "en0: 10.0.0.2") == "IP Address: 10.0.0.2"

    def test_select_computer_name(self, controller, mock_deps):
        assert controller.select("computerName", "Office iMac") == "Office iMac"
        assert mock_deps.config_store.config.last_display_item == ComputerName("Office iMac")

    def test_select_does_not_publish_config_change(self, controller, event_bus):
        changed = []
        event_bus.subscribe(EventType.CONFIG_CHANGED, changed.append)

        assert controller.select(ItemKind.LOCAL_HOSTNAME, "Office-iMac") == "Office-iMac"
        assert changed == []

    def test_save_settings_commits_and_notifies(self, controller, mock_deps, event_bus):
        changed = []
        event_bus.subscribe(EventType.CONFIG_CHANGED, changed.append)

        new_config = mock_deps.config_store.config.copy()
        new_config.max_width = 120.0
        controller.save_settings(new_config)

        assert controller.config.max_width == 120.0
        assert len(changed) == 1

    def test_current_title_uses_labels(self, controller, mock_deps):
        mock_deps.config_store.update_last_display_item(ComputerName("Office iMac"))
        config = mock_deps.config_store.config.copy()
        config.labels.show_labels_in_menu_bar = True
        controller.save_settings(config)
        assert controller.current_title() == "Computer Name: Office iMac"


class TestMainThread:
    """Tests for main-thread dispatch."""

    def test_call_on_main_thread_queues_callback(self):
        from app import main_thread

        with patch.object(main_thread, "_get_main_thread_helper") as get_helper:
            helper = get_helper.return_value.alloc.return_value.init.return_value
            main_thread.call_on_main_thread(lambda: None)

        helper.performSelectorOnMainThread_withObject_waitUntilDone_.assert_called_once_with(
            "doCallback:", None, False
        )
        main_thread._pending.discard(helper)

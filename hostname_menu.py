#!/usr/bin/env python3
"""
Hostname Menu - macOS Menu Bar Application
Shows the computer name, local hostname or an interface address in the menu bar.
"""
import atexit
import signal

import rumps

# Hide dock icon (menu bar only app)
from Foundation import NSBundle

from app.controller import AppController
from app.dependencies import create_dependencies
from app.events import EventBus, EventType
from app.main_thread import call_on_main_thread
from app.views.icons import IconGenerator
from app.views.menu_builder import MenuBuilder, MenuCallbacks
from app.views.settings_form import SettingsForm
from app.views.status_item import StatusItemRenderer
from config import INTERVALS, STORAGE, get_logger, setup_logging
from config.exceptions import ConfigurationError
from config.logging_config import log_exception

info = NSBundle.mainBundle().infoDictionary()
info["LSUIElement"] = "1"

logger = get_logger(__name__)


class HostnameMenuApp(rumps.App):
    """Main menu bar application."""

    REFRESH_INTERVAL = INTERVALS.MENU_REFRESH_SECONDS

    def __init__(self):
        self._icons = IconGenerator()

        super().__init__(
            name="HostMenu",
            title="",
            icon=self._icons.create_house_icon(),
            template=True,
            quit_button=None
        )

        self._event_bus = EventBus()
        self._deps = create_dependencies(event_bus=self._event_bus)
        self._controller = AppController(self._deps)
        self._menu_builder = MenuBuilder()
        self._status_item = StatusItemRenderer(self)

        logger.info("HostnameMenuApp initializing...")

        # Register cleanup on exit
        atexit.register(self._icons.cleanup)

        self._callbacks = MenuCallbacks(
            select_entry=self._select_entry,
            show_settings=self._show_settings,
            quit_app=self._quit,
        )
        self._build_menu()

        self._event_bus.subscribe(EventType.CONFIG_CHANGED, self._on_config_changed)

        self._controller.start()
        self._refresh_timer = None

        # The status item only exists once rumps.run() has started
        self._startup_timer = rumps.Timer(self._delayed_start, 0.5)
        self._startup_timer.start()

    def _build_menu(self):
        """Rebuild the dropdown from fresh system values."""
        entries = self._controller.build_menu_entries()
        self.menu.clear()
        self.menu = self._menu_builder.build_main_menu(entries, self._callbacks)

    def _render_title(self, text: str = None):
        if text is None:
            text = self._controller.current_title()
        self._status_item.render(text, self._controller.config.max_width)

    def _delayed_start(self, _):
        """Called by rumps.Timer after app.run() to render and start refreshing."""
        if self._startup_timer:
            self._startup_timer.stop()
            self._startup_timer = None

        self._render_title()

        self._refresh_timer = rumps.Timer(self._refresh, self.REFRESH_INTERVAL)
        self._refresh_timer.start()
        logger.info("Started menu refresh timer")

    def _refresh(self, _):
        """Pick up hostname and address changes."""
        try:
            self._build_menu()
        except Exception as e:
            log_exception(logger, "Menu refresh failed", e)

    def _on_config_changed(self, event):
        """Re-render after settings are saved."""
        def rerender():
            self._render_title()
            self._build_menu()

        call_on_main_thread(rerender)

    def _select_entry(self, kind, value):
        text = self._controller.select(kind, value)
        self._render_title(text)
        self._build_menu()

    def _show_settings(self, _):
        """Show the settings dialog."""
        form = SettingsForm(self._controller.config, self._controller.save_settings)

        response = rumps.Window(
            title="Hostname Menu Settings",
            message=(
                "One setting per line. Quote text values to keep trailing spaces. "
                "max_width is in points."
            ),
            default_text=form.to_text(),
            ok="Save",
            cancel="Cancel",
            dimensions=(420, 140)
        ).run()

        if not response.clicked:
            form.cancel()
            return

        try:
            form.apply_text(response.text)
        except ConfigurationError as e:
            form.cancel()
            logger.warning(f"Settings rejected: {e}")
            rumps.alert(title="Invalid Settings", message=e.message, ok="OK")
            return

        form.save()

    def _quit(self, _):
        """Quit the application."""
        logger.info("Application shutting down...")
        if self._refresh_timer:
            self._refresh_timer.stop()
        self._event_bus.unsubscribe(EventType.CONFIG_CHANGED, self._on_config_changed)
        self._icons.cleanup()
        logger.info("Shutdown complete")
        rumps.quit_application()


def main():
    """Entry point for the application."""
    setup_logging(data_dir=STORAGE.data_dir, debug=False, console_output=True)
    logger.info("Hostname Menu starting...")

    def signal_handler(signum, frame):
        """Handle SIGTERM/SIGINT by quitting the run loop."""
        logger.info(f"Received signal {signum}, quitting...")
        rumps.quit_application()

    # Register signal handlers for graceful shutdown
    signal.signal(signal.SIGTERM, signal_handler)
    signal.signal(signal.SIGINT, signal_handler)

    try:
        app = HostnameMenuApp()
        app.run()
    except Exception as e:
        logger.critical(f"Application crashed: {e}", exc_info=True)
        raise


if __name__ == "__main__":
    main()

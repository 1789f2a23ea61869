"""Application module for Hostname Menu.

Contains the main application components:
- EventBus: Internal event communication
- AppController: Business logic orchestration with DI
- call_on_main_thread: Hop from background callbacks onto the AppKit main thread
- Views: UI components (settings form, menu, status item, icon)
"""

from app.controller import AppController, MenuEntry
from app.dependencies import AppDependencies, create_dependencies
from app.events import Event, EventBus, EventType

__all__ = [
    "AppController",
    "AppDependencies",
    "Event",
    "EventBus",
    "EventType",
    "MenuEntry",
    "create_dependencies",
]

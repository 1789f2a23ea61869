"""Event bus for internal application communication.

Provides a publish/subscribe mechanism so the configuration store can
announce changes without knowing who renders the menu bar.

Usage:
    from app.events import EventBus, EventType

    bus = EventBus()
    bus.subscribe(EventType.CONFIG_CHANGED, lambda e: print("re-render"))
    bus.publish(EventType.CONFIG_CHANGED)
"""
import threading
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Any, Callable, Dict, List, Optional

from config import get_logger

logger = get_logger(__name__)


class EventType(Enum):
    """Types of events that can be published/subscribed."""

    # Settings saved from the settings form
    CONFIG_CHANGED = auto()


@dataclass
class Event:
    """Represents an event with type and data.

    Attributes:
        event_type: The type of event.
        data: Optional dictionary with event-specific data.
        timestamp: When the event was created.
        source: Optional identifier of the event source.
    """
    event_type: EventType
    data: Dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)
    source: Optional[str] = None

    def __str__(self) -> str:
        return f"Event({self.event_type.name}, data={self.data})"


# Type alias for event handlers
EventHandler = Callable[[Event], None]


class EventBus:
    """Synchronous publish/subscribe event bus.

    Handlers run on the publishing thread, in subscription order. A failing
    handler is logged and does not stop delivery to the others. Handlers
    that touch AppKit should hop to the main thread themselves (see
    app.main_thread).

    Example:
        >>> bus = EventBus()
        >>> bus.subscribe(EventType.CONFIG_CHANGED, lambda e: print(e))
        >>> bus.publish(EventType.CONFIG_CHANGED)
    """

    def __init__(self):
        self._subscribers: Dict[EventType, List[EventHandler]] = {}
        self._lock = threading.Lock()

    def _dispatch_event(self, event: Event) -> None:
        """Dispatch event to all subscribers."""
        with self._lock:
            handlers = self._subscribers.get(event.event_type, []).copy()

        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                logger.error(
                    f"Error in event handler for {event.event_type.name}: {e}",
                    exc_info=True
                )

    def subscribe(self, event_type: EventType, handler: EventHandler) -> None:
        """Subscribe to an event type.

        Args:
            event_type: The type of event to subscribe to.
            handler: Callback function that takes an Event parameter.
        """
        with self._lock:
            self._subscribers.setdefault(event_type, []).append(handler)

        logger.debug(f"Subscribed to {event_type.name}")

    def unsubscribe(self, event_type: EventType, handler: EventHandler) -> bool:
        """Unsubscribe from an event type.

        Returns:
            True if handler was found and removed, False otherwise.
        """
        with self._lock:
            try:
                self._subscribers.get(event_type, []).remove(handler)
            except ValueError:
                return False

        logger.debug(f"Unsubscribed from {event_type.name}")
        return True

    def publish(self, event_type: EventType, data: Optional[Dict[str, Any]] = None,
                source: Optional[str] = None) -> None:
        """Publish an event to every subscriber of its type.

        Example:
            >>> bus.publish(EventType.CONFIG_CHANGED, source="ConfigStore")
        """
        event = Event(event_type=event_type, data=data or {}, source=source)
        logger.debug(f"Publishing {event_type.name}")
        self._dispatch_event(event)

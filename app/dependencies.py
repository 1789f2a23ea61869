"""Dependency injection container for Hostname Menu.

Provides one place to create the configuration store, the system query
adapters and the event bus, so the controller can be tested with fakes.

Usage:
    from app.dependencies import create_dependencies

    deps = create_dependencies()
    deps.config_store.config.max_width
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from config import STORAGE, get_logger

logger = get_logger(__name__)


@dataclass
class AppDependencies:
    """Container for all application dependencies.

    Each field is a component that can be swapped for a fake in tests.
    """

    # System query adapters
    system_info: "SystemInfo"
    interface_provider: "InterfaceProvider"

    # Storage
    config_store: "ConfigStore"

    # Shared event bus
    event_bus: "EventBus"

    def __post_init__(self):
        logger.debug("AppDependencies container created")


def create_dependencies(
    data_dir: Optional[Path] = None, event_bus: Optional["EventBus"] = None
) -> AppDependencies:
    """Create all application dependencies.

    Args:
        data_dir: Override the default application support directory.
        event_bus: Provide an existing event bus, or one will be created.

    Returns:
        AppDependencies container with all components.
    """
    # Import here to avoid circular imports
    from app.events import EventBus
    from hostinfo.interfaces import InterfaceProvider
    from hostinfo.system import SystemInfo
    from storage.config_store import ConfigStore

    logger.info("Creating application dependencies...")

    if data_dir is None:
        data_dir = STORAGE.data_dir
    if event_bus is None:
        event_bus = EventBus()

    deps = AppDependencies(
        system_info=SystemInfo(),
        interface_provider=InterfaceProvider(),
        config_store=ConfigStore(data_dir=data_dir, event_bus=event_bus),
        event_bus=event_bus,
    )

    logger.info("All dependencies created successfully")
    return deps

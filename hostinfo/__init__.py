"""Host information and menu bar text components.

Modules:
    display_item: Display item variants, parsing and formatting
    fitting: Fitting menu bar text into a pixel budget
    system: Computer name / local hostname queries
    interfaces: Active network interface addresses

Example:
    >>> from hostinfo import parse_free_text, raw_text
    >>> raw_text(parse_free_text("en0:10.0.0.2"))
    'en0: 10.0.0.2'
"""
from .display_item import (
    ComputerName,
    DisplayItem,
    IPAddress,
    ItemKind,
    LocalHostname,
    format_item,
    from_menu_selection,
    parse_free_text,
    raw_text,
)
from .fitting import FitMode, FitResult, center_ellipsize, fit_title
from .interfaces import InterfaceProvider, NetworkInterfaceInfo, sort_interfaces
from .system import SystemInfo

__all__ = [
    # Display items
    "ComputerName",
    "DisplayItem",
    "IPAddress",
    "ItemKind",
    "LocalHostname",
    "format_item",
    "from_menu_selection",
    "parse_free_text",
    "raw_text",
    # Fitting
    "FitMode",
    "FitResult",
    "center_ellipsize",
    "fit_title",
    # System queries
    "InterfaceProvider",
    "NetworkInterfaceInfo",
    "SystemInfo",
    "sort_interfaces",
]

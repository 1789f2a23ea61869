"""Display items shown in the menu bar.

A display item is exactly one of three values: the computer name, the
local hostname, or an IP address with an optional interface qualifier.
The variants are plain frozen dataclasses; parsing and formatting live in
free functions so the items stay pure data.

Example:
    >>> item = parse_free_text("en0: 192.168.1.5")
    >>> item
    IPAddress(interface='en0', address='192.168.1.5')
    >>> raw_text(item)
    'en0: 192.168.1.5'
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional, Union

from config import get_logger

if TYPE_CHECKING:
    from storage.config_store import LabelConfig

logger = get_logger(__name__)


class ItemKind(str, Enum):
    """Tags attached to dropdown menu entries."""

    COMPUTER_NAME = "computerName"
    LOCAL_HOSTNAME = "localHostname"
    IP_ADDRESS = "ipAddress"


@dataclass(frozen=True)
class ComputerName:
    """The user-facing computer name (scutil ComputerName)."""

    value: str


@dataclass(frozen=True)
class LocalHostname:
    """The Bonjour local hostname (scutil LocalHostName)."""

    value: str


@dataclass(frozen=True)
class IPAddress:
    """An address, optionally qualified by the interface that carries it.

    Attributes:
        interface: Trimmed, colon-free interface name such as "en0", or None.
        address: The raw address text. Never label-formatted.
    """

    interface: Optional[str]
    address: str


DisplayItem = Union[ComputerName, LocalHostname, IPAddress]


def _split_interface(text: str) -> IPAddress:
    """Split "<interface>:<address>" on the first colon.

    Only spaces and tabs are trimmed. The split happens when both trimmed
    sides are non-empty, otherwise the whole text is kept as the address.
    """
    interface, sep, address = text.partition(":")
    interface, address = interface.strip(" \t"), address.strip(" \t")
    if sep and interface and address:
        return IPAddress(interface=interface, address=address)
    return IPAddress(interface=None, address=text)


def parse_free_text(text: str) -> DisplayItem:
    """Rebuild a display item from free-form text.

    Text with a colon is split once on the first colon into interface and
    address when both sides are non-empty. Anything else, such as "en0:",
    becomes an address without interface. No check is made that the
    address is a valid IP.

    Examples:
        >>> parse_free_text("192.168.1.5")
        IPAddress(interface=None, address='192.168.1.5')
        >>> parse_free_text("utun3: fd00::1")
        IPAddress(interface='utun3', address='fd00::1')
    """
    item = _split_interface(text)
    logger.debug(f"Parsed free text {text!r} -> {item}")
    return item


def from_menu_selection(kind: Union[ItemKind, str], value: str) -> DisplayItem:
    """Convert a dropdown selection into a display item.

    Unknown kinds fall back to an address without interface.

    Examples:
        >>> from_menu_selection("computerName", "MyMac")
        ComputerName(value='MyMac')
        >>> from_menu_selection("bogus", "X")
        IPAddress(interface=None, address='X')
    """
    try:
        kind = ItemKind(kind)
    except ValueError:
        logger.debug(f"Unknown menu item kind {kind!r}, treating {value!r} as address")
        return IPAddress(interface=None, address=value)

    if kind is ItemKind.COMPUTER_NAME:
        return ComputerName(value)
    if kind is ItemKind.LOCAL_HOSTNAME:
        return LocalHostname(value)
    return _split_interface(value)


def format_item(item: DisplayItem, labels: LabelConfig) -> str:
    """Format a display item for the menu bar title.

    Labels are prefixed only when ``show_labels_in_menu_bar`` is set. The
    interface qualifier of an IP address is included only when
    ``show_interface_names_in_menu_bar`` is set.
    """
    if isinstance(item, ComputerName):
        label, text = labels.computer_name, item.value
    elif isinstance(item, LocalHostname):
        label, text = labels.local_hostname, item.value
    else:
        label = labels.ip_address
        if item.interface is not None and labels.show_interface_names_in_menu_bar:
            text = f"{item.interface}: {item.address}"
        else:
            text = item.address

    return label + text if labels.show_labels_in_menu_bar else text


def raw_text(item: DisplayItem) -> str:
    """Serialize a display item for persistence.

    Computer names and local hostnames serialize as their bare value, which
    is indistinguishable from an address without interface. Reloading such a
    value through parse_free_text yields an IPAddress.
    """
    if isinstance(item, (ComputerName, LocalHostname)):
        return item.value
    if item.interface is not None:
        return f"{item.interface}: {item.address}"
    return item.address


# === Dropdown titles (always labelled) ===

def menu_title_computer_name(name: str, labels: LabelConfig) -> str:
    return labels.computer_name + name


def menu_title_local_hostname(hostname: str, labels: LabelConfig) -> str:
    return labels.local_hostname + hostname


def menu_title_ip_address(interface: str, address: str) -> str:
    return f"{interface}: {address}"


__all__ = [
    "ComputerName",
    "DisplayItem",
    "IPAddress",
    "ItemKind",
    "LocalHostname",
    "format_item",
    "from_menu_selection",
    "menu_title_computer_name",
    "menu_title_ip_address",
    "menu_title_local_hostname",
    "parse_free_text",
    "raw_text",
]

"""Active network interface addresses using psutil.

Lists the IPv4 and IPv6 addresses of interfaces that are up, running
and not loopback. Link-local (fe80) and loopback addresses are dropped.
Results are sorted IPv4 first, then by interface name.

Example:
    >>> for info in InterfaceProvider().get_interfaces():
    ...     print(info.interface, info.address)
    en0 192.168.1.5
    en0 fd00::1c2b:3aff:fe44:1
"""

from __future__ import annotations

import socket
from dataclasses import dataclass
from typing import Iterable, List

import psutil

from config import get_logger

logger = get_logger(__name__)

EXCLUDED_PREFIXES = ("fe80", "::1")
EXCLUDED_ADDRESSES = frozenset({"127.0.0.1"})


@dataclass(frozen=True)
class NetworkInterfaceInfo:
    """One address on one active interface.

    Attributes:
        interface: BSD interface name, e.g. "en0".
        address: Numeric address without IPv6 zone suffix.
        is_ipv4: True for AF_INET, False for AF_INET6.
    """

    interface: str
    address: str
    is_ipv4: bool


def is_excluded_address(address: str) -> bool:
    """Whether an address is link-local or loopback."""
    return address.startswith(EXCLUDED_PREFIXES) or address in EXCLUDED_ADDRESSES


def sort_interfaces(interfaces: Iterable[NetworkInterfaceInfo]) -> List[NetworkInterfaceInfo]:
    """Order IPv4 entries before IPv6, ties broken by interface name.

    The sort is stable, so addresses of one interface keep their
    enumeration order.
    """
    return sorted(interfaces, key=lambda info: (not info.is_ipv4, info.interface))


def _is_active(stats) -> bool:
    """Interface is up and running and not loopback.

    psutil reports the raw flags on newer releases; older ones only
    expose ``isup``.
    """
    if stats is None or not stats.isup:
        return False
    flags = getattr(stats, "flags", "")
    if not flags:
        return True
    flag_set = set(flags.split(","))
    return "running" in flag_set and "loopback" not in flag_set


class InterfaceProvider:
    """Enumerates interface addresses for the dropdown menu."""

    def get_interfaces(self) -> List[NetworkInterfaceInfo]:
        """Get filtered, sorted interface addresses.

        Returns:
            List of NetworkInterfaceInfo; empty if enumeration fails.
        """
        try:
            addrs = psutil.net_if_addrs()
            stats = psutil.net_if_stats()
        except OSError as e:
            logger.warning(f"Could not enumerate network interfaces: {e}")
            return []

        result: List[NetworkInterfaceInfo] = []
        for name, addresses in addrs.items():
            if not _is_active(stats.get(name)):
                continue

            for addr in addresses:
                if addr.family not in (socket.AF_INET, socket.AF_INET6):
                    continue

                address = addr.address.split("%", 1)[0]
                if is_excluded_address(address):
                    continue

                result.append(NetworkInterfaceInfo(
                    interface=name,
                    address=address,
                    is_ipv4=addr.family == socket.AF_INET,
                ))

        logger.debug(f"Found {len(result)} active interface addresses")
        return sort_interfaces(result)


__all__ = [
    "InterfaceProvider",
    "NetworkInterfaceInfo",
    "is_excluded_address",
    "sort_interfaces",
]

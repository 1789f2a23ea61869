"""Mock implementations for testing Hostname Menu.

Provides fakes for the system query adapters so the controller can be
tested without scutil or real network interfaces.

Usage:
    from tests.mocks import MockSystemInfo, MockInterfaceProvider

    system = MockSystemInfo(computer_name=None)
    interfaces = MockInterfaceProvider()
    interfaces.add("en0", "10.0.0.2")
"""

from typing import List, Optional

from hostinfo.interfaces import NetworkInterfaceInfo, sort_interfaces


class MockSystemInfo:
    """Mock SystemInfo for testing."""

    def __init__(
        self,
        computer_name: Optional[str] = "Office iMac",
        local_hostname: Optional[str] = "Office-iMac",
    ):
        self.computer_name = computer_name
        self.local_hostname = local_hostname
        self.calls = 0

    def get_computer_name(self) -> Optional[str]:
        self.calls += 1
        return self.computer_name

    def get_local_hostname(self) -> Optional[str]:
        self.calls += 1
        return self.local_hostname


class MockInterfaceProvider:
    """Mock InterfaceProvider for testing."""

    def __init__(self, interfaces: Optional[List[NetworkInterfaceInfo]] = None):
        if interfaces is None:
            interfaces = [
                NetworkInterfaceInfo("en0", "192.168.1.5", True),
                NetworkInterfaceInfo("en0", "fd00::5", False),
            ]
        self._interfaces = list(interfaces)

    def add(self, interface: str, address: str, is_ipv4: bool = True) -> None:
        """Add a mock interface address."""
        self._interfaces.append(NetworkInterfaceInfo(interface, address, is_ipv4))

    def clear(self) -> None:
        self._interfaces = []

    def get_interfaces(self) -> List[NetworkInterfaceInfo]:
        return sort_interfaces(self._interfaces)

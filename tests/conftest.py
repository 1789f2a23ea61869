"""Pytest configuration and shared fixtures.

This module provides:
- Common test fixtures for data directories, stores and mocks
- Pytest markers for test categorization (unit, integration, macos_only)
"""
import json
import tempfile
from pathlib import Path
from typing import Any, Generator
from unittest.mock import MagicMock, patch

import pytest

from app.dependencies import AppDependencies
from app.events import EventBus
from storage.config_store import ConfigStore, LabelConfig
from tests.mocks import MockInterfaceProvider, MockSystemInfo


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: mark test as a unit test (fast, isolated)")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "macos_only: mark test as requiring macOS")


# =============================================================================
# Directory and Path Fixtures
# =============================================================================


@pytest.fixture
def temp_data_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test data."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_path(temp_data_dir: Path) -> Path:
    """Path of config.json inside the temporary data directory."""
    return temp_data_dir / "config.json"


# =============================================================================
# Sample Data Fixtures
# =============================================================================


@pytest.fixture
def sample_config_data() -> dict[str, Any]:
    """A valid config.json document."""
    return {
        "labels": {
            "computer_name": "Name: ",
            "local_hostname": "Host: ",
            "ip_address": "IP: ",
            "show_labels_in_menu_bar": True,
            "show_interface_names_in_menu_bar": False,
        },
        "last_display_item": "en0: 192.168.1.5",
        "max_width": 180,
    }


@pytest.fixture
def default_labels() -> LabelConfig:
    """Default label configuration."""
    return LabelConfig()


@pytest.fixture
def populated_config_file(config_path: Path, sample_config_data: dict) -> Path:
    """config.json pre-populated with sample data."""
    config_path.write_text(json.dumps(sample_config_data), encoding="utf-8")
    return config_path


# =============================================================================
# Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_subprocess() -> Generator[MagicMock, None, None]:
    """Mock subprocess for command execution testing."""
    with patch("subprocess.run") as mock_run:
        mock_run.return_value = MagicMock(
            returncode=0,
            stdout="",
            stderr="",
        )
        yield mock_run


@pytest.fixture
def mock_rumps_app() -> MagicMock:
    """Create a mock rumps.App with a status item for UI testing."""
    mock_app = MagicMock()
    mock_app.title = "Test"
    mock_app._nsapp.nsstatusitem = MagicMock()
    return mock_app


# =============================================================================
# Store and Dependency Fixtures
# =============================================================================


@pytest.fixture
def event_bus() -> EventBus:
    """A real synchronous event bus."""
    return EventBus()


@pytest.fixture
def config_store(temp_data_dir: Path, event_bus: EventBus) -> ConfigStore:
    """ConfigStore backed by a temporary directory."""
    return ConfigStore(data_dir=temp_data_dir, event_bus=event_bus)


@pytest.fixture
def mock_deps(config_store: ConfigStore, event_bus: EventBus) -> AppDependencies:
    """Dependency container with fake system adapters."""
    return AppDependencies(
        system_info=MockSystemInfo(),
        interface_provider=MockInterfaceProvider(),
        config_store=config_store,
        event_bus=event_bus,
    )

"""Configuration module for Hostname Menu.

Provides centralized constants, logging, exceptions, and subprocess utilities.
"""
from config.constants import (
    ALLOWED_SUBPROCESS_COMMANDS,
    INTERVALS,
    LABELS,
    STORAGE,
    UI,
    Intervals,
    LabelDefaults,
    StorageConfig,
    UIConfig,
)
from config.exceptions import (
    ConfigurationError,
    HostnameMenuError,
    StorageError,
    SubprocessError,
)
from config.logging_config import get_logger, setup_logging
from config.subprocess_utils import run_for_output, safe_run

__all__ = [
    # Constants
    "INTERVALS",
    "LABELS",
    "STORAGE",
    "UI",
    "Intervals",
    "LabelDefaults",
    "StorageConfig",
    "UIConfig",
    "ALLOWED_SUBPROCESS_COMMANDS",
    # Exceptions
    "HostnameMenuError",
    "StorageError",
    "ConfigurationError",
    "SubprocessError",
    # Logging
    "setup_logging",
    "get_logger",
    # Subprocess
    "safe_run",
    "run_for_output",
]

"""Data persistence components."""

from .config_store import AppConfig, ConfigStore, LabelConfig

__all__ = [
    "AppConfig",
    "ConfigStore",
    "LabelConfig",
]

"""
Configuration module
"""
from stock_tracker.config.settings import settings, Settings, StorageConfig, LoggerConfig
from stock_tracker.config.binding import (
    Configuration,
    resolve_configuration_directory,
    ensure_directory,
)

__all__ = [
    "settings",
    "Settings",
    "StorageConfig",
    "LoggerConfig",
    "Configuration",
    "resolve_configuration_directory",
    "ensure_directory",
]

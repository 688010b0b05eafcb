"""
DevWatch Utilities Package.

Configuration and logging shared across all packages.
Requires Python 3.11+.
"""

from utils.config import (
    ConfigError,
    DiffPolicy,
    Settings,
    WatchConfig,
    get_settings,
    load_watch_config,
)
from utils.logger import configure_logging, get_logger, logger, LoggerMixin, shutdown_logging

__all__ = [
    "ConfigError",
    "DiffPolicy",
    "Settings",
    "WatchConfig",
    "get_settings",
    "load_watch_config",
    "configure_logging",
    "get_logger",
    "logger",
    "LoggerMixin",
    "shutdown_logging",
]

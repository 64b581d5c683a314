"""Utility modules for docformat: configuration and logging setup."""

from .config import ConfigManager
from .logging_config import LogFormat, LogLevel, LoggingManager, JSONFormatter

__all__ = [
    "ConfigManager",
    "LogFormat",
    "LogLevel",
    "LoggingManager",
    "JSONFormatter",
]

"""
Logging configuration for docformat.

Library modules only create module-level loggers; handlers are installed by
applications (the CLI, or callers using LoggingManager) so that importing
docformat never changes the host's logging setup.
"""

import json
import logging
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union


class LogLevel(Enum):
    """Log level enumeration."""
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL
    
    @classmethod
    def from_name(cls, name: Union[str, "LogLevel"]) -> "LogLevel":
        """Look up a level by case-insensitive name."""
        if isinstance(name, LogLevel):
            return name
        try:
            return cls[str(name).strip().upper()]
        except KeyError:
            raise ValueError(
                f"Unknown log level {name!r}; expected one of {[level.name for level in cls]}"
            ) from None


class LogFormat(Enum):
    """Log format types."""
    STANDARD = "standard"
    JSON = "json"
    DETAILED = "detailed"


# Attributes every LogRecord carries; anything else was passed through ``extra``.
_STANDARD_ATTRS = frozenset({
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname',
    'filename', 'module', 'lineno', 'funcName', 'created',
    'msecs', 'relativeCreated', 'thread', 'threadName',
    'processName', 'process', 'exc_info', 'exc_text',
    'stack_info', 'message', 'taskName', 'asctime',
})


class JSONFormatter(logging.Formatter):
    """Format log records as one-line JSON objects."""
    
    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "logger": record.name,
            "level": record.levelname,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }
        
        for attr_name, attr_value in record.__dict__.items():
            if not attr_name.startswith('_') and attr_name not in _STANDARD_ATTRS:
                log_data[attr_name] = attr_value
        
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        
        return json.dumps(log_data, default=str, ensure_ascii=False, separators=(',', ':'))


def create_formatter(log_format: LogFormat) -> logging.Formatter:
    """Formatter for the given format type."""
    if log_format is LogFormat.JSON:
        return JSONFormatter()
    if log_format is LogFormat.DETAILED:
        return logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(funcName)s:%(lineno)d - %(message)s'
        )
    return logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')


class LoggingManager:
    """
    Configure the root logger for an application embedding docformat.
    
    Args:
        log_level: Minimum level for installed handlers
        log_format: Output format
        log_file: Optional file receiving the same records as the console
        enable_console: Install a stderr stream handler
        handler: Pre-built console handler to use instead of a StreamHandler
            (the CLI passes a RichHandler here)
    """
    
    def __init__(
        self,
        log_level: LogLevel = LogLevel.WARNING,
        log_format: LogFormat = LogFormat.STANDARD,
        log_file: Optional[Path] = None,
        enable_console: bool = True,
        handler: Optional[logging.Handler] = None,
    ):
        self.log_level = log_level
        self.log_format = log_format
        self.log_file = log_file
        self.enable_console = enable_console
        self.handler = handler
        
        self._setup_root_logger()
    
    @classmethod
    def from_config(cls, logging_config: Dict[str, Any], **kwargs: Any) -> "LoggingManager":
        """
        Build a manager from the ``logging`` configuration section.
        
        Args:
            logging_config: Mapping with optional ``level`` and ``format`` keys
            **kwargs: Passed through to the constructor
        """
        kwargs.setdefault("log_level", LogLevel.from_name(logging_config.get("level", "WARNING")))
        kwargs.setdefault("log_format", LogFormat(logging_config.get("format", "standard")))
        return cls(**kwargs)
    
    def _setup_root_logger(self) -> None:
        """Setup the root logger configuration."""
        root_logger = logging.getLogger()
        root_logger.setLevel(self.log_level.value)
        root_logger.handlers.clear()
        
        formatter = create_formatter(self.log_format)
        
        if self.enable_console:
            console_handler = self.handler or logging.StreamHandler()
            console_handler.setLevel(self.log_level.value)
            if self.handler is None or self.log_format is not LogFormat.STANDARD:
                console_handler.setFormatter(formatter)
            root_logger.addHandler(console_handler)
        
        if self.log_file:
            file_handler = logging.FileHandler(self.log_file, encoding="utf-8")
            file_handler.setLevel(self.log_level.value)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
    
    def get_logger(self, name: str) -> logging.Logger:
        """Get a logger instance."""
        return logging.getLogger(name)

"""
Tests for logging configuration.
"""

import json
import logging
import sys

import pytest

from docformat.utils.logging_config import (
    JSONFormatter,
    LogFormat,
    LoggingManager,
    LogLevel,
    create_formatter,
)


def make_record(message="hello", level=logging.INFO, **extra):
    record = logging.LogRecord(
        name="docformat.test",
        level=level,
        pathname=__file__,
        lineno=10,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestLogLevel:
    """Test level lookup."""
    
    @pytest.mark.parametrize("name,level", [
        ("debug", LogLevel.DEBUG), ("WARNING", LogLevel.WARNING), (" error ", LogLevel.ERROR),
    ])
    def test_from_name(self, name, level):
        assert LogLevel.from_name(name) is level
    
    def test_from_name_passes_members_through(self):
        assert LogLevel.from_name(LogLevel.INFO) is LogLevel.INFO
    
    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            LogLevel.from_name("loud")


class TestJSONFormatter:
    """Test JSON log formatting."""
    
    def test_basic_fields(self):
        data = json.loads(JSONFormatter().format(make_record("parsed 3 elements")))
        
        assert data["message"] == "parsed 3 elements"
        assert data["level"] == "INFO"
        assert data["logger"] == "docformat.test"
        assert data["line"] == 10
        assert "timestamp" in data
    
    def test_extra_fields_are_included(self):
        data = json.loads(JSONFormatter().format(make_record(path="elements[0]", element_index=0)))
        
        assert data["path"] == "elements[0]"
        assert data["element_index"] == 0
    
    def test_exception_info(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = make_record("failed", level=logging.ERROR)
            record.exc_info = sys.exc_info()
        
        data = json.loads(JSONFormatter().format(record))
        assert "ValueError: boom" in data["exception"]
    
    def test_create_formatter(self):
        assert isinstance(create_formatter(LogFormat.JSON), JSONFormatter)
        assert "%(funcName)s" in create_formatter(LogFormat.DETAILED)._fmt


class TestLoggingManager:
    """Test root logger setup."""
    
    def test_configures_root_logger(self):
        LoggingManager(log_level=LogLevel.DEBUG)
        root_logger = logging.getLogger()
        
        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1
        assert root_logger.handlers[0].level == logging.DEBUG
    
    def test_custom_handler_keeps_its_formatter(self):
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(message)s")
        handler.setFormatter(formatter)
        
        LoggingManager(handler=handler)
        
        assert logging.getLogger().handlers == [handler]
        assert handler.formatter is formatter
    
    def test_custom_handler_with_json_format(self):
        handler = logging.StreamHandler()
        LoggingManager(log_format=LogFormat.JSON, handler=handler)
        
        assert isinstance(handler.formatter, JSONFormatter)
    
    def test_log_file(self, temp_directory):
        log_file = temp_directory / "docformat.log"
        LoggingManager(log_level=LogLevel.INFO, log_format=LogFormat.JSON, log_file=log_file, enable_console=False)
        
        logging.getLogger("docformat.test").info("written to file")
        for handler in logging.getLogger().handlers:
            handler.flush()
            handler.close()
        
        line = log_file.read_text(encoding="utf-8").strip()
        assert json.loads(line)["message"] == "written to file"
    
    def test_from_config(self):
        manager = LoggingManager.from_config({"level": "error", "format": "detailed"})
        
        assert manager.log_level is LogLevel.ERROR
        assert manager.log_format is LogFormat.DETAILED
        assert logging.getLogger().level == logging.ERROR

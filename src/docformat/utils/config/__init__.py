"""Configuration management package.

This package provides a modular configuration system with support for:
- JSON schema validation
- Environment variable overrides (DOCFORMAT_* and .env)
- Built-in defaults merged under an optional configuration file

Usage:
    from docformat.utils.config import ConfigManager
    
    config = ConfigManager()
    options = config.get_parsing_options()
"""

from .manager import ConfigManager, DEFAULT_CONFIG, deep_merge
from .paths import ConfigPaths
from .file_operations import FileOperations
from .schema_validation import SchemaValidator, CONFIG_SCHEMA
from .environment import EnvironmentHandler

__all__ = [
    'ConfigManager',
    'DEFAULT_CONFIG',
    'deep_merge',
    'ConfigPaths',
    'FileOperations',
    'SchemaValidator',
    'CONFIG_SCHEMA',
    'EnvironmentHandler',
]

"""
Configuration file paths and constants for docformat.
"""

from dataclasses import dataclass


@dataclass
class ConfigPaths:
    """Configuration file paths and constants."""
    
    DEFAULT_CONFIG_FILE: str = "docformat.config.json"
    ENV_FILE: str = ".env"
    ENV_PREFIX: str = "DOCFORMAT_"

"""
Main configuration manager for docformat.

ConfigManager layers configuration from, lowest to highest precedence:
built-in defaults, the JSON configuration file, and ``DOCFORMAT_*``
environment variables (including those loaded from ``.env``). The merged
result is validated against CONFIG_SCHEMA before it is used.
"""

import logging
import os
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ...core.document_format.options import ParsingOptions
from ...exceptions.config_exceptions import (
    ConfigurationError,
    ConfigurationFileNotFoundError,
)
from .environment import EnvironmentHandler
from .file_operations import FileOperations
from .paths import ConfigPaths
from .schema_validation import SchemaValidator


logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "parsing": ParsingOptions().to_dict(),
    "logging": {
        "level": "WARNING",
        "format": "standard",
    },
}


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge override into a copy of base, recursing into nested dictionaries.
    
    Args:
        base: Lower-precedence configuration
        override: Higher-precedence configuration
        
    Returns:
        New merged dictionary; neither argument is modified
    """
    result = deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = deepcopy(value)
    return result


class ConfigManager:
    """
    Configuration manager for docformat.
    
    Handles loading, validation, and merging of configuration from multiple sources:
    - Built-in defaults
    - The configuration file
    - Environment variables
    
    Example:
        >>> manager = ConfigManager(load_env=False)
        >>> manager.get("parsing.extract_tables")
        True
    """
    
    def __init__(
        self,
        config_file: Optional[str] = None,
        project_root: Optional[Union[str, Path]] = None,
        load_env: bool = True,
    ) -> None:
        """
        Initialize the ConfigManager.
        
        Args:
            config_file: Path to the configuration file. When given, the file
                must exist; when omitted, docformat.config.json is used if
                present.
            project_root: Directory relative paths resolve against (default: cwd)
            load_env: Whether to load environment variables from .env file
        """
        self.project_root = Path(project_root or os.getcwd()).resolve()
        self.paths = ConfigPaths()
        self.explicit_config = config_file is not None
        self.config_file = config_file or self.paths.DEFAULT_CONFIG_FILE
        
        self._config: Dict[str, Any] = {}
        self._loaded = False
        self.logger = logger
        
        self.file_ops = FileOperations(self.project_root, self.paths.ENV_FILE)
        self.schema_validator = SchemaValidator()
        self.env_handler = EnvironmentHandler()
        
        if load_env:
            self.file_ops.load_environment_variables()
    
    @property
    def config(self) -> Dict[str, Any]:
        """Get the current configuration. Loads if not already loaded."""
        if not self._loaded:
            self.load_config()
        return deepcopy(self._config)
    
    @property
    def is_loaded(self) -> bool:
        """Check if configuration has been loaded."""
        return self._loaded
    
    @property
    def config_path(self) -> Path:
        return self.file_ops.resolve_path(self.config_file)
    
    def load_config(self, force_reload: bool = False) -> Dict[str, Any]:
        """
        Load configuration from all sources.
        
        Args:
            force_reload: Force reloading even if already loaded
            
        Returns:
            Loaded configuration dictionary
            
        Raises:
            ConfigurationFileNotFoundError: If an explicit config file is missing
            ConfigurationValidationError: If the merged configuration is invalid
            EnvironmentVariableError: If an override can't be converted
            ConfigurationError: If the file can't be read
        """
        if self._loaded and not force_reload:
            self.logger.debug("Configuration already loaded, returning cached version")
            return deepcopy(self._config)
        
        self._loaded = False
        file_config = self._load_file_config()
        
        merged_config = deep_merge(DEFAULT_CONFIG, file_config)
        
        self.logger.debug("Applying environment variable overrides")
        config = self.env_handler.apply_environment_overrides(merged_config)
        
        try:
            self.schema_validator.validate_config(config, str(self.config_path))
        except ConfigurationError as e:
            self.logger.error(f"Configuration loading failed: {e}")
            raise
        
        self._config = config
        self._loaded = True
        self.logger.debug("Configuration loaded successfully")
        return deepcopy(self._config)
    
    def _load_file_config(self) -> Dict[str, Any]:
        try:
            return self.file_ops.load_json_file(self.config_path)
        except ConfigurationFileNotFoundError:
            if self.explicit_config:
                raise
            self.logger.debug(f"No configuration file at {self.config_path}, using defaults")
            return {}
    
    def reload_config(self) -> Dict[str, Any]:
        """Force reload configuration from all sources."""
        return self.load_config(force_reload=True)
    
    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by key using dot notation.
        
        Args:
            key: Configuration key (supports dot notation like 'parsing.extract_lists')
            default: Default value if key not found
            
        Returns:
            Configuration value or default
        """
        config = self.config
        
        try:
            for k in key.split('.'):
                config = config[k]
            return config
        except (KeyError, TypeError):
            return default
    
    def has(self, key: str) -> bool:
        """Check if a configuration key exists."""
        sentinel = object()
        return self.get(key, sentinel) is not sentinel
    
    def reset(self) -> None:
        """Reset configuration state, forcing reload on next access."""
        self._config = {}
        self._loaded = False
    
    def get_parsing_options(self, **overrides: Any) -> ParsingOptions:
        """
        Build ParsingOptions from the ``parsing`` section.
        
        Args:
            **overrides: Field values that take precedence over configuration
                (None values are ignored)
        """
        values = self.get("parsing", {})
        values.update({key: value for key, value in overrides.items() if value is not None})
        return ParsingOptions.from_dict(values)
    
    def get_config_summary(self) -> Dict[str, Any]:
        """
        Get a summary of the current configuration state.
        
        Returns:
            Dictionary with configuration summary
        """
        return {
            "loaded": self._loaded,
            "config_file": str(self.config_path),
            "config_file_exists": self.config_path.is_file(),
            "project_root": str(self.project_root),
            "config_keys": self._get_all_keys(self._config) if self._loaded else [],
            "environment_overrides": self.env_handler.active_overrides(),
        }
    
    def _get_all_keys(self, config: Dict[str, Any], prefix: str = "") -> List[str]:
        keys = []
        for key, value in config.items():
            full_key = f"{prefix}.{key}" if prefix else key
            keys.append(full_key)
            if isinstance(value, dict):
                keys.extend(self._get_all_keys(value, full_key))
        return keys

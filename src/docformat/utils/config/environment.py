"""
Environment variable handling for configuration management.

Maps ``DOCFORMAT_*`` variables onto configuration keys and converts their
string values to the types the configuration schema expects.
"""

import logging
import os
from copy import deepcopy
from typing import Any, Dict, Mapping, Optional, Tuple

from ...exceptions.config_exceptions import EnvironmentVariableError


logger = logging.getLogger(__name__)

TRUE_VALUES = ('true', '1', 'yes', 'on', 'enabled')
FALSE_VALUES = ('false', '0', 'no', 'off', 'disabled')


class EnvironmentHandler:
    """
    Environment variable handling for configuration management.
    
    Handles environment variable overrides and type conversion.
    """
    
    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        """
        Initialize environment handler.
        
        Args:
            environ: Environment to read (default: os.environ at call time)
        """
        self._environ = environ
        self.logger = logger
    
    @property
    def environ(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ
    
    def get_env_mapping(self) -> Dict[str, Tuple[str, str]]:
        """
        Get mapping of environment variable names to configuration keys.
        
        Returns:
            Dictionary mapping env var names to (config key, target type)
        """
        return {
            'DOCFORMAT_PRESERVE_FORMATTING': ('parsing.preserve_formatting', 'boolean'),
            'DOCFORMAT_EXTRACT_TABLES': ('parsing.extract_tables', 'boolean'),
            'DOCFORMAT_EXTRACT_LISTS': ('parsing.extract_lists', 'boolean'),
            'DOCFORMAT_EXTRACT_IMAGES': ('parsing.extract_images', 'boolean'),
            'DOCFORMAT_DEFAULT_FONT_SIZE': ('parsing.default_font_size', 'integer'),
            'DOCFORMAT_DEFAULT_ALIGNMENT': ('parsing.default_alignment', 'lowercase'),
            'DOCFORMAT_LOG_LEVEL': ('logging.level', 'uppercase'),
            'DOCFORMAT_LOG_FORMAT': ('logging.format', 'lowercase'),
        }
    
    def convert_env_value(self, value: str, target_type: str = 'string', variable_name: Optional[str] = None) -> Any:
        """
        Convert environment variable string to appropriate Python type.
        
        Args:
            value: Environment variable value (always string)
            target_type: Target type ('string', 'boolean', 'integer', 'lowercase', 'uppercase')
            variable_name: Variable name for error reporting
            
        Returns:
            Converted value
            
        Raises:
            EnvironmentVariableError: If conversion fails
        """
        value = value.strip()
        
        if target_type == 'boolean':
            lowered = value.lower()
            if lowered in TRUE_VALUES:
                return True
            if lowered in FALSE_VALUES:
                return False
            raise EnvironmentVariableError(
                f"Cannot convert {variable_name or 'environment variable'}={value!r} to boolean",
                variable_name
            )
        
        if target_type == 'integer':
            try:
                return int(value)
            except ValueError as e:
                raise EnvironmentVariableError(
                    f"Cannot convert {variable_name or 'environment variable'}={value!r} to integer",
                    variable_name
                ) from e
        
        if target_type == 'lowercase':
            return value.lower()
        if target_type == 'uppercase':
            return value.upper()
        
        return value
    
    def apply_environment_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply environment variable overrides to configuration.
        
        Empty variables are ignored. A value that can't be converted raises,
        so a typo in the environment is never silently dropped.
        
        Args:
            config: Base configuration dictionary
            
        Returns:
            Configuration with environment overrides applied
            
        Raises:
            EnvironmentVariableError: If a value can't be converted
        """
        result = deepcopy(config)
        
        for env_var, (config_key, target_type) in self.get_env_mapping().items():
            env_value = self.environ.get(env_var)
            if env_value is None or not env_value.strip():
                continue
            
            converted_value = self.convert_env_value(env_value, target_type, env_var)
            self._set_nested_value(result, config_key, converted_value)
            self.logger.debug(f"Applied environment override: {env_var} -> {config_key}")
        
        return result
    
    def active_overrides(self) -> Dict[str, str]:
        """Environment variables that currently override a configuration key."""
        return {
            env_var: config_key
            for env_var, (config_key, _) in self.get_env_mapping().items()
            if (self.environ.get(env_var) or "").strip()
        }
    
    def _set_nested_value(self, config: Dict[str, Any], key_path: str, value: Any) -> None:
        """
        Set a nested value in configuration using dot notation.
        
        Args:
            config: Configuration dictionary to modify
            key_path: Dot-separated key path (e.g., 'parsing.extract_tables')
            value: Value to set
        """
        keys = key_path.split('.')
        current = config
        
        for key in keys[:-1]:
            if key not in current:
                current[key] = {}
            current = current[key]
        
        current[keys[-1]] = value

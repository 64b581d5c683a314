"""
File operations for configuration management.

Path resolution, JSON loading and ``.env`` loading for the docformat
configuration system.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from dotenv import load_dotenv

from ...exceptions.config_exceptions import (
    ConfigurationError,
    ConfigurationFileNotFoundError,
)


logger = logging.getLogger(__name__)


class FileOperations:
    """
    File operations for configuration management.
    
    Handles file loading, path resolution, and environment file loading.
    """
    
    def __init__(self, project_root: Path, env_file: str) -> None:
        """
        Initialize file operations.
        
        Args:
            project_root: Directory relative paths are resolved against
            env_file: Environment file name
        """
        self.project_root = project_root
        self.env_file = env_file
        self.logger = logger
    
    def resolve_path(self, path: Union[str, Path]) -> Path:
        """
        Resolve a path relative to the project root.
        
        Args:
            path: Path to resolve (can be relative or absolute)
            
        Returns:
            Resolved absolute path
        """
        path_obj = Path(path).expanduser()
        if path_obj.is_absolute():
            return path_obj
        return (self.project_root / path_obj).resolve()
    
    def load_environment_variables(self) -> bool:
        """
        Load environment variables from the .env file if it exists.
        
        Variables already present in the process environment win over the
        file. A missing file is not an error.
        
        Returns:
            True if a file was loaded
        """
        env_file_path = self.resolve_path(self.env_file)
        if not env_file_path.is_file():
            self.logger.debug(f"Environment file not found at {env_file_path}, skipping")
            return False
        
        self.logger.debug(f"Loading environment variables from {env_file_path}")
        load_dotenv(env_file_path, override=False)
        return True
    
    def load_json_file(self, file_path: Union[str, Path]) -> Dict[str, Any]:
        """
        Load and parse a JSON file.
        
        Args:
            file_path: Path to JSON file
            
        Returns:
            Parsed JSON data
            
        Raises:
            ConfigurationFileNotFoundError: If file doesn't exist
            ConfigurationError: If the file can't be read or isn't a JSON object
        """
        resolved_path = self.resolve_path(file_path)
        
        self.logger.debug(f"Attempting to load configuration file: {resolved_path}")
        
        if not resolved_path.is_file():
            error_msg = f"Configuration file not found: {resolved_path}"
            self.logger.error(error_msg)
            raise ConfigurationFileNotFoundError(error_msg, str(resolved_path))
        
        try:
            with open(resolved_path, 'r', encoding='utf-8') as f:
                config_data = json.load(f)
        except json.JSONDecodeError as e:
            error_msg = f"Invalid JSON in configuration file {resolved_path}: {e}"
            self.logger.error(error_msg)
            raise ConfigurationError(error_msg, str(resolved_path)) from e
        except OSError as e:
            error_msg = f"Error reading configuration file {resolved_path}: {e}"
            self.logger.error(error_msg)
            raise ConfigurationError(error_msg, str(resolved_path)) from e
        
        if not isinstance(config_data, dict):
            raise ConfigurationError(
                f"Configuration file {resolved_path} must contain a JSON object",
                str(resolved_path),
            )
        
        self.logger.info(f"Loaded configuration from {resolved_path}")
        return config_data

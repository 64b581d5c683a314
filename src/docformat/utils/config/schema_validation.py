"""
Schema validation for configuration management.

The configuration schema ships with the package as a Python constant, so
validation never depends on files outside the installed package.
"""

import logging
from typing import Any, Dict, List, Optional

import jsonschema

from ...exceptions.config_exceptions import (
    ConfigurationSchemaError,
    ConfigurationValidationError,
)


logger = logging.getLogger(__name__)

CONFIG_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "docformat configuration",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "parsing": {
            "type": "object",
            "additionalProperties": False,
            "properties": {
                "preserve_formatting": {"type": "boolean"},
                "extract_tables": {"type": "boolean"},
                "extract_lists": {"type": "boolean"},
                "extract_images": {"type": "boolean"},
                "default_font_size": {"type": "integer", "minimum": 1},
                "default_alignment": {"enum": ["left", "center", "right", "justify"]},
            },
        },
        "logging": {
            "type": "object",
            "additionalProperties": False,
            "properties": {
                "level": {"enum": ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]},
                "format": {"enum": ["standard", "json", "detailed"]},
            },
        },
    },
}


def _field_path(error: jsonschema.ValidationError) -> str:
    return ".".join(str(p) for p in error.absolute_path)


class SchemaValidator:
    """
    Schema validation for configuration management.
    
    Collects every violation, not only the first, so one run reports all
    fields that need fixing.
    """
    
    def __init__(self, schema: Optional[Dict[str, Any]] = None) -> None:
        """
        Initialize schema validator.
        
        Args:
            schema: JSON schema (default: CONFIG_SCHEMA)
            
        Raises:
            ConfigurationSchemaError: If the schema itself is invalid
        """
        self.schema = schema if schema is not None else CONFIG_SCHEMA
        self.logger = logger
        
        try:
            jsonschema.Draft7Validator.check_schema(self.schema)
        except jsonschema.SchemaError as e:
            raise ConfigurationSchemaError(
                f"Invalid JSON schema: {e.message}",
                schema_errors=[e.message]
            ) from e
        
        self._validator = jsonschema.Draft7Validator(self.schema)
    
    def validate_config(self, config: Dict[str, Any], config_file: Optional[str] = None) -> bool:
        """
        Validate configuration against the schema.
        
        Args:
            config: Configuration to validate
            config_file: Configuration file name for error reporting
            
        Returns:
            True if validation passes
            
        Raises:
            ConfigurationValidationError: If validation fails
        """
        errors = sorted(self._validator.iter_errors(config), key=lambda e: [str(p) for p in e.absolute_path])
        if not errors:
            return True
        
        validation_errors: List[str] = []
        invalid_fields: List[str] = []
        for error in errors:
            field_path = _field_path(error)
            validation_errors.append(f"{field_path}: {error.message}" if field_path else error.message)
            if field_path and field_path not in invalid_fields:
                invalid_fields.append(field_path)
        
        self.logger.debug(f"Configuration failed validation with {len(errors)} error(s)")
        raise ConfigurationValidationError(
            f"Configuration validation failed: {errors[0].message}",
            config_file,
            validation_errors,
            invalid_fields
        )

"""
Exceptions package for docformat.

This package contains custom exception classes for the structured-encoding
parser and the configuration system.
"""

from .config_exceptions import (
    ConfigurationError,
    ConfigurationFileNotFoundError,
    ConfigurationValidationError,
    EnvironmentVariableError,
    ConfigurationSchemaError,
)

from .parsing_exceptions import (
    DocumentFormatError,
    StructuredDocumentError,
    StructuredDecodeError,
    StructuredValidationError,
)

__all__ = [
    # Configuration exceptions
    "ConfigurationError",
    "ConfigurationFileNotFoundError",
    "ConfigurationValidationError",
    "EnvironmentVariableError",
    "ConfigurationSchemaError",
    # Parsing exceptions
    "DocumentFormatError",
    "StructuredDocumentError",
    "StructuredDecodeError",
    "StructuredValidationError",
]

"""
Configuration errors raised while building the docformat configuration.

Each error renders as its message, the config file involved (if any), the
individual problems found, and a short list of fixes to try. The CLI prints
``str(error)`` as is.
"""

from typing import List, Optional, Sequence


class ConfigurationError(Exception):
    """
    Base class for every configuration failure.
    
    Subclasses list their standard fixes in ``hints``; call sites can add
    more through ``suggestions``.
    """
    
    hints: Sequence[str] = ()
    
    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        suggestions: Optional[List[str]] = None,
        problems: Optional[List[str]] = None
    ) -> None:
        super().__init__(message)
        self.config_file = config_file
        self.problems = list(problems or [])
        self.suggestions = [*self.hints, *(suggestions or [])]
    
    def __str__(self) -> str:
        lines = [super().__str__()]
        if self.config_file:
            lines.append(f"Config file: {self.config_file}")
        if self.problems:
            lines.append("")
            lines.append("Problems:")
            lines.extend(f"  - {problem}" for problem in self.problems)
        if self.suggestions:
            lines.append("")
            lines.append("Try:")
            lines.extend(f"  - {suggestion}" for suggestion in self.suggestions)
        return "\n".join(lines)


class ConfigurationFileNotFoundError(ConfigurationError):
    """A config file named with ``--config-path`` does not exist."""
    
    hints = (
        "Pass an existing path to --config-path",
        "Omit --config-path to use docformat.config.json or the defaults",
    )


class ConfigurationValidationError(ConfigurationError):
    """The merged configuration does not match CONFIG_SCHEMA."""
    
    hints = ("Only 'parsing' and 'logging' sections with known keys are accepted",)
    
    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        validation_errors: Optional[List[str]] = None,
        invalid_fields: Optional[List[str]] = None
    ) -> None:
        fields = invalid_fields or []
        extra = [f"Fix {', '.join(fields)}"] if fields else None
        super().__init__(message, config_file, extra, validation_errors)
        self.invalid_fields = list(fields)
    
    @property
    def validation_errors(self) -> List[str]:
        return self.problems


class EnvironmentVariableError(ConfigurationError):
    """A ``DOCFORMAT_*`` override has a value of the wrong type."""
    
    hints = ("Use true or false for boolean options and whole numbers for sizes",)
    
    def __init__(self, message: str, variable_name: Optional[str] = None) -> None:
        extra = [f"Fix or unset {variable_name}"] if variable_name else None
        super().__init__(message, suggestions=extra)
        self.variable_name = variable_name


class ConfigurationSchemaError(ConfigurationError):
    """CONFIG_SCHEMA itself is not a valid Draft-07 schema."""
    
    def __init__(self, message: str, schema_errors: Optional[List[str]] = None) -> None:
        super().__init__(message, problems=schema_errors)
    
    @property
    def schema_errors(self) -> List[str]:
        return self.problems

"""
Unit tests for ConfigManager and its helpers.

Tests cover default resolution, file loading, deep merging, environment
variable overrides, .env loading, validation and error handling.
"""

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from docformat.core.document_format import ParsingOptions
from docformat.exceptions.config_exceptions import (
    ConfigurationError,
    ConfigurationFileNotFoundError,
    ConfigurationSchemaError,
    ConfigurationValidationError,
    EnvironmentVariableError,
)
from docformat.models.document_model import Alignment
from docformat.utils.config import (
    ConfigManager,
    ConfigPaths,
    DEFAULT_CONFIG,
    EnvironmentHandler,
    SchemaValidator,
    deep_merge,
)


def write_config(directory: Path, data, name: str = "docformat.config.json") -> Path:
    path = directory / name
    path.write_text(json.dumps(data) if not isinstance(data, str) else data, encoding="utf-8")
    return path


class TestConfigPaths:
    """Test ConfigPaths dataclass."""
    
    def test_default_paths(self):
        paths = ConfigPaths()
        assert paths.DEFAULT_CONFIG_FILE == "docformat.config.json"
        assert paths.ENV_FILE == ".env"
        assert paths.ENV_PREFIX == "DOCFORMAT_"


class TestDeepMerge:
    """Test dictionary merging."""
    
    def test_nested_values_are_merged(self):
        base = {"parsing": {"a": 1, "b": 2}, "logging": {"level": "INFO"}}
        merged = deep_merge(base, {"parsing": {"b": 3}})
        
        assert merged == {"parsing": {"a": 1, "b": 3}, "logging": {"level": "INFO"}}
        assert base["parsing"]["b"] == 2
    
    def test_non_dict_override_replaces(self):
        assert deep_merge({"a": {"b": 1}}, {"a": 5}) == {"a": 5}


class TestConfigManagerLoading:
    """Test configuration loading from defaults and files."""
    
    def test_init_does_not_load(self, temp_directory):
        manager = ConfigManager(project_root=temp_directory, load_env=False)
        
        assert manager.config_file == "docformat.config.json"
        assert manager.project_root == temp_directory.resolve()
        assert not manager.is_loaded
    
    def test_missing_default_file_uses_defaults(self, temp_directory):
        manager = ConfigManager(project_root=temp_directory, load_env=False)
        
        assert manager.config == DEFAULT_CONFIG
        assert manager.is_loaded
    
    def test_missing_explicit_file_raises(self, temp_directory):
        manager = ConfigManager(config_file="absent.json", project_root=temp_directory, load_env=False)
        
        with pytest.raises(ConfigurationFileNotFoundError) as exc_info:
            manager.load_config()
        assert "absent.json" in str(exc_info.value)
        assert not manager.is_loaded
    
    def test_file_is_merged_over_defaults(self, temp_directory):
        write_config(temp_directory, {"parsing": {"extract_lists": False}})
        manager = ConfigManager(project_root=temp_directory, load_env=False)
        
        assert manager.get("parsing.extract_lists") is False
        assert manager.get("parsing.extract_tables") is True
        assert manager.get("logging.level") == "WARNING"
    
    def test_explicit_absolute_path(self, temp_directory):
        path = write_config(temp_directory, {"logging": {"format": "json"}}, name="custom.json")
        manager = ConfigManager(config_file=str(path), load_env=False)
        
        assert manager.get("logging.format") == "json"
    
    def test_invalid_json_raises(self, temp_directory):
        write_config(temp_directory, "{not json")
        manager = ConfigManager(project_root=temp_directory, load_env=False)
        
        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            manager.load_config()
    
    def test_non_object_json_raises(self, temp_directory):
        write_config(temp_directory, [1, 2])
        manager = ConfigManager(project_root=temp_directory, load_env=False)
        
        with pytest.raises(ConfigurationError, match="JSON object"):
            manager.load_config()
    
    def test_reload_picks_up_changes(self, temp_directory):
        path = write_config(temp_directory, {"parsing": {"default_font_size": 10}})
        manager = ConfigManager(project_root=temp_directory, load_env=False)
        assert manager.get("parsing.default_font_size") == 10
        
        path.write_text(json.dumps({"parsing": {"default_font_size": 16}}), encoding="utf-8")
        assert manager.get("parsing.default_font_size") == 10
        
        manager.reload_config()
        assert manager.get("parsing.default_font_size") == 16
    
    def test_config_property_returns_copy(self, temp_directory):
        manager = ConfigManager(project_root=temp_directory, load_env=False)
        manager.config["parsing"]["extract_tables"] = False
        
        assert manager.get("parsing.extract_tables") is True


class TestConfigManagerValidation:
    """Test schema validation of merged configuration."""
    
    def test_invalid_value(self, temp_directory):
        write_config(temp_directory, {"parsing": {"default_font_size": 0}})
        manager = ConfigManager(project_root=temp_directory, load_env=False)
        
        with pytest.raises(ConfigurationValidationError) as exc_info:
            manager.load_config()
        assert exc_info.value.invalid_fields == ["parsing.default_font_size"]
    
    def test_unknown_section(self, temp_directory):
        write_config(temp_directory, {"rendering": {}})
        manager = ConfigManager(project_root=temp_directory, load_env=False)
        
        with pytest.raises(ConfigurationValidationError, match="rendering"):
            manager.load_config()
    
    def test_every_violation_is_reported(self, temp_directory):
        write_config(temp_directory, {
            "parsing": {"extract_tables": "yes", "default_alignment": "middle"},
        })
        manager = ConfigManager(project_root=temp_directory, load_env=False)
        
        with pytest.raises(ConfigurationValidationError) as exc_info:
            manager.load_config()
        assert set(exc_info.value.invalid_fields) == {
            "parsing.extract_tables", "parsing.default_alignment"
        }
        assert len(exc_info.value.validation_errors) == 2
    
    def test_invalid_schema(self):
        with pytest.raises(ConfigurationSchemaError):
            SchemaValidator({"type": 12})


class TestEnvironmentOverrides:
    """Test DOCFORMAT_* environment variables."""
    
    def test_overrides_are_applied(self, temp_directory, monkeypatch):
        monkeypatch.setenv("DOCFORMAT_EXTRACT_TABLES", "false")
        monkeypatch.setenv("DOCFORMAT_DEFAULT_FONT_SIZE", "14")
        monkeypatch.setenv("DOCFORMAT_DEFAULT_ALIGNMENT", "CENTER")
        monkeypatch.setenv("DOCFORMAT_LOG_LEVEL", "debug")
        manager = ConfigManager(project_root=temp_directory, load_env=False)
        
        assert manager.get("parsing.extract_tables") is False
        assert manager.get("parsing.default_font_size") == 14
        assert manager.get("parsing.default_alignment") == "center"
        assert manager.get("logging.level") == "DEBUG"
    
    def test_environment_beats_file(self, temp_directory, monkeypatch):
        write_config(temp_directory, {"parsing": {"extract_lists": False}})
        monkeypatch.setenv("DOCFORMAT_EXTRACT_LISTS", "yes")
        manager = ConfigManager(project_root=temp_directory, load_env=False)
        
        assert manager.get("parsing.extract_lists") is True
    
    def test_empty_variable_is_ignored(self, temp_directory, monkeypatch):
        monkeypatch.setenv("DOCFORMAT_EXTRACT_TABLES", "  ")
        manager = ConfigManager(project_root=temp_directory, load_env=False)
        
        assert manager.get("parsing.extract_tables") is True
    
    def test_unconvertible_variable_raises(self, temp_directory, monkeypatch):
        monkeypatch.setenv("DOCFORMAT_EXTRACT_TABLES", "maybe")
        manager = ConfigManager(project_root=temp_directory, load_env=False)
        
        with pytest.raises(EnvironmentVariableError) as exc_info:
            manager.load_config()
        assert exc_info.value.variable_name == "DOCFORMAT_EXTRACT_TABLES"
    
    def test_out_of_range_variable_fails_validation(self, temp_directory, monkeypatch):
        monkeypatch.setenv("DOCFORMAT_DEFAULT_FONT_SIZE", "-2")
        manager = ConfigManager(project_root=temp_directory, load_env=False)
        
        with pytest.raises(ConfigurationValidationError):
            manager.load_config()
    
    @patch.dict(os.environ)
    def test_env_file_is_loaded(self, temp_directory):
        (temp_directory / ".env").write_text("DOCFORMAT_EXTRACT_LISTS=false\n", encoding="utf-8")
        manager = ConfigManager(project_root=temp_directory)
        
        assert manager.get("parsing.extract_lists") is False
    
    @patch.dict(os.environ, {"DOCFORMAT_EXTRACT_LISTS": "true"})
    def test_process_environment_beats_env_file(self, temp_directory):
        (temp_directory / ".env").write_text("DOCFORMAT_EXTRACT_LISTS=false\n", encoding="utf-8")
        manager = ConfigManager(project_root=temp_directory)
        
        assert manager.get("parsing.extract_lists") is True
    
    @patch('docformat.utils.config.file_operations.load_dotenv')
    def test_load_env_false_skips_env_file(self, mock_load_dotenv, temp_directory):
        (temp_directory / ".env").write_text("DOCFORMAT_EXTRACT_LISTS=false\n", encoding="utf-8")
        ConfigManager(project_root=temp_directory, load_env=False)
        
        mock_load_dotenv.assert_not_called()


class TestEnvironmentHandler:
    """Test value conversion with an injected environment."""
    
    @pytest.mark.parametrize("raw,expected", [
        ("true", True), ("1", True), ("ON", True), ("false", False), ("0", False), ("Off", False),
    ])
    def test_boolean_conversion(self, raw, expected):
        assert EnvironmentHandler().convert_env_value(raw, "boolean") is expected
    
    def test_integer_conversion_error(self):
        with pytest.raises(EnvironmentVariableError, match="integer"):
            EnvironmentHandler().convert_env_value("twelve", "integer", "DOCFORMAT_DEFAULT_FONT_SIZE")
    
    def test_injected_environment(self):
        handler = EnvironmentHandler({"DOCFORMAT_LOG_FORMAT": "JSON"})
        
        assert handler.apply_environment_overrides({}) == {"logging": {"format": "json"}}
        assert handler.active_overrides() == {"DOCFORMAT_LOG_FORMAT": "logging.format"}
    
    def test_base_config_is_not_mutated(self):
        base = {"parsing": {"extract_tables": True}}
        EnvironmentHandler({"DOCFORMAT_EXTRACT_TABLES": "false"}).apply_environment_overrides(base)
        
        assert base == {"parsing": {"extract_tables": True}}


class TestConfigManagerAccess:
    """Test value access helpers."""
    
    def test_get_with_default(self, temp_directory):
        manager = ConfigManager(project_root=temp_directory, load_env=False)
        
        assert manager.get("parsing.missing", "fallback") == "fallback"
        assert manager.get("parsing.extract_tables.deeper") is None
        assert manager.has("logging.level")
        assert not manager.has("logging.colour")
    
    def test_get_parsing_options(self, temp_directory):
        write_config(temp_directory, {"parsing": {"default_font_size": 11, "default_alignment": "right"}})
        manager = ConfigManager(project_root=temp_directory, load_env=False)
        
        options = manager.get_parsing_options()
        
        assert isinstance(options, ParsingOptions)
        assert options.default_font_size == 11
        assert options.default_alignment is Alignment.RIGHT
    
    def test_get_parsing_options_overrides(self, temp_directory):
        manager = ConfigManager(project_root=temp_directory, load_env=False)
        
        options = manager.get_parsing_options(extract_tables=False, extract_lists=None)
        
        assert options.extract_tables is False
        assert options.extract_lists is True
    
    def test_reset(self, temp_directory):
        manager = ConfigManager(project_root=temp_directory, load_env=False)
        manager.load_config()
        manager.reset()
        
        assert not manager.is_loaded
    
    def test_config_summary(self, temp_directory, monkeypatch):
        monkeypatch.setenv("DOCFORMAT_LOG_LEVEL", "INFO")
        manager = ConfigManager(project_root=temp_directory, load_env=False)
        manager.load_config()
        
        summary = manager.get_config_summary()
        
        assert summary["loaded"] is True
        assert summary["config_file_exists"] is False
        assert "parsing.extract_tables" in summary["config_keys"]
        assert summary["environment_overrides"] == {"DOCFORMAT_LOG_LEVEL": "logging.level"}


class TestConfigurationErrors:
    """Test how configuration errors render."""
    
    def test_base_error_message_only(self):
        assert str(ConfigurationError("Broken")) == "Broken"
    
    def test_file_problems_and_fixes(self):
        error = ConfigurationValidationError(
            "Configuration validation failed",
            "docformat.config.json",
            ["parsing.default_font_size: 'big' is not of type 'integer'"],
            ["parsing.default_font_size"],
        )
        
        assert str(error).splitlines() == [
            "Configuration validation failed",
            "Config file: docformat.config.json",
            "",
            "Problems:",
            "  - parsing.default_font_size: 'big' is not of type 'integer'",
            "",
            "Try:",
            "  - Only 'parsing' and 'logging' sections with known keys are accepted",
            "  - Fix parsing.default_font_size",
        ]
        assert error.validation_errors == ["parsing.default_font_size: 'big' is not of type 'integer'"]
    
    def test_environment_error_names_variable(self):
        error = EnvironmentVariableError("Cannot convert", "DOCFORMAT_EXTRACT_LISTS")
        
        assert error.config_file is None
        assert error.suggestions[-1] == "Fix or unset DOCFORMAT_EXTRACT_LISTS"
    
    def test_missing_file_hints(self):
        error = ConfigurationFileNotFoundError("Missing", "absent.json")
        
        assert error.problems == []
        assert any("--config-path" in hint for hint in error.suggestions)
    
    def test_schema_errors_are_problems(self):
        error = ConfigurationSchemaError("Invalid JSON schema", schema_errors=["bad type"])
        
        assert error.schema_errors == ["bad type"]
        assert "  - bad type" in str(error)

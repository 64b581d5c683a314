"""
Test suite for the docformat command-line interface.

Commands are invoked in-process through typer's CliRunner from a temporary
working directory so no local config or .env file can leak in.
"""

import json
import logging

import pytest
from typer.testing import CliRunner

from docformat.cli.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_cwd(temp_directory, monkeypatch):
    monkeypatch.chdir(temp_directory)
    return temp_directory


@pytest.fixture
def markdown_file(temp_directory, sample_markdown):
    path = temp_directory / "report.md"
    path.write_text(sample_markdown, encoding="utf-8")
    return path


@pytest.fixture
def structured_file(temp_directory, sample_structured):
    path = temp_directory / "report.json"
    path.write_text(json.dumps(sample_structured), encoding="utf-8")
    return path


def element_types(output):
    return [element["type"] for element in json.loads(output)["elements"]]


class TestParseCommand:
    """Test the parse command."""
    
    def test_parse_markdown_file(self, markdown_file):
        result = runner.invoke(app, ["parse", str(markdown_file)])
        
        assert result.exit_code == 0
        assert element_types(result.stdout) == [
            "header", "text", "header", "list", "list", "table", "pageBreak", "text"
        ]
    
    def test_parse_stdin(self):
        result = runner.invoke(app, ["parse", "-"], input="Quarterly Report\nRevenue is up.\n")
        
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["metadata"]["title"] == "Quarterly Report"
        assert element_types(result.stdout) == ["header", "text"]
    
    def test_parse_structured_file(self, structured_file, sample_structured):
        result = runner.invoke(app, ["parse", str(structured_file)])
        
        assert result.exit_code == 0
        assert json.loads(result.stdout) == sample_structured
    
    def test_explicit_format(self, markdown_file):
        result = runner.invoke(app, ["parse", "--format", "plain", str(markdown_file)])
        
        assert result.exit_code == 0
        assert set(element_types(result.stdout)) == {"header", "text"}
    
    def test_title_option(self):
        result = runner.invoke(app, ["parse", "--title", "Given", "-"], input="# Heading\n")
        
        assert result.exit_code == 0
        assert json.loads(result.stdout)["metadata"]["title"] == "Given"
    
    def test_no_tables_and_no_lists(self):
        result = runner.invoke(
            app,
            ["parse", "--no-tables", "--no-lists", "--format", "markdown", "-"],
            input="- a\n| x | y |\n| 1 | 2 |\n",
        )
        
        assert result.exit_code == 0
        assert element_types(result.stdout) == ["text", "text", "text"]
    
    def test_plain_style(self):
        result = runner.invoke(app, ["parse", "--plain-style", "-"], input="# Heading\ntext\n")
        
        assert result.exit_code == 0
        assert all("style" not in element for element in json.loads(result.stdout)["elements"])
    
    def test_compact_output(self):
        result = runner.invoke(app, ["parse", "--indent", "0", "-"], input="# Heading\n")
        
        assert result.exit_code == 0
        assert result.stdout.strip().count("\n") == 0
    
    def test_structured_format_with_invalid_input(self):
        result = runner.invoke(
            app,
            ["parse", "--format", "structured", "-"],
            input='{"metadata":{},"elements":[{"type":"bogus"}]}',
        )
        
        assert result.exit_code == 1
        assert "Invalid Document" in result.output
    
    def test_missing_file(self, temp_directory):
        result = runner.invoke(app, ["parse", str(temp_directory / "missing.md")])
        
        assert result.exit_code == 1
        assert "File Not Found" in result.output
    
    def test_unknown_format_rejected(self, markdown_file):
        result = runner.invoke(app, ["parse", "--format", "xml", str(markdown_file)])
        assert result.exit_code != 0


class TestOtherCommands:
    """Test to-markdown, detect, formats and version."""
    
    def test_to_markdown(self, structured_file):
        result = runner.invoke(app, ["to-markdown", str(structured_file)])
        
        assert result.exit_code == 0
        assert result.stdout.startswith("## Overview\n\nWidgets are great.\n\n1. one\n2. two\n\n### Sizes\n")
    
    def test_to_markdown_rejects_markup(self):
        result = runner.invoke(app, ["to-markdown", "-"], input="# not json\n")
        
        assert result.exit_code == 1
        assert "Invalid Document" in result.output
    
    @pytest.mark.parametrize("content,expected", [
        ('{"metadata": {"title": "T"}, "elements": []}', "structured"),
        ("{broken}", "plain_text"),
        ("# Heading", "markdown"),
        ("just words", "plain_text"),
    ])
    def test_detect(self, content, expected):
        result = runner.invoke(app, ["detect", "-"], input=content)
        
        assert result.exit_code == 0
        assert result.stdout.strip() == expected
    
    def test_formats(self):
        result = runner.invoke(app, ["formats"])
        
        assert result.exit_code == 0
        for name in ("structured", "markdown", "plain_text"):
            assert name in result.stdout
    
    def test_version(self):
        result = runner.invoke(app, ["version"])
        
        assert result.exit_code == 0
        assert "0.1.0" in result.stdout


class TestGlobalOptions:
    """Test --config-path and --verbose."""
    
    def test_missing_config_path(self):
        result = runner.invoke(app, ["--config-path", "absent.json", "version"])
        
        assert result.exit_code == 1
        assert "Configuration Error" in result.output
    
    def test_config_file_sets_parsing_options(self, temp_directory):
        config_path = temp_directory / "custom.json"
        config_path.write_text(json.dumps({"parsing": {"extract_lists": False}}), encoding="utf-8")
        
        result = runner.invoke(app, ["-c", str(config_path), "parse", "--format", "markdown", "-"], input="- a\n")
        
        assert result.exit_code == 0
        assert element_types(result.stdout) == ["text"]
    
    def test_default_config_file_in_working_directory(self, isolated_cwd):
        (isolated_cwd / "docformat.config.json").write_text(
            json.dumps({"parsing": {"preserve_formatting": False}}), encoding="utf-8"
        )
        
        result = runner.invoke(app, ["parse", "-"], input="# Heading\n")
        
        assert result.exit_code == 0
        assert "style" not in json.loads(result.stdout)["elements"][0]
    
    def test_invalid_default_config_file(self, isolated_cwd):
        (isolated_cwd / "docformat.config.json").write_text(
            json.dumps({"parsing": {"default_font_size": "big"}}), encoding="utf-8"
        )
        
        result = runner.invoke(app, ["parse", "-"], input="# Heading\n")
        
        assert result.exit_code == 1
        assert "Configuration Error" in result.output
    
    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("DOCFORMAT_EXTRACT_TABLES", "false")
        
        result = runner.invoke(app, ["parse", "--format", "markdown", "-"], input="| a | b |\n| 1 | 2 |\n")
        
        assert result.exit_code == 0
        assert element_types(result.stdout) == ["text", "text"]
    
    def test_verbose(self, markdown_file):
        result = runner.invoke(app, ["--verbose", "parse", str(markdown_file)])
        assert result.exit_code == 0
    
    def test_log_level_from_environment(self, markdown_file, monkeypatch):
        monkeypatch.setenv("DOCFORMAT_LOG_LEVEL", "DEBUG")
        
        result = runner.invoke(app, ["parse", str(markdown_file)])
        
        assert result.exit_code == 0
        assert logging.getLogger().level == logging.DEBUG
    
    def test_log_level_from_default_config_file(self, isolated_cwd, markdown_file):
        (isolated_cwd / "docformat.config.json").write_text(
            json.dumps({"logging": {"level": "ERROR"}}), encoding="utf-8"
        )
        
        result = runner.invoke(app, ["parse", str(markdown_file)])
        
        assert result.exit_code == 0
        assert logging.getLogger().level == logging.ERROR
    
    def test_invalid_log_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("DOCFORMAT_LOG_LEVEL", "LOUD")
        
        result = runner.invoke(app, ["version"])
        
        assert result.exit_code == 1
        assert "Configuration Error" in result.output

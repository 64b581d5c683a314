"""Shared test fixtures and configuration for docformat tests."""

import logging
import shutil
import tempfile
from pathlib import Path

import pytest

from docformat.core.document_format import DocumentFormatParser, ParsingOptions
from docformat.utils.config import EnvironmentHandler


@pytest.fixture(autouse=True)
def clean_docformat_env(monkeypatch):
    """Keep DOCFORMAT_* variables from the developer's shell out of tests."""
    for env_var in EnvironmentHandler().get_env_mapping():
        monkeypatch.delenv(env_var, raising=False)
    yield


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo root logger changes made by LoggingManager and the CLI."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    
    yield
    
    for handler in list(root_logger.handlers):
        if handler not in handlers:
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)


@pytest.fixture
def temp_directory():
    """Provide a temporary directory for testing."""
    temp_dir = tempfile.mkdtemp()
    temp_path = Path(temp_dir)
    
    yield temp_path
    
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def parser():
    """Dispatcher with default options."""
    return DocumentFormatParser()


@pytest.fixture
def plain_options():
    """Options that switch off style hints."""
    return ParsingOptions(preserve_formatting=False)


@pytest.fixture
def sample_markdown():
    """Markup exercising every block construct of the supported subset."""
    return (
        "# Quarterly Report\n"
        "\n"
        "Revenue grew in every region.\n"
        "\n"
        "## Highlights\n"
        "- New customers\n"
        "- Lower churn\n"
        "\n"
        "1. Hire\n"
        "2. Expand\n"
        "\n"
        "| Region | Revenue |\n"
        "| --- | ---: |\n"
        "| North | 10 |\n"
        "| South | 12 |\n"
        "\n"
        "---\n"
        "Closing remarks.\n"
    )


@pytest.fixture
def sample_structured():
    """Structured encoding covering every element kind."""
    return {
        "metadata": {
            "title": "Widget Data Sheet",
            "author": "QA",
            "subject": "Widgets",
            "keywords": ["widget", "datasheet"],
            "createdAt": "2024-03-01T09:30:00+00:00",
            "language": "en",
        },
        "elements": [
            {"type": "header", "level": 2, "content": "Overview",
             "style": {"fontSize": 22, "fontWeight": "bold", "alignment": "center"}},
            {"type": "text", "content": "Widgets are great.",
             "style": {"fontSize": 12, "fontStyle": "italic", "color": "#333333"}},
            {"type": "list", "listType": "ordered", "items": ["one", "two"],
             "style": {"fontSize": 12, "indentation": 20, "bulletStyle": "decimal"}},
            {"type": "table", "title": "Sizes", "headers": ["Size", "Weight"],
             "rows": [["S", "1kg"], ["L", "3kg"]],
             "style": {"fontSize": 11, "headerStyle": {"backgroundColor": "#eeeeee", "fontWeight": "bold"},
                       "borderStyle": "solid", "cellPadding": 4}},
            {"type": "image", "src": "widget.png", "alt": "A widget", "width": 320,
             "height": 240, "alignment": "center"},
            {"type": "spacer", "height": 25},
            {"type": "pageBreak"},
        ],
    }

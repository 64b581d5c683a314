"""
docformat CLI Application.

Command-line front end for the parsing core: parse markup, plain text or the
structured encoding into the structured (JSON) encoding, render structured
documents back to markup, and report detected formats.
"""

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .. import __version__
from ..core.document_format import DocumentFormat, DocumentFormatParser
from ..exceptions.config_exceptions import ConfigurationError
from ..exceptions.parsing_exceptions import DocumentFormatError
from ..utils.config import ConfigManager
from ..utils.logging_config import LogFormat, LoggingManager, LogLevel

# Document output goes to stdout; logs and errors go to stderr.
console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="docformat",
    help="Convert documents between markup, plain text and the structured JSON encoding",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)

_config_manager: Optional[ConfigManager] = None
_logger: Optional[logging.Logger] = None
_global_config: Dict[str, Any] = {}


class InputFormat(str, Enum):
    """Values accepted by ``--format``."""
    AUTO = "auto"
    MARKDOWN = "markdown"
    STRUCTURED = "structured"
    PLAIN = "plain"
    
    def to_document_format(self) -> Optional[DocumentFormat]:
        return {
            InputFormat.MARKDOWN: DocumentFormat.MARKDOWN,
            InputFormat.STRUCTURED: DocumentFormat.STRUCTURED,
            InputFormat.PLAIN: DocumentFormat.PLAIN_TEXT,
        }.get(self)


def setup_logging(verbose: bool = False, logging_config: Optional[Dict[str, Any]] = None) -> logging.Logger:
    """
    Set up logging configuration.
    
    Args:
        verbose: Enable verbose (DEBUG) logging
        logging_config: ``logging`` configuration section (level, format)
        
    Returns:
        Configured logger instance
    """
    logging_config = logging_config or {}
    log_level = LogLevel.DEBUG if verbose else LogLevel.from_name(logging_config.get("level", "WARNING"))
    
    rich_handler = RichHandler(
        console=err_console,
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    
    LoggingManager(
        log_level=log_level,
        log_format=LogFormat(logging_config.get("format", LogFormat.STANDARD.value)),
        handler=rich_handler,
    )
    
    return logging.getLogger("docformat")


def get_config_manager() -> ConfigManager:
    """Get or create the configuration manager for this invocation."""
    global _config_manager
    
    if _config_manager is None:
        _config_manager = ConfigManager(
            config_file=_global_config.get("config_path"),
            load_env=True,
        )
    
    return _config_manager


def get_logger() -> logging.Logger:
    """Get the global logger instance."""
    global _logger
    if _logger is None:
        _logger = setup_logging()
    return _logger


def read_source(source: str) -> str:
    """Read a file path, or standard input when source is ``-``."""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def build_parser(**overrides: Any) -> DocumentFormatParser:
    """Parser configured from the loaded configuration plus CLI overrides."""
    options = get_config_manager().get_parsing_options(**overrides)
    get_logger().debug(f"Parsing options: {options.to_dict()}")
    return DocumentFormatParser(options)


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Optional[str] = typer.Option(
        None,
        "--config-path",
        "-c",
        help="Path to configuration file (default: docformat.config.json if present)",
        metavar="PATH",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging (DEBUG level)",
    ),
) -> None:
    """
    docformat - one document model for markup, plain text and JSON.
    
    Common workflows:
    • Parse a markup file: docformat parse notes.md
    • Render JSON back to markup: docformat to-markdown doc.json
    • Check how input would be read: docformat detect notes.txt
    """
    global _config_manager, _logger, _global_config
    _config_manager = None
    _global_config = {
        "config_path": config_path,
        "verbose": verbose,
    }
    _logger = setup_logging(verbose)
    ctx.obj = _global_config.copy()
    
    try:
        manager = get_config_manager()
        manager.load_config()
    except ConfigurationError as e:
        handle_cli_error(e)
        raise typer.Exit(1)
    _logger = setup_logging(verbose, manager.get("logging", {}))


@app.command()
def parse(
    source: str = typer.Argument(..., help="Input file, or - for standard input"),
    input_format: InputFormat = typer.Option(
        InputFormat.AUTO,
        "--format",
        "-f",
        help="Input format",
        case_sensitive=False,
    ),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="Document title"),
    no_tables: bool = typer.Option(False, "--no-tables", help="Treat pipe tables as text"),
    no_lists: bool = typer.Option(False, "--no-lists", help="Treat list items as text"),
    plain_style: bool = typer.Option(False, "--plain-style", help="Omit style hints"),
    indent: Optional[int] = typer.Option(2, "--indent", help="JSON indentation (0 for compact)"),
) -> None:
    """Parse a document and print its structured (JSON) encoding."""
    try:
        parser = build_parser(
            extract_tables=False if no_tables else None,
            extract_lists=False if no_lists else None,
            preserve_formatting=False if plain_style else None,
        )
        content = read_source(source)
        metadata = {"title": title} if title else None
        document = parser.parse_as(content, input_format.to_document_format(), metadata)
        get_logger().debug(f"Parsed {len(document.elements)} elements from {source}")
        typer.echo(document.to_json(indent=indent or None))
    except Exception as e:
        handle_cli_error(e)
        raise typer.Exit(1)


@app.command("to-markdown")
def to_markdown(
    source: str = typer.Argument(..., help="Structured (JSON) document, or - for standard input"),
) -> None:
    """Render a structured (JSON) document as markup."""
    try:
        parser = build_parser()
        document = parser.parse_structured(read_source(source))
        typer.echo(parser.to_markdown(document))
    except Exception as e:
        handle_cli_error(e)
        raise typer.Exit(1)


@app.command()
def detect(
    source: str = typer.Argument(..., help="Input file, or - for standard input"),
) -> None:
    """Print the format auto-detection would choose."""
    try:
        detected = build_parser().detect_format(read_source(source))
        typer.echo(detected.value)
    except Exception as e:
        handle_cli_error(e)
        raise typer.Exit(1)


@app.command()
def formats() -> None:
    """List supported input formats."""
    table = Table(title="Supported Formats")
    table.add_column("Format", style="cyan", no_wrap=True)
    table.add_column("Supports")
    
    for name, features in DocumentFormatParser.supported_formats().items():
        table.add_row(name, "\n".join(features))
    
    console.print(table)


@app.command()
def version() -> None:
    """Show version information."""
    rprint(f"docformat [blue]v{__version__}[/blue]")


def handle_cli_error(error: Exception) -> None:
    """
    Handle CLI errors with user-friendly messages.
    
    Args:
        error: The exception that occurred
    """
    logger = get_logger()
    
    if isinstance(error, ConfigurationError):
        err_console.print(f"[red]Configuration Error:[/red] {escape(str(error))}", highlight=False)
        logger.debug("Configuration error details", exc_info=True)
    elif isinstance(error, DocumentFormatError):
        err_console.print(f"[red]Invalid Document:[/red] {escape(str(error))}", highlight=False)
        logger.debug("Document error details", exc_info=True)
    elif isinstance(error, FileNotFoundError):
        err_console.print(f"[red]File Not Found:[/red] {escape(str(error))}", highlight=False)
        logger.debug("File not found details", exc_info=True)
    elif isinstance(error, PermissionError):
        err_console.print(f"[red]Permission Denied:[/red] {escape(str(error))}", highlight=False)
        logger.debug("Permission error details", exc_info=True)
    else:
        err_console.print(f"[red]Error:[/red] {escape(str(error))}", highlight=False)
        logger.debug("Unexpected error details", exc_info=True)


def cli_main() -> None:
    """
    Main CLI entry point with error handling.
    
    This function is called by the console script entry point.
    """
    try:
        app()
    except KeyboardInterrupt:
        rprint("\n[yellow]Operation cancelled by user[/yellow]")
        raise typer.Exit(130)


if __name__ == "__main__":
    cli_main()

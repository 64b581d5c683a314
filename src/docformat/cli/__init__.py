"""
docformat CLI Package.

Command-line interface over the document format parsing core.
"""

from .cli import app, cli_main

__all__ = ["app", "cli_main"]

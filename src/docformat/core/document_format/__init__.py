"""
Document Format Package

Parsing core that turns markup text, the structured (JSON) encoding or plain
text into one canonical document model, and renders the model back as markup.

Components:
- options: ParsingOptions
- patterns: Pattern and the shared line/indicator patterns
- structured_parser: strict JSON decoding and schema validation
- markdown_parser: line-oriented markup state machine
- plain_text_parser: title-promoting fallback parser
- detector: DocumentFormat and FormatDetector
- serializer: MarkdownSerializer
- parser: DocumentFormatParser dispatcher and module-level shortcuts
"""

from .options import ParsingOptions
from .patterns import Pattern, MatchResult, MARKDOWN_INDICATORS
from .structured_parser import StructuredDocumentParser
from .markdown_parser import MarkdownParser, split_table_cells, is_separator_row
from .plain_text_parser import PlainTextParser
from .detector import DocumentFormat, FormatDetector
from .serializer import MarkdownSerializer
from .parser import (
    DocumentFormatParser,
    parse,
    parse_markdown,
    parse_plain_text,
    parse_structured,
    validate,
    to_markdown,
)

__all__ = [
    "ParsingOptions",
    "Pattern",
    "MatchResult",
    "MARKDOWN_INDICATORS",
    "StructuredDocumentParser",
    "MarkdownParser",
    "split_table_cells",
    "is_separator_row",
    "PlainTextParser",
    "DocumentFormat",
    "FormatDetector",
    "MarkdownSerializer",
    "DocumentFormatParser",
    "parse",
    "parse_markdown",
    "parse_plain_text",
    "parse_structured",
    "validate",
    "to_markdown",
]

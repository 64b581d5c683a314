"""
docformat - a document-format core.

Parses markup text, plain text and a structured (JSON) encoding into one
canonical document model, validates structured input strictly, and renders
the model back to markup.

Usage:
    >>> import docformat
    >>> doc = docformat.parse("# Title\\n\\n- one\\n- two")
    >>> [element.element_type.value for element in doc.elements]
    ['header', 'list']
    >>> print(docformat.to_markdown(doc))
    # Title
    <BLANKLINE>
    - one
    - two
"""

__version__ = "0.1.0"

from .core.document_format import (
    DocumentFormat,
    DocumentFormatParser,
    FormatDetector,
    MarkdownParser,
    MarkdownSerializer,
    ParsingOptions,
    PlainTextParser,
    StructuredDocumentParser,
    parse,
    parse_markdown,
    parse_plain_text,
    parse_structured,
    to_markdown,
    validate,
)
from .exceptions import (
    DocumentFormatError,
    StructuredDecodeError,
    StructuredDocumentError,
    StructuredValidationError,
)
from .models.document_model import (
    DocumentMetadata,
    ElementType,
    ParsedDocument,
)

__all__ = [
    "__version__",
    "DocumentFormat",
    "DocumentFormatParser",
    "FormatDetector",
    "MarkdownParser",
    "MarkdownSerializer",
    "ParsingOptions",
    "PlainTextParser",
    "StructuredDocumentParser",
    "parse",
    "parse_markdown",
    "parse_plain_text",
    "parse_structured",
    "to_markdown",
    "validate",
    "DocumentFormatError",
    "StructuredDecodeError",
    "StructuredDocumentError",
    "StructuredValidationError",
    "DocumentMetadata",
    "ElementType",
    "ParsedDocument",
]

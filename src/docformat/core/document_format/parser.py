"""
Document Format Parser - dispatcher and public entry points.

``DocumentFormatParser`` bundles the three parsers, the format detector and
the serializer behind one object configured with immutable ParsingOptions.

Failure policy:
- ``parse_structured`` and ``validate`` raise StructuredDecodeError or
  StructuredValidationError.
- ``parse``, ``parse_markdown``, ``parse_plain_text`` and ``to_markdown``
  never raise for string input. When ``parse`` sees a brace-framed input the
  structured parser rejects, the rejection is logged and the input is
  handled as markup or plain text instead.

Example:
    >>> parser = DocumentFormatParser(ParsingOptions(extract_tables=False))
    >>> doc = parser.parse("Quarterly Report\\nRevenue is up.")
    >>> doc.metadata.title
    'Quarterly Report'
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from ...exceptions.parsing_exceptions import StructuredDocumentError
from ...models.document_model import ParsedDocument
from .detector import DocumentFormat, FormatDetector
from .markdown_parser import MarkdownParser
from .options import ParsingOptions
from .plain_text_parser import PlainTextParser
from .serializer import MarkdownSerializer
from .structured_parser import StructuredDocumentParser

logger = logging.getLogger(__name__)

Metadata = Optional[Mapping[str, Any]]


class DocumentFormatParser:
    """
    Front door of the parsing core.
    
    The instance keeps only immutable configuration and stateless helpers;
    every call builds its own accumulators, so a single instance can serve
    concurrent callers without locking.
    
    Attributes:
        options: Parsing options shared by the markup and plain-text parsers
    """
    
    def __init__(self, options: Optional[ParsingOptions] = None) -> None:
        self.options = options or ParsingOptions()
        self.detector = FormatDetector()
        self.structured_parser = StructuredDocumentParser()
        self.markdown_parser = MarkdownParser(self.options)
        self.plain_text_parser = PlainTextParser(self.options)
        self.serializer = MarkdownSerializer()
    
    def parse(self, content: str, metadata: Metadata = None) -> ParsedDocument:
        """
        Auto-detect the format of content and parse it.
        
        Metadata applies to the markup and plain-text paths; a structured
        document carries its own.
        """
        content = content or ""
        
        if self.detector.looks_structured(content):
            try:
                document = self.structured_parser.parse(content)
                logger.debug("Parsed input as structured document")
                return document
            except StructuredDocumentError as e:
                logger.debug(f"Brace-framed input is not a structured document, falling back: {e}")
        
        indicators = self.detector.markdown_indicators(content)
        if indicators:
            logger.debug(f"Parsing input as markdown (indicators: {', '.join(indicators)})")
            return self.markdown_parser.parse(content, metadata)
        
        logger.debug("Parsing input as plain text")
        return self.plain_text_parser.parse(content, metadata)
    
    def parse_as(
        self,
        content: str,
        document_format: Union[DocumentFormat, str, None] = None,
        metadata: Metadata = None
    ) -> ParsedDocument:
        """
        Parse content with an explicitly chosen parser.
        
        Args:
            content: Raw text
            document_format: Format to use; None or "auto" auto-detects
            metadata: Optional partial metadata
            
        Raises:
            ValueError: For an unknown format name
            StructuredDecodeError, StructuredValidationError: For the
                structured format only
        """
        if document_format is None or document_format == "auto":
            return self.parse(content, metadata)
        
        document_format = DocumentFormat(document_format)
        if document_format is DocumentFormat.STRUCTURED:
            return self.parse_structured(content)
        if document_format is DocumentFormat.MARKDOWN:
            return self.parse_markdown(content, metadata)
        return self.parse_plain_text(content, metadata)
    
    def detect_format(self, content: str) -> DocumentFormat:
        """
        Format ``parse`` would use for content.
        
        Unlike ``FormatDetector.detect`` this actually tries the structured
        parser, so STRUCTURED is only reported for input it accepts.
        """
        if self.detector.looks_structured(content):
            try:
                self.structured_parser.parse(content)
                return DocumentFormat.STRUCTURED
            except StructuredDocumentError:
                pass
        if self.detector.has_markdown_indicators(content):
            return DocumentFormat.MARKDOWN
        return DocumentFormat.PLAIN_TEXT
    
    def parse_markdown(self, content: str, metadata: Metadata = None) -> ParsedDocument:
        return self.markdown_parser.parse(content, metadata)
    
    def parse_plain_text(self, content: str, metadata: Metadata = None) -> ParsedDocument:
        return self.plain_text_parser.parse(content, metadata)
    
    def parse_structured(self, content: str) -> ParsedDocument:
        return self.structured_parser.parse(content)
    
    def validate(self, candidate: Any) -> ParsedDocument:
        return self.structured_parser.validate(candidate)
    
    def to_markdown(self, document: ParsedDocument) -> str:
        return self.serializer.serialize(document)
    
    @staticmethod
    def supported_formats() -> Dict[str, List[str]]:
        """Formats accepted by the dispatcher and the markup subset they cover."""
        return {
            DocumentFormat.STRUCTURED.value: [
                "JSON document with 'metadata' and 'elements'",
                "element types: text, header, list, table, image, spacer, pageBreak",
            ],
            DocumentFormat.MARKDOWN.value: [
                "headers (# to ######)",
                "unordered lists (-, *, +)",
                "ordered lists (1.)",
                "pipe tables",
                "thematic breaks (---, ***)",
                "paragraphs (one per line)",
            ],
            DocumentFormat.PLAIN_TEXT.value: [
                "first line promoted to title",
                "one text element per line",
            ],
        }


_default_parser = DocumentFormatParser()


def parse(content: str, metadata: Metadata = None) -> ParsedDocument:
    """Auto-detect and parse with default options. Never raises."""
    return _default_parser.parse(content, metadata)


def parse_markdown(content: str, metadata: Metadata = None) -> ParsedDocument:
    """Parse markup text with default options. Never raises."""
    return _default_parser.parse_markdown(content, metadata)


def parse_plain_text(content: str, metadata: Metadata = None) -> ParsedDocument:
    """Parse plain text with default options. Never raises."""
    return _default_parser.parse_plain_text(content, metadata)


def parse_structured(content: str) -> ParsedDocument:
    """Decode and validate a structured document. Raises on invalid input."""
    return _default_parser.parse_structured(content)


def validate(candidate: Any) -> ParsedDocument:
    """Validate a decoded structured value. Raises on invalid input."""
    return _default_parser.validate(candidate)


def to_markdown(document: ParsedDocument) -> str:
    """Render a document as markup. Never raises."""
    return _default_parser.to_markdown(document)

"""
Plain-text fallback parser.

Every non-empty line becomes one element; lines are never merged into
paragraphs. Without a caller-supplied title the first non-empty line is
promoted to the document title and emitted as a level-1 header.
"""

import logging
from typing import Any, List, Mapping, Optional

from ...models.document_model import (
    Alignment,
    DocumentElement,
    DocumentMetadata,
    FontWeight,
    HeaderElement,
    HeaderStyle,
    ParsedDocument,
    TextElement,
    TextStyle,
)
from .options import ParsingOptions

logger = logging.getLogger(__name__)

TITLE_FONT_SIZE_INCREMENT = 6


class PlainTextParser:
    """Parser for unannotated text. ``parse`` never raises for string input."""
    
    def __init__(self, options: Optional[ParsingOptions] = None) -> None:
        self.options = options or ParsingOptions()
    
    def parse(
        self,
        content: str,
        metadata: Optional[Mapping[str, Any]] = None
    ) -> ParsedDocument:
        """
        Parse plain text.
        
        Args:
            content: Raw text
            metadata: Optional partial metadata; a non-empty ``title`` disables
                title promotion
        """
        lines = [line.strip() for line in (content or "").split("\n")]
        lines = [line for line in lines if line]
        elements: List[DocumentElement] = []
        
        title = (metadata or {}).get("title")
        if not title and lines:
            title = lines.pop(0)
            elements.append(HeaderElement(level=1, content=title, style=self._title_style()))
            logger.debug(f"Promoted first line to title: {title!r}")
        
        for line in lines:
            elements.append(TextElement(content=line, style=self._text_style()))
        
        return ParsedDocument(
            metadata=DocumentMetadata.with_defaults(metadata, title=title),
            elements=tuple(elements),
        )
    
    def _title_style(self) -> Optional[HeaderStyle]:
        if not self.options.preserve_formatting:
            return None
        return HeaderStyle(
            font_size=self.options.default_font_size + TITLE_FONT_SIZE_INCREMENT,
            font_weight=FontWeight.BOLD,
            alignment=Alignment.CENTER,
        )
    
    def _text_style(self) -> Optional[TextStyle]:
        if not self.options.preserve_formatting:
            return None
        return TextStyle(
            font_size=self.options.default_font_size,
            font_weight=FontWeight.NORMAL,
            alignment=self.options.default_alignment,
        )

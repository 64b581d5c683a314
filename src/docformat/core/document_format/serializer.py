"""
Markdown Serializer - Document Model to Markup

Deterministic, total conversion of a ParsedDocument back into the markup
subset read by MarkdownParser. Structure and text survive the trip; style
hints, table titles as table attributes, images and exact spacer heights do
not.

Element rendering:
- Header     -> ``#``*level, space, content
- Text       -> content
- List       -> ``- item`` or ``N. item`` per item
- Table      -> optional ``### title``, header row, dash separator, rows
- PageBreak  -> ``---``
- Spacer     -> ceil(height / 10) newlines, at most 100
- Image      -> nothing (no image syntax in the subset)

Every block is followed by a blank line and the final output is stripped.
"""

import logging
import math
from typing import List

from ...models.document_model import (
    DocumentElement,
    HeaderElement,
    ImageElement,
    ListElement,
    ListType,
    PageBreakElement,
    ParsedDocument,
    SpacerElement,
    TableElement,
    TextElement,
)

logger = logging.getLogger(__name__)

SPACER_UNIT_HEIGHT = 10
MAX_SPACER_LINES = 100
TABLE_TITLE_LEVEL = 3
THEMATIC_BREAK_MARKUP = "---"


def _table_row(cells) -> str:
    return f"| {' | '.join(cells)} |"


class MarkdownSerializer:
    """Converts documents to markup text. Stateless."""
    
    def serialize(self, document: ParsedDocument) -> str:
        """
        Render a document as markup.
        
        Args:
            document: Document to render
            
        Returns:
            Markup text without trailing whitespace
        """
        parts: List[str] = []
        for element in document.elements:
            parts.append(self.render_element(element))
        return "".join(parts).strip()
    
    def render_element(self, element: DocumentElement) -> str:
        """Render one element including its trailing blank line."""
        if isinstance(element, HeaderElement):
            return f"{'#' * element.level} {element.content}\n\n"
        
        if isinstance(element, TextElement):
            return f"{element.content}\n\n"
        
        if isinstance(element, ListElement):
            lines = []
            for index, item in enumerate(element.items, 1):
                bullet = f"{index}." if element.list_type is ListType.ORDERED else "-"
                lines.append(f"{bullet} {item}\n")
            return "".join(lines) + "\n"
        
        if isinstance(element, TableElement):
            lines = []
            if element.title:
                lines.append(f"{'#' * TABLE_TITLE_LEVEL} {element.title}\n\n")
            lines.append(_table_row(element.headers) + "\n")
            lines.append(_table_row(["---"] * len(element.headers)) + "\n")
            for row in element.rows:
                lines.append(_table_row(row) + "\n")
            return "".join(lines) + "\n"
        
        if isinstance(element, PageBreakElement):
            return f"{THEMATIC_BREAK_MARKUP}\n\n"
        
        if isinstance(element, SpacerElement):
            return "\n" * self._spacer_lines(element.height)
        
        if isinstance(element, ImageElement):
            logger.debug(f"Skipping image element {element.src!r}; images have no markup form")
            return ""
        
        logger.warning(f"Skipping unknown element type {type(element).__name__}")
        return ""
    
    @staticmethod
    def _spacer_lines(height) -> int:
        """Number of newlines standing in for a spacer of the given height."""
        try:
            value = float(height)
        except (TypeError, ValueError, OverflowError):
            return 0
        if not math.isfinite(value) or value <= 0:
            return 0
        return min(math.ceil(value / SPACER_UNIT_HEIGHT), MAX_SPACER_LINES)

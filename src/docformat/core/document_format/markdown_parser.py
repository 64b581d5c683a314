"""
Markdown Parser Module - Markup to Document Model

Line-oriented state machine that turns markup text into the document model.
The supported subset is fixed: ATX headers, flat bullet and numbered lists,
pipe tables, thematic breaks and single-line paragraphs. Everything else is
kept as text.

Lists and tables span several lines and have no closing delimiter, so their
lines are collected in a small per-call accumulator and turned into an
element ("flushed") as soon as a line arrives that does not continue them.
The accumulator lives in the ``parse`` call only; a MarkdownParser instance
holds nothing but its immutable options and may be used from several
threads at once.

Per-line rules, first match wins:
1. blank line          -> flush pending list and table
2. ``#``..``######``   -> Header
3. line with ``|``     -> table header / separator / row (extract_tables)
4. ``-``/``*``/``+``/``N.`` item -> list item (extract_lists)
5. ``---`` / ``***``   -> PageBreak
6. anything else       -> Text with the trimmed line

Data-loss policy: a table row whose cell count differs from the header row is
dropped. It is never padded or truncated, so no cell is ever invented.

Usage:
    >>> parser = MarkdownParser()
    >>> doc = parser.parse("# Title\\n\\n- a\\n- b")
    >>> [type(e).__name__ for e in doc.elements]
    ['HeaderElement', 'ListElement']
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from ...models.document_model import (
    DocumentElement,
    DocumentMetadata,
    FontWeight,
    HeaderElement,
    HeaderStyle,
    ListElement,
    ListStyle,
    ListType,
    PageBreakElement,
    ParsedDocument,
    TableElement,
    TableHeaderStyle,
    TableStyle,
    TextElement,
    TextStyle,
)
from .options import ParsingOptions
from .patterns import (
    HEADER,
    ORDERED_ITEM,
    TABLE_CELL_DELIMITER,
    TABLE_SEPARATOR_CELL,
    THEMATIC_BREAK,
    UNORDERED_ITEM,
)

logger = logging.getLogger(__name__)


def split_table_cells(line: str) -> Optional[List[str]]:
    """
    Split a trimmed line into table cells.
    
    The outer pipes are optional and removed; empty cells are kept, so a
    row of blank cells still counts against the header width.
    
    Returns:
        The trimmed cells, or None when the line has no pipe
    """
    if TABLE_CELL_DELIMITER not in line:
        return None
    
    inner = line
    if inner.startswith(TABLE_CELL_DELIMITER):
        inner = inner[1:]
    if inner.endswith(TABLE_CELL_DELIMITER):
        inner = inner[:-1]
    
    return [cell.strip() for cell in inner.split(TABLE_CELL_DELIMITER)]


def is_separator_row(cells: List[str]) -> bool:
    """True for a header separator row such as ``| --- | :-: |``."""
    return all(TABLE_SEPARATOR_CELL.compiled_regex.match(cell) for cell in cells)


@dataclass
class _BlockState:
    """Pending multi-line blocks of one parse call."""
    list_type: Optional[ListType] = None
    list_items: List[str] = field(default_factory=list)
    
    in_table: bool = False
    table_header_line: str = ""
    table_headers: List[str] = field(default_factory=list)
    table_rows: List[List[str]] = field(default_factory=list)
    table_separator_seen: bool = False
    dropped_rows: int = 0


class MarkdownParser:
    """
    Markup text parser producing a ParsedDocument.
    
    ``parse`` never raises for string input; the worst case is a document
    with no elements.
    
    Attributes:
        options: Immutable parsing options
    """
    
    def __init__(self, options: Optional[ParsingOptions] = None) -> None:
        self.options = options or ParsingOptions()
    
    def parse(
        self,
        content: str,
        metadata: Optional[Mapping[str, Any]] = None
    ) -> ParsedDocument:
        """
        Parse markup text.
        
        Args:
            content: Markup text
            metadata: Optional partial metadata (title, author, ...)
            
        Returns:
            Parsed document with synthesized metadata defaults
        """
        elements: List[DocumentElement] = []
        state = _BlockState()
        
        for raw_line in (content or "").split("\n"):
            self._consume_line(raw_line.strip(), state, elements)
        
        self._flush_list(state, elements)
        self._flush_table(state, elements)
        
        logger.debug(f"Parsed markup into {len(elements)} elements")
        return ParsedDocument(
            metadata=DocumentMetadata.with_defaults(metadata),
            elements=tuple(elements),
        )
    
    def _consume_line(
        self,
        line: str,
        state: _BlockState,
        elements: List[DocumentElement]
    ) -> None:
        """Apply the per-line rules to one trimmed line."""
        if not line:
            self._flush_list(state, elements)
            self._flush_table(state, elements)
            return
        
        header_match = HEADER.match(line)
        if header_match:
            self._flush_list(state, elements)
            self._flush_table(state, elements)
            level = len(header_match.group(1))
            elements.append(HeaderElement(
                level=level,
                content=header_match.group(2).strip(),
                style=self._header_style(level),
            ))
            return
        
        if self.options.extract_tables:
            cells = split_table_cells(line)
            if cells is not None:
                self._flush_list(state, elements)
                self._add_table_line(line, cells, state)
                return
        self._flush_table(state, elements)
        
        if self.options.extract_lists:
            item_match = UNORDERED_ITEM.match(line)
            list_type = ListType.UNORDERED
            if not item_match:
                item_match = ORDERED_ITEM.match(line)
                list_type = ListType.ORDERED
            if item_match:
                if state.list_type is not None and state.list_type != list_type:
                    logger.debug(f"Bullet style changed to {list_type}, starting a new list")
                    self._flush_list(state, elements)
                state.list_type = list_type
                state.list_items.append(item_match.group(1).strip())
                return
        self._flush_list(state, elements)
        
        if THEMATIC_BREAK.match(line):
            elements.append(PageBreakElement())
            return
        
        elements.append(TextElement(content=line, style=self._text_style()))
    
    def _add_table_line(self, line: str, cells: List[str], state: _BlockState) -> None:
        """Feed one table line into the pending table."""
        if is_separator_row(cells):
            if state.in_table:
                state.table_separator_seen = True
            return
        
        if not state.in_table:
            state.in_table = True
            state.table_header_line = line
            state.table_headers = cells
            return
        
        if len(cells) == len(state.table_headers):
            state.table_rows.append(cells)
        else:
            state.dropped_rows += 1
            logger.debug(
                f"Dropping table row with {len(cells)} cells "
                f"(header has {len(state.table_headers)})"
            )
    
    def _flush_list(self, state: _BlockState, elements: List[DocumentElement]) -> None:
        if state.list_items and state.list_type is not None:
            elements.append(ListElement(
                list_type=state.list_type,
                items=tuple(state.list_items),
                style=self._list_style(),
            ))
        state.list_type = None
        state.list_items = []
    
    def _flush_table(self, state: _BlockState, elements: List[DocumentElement]) -> None:
        """
        Emit the pending table.
        
        A header row with rows or with a separator becomes a Table. A lone
        pipe-bearing line with neither is kept as Text.
        """
        if not state.in_table:
            return
        
        if state.table_rows or state.table_separator_seen:
            elements.append(TableElement(
                headers=tuple(state.table_headers),
                rows=tuple(tuple(row) for row in state.table_rows),
                style=self._table_style(),
            ))
            if state.dropped_rows:
                logger.debug(f"Table flushed with {state.dropped_rows} mismatched rows dropped")
        else:
            elements.append(TextElement(content=state.table_header_line, style=self._text_style()))
        
        state.in_table = False
        state.table_header_line = ""
        state.table_headers = []
        state.table_rows = []
        state.table_separator_seen = False
        state.dropped_rows = 0
    
    # Style hints
    
    def _header_style(self, level: int) -> Optional[HeaderStyle]:
        if not self.options.preserve_formatting:
            return None
        return HeaderStyle(
            font_size=self.options.default_font_size + (7 - level) * 2,
            font_weight=FontWeight.BOLD,
            alignment=self.options.default_alignment,
        )
    
    def _text_style(self) -> Optional[TextStyle]:
        if not self.options.preserve_formatting:
            return None
        return TextStyle(
            font_size=self.options.default_font_size,
            font_weight=FontWeight.NORMAL,
            alignment=self.options.default_alignment,
        )
    
    def _list_style(self) -> Optional[ListStyle]:
        if not self.options.preserve_formatting:
            return None
        return ListStyle(font_size=self.options.default_font_size)
    
    def _table_style(self) -> Optional[TableStyle]:
        if not self.options.preserve_formatting:
            return None
        return TableStyle(
            font_size=self.options.default_font_size,
            header_style=TableHeaderStyle(font_weight=FontWeight.BOLD),
        )

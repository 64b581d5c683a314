"""
Document model for docformat.

The canonical, strongly-typed representation every parser produces and the
serializer consumes: an ordered tuple of typed elements plus metadata.

Public API:
- Enums: ElementType, ListType, Alignment, FontWeight, FontStyle
- Style hints: TextStyle, HeaderStyle, ListStyle, TableHeaderStyle, TableStyle
- Elements: TextElement, HeaderElement, ListElement, TableElement,
  ImageElement, SpacerElement, PageBreakElement (union: DocumentElement)
- Documents: DocumentMetadata, ParsedDocument
"""

from .enums import (
    ElementType,
    ListType,
    Alignment,
    FontWeight,
    FontStyle,
)

from .styles import (
    TextStyle,
    HeaderStyle,
    ListStyle,
    TableHeaderStyle,
    TableStyle,
)

from .elements import (
    TextElement,
    HeaderElement,
    ListElement,
    TableElement,
    ImageElement,
    SpacerElement,
    PageBreakElement,
    DocumentElement,
    ELEMENT_CLASSES,
    MIN_HEADER_LEVEL,
    MAX_HEADER_LEVEL,
    element_from_dict,
)

from .document import (
    DocumentMetadata,
    ParsedDocument,
    DEFAULT_TITLE,
    DEFAULT_AUTHOR,
    DEFAULT_LANGUAGE,
)

__all__ = [
    # Enums
    "ElementType",
    "ListType",
    "Alignment",
    "FontWeight",
    "FontStyle",
    # Style hints
    "TextStyle",
    "HeaderStyle",
    "ListStyle",
    "TableHeaderStyle",
    "TableStyle",
    # Elements
    "TextElement",
    "HeaderElement",
    "ListElement",
    "TableElement",
    "ImageElement",
    "SpacerElement",
    "PageBreakElement",
    "DocumentElement",
    "ELEMENT_CLASSES",
    "MIN_HEADER_LEVEL",
    "MAX_HEADER_LEVEL",
    "element_from_dict",
    # Documents
    "DocumentMetadata",
    "ParsedDocument",
    "DEFAULT_TITLE",
    "DEFAULT_AUTHOR",
    "DEFAULT_LANGUAGE",
]

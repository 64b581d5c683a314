"""
Models package for docformat.

Exposes the document model shared by every parser and the serializer.
"""

from .document_model import (
    DocumentElement,
    DocumentMetadata,
    ElementType,
    ParsedDocument,
)

__all__ = [
    "DocumentElement",
    "DocumentMetadata",
    "ElementType",
    "ParsedDocument",
]

"""
Enumeration types for the document model.

Every enum value is the exact string used by the structured (JSON) encoding.
"""

from enum import Enum


class ElementType(Enum):
    """Tag of each document element variant."""
    TEXT = "text"
    HEADER = "header"
    LIST = "list"
    TABLE = "table"
    IMAGE = "image"
    SPACER = "spacer"
    PAGE_BREAK = "pageBreak"
    
    def __str__(self) -> str:
        return self.value


class ListType(Enum):
    """Bullet style of a list block."""
    ORDERED = "ordered"
    UNORDERED = "unordered"
    
    def __str__(self) -> str:
        return self.value


class Alignment(Enum):
    """Horizontal alignment hint."""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"
    
    def __str__(self) -> str:
        return self.value


class FontWeight(Enum):
    """Font weight hint."""
    NORMAL = "normal"
    BOLD = "bold"
    
    def __str__(self) -> str:
        return self.value


class FontStyle(Enum):
    """Font style hint."""
    NORMAL = "normal"
    ITALIC = "italic"
    
    def __str__(self) -> str:
        return self.value

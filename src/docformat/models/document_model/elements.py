"""
Document element variants.

The element set is closed: ``DocumentElement`` is the union of the seven
record types below and every consumer (serializer, validator, renderers)
dispatches on the concrete type. Each record carries only the payload of
its own kind. Sequences are stored as tuples so a constructed element is
plain immutable data that can be shared or copied freely.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Mapping, Optional, Sequence, Tuple, Type, Union

from .enums import Alignment, ElementType, ListType
from .styles import (
    HeaderStyle,
    ListStyle,
    Number,
    TableStyle,
    TextStyle,
    _compact,
)

MIN_HEADER_LEVEL = 1
MAX_HEADER_LEVEL = 6


def _freeze(instance: Any, name: str, value: Sequence[Any]) -> None:
    """Store a sequence field as a tuple on a frozen dataclass."""
    object.__setattr__(instance, name, tuple(value))


@dataclass(frozen=True)
class TextElement:
    """A paragraph of text. Inline markup characters are kept verbatim."""
    element_type: ClassVar[ElementType] = ElementType.TEXT
    
    content: str
    style: Optional[TextStyle] = None
    
    def to_dict(self) -> Dict[str, Any]:
        return _compact({
            "type": self.element_type.value,
            "content": self.content,
            "style": self.style.to_dict() if self.style else None,
        })
    
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TextElement":
        style = data.get("style")
        return cls(
            content=data["content"],
            style=TextStyle.from_dict(style) if style is not None else None,
        )


@dataclass(frozen=True)
class HeaderElement:
    """A heading of level 1 (largest) to 6 (smallest)."""
    element_type: ClassVar[ElementType] = ElementType.HEADER
    
    level: int
    content: str
    style: Optional[HeaderStyle] = None
    
    def __post_init__(self):
        if isinstance(self.level, bool) or not isinstance(self.level, int):
            raise ValueError(f"Header level must be an integer, got {type(self.level).__name__}")
        if not MIN_HEADER_LEVEL <= self.level <= MAX_HEADER_LEVEL:
            raise ValueError(
                f"Header level must be between {MIN_HEADER_LEVEL} and {MAX_HEADER_LEVEL}, got {self.level}"
            )
    
    def to_dict(self) -> Dict[str, Any]:
        return _compact({
            "type": self.element_type.value,
            "level": self.level,
            "content": self.content,
            "style": self.style.to_dict() if self.style else None,
        })
    
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "HeaderElement":
        style = data.get("style")
        return cls(
            level=int(data["level"]),
            content=data["content"],
            style=HeaderStyle.from_dict(style) if style is not None else None,
        )


@dataclass(frozen=True)
class ListElement:
    """A flat list whose items all share one bullet style."""
    element_type: ClassVar[ElementType] = ElementType.LIST
    
    list_type: ListType
    items: Tuple[str, ...]
    style: Optional[ListStyle] = None
    
    def __post_init__(self):
        _freeze(self, "items", self.items)
    
    def to_dict(self) -> Dict[str, Any]:
        return _compact({
            "type": self.element_type.value,
            "listType": self.list_type.value,
            "items": list(self.items),
            "style": self.style.to_dict() if self.style else None,
        })
    
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ListElement":
        style = data.get("style")
        return cls(
            list_type=ListType(data["listType"]),
            items=data["items"],
            style=ListStyle.from_dict(style) if style is not None else None,
        )


@dataclass(frozen=True)
class TableElement:
    """
    A table with one header row and zero or more data rows.
    
    Tables built by the markup parser only ever hold rows whose width equals
    the header width. Tables decoded from the structured encoding are kept as
    given.
    """
    element_type: ClassVar[ElementType] = ElementType.TABLE
    
    headers: Tuple[str, ...]
    rows: Tuple[Tuple[str, ...], ...]
    title: Optional[str] = None
    style: Optional[TableStyle] = None
    
    def __post_init__(self):
        _freeze(self, "headers", self.headers)
        _freeze(self, "rows", (tuple(row) for row in self.rows))
    
    @property
    def column_count(self) -> int:
        return len(self.headers)
    
    def to_dict(self) -> Dict[str, Any]:
        return _compact({
            "type": self.element_type.value,
            "title": self.title,
            "headers": list(self.headers),
            "rows": [list(row) for row in self.rows],
            "style": self.style.to_dict() if self.style else None,
        })
    
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TableElement":
        style = data.get("style")
        return cls(
            headers=data["headers"],
            rows=data["rows"],
            title=data.get("title"),
            style=TableStyle.from_dict(style) if style is not None else None,
        )


@dataclass(frozen=True)
class ImageElement:
    """An image reference. Never produced from markup text."""
    element_type: ClassVar[ElementType] = ElementType.IMAGE
    
    src: str
    alt: Optional[str] = None
    width: Optional[Number] = None
    height: Optional[Number] = None
    alignment: Optional[Alignment] = None
    
    def to_dict(self) -> Dict[str, Any]:
        return _compact({
            "type": self.element_type.value,
            "src": self.src,
            "alt": self.alt,
            "width": self.width,
            "height": self.height,
            "alignment": self.alignment.value if self.alignment else None,
        })
    
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ImageElement":
        return cls(
            src=data["src"],
            alt=data.get("alt"),
            width=data.get("width"),
            height=data.get("height"),
            alignment=Alignment(data["alignment"]) if "alignment" in data else None,
        )


@dataclass(frozen=True)
class SpacerElement:
    """Vertical whitespace of the given height."""
    element_type: ClassVar[ElementType] = ElementType.SPACER
    
    height: Number
    
    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.element_type.value, "height": self.height}
    
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SpacerElement":
        return cls(height=data["height"])


@dataclass(frozen=True)
class PageBreakElement:
    """A forced page break (thematic break in markup)."""
    element_type: ClassVar[ElementType] = ElementType.PAGE_BREAK
    
    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.element_type.value}
    
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PageBreakElement":
        return cls()


DocumentElement = Union[
    TextElement,
    HeaderElement,
    ListElement,
    TableElement,
    ImageElement,
    SpacerElement,
    PageBreakElement,
]

ELEMENT_CLASSES: Dict[ElementType, Type[Any]] = {
    ElementType.TEXT: TextElement,
    ElementType.HEADER: HeaderElement,
    ElementType.LIST: ListElement,
    ElementType.TABLE: TableElement,
    ElementType.IMAGE: ImageElement,
    ElementType.SPACER: SpacerElement,
    ElementType.PAGE_BREAK: PageBreakElement,
}


def element_from_dict(data: Mapping[str, Any]) -> DocumentElement:
    """
    Build an element from its structured form.
    
    Expects data that already passed schema validation; use
    ``docformat.core.document_format.validate`` for untrusted input.
    """
    element_class = ELEMENT_CLASSES[ElementType(data["type"])]
    return element_class.from_dict(data)

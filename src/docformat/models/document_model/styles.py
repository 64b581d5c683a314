"""
Style hint records for document elements.

Style hints are advisory rendering information (font size, weight, alignment,
colours, borders). They are never checked against a rendering engine and
never influence parsing decisions. Each element kind has its own record so
a hint that makes no sense for a kind cannot be attached to it.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

from .enums import Alignment, FontStyle, FontWeight

Number = Union[int, float]


def _compact(data: Dict[str, Any]) -> Dict[str, Any]:
    """Drop keys whose value is None."""
    return {key: value for key, value in data.items() if value is not None}


def _enum_value(member: Optional[Any]) -> Optional[str]:
    return member.value if member is not None else None


@dataclass(frozen=True)
class TextStyle:
    """Style hints for a text element."""
    font_size: Optional[Number] = None
    font_weight: Optional[FontWeight] = None
    font_style: Optional[FontStyle] = None
    color: Optional[str] = None
    alignment: Optional[Alignment] = None
    
    def to_dict(self) -> Dict[str, Any]:
        return _compact({
            "fontSize": self.font_size,
            "fontWeight": _enum_value(self.font_weight),
            "fontStyle": _enum_value(self.font_style),
            "color": self.color,
            "alignment": _enum_value(self.alignment),
        })
    
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TextStyle":
        return cls(
            font_size=data.get("fontSize"),
            font_weight=FontWeight(data["fontWeight"]) if "fontWeight" in data else None,
            font_style=FontStyle(data["fontStyle"]) if "fontStyle" in data else None,
            color=data.get("color"),
            alignment=Alignment(data["alignment"]) if "alignment" in data else None,
        )


@dataclass(frozen=True)
class HeaderStyle:
    """Style hints for a header element."""
    font_size: Optional[Number] = None
    font_weight: Optional[FontWeight] = None
    color: Optional[str] = None
    alignment: Optional[Alignment] = None
    
    def to_dict(self) -> Dict[str, Any]:
        return _compact({
            "fontSize": self.font_size,
            "fontWeight": _enum_value(self.font_weight),
            "color": self.color,
            "alignment": _enum_value(self.alignment),
        })
    
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "HeaderStyle":
        return cls(
            font_size=data.get("fontSize"),
            font_weight=FontWeight(data["fontWeight"]) if "fontWeight" in data else None,
            color=data.get("color"),
            alignment=Alignment(data["alignment"]) if "alignment" in data else None,
        )


@dataclass(frozen=True)
class ListStyle:
    """Style hints for a list element."""
    font_size: Optional[Number] = None
    indentation: Optional[Number] = None
    bullet_style: Optional[str] = None
    
    def to_dict(self) -> Dict[str, Any]:
        return _compact({
            "fontSize": self.font_size,
            "indentation": self.indentation,
            "bulletStyle": self.bullet_style,
        })
    
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ListStyle":
        return cls(
            font_size=data.get("fontSize"),
            indentation=data.get("indentation"),
            bullet_style=data.get("bulletStyle"),
        )


@dataclass(frozen=True)
class TableHeaderStyle:
    """Style hints for the header row of a table."""
    background_color: Optional[str] = None
    font_weight: Optional[FontWeight] = None
    
    def to_dict(self) -> Dict[str, Any]:
        return _compact({
            "backgroundColor": self.background_color,
            "fontWeight": _enum_value(self.font_weight),
        })
    
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TableHeaderStyle":
        return cls(
            background_color=data.get("backgroundColor"),
            font_weight=FontWeight(data["fontWeight"]) if "fontWeight" in data else None,
        )


@dataclass(frozen=True)
class TableStyle:
    """Style hints for a table element."""
    font_size: Optional[Number] = None
    header_style: Optional[TableHeaderStyle] = None
    border_style: Optional[str] = None
    cell_padding: Optional[Number] = None
    
    def to_dict(self) -> Dict[str, Any]:
        return _compact({
            "fontSize": self.font_size,
            "headerStyle": self.header_style.to_dict() if self.header_style else None,
            "borderStyle": self.border_style,
            "cellPadding": self.cell_padding,
        })
    
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TableStyle":
        header_style = data.get("headerStyle")
        return cls(
            font_size=data.get("fontSize"),
            header_style=TableHeaderStyle.from_dict(header_style) if header_style is not None else None,
            border_style=data.get("borderStyle"),
            cell_padding=data.get("cellPadding"),
        )

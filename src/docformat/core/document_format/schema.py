"""
JSON Schemas of the structured document encoding.

The schemas are closed: unknown properties are rejected, tags and style
values are enum-restricted, and every required field is listed. Validation
runs in two stages (envelope, then each element against the schema of its
own tag) so an error can always be attributed to one element index.
"""

from typing import Any, Dict

from ...models.document_model import (
    Alignment,
    ElementType,
    FontStyle,
    FontWeight,
    ListType,
    MAX_HEADER_LEVEL,
    MIN_HEADER_LEVEL,
)

SCHEMA_DIALECT = "http://json-schema.org/draft-07/schema#"

_STRING = {"type": "string"}
_NUMBER = {"type": "number"}
_STRING_LIST = {"type": "array", "items": _STRING}

_FONT_WEIGHT = {"type": "string", "enum": [w.value for w in FontWeight]}
_FONT_STYLE = {"type": "string", "enum": [s.value for s in FontStyle]}
_ALIGNMENT = {"type": "string", "enum": [a.value for a in Alignment]}
_IMAGE_ALIGNMENT = {
    "type": "string",
    "enum": [Alignment.LEFT.value, Alignment.CENTER.value, Alignment.RIGHT.value],
}


def _object(properties: Dict[str, Any], required=()) -> Dict[str, Any]:
    """Closed object schema with the given properties."""
    schema = {
        "type": "object",
        "properties": properties,
        "additionalProperties": False,
    }
    if required:
        schema["required"] = list(required)
    return schema


def _tag(element_type: ElementType) -> Dict[str, Any]:
    return {"type": "string", "const": element_type.value}


TEXT_STYLE_SCHEMA = _object({
    "fontSize": _NUMBER,
    "fontWeight": _FONT_WEIGHT,
    "fontStyle": _FONT_STYLE,
    "color": _STRING,
    "alignment": _ALIGNMENT,
})

HEADER_STYLE_SCHEMA = _object({
    "fontSize": _NUMBER,
    "fontWeight": _FONT_WEIGHT,
    "color": _STRING,
    "alignment": _ALIGNMENT,
})

LIST_STYLE_SCHEMA = _object({
    "fontSize": _NUMBER,
    "indentation": _NUMBER,
    "bulletStyle": _STRING,
})

TABLE_STYLE_SCHEMA = _object({
    "fontSize": _NUMBER,
    "headerStyle": _object({
        "backgroundColor": _STRING,
        "fontWeight": _FONT_WEIGHT,
    }),
    "borderStyle": _STRING,
    "cellPadding": _NUMBER,
})

ELEMENT_SCHEMAS: Dict[ElementType, Dict[str, Any]] = {
    ElementType.TEXT: _object(
        {
            "type": _tag(ElementType.TEXT),
            "content": _STRING,
            "style": TEXT_STYLE_SCHEMA,
        },
        required=("type", "content"),
    ),
    ElementType.HEADER: _object(
        {
            "type": _tag(ElementType.HEADER),
            "level": {
                "type": "integer",
                "minimum": MIN_HEADER_LEVEL,
                "maximum": MAX_HEADER_LEVEL,
            },
            "content": _STRING,
            "style": HEADER_STYLE_SCHEMA,
        },
        required=("type", "level", "content"),
    ),
    ElementType.LIST: _object(
        {
            "type": _tag(ElementType.LIST),
            "listType": {"type": "string", "enum": [t.value for t in ListType]},
            "items": _STRING_LIST,
            "style": LIST_STYLE_SCHEMA,
        },
        required=("type", "listType", "items"),
    ),
    ElementType.TABLE: _object(
        {
            "type": _tag(ElementType.TABLE),
            "title": _STRING,
            "headers": _STRING_LIST,
            "rows": {"type": "array", "items": _STRING_LIST},
            "style": TABLE_STYLE_SCHEMA,
        },
        required=("type", "headers", "rows"),
    ),
    ElementType.IMAGE: _object(
        {
            "type": _tag(ElementType.IMAGE),
            "src": _STRING,
            "alt": _STRING,
            "width": _NUMBER,
            "height": _NUMBER,
            "alignment": _IMAGE_ALIGNMENT,
        },
        required=("type", "src"),
    ),
    ElementType.SPACER: _object(
        {
            "type": _tag(ElementType.SPACER),
            "height": _NUMBER,
        },
        required=("type", "height"),
    ),
    ElementType.PAGE_BREAK: _object(
        {"type": _tag(ElementType.PAGE_BREAK)},
        required=("type",),
    ),
}

ELEMENT_TAG_SCHEMA = {
    "type": "object",
    "properties": {
        "type": {"type": "string", "enum": [t.value for t in ElementType]},
    },
    "required": ["type"],
}

METADATA_SCHEMA = _object(
    {
        "title": _STRING,
        "author": _STRING,
        "subject": _STRING,
        "keywords": _STRING_LIST,
        "createdAt": _STRING,
        "language": _STRING,
    },
    required=("title",),
)

DOCUMENT_ENVELOPE_SCHEMA = {
    "$schema": SCHEMA_DIALECT,
    **_object(
        {
            "metadata": METADATA_SCHEMA,
            "elements": {"type": "array", "items": {"type": "object"}},
        },
        required=("metadata", "elements"),
    ),
}

"""
Document-level records: metadata and the parsed document.

A ParsedDocument is a value. It holds no reference to the text it was
parsed from or to any parser state, and each parse call builds a new one.
"""

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional, Tuple

from .elements import DocumentElement, element_from_dict
from .styles import _compact

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Generated Document"
DEFAULT_AUTHOR = "Document Assistant"
DEFAULT_LANGUAGE = "en"

# Accepted keys of a caller-supplied partial metadata mapping.
METADATA_FIELDS = ("title", "author", "subject", "keywords", "created_at", "language")


@dataclass(frozen=True)
class DocumentMetadata:
    """
    Descriptive metadata of a document.
    
    Attributes:
        title: Document title (required)
        author: Author name
        subject: Subject line
        keywords: Ordered keywords
        created_at: Creation timestamp
        language: Locale tag such as ``en`` or ``de-CH``
    """
    title: str
    author: Optional[str] = None
    subject: Optional[str] = None
    keywords: Optional[Tuple[str, ...]] = None
    created_at: Optional[datetime] = None
    language: Optional[str] = None
    
    def __post_init__(self):
        if self.keywords is not None:
            object.__setattr__(self, "keywords", tuple(self.keywords))
    
    @classmethod
    def with_defaults(
        cls,
        partial: Optional[Mapping[str, Any]] = None,
        title: Optional[str] = None
    ) -> "DocumentMetadata":
        """
        Synthesize metadata from a partial mapping.
        
        Missing or empty values fall back to the defaults: title
        "Generated Document", author "Document Assistant", the current UTC
        time and language "en". Subject and keywords stay unset unless given.
        
        Args:
            partial: Caller-supplied fields, keyed by attribute name
            title: Title to use when ``partial`` carries none
        """
        partial = partial or {}
        unknown = set(partial) - set(METADATA_FIELDS)
        if unknown:
            logger.warning(f"Ignoring unknown metadata fields: {', '.join(sorted(unknown))}")
        
        return cls(
            title=partial.get("title") or title or DEFAULT_TITLE,
            author=partial.get("author") or DEFAULT_AUTHOR,
            subject=partial.get("subject"),
            keywords=partial.get("keywords"),
            created_at=partial.get("created_at") or datetime.now(timezone.utc),
            language=partial.get("language") or DEFAULT_LANGUAGE,
        )
    
    def to_dict(self) -> Dict[str, Any]:
        return _compact({
            "title": self.title,
            "author": self.author,
            "subject": self.subject,
            "keywords": list(self.keywords) if self.keywords is not None else None,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "language": self.language,
        })
    
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DocumentMetadata":
        created_at = data.get("createdAt")
        return cls(
            title=data["title"],
            author=data.get("author"),
            subject=data.get("subject"),
            keywords=data.get("keywords"),
            created_at=datetime.fromisoformat(created_at) if created_at is not None else None,
            language=data.get("language"),
        )


@dataclass(frozen=True)
class ParsedDocument:
    """Metadata plus the elements of a document in reading order."""
    metadata: DocumentMetadata
    elements: Tuple[DocumentElement, ...] = field(default_factory=tuple)
    
    def __post_init__(self):
        object.__setattr__(self, "elements", tuple(self.elements))
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "metadata": self.metadata.to_dict(),
            "elements": [element.to_dict() for element in self.elements],
        }
    
    def to_json(self, indent: Optional[int] = None) -> str:
        """
        Encode the document in the structured (JSON) encoding.
        
        Raises:
            ValueError: If a numeric field is NaN or infinite
        """
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False, allow_nan=False)
    
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ParsedDocument":
        """Build a document from already-validated structured data."""
        return cls(
            metadata=DocumentMetadata.from_dict(data["metadata"]),
            elements=tuple(element_from_dict(element) for element in data["elements"]),
        )

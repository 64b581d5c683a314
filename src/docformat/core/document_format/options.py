"""
Parsing Options Module

Immutable configuration shared by the markup and plain-text parsers.

Only ``extract_tables`` and ``extract_lists`` influence structure. The
remaining fields populate style hints or are accepted for compatibility with
callers that pass the full option set.
"""

import logging
import math
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping, Union

from ...models.document_model import Alignment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsingOptions:
    """
    Configuration for the parsing core.
    
    Attributes:
        preserve_formatting: Attach style hints to produced elements. When
            False, elements carry no style at all; structure is unchanged.
        extract_tables: Recognise pipe-separated lines as tables. When False
            such lines are ordinary text.
        extract_lists: Recognise bullet and numbered lines as lists. When
            False such lines are ordinary text.
        extract_images: Accepted for completeness; images are never
            synthesized from markup text.
        default_font_size: Base font size used for style hints (> 0)
        default_alignment: Alignment used for style hints
    
    Example:
        >>> options = ParsingOptions(extract_tables=False, default_font_size=11)
        >>> options.default_alignment
        <Alignment.LEFT: 'left'>
    """
    preserve_formatting: bool = True
    extract_tables: bool = True
    extract_lists: bool = True
    extract_images: bool = False
    default_font_size: Union[int, float] = 12
    default_alignment: Alignment = Alignment.LEFT
    
    def __post_init__(self):
        """Validate option values and normalise the alignment."""
        if isinstance(self.default_alignment, str):
            try:
                object.__setattr__(self, "default_alignment", Alignment(self.default_alignment))
            except ValueError:
                raise ValueError(
                    f"default_alignment must be one of "
                    f"{[a.value for a in Alignment]}, got {self.default_alignment!r}"
                ) from None
        if not isinstance(self.default_alignment, Alignment):
            raise ValueError(f"default_alignment must be an Alignment, got {type(self.default_alignment)}")
        
        size = self.default_font_size
        valid_number = isinstance(size, (int, float)) and not isinstance(size, bool)
        if not valid_number or not size > 0 or not math.isfinite(size):
            raise ValueError(f"default_font_size must be a positive finite number, got {size!r}")
        
        for name in ("preserve_formatting", "extract_tables", "extract_lists", "extract_images"):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be a boolean, got {getattr(self, name)!r}")
        
        if self.extract_images:
            logger.debug("extract_images is set; markup text never yields image elements")
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert options to a JSON-compatible dictionary."""
        data = asdict(self)
        data["default_alignment"] = self.default_alignment.value
        return data
    
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ParsingOptions":
        """
        Create options from a dictionary, ignoring unknown keys.
        
        Args:
            data: Mapping with ParsingOptions field names as keys
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            logger.warning(f"Ignoring unknown parsing options: {', '.join(sorted(unknown))}")
        return cls(**{key: value for key, value in data.items() if key in known})

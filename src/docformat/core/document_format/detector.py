"""
Format detection.

Chooses which parser should handle a piece of raw text:

1. Trimmed text framed by ``{`` and ``}`` is a structured (JSON) candidate.
   Whether it really is structured is only known after the strict parser
   accepts it, so the dispatcher falls back when it does not.
2. Text matching any markup indicator (header, list marker, table pipes,
   bold, italic or inline code) is markup. The indicators are independent
   and unweighted, so a plain sentence such as ``use *args and **kwargs``
   routes to the markup parser.
3. Everything else is plain text.
"""

import logging
from enum import Enum
from typing import List, Tuple

from .patterns import MARKDOWN_INDICATORS, Pattern

logger = logging.getLogger(__name__)


class DocumentFormat(Enum):
    """Input formats understood by the parsing core."""
    STRUCTURED = "structured"
    MARKDOWN = "markdown"
    PLAIN_TEXT = "plain_text"
    
    def __str__(self) -> str:
        return self.value


class FormatDetector:
    """Heuristic input format detector. Stateless and thread-safe."""
    
    def __init__(self, indicators: Tuple[Pattern, ...] = MARKDOWN_INDICATORS) -> None:
        self.indicators = indicators
    
    def looks_structured(self, content: str) -> bool:
        """True when the trimmed content is framed by braces."""
        trimmed = (content or "").strip()
        return trimmed.startswith("{") and trimmed.endswith("}")
    
    def markdown_indicators(self, content: str) -> List[str]:
        """Names of the markup indicators found in content."""
        return [pattern.name for pattern in self.indicators if pattern.matches(content or "")]
    
    def has_markdown_indicators(self, content: str) -> bool:
        return any(pattern.matches(content or "") for pattern in self.indicators)
    
    def detect(self, content: str) -> DocumentFormat:
        """
        Best-guess format of content, judged from its shape alone.
        
        A STRUCTURED result means "framed like JSON"; it does not guarantee
        that the structured parser will accept the text.
        """
        if self.looks_structured(content):
            return DocumentFormat.STRUCTURED
        if self.has_markdown_indicators(content):
            return DocumentFormat.MARKDOWN
        return DocumentFormat.PLAIN_TEXT

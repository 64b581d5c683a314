"""
Line patterns shared by the markup parser and the format detector.

Every pattern is compiled once at import time with ``re.MULTILINE`` and is
read-only afterwards, so parsers can share them across threads.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Match, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchResult:
    """
    Immutable result container for pattern matching operations.
    
    Attributes:
        pattern_name: Name of the pattern that generated this result
        match_count: Number of matches found
        matches: Matched strings (or group tuples)
    """
    pattern_name: str
    match_count: int
    matches: List[str]


class Pattern:
    """
    Named, pre-compiled regular expression.
    
    Attributes:
        name: Descriptive identifier for the pattern
        regex_pattern: Raw regex string
        compiled_regex: Pre-compiled regex object
    """
    
    def __init__(self, name: str, regex_pattern: str) -> None:
        """
        Initialize a Pattern with name and regex validation.
        
        Args:
            name: Descriptive name for the pattern (e.g., 'header', 'bold')
            regex_pattern: Regular expression pattern string
            
        Raises:
            ValueError: If the name is empty or the regex does not compile
        """
        if not name or not name.strip():
            raise ValueError("Pattern name cannot be empty")
        
        if not regex_pattern:
            raise ValueError("Regex pattern cannot be empty")
        
        self.name = name.strip()
        self.regex_pattern = regex_pattern
        
        try:
            self.compiled_regex = re.compile(regex_pattern, re.MULTILINE)
        except re.error as e:
            raise ValueError(f"Invalid regex pattern for '{name}': {e}") from e
    
    def match(self, text: str) -> Optional[Match[str]]:
        """
        Find the first match in text.
        
        Args:
            text: Input text to search
            
        Returns:
            Match object if pattern found, None otherwise
        """
        if not text:
            return None
        
        return self.compiled_regex.search(text)
    
    def matches(self, text: str) -> bool:
        """Return True when the pattern occurs anywhere in text."""
        return self.match(text) is not None
    
    def findall(self, text: str) -> List[str]:
        """
        Find all matches in text.
        
        Args:
            text: Input text to search
            
        Returns:
            List of matched strings (empty list if no matches)
        """
        if not text:
            return []
        
        return self.compiled_regex.findall(text)
    
    def find_with_metadata(self, text: str) -> MatchResult:
        """Find all matches and report them with the pattern name and count."""
        matches = self.findall(text)
        return MatchResult(
            pattern_name=self.name,
            match_count=len(matches),
            matches=matches
        )
    
    def __repr__(self) -> str:
        return f"Pattern(name='{self.name}', regex='{self.regex_pattern}')"
    
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pattern):
            return NotImplemented
        return self.name == other.name and self.regex_pattern == other.regex_pattern
    
    def __hash__(self) -> int:
        return hash((self.name, self.regex_pattern))


# Block patterns, applied to a single trimmed line.
HEADER = Pattern("header", r"^(#{1,6})\s+(.+)$")
UNORDERED_ITEM = Pattern("unordered_item", r"^[-*+]\s+(.+)$")
ORDERED_ITEM = Pattern("ordered_item", r"^\d+\.\s+(.+)$")
THEMATIC_BREAK = Pattern("thematic_break", r"^(?:-{3,}|\*{3,})$")
TABLE_SEPARATOR_CELL = Pattern("table_separator_cell", r"^:?-+:?$")

TABLE_CELL_DELIMITER = "|"

# Whole-text indicators used for format detection. Any single hit routes the
# input to the markup parser.
MARKDOWN_INDICATORS: Tuple[Pattern, ...] = (
    Pattern("header", r"^#{1,6}\s+"),
    Pattern("unordered_list", r"^\s*[-*+]\s+"),
    Pattern("ordered_list", r"^\s*\d+\.\s+"),
    Pattern("table", r"\|.*\|"),
    Pattern("bold", r"\*\*.*\*\*"),
    Pattern("italic", r"\*.*\*"),
    Pattern("inline_code", r"`.*`"),
)

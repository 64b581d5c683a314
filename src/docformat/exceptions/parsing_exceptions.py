"""
Parsing-related exceptions for docformat.

Only the structured-encoding path raises these. The markup parser, the
plain-text parser, the serializer and the auto-detecting dispatcher are total
and never let an exception escape for string input.
"""

import logging
from typing import List, Optional

logger = logging.getLogger(__name__)


class DocumentFormatError(Exception):
    """Base exception for document format errors."""
    pass


class StructuredDocumentError(DocumentFormatError):
    """Base exception for failures of the structured (JSON) encoding path."""
    pass


class StructuredDecodeError(StructuredDocumentError):
    """
    Raised when the input is not syntactically valid JSON.
    
    Attributes:
        cause: The underlying decoder exception
        line: Line of the decode failure, when known
        column: Column of the decode failure, when known
    """
    
    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.cause = cause
        self.line = getattr(cause, "lineno", None)
        self.column = getattr(cause, "colno", None)
    
    def __str__(self) -> str:
        msg = super().__str__()
        if self.line is not None:
            msg += f" (line {self.line}, column {self.column})"
        return msg


class StructuredValidationError(StructuredDocumentError):
    """
    Raised when decoded data does not conform to the document model.
    
    Attributes:
        path: Dotted path of the first offending field, e.g. ``elements[2].level``
        element_index: Index of the offending element, None for envelope errors
        validation_errors: Every message reported for the offending value
    """
    
    def __init__(
        self,
        message: str,
        path: str = "",
        element_index: Optional[int] = None,
        validation_errors: Optional[List[str]] = None
    ) -> None:
        super().__init__(message)
        self.path = path
        self.element_index = element_index
        self.validation_errors = validation_errors or []
        
        logger.debug(
            f"StructuredValidationError: {message}",
            extra={"path": path, "element_index": element_index}
        )
    
    def __str__(self) -> str:
        """Return formatted validation error with the offending path."""
        msg = super().__str__()
        
        if self.path:
            msg = f"{msg}\nPath: {self.path}"
        
        if len(self.validation_errors) > 1:
            msg += "\n\nValidation errors:"
            for i, error in enumerate(self.validation_errors, 1):
                msg += f"\n  {i}. {error}"
        
        return msg

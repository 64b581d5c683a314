"""
Structured Document Parser

Decodes the structured (JSON) encoding of a document and validates it against
the closed document schema before building the model. Validation is strict
and total: the input either describes a fully conforming document or a
StructuredDecodeError / StructuredValidationError is raised. No partial
document is ever returned and nothing is coerced or silently dropped.

Usage:
    >>> parser = StructuredDocumentParser()
    >>> doc = parser.parse('{"metadata": {"title": "T"}, "elements": []}')
    >>> doc.metadata.title
    'T'
"""

import json
import logging
import math
from datetime import datetime
from typing import Any, Iterable, List, Optional

from jsonschema import Draft7Validator
from jsonschema.exceptions import ValidationError, best_match

from ...exceptions.parsing_exceptions import (
    StructuredDecodeError,
    StructuredValidationError,
)
from ...models.document_model import ElementType, ParsedDocument
from .schema import DOCUMENT_ENVELOPE_SCHEMA, ELEMENT_SCHEMAS, ELEMENT_TAG_SCHEMA

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant {name} is not allowed")


def _parse_finite_float(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value):
        raise ValueError(f"Number {literal} is out of range")
    return value


def format_path(parts: Iterable[Any], prefix: str = "") -> str:
    """
    Render a jsonschema path as ``elements[0].style.fontSize``.
    
    Args:
        parts: Path components (property names and array indices)
        prefix: Already-rendered path to extend
    """
    path = prefix
    for part in parts:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path = f"{path}.{part}" if path else str(part)
    return path


class StructuredDocumentParser:
    """
    Strict parser/validator for the structured document encoding.
    
    Holds only compiled validators, which are never mutated after
    construction, so one instance can be shared between threads.
    """
    
    def __init__(self) -> None:
        self._envelope_validator = Draft7Validator(DOCUMENT_ENVELOPE_SCHEMA)
        self._tag_validator = Draft7Validator(ELEMENT_TAG_SCHEMA)
        self._element_validators = {
            element_type: Draft7Validator(schema)
            for element_type, schema in ELEMENT_SCHEMAS.items()
        }
    
    def parse(self, text: str) -> ParsedDocument:
        """
        Decode and validate a structured document.
        
        Args:
            text: JSON text of a document
            
        Returns:
            The decoded document
            
        Raises:
            StructuredDecodeError: If the text is not valid JSON
            StructuredValidationError: If the data does not match the schema
        """
        return self.validate(self.decode(text))
    
    def decode(self, text: str) -> Any:
        """
        Decode JSON text without validating it.
        
        Raises:
            StructuredDecodeError: If decoding fails for any reason
        """
        if not isinstance(text, (str, bytes, bytearray)):
            raise StructuredDecodeError(
                f"Structured input must be text, got {type(text).__name__}"
            )
        
        try:
            return json.loads(
                text,
                parse_constant=_reject_constant,
                parse_float=_parse_finite_float,
            )
        except json.JSONDecodeError as e:
            raise StructuredDecodeError(f"Invalid JSON document: {e.msg}", cause=e) from e
        except (ValueError, RecursionError) as e:
            raise StructuredDecodeError(f"Invalid JSON document: {e}", cause=e) from e
    
    def validate(self, candidate: Any) -> ParsedDocument:
        """
        Validate already-decoded data and build the document.
        
        Args:
            candidate: Decoded structured value (or a ParsedDocument, which
                is re-validated through its structured form)
            
        Returns:
            The validated document
            
        Raises:
            StructuredValidationError: Naming the first offending path
        """
        if isinstance(candidate, ParsedDocument):
            candidate = candidate.to_dict()
        
        self._check(self._envelope_validator, candidate)
        
        for index, element in enumerate(candidate["elements"]):
            self._validate_element(element, index)
        
        created_at = candidate["metadata"].get("createdAt")
        if created_at is not None:
            try:
                datetime.fromisoformat(created_at)
            except ValueError:
                raise StructuredValidationError(
                    f"Invalid document: {created_at!r} is not an ISO-8601 date-time",
                    path="metadata.createdAt",
                ) from None
        
        try:
            document = ParsedDocument.from_dict(candidate)
        except (KeyError, TypeError, ValueError) as e:
            raise StructuredValidationError(f"Invalid document: {e}") from e
        
        logger.debug(f"Validated structured document with {len(document.elements)} elements")
        return document
    
    def _validate_element(self, element: Any, index: int) -> None:
        """Validate one element: first its tag, then the schema of that tag."""
        self._check(self._tag_validator, element, element_index=index)
        element_type = ElementType(element["type"])
        self._check(self._element_validators[element_type], element, element_index=index)
    
    def _check(
        self,
        validator: Draft7Validator,
        instance: Any,
        element_index: Optional[int] = None
    ) -> None:
        """Raise StructuredValidationError for the most relevant schema error."""
        errors: List[ValidationError] = list(validator.iter_errors(instance))
        if not errors:
            return
        
        prefix = f"elements[{element_index}]" if element_index is not None else ""
        error = best_match(errors)
        location = list(error.absolute_path)
        if element_index is None and len(location) >= 2 and location[0] == "elements":
            element_index = location[1]
        path = format_path(location, prefix) or prefix or "$"
        
        raise StructuredValidationError(
            f"Invalid document: {error.message} at {path}",
            path=path,
            element_index=element_index,
            validation_errors=[
                f"{format_path(e.absolute_path, prefix) or prefix or '$'}: {e.message}"
                for e in errors
            ],
        )

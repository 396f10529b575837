"""docspec - declare a data shape once, validate and convert JSON documents against it."""

from docspec.validator import (
    DocumentValidator,
    ParseError,
    PreconditionError,
    SchemaError,
    ValidationError,
    ValidationMode,
    ValidationResult,
    ValidationWarning,
    document_to_object,
    object_to_document,
    validate_schema,
)

__version__ = "0.1.0"

__all__ = [
    "DocumentValidator",
    "ParseError",
    "PreconditionError",
    "SchemaError",
    "ValidationError",
    "ValidationMode",
    "ValidationResult",
    "ValidationWarning",
    "document_to_object",
    "object_to_document",
    "validate_schema",
]

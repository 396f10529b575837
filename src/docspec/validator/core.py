"""Entry points of the docspec validator.

Two API styles are offered over the same engine:

- mode-explicit functions (``check_schema``, ``decode_document``, ``encode_document``) take a
  ``ValidationMode`` and always return a ``ValidationResult``;
- list-parameter functions (``validate_schema``, ``document_to_object``,
  ``object_to_document``) select the mode from their ``errors`` argument: omit it to have
  the first error raised, pass an empty list to have every error appended to it.
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .codec import parse_document, serialize_document
from .converters import DocumentDecoder, DocumentEncoder
from .errors import PreconditionError, ValidationError, ValidationWarning
from .loaders import load_schema_from_file
from .models import BaseBlockModel, dump_schema, parse_schema
from .reporting import Reporter, ValidationMode, ValidationResult
from .schema import SchemaValidator

logger = logging.getLogger(__name__)

Schema = Mapping[str, Any] | BaseBlockModel


def check_schema(
    schema: Any, mode: ValidationMode = ValidationMode.FAIL_FAST
) -> ValidationResult:
    """Validate a schema against the block grammar.

    Args:
        schema: The raw schema (or an already typed block)
        mode: Whether to stop at the first error

    Returns:
        A result whose value is the typed schema block when the schema is valid
    """
    if isinstance(schema, BaseBlockModel):
        schema = dump_schema(schema)

    reporter = Reporter(mode)
    result = reporter.run(lambda: SchemaValidator(reporter).validate(schema))
    if result.ok:
        result.value = parse_schema(schema)

    logger.debug(
        f"Schema validation finished (mode={mode.value}, errors={len(result.errors)}, "
        f"warnings={len(result.warnings)})"
    )
    return result


def decode_document(
    document: str | bytes, schema: Schema, mode: ValidationMode = ValidationMode.FAIL_FAST
) -> ValidationResult:
    """Parse a JSON document and check it against a schema.

    Args:
        document: The document text
        schema: A schema already accepted by validate_schema, raw or typed
        mode: Whether to stop at the first error

    Returns:
        A result whose value is the decoded object (partial when errors were collected)

    Raises:
        ParseError: If the document is not valid JSON, in either mode
        SchemaError: If the schema cannot be represented as typed blocks
    """
    block = parse_schema(schema)
    data = parse_document(document)

    reporter = Reporter(mode)
    result = reporter.run(lambda: DocumentDecoder(reporter).convert([], data, block))

    logger.debug(f"Document decoded (mode={mode.value}, errors={len(result.errors)})")
    return result


def encode_document(
    value: Any, schema: Schema, mode: ValidationMode = ValidationMode.FAIL_FAST
) -> ValidationResult:
    """Check a Python value against a schema and serialize it.

    Args:
        value: The object graph to encode
        schema: A schema already accepted by validate_schema, raw or typed
        mode: Whether to stop at the first error

    Returns:
        A result whose value is the document text. In collect-all mode the partial value is
        serialized even when errors were found; in fail-fast mode there is no text on error.

    Raises:
        SchemaError: If the schema cannot be represented as typed blocks
    """
    block = parse_schema(schema)

    reporter = Reporter(mode)
    result = reporter.run(lambda: DocumentEncoder(reporter).convert([], value, block))
    if result.ok or mode is ValidationMode.COLLECT_ALL:
        result.value = serialize_document(result.value)

    logger.debug(f"Object encoded (mode={mode.value}, errors={len(result.errors)})")
    return result


def _select_mode(
    errors: list[ValidationError] | None, warnings: list[ValidationWarning] | None
) -> ValidationMode:
    for name, collection in (("errors", errors), ("warnings", warnings)):
        if collection is not None and (not isinstance(collection, list) or collection):
            raise PreconditionError(f"if the {name} parameter is set, it must be an empty list")

    if errors is None:
        return ValidationMode.FAIL_FAST
    return ValidationMode.COLLECT_ALL


def _deliver(
    result: ValidationResult,
    errors: list[ValidationError] | None,
    warnings: list[ValidationWarning] | None,
) -> Any:
    if warnings is not None:
        warnings.extend(result.warnings)

    if errors is None:
        result.raise_for_errors()
    else:
        errors.extend(result.errors)

    return result.value


def validate_schema(
    schema: Any,
    errors: list[ValidationError] | None = None,
    warnings: list[ValidationWarning] | None = None,
) -> None:
    """Validate a schema, raising the first error unless ``errors`` is given.

    Args:
        schema: The raw schema
        errors: Empty list to collect every error instead of raising
        warnings: Empty list to collect warnings

    Raises:
        SchemaError: The first grammar violation, in eager mode
        PreconditionError: If ``errors`` or ``warnings`` is not an empty list
    """
    mode = _select_mode(errors, warnings)
    _deliver(check_schema(schema, mode), errors, warnings)


def document_to_object(
    document: str | bytes,
    schema: Schema,
    errors: list[ValidationError] | None = None,
    warnings: list[ValidationWarning] | None = None,
) -> Any:
    """Decode a JSON document, raising the first error unless ``errors`` is given.

    Raises:
        ValidationError: The first mismatch, in eager mode
        ParseError: If the document is not valid JSON
        PreconditionError: If ``errors`` or ``warnings`` is not an empty list
    """
    mode = _select_mode(errors, warnings)
    return _deliver(decode_document(document, schema, mode), errors, warnings)


def object_to_document(
    value: Any,
    schema: Schema,
    errors: list[ValidationError] | None = None,
    warnings: list[ValidationWarning] | None = None,
) -> str | None:
    """Encode a Python value, raising the first error unless ``errors`` is given.

    Raises:
        ValidationError: The first mismatch, in eager mode
        PreconditionError: If ``errors`` or ``warnings`` is not an empty list
    """
    mode = _select_mode(errors, warnings)
    return _deliver(encode_document(value, schema, mode), errors, warnings)


class DocumentValidator:
    """Converter bound to one schema.

    The schema is validated and parsed once, then reused read-only by every call, so one
    instance can serve concurrent callers.

    Example:
        >>> validator = DocumentValidator.from_dict({
        ...     "type": "map",
        ...     "fields": {"id": {"type": "number", "decimal": False}}
        ... })
        >>> validator.decode('{"id": 7}')
        {'id': 7}
        >>> validator.encode({"id": 7})
        '{"id":7}'
    """

    def __init__(self, schema: BaseBlockModel):
        self.schema = schema

    @classmethod
    def from_dict(cls, schema_dict: Mapping[str, Any]) -> "DocumentValidator":
        """Create a DocumentValidator from a raw schema.

        The schema is checked against the block grammar first, stopping at the first error.

        Raises:
            SchemaError: If the schema is not valid
        """
        result = check_schema(schema_dict)
        result.raise_for_errors()
        return cls(result.value)

    @classmethod
    def from_file(cls, path: str | Path) -> "DocumentValidator":
        """Create a DocumentValidator from a YAML or JSON schema file."""
        return cls.from_dict(load_schema_from_file(path))

    def decode(self, document: str | bytes) -> Any:
        """Decode a document, raising the first error."""
        result = decode_document(document, self.schema, ValidationMode.FAIL_FAST)
        result.raise_for_errors()
        return result.value

    def encode(self, value: Any) -> str:
        """Encode a value, raising the first error."""
        result = encode_document(value, self.schema, ValidationMode.FAIL_FAST)
        result.raise_for_errors()
        return result.value

    def validate_document(self, document: str | bytes) -> ValidationResult:
        """Decode a document collecting every error."""
        return decode_document(document, self.schema, ValidationMode.COLLECT_ALL)

    def validate_object(self, value: Any) -> ValidationResult:
        """Encode a value collecting every error."""
        return encode_document(value, self.schema, ValidationMode.COLLECT_ALL)

    def schema_dict(self) -> dict[str, Any]:
        """Get the schema in its raw mapping form."""
        return dump_schema(self.schema)

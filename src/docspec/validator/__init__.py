"""docspec validator - schema-driven validation and JSON conversion.

This module provides the engine behind every docspec entry point:
- Validation of a schema against the block grammar
- Decoding of a JSON document into Python values checked against a schema
- Encoding of Python values into a JSON document checked against a schema

## Key Components

### Core Classes
- `DocumentValidator`: Converter bound to one parsed schema
- `SchemaValidator`: Recursive validator for raw schema blocks
- `DocumentDecoder` / `DocumentEncoder`: The two conversion directions
- `ValidationError`: Exception raised for validation failures

### Schema Types
- `SchemaBlock`: Union of the eight block models, discriminated by `type`
- `BoundModel` / `LengthModel`: Object forms of bounds and length constraints

## Quick Examples

### Decoding
```python
from docspec.validator import DocumentValidator

validator = DocumentValidator.from_dict({
    "type": "map",
    "fields": {
        "id": {"type": "number", "decimal": False, "minimum": 1},
        "tags": {"type": "array", "value": {"type": "string"}, "option": True},
    },
})

validator.decode('{"id": 3}')
# Returns: {"id": 3, "tags": None}
```

### Collecting every error
```python
from docspec.validator import ValidationMode, decode_document

result = decode_document('{"id": 0.5}', schema, ValidationMode.COLLECT_ALL)
for error in result.errors:
    print(error.location, error.message)
```
"""

from ._types import (
    ArrayBlockModel,
    BaseBlockModel,
    BlockKind,
    BoundModel,
    EnumBlockModel,
    FlagBlockModel,
    KeyKind,
    LengthModel,
    MapBlockModel,
    NumberBlockModel,
    ObjectBlockModel,
    SchemaBlock,
    StringBlockModel,
    TupleBlockModel,
)
from .codec import parse_document, serialize_document
from .converters import DocumentDecoder, DocumentEncoder, TypeConverter
from .core import (
    DocumentValidator,
    check_schema,
    decode_document,
    document_to_object,
    encode_document,
    object_to_document,
    validate_schema,
)
from .errors import (
    DocspecError,
    ParseError,
    PreconditionError,
    SchemaError,
    ValidationError,
    ValidationWarning,
)
from .loaders import load_schema, load_schema_from_file
from .models import dump_schema, parse_schema
from .reporting import ValidationMode, ValidationResult
from .schema import SchemaValidator

__all__ = [
    # Types
    "ArrayBlockModel",
    "BaseBlockModel",
    "BlockKind",
    "BoundModel",
    "EnumBlockModel",
    "FlagBlockModel",
    "KeyKind",
    "LengthModel",
    "MapBlockModel",
    "NumberBlockModel",
    "ObjectBlockModel",
    "SchemaBlock",
    "StringBlockModel",
    "TupleBlockModel",
    "parse_schema",
    "dump_schema",
    # Errors
    "DocspecError",
    "ParseError",
    "PreconditionError",
    "SchemaError",
    "ValidationError",
    "ValidationWarning",
    # Modes
    "ValidationMode",
    "ValidationResult",
    # Engine classes
    "SchemaValidator",
    "TypeConverter",
    "DocumentDecoder",
    "DocumentEncoder",
    # Codec and loaders
    "parse_document",
    "serialize_document",
    "load_schema",
    "load_schema_from_file",
    # Entry points
    "DocumentValidator",
    "check_schema",
    "decode_document",
    "encode_document",
    "validate_schema",
    "document_to_object",
    "object_to_document",
]

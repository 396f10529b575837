"""Document naming of the docspec entry points, where the schema is called the specs."""

from docspec.validator.core import document_to_object, object_to_document
from docspec.validator.core import validate_schema as validate_specs

__all__ = ["validate_specs", "document_to_object", "object_to_document"]

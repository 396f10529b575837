"""Payload naming of the docspec entry points.

A payload is a JSON document and its format is the schema describing it.
"""

from docspec.validator.core import document_to_object as payload_to_object
from docspec.validator.core import object_to_document as object_to_payload
from docspec.validator.core import validate_schema as validate_format

__all__ = ["validate_format", "payload_to_object", "object_to_payload"]

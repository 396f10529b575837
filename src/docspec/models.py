"""Base Pydantic models for docspec.

This module provides the base model class that all docspec Pydantic models inherit from.
It establishes consistent configuration across all models including:

- Strict field validation (no extra fields allowed)
- Immutable instances, so a parsed schema can be shared between threads
- Consistent serialization behavior

Example:
    >>> from docspec.models import DocspecBaseModel
    >>>
    >>> class MyModel(DocspecBaseModel):
    ...     name: str
    ...     count: int = 0
    >>>
    >>> instance = MyModel(name="test")
    >>> instance.model_dump()
    {'name': 'test', 'count': 0}
"""

from pydantic import BaseModel, ConfigDict


class DocspecBaseModel(BaseModel):
    """Base model for all docspec Pydantic models.

    - extra="forbid": Rejects any fields not defined in the model
    - frozen=True: Makes instances immutable for thread safety
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

"""Pydantic models for docspec schema blocks.

A schema is a tree of blocks. Each block kind is its own model and ``SchemaBlock`` is the
union of all of them, discriminated by the ``type`` field. The set of properties a raw block
may declare is derived from these models, so the schema validator and the typed
representation share one definition of the grammar.

Example:
    >>> block = parse_schema({"type": "array", "value": {"type": "number", "minimum": 0}})
    >>> block.value.minimum
    0
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Literal, Union

from pydantic import Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from docspec.models import DocspecBaseModel

from .errors import SchemaError

KeyKind = Literal["integer", "string"]

#: Field names, enum values and string object keys must match this.
NAME_PATTERN = r"^[a-zA-Z0-9_-]+$"

COMMON_PROPERTIES: frozenset[str] = frozenset({"type", "name", "description", "option"})


class BoundModel(DocspecBaseModel):
    """Object form of a ``minimum``/``maximum`` bound."""

    value: int | float
    exclusive: bool = False


class LengthModel(DocspecBaseModel):
    """Object form of a length constraint."""

    minimum: int | float | None = None
    maximum: int | float | None = None


class BaseBlockModel(DocspecBaseModel):
    """Properties every block kind accepts.

    Attributes:
        type: The block kind.
        name: Optional human-readable name.
        description: Optional description.
        option: Whether ``null`` is accepted at this position (and, for map fields,
            whether the field may be absent).
    """

    type: str
    name: str | None = None
    description: str | None = None
    option: bool = False


class FlagBlockModel(BaseBlockModel):
    type: Literal["flag"]


class NumberBlockModel(BaseBlockModel):
    type: Literal["number"]
    decimal: bool = True
    minimum: int | float | BoundModel | None = None
    maximum: int | float | BoundModel | None = None


class StringBlockModel(BaseBlockModel):
    type: Literal["string"]
    length: int | float | LengthModel | None = None
    pattern: str | None = None


class ArrayBlockModel(BaseBlockModel):
    type: Literal["array"]
    value: SchemaBlock
    length: int | float | LengthModel | None = None


class ObjectBlockModel(BaseBlockModel):
    type: Literal["object"]
    key: KeyKind
    value: SchemaBlock
    length: int | float | LengthModel | None = None


class TupleBlockModel(BaseBlockModel):
    type: Literal["tuple"]
    items: list[SchemaBlock] = Field(min_length=1)


class MapBlockModel(BaseBlockModel):
    type: Literal["map"]
    fields: dict[str, SchemaBlock] = Field(min_length=1)


class EnumBlockModel(BaseBlockModel):
    type: Literal["enum"]
    values: list[str] = Field(min_length=1)


SchemaBlock = Annotated[
    Union[
        FlagBlockModel,
        NumberBlockModel,
        StringBlockModel,
        ArrayBlockModel,
        ObjectBlockModel,
        TupleBlockModel,
        MapBlockModel,
        EnumBlockModel,
    ],
    Field(discriminator="type"),
]

BLOCK_MODELS: dict[str, type[BaseBlockModel]] = {
    "flag": FlagBlockModel,
    "number": NumberBlockModel,
    "string": StringBlockModel,
    "array": ArrayBlockModel,
    "object": ObjectBlockModel,
    "tuple": TupleBlockModel,
    "map": MapBlockModel,
    "enum": EnumBlockModel,
}


def kind_properties(kind: str) -> frozenset[str]:
    """Properties legal for ``kind`` on top of the common ones."""
    return frozenset(BLOCK_MODELS[kind].model_fields) - COMMON_PROPERTIES


ArrayBlockModel.model_rebuild()
ObjectBlockModel.model_rebuild()
TupleBlockModel.model_rebuild()
MapBlockModel.model_rebuild()

_schema_adapter: TypeAdapter[Any] = TypeAdapter(SchemaBlock)


def parse_schema(schema: Mapping[str, Any] | BaseBlockModel) -> BaseBlockModel:
    """Turn a raw schema into its typed block.

    Typed blocks are returned unchanged. The raw schema is trusted to follow the block
    grammar: only shapes the typed models cannot represent are rejected here, cross-property
    rules such as ``minimum`` against ``maximum`` are left to ``validate_schema``.

    Raises:
        SchemaError: If the schema cannot be represented as a typed block.
    """
    if isinstance(schema, BaseBlockModel):
        return schema

    try:
        block: BaseBlockModel = _schema_adapter.validate_python(schema)
    except PydanticValidationError as e:
        error = e.errors()[0]
        location = ".".join(str(part) for part in error["loc"]) or "schema"
        raise SchemaError([], f"schema is invalid at {location}: {error['msg']}") from e
    return block


def dump_schema(block: BaseBlockModel) -> dict[str, Any]:
    """Render a typed block back into its raw mapping form."""
    return block.model_dump(exclude_unset=True)

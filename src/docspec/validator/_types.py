"""Type definitions for the docspec validator.

This module re-exports the Pydantic block models from models.py for the public API.
"""

from typing import Literal

from .models import (
    ArrayBlockModel,
    BaseBlockModel,
    BoundModel,
    EnumBlockModel,
    FlagBlockModel,
    LengthModel,
    MapBlockModel,
    NumberBlockModel,
    ObjectBlockModel,
    SchemaBlock,
    StringBlockModel,
    TupleBlockModel,
)

# Type aliases for better readability
BlockKind = Literal["flag", "number", "string", "array", "object", "tuple", "map", "enum"]
KeyKind = Literal["integer", "string"]

__all__ = [
    "ArrayBlockModel",
    "BaseBlockModel",
    "BoundModel",
    "EnumBlockModel",
    "FlagBlockModel",
    "LengthModel",
    "MapBlockModel",
    "NumberBlockModel",
    "ObjectBlockModel",
    "SchemaBlock",
    "StringBlockModel",
    "TupleBlockModel",
    "BlockKind",
    "KeyKind",
]

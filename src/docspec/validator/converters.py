"""Value conversion driven by typed schema blocks.

``TypeConverter`` walks a value in lock-step with a (validated) schema block, reporting
every mismatch and building the adjusted value: optional map fields that are absent become
``None`` and integer object keys become ``int``. The two directions only differ in the
wording of type errors and in which Python values count as sequences and integer keys:

- ``DocumentDecoder`` checks values produced by the JSON codec ("was expecting a JSON
  number");
- ``DocumentEncoder`` checks native Python values before they are serialized ("was
  expecting a number").

A node that fails its own checks converts to ``None``; containers keep the entries that
could be converted, so collect-all callers get a best-effort partial value.
"""

import re
from collections.abc import Callable, Mapping
from functools import lru_cache
from typing import Any, ClassVar

from .errors import SchemaError
from .models import (
    ArrayBlockModel,
    BaseBlockModel,
    EnumBlockModel,
    FlagBlockModel,
    MapBlockModel,
    NumberBlockModel,
    ObjectBlockModel,
    StringBlockModel,
    TupleBlockModel,
)
from .properties import check_length, format_number, is_integral, is_name, is_number, read_bound
from .reporting import Reporter

Path = list[str]

# Canonical decimal integers only: no sign prefix, exponent, fraction or leading zero.
INTEGER_KEY_RE = re.compile(r"0|-?[1-9][0-9]*")


@lru_cache(maxsize=256)
def _compile_pattern(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern)


class TypeConverter:
    """Base converter; subclasses set the direction-specific vocabulary."""

    EXPECTATIONS: ClassVar[dict[str, str]] = {}
    SEQUENCE_TYPES: ClassVar[tuple[type, ...]] = (list,)

    def __init__(self, reporter: Reporter):
        self.reporter = reporter
        self._processors: dict[str, Callable[[Path, Any, Any], Any]] = {
            "flag": self._convert_flag,
            "number": self._convert_number,
            "string": self._convert_string,
            "array": self._convert_array,
            "object": self._convert_object,
            "tuple": self._convert_tuple,
            "map": self._convert_map,
            "enum": self._convert_enum,
        }

    def convert(self, path: Path, node: Any, block: BaseBlockModel) -> Any:
        """Check ``node`` against ``block`` and return the adjusted value."""
        if block.option and node is None:
            return None

        return self._processors[block.type](path, node, block)

    def read_integer_key(self, key: Any) -> int | None:
        raise NotImplementedError

    def _expecting(self, path: Path, kind: str) -> None:
        self.reporter.error(path, self.EXPECTATIONS[kind])

    def _convert_flag(self, path: Path, node: Any, block: FlagBlockModel) -> Any:
        if not isinstance(node, bool):
            self._expecting(path, "boolean")
            return None

        return node

    def _convert_number(self, path: Path, node: Any, block: NumberBlockModel) -> Any:
        minimum = read_bound(block.minimum)
        maximum = read_bound(block.maximum)

        if not is_number(node):
            self._expecting(path, "number")
            return None

        if not block.decimal and not is_integral(node):
            self.reporter.error(path, "was expecting non-decimal number")
            return None

        valid = True

        if minimum is not None:
            limit = format_number(minimum.value)
            if minimum.exclusive:
                if not node > minimum.value:
                    self.reporter.error(path, f"value must be strictly greater than {limit}")
                    valid = False
            elif not node >= minimum.value:
                self.reporter.error(path, f"value must be equal or greater than {limit}")
                valid = False

        if maximum is not None:
            limit = format_number(maximum.value)
            if maximum.exclusive:
                if not node < maximum.value:
                    self.reporter.error(path, f"value must be strictly lower than {limit}")
                    valid = False
            elif not node <= maximum.value:
                self.reporter.error(path, f"value must be equal or lower than {limit}")
                valid = False

        return node if valid else None

    def _convert_string(self, path: Path, node: Any, block: StringBlockModel) -> Any:
        if not isinstance(node, str):
            self._expecting(path, "string")
            return None

        valid = True

        if block.length is not None:
            valid = check_length(self.reporter, path, len(node), block.length)

        if block.pattern is not None:
            try:
                pattern = _compile_pattern(block.pattern)
            except re.error as e:
                raise SchemaError(path, f"pattern is invalid: {e}") from e

            if pattern.search(node) is None:
                self.reporter.error(path, "value did not match the pattern")
                valid = False

        return node if valid else None

    def _convert_array(self, path: Path, node: Any, block: ArrayBlockModel) -> Any:
        if not isinstance(node, self.SEQUENCE_TYPES):
            self._expecting(path, "array")
            return None

        if block.length is not None:
            check_length(self.reporter, path, len(node), block.length)

        return [
            self.convert(path + [f"[{index}]"], item, block.value)
            for index, item in enumerate(node)
        ]

    def _convert_object(self, path: Path, node: Any, block: ObjectBlockModel) -> Any:
        if not isinstance(node, Mapping):
            self._expecting(path, "object")
            return None

        if block.length is not None:
            check_length(self.reporter, path, len(node), block.length)

        result: dict[Any, Any] = {}
        for index, (key, value) in enumerate(node.items()):
            converted_key: Any
            if block.key == "integer":
                converted_key = self.read_integer_key(key)
                if converted_key is None:
                    self.reporter.error(
                        path, f"key at index {index} is invalid; expected it to be an integer"
                    )
                    continue
            else:
                if not is_name(key):
                    self.reporter.error(
                        path, f"key at index {index} is invalid; expected to match the pattern"
                    )
                    continue
                converted_key = key

            result[converted_key] = self.convert(path + [f"{{{key}}}"], value, block.value)

        return result

    def _convert_tuple(self, path: Path, node: Any, block: TupleBlockModel) -> Any:
        if not isinstance(node, self.SEQUENCE_TYPES):
            self._expecting(path, "array")
            return None

        if len(node) != len(block.items):
            self.reporter.error(path, f"length of the array must be {len(block.items)}")
            return None

        return [
            self.convert(path + [f"<{index}>"], item, item_block)
            for index, (item, item_block) in enumerate(zip(node, block.items))
        ]

    def _convert_map(self, path: Path, node: Any, block: MapBlockModel) -> Any:
        if not isinstance(node, Mapping):
            self._expecting(path, "object")
            return None

        result: dict[str, Any] = {}
        for key, value in node.items():
            if key in block.fields:
                result[key] = self.convert(path + [f"${key}"], value, block.fields[key])
            else:
                self.reporter.error(path, f"'{key}' field was unexpected")

        for key, field in block.fields.items():
            if key in node:
                continue
            if field.option:
                result[key] = None
            else:
                self.reporter.error(path, f"'{key}' field was missing")

        return result

    def _convert_enum(self, path: Path, node: Any, block: EnumBlockModel) -> Any:
        if not isinstance(node, str):
            self._expecting(path, "string")
            return None

        if node not in block.values:
            self.reporter.error(path, "enum value is invalid")
            return None

        return node


class DocumentDecoder(TypeConverter):
    """Checks and adjusts a value freshly parsed from a JSON document."""

    EXPECTATIONS = {
        "boolean": "was expecting a JSON boolean",
        "number": "was expecting a JSON number",
        "string": "was expecting a JSON string",
        "array": "was expecting a JSON array",
        "object": "was expecting a JSON object",
    }
    SEQUENCE_TYPES = (list,)

    def read_integer_key(self, key: Any) -> int | None:
        if isinstance(key, str) and INTEGER_KEY_RE.fullmatch(key):
            return int(key)
        return None


class DocumentEncoder(TypeConverter):
    """Checks and adjusts a native Python value before it is serialized."""

    EXPECTATIONS = {
        "boolean": "was expecting a boolean",
        "number": "was expecting a number",
        "string": "was expecting a string",
        "array": "was expecting an array",
        "object": "was expecting an object",
    }
    SEQUENCE_TYPES = (list, tuple)

    def read_integer_key(self, key: Any) -> int | None:
        if isinstance(key, int) and not isinstance(key, bool):
            return key
        return None

"""Validation of raw schema blocks against the block grammar.

The validator walks a raw (mapping-based) schema and reports every grammar violation with
the path of the offending block or property. For each block the checks run in this order,
which is visible in collect-all mode:

1. the block must be a mapping with a known ``type``, otherwise descent stops;
2. each property outside the common and kind-specific sets is reported;
3. the kind-specific properties are checked, recursing into nested blocks;
4. ``name``, ``description`` and ``option`` are type-checked.
"""

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from .models import COMMON_PROPERTIES, kind_properties
from .properties import is_integral, is_name, is_number
from .reporting import Reporter, ValidationMode

Path = list[str]


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


class SchemaValidator:
    """Recursive validator for raw schema blocks.

    Example:
        >>> validator = SchemaValidator(Reporter(ValidationMode.COLLECT_ALL))
        >>> validator.validate({"type": "flag", "option": 42})
        >>> [e.message for e in validator.reporter.errors]
        ['value must be a bool']
    """

    def __init__(self, reporter: Reporter | None = None):
        self.reporter = reporter or Reporter(ValidationMode.FAIL_FAST)
        self._validators: dict[str, Callable[[Path, Mapping[str, Any]], None]] = {
            "flag": self._validate_flag,
            "number": self._validate_number,
            "string": self._validate_string,
            "array": self._validate_array,
            "object": self._validate_object,
            "tuple": self._validate_tuple,
            "map": self._validate_map,
            "enum": self._validate_enum,
        }

    def validate(self, schema: Any) -> None:
        """Validate ``schema`` from the root. Raises the first error in fail-fast mode."""
        self._validate_block([], schema)

    def _validate_block(self, path: Path, block: Any) -> None:
        if not isinstance(block, Mapping):
            self.reporter.schema_error(path, "value must be an object")
            return

        if "type" not in block:
            self.reporter.schema_error(path, "'type' property is missing")
            return

        kind = block["type"]
        if not isinstance(kind, str) or kind not in self._validators:
            self.reporter.schema_error(path, "value of 'type' is incorrect")
            return

        legal = COMMON_PROPERTIES | kind_properties(kind)
        for prop in block:
            if prop not in legal:
                self.reporter.schema_error(path, f"'{prop}' property is unexpected")

        self._validators[kind](path, block)

        if "name" in block and not isinstance(block["name"], str):
            self.reporter.schema_error(path + ["name"], "value must be a string")

        if "description" in block and not isinstance(block["description"], str):
            self.reporter.schema_error(path + ["description"], "value must be a string")

        if "option" in block and not isinstance(block["option"], bool):
            self.reporter.schema_error(path + ["option"], "value must be a bool")

    def _validate_flag(self, path: Path, block: Mapping[str, Any]) -> None:
        pass

    def _validate_number(self, path: Path, block: Mapping[str, Any]) -> None:
        if "decimal" in block and not isinstance(block["decimal"], bool):
            self.reporter.schema_error(path + ["decimal"], "value must be a bool")

        minimum = maximum = None
        if "minimum" in block:
            minimum = self._validate_bound(path, "minimum", block["minimum"])
        if "maximum" in block:
            maximum = self._validate_bound(path, "maximum", block["maximum"])

        # Exclusivity is not taken into account here.
        if minimum is not None and maximum is not None and maximum < minimum:
            self.reporter.schema_error(path, "minimum must be lower than maximum")

    def _validate_bound(self, path: Path, name: str, bound: Any) -> int | float | None:
        """Check a ``minimum``/``maximum`` property and return its raw value if usable."""
        bound_path = path + [name]

        if is_number(bound):
            return bound

        if not isinstance(bound, Mapping):
            self.reporter.schema_error(bound_path, "value must be either a number or an object")
            return None

        extra = [prop for prop in bound if prop not in ("exclusive", "value")]
        if extra:
            for prop in extra:
                self.reporter.schema_error(bound_path, f"'{prop}' property is unexpected")
            return None

        if "exclusive" in bound and not isinstance(bound["exclusive"], bool):
            self.reporter.schema_error(bound_path + ["exclusive"], "value must be a bool")

        if "value" not in bound:
            self.reporter.schema_error(bound_path, "'value' property is missing")
            return None

        if not is_number(bound["value"]):
            self.reporter.schema_error(bound_path + ["value"], "value must be a number")
            return None

        return bound["value"]

    def _validate_length(self, path: Path, length: Any) -> None:
        length_path = path + ["length"]

        if is_number(length):
            self._validate_length_value(length_path, length)
            return

        if not isinstance(length, Mapping):
            self.reporter.schema_error(length_path, "value must be either a number or an object")
            return

        extra = [prop for prop in length if prop not in ("minimum", "maximum")]
        if extra:
            for prop in extra:
                self.reporter.schema_error(length_path, f"'{prop}' property is unexpected")
            return

        minimum = maximum = None
        if "minimum" in length:
            minimum = self._validate_length_bound(length_path + ["minimum"], length["minimum"])
        if "maximum" in length:
            maximum = self._validate_length_bound(length_path + ["maximum"], length["maximum"])

        if minimum is not None and maximum is not None and minimum > maximum:
            self.reporter.schema_error(length_path, "minimum must be lower than maximum")

    def _validate_length_bound(self, path: Path, value: Any) -> int | float | None:
        if not is_number(value):
            self.reporter.schema_error(path, "value must be a number")
            return None
        self._validate_length_value(path, value)
        return value

    def _validate_length_value(self, path: Path, value: int | float) -> None:
        if not is_integral(value):
            self.reporter.warning(path, "should be an integer (got decimal)")
        if value < 0:
            self.reporter.schema_error(path, "must be greater or equal to zero")

    def _validate_string(self, path: Path, block: Mapping[str, Any]) -> None:
        if "length" in block:
            self._validate_length(path, block["length"])

        # The pattern is compiled lazily by the converters.
        if "pattern" in block and not isinstance(block["pattern"], str):
            self.reporter.schema_error(path + ["pattern"], "value must be a string")

    def _validate_array(self, path: Path, block: Mapping[str, Any]) -> None:
        if "value" not in block:
            self.reporter.schema_error(path, "'value' property is missing")
            return

        self._validate_block(path + ["[]"], block["value"])

        if "length" in block:
            self._validate_length(path, block["length"])

    def _validate_object(self, path: Path, block: Mapping[str, Any]) -> None:
        if "value" in block:
            self._validate_block(path + ["{}"], block["value"])
        else:
            self.reporter.schema_error(path, "'value' property is missing")

        if "key" in block:
            if block["key"] not in ("integer", "string"):
                self.reporter.schema_error(
                    path, "value of 'key' must be either 'integer' or 'string'"
                )
        else:
            self.reporter.schema_error(path, "'key' property is missing")

        if "length" in block:
            self._validate_length(path, block["length"])

    def _validate_tuple(self, path: Path, block: Mapping[str, Any]) -> None:
        if "items" not in block:
            self.reporter.schema_error(path, "'items' property is missing")
            return

        items = block["items"]
        if not _is_sequence(items):
            self.reporter.schema_error(path + ["items"], "value must be an array")
            return

        if len(items) == 0:
            self.reporter.schema_error(path + ["items"], "must contain at least one value")
            return

        for index, item in enumerate(items):
            self._validate_block(path + [f"<{index}>"], item)

    def _validate_map(self, path: Path, block: Mapping[str, Any]) -> None:
        if "fields" not in block:
            self.reporter.schema_error(path, "'fields' property is missing")
            return

        fields = block["fields"]
        if not isinstance(fields, Mapping):
            self.reporter.schema_error(path + ["fields"], "value must be an object")
            return

        if len(fields) == 0:
            self.reporter.schema_error(path + ["fields"], "must contain at least one field")
            return

        for key, value in fields.items():
            if not is_name(key):
                self.reporter.schema_error(path + ["fields"], f"'{key}' is an incorrect key name")
                continue

            self._validate_block(path + [f"${key}"], value)

    def _validate_enum(self, path: Path, block: Mapping[str, Any]) -> None:
        if "values" not in block:
            self.reporter.schema_error(path, "'values' property is missing")
            return

        values = block["values"]
        if not _is_sequence(values):
            self.reporter.schema_error(path + ["values"], "value must be an array")
            return

        if len(values) == 0:
            self.reporter.schema_error(path + ["values"], "must contain at least one value")
            return

        seen: list[str] = []
        for value in values:
            if not is_name(value):
                self.reporter.schema_error(path + ["values"], f"'{value}' is an incorrect value")
                continue

            if value in seen:
                self.reporter.schema_error(path + ["values"], f"'{value}' value is duplicated")
                continue

            seen.append(value)

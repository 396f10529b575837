"""Error and warning collection shared by the three recursive walks."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .errors import SchemaError, ValidationError, ValidationWarning


class ValidationMode(str, Enum):
    """How a walk reacts to the first error it finds."""

    FAIL_FAST = "fail_fast"
    COLLECT_ALL = "collect_all"


@dataclass
class ValidationResult:
    """Outcome of one top-level validate/decode/encode call.

    Attributes:
        value: The produced value (typed schema block, decoded object or document text).
            In collect-all mode this may be a best-effort partial value when errors exist.
        errors: Errors in traversal order. At most one in fail-fast mode.
        warnings: Warnings in traversal order.
    """

    value: Any = None
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def raise_for_errors(self) -> None:
        """Raise the first collected error, if any."""
        if self.errors:
            raise self.errors[0]


class Reporter:
    """Accumulates diagnostics for a single walk.

    In fail-fast mode the first error is raised as soon as it is reported, which unwinds
    the whole recursion; the entry points catch it and turn it into a result.
    """

    def __init__(self, mode: ValidationMode = ValidationMode.FAIL_FAST):
        self.mode = mode
        self.errors: list[ValidationError] = []
        self.warnings: list[ValidationWarning] = []

    def error(self, path: Sequence[str], message: str) -> None:
        self._add(ValidationError(path, message))

    def schema_error(self, path: Sequence[str], message: str) -> None:
        self._add(SchemaError(path, message))

    def warning(self, path: Sequence[str], message: str) -> None:
        self.warnings.append(ValidationWarning(path, message))

    def _add(self, error: ValidationError) -> None:
        self.errors.append(error)
        if self.mode is ValidationMode.FAIL_FAST:
            raise error

    def run(self, walk: Callable[[], Any]) -> ValidationResult:
        """Run ``walk`` and package its outcome.

        A fail-fast stop surfaces here as the reported error being raised; it ends the walk
        without a value. Any other exception propagates.
        """
        value = None
        try:
            value = walk()
        except ValidationError as e:
            if not any(e is error for error in self.errors):
                raise
        return ValidationResult(value=value, errors=list(self.errors), warnings=list(self.warnings))

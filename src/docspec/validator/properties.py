"""Helpers shared by the schema validator and the converters."""

import math
import re
from collections.abc import Sequence
from typing import Any

from .models import NAME_PATTERN, BoundModel, LengthModel
from .reporting import Reporter

NAME_RE = re.compile(NAME_PATTERN)


def is_number(value: Any) -> bool:
    """True for finite ints and floats; ``bool`` is not a number here."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def is_integral(value: int | float) -> bool:
    return isinstance(value, int) or value.is_integer()


def is_name(value: Any) -> bool:
    return isinstance(value, str) and NAME_RE.fullmatch(value) is not None


def format_number(value: int | float) -> str:
    """Render a number the way it appears in JSON (``42.0`` renders as ``42``)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def read_bound(bound: int | float | BoundModel | None) -> BoundModel | None:
    """Normalize a ``minimum``/``maximum`` property; a bare number is an inclusive bound."""
    if bound is None:
        return None
    if isinstance(bound, BoundModel):
        return bound
    return BoundModel(value=bound)


def check_length(
    reporter: Reporter,
    path: Sequence[str],
    size: int,
    length: int | float | LengthModel,
) -> bool:
    """Check ``size`` against a length constraint, reporting at most one error.

    Returns:
        True if the constraint holds.
    """
    if isinstance(length, LengthModel):
        if length.minimum is not None:
            minimum = int(length.minimum)
            if not size >= minimum:
                reporter.error(path, f"length must be equal or greater than {minimum}")
                return False

        if length.maximum is not None:
            maximum = int(length.maximum)
            if not size <= maximum:
                reporter.error(path, f"length must be equal or lower than {maximum}")
                return False

        return True

    expected = int(length)
    if size != expected:
        reporter.error(path, f"length must be equal to {expected}")
        return False
    return True

"""JSON codec used for documents.

Documents are strict JSON: ``NaN``, ``Infinity`` and numbers too large for a float are
rejected on the way in, and non-finite values are never produced on the way out. Output is
compact and keeps non-ASCII characters as they are.
"""

import json
import math
from typing import Any

from .errors import ParseError


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _parse_float(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        raise ValueError(f"number {text} is out of range")
    return value


def parse_document(document: str | bytes) -> Any:
    """Parse document text into Python values.

    Raises:
        ParseError: If the text is not valid JSON.
    """
    try:
        return json.loads(document, parse_float=_parse_float, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise ParseError(f"Failed to parse document: {e}", lineno=e.lineno, colno=e.colno) from e
    except ValueError as e:
        raise ParseError(f"Failed to parse document: {e}") from e


def serialize_document(value: Any) -> str:
    """Serialize Python values into compact document text."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)

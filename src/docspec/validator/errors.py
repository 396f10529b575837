"""Exceptions and warnings raised by the docspec validator.

Every diagnostic produced while walking a schema or a value carries a ``path``: the list of
segments leading from the root to the offending node (``"[]"``, ``"{}"``, ``"<0>"``,
``"$field"``, ``"[3]"``, ``"{key}"`` or a plain property name). The path is diagnostic only.
"""

from collections.abc import Sequence


class DocspecError(Exception):
    """Base class for all docspec errors."""


class ValidationError(DocspecError, ValueError):
    """A value does not conform to its schema block."""

    def __init__(self, path: Sequence[str], message: str):
        super().__init__(message)
        self.path = list(path)
        self.message = message

    @property
    def location(self) -> str:
        """The path rendered for humans, ``<root>`` for the top-level node."""
        return format_path(self.path)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self.path!r}, message={self.message!r})"


class SchemaError(ValidationError):
    """The schema block itself violates the block grammar."""


class ValidationWarning(UserWarning):
    """Non-fatal advisory found while validating a schema. Never raised, only collected."""

    def __init__(self, path: Sequence[str], message: str):
        super().__init__(message)
        self.path = list(path)
        self.message = message

    @property
    def location(self) -> str:
        return format_path(self.path)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self.path!r}, message={self.message!r})"


class PreconditionError(DocspecError, ValueError):
    """The caller misused an entry point (e.g. passed a non-empty errors list)."""


class ParseError(DocspecError, ValueError):
    """The document text is not valid JSON."""

    def __init__(self, message: str, lineno: int | None = None, colno: int | None = None):
        super().__init__(message)
        self.message = message
        self.lineno = lineno
        self.colno = colno


def format_path(path: Sequence[str]) -> str:
    if not path:
        return "<root>"
    return ".".join(path)

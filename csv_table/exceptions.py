"""
Custom exception hierarchy for csv-table.

Callers can tell a malformed document (``ParsingError``) apart from a
value that cannot be written (``InvalidFieldError``) or a source that
could not be retrieved (``FetchError``) without inspecting messages.
"""

from __future__ import annotations

from typing import Any


class CsvTableError(Exception):
    """Base exception for all csv-table errors."""


class ParsingError(CsvTableError):
    """Raised when the parser meets text it cannot turn into a table."""


class IllegalStateError(ParsingError):
    """Raised when the next token is not admitted by the current lexer state.

    Carries the 1-based row and column of the field being built, e.g.
    ``a"b`` fails at row 1, col 1.
    """

    def __init__(self, row: int, col: int) -> None:
        self.row = row
        self.col = col
        super().__init__(f"Illegal state [row:{row}, col:{col}]")


class InvalidFieldError(CsvTableError):
    """Raised by the serializer when a field value has no text form."""

    def __init__(self, row: int, col: int, value: Any) -> None:
        self.row = row
        self.col = col
        self.value = value
        super().__init__(
            f"Field at [row:{row}, col:{col}] is not representable as text: "
            f"{value!r} ({type(value).__name__})"
        )


class FetchError(CsvTableError):
    """Raised when a remote source cannot be retrieved.

    ``status_code`` is ``None`` when the request never got a response
    (DNS failure, timeout, refused connection).
    """

    def __init__(self, status_code: int | None, reason: str) -> None:
        self.status_code = status_code
        self.reason = reason
        if status_code is None:
            super().__init__(f"ERR: {reason}")
        else:
            super().__init__(f"ERR {status_code}: {reason}")


class ConfigValidationError(CsvTableError):
    """Raised when options or a YAML config file fail validation."""


class ExportError(CsvTableError):
    """Raised when a table cannot be written to disk.

    For example, permission errors or an unsupported output format.
    """

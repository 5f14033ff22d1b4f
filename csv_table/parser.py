"""
Single-pass parser for comma-separated text.

Converts a complete text buffer into a table: a list of records, each a
list of field values. Tokens from ``lexer.tokenize`` drive a four-state
machine:

==================  =========================================================
START_OF_FIELD      nothing consumed for the current field yet
UNQUOTED            inside a bare field
QUOTED              inside a quoted field; ``,`` and newlines are literal
QUOTE_SEEN          a quote inside a quoted field: either ``""`` (escape)
                    or the closing quote
==================  =========================================================

Rows may have differing field counts. The first record gets no special
treatment; header handling belongs to ``render``.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from csv_table.config import ParseOptions, coerce_options
from csv_table.exceptions import IllegalStateError
from csv_table.lexer import TokenKind, tokenize
from csv_table.transforms.types import infer_type

logger = logging.getLogger(__name__)

Record = list[Any]
Table = list[Record]
FieldTransform = Callable[[Any, int, int], Any]


class State(enum.Enum):
    START_OF_FIELD = "start_of_field"
    UNQUOTED = "unquoted"
    QUOTED = "quoted"
    QUOTE_SEEN = "quote_seen"


def _identity(value: Any, row: int, col: int) -> Any:
    return value


@dataclass
class _Cursor:
    """Mutable scan position, owned by one ``parse()`` call."""

    typed: bool
    transform: FieldTransform
    state: State = State.START_OF_FIELD
    buffer: list[str] = field(default_factory=list)
    record: Record = field(default_factory=list)
    output: Table = field(default_factory=list)
    row: int = 1
    col: int = 1

    def end_field(self) -> None:
        raw = "".join(self.buffer)
        value: Any = infer_type(raw) if self.typed else raw
        self.record.append(self.transform(value, self.row, self.col))
        self.buffer.clear()
        self.col += 1

    def end_record(self) -> None:
        self.output.append(self.record)
        self.record = []
        self.row += 1
        self.col = 1

    def illegal(self) -> IllegalStateError:
        return IllegalStateError(self.row, self.col)


def parse(
    text: str,
    options: ParseOptions | Mapping[str, Any] | None = None,
    field_transform: FieldTransform | None = None,
) -> Table:
    """Parse comma-separated *text* into a list of records.

    Args:
        text: The complete document. Newlines may be ``\\n``, ``\\r\\n``
            or ``\\r``, mixed freely.
        options: ``ParseOptions`` or an equivalent mapping. With
            ``typed=True`` each raw field goes through ``infer_type``
            before *field_transform* sees it.
        field_transform: Called as ``field_transform(value, row, col)``
            (1-based) once per field as it is finalized; its return value
            is stored in place of *value*. Exceptions it raises abort the
            parse and propagate unchanged.

    Returns:
        The table. An empty string gives ``[]``; a final newline does not
        produce an extra empty record.

    Raises:
        IllegalStateError: If a token is not admitted by the current
            state, e.g. a quote inside a bare field (``a"b``) or text
            after a closing quote (``"a"b``).
        ConfigValidationError: If *options* are invalid.
    """
    opts = coerce_options(options, ParseOptions)
    cur = _Cursor(typed=opts.typed, transform=field_transform or _identity)

    for kind, value in tokenize(text):
        state = cur.state

        if state is State.START_OF_FIELD:
            if kind is TokenKind.QUOTE:
                cur.state = State.QUOTED
            elif kind is TokenKind.DELIMITER:
                cur.end_field()
            elif kind is TokenKind.NEWLINE:
                cur.end_field()
                cur.end_record()
            else:
                cur.buffer.append(value)
                cur.state = State.UNQUOTED

        elif state is State.UNQUOTED:
            if kind is TokenKind.DELIMITER:
                cur.end_field()
                cur.state = State.START_OF_FIELD
            elif kind is TokenKind.NEWLINE:
                cur.end_field()
                cur.end_record()
                cur.state = State.START_OF_FIELD
            else:
                # A quote, or a second text run (unreachable under maximal munch).
                raise cur.illegal()

        elif state is State.QUOTED:
            if kind is TokenKind.QUOTE:
                cur.state = State.QUOTE_SEEN
            else:
                cur.buffer.append(value)

        else:  # State.QUOTE_SEEN
            if kind is TokenKind.QUOTE:
                cur.buffer.append(value)
                cur.state = State.QUOTED
            elif kind is TokenKind.DELIMITER:
                cur.end_field()
                cur.state = State.START_OF_FIELD
            elif kind is TokenKind.NEWLINE:
                cur.end_field()
                cur.end_record()
                cur.state = State.START_OF_FIELD
            else:
                raise cur.illegal()

    # Flush a last line that has no terminating newline.
    if cur.record or cur.state is not State.START_OF_FIELD:
        cur.end_field()
        cur.end_record()

    logger.debug("Parsed %d records from %d characters", len(cur.output), len(text))
    return cur.output

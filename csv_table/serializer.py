"""
Serializer: the inverse of ``parser.parse``.

Writes a table (list of records of field values) as comma-separated text.
A field is quoted only when it has to be, i.e. when it contains a quote,
a comma or a newline character; quotes inside are doubled. Records are
always joined with ``\\n``.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from csv_table.config import StringifyOptions, coerce_options
from csv_table.exceptions import InvalidFieldError
from csv_table.lexer import DELIMITER, QUOTE

logger = logging.getLogger(__name__)

Replacer = Callable[[Any, int, int], Any]

_NEEDS_QUOTING = frozenset((QUOTE, DELIMITER, "\r", "\n"))


def field_to_text(value: Any, row: int, col: int) -> str:
    """Return the text form of a single field value.

    ``bool`` becomes ``"true"``/``"false"`` so that typed tables survive a
    round trip; ``int`` and finite ``float`` use ``str()``.

    Raises:
        InvalidFieldError: For ``None``, NaN/infinite floats and any
            non-scalar value.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float) and math.isfinite(value):
        return str(value)
    raise InvalidFieldError(row, col, value)


def escape_field(text: str) -> str:
    """Quote *text* if it contains a quote, comma or newline character."""
    if any(ch in _NEEDS_QUOTING for ch in text):
        return QUOTE + text.replace(QUOTE, QUOTE * 2) + QUOTE
    return text


def stringify(
    table: Iterable[Iterable[Any]],
    options: StringifyOptions | Mapping[str, Any] | None = None,
    replacer: Replacer | None = None,
) -> str:
    """Serialize *table* to comma-separated text.

    Args:
        table: Records of field values.
        options: ``StringifyOptions`` or an equivalent mapping. With
            ``eof=False`` no newline follows the last record.
        replacer: Optional ``replacer(value, row, col)`` (1-based) applied
            to each value before it is converted to text.

    Returns:
        The text. An empty table gives ``""`` regardless of ``eof``.

    Raises:
        InvalidFieldError: If a value (after *replacer*) has no text form.
        ConfigValidationError: If *options* are invalid.
    """
    opts = coerce_options(options, StringifyOptions)

    lines: list[str] = []
    for row, record in enumerate(table, start=1):
        cells = []
        for col, value in enumerate(record, start=1):
            if replacer is not None:
                value = replacer(value, row, col)
            cells.append(escape_field(field_to_text(value, row, col)))
        lines.append(DELIMITER.join(cells))

    output = "\n".join(lines)
    if opts.eof and lines:
        output += "\n"

    logger.debug("Serialized %d records to %d characters", len(lines), len(output))
    return output

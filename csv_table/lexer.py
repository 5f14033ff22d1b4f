"""
Tokenizer for comma-separated text.

Splits a complete text buffer into four token kinds using a maximal-munch
rule with a fixed priority:

1. a single quote character ``"``
2. a single delimiter ``,``
3. one newline sequence: ``\\r\\n``, ``\\n`` or ``\\r``
4. the longest run of characters that are none of the above

Every character of the input belongs to exactly one token, so the scan
never skips input.
"""

from __future__ import annotations

import enum
import re
from typing import Iterator, NamedTuple

QUOTE = '"'
DELIMITER = ","

# Alternation order is the priority order; ``\r\n`` must precede ``\r``.
_TOKEN_RE = re.compile(r'"|,|\r\n|\n|\r|[^",\r\n]+')


class TokenKind(enum.Enum):
    QUOTE = "quote"
    DELIMITER = "delimiter"
    NEWLINE = "newline"
    TEXT = "text"


class Token(NamedTuple):
    kind: TokenKind
    value: str


def _classify(value: str) -> TokenKind:
    if value == QUOTE:
        return TokenKind.QUOTE
    if value == DELIMITER:
        return TokenKind.DELIMITER
    if value in ("\r\n", "\n", "\r"):
        return TokenKind.NEWLINE
    return TokenKind.TEXT


def tokenize(text: str) -> Iterator[Token]:
    """Yield the tokens of *text* in order.

    Matching is anchored at the current position; an empty string
    yields nothing.
    """
    pos = 0
    end = len(text)
    while pos < end:
        match = _TOKEN_RE.match(text, pos)
        if match is None:
            break
        value = match.group()
        yield Token(_classify(value), value)
        pos = match.end()

"""
Scalar type inference for parsed fields.

Used by the parser when ``ParseOptions.typed`` is set. Raw field text is
mapped to a Python scalar using a deliberately small grammar:

- ``"true"`` / ``"false"`` (exact, lower case) -> ``bool``
- optional sign, optional digits, a decimal point, then one or more
  digits (``"2.5"``, ``"-.5"``) -> ``float``
- optional sign followed by digits only (``"3"``, ``"+12"``, ``"007"``)
  -> ``int``
- anything else -> the original string, unchanged

Exponent notation (``"1e5"``), a trailing point (``"1."``) and padded
values (``" 3"``) are not numbers under this grammar and stay strings.
Decimals too long to represent as a finite float also stay strings.
"""

from __future__ import annotations

import math
import re

_BOOLEANS = {"true": True, "false": False}
_FLOAT_RE = re.compile(r"[+-]?\d*\.\d+", re.ASCII)
_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)


def infer_type(raw: str) -> str | int | float | bool:
    """Coerce *raw* to ``bool``, ``float`` or ``int`` when it looks like one.

    Never raises: values that fail conversion fall back to *raw*.
    """
    if raw in _BOOLEANS:
        return _BOOLEANS[raw]
    try:
        if _FLOAT_RE.fullmatch(raw):
            value = float(raw)
            # Overlong decimals overflow to inf.
            return value if math.isfinite(value) else raw
        if _INT_RE.fullmatch(raw):
            return int(raw)
    except ValueError:
        return raw
    return raw

"""
DataFrame projection of parsed tables.

The parser treats every record alike. Consumers conventionally read the
first record as a header row; this module applies that convention and
projects a table into a ``pandas.DataFrame`` (and back).

Ragged input is padded rather than rejected:
- short rows are filled with ``None``;
- rows wider than the header get positional labels ``column_<n>``
  (1-based) for the unlabeled positions.
"""

from __future__ import annotations

import logging
from typing import Any

import pandas as pd

from csv_table.parser import Table
from csv_table.serializer import field_to_text

logger = logging.getLogger(__name__)


def _positional_label(index: int) -> str:
    return f"column_{index + 1}"


def to_dataframe(table: Table, header: bool = True) -> pd.DataFrame:
    """Project *table* into a DataFrame.

    Args:
        table: Parsed records.
        header: If True, the first record supplies the column labels and
            is not part of the data. If False, every record is data and
            columns are labeled ``column_1..n``.

    Returns:
        A DataFrame with one row per data record. An empty table gives an
        empty DataFrame.
    """
    if not table:
        return pd.DataFrame()

    labels: list[Any] = list(table[0]) if header else []
    rows = table[1:] if header else table

    width = max([len(labels)] + [len(r) for r in rows])
    columns = labels + [_positional_label(i) for i in range(len(labels), width)]
    data = [list(r) + [None] * (width - len(r)) for r in rows]

    df = pd.DataFrame(data, columns=columns, dtype=object)
    logger.debug("Projected table to DataFrame (%d rows x %d cols)", len(df), width)
    return df


def from_dataframe(df: pd.DataFrame, header: bool = True) -> Table:
    """Convert *df* back into a table of text fields.

    Missing values (``None`` / NaN) become empty strings. Other values
    are converted the way ``stringify`` converts them.

    Args:
        df: Source DataFrame.
        header: If True, the column labels are emitted as the first record.
    """
    table: Table = []
    if header:
        table.append([str(label) for label in df.columns])

    offset = len(table)
    for i, values in enumerate(df.itertuples(index=False, name=None), start=1):
        table.append([
            "" if _is_missing(v) else field_to_text(_to_python(v), i + offset, j)
            for j, v in enumerate(values, start=1)
        ])
    return table


def _is_missing(value: Any) -> bool:
    return value is None or (pd.api.types.is_scalar(value) and bool(pd.isna(value)))


def _to_python(value: Any) -> Any:
    # numpy scalars (int64, bool_) are not int/bool subclasses.
    if hasattr(value, "item") and not isinstance(value, (str, bytes)):
        return value.item()
    return value

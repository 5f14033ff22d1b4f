"""
Exporter for csv-table.

Writes a parsed table to disk, either back to comma-separated text
(through ``stringify``) or as Parquet (through the DataFrame projection
in ``render``, written by pandas with the pyarrow engine).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal

from csv_table.config import StringifyOptions
from csv_table.exceptions import ExportError
from csv_table.parser import Table
from csv_table.render import to_dataframe
from csv_table.serializer import stringify

logger = logging.getLogger(__name__)

_SUPPORTED_FORMATS = {"csv", "parquet"}


def export_table(
    table: Table,
    path: str | Path,
    output_format: Literal["csv", "parquet"] = "csv",
    options: StringifyOptions | Mapping[str, Any] | None = None,
    header: bool = True,
) -> Path:
    """Write *table* to *path*.

    The parent directory is created if it does not exist.

    Args:
        table: Records to write.
        path: Destination file.
        output_format: ``"csv"`` or ``"parquet"``.
        options: Serializer options, used for ``"csv"`` only.
        header: Whether the first record holds column labels, used for
            ``"parquet"`` only.

    Returns:
        The path written.

    Raises:
        ExportError: If *output_format* is unsupported, or if the write
            fails.
        InvalidFieldError: If a value has no text form (``"csv"``).
    """
    if output_format not in _SUPPORTED_FORMATS:
        raise ExportError(
            f"Unsupported output format: '{output_format}'. "
            f"Supported formats: {sorted(_SUPPORTED_FORMATS)}"
        )

    path = Path(path)
    if output_format == "csv":
        # Serialize first so a bad field never leaves a truncated file.
        text = stringify(table, options)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(text)
        except OSError as exc:
            raise ExportError(f"Failed to write {path.name} as csv: {exc}") from exc
    else:
        df = to_dataframe(table, header=header)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            df.to_parquet(path, index=False, engine="pyarrow")
        except Exception as exc:
            raise ExportError(f"Failed to write {path.name} as parquet: {exc}") from exc

    logger.info("Exported table -> %s (%d records)", path.name, len(table))
    return path

"""
csv-table: RFC 4180 style comma-separated text, parsed and written.

Public API surface:

- ``parse(text, options=None, field_transform=None)`` -- text to a list
  of records of fields.
- ``stringify(table, options=None, replacer=None)`` -- the inverse.
- ``infer_type(raw)`` -- the scalar inference behind ``typed=True``.
- ``load_table(location, ...)`` -- read a local file or fetch a URL,
  then parse.
- ``open(path)`` -- **convenience entry point**. Accepts a source (path
  or URL) or a ``csvtable.yaml`` config and returns a DataFrame with the
  first record as header.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from csv_table.config import (
    ParseOptions,
    RenderConfig,
    SourceConfig,
    StringifyOptions,
    TableConfig,
    load_config,
    save_config,
)
from csv_table.exceptions import (
    ConfigValidationError,
    CsvTableError,
    ExportError,
    FetchError,
    IllegalStateError,
    InvalidFieldError,
    ParsingError,
)
from csv_table.export import export_table
from csv_table.parser import parse
from csv_table.render import from_dataframe, to_dataframe
from csv_table.serializer import stringify
from csv_table.source import load_table, load_text
from csv_table.transforms.types import infer_type

__all__ = [
    "open",
    "parse",
    "stringify",
    "infer_type",
    "load_table",
    "load_text",
    "to_dataframe",
    "from_dataframe",
    "export_table",
    "load_config",
    "save_config",
    "ParseOptions",
    "StringifyOptions",
    "SourceConfig",
    "RenderConfig",
    "TableConfig",
    "CsvTableError",
    "ParsingError",
    "IllegalStateError",
    "InvalidFieldError",
    "FetchError",
    "ConfigValidationError",
    "ExportError",
]

logger = logging.getLogger(__name__)

_CONFIG_SUFFIXES = {".yaml", ".yml"}


def open(
    path: str | Path,
    *,
    typed: bool = False,
    header: bool = True,
) -> pd.DataFrame:
    """Load a table and project it into a DataFrame.

    Polymorphic behaviour based on *path*:

    - **YAML file** (``.yaml`` / ``.yml``): loads a ``TableConfig`` and
      uses its ``source``, ``parse`` and ``render`` sections. *typed* and
      *header* are ignored.
    - **Anything else**: treated as a local path or http(s) URL and
      parsed with ``typed`` / ``header`` as given.

    Examples::

        df = csv_table.open("data/people.csv")
        df = csv_table.open("https://example.com/people.csv", typed=True)
        df = csv_table.open("people.yaml")

    Raises:
        ConfigValidationError: If the config is invalid or has no source.
        FetchError: If a remote source cannot be retrieved.
        IllegalStateError: If the text is malformed.
    """
    if Path(str(path)).suffix.lower() in _CONFIG_SUFFIXES:
        config = load_config(path)
        if config.source is None:
            raise ConfigValidationError(f"Config has no 'source' section: {path}")
        logger.info("Opening %s via config %s", config.source.location, path)
        table = load_table(
            config.source.location,
            config.parse,
            timeout=config.source.timeout,
            encoding=config.source.encoding,
        )
        return to_dataframe(table, header=config.render.header)

    table = load_table(path, ParseOptions(typed=typed))
    return to_dataframe(table, header=header)

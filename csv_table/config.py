"""
Option models and YAML I/O for csv-table.

This module defines the Pydantic models behind the ``options`` arguments
of ``parse()`` / ``stringify()`` and the optional ``csvtable.yaml`` file
that bundles a source location with its parse and render settings.

Key models:
- ParseOptions: parser switches (``typed``).
- StringifyOptions: serializer switches (``eof``).
- SourceConfig: where the raw text comes from (path or URL).
- RenderConfig: how a parsed table is projected into a DataFrame.
- TableConfig: top-level model, maps 1:1 to the YAML file.

Key functions:
- coerce_options(value, model): accept a model, a mapping or ``None``.
- load_config(path) -> TableConfig: load and validate from YAML.
- save_config(config, path): serialize to YAML.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from csv_table.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ParseOptions(BaseModel):
    """Switches for ``parse()``."""

    model_config = ConfigDict(extra="forbid")

    typed: bool = Field(
        False,
        description="If True, infer bool/int/float values from field text",
    )


class StringifyOptions(BaseModel):
    """Switches for ``stringify()``."""

    model_config = ConfigDict(extra="forbid")

    eof: bool = Field(
        True,
        description="If True, end the output with a newline after the last record",
    )


class SourceConfig(BaseModel):
    """Source of the raw text: a local path or an http(s) URL."""

    model_config = ConfigDict(extra="forbid")

    location: str = Field(..., description="File path or http(s) URL")
    timeout: float = Field(30.0, gt=0, description="Network timeout in seconds")
    encoding: str = Field("utf-8", description="Encoding for local files")


class RenderConfig(BaseModel):
    """DataFrame projection settings."""

    model_config = ConfigDict(extra="forbid")

    header: bool = Field(
        True,
        description="If True, the first record supplies the column labels",
    )


class TableConfig(BaseModel):
    """Top-level configuration, maps 1:1 to csvtable.yaml."""

    model_config = ConfigDict(extra="forbid")

    source: SourceConfig | None = None
    parse: ParseOptions = Field(default_factory=ParseOptions)
    stringify: StringifyOptions = Field(default_factory=StringifyOptions)
    render: RenderConfig = Field(default_factory=RenderConfig)


def coerce_options(value: ModelT | Mapping[str, Any] | None, model: type[ModelT]) -> ModelT:
    """Normalize an ``options`` argument into an instance of *model*.

    Raises:
        ConfigValidationError: If *value* is not a mapping or model
            instance, or fails validation.
    """
    if value is None:
        return model()
    if isinstance(value, model):
        return value
    if not isinstance(value, Mapping):
        raise ConfigValidationError(
            f"Expected {model.__name__} or a mapping, got {type(value).__name__}"
        )
    try:
        return model.model_validate(dict(value))
    except ValidationError as exc:
        raise ConfigValidationError(f"Invalid {model.__name__}: {exc}") from exc


def load_config(path: str | Path) -> TableConfig:
    """Load and validate a YAML config file into a TableConfig.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty or fails validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    if not isinstance(raw, dict):
        raise ConfigValidationError(
            f"Config file must contain a mapping at the top level: {path}"
        )
    try:
        config = TableConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigValidationError(f"Invalid config file {path}: {exc}") from exc
    logger.info("Loaded config from %s", path)
    return config


def save_config(config: TableConfig, path: str | Path) -> None:
    """Serialize a TableConfig to YAML, with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# csv-table configuration\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved config to %s", path)

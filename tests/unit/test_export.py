"""
Unit tests for the exporter (csv_table.export).

Tests CSV and Parquet export, directory creation, and error handling
using pytest's tmp_path fixture.
"""

from __future__ import annotations

import pandas as pd
import pytest

from csv_table.exceptions import ExportError, InvalidFieldError
from csv_table.export import export_table
from csv_table.parser import parse


def _make_table() -> list[list[str]]:
    return [
        ["코드", "코드명", "note"],
        ["A005930", "삼성전자", "comma, inside"],
        ["A000660", "SK하이닉스", 'quote "inside"'],
    ]


class TestExportCSV:
    """Tests for CSV export."""

    def test_csv_round_trip(self, tmp_path):
        """Data survives a write-read round trip (CSV)."""
        path = export_table(_make_table(), tmp_path / "out.csv")
        assert path.exists()
        assert parse(path.read_bytes().decode("utf-8")) == _make_table()

    def test_csv_newlines_not_translated(self, tmp_path):
        """Records are separated by LF on every platform."""
        path = export_table([["a"], ["b"]], tmp_path / "out.csv")
        assert path.read_bytes() == b"a\nb\n"

    def test_csv_eof_option(self, tmp_path):
        """Serializer options are honored for CSV export."""
        path = export_table([["a"], ["b"]], tmp_path / "out.csv", options={"eof": False})
        assert path.read_bytes() == b"a\nb"

    def test_creates_parent_dirs(self, tmp_path):
        """Missing parent directories are created."""
        path = export_table([["a"]], tmp_path / "x" / "y" / "out.csv")
        assert path.exists()

    def test_invalid_field_leaves_no_file(self, tmp_path):
        """A bad value fails before anything is written."""
        target = tmp_path / "out.csv"
        with pytest.raises(InvalidFieldError):
            export_table([["a", None]], target)
        assert not target.exists()


class TestExportParquet:
    """Tests for Parquet export."""

    def test_parquet_round_trip(self, tmp_path):
        """Data survives a write-read round trip (Parquet)."""
        path = export_table(_make_table(), tmp_path / "out.parquet", output_format="parquet")
        loaded = pd.read_parquet(path)
        assert list(loaded.columns) == ["코드", "코드명", "note"]
        assert loaded["코드명"].tolist() == ["삼성전자", "SK하이닉스"]

    def test_parquet_without_header(self, tmp_path):
        """header=False writes every record as data."""
        path = export_table(
            [["a", "b"]], tmp_path / "out.parquet", output_format="parquet", header=False,
        )
        loaded = pd.read_parquet(path)
        assert list(loaded.columns) == ["column_1", "column_2"]
        assert len(loaded) == 1


class TestExportErrors:
    """Tests for error handling."""

    def test_unsupported_format(self, tmp_path):
        """Unknown formats raise ExportError."""
        with pytest.raises(ExportError, match="Unsupported output format"):
            export_table([["a"]], tmp_path / "out.xlsx", output_format="xlsx")

    def test_write_failure_wrapped(self, tmp_path):
        """OS errors while writing are wrapped in ExportError."""
        blocker = tmp_path / "file"
        blocker.write_text("x", encoding="utf-8")
        with pytest.raises(ExportError, match="Failed to write"):
            export_table([["a"]], blocker / "out.csv")

"""
Shared test fixtures for csv-table tests.

Sample documents are defined here as fixtures so every test module
works from the same inputs. Add new shared samples here.
"""

from __future__ import annotations

import pytest


# ---------------------------------------------------------------------------
# Sample documents
# ---------------------------------------------------------------------------

PEOPLE_CSV = (
    "name,age,city,note\n"
    "Ada,36,London,\"says \"\"hi\"\"\"\n"
    "Grace,45,\"New York, NY\",\"line one\nline two\"\n"
    "Linus,,Helsinki\n"
)


@pytest.fixture
def people_csv() -> str:
    """A small document with a header, escaped quotes, an embedded comma,
    an embedded newline and a short row."""
    return PEOPLE_CSV


@pytest.fixture
def people_file(tmp_path):
    """PEOPLE_CSV written to disk with its newlines untouched."""
    path = tmp_path / "people.csv"
    path.write_bytes(PEOPLE_CSV.encode("utf-8"))
    return path


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (exercises several modules end to end)",
    )

"""
Source loading for csv-table.

Supplies the raw text buffer the parser consumes, either from a local
file or from an http(s) URL. Retrieval failures are reported as
``FetchError`` before any parsing happens, so callers can tell a missing
or unreachable source apart from a malformed document.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import httpx

from csv_table.config import ParseOptions
from csv_table.exceptions import FetchError
from csv_table.parser import FieldTransform, Table, parse

logger = logging.getLogger(__name__)

_REMOTE_SCHEMES = {"http", "https"}


def is_remote(location: str) -> bool:
    """Return True when *location* is an http(s) URL."""
    return urlparse(location).scheme.lower() in _REMOTE_SCHEMES


def fetch_text(
    url: str,
    *,
    timeout: float = 30.0,
    client: httpx.Client | None = None,
) -> str:
    """Download *url* and return the decoded body.

    Only a ``200`` response is accepted.

    Args:
        url: The http(s) URL to fetch.
        timeout: Seconds allowed for connect / read / write / pool.
        client: Optional pre-configured ``httpx.Client`` (used as-is and
            left open).

    Raises:
        FetchError: On a non-200 status (``status_code`` set) or a
            transport error (``status_code`` is ``None``).
    """
    if client is not None:
        return _fetch_with_client(client, url)

    try:
        with httpx.Client(follow_redirects=True, timeout=httpx.Timeout(timeout)) as local_client:
            return _fetch_with_client(local_client, url)
    except FetchError:
        raise
    except httpx.HTTPError as exc:
        raise FetchError(None, str(exc) or type(exc).__name__) from exc


def _fetch_with_client(client: httpx.Client, url: str) -> str:
    try:
        response = client.get(url)
    except httpx.HTTPError as exc:
        raise FetchError(None, str(exc) or type(exc).__name__) from exc

    if response.status_code != 200:
        raise FetchError(response.status_code, response.reason_phrase)

    logger.info("Fetched %s (%d bytes)", url, len(response.content))
    return response.text


def read_text(path: str | Path, encoding: str = "utf-8") -> str:
    """Read a local file without translating its newlines.

    Raises:
        FileNotFoundError: If *path* does not exist.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Source file not found: {path}")
    with open(path, "r", encoding=encoding, newline="") as f:
        text = f.read()
    logger.info("Read %s (%d characters)", path, len(text))
    return text


def load_text(
    location: str | Path,
    *,
    timeout: float = 30.0,
    encoding: str = "utf-8",
    client: httpx.Client | None = None,
) -> str:
    """Return the text at *location*, a local path or an http(s) URL."""
    if isinstance(location, str) and is_remote(location):
        return fetch_text(location, timeout=timeout, client=client)
    return read_text(location, encoding=encoding)


def load_table(
    location: str | Path,
    options: ParseOptions | Mapping[str, Any] | None = None,
    field_transform: FieldTransform | None = None,
    *,
    timeout: float = 30.0,
    encoding: str = "utf-8",
    client: httpx.Client | None = None,
) -> Table:
    """Load the text at *location* and parse it.

    Raises:
        FetchError: If a remote source cannot be retrieved.
        FileNotFoundError: If a local source does not exist.
        IllegalStateError: If the text is malformed.
    """
    text = load_text(location, timeout=timeout, encoding=encoding, client=client)
    return parse(text, options, field_transform)

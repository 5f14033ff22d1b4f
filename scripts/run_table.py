"""
Demo script: load a comma-separated source and print its DataFrame projection.

Usage:
    uv run python scripts/run_table.py data/people.csv
    uv run python scripts/run_table.py https://example.com/people.csv --typed
    uv run python scripts/run_table.py people.yaml
    uv run python scripts/run_table.py data/raw.csv --no-header
"""

from __future__ import annotations

import logging
import sys

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("run_table")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> int:
    import csv_table

    args = [a for a in sys.argv[1:] if not a.startswith("--")]
    if len(args) != 1:
        print(__doc__)
        return 2

    location = args[0]
    typed = "--typed" in sys.argv
    header = "--no-header" not in sys.argv

    try:
        df = csv_table.open(location, typed=typed, header=header)
    except csv_table.FetchError as exc:
        log.error("Could not fetch %s: %s", location, exc)
        return 1
    except csv_table.ParsingError as exc:
        log.error("Malformed input in %s: %s", location, exc)
        return 1

    rows, cols = df.shape
    log.info("Table '%s': %s rows x %d cols", location, f"{rows:,}", cols)
    print(df.to_string(index=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())

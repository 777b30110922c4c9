"""Run a parser over a captured snapshot file.

Loads a JSON snapshot (camelCase as emitted by a browser capture script, or
snake_case), validates it into a TableSnapshot, and dispatches to one of the
three parsers.

Usage:
    python -m tablesnap.extraction.pipeline snapshot.json --mode work-allocation
"""

import argparse
import json
import logging
from pathlib import Path

from tablesnap.config import LOG_LEVEL
from tablesnap.extraction.parsers import parse_data_table, parse_key_value, parse_work_allocation
from tablesnap.extraction.schema import TableSnapshot

logger = logging.getLogger(__name__)

PARSERS = {
    "key-value": parse_key_value,
    "data": parse_data_table,
    "work-allocation": parse_work_allocation,
}


def load_snapshot(path: str | Path) -> TableSnapshot:
    """Read and validate a JSON snapshot file."""
    with open(path, "r", encoding="utf-8") as fopen:
        payload = json.load(fopen)
    snapshot = TableSnapshot.model_validate(payload)
    logger.info("Loaded snapshot with %d rows from %s", len(snapshot.rows), path)
    return snapshot


def run(snapshot: TableSnapshot, mode: str) -> dict[str, str] | list[dict[str, str]]:
    """Parse *snapshot* with the parser registered for *mode*."""
    if mode not in PARSERS:
        raise ValueError(f"Unknown mode {mode!r}; expected one of {sorted(PARSERS)}")
    result = PARSERS[mode](snapshot)
    logger.info("Parsed snapshot as %s: %d entries", mode, len(result))
    return result


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s - %(levelname)s - %(message)s")

    parser = argparse.ArgumentParser(description="Extract records from a captured table snapshot.")
    parser.add_argument("snapshot", type=Path, help="Path to a JSON table snapshot")
    parser.add_argument("--mode", choices=sorted(PARSERS), default="data", help="Which parser to run")
    args = parser.parse_args()

    records = run(load_snapshot(args.snapshot), args.mode)
    print(json.dumps(records, indent=2, ensure_ascii=False))

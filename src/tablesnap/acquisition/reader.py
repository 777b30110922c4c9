"""Capture a snapshot from a provider and hand it to a parser.

Providers are anything with a ``capture() -> TableSnapshot`` method: a
browser-side capture script, a static HTML document, a recorded JSON
fixture.  This module is the only place provider failures are caught; they
are re-raised as TableReadError with the table kind and, when the provider
lost its page mid-capture, navigation guidance.
"""

import logging
from collections.abc import Callable
from typing import Protocol, TypeVar

from tablesnap.config import NAVIGATION_ERROR_MARKERS
from tablesnap.extraction.parsers import parse_data_table, parse_key_value, parse_work_allocation
from tablesnap.extraction.schema import TableSnapshot

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TableReadError(RuntimeError):
    """Raised when a snapshot could not be captured from its provider."""


class SnapshotProvider(Protocol):
    """Anything that can capture a TableSnapshot."""

    def capture(self) -> TableSnapshot: ...


def _is_navigation_error(exc: Exception) -> bool:
    message = str(exc)
    return any(marker in message for marker in NAVIGATION_ERROR_MARKERS)


def _read(provider: SnapshotProvider | None, kind: str, parse: Callable[[TableSnapshot], T]) -> T:
    """Capture from *provider* and parse, wrapping capture failures in TableReadError."""
    if provider is None:
        raise TableReadError("Table provider is required")

    try:
        snapshot = provider.capture()
    except TableReadError:
        raise
    except Exception as exc:  # pylint: disable=broad-exception-caught
        logger.warning("Capturing %s failed: %s", kind, exc)
        if _is_navigation_error(exc):
            raise TableReadError(f"Failed to read {kind}: page may have crashed or navigated away ({exc})") from exc
        raise TableReadError(f"Failed to parse {kind}: {exc}") from exc

    return parse(snapshot)


def read_key_value_table(provider: SnapshotProvider | None) -> dict[str, str]:
    """Capture a label/value table and return its key/value dict."""
    return _read(provider, "key-value table", parse_key_value)


def read_data_table(provider: SnapshotProvider | None) -> list[dict[str, str]]:
    """Capture a read-only data table and return one dict per row."""
    return _read(provider, "data table", parse_data_table)


def read_work_allocation_table(provider: SnapshotProvider | None) -> list[dict[str, str]]:
    """Capture a work-allocation table and return one dict per task row."""
    return _read(provider, "work allocation table", parse_work_allocation)

"""Snapshot parsers: key/value panels, read-only data tables, and work-allocation queues.

The three parsers share the same building blocks and differ in policy, one
per table shape:

  parse_key_value       -- two-column label/value panels
  parse_data_table      -- static listings; raw cell text, no padding
  parse_work_allocation -- interactive sortable queues; link/button labels,
                           decorative-row filtering, selection-column
                           trimming and padding to the header width

All three are pure: they read the snapshot and return fresh dicts.
"""

import logging

from tablesnap.extraction.cells import align_cells, expand_cells
from tablesnap.extraction.classifiers import has_header_cells, is_non_data_row, visible_rows
from tablesnap.extraction.headers import build_header_keys
from tablesnap.extraction.patterns import FALLBACK_KEY_TEMPLATE
from tablesnap.extraction.schema import TableRowSnapshot, TableSnapshot
from tablesnap.extraction.text import clean_text, collapse_whitespace

logger = logging.getLogger(__name__)


def column_key(index: int, header: str | None) -> str:
    """Return the record key for the 0-based column *index*: the header, or column_N."""
    key = (header or "").strip()
    return key or FALLBACK_KEY_TEMPLATE.format(index + 1)


def _promote_first_row(rows: list[TableRowSnapshot]) -> tuple[list[TableRowSnapshot], list[TableRowSnapshot]]:
    """Split (header_rows, data_rows), promoting the first row only if it has <th> cells."""
    if rows and has_header_cells(rows[0]):
        return [rows[0]], rows[1:]
    return [], rows


# ─── Key / Value ─────────────────────────────────────────────────────────────


def parse_key_value(snapshot: TableSnapshot) -> dict[str, str]:
    """Parse a label/value table into a dict.

    The first cell of each visible row is the key; the remaining cells are
    joined with spaces to form the value.  Rows with fewer than two cells or
    an empty key are skipped.  A repeated key keeps the last row's value.
    """
    result: dict[str, str] = {}
    for row in visible_rows(snapshot.rows):
        if len(row.cells) < 2:
            continue

        key = clean_text(row.cells[0].raw_text)
        if not key:
            logger.debug("Skipping key/value row with an empty key cell")
            continue

        values = [clean_text(cell.raw_text) for cell in row.cells[1:]]
        result[key] = collapse_whitespace(" ".join(values))
    return result


# ─── Data Table ──────────────────────────────────────────────────────────────


def parse_data_table(snapshot: TableSnapshot) -> list[dict[str, str]]:
    """Parse a read-only data table into one dict per visible body row.

    Headers come from the <thead> rows when present, otherwise from a first
    row containing <th> cells; with neither, every row is data and keys fall
    back to column_N.  Short rows produce fewer keys (no padding); values
    beyond the header width get column_N keys.
    """
    if not snapshot.rows:
        return []

    thead_rows = [row for row in snapshot.rows if row.is_thead_row]
    body_rows = [row for row in snapshot.rows if not row.is_thead_row]
    if snapshot.has_thead or thead_rows:
        header_rows, data_rows = thead_rows, body_rows
    else:
        header_rows, data_rows = _promote_first_row(body_rows)

    headers = build_header_keys(header_rows)
    result: list[dict[str, str]] = []
    for row in visible_rows(data_rows):
        values = expand_cells(row)
        if not values:
            continue
        record: dict[str, str] = {}
        for i, value in enumerate(values):
            header = headers[i] if i < len(headers) else None
            record[column_key(i, header)] = value
        result.append(record)

    logger.debug("Parsed data table: %d headers, %d records", len(headers), len(result))
    return result


# ─── Work Allocation ─────────────────────────────────────────────────────────


def parse_work_allocation(snapshot: TableSnapshot) -> list[dict[str, str]]:
    """Parse an interactive, sortable work queue into one dict per task row.

    Differs from parse_data_table in four ways: link/button labels win over
    raw cell text; action bars, footers and full-width banner rows are
    dropped; a leading selection checkbox column is trimmed; and short rows
    are padded so every record has every header key.  A table with no header
    row at all gets column_1..column_N keys, N being the widest body row.
    """
    if not snapshot.rows:
        return []

    header_rows = [row for row in snapshot.rows if row.is_thead_row]
    data_rows = [row for row in snapshot.rows if not row.is_thead_row]
    if not header_rows:
        header_rows, data_rows = _promote_first_row(data_rows)

    headers = build_header_keys(header_rows)
    if not headers:
        widest = max((row.total_col_span for row in data_rows), default=0)
        headers = [FALLBACK_KEY_TEMPLATE.format(i + 1) for i in range(widest)]
        logger.debug("No header rows found; synthesized %d column keys", widest)

    header_count = len(headers)
    if header_count == 0:
        return []

    candidate_rows = [row for row in data_rows if not is_non_data_row(row, header_count)]
    skipped = len(data_rows) - len(candidate_rows)
    if skipped:
        logger.debug("Dropped %d action/footer/banner rows", skipped)

    result: list[dict[str, str]] = []
    for row in visible_rows(candidate_rows):
        values = expand_cells(row, prefer_link_button=True)
        if not values:
            continue
        aligned = align_cells(values, header_count, pad=True)
        result.append({column_key(j, headers[j]): aligned[j] for j in range(header_count)})

    logger.debug("Parsed work allocation table: %d headers, %d records", header_count, len(result))
    return result

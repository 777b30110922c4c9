"""Row and cell classification helpers for snapshot extraction.

Each function takes a row snapshot (or a cell's text) and returns True/False
to classify it as visible, header-bearing, decorative (action bar, footer,
full-width banner), or a leading selection checkbox.
"""

from collections.abc import Iterable

from tablesnap.extraction.patterns import SELECTION_CELL_MARKERS
from tablesnap.extraction.schema import TableRowSnapshot


def is_visible_row(row: TableRowSnapshot) -> bool:
    """Return True if no visibility signal hides the row."""
    return row.is_visible and not row.is_aria_hidden and not row.is_hidden_attr


def visible_rows(rows: Iterable[TableRowSnapshot]) -> list[TableRowSnapshot]:
    """Keep only visible rows, preserving order."""
    return [row for row in rows if is_visible_row(row)]


def has_header_cells(row: TableRowSnapshot) -> bool:
    """Return True if any cell in the row is a header (<th>) cell."""
    return any(cell.is_header for cell in row.cells)


def looks_like_selection_cell(text: str) -> bool:
    """Return True for an empty or checkbox-glyph cell ("☐" / "☑" only)."""
    return text.strip() in SELECTION_CELL_MARKERS


def is_non_data_row(row: TableRowSnapshot, header_count: int) -> bool:
    """Return True if the row is an action bar, footer, or full-width banner."""
    # Class hints on the row itself
    if row.has_actions_row_class or row.has_footer_row_class:
        return True
    # Action / footer cells anywhere in the row
    if row.has_actions_cell or row.has_footer_cell:
        return True
    # A single cell spanning every column is a banner, not a record
    if header_count > 1 and len(row.cells) == 1:
        return row.total_col_span >= header_count
    return False

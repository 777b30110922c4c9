"""Header grid reconstruction for multi-row, spanned table headers.

Header rows are laid out on a sparse (row, col) grid the way a browser lays
out a table: each cell starts at the first column not already claimed by a
rowspan from an earlier row, then claims its full rowspan x colspan
footprint.  Each logical column's key is the distinct non-empty fragments
found down that column, joined with a space.  For example:

    | Hearing (colspan 2)  | Judge (rowspan 2) |
    | Date     | Time      |                   |

yields ["Hearing Date", "Hearing Time", "Judge"].
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from tablesnap.extraction.schema import TableCellSnapshot, TableRowSnapshot
from tablesnap.extraction.text import clean_text

logger = logging.getLogger(__name__)


@dataclass
class HeaderGrid:
    """Sparse header layout: cleaned text and occupancy keyed by (row, col)."""

    cells: dict[tuple[int, int], str] = field(default_factory=dict)
    occupied: set[tuple[int, int]] = field(default_factory=set)
    max_columns: int = 0
    row_count: int = 0

    def column_fragments(self, col: int) -> list[str]:
        """Return the distinct non-empty fragments in *col*, top to bottom."""
        parts: list[str] = []
        for row in range(self.row_count):
            part = self.cells.get((row, col), "")
            if part and part not in parts:
                parts.append(part)
        return parts


def _place_cell(grid: HeaderGrid, row_idx: int, col_idx: int, cell: TableCellSnapshot) -> int:
    """Write *cell* into the grid starting at the first free column; return the next cursor."""
    # Skip columns already claimed by a rowspan from an earlier row
    while (row_idx, col_idx) in grid.occupied:
        col_idx += 1

    text = clean_text(cell.raw_text)
    for r in range(row_idx, row_idx + cell.row_span):
        for c in range(col_idx, col_idx + cell.col_span):
            # First non-empty writer wins
            if not grid.cells.get((r, c)):
                grid.cells[(r, c)] = text
            grid.occupied.add((r, c))
        grid.row_count = max(grid.row_count, r + 1)

    return col_idx + cell.col_span


def build_header_grid(header_rows: Sequence[TableRowSnapshot]) -> HeaderGrid:
    """Lay every header row out on a sparse grid, expanding row and column spans."""
    grid = HeaderGrid(row_count=len(header_rows))
    for row_idx, row in enumerate(header_rows):
        col_idx = 0
        for cell in row.cells:
            col_idx = _place_cell(grid, row_idx, col_idx, cell)
            grid.max_columns = max(grid.max_columns, col_idx)
    return grid


def build_header_keys(header_rows: Sequence[TableRowSnapshot]) -> list[str]:
    """Return one header key per logical column, merging stacked header rows.

    A column covered by several header rows gets the distinct fragments from
    each row joined with a space ("Hearing Date").  Columns with no text at
    any level get an empty key; callers substitute a column_N fallback.
    Returns [] when there are no header rows.
    """
    if not header_rows:
        return []

    grid = build_header_grid(header_rows)
    headers = [" ".join(grid.column_fragments(col)).strip() for col in range(grid.max_columns)]
    logger.debug("Built %d header keys from %d header rows: %s", len(headers), len(header_rows), headers)
    return headers

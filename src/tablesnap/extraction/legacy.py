"""Header-to-cell mapping used before the snapshot parsers existed.

Kept for callers whose assertions were written against its output: header
text is only stripped (optionally after a transform), body cell text is only
stripped, hidden rows are not filtered, and blank headers drop their column
instead of falling back to column_N.
"""

from collections.abc import Callable

from tablesnap.extraction.cells import align_cells
from tablesnap.extraction.patterns import LEGACY_SORT_SUFFIX
from tablesnap.extraction.schema import TableSnapshot


def map_table(snapshot: TableSnapshot, header_transform: Callable[[str], str] | None = None) -> list[dict[str, str]]:
    """Map every body row to a dict keyed by the <thead> <th> texts."""
    headers: list[str] = []
    for row in snapshot.rows:
        if not row.is_thead_row:
            continue
        for cell in row.cells:
            if cell.is_header:
                text = header_transform(cell.raw_text) if header_transform else cell.raw_text
                headers.append(text.strip())

    out: list[dict[str, str]] = []
    for row in snapshot.rows:
        if row.is_thead_row:
            continue
        cell_texts = [cell.raw_text.strip() for cell in row.cells]
        aligned = align_cells(cell_texts, len(headers))

        row_data: dict[str, str] = {}
        for header, value in zip(headers, aligned):
            if not header:
                continue
            row_data[header] = value
        out.append(row_data)
    return out


def _strip_sort_suffix(header: str) -> str:
    return header.replace(LEGACY_SORT_SUFFIX, "")


def map_sortable_table(snapshot: TableSnapshot) -> list[dict[str, str]]:
    """Map a sortable table whose header texts end in a tab + "▼" sort marker."""
    return map_table(snapshot, _strip_sort_suffix)


def map_plain_table(snapshot: TableSnapshot) -> list[dict[str, str]]:
    """Map a table whose header texts need no transform."""
    return map_table(snapshot)

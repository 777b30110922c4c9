"""Cell text resolution, colspan expansion, and header alignment."""

from tablesnap.extraction.classifiers import looks_like_selection_cell
from tablesnap.extraction.schema import TableCellSnapshot, TableRowSnapshot
from tablesnap.extraction.text import clean_text


def resolve_cell_text(cell: TableCellSnapshot, prefer_link_button: bool = False) -> str:
    """Return the cell's display text, optionally preferring an embedded link or button label.

    Interactive tables wrap the meaningful label in an <a> or <button>; the raw
    cell text may carry extra markup noise around it.
    """
    if prefer_link_button:
        if cell.link_text is not None:
            return clean_text(cell.link_text)
        if cell.button_text is not None:
            return clean_text(cell.button_text)
    return clean_text(cell.raw_text)


def expand_cells(row: TableRowSnapshot, prefer_link_button: bool = False) -> list[str]:
    """Flatten a row into one value per grid column, repeating spanned cells."""
    values: list[str] = []
    for cell in row.cells:
        text = resolve_cell_text(cell, prefer_link_button=prefer_link_button)
        values.extend([text] * cell.col_span)
    return values


def align_cells(values: list[str], header_count: int, pad: bool = False) -> list[str]:
    """Reconcile a row's values with the header count.

    Handles the two common mismatches: a leading selection checkbox column
    with no header (dropped), and trailing action columns with no header
    (truncated).  Short rows are right-padded with "" only when *pad* is set.
    """
    if len(values) == header_count:
        return list(values)

    aligned = list(values)
    if len(aligned) > header_count and looks_like_selection_cell(aligned[0]):
        aligned = aligned[1:]

    if len(aligned) > header_count:
        return aligned[:header_count]
    if len(aligned) < header_count and pad:
        return aligned + [""] * (header_count - len(aligned))
    return aligned

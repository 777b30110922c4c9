"""Build table snapshots from static HTML with BeautifulSoup.

Only markup-level visibility is available without a renderer: the ``hidden``
attribute, ``aria-hidden="true"``, and inline ``display:none`` /
``visibility:hidden`` on the row or its section.  Rows are read from the
table's own <thead>, <tbody> and <tfoot> sections (and bare <tr> children);
rows of nested tables are never picked up.  <tfoot> rows are flagged as
footer rows.
"""

import logging
import re

from bs4 import BeautifulSoup, Tag

from tablesnap.acquisition.reader import TableReadError
from tablesnap.config import HTML_PARSER
from tablesnap.extraction.schema import TableCellSnapshot, TableRowSnapshot, TableSnapshot

logger = logging.getLogger(__name__)

# Inline styles that hide an element
HIDDEN_STYLE_RE = re.compile(r"display\s*:\s*none|visibility\s*:\s*hidden", re.IGNORECASE)

# Class names marking action bars and footers: the hint word as the first or
# last "-" / "_" separated part, e.g. "actions-row", "govuk-table__footer"
ACTIONS_CLASS_RE = re.compile(r"^actions(?:[-_]|$)|[-_]actions$")
FOOTER_CLASS_RE = re.compile(r"^footer(?:[-_]|$)|[-_]footer$")


def _span(value) -> int:
    """Parse a colspan/rowspan attribute; anything unusable is 1."""
    try:
        return max(int(value), 1)
    except (TypeError, ValueError):
        return 1


def _classes(tag: Tag) -> list[str]:
    return list(tag.get("class") or [])


def _is_style_hidden(tag: Tag) -> bool:
    return bool(HIDDEN_STYLE_RE.search(tag.get("style") or ""))


def _cell_snapshot(cell: Tag) -> TableCellSnapshot:
    link = cell.find("a")
    button = cell.find("button")
    return TableCellSnapshot(
        raw_text=cell.get_text(" "),
        col_span=_span(cell.get("colspan")),
        row_span=_span(cell.get("rowspan")),
        is_header=cell.name == "th",
        link_text=link.get_text(" ") if link is not None else None,
        button_text=button.get_text(" ") if button is not None else None,
    )


def _has_class_hint(classes: list[str], pattern: re.Pattern) -> bool:
    return any(pattern.search(cls) for cls in classes)


def _is_aria_hidden(tag: Tag | None) -> bool:
    return tag is not None and tag.get("aria-hidden") == "true"


def _row_snapshot(row: Tag, section: Tag | None) -> TableRowSnapshot:
    cells = row.find_all(["th", "td"], recursive=False)
    row_classes = _classes(row)
    cell_classes = [cls for cell in cells for cls in _classes(cell)]
    section_hidden = section is not None and (section.has_attr("hidden") or _is_style_hidden(section))
    in_tfoot = section is not None and section.name == "tfoot"

    return TableRowSnapshot(
        cells=tuple(_cell_snapshot(cell) for cell in cells),
        is_thead_row=section is not None and section.name == "thead",
        is_aria_hidden=_is_aria_hidden(row) or _is_aria_hidden(section),
        is_hidden_attr=row.has_attr("hidden"),
        is_visible=not (_is_style_hidden(row) or section_hidden),
        class_name=" ".join(row_classes) or None,
        has_actions_cell=_has_class_hint(cell_classes, ACTIONS_CLASS_RE),
        has_footer_cell=_has_class_hint(cell_classes, FOOTER_CLASS_RE),
        has_actions_row_class=_has_class_hint(row_classes, ACTIONS_CLASS_RE),
        has_footer_row_class=in_tfoot or _has_class_hint(row_classes, FOOTER_CLASS_RE),
    )


def snapshot_from_table(table: Tag) -> TableSnapshot:
    """Snapshot a parsed <table> element."""
    rows: list[TableRowSnapshot] = []
    for child in table.find_all(["thead", "tbody", "tfoot", "tr"], recursive=False):
        if child.name == "tr":
            rows.append(_row_snapshot(child, None))
            continue
        for row in child.find_all("tr", recursive=False):
            rows.append(_row_snapshot(row, child))

    has_thead = table.find("thead", recursive=False) is not None
    logger.debug("Captured %d rows from static table (thead=%s)", len(rows), has_thead)
    return TableSnapshot(rows=tuple(rows), has_thead=has_thead)


def snapshot_from_html(html: str, selector: str | None = None) -> TableSnapshot:
    """Parse *html* and snapshot the first <table>, or the first match of *selector*."""
    soup = BeautifulSoup(html, HTML_PARSER)
    table = soup.select_one(selector) if selector else soup.find("table")
    if table is None:
        raise TableReadError(f"No table found for selector {selector or 'table'!r}")
    return snapshot_from_table(table)


class HtmlSnapshotProvider:
    """SnapshotProvider over a static HTML document."""

    def __init__(self, html: str, selector: str | None = None):
        self.html = html
        self.selector = selector

    def capture(self) -> TableSnapshot:
        return snapshot_from_html(self.html, self.selector)

"""Unit tests for the older header-to-cell table mapping."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from tablesnap.extraction.legacy import map_plain_table, map_sortable_table, map_table
from tablesnap.extraction.schema import TableCellSnapshot, TableRowSnapshot, TableSnapshot


def make_snapshot(headers: list[str], rows: list[list[str]], **row_flags) -> TableSnapshot:
    head = TableRowSnapshot(
        cells=tuple(TableCellSnapshot(raw_text=h, is_header=True) for h in headers),
        is_thead_row=True,
    )
    body = [TableRowSnapshot(cells=tuple(TableCellSnapshot(raw_text=t) for t in r), **row_flags) for r in rows]
    return TableSnapshot(rows=(head, *body), has_thead=True)


class TestMapTable:

    def test_basic_mapping(self):
        snapshot = make_snapshot(["Name", "Role"], [["Alice", "Judge"], ["Bob", "Clerk"]])
        assert map_plain_table(snapshot) == [{"Name": "Alice", "Role": "Judge"}, {"Name": "Bob", "Role": "Clerk"}]

    def test_blank_header_column_dropped(self):
        snapshot = make_snapshot(["Name", " "], [["Alice", "Edit"]])
        assert map_plain_table(snapshot) == [{"Name": "Alice"}]

    def test_short_row_not_padded(self):
        snapshot = make_snapshot(["Name", "Role"], [["Alice"]])
        assert map_plain_table(snapshot) == [{"Name": "Alice"}]

    def test_selection_column_trimmed(self):
        snapshot = make_snapshot(["Name", "Role"], [["☐", "Alice", "Judge"]])
        assert map_plain_table(snapshot) == [{"Name": "Alice", "Role": "Judge"}]

    def test_cell_text_only_stripped(self):
        """Internal whitespace and glyphs survive; only the ends are trimmed."""
        snapshot = make_snapshot(["Name"], [["  Alice  Smith ▲ "]])
        assert map_plain_table(snapshot) == [{"Name": "Alice  Smith ▲"}]

    def test_hidden_rows_still_mapped(self):
        snapshot = make_snapshot(["Name"], [["Alice"]], is_visible=False)
        assert map_plain_table(snapshot) == [{"Name": "Alice"}]

    def test_td_cells_in_thead_ignored(self):
        head = TableRowSnapshot(
            cells=(TableCellSnapshot(raw_text="Name", is_header=True), TableCellSnapshot(raw_text="filler")),
            is_thead_row=True,
        )
        body = TableRowSnapshot(cells=(TableCellSnapshot(raw_text="Alice"),))
        assert map_plain_table(TableSnapshot(rows=(head, body), has_thead=True)) == [{"Name": "Alice"}]

    def test_no_headers_yields_empty_dicts(self):
        snapshot = TableSnapshot(rows=(TableRowSnapshot(cells=(TableCellSnapshot(raw_text="x"),)),))
        assert map_plain_table(snapshot) == [{}]

    def test_custom_transform(self):
        snapshot = make_snapshot(["name"], [["Alice"]])
        assert map_table(snapshot, str.upper) == [{"NAME": "Alice"}]


class TestMapSortableTable:

    def test_strips_tab_sort_suffix(self):
        snapshot = make_snapshot(["Case name\t▼", "Status"], [["Smith v Jones", "Open"]])
        assert map_sortable_table(snapshot) == [{"Case name": "Smith v Jones", "Status": "Open"}]

    def test_plain_mapping_keeps_suffix(self):
        snapshot = make_snapshot(["Case name\t▼"], [["Smith v Jones"]])
        assert map_plain_table(snapshot) == [{"Case name\t▼": "Smith v Jones"}]

"""Pydantic models for captured table snapshots.

A snapshot is an immutable, point-in-time capture of a table's row/cell
structure.  Providers (see tablesnap.acquisition) build these models; the
parsers only read them.  Field aliases match the camelCase JSON emitted by
browser-side capture scripts, so a captured payload validates as-is.
"""

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic.alias_generators import to_camel

_SNAPSHOT_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class TableCellSnapshot(BaseModel):
    """One table cell as observed at capture time."""

    model_config = _SNAPSHOT_CONFIG

    raw_text: str = ""
    col_span: int = 1
    row_span: int = 1
    is_header: bool = False
    link_text: str | None = None
    button_text: str | None = None

    @field_validator("col_span", "row_span", mode="before")
    @classmethod
    def default_span(cls, value):
        """A missing span is 1."""
        return 1 if value is None else value

    @field_validator("col_span", "row_span")
    @classmethod
    def clamp_span(cls, value: int) -> int:
        """Zero and negative spans, numeric or string, become 1."""
        return max(value, 1)


class TableRowSnapshot(BaseModel):
    """One table row with its visibility signals and structural hints.

    ``is_visible``, ``is_aria_hidden`` and ``is_hidden_attr`` are independent:
    a row can be invisible without being aria-hidden.
    """

    model_config = _SNAPSHOT_CONFIG

    cells: tuple[TableCellSnapshot, ...] = ()
    is_thead_row: bool = False
    is_aria_hidden: bool = False
    is_hidden_attr: bool = False
    is_visible: bool = True
    class_name: str | None = None
    has_actions_cell: bool = False
    has_footer_cell: bool = False
    has_actions_row_class: bool = False
    has_footer_row_class: bool = False
    total_col_span: int | None = None

    @model_validator(mode="after")
    def fill_total_col_span(self) -> "TableRowSnapshot":
        """Derive total_col_span from the cells when the capture omitted it."""
        if self.total_col_span is None:
            # frozen model: bypass __setattr__ once, during construction
            object.__setattr__(self, "total_col_span", sum(cell.col_span for cell in self.cells))
        return self


class TableSnapshot(BaseModel):
    """A whole table: rows in document order plus whether a <thead> exists."""

    model_config = _SNAPSHOT_CONFIG

    rows: tuple[TableRowSnapshot, ...] = ()
    has_thead: bool = False

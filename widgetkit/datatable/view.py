"""datatable.view

Framework-agnostic view model for the data table.

`build_view` turns rows, columns, the caller's sort state and the expansion
registry into descriptors a rendering layer can paint. It never sorts and
never mutates the rows it is given.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Sequence, Union

import pandas as pd
from pydantic import BaseModel, ConfigDict, field_validator

from ..config import DEFAULT_ARIA_LABEL, DEFAULT_EMPTY_MESSAGE, DEFAULT_LOADING_MESSAGE
from .columns import Align, Column
from .expansion import ExpansionRegistry
from .resolve import cell_content, resolve_value
from .sort import AriaSort, SortState, aria_sort, sort_glyph

EXPAND_COLUMN_KEY = "__expand__"
EXPAND_COLUMN_LABEL = "Expand row"
EXPANDED_GLYPH = "▼"
COLLAPSED_GLYPH = "▶"

# row -> anything FastHTML can render
DetailRenderer = Callable[[Any], Any]


class TableConfig(BaseModel):
    """Static table configuration.

    Attributes:
        key_field: Field (or dot path) whose value uniquely identifies a row
        expandable: Rows toggle a detail line on activation
        empty_message: Shown instead of the table when there are no rows
        loading_message: Shown while the caller reports a pending load
        aria_label: Accessible label for the <table>
    """

    model_config = ConfigDict(frozen=True)

    key_field: str
    expandable: bool = False
    empty_message: str = DEFAULT_EMPTY_MESSAGE
    loading_message: str = DEFAULT_LOADING_MESSAGE
    aria_label: str = DEFAULT_ARIA_LABEL

    @field_validator("key_field")
    @classmethod
    def _key_field_required(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("key_field is required")
        return value


# -----------------------------------------------------------------------------
# Descriptors
# -----------------------------------------------------------------------------


@dataclass
class HeaderCell:
    key: str
    header: str
    sortable: bool = False
    align: Optional[Align] = None
    width: Optional[str] = None
    aria_sort: Optional[AriaSort] = None
    sort_glyph: Optional[str] = None
    is_expand: bool = False


@dataclass
class HeaderRow:
    cells: list[HeaderCell]


@dataclass
class BodyCell:
    key: str
    content: Any
    align: Optional[Align] = None


@dataclass
class BodyRow:
    key: Any
    cells: list[BodyCell]
    expandable: bool = False
    expanded: bool = False
    expand_glyph: Optional[str] = None


@dataclass
class ExpandedRow:
    key: Any
    content: Any
    colspan: int


@dataclass
class LoadingView:
    message: str


@dataclass
class EmptyView:
    message: str


@dataclass
class TableView:
    aria_label: str
    header: HeaderRow
    body: list[Union[BodyRow, ExpandedRow]] = field(default_factory=list)

    @property
    def rows(self) -> list[BodyRow]:
        return [r for r in self.body if isinstance(r, BodyRow)]

    @property
    def expanded_rows(self) -> list[ExpandedRow]:
        return [r for r in self.body if isinstance(r, ExpandedRow)]


View = Union[LoadingView, EmptyView, TableView]


# -----------------------------------------------------------------------------
# Builder
# -----------------------------------------------------------------------------


def as_records(rows: Any) -> Sequence[Any]:
    """Accept a pandas DataFrame or any sequence of records."""
    if isinstance(rows, pd.DataFrame):
        # NaN/NaT gaps become None so they format as blank cells
        return rows.astype(object).where(rows.notna(), None).to_dict(orient="records")
    return rows


def build_header(columns: Sequence[Column], sort: SortState, expandable: bool) -> HeaderRow:
    cells: list[HeaderCell] = []
    if expandable:
        cells.append(HeaderCell(key=EXPAND_COLUMN_KEY, header="", is_expand=True))
    for col in columns:
        cells.append(
            HeaderCell(
                key=col.key,
                header=col.header,
                sortable=col.sortable,
                align=col.align,
                width=col.width,
                aria_sort=aria_sort(sort, col),
                sort_glyph=sort_glyph(sort, col),
            )
        )
    return HeaderRow(cells=cells)


def build_row(
    row: Any,
    columns: Sequence[Column],
    registry: ExpansionRegistry,
    config: TableConfig,
) -> BodyRow:
    key = resolve_value(row, config.key_field)
    cells = [BodyCell(key=col.key, content=cell_content(row, col), align=col.align) for col in columns]
    if not config.expandable:
        return BodyRow(key=key, cells=cells)
    expanded = registry.is_expanded(key)
    return BodyRow(
        key=key,
        cells=cells,
        expandable=True,
        expanded=expanded,
        expand_glyph=EXPANDED_GLYPH if expanded else COLLAPSED_GLYPH,
    )


def build_view(
    rows: Any,
    columns: Sequence[Column],
    sort: SortState | None,
    registry: ExpansionRegistry,
    config: TableConfig,
    *,
    render_expanded: DetailRenderer | None = None,
    is_loading: bool = False,
) -> View:
    """Build the view model for one render.

    Presentation states are exclusive: loading wins over empty, empty wins
    over the table itself.
    """
    if is_loading:
        return LoadingView(message=config.loading_message)

    records = as_records(rows)
    if len(records) == 0:
        return EmptyView(message=config.empty_message)

    sort = sort or SortState()
    body: list[Union[BodyRow, ExpandedRow]] = []
    for row in records:
        body_row = build_row(row, columns, registry, config)
        body.append(body_row)
        if body_row.expanded and render_expanded is not None:
            body.append(
                ExpandedRow(
                    key=body_row.key,
                    content=render_expanded(row),
                    colspan=len(columns) + 1,
                )
            )

    return TableView(
        aria_label=config.aria_label,
        header=build_header(columns, sort, config.expandable),
        body=body,
    )


__all__ = [
    "TableConfig",
    "DetailRenderer",
    "HeaderCell",
    "HeaderRow",
    "BodyCell",
    "BodyRow",
    "ExpandedRow",
    "LoadingView",
    "EmptyView",
    "TableView",
    "View",
    "as_records",
    "build_header",
    "build_row",
    "build_view",
    "EXPAND_COLUMN_KEY",
    "EXPAND_COLUMN_LABEL",
    "EXPANDED_GLYPH",
    "COLLAPSED_GLYPH",
]

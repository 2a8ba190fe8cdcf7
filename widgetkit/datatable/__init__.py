"""datatable

Generic tabular view engine for FastHTML.

Usage:
    from widgetkit.datatable import Column, DataTableEngine, TableConfig, render_view

    engine = DataTableEngine(TableConfig(key_field="id", expandable=True),
                             render_expanded=lambda row: row["email"])
    columns = [Column(key="name", header="Name", sortable=True),
               Column(key="details.ip", header="IP")]
    view = engine.build(rows, columns, SortState(column="name"))
    html = render_view(view)

The engine does not sort rows; it reports requested sort changes through
`on_sort` and expects the caller to pass the resulting `SortState` back in.
"""

from .columns import Align, Column, find_column
from .resolve import MISSING, cell_content, format_value, resolve_value
from .sort import SortState, aria_sort, next_sort, sort_glyph
from .expansion import ExpansionRegistry
from .view import (
    BodyCell,
    BodyRow,
    EmptyView,
    ExpandedRow,
    HeaderCell,
    HeaderRow,
    LoadingView,
    TableConfig,
    TableView,
    View,
    build_view,
)
from .engine import ACTIVATION_KEYS, DataTableEngine
from .render import TableSize, TableVariant, render_view

__all__ = [
    # Columns
    "Align",
    "Column",
    "find_column",
    # Values
    "MISSING",
    "resolve_value",
    "format_value",
    "cell_content",
    # Sort
    "SortState",
    "next_sort",
    "aria_sort",
    "sort_glyph",
    # Expansion
    "ExpansionRegistry",
    # View model
    "TableConfig",
    "HeaderCell",
    "HeaderRow",
    "BodyCell",
    "BodyRow",
    "ExpandedRow",
    "LoadingView",
    "EmptyView",
    "TableView",
    "View",
    "build_view",
    # Engine
    "DataTableEngine",
    "ACTIVATION_KEYS",
    # Rendering
    "render_view",
    "TableVariant",
    "TableSize",
]

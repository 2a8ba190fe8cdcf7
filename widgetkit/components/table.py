"""widgetkit.components.table

Data table component: build and render in one call.

For tables whose rows expand across requests, keep a `DataTableEngine` per
table instance and pass it as `engine`; otherwise a fresh engine (with no
expanded rows) is used for this render only.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from fasthtml.common import FT

from ..config import DEFAULT_ARIA_LABEL, DEFAULT_EMPTY_MESSAGE
from ..datatable import Column, DataTableEngine, SortState, TableConfig, render_view
from ..datatable.engine import SortCallback
from ..datatable.render import SortUrl, TableSize, TableVariant, ToggleUrl
from ..datatable.sort import SortOrder
from ..datatable.view import DetailRenderer


def DataTable(
    rows: Any,
    columns: Sequence[Column],
    *,
    key_field: str,
    sort_by: Optional[str] = None,
    sort_order: SortOrder = "asc",
    on_sort: SortCallback | None = None,
    expandable: bool = False,
    render_expanded: DetailRenderer | None = None,
    empty_message: str = DEFAULT_EMPTY_MESSAGE,
    is_loading: bool = False,
    aria_label: str = DEFAULT_ARIA_LABEL,
    engine: DataTableEngine | None = None,
    sort_url: SortUrl | None = None,
    toggle_url: ToggleUrl | None = None,
    variant: TableVariant = "default",
    size: TableSize = "default",
    cls: str = "",
    **kw,
) -> FT:
    """
    Render rows (a list of records or a pandas DataFrame) as a DaisyUI table.

    Args:
        rows: Records in display order; the table never sorts them
        columns: Column descriptors, in display order
        key_field: Field whose value uniquely identifies each row
        sort_by / sort_order: The caller's current sort state
        expandable: Rows toggle a detail line rendered by `render_expanded`
        is_loading: Show the loading state instead of any data
        engine: Existing engine (its config and expanded rows win over the
            table options above)
        sort_url / toggle_url: htmx endpoints for header and row activation
        variant: Table style - "default", "zebra", "pin-rows", "pin-cols"
        size: Table size - "default" (sm), "xs", "sm", "lg"
        cls: Additional CSS classes
        **kw: Passed to underlying Div wrapper
    """
    if engine is None:
        config = TableConfig(
            key_field=key_field,
            expandable=expandable,
            empty_message=empty_message,
            aria_label=aria_label,
        )
        engine = DataTableEngine(config, on_sort=on_sort, render_expanded=render_expanded)

    view = engine.build(
        rows,
        columns,
        SortState(column=sort_by, order=sort_order),
        is_loading=is_loading,
    )
    return render_view(
        view,
        sort_url=sort_url,
        toggle_url=toggle_url,
        variant=variant,
        size=size,
        cls=cls,
        **kw,
    )


__all__ = ["DataTable", "TableVariant", "TableSize"]

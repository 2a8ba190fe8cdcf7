"""datatable.render

Paint data table view models as DaisyUI markup.

Interaction is optional. When `sort_url` / `toggle_url` are given, sortable
headers and expandable rows carry htmx attributes that call back into the
server on click, Enter or Space; the response replaces the whole table.
"""

from __future__ import annotations

from typing import Callable, Literal, Optional

from fasthtml.common import FT, Div, Span, Tbody, Td, Th, Thead, Tr

from ..core import cn, style_join
from ..daisy import Loading, TableRoot
from .view import (
    EXPAND_COLUMN_LABEL,
    BodyRow,
    EmptyView,
    ExpandedRow,
    HeaderCell,
    LoadingView,
    TableView,
    View,
)

TableVariant = Literal["default", "zebra", "pin-rows", "pin-cols"]
TableSize = Literal["default", "xs", "sm", "lg"]

SortUrl = Callable[[HeaderCell], str]
ToggleUrl = Callable[[BodyRow], str]

DEFAULT_TARGET = "closest [data-slot='data-table']"

# htmx trigger and inline guard shared by headers and rows. The guard stops
# Space from scrolling the page; htmx does not cancel keydown defaults.
ACTIVATE_TRIGGER = "click, keydown[key=='Enter'||key==' ']"
KEY_GUARD = "if(event.key==='Enter'||event.key===' '){event.preventDefault()}"

_ALIGN_CLS = {"left": "text-left", "center": "text-center", "right": "text-right"}


def _align_cls(align: Optional[str]) -> str:
    return _ALIGN_CLS.get(align or "", "")


def _table_mods(variant: TableVariant, size: TableSize) -> list[str]:
    mods: list[str] = []

    if size in ("default", "sm"):
        mods.append("-sm")
    elif size == "xs":
        mods.append("-xs")
    elif size == "lg":
        mods.append("-lg")

    if variant == "zebra":
        mods.append("-zebra")
    elif variant == "pin-rows":
        mods.append("-pin-rows")
    elif variant == "pin-cols":
        mods.append("-pin-cols")

    return mods


def _activation_attrs(url: str, method: str, target: str) -> dict:
    return {
        f"hx_{method}": url,
        "hx_trigger": ACTIVATE_TRIGGER,
        "hx_target": target,
        "hx_swap": "outerHTML",
        "onkeydown": KEY_GUARD,
    }


def render_header_cell(
    cell: HeaderCell,
    *,
    sort_url: SortUrl | None = None,
    target: str = DEFAULT_TARGET,
) -> FT:
    if cell.is_expand:
        return Th(cls="w-8", aria_label=EXPAND_COLUMN_LABEL, data_slot="data-table-expand-header")

    attrs: dict = {}
    if cell.sortable:
        attrs["tabindex"] = "0"
        if sort_url is not None:
            attrs.update(_activation_attrs(sort_url(cell), "get", target))

    icon = None
    if cell.sort_glyph is not None:
        icon = Span(cell.sort_glyph, cls="sort-icon text-xs opacity-60", aria_hidden="true")

    return Th(
        Span(cell.header, icon, cls="inline-flex items-center gap-1"),
        cls=cn(_align_cls(cell.align), "cursor-pointer select-none" if cell.sortable else ""),
        style=style_join(width=cell.width),
        role="columnheader button" if cell.sortable else "columnheader",
        aria_sort=cell.aria_sort,
        data_key=cell.key,
        **attrs,
    )


def render_body_row(
    row: BodyRow,
    *,
    toggle_url: ToggleUrl | None = None,
    target: str = DEFAULT_TARGET,
) -> FT:
    cells = [Td(c.content, cls=_align_cls(c.align) or None) for c in row.cells]

    if not row.expandable:
        return Tr(*cells, role="row", data_key=str(row.key))

    attrs: dict = {}
    if toggle_url is not None:
        attrs.update(_activation_attrs(toggle_url(row), "post", target))

    return Tr(
        Td(Span(row.expand_glyph, cls="expand-icon"), cls="w-8", aria_hidden="true"),
        *cells,
        cls=cn("expandable-row cursor-pointer hover", "expanded" if row.expanded else ""),
        tabindex="0",
        role="row button",
        aria_expanded="true" if row.expanded else "false",
        data_key=str(row.key),
        **attrs,
    )


def render_expanded_row(row: ExpandedRow) -> FT:
    return Tr(
        Td(row.content, colspan=str(row.colspan), cls="expanded-content bg-base-200/50"),
        cls="expanded-row",
        data_slot="data-table-expanded",
        data_key=str(row.key),
    )


def render_status(view: LoadingView | EmptyView) -> FT:
    if isinstance(view, LoadingView):
        return Div(
            Loading(cls="-spinner -sm", aria_hidden="true"),
            Span(view.message),
            role="status",
            aria_live="polite",
            cls="flex items-center justify-center gap-2 p-8 text-base-content/70",
            data_slot="data-table-loading",
        )
    return Div(
        view.message,
        role="status",
        cls="p-8 text-center text-base-content/60",
        data_slot="data-table-empty",
    )


def render_table(
    view: TableView,
    *,
    sort_url: SortUrl | None = None,
    toggle_url: ToggleUrl | None = None,
    target: str = DEFAULT_TARGET,
    variant: TableVariant = "default",
    size: TableSize = "default",
) -> FT:
    body = []
    for row in view.body:
        if isinstance(row, ExpandedRow):
            body.append(render_expanded_row(row))
        else:
            body.append(render_body_row(row, toggle_url=toggle_url, target=target))

    return TableRoot(
        Thead(Tr(*[render_header_cell(c, sort_url=sort_url, target=target) for c in view.header.cells])),
        Tbody(*body),
        cls=cn(*_table_mods(variant, size)),
        aria_label=view.aria_label,
    )


def render_view(
    view: View,
    *,
    sort_url: SortUrl | None = None,
    toggle_url: ToggleUrl | None = None,
    target: str = DEFAULT_TARGET,
    variant: TableVariant = "default",
    size: TableSize = "default",
    cls: str = "",
    **kw,
) -> FT:
    """Render any view model state inside the data table wrapper.

    Args:
        view: Result of `build_view` / `DataTableEngine.build`
        sort_url: Maps a sortable header to the URL that activates it
        toggle_url: Maps an expandable row to the URL that toggles it
        target: htmx target replaced by interaction responses
        variant: Table style - "default", "zebra", "pin-rows", "pin-cols"
        size: Table size - "default" (sm), "xs", "sm", "lg"
        cls: Additional CSS classes on the wrapper
        **kw: Passed to the wrapper Div (id, htmx attrs, ...)
    """
    if isinstance(view, TableView):
        content = render_table(
            view,
            sort_url=sort_url,
            toggle_url=toggle_url,
            target=target,
            variant=variant,
            size=size,
        )
        state = "table"
    else:
        content = render_status(view)
        state = "loading" if isinstance(view, LoadingView) else "empty"

    return Div(
        content,
        cls=cn("overflow-x-auto", cls),
        data_slot="data-table",
        data_state=state,
        data_variant=variant,
        data_size=size,
        **kw,
    )


__all__ = [
    "render_view",
    "render_table",
    "render_status",
    "render_header_cell",
    "render_body_row",
    "render_expanded_row",
    "TableVariant",
    "TableSize",
    "ACTIVATE_TRIGGER",
    "KEY_GUARD",
    "DEFAULT_TARGET",
]

"""widgetkit.components.search

Debounced search input.

Debouncing is done client-side by htmx (`delay:` trigger modifier); the
server only sees the settled value.
"""

from __future__ import annotations

from fasthtml.common import FT, Div, Input, Label, NotStr, Span

from ..core import cn
from ..daisy import InputShell
from .spinner import Spinner

SEARCH_ICON = (
    '<svg class="h-4 w-4 opacity-60" viewBox="0 0 24 24" fill="none" stroke="currentColor" '
    'stroke-width="2" stroke-linecap="round" stroke-linejoin="round" aria-hidden="true">'
    '<circle cx="11" cy="11" r="8"/><path d="M21 21l-4.35-4.35"/></svg>'
)

CLEAR_ICON = (
    '<svg class="h-4 w-4" viewBox="0 0 24 24" fill="none" stroke="currentColor" '
    'stroke-width="2" stroke-linecap="round" stroke-linejoin="round" aria-hidden="true">'
    '<line x1="18" y1="6" x2="6" y2="18"/><line x1="6" y1="6" x2="18" y2="18"/></svg>'
)

# Escape empties a non-empty field and fires the search immediately
ESCAPE_CLEARS = (
    "if(event.key==='Escape'&&this.value){this.value='';htmx.trigger(this,'search')}"
)


def search_trigger(debounce_ms: int) -> str:
    return f"input changed delay:{debounce_ms}ms, search"


def SearchBar(
    *,
    name: str = "q",
    value: str = "",
    placeholder: str = "Search...",
    debounce_ms: int = 300,
    search_url: str | None = None,
    target: str | None = None,
    show_clear_button: bool = True,
    loading: bool = False,
    label: str | None = None,
    id: str | None = None,
    cls: str = "",
    **kw,
) -> FT:
    """
    Search field that requests `search_url` once typing settles.

    Args:
        name: Query parameter carrying the search text
        value: Current search text
        debounce_ms: Quiet period before a request is sent
        search_url: URL requested with `name=<text>` (htmx GET)
        target: htmx target for the search response
        show_clear_button: Show a clear button while there is a value
        loading: Disable the field and show a spinner
        label: Visible label; without one the field gets aria-label="Search"
    """
    input_id = id or f"search-{name}"

    attrs: dict = {}
    if search_url is not None:
        attrs.update(hx_get=search_url, hx_trigger=search_trigger(debounce_ms))
        if target:
            attrs["hx_target"] = target

    field = Input(
        type="search",
        id=input_id,
        name=name,
        value=value,
        placeholder=placeholder,
        disabled=loading,
        aria_label=None if label else "Search",
        onkeydown=ESCAPE_CLEARS,
        cls="grow",
        **attrs,
    )

    trailing = None
    if loading:
        trailing = Spinner(size="sm", label="Searching")
    elif show_clear_button and value:
        trailing = Span(
            NotStr(CLEAR_ICON),
            role="button",
            tabindex="-1",
            aria_label="Clear search",
            cls="cursor-pointer opacity-60 hover:opacity-100",
            onclick=f"const i=document.getElementById('{input_id}');i.value='';htmx.trigger(i,'search')",
            data_slot="search-clear",
        )

    return Div(
        Label(label, fr=input_id, cls="text-sm font-medium mb-1 block") if label else None,
        InputShell(NotStr(SEARCH_ICON), field, trailing, cls="-sm w-full"),
        cls=cn("flex flex-col", cls),
        data_slot="search-bar",
        **kw,
    )


__all__ = ["SearchBar", "search_trigger"]

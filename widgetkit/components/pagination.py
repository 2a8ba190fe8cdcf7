"""widgetkit.components.pagination

Pagination controls for a separately computed (current_page, total_pages).

Pages are 1-indexed. Navigation is done with htmx: `page_url(page)` builds
the URL for a page and the response replaces `target`.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from fasthtml.common import FT, Div, Nav, Option, Span

from ..core import cn
from ..daisy import Join, Select
from .button import Button


def item_range(current_page: int, items_per_page: int, total_items: int) -> tuple[int, int]:
    """First and last (1-indexed) item shown on `current_page`."""
    start = (current_page - 1) * items_per_page + 1
    end = min(current_page * items_per_page, total_items)
    return start, end


def _nav_attrs(url: Optional[str], target: Optional[str]) -> dict:
    if url is None:
        return {}
    attrs = {"hx_get": url, "hx_swap": "outerHTML"}
    if target:
        attrs["hx_target"] = target
    return attrs


def Pagination(
    *,
    current_page: int,
    total_pages: int,
    total_items: int,
    items_per_page: int,
    page_url: Callable[[int], str] | None = None,
    items_per_page_url: str | None = None,
    items_per_page_options: Sequence[int] = (25, 50, 100),
    show_items_per_page: bool = True,
    show_item_range: bool = True,
    previous_label: str = "Previous",
    next_label: str = "Next",
    target: str | None = None,
    cls: str = "",
    **kw,
) -> FT | None:
    """
    Page navigation with optional item range and items-per-page selector.

    Renders nothing when there are no items.

    Args:
        current_page: Current page (1-indexed)
        total_pages: Number of pages
        total_items: Number of items across all pages
        items_per_page: Page size
        page_url: Maps a page number to the URL that loads it
        items_per_page_url: URL receiving `per_page` when the selector changes
        items_per_page_options: Choices for the selector
        target: htmx target for navigation responses
        cls: Additional CSS classes
        **kw: Passed to the <nav>
    """
    if total_items == 0:
        return None

    prev_disabled = current_page <= 1
    next_disabled = current_page >= total_pages

    info = None
    if show_item_range:
        start, end = item_range(current_page, items_per_page, total_items)
        info = Div(
            f"Showing {start}-{end} of {total_items} items",
            cls="text-sm text-base-content/70",
            aria_live="polite",
        )

    controls = Join(
        Button(
            previous_label,
            variant="outline",
            size="sm",
            disabled=prev_disabled,
            aria_label=f"Go to previous page{' (disabled)' if prev_disabled else ''}",
            cls="join-item",
            **_nav_attrs(None if prev_disabled or page_url is None else page_url(current_page - 1), target),
        ),
        Span(
            f"Page {current_page} of {total_pages}",
            cls="join-item px-3 text-sm flex items-center",
            aria_current="page",
        ),
        Button(
            next_label,
            variant="outline",
            size="sm",
            disabled=next_disabled,
            aria_label=f"Go to next page{' (disabled)' if next_disabled else ''}",
            cls="join-item",
            **_nav_attrs(None if next_disabled or page_url is None else page_url(current_page + 1), target),
        ),
    )

    per_page = None
    if show_items_per_page and items_per_page_url is not None:
        per_page = Select(
            *[
                Option(f"{n} per page", value=str(n), selected=(n == items_per_page))
                for n in items_per_page_options
            ],
            name="per_page",
            cls="-sm w-auto",
            aria_label="Items per page",
            hx_trigger="change",
            **_nav_attrs(items_per_page_url, target),
        )

    return Nav(
        info,
        controls,
        per_page,
        aria_label="Pagination navigation",
        cls=cn("flex flex-wrap items-center justify-between gap-3", cls),
        data_slot="pagination",
        **kw,
    )


__all__ = ["Pagination", "item_range"]

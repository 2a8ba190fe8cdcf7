"""datatable.engine

One data table instance: configuration, callbacks and the expansion state
that belongs to it.

Sort and expansion are deliberately asymmetric. Sort order is owned by the
caller, who receives requested changes through `on_sort` and feeds the new
`SortState` back on the next render. Expansion is widget-local and lives in
the instance's `ExpansionRegistry`.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Hashable, Sequence

from .columns import Column, find_column
from .expansion import ExpansionRegistry
from .sort import SortOrder, SortState, next_sort
from .view import DetailRenderer, TableConfig, View, build_view

logger = logging.getLogger(__name__)

# Keys that activate a focused header or row, mirroring a click.
ACTIVATION_KEYS = frozenset({"Enter", " "})

SortCallback = Callable[[str, SortOrder], None]


class DataTableEngine:
    def __init__(
        self,
        config: TableConfig,
        *,
        on_sort: SortCallback | None = None,
        render_expanded: DetailRenderer | None = None,
    ) -> None:
        self.config = config
        self.on_sort = on_sort
        self.render_expanded = render_expanded
        self.registry = ExpansionRegistry()

    def build(
        self,
        rows: Any,
        columns: Sequence[Column],
        sort: SortState | None = None,
        *,
        is_loading: bool = False,
    ) -> View:
        return build_view(
            rows,
            columns,
            sort,
            self.registry,
            self.config,
            render_expanded=self.render_expanded,
            is_loading=is_loading,
        )

    # -- sorting --------------------------------------------------------------

    def activate_header(
        self,
        columns: Sequence[Column],
        column_key: str,
        sort: SortState | None = None,
    ) -> SortState | None:
        """Request a sort on `column_key`.

        Returns the next sort state, or None when the column is unknown or not
        sortable (in which case `on_sort` is not called).
        """
        column = find_column(columns, column_key)
        if column is None or not column.sortable:
            logger.debug("ignoring header activation for %r", column_key)
            return None

        state = next_sort(sort or SortState(), column_key)
        if self.on_sort is not None:
            self.on_sort(column_key, state.order)
        return state

    def handle_header_key(
        self,
        columns: Sequence[Column],
        column_key: str,
        key: str,
        sort: SortState | None = None,
    ) -> bool:
        """Keyboard activation of a header. Returns True if the default action must be prevented."""
        column = find_column(columns, column_key)
        if key not in ACTIVATION_KEYS or column is None or not column.sortable:
            return False
        self.activate_header(columns, column_key, sort)
        return True

    # -- expansion ------------------------------------------------------------

    def activate_row(self, row_key: Hashable) -> bool | None:
        """Toggle a row's detail line. Returns the new state, or None if the table is not expandable."""
        if not self.config.expandable:
            return None
        return self.registry.toggle(row_key)

    def handle_row_key(self, row_key: Hashable, key: str) -> bool:
        """Keyboard activation of a row. Returns True if the default action must be prevented."""
        if key not in ACTIVATION_KEYS or not self.config.expandable:
            return False
        self.activate_row(row_key)
        return True

    def is_expanded(self, row_key: Hashable) -> bool:
        return self.registry.is_expanded(row_key)


__all__ = ["DataTableEngine", "ACTIVATION_KEYS", "SortCallback"]

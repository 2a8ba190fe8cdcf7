"""datatable.sort

Single-column sort state and its transition rule.

The table never owns sort state. The caller supplies a `SortState` on every
render; header activation only computes the next state and hands it back.
"""

from __future__ import annotations

from typing import Any, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from .columns import Column

SortOrder = Literal["asc", "desc"]
AriaSort = Literal["ascending", "descending"]

SORT_GLYPHS = {"asc": "▲", "desc": "▼"}
UNSORTED_GLYPH = "⇅"


class SortState(BaseModel):
    model_config = ConfigDict(frozen=True)

    column: Optional[str] = None
    order: SortOrder = "asc"

    @field_validator("column", mode="before")
    @classmethod
    def _empty_to_none(cls, value: Any) -> Any:
        if value == "":
            return None
        return value

    @classmethod
    def parse_query_params(cls, params: Mapping[str, str]) -> "SortState":
        """Read `sort` / `order` from query params. Unknown orders fall back to asc."""
        order = params.get("order", "asc")
        if order not in ("asc", "desc"):
            order = "asc"
        return cls(column=params.get("sort") or None, order=order)

    def url_params(self) -> dict[str, str]:
        if self.column is None:
            return {}
        return {"sort": self.column, "order": self.order}

    def is_sorted_by(self, key: str) -> bool:
        return self.column is not None and self.column == key


def next_sort(state: SortState, column_key: str) -> SortState:
    """Transition on header activation.

    A new column starts ascending; the active column flips between asc and
    desc. There is no way back to unsorted.
    """
    if not state.is_sorted_by(column_key):
        return SortState(column=column_key, order="asc")
    return SortState(column=column_key, order="desc" if state.order == "asc" else "asc")


def aria_sort(state: SortState, column: Column) -> AriaSort | None:
    if not column.sortable or not state.is_sorted_by(column.key):
        return None
    return "ascending" if state.order == "asc" else "descending"


def sort_glyph(state: SortState, column: Column) -> str | None:
    if not column.sortable:
        return None
    if state.is_sorted_by(column.key):
        return SORT_GLYPHS[state.order]
    return UNSORTED_GLYPH


__all__ = [
    "SortState",
    "SortOrder",
    "AriaSort",
    "next_sort",
    "aria_sort",
    "sort_glyph",
    "SORT_GLYPHS",
    "UNSORTED_GLYPH",
]

"""datatable.columns

Column descriptors for the data table.
"""

from __future__ import annotations

from typing import Any, Callable, Literal, Optional, Sequence

from pydantic import BaseModel, ConfigDict, field_validator

PATH_SEPARATOR = "."

Align = Literal["left", "center", "right"]

# (value, row) -> anything FastHTML can render
CellRenderer = Callable[[Any, Any], Any]


class Column(BaseModel):
    """How to extract and display one field across all rows.

    Attributes:
        key: Field name, or a dot path into nested records ("data.http.method")
        header: Header text
        sortable: Whether header activation requests a sort
        align: Cell and header text alignment
        width: CSS width applied to the header cell
        render: Optional `(value, row) -> node` hook for custom cell content
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    key: str
    header: str
    sortable: bool = False
    align: Optional[Align] = None
    width: Optional[str] = None
    render: Optional[CellRenderer] = None

    @field_validator("key")
    @classmethod
    def _key_required(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("column key is required")
        return value

    @property
    def is_path(self) -> bool:
        return PATH_SEPARATOR in self.key


def find_column(columns: Sequence[Column], key: str) -> Column | None:
    """First column with `key`, or None. Duplicate keys resolve to the first."""
    return next((c for c in columns if c.key == key), None)


__all__ = ["Column", "Align", "CellRenderer", "PATH_SEPARATOR", "find_column"]

"""datatable.resolve

Cell value resolution: direct and dot-path lookups into heterogeneous rows.

Rows are treated as opaque records. A record is a `Mapping`, a dataclass
instance or a pydantic model; anything else is a leaf value. Lookups never
raise: a missing field or intermediate node resolves to `MISSING`.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from .columns import PATH_SEPARATOR, Column


class _Missing:
    """The "no value" sentinel. Falsy, renders as an empty string."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"

    def __str__(self) -> str:
        return ""


MISSING: Any = _Missing()


def _get_field(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record[name] if name in record else MISSING
    if isinstance(record, BaseModel):
        if name in type(record).model_fields:
            return getattr(record, name)
        return MISSING
    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        if name in {f.name for f in dataclasses.fields(record)}:
            return getattr(record, name)
        return MISSING
    return MISSING


def resolve_value(row: Any, key: str) -> Any:
    """Extract a cell's raw value from `row`.

    `key` without a separator is a direct field lookup. A dotted key is walked
    segment by segment and short-circuits to MISSING as soon as a node is
    absent or is not a record.
    """
    if PATH_SEPARATOR not in key:
        return _get_field(row, key)

    current = row
    for segment in key.split(PATH_SEPARATOR):
        current = _get_field(current, segment)
        if current is MISSING:
            return MISSING
    return current


def format_value(value: Any) -> str:
    """Default textual representation of a cell value."""
    if value is MISSING or value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def cell_content(row: Any, column: Column) -> Any:
    """Displayed content for one cell.

    Custom renderers get the resolved value (possibly MISSING) and the full
    row. Exceptions raised by a renderer are not caught here.
    """
    value = resolve_value(row, column.key)
    if column.render is not None:
        return column.render(value, row)
    return format_value(value)


__all__ = ["MISSING", "resolve_value", "format_value", "cell_content"]

from __future__ import annotations

from dataclasses import dataclass

import pytest
from pydantic import BaseModel, ValidationError

from widgetkit.datatable import MISSING, Column, cell_content, format_value, resolve_value


@dataclass
class Http:
    method: str


class Event(BaseModel):
    id: str
    http: Http


def test_direct_key_returns_field_value(users) -> None:
    assert resolve_value(users[0], "name") == "John Doe"


def test_direct_key_absent_field_is_missing(users) -> None:
    assert resolve_value(users[0], "phone") is MISSING


def test_falsy_values_are_not_missing() -> None:
    row = {"count": 0, "flag": False, "note": None}
    assert resolve_value(row, "count") == 0
    assert resolve_value(row, "flag") is False
    assert resolve_value(row, "note") is None


def test_dot_path_descends_nested_records(events) -> None:
    assert resolve_value(events[0], "data.http.method") == "GET"
    assert resolve_value(events[0], "data.http") == {"method": "GET", "path": "/a"}


@pytest.mark.parametrize(
    "row",
    [
        {"id": 1},
        {"id": 1, "data": "not a record"},
        {"id": 1, "data": {"other": 1}},
        {"id": 1, "data": None},
        {"id": 1, "data": ["http"]},
    ],
)
def test_dot_path_short_circuits_to_missing(row) -> None:
    assert resolve_value(row, "data.http.method") is MISSING


def test_dot_path_missing_leaf(events) -> None:
    assert resolve_value(events[1], "data.http.path") is MISSING


def test_resolves_dataclasses_and_pydantic_models() -> None:
    row = Event(id="e1", http=Http(method="PATCH"))
    assert resolve_value(row, "id") == "e1"
    assert resolve_value(row, "http.method") == "PATCH"
    assert resolve_value(row, "http.status") is MISSING
    # methods and other attributes are not fields
    assert resolve_value(row, "model_dump") is MISSING


def test_non_record_rows_resolve_to_missing() -> None:
    assert resolve_value("plain string", "upper") is MISSING


def test_missing_sentinel_is_falsy_and_blank() -> None:
    assert not MISSING
    assert str(MISSING) == ""
    assert repr(MISSING) == "MISSING"


def test_format_value_renders_missing_and_none_as_empty() -> None:
    assert format_value(MISSING) == ""
    assert format_value(None) == ""
    assert format_value(0) == "0"
    assert format_value("x") == "x"


def test_format_value_writes_booleans_in_lower_case() -> None:
    assert format_value(True) == "true"
    assert format_value(False) == "false"
    assert cell_content({"active": False}, Column(key="active", header="Active")) == "false"


def test_cell_content_uses_renderer_with_value_and_row() -> None:
    seen = []

    def render(value, row):
        seen.append((value, row))
        return f"badge:{value}"

    row = {"status": "active"}
    column = Column(key="status", header="Status", render=render)

    assert cell_content(row, column) == "badge:active"
    assert seen == [("active", row)]


def test_cell_content_passes_missing_to_renderer() -> None:
    column = Column(key="a.b", header="AB", render=lambda v, r: v)
    assert cell_content({}, column) is MISSING


def test_cell_content_without_renderer_is_text() -> None:
    assert cell_content({"n": 42}, Column(key="n", header="N")) == "42"
    assert cell_content({}, Column(key="n", header="N")) == ""


def test_renderer_errors_propagate() -> None:
    def boom(value, row):
        raise RuntimeError("renderer failed")

    with pytest.raises(RuntimeError):
        cell_content({"x": 1}, Column(key="x", header="X", render=boom))


def test_column_requires_key() -> None:
    with pytest.raises(ValidationError):
        Column(key=" ", header="Blank")


def test_column_is_path() -> None:
    assert Column(key="data.http.method", header="Method").is_path
    assert not Column(key="method", header="Method").is_path

from __future__ import annotations

from fasthtml.common import Span, to_xml

from widgetkit.datatable import Column, DataTableEngine, SortState, TableConfig, render_view
from widgetkit.datatable.render import ACTIVATE_TRIGGER, KEY_GUARD


def _render(engine, rows, columns, sort=None, **kw) -> str:
    return to_xml(render_view(engine.build(rows, columns, sort), **kw))


def test_renders_table_with_label_headers_and_cells(users, user_columns) -> None:
    engine = DataTableEngine(TableConfig(key_field="id", aria_label="User list"))
    html = _render(engine, users, user_columns)

    assert "<table" in html
    assert 'aria-label="User list"' in html
    assert html.count("<th ") == 3
    assert html.count("<tr") == 4
    assert "jane@example.com" in html
    assert 'data-state="table"' in html


def test_sortable_headers_are_focusable_with_aria_sort(users, user_columns) -> None:
    engine = DataTableEngine(TableConfig(key_field="id"))
    html = _render(engine, users, user_columns, SortState(column="name", order="asc"))

    assert 'aria-sort="ascending"' in html
    assert html.count('role="columnheader button"') == 2
    assert html.count('role="columnheader"') == 1
    assert html.count('tabindex="0"') == 2
    assert "▲" in html
    assert "⇅" in html


def test_descending_indicator(users, user_columns) -> None:
    engine = DataTableEngine(TableConfig(key_field="id"))
    html = _render(engine, users, user_columns, SortState(column="name", order="desc"))

    assert 'aria-sort="descending"' in html
    assert "▼" in html


def test_width_and_alignment(users) -> None:
    columns = [
        Column(key="name", header="Name", width="200px", align="left"),
        Column(key="email", header="Email", align="center"),
        Column(key="role", header="Role", align="right"),
    ]
    html = _render(DataTableEngine(TableConfig(key_field="id")), users, columns)

    assert 'style="width: 200px"' in html
    assert "text-left" in html
    assert "text-center" in html
    assert "text-right" in html


def test_sort_url_adds_htmx_activation(users, user_columns) -> None:
    engine = DataTableEngine(TableConfig(key_field="id"))
    html = _render(
        engine,
        users,
        user_columns,
        sort_url=lambda cell: f"/sort/{cell.key}",
        target="#users",
    )

    assert 'hx-get="/sort/name"' in html
    assert 'hx-get="/sort/role"' in html
    assert 'hx-get="/sort/email"' not in html
    assert 'hx-target="#users"' in html
    assert "keydown[key==" in html


def test_expandable_rows(users, user_columns) -> None:
    engine = DataTableEngine(
        TableConfig(key_field="id", expandable=True),
        render_expanded=lambda row: Span(f"Details for {row['name']}"),
    )
    engine.activate_row(1)
    html = _render(engine, users, user_columns, toggle_url=lambda row: f"/toggle/{row.key}")

    assert html.count("<th ") == 4
    assert 'aria-label="Expand row"' in html
    assert html.count('role="row button"') == 3
    assert html.count('aria-expanded="true"') == 1
    assert html.count('aria-expanded="false"') == 2
    assert 'hx-post="/toggle/2"' in html
    assert "Details for John Doe" in html
    assert "Details for Jane Smith" not in html
    assert 'colspan="4"' in html
    assert "onkeydown" in html


def test_activation_trigger_covers_click_enter_and_space() -> None:
    assert ACTIVATE_TRIGGER.startswith("click")
    assert "'Enter'" in ACTIVATE_TRIGGER and "' '" in ACTIVATE_TRIGGER
    assert "preventDefault" in KEY_GUARD and "' '" in KEY_GUARD


def test_loading_state_renders_status_without_table(users, user_columns) -> None:
    engine = DataTableEngine(TableConfig(key_field="id"))
    html = to_xml(render_view(engine.build(users, user_columns, is_loading=True)))

    assert 'role="status"' in html
    assert 'aria-live="polite"' in html
    assert "Loading..." in html
    assert "<table" not in html
    assert "John Doe" not in html


def test_empty_state_renders_message_without_table(user_columns) -> None:
    engine = DataTableEngine(TableConfig(key_field="id", empty_message="No users found"))
    html = _render(engine, [], user_columns)

    assert 'role="status"' in html
    assert "No users found" in html
    assert "<table" not in html
    assert 'data-state="empty"' in html


def test_custom_class_and_variant(users, user_columns) -> None:
    engine = DataTableEngine(TableConfig(key_field="id"))
    html = _render(engine, users, user_columns, cls="custom-class", variant="zebra", size="xs")

    assert "custom-class" in html
    assert "table-zebra" in html
    assert "table-xs" in html

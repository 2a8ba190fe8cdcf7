from __future__ import annotations

import pytest
from fasthtml.common import to_xml

from widgetkit import (
    Badge,
    Button,
    Column,
    DataTable,
    DataTableEngine,
    Pagination,
    SearchBar,
    Spinner,
    StatusBadge,
    TableConfig,
)
from widgetkit.components import item_range, status_variant


@pytest.mark.parametrize(
    ("code", "variant"),
    [(200, "success"), (204, "success"), (301, "info"), (404, "warning"), (500, "danger"), (503, "danger"), (100, "default")],
)
def test_status_variant(code, variant) -> None:
    assert status_variant(code) == variant


def test_status_badge_renders_code_with_variant() -> None:
    html = to_xml(StatusBadge(404))

    assert ">404<" in html
    assert "badge-warning" in html
    assert 'data-variant="warning"' in html


def test_badge_variants_sizes_and_pill() -> None:
    html = to_xml(Badge("active", variant="danger", size="sm", pill=True))

    assert "badge-error" in html
    assert "badge-sm" in html
    assert "rounded-full" in html
    assert 'data-slot="badge"' in html


def test_button_loading_is_busy_and_disabled() -> None:
    html = to_xml(Button("Save", loading=True))

    assert "disabled" in html
    assert 'aria-busy="true"' in html
    assert "loading-spinner" in html
    assert "btn-primary" in html


def test_button_variant_and_size() -> None:
    html = to_xml(Button("Delete", variant="danger", size="lg"))

    assert "btn-error" in html
    assert "btn-md" in html
    assert 'type="button"' in html
    assert "aria-busy" not in html


def test_spinner_has_accessible_label() -> None:
    html = to_xml(Spinner(size="lg", label="Fetching"))

    assert 'role="status"' in html
    assert 'aria-label="Fetching"' in html
    assert "loading-lg" in html
    assert "sr-only" in html


def test_item_range() -> None:
    assert item_range(1, 25, 100) == (1, 25)
    assert item_range(4, 25, 90) == (76, 90)


def test_pagination_renders_nothing_without_items() -> None:
    assert Pagination(current_page=1, total_pages=0, total_items=0, items_per_page=25) is None


def test_pagination_first_page() -> None:
    html = to_xml(
        Pagination(
            current_page=1,
            total_pages=4,
            total_items=100,
            items_per_page=25,
            page_url=lambda page: f"/users?page={page}",
            target="#users",
        )
    )

    assert "Showing 1-25 of 100 items" in html
    assert "Page 1 of 4" in html
    assert 'aria-label="Go to previous page (disabled)"' in html
    assert 'aria-label="Go to next page"' in html
    assert 'hx-get="/users?page=2"' in html
    assert 'hx-get="/users?page=0"' not in html
    assert 'hx-target="#users"' in html


def test_pagination_last_page_and_per_page_selector() -> None:
    html = to_xml(
        Pagination(
            current_page=4,
            total_pages=4,
            total_items=90,
            items_per_page=25,
            page_url=lambda page: f"/users?page={page}",
            items_per_page_url="/users",
        )
    )

    assert "Showing 76-90 of 90 items" in html
    assert 'aria-label="Go to next page (disabled)"' in html
    assert 'hx-get="/users?page=3"' in html
    assert 'name="per_page"' in html
    assert "50 per page" in html


def test_pagination_hides_optional_parts() -> None:
    html = to_xml(
        Pagination(
            current_page=2,
            total_pages=3,
            total_items=60,
            items_per_page=25,
            items_per_page_url="/users",
            show_item_range=False,
            show_items_per_page=False,
        )
    )

    assert "Showing" not in html
    assert "per_page" not in html


def test_search_bar_debounces_requests() -> None:
    html = to_xml(SearchBar(search_url="/search", target="#results", debounce_ms=500))

    assert 'type="search"' in html
    assert 'hx-get="/search"' in html
    assert "delay:500ms" in html
    assert 'aria-label="Search"' in html
    assert "Clear search" not in html


def test_search_bar_clear_button_only_with_value() -> None:
    assert "Clear search" in to_xml(SearchBar(value="john"))
    assert "Clear search" not in to_xml(SearchBar(value="john", show_clear_button=False))


def test_search_bar_loading_disables_input() -> None:
    html = to_xml(SearchBar(value="john", loading=True))

    assert "disabled" in html
    assert "Searching" in html
    assert "Clear search" not in html


def test_search_bar_with_label() -> None:
    html = to_xml(SearchBar(name="q", label="Find users"))

    assert "Find users" in html
    assert 'for="search-q"' in html
    assert 'aria-label="Search"' not in html


def test_data_table_component(users, user_columns) -> None:
    columns = [*user_columns, Column(key="id", header="ID", render=lambda v, row: StatusBadge(200 + v))]
    html = to_xml(
        DataTable(
            users,
            columns,
            key_field="id",
            sort_by="role",
            sort_order="desc",
            aria_label="User list",
            cls="custom-class",
        )
    )

    assert 'aria-label="User list"' in html
    assert 'aria-sort="descending"' in html
    assert "custom-class" in html
    assert ">201<" in html


def test_data_table_component_states(user_columns, users) -> None:
    assert "No users found" in to_xml(
        DataTable([], user_columns, key_field="id", empty_message="No users found")
    )
    assert "Loading..." in to_xml(DataTable(users, user_columns, key_field="id", is_loading=True))


def test_data_table_component_reuses_engine(users, user_columns) -> None:
    engine = DataTableEngine(
        TableConfig(key_field="id", expandable=True),
        render_expanded=lambda row: f"Details for {row['name']}",
    )
    engine.activate_row(3)

    html = to_xml(DataTable(users, user_columns, key_field="ignored", engine=engine))

    assert "Details for Bob Wilson" in html

from __future__ import annotations

import pytest
from starlette.testclient import TestClient

from app.main import build_sources
from widgetkit.core import daisy_app
from widgetkit.datatable.routes import mount_table_routes, reset_tables


@pytest.fixture
def demo_client():
    reset_tables(sources=True)
    app, _ = daisy_app()
    mount_table_routes(app, *build_sources())
    client = TestClient(app)
    yield client
    client.close()
    reset_tables(sources=True)


def test_users_table_renders_status_badges(demo_client) -> None:
    response = demo_client.get("/table/users", headers={"HX-Request": "true"})

    assert response.status_code == 200
    assert "table-zebra" in response.text
    assert "badge-success" in response.text
    assert "Charlie Davis" in response.text


def test_events_table_expands_details_and_resolves_nested_ip(demo_client) -> None:
    response = demo_client.post(
        "/table/events/_/toggle",
        params={"row": "evt-003"},
        headers={"HX-Request": "true"},
    )

    assert response.status_code == 200
    assert "192.168.1.3" in response.text
    assert "Chrome/120.0" in response.text
    assert "badge-warning" in response.text
    assert response.text.count('aria-expanded="true"') == 1


def test_events_sort_by_response_time(demo_client) -> None:
    response = demo_client.get(
        "/table/events/_/sort",
        params={"column": "response_time", "sort": "response_time", "order": "asc"},
        headers={"HX-Request": "true"},
    )

    assert response.status_code == 200
    assert 'aria-sort="descending"' in response.text
    assert response.text.index("/api/users/2") < response.text.index("/api/users/1")

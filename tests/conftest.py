from __future__ import annotations

from dataclasses import dataclass, field

import pytest
from starlette.testclient import TestClient

from widgetkit.core import daisy_app
from widgetkit.datatable import Column, TableConfig
from widgetkit.datatable.routes import TableSource, mount_table_routes, reset_tables, sort_records


@pytest.fixture
def users() -> list[dict]:
    return [
        {"id": 1, "name": "John Doe", "email": "john@example.com", "role": "Admin"},
        {"id": 2, "name": "Jane Smith", "email": "jane@example.com", "role": "Editor"},
        {"id": 3, "name": "Bob Wilson", "email": "bob@example.com", "role": "Viewer"},
    ]


@pytest.fixture
def user_columns() -> list[Column]:
    return [
        Column(key="name", header="Name", sortable=True),
        Column(key="email", header="Email"),
        Column(key="role", header="Role", sortable=True),
    ]


@pytest.fixture
def events() -> list[dict]:
    return [
        {"id": "evt-1", "method": "GET", "status": 200, "data": {"http": {"method": "GET", "path": "/a"}}},
        {"id": "evt-2", "method": "POST", "status": 500, "data": {"http": {"method": "POST"}}},
        {"id": "evt-3", "method": "PUT", "status": 404, "data": "not a record"},
    ]


@dataclass
class TableTestEnv:
    client: TestClient
    sorts: list[tuple[str, str]] = field(default_factory=list)

    def get(self, url: str, **kw):
        return self.client.get(url, headers={"HX-Request": "true"}, **kw)

    def post(self, url: str, **kw):
        return self.client.post(url, headers={"HX-Request": "true"}, **kw)


@pytest.fixture
def table_env(users, user_columns) -> TableTestEnv:
    reset_tables(sources=True)
    sorts: list[tuple[str, str]] = []

    source = TableSource(
        name="users",
        columns=user_columns,
        config=TableConfig(key_field="id", expandable=True, aria_label="User list"),
        rows=lambda sort: sort_records(users, sort),
        render_expanded=lambda row: f"Details for {row['name']}",
        on_sort=lambda column, order: sorts.append((column, order)),
    )

    app, _ = daisy_app()
    mount_table_routes(app, source)
    client = TestClient(app)

    yield TableTestEnv(client=client, sorts=sorts)

    client.close()
    reset_tables(sources=True)

import argparse
import logging
from datetime import datetime

import pandas as pd
from fasthtml.common import Div, H1, H2, P, Span, serve

from widgetkit import Badge, Column, StatusBadge, TableConfig, daisy_app
from widgetkit.datatable.routes import TableSource, mount_table_routes, sort_records

logger = logging.getLogger(__name__)

USERS = pd.DataFrame(
    [
        {"id": 1, "name": "John Doe", "email": "john@example.com", "role": "Admin", "status": "active", "created_at": "2024-01-15"},
        {"id": 2, "name": "Jane Smith", "email": "jane@example.com", "role": "Editor", "status": "active", "created_at": "2024-02-20"},
        {"id": 3, "name": "Bob Wilson", "email": "bob@example.com", "role": "Viewer", "status": "inactive", "created_at": "2024-03-10"},
        {"id": 4, "name": "Alice Brown", "email": "alice@example.com", "role": "Editor", "status": "pending", "created_at": "2024-04-05"},
        {"id": 5, "name": "Charlie Davis", "email": "charlie@example.com", "role": "Admin", "status": "active", "created_at": "2024-05-12"},
    ]
)

EVENTS = [
    {"id": "evt-001", "timestamp": "2024-12-09T10:30:00", "method": "GET", "endpoint": "/api/users", "status_code": 200, "response_time": 45, "details": {"user_agent": "Mozilla/5.0", "ip": "192.168.1.1"}},
    {"id": "evt-002", "timestamp": "2024-12-09T10:31:00", "method": "POST", "endpoint": "/api/users", "status_code": 201, "response_time": 120, "details": {"user_agent": "Mozilla/5.0", "ip": "192.168.1.2"}},
    {"id": "evt-003", "timestamp": "2024-12-09T10:32:00", "method": "GET", "endpoint": "/api/users/1", "status_code": 404, "response_time": 15, "details": {"user_agent": "Chrome/120.0", "ip": "192.168.1.3"}},
    {"id": "evt-004", "timestamp": "2024-12-09T10:33:00", "method": "PUT", "endpoint": "/api/users/2", "status_code": 500, "response_time": 250, "details": {"user_agent": "Safari/17.0", "ip": "192.168.1.4"}},
    {"id": "evt-005", "timestamp": "2024-12-09T10:34:00", "method": "DELETE", "endpoint": "/api/users/3", "status_code": 204, "response_time": 80, "details": {"user_agent": "Firefox/120.0", "ip": "192.168.1.5"}},
]

USER_STATUS_VARIANTS = {"active": "success", "inactive": "danger"}


def user_status(value, row):
    return Badge(str(value), variant=USER_STATUS_VARIANTS.get(value, "warning"))


def event_time(value, row):
    return datetime.fromisoformat(value).strftime("%H:%M:%S") if value else ""


def event_details(row):
    details = row.get("details", {})
    return Div(
        P(Span("User agent: ", cls="font-medium"), details.get("user_agent", "")),
        P(Span("IP: ", cls="font-medium"), details.get("ip", "")),
        cls="text-sm space-y-1",
    )


def build_sources() -> list[TableSource]:
    users = TableSource(
        name="users",
        columns=[
            Column(key="name", header="Name", sortable=True),
            Column(key="email", header="Email", sortable=True),
            Column(key="role", header="Role", sortable=True),
            Column(key="status", header="Status", sortable=True, render=user_status),
            Column(key="created_at", header="Created", sortable=True),
        ],
        config=TableConfig(key_field="id", aria_label="Users", empty_message="No users found"),
        rows=USERS,
        variant="zebra",
    )
    events = TableSource(
        name="events",
        columns=[
            Column(key="timestamp", header="Time", sortable=True, render=event_time),
            Column(key="method", header="Method", sortable=True, render=lambda v, r: Badge(v, variant="info")),
            Column(key="endpoint", header="Endpoint", sortable=True),
            Column(key="status_code", header="Status", sortable=True, align="center", render=lambda v, r: StatusBadge(v)),
            Column(key="response_time", header="Duration (ms)", sortable=True, align="right", width="8rem"),
            Column(key="details.ip", header="Client IP"),
        ],
        config=TableConfig(key_field="id", expandable=True, aria_label="HTTP events"),
        rows=lambda sort: sort_records(EVENTS, sort),
        render_expanded=event_details,
        on_sort=lambda column, order: logger.info("events sorted by %s %s", column, order),
    )
    return [users, events]


app, rt = daisy_app()
mount_table_routes(app, *build_sources())


@rt("/")
def index():
    sections = [
        Div(
            H2(title, cls="text-lg font-semibold mb-2"),
            Div(hx_get=f"/table/{name}", hx_trigger="load", hx_swap="outerHTML"),
        )
        for name, title in (("users", "Users"), ("events", "HTTP events"))
    ]
    return Div(H1("widgetkit demo", cls="text-2xl font-semibold"), *sections, cls="p-6 space-y-8")


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--port", type=int, default=5001)
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO)
    serve(port=args.port)

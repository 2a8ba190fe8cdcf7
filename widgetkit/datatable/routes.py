"""datatable.routes

FastHTML routes that host interactive data tables.

The routes play the caller's part: they own the data, apply the requested
sort before building the view, and keep one `DataTableEngine` per browser
session and table so that expanded rows survive re-renders.
"""

from __future__ import annotations

import json
import logging
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Callable, Union
from urllib.parse import urlencode
from uuid import uuid4

import pandas as pd
from fasthtml.common import APIRouter, Main, Title, to_xml
from starlette.responses import Response

from ..config import TABLE_ENGINE_CACHE_SIZE, TABLE_ROUTE_PREFIX
from .columns import Column
from .engine import DataTableEngine, SortCallback
from .render import TableSize, TableVariant, render_view
from .resolve import MISSING, format_value, resolve_value
from .sort import SortState
from .view import BodyRow, DetailRenderer, HeaderCell, TableConfig, as_records

logger = logging.getLogger(__name__)

SESSION_KEY = "datatable_sid"

RowsLoader = Callable[[SortState], Any]


@dataclass
class TableSource:
    """A table the routes can serve.

    `rows` is either a pandas DataFrame (sorted here with `sort_values`) or a
    callable that receives the requested `SortState` and returns rows already
    in display order.
    """

    name: str
    columns: list[Column]
    config: TableConfig
    rows: Union[RowsLoader, pd.DataFrame]
    render_expanded: DetailRenderer | None = None
    on_sort: SortCallback | None = None
    variant: TableVariant = "default"
    size: TableSize = "default"

    def load(self, sort: SortState) -> Any:
        if isinstance(self.rows, pd.DataFrame):
            return sort_frame(self.rows, sort)
        return self.rows(sort)

    @property
    def base_url(self) -> str:
        return f"{TABLE_ROUTE_PREFIX}/{self.name}"

    @property
    def element_id(self) -> str:
        return f"datatable-{self.name}"


def _mixed_key(value: Any) -> tuple:
    """Total order for values of mixed types: numbers first, then by text."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return (0, value, "")
    return (1, 0, format_value(value))


def _is_blank(value: Any) -> bool:
    return value is None or value is MISSING or (pd.api.types.is_scalar(value) and pd.isna(value))


def sort_frame(df: pd.DataFrame, sort: SortState) -> pd.DataFrame:
    """Sort a DataFrame by the active column. Unknown columns leave it as is.

    Object columns whose values do not compare with each other fall back to
    `_mixed_key`; gaps stay last either way.
    """
    if sort.column is None or sort.column not in df.columns:
        return df
    ascending = sort.order == "asc"
    try:
        return df.sort_values(sort.column, ascending=ascending, kind="stable")
    except TypeError:
        logger.debug("column %s has mixed types, sorting by text", sort.column)
        return df.sort_values(
            sort.column,
            ascending=ascending,
            kind="stable",
            key=lambda s: s.map(lambda v: None if _is_blank(v) else _mixed_key(v)),
        )


def sort_records(rows: list[Any], sort: SortState) -> list[Any]:
    """Sort records by a (possibly dotted) key. Missing values go last."""
    if sort.column is None:
        return list(rows)

    present, missing = [], []
    for row in rows:
        value = resolve_value(row, sort.column)
        (missing if _is_blank(value) else present).append((value, row))

    reverse = sort.order == "desc"
    try:
        ordered = sorted(present, key=lambda pair: pair[0], reverse=reverse)
    except TypeError:
        ordered = sorted(present, key=lambda pair: _mixed_key(pair[0]), reverse=reverse)
    return [row for _, row in ordered] + [row for _, row in missing]


# -----------------------------------------------------------------------------
# Registry
# -----------------------------------------------------------------------------

_sources: dict[str, TableSource] = {}
# least recently used first; trimmed to TABLE_ENGINE_CACHE_SIZE entries
_engines: "OrderedDict[tuple[str, str], DataTableEngine]" = OrderedDict()

ar = APIRouter()


def register_table(source: TableSource) -> TableSource:
    _sources[source.name] = source
    return source


def get_source(name: str) -> TableSource | None:
    return _sources.get(name)


def reset_tables(*, sources: bool = False) -> None:
    """Discard engine instances (and their expanded rows). Optionally forget sources."""
    _engines.clear()
    if sources:
        _sources.clear()


def mount_table_routes(app, *sources: TableSource) -> None:
    """Register table sources and mount the table routes on the app."""
    for source in sources:
        register_table(source)
    ar.to_app(app)


def _session_id(sess) -> str:
    sid = sess.get(SESSION_KEY)
    if not sid:
        sid = uuid4().hex
        sess[SESSION_KEY] = sid
    return sid


def get_engine(source: TableSource, sess) -> DataTableEngine:
    """The session's engine for `source`, created on first use.

    Engines live in a bounded LRU cache. When it is full, the engine used
    least recently is dropped along with its expanded rows.
    """
    cache_key = (_session_id(sess), source.name)
    engine = _engines.get(cache_key)
    if engine is None:
        engine = DataTableEngine(
            source.config,
            on_sort=source.on_sort,
            render_expanded=source.render_expanded,
        )
        _engines[cache_key] = engine
        while len(_engines) > TABLE_ENGINE_CACHE_SIZE:
            evicted, _ = _engines.popitem(last=False)
            logger.debug("evicted table engine %s", evicted)
    else:
        _engines.move_to_end(cache_key)
    return engine


# -----------------------------------------------------------------------------
# URLs and rendering
# -----------------------------------------------------------------------------


def table_url(source: TableSource, sort: SortState) -> str:
    params = sort.url_params()
    if params:
        return f"{source.base_url}?{urlencode(params)}"
    return source.base_url


def sort_url(source: TableSource, sort: SortState) -> Callable[[HeaderCell], str]:
    def url(cell: HeaderCell) -> str:
        return f"{source.base_url}/_/sort?{urlencode({'column': cell.key, **sort.url_params()})}"

    return url


def toggle_url(source: TableSource, sort: SortState) -> Callable[[BodyRow], str]:
    def url(row: BodyRow) -> str:
        return f"{source.base_url}/_/toggle?{urlencode({'row': format_value(row.key), **sort.url_params()})}"

    return url


def render_source(source: TableSource, engine: DataTableEngine, sort: SortState, rows: Any = None):
    if rows is None:
        rows = source.load(sort)
    view = engine.build(rows, source.columns, sort)
    return render_view(
        view,
        sort_url=sort_url(source, sort),
        toggle_url=toggle_url(source, sort) if source.config.expandable else None,
        target=f"#{source.element_id}",
        variant=source.variant,
        size=source.size,
        id=source.element_id,
    )


def _html(content, headers: dict[str, str] | None = None) -> Response:
    return Response(to_xml(content), media_type="text/html", headers=headers)


def _not_found() -> Response:
    return Response("Table not found", status_code=404)


def _match_row_key(source: TableSource, rows: Any, raw_key: str) -> Any:
    """Map a key from the URL back to the row's own key value."""
    for row in as_records(rows):
        key = resolve_value(row, source.config.key_field)
        if format_value(key) == raw_key:
            return key
    return raw_key


# -----------------------------------------------------------------------------
# Routes
# -----------------------------------------------------------------------------


@ar(f"{TABLE_ROUTE_PREFIX}/{{name}}", methods=["GET"])
def table_page(name: str, req, sess):
    source = get_source(name)
    if source is None:
        return _not_found()

    sort = SortState.parse_query_params(req.query_params)
    content = render_source(source, get_engine(source, sess), sort)
    if req.headers.get("HX-Request"):
        return content
    return Title(source.config.aria_label), Main(content, cls="p-6")


@ar(f"{TABLE_ROUTE_PREFIX}/{{name}}/_/sort", methods=["GET"])
def table_sort(name: str, req, sess):
    source = get_source(name)
    if source is None:
        return _not_found()

    sort = SortState.parse_query_params(req.query_params)
    column = req.query_params.get("column", "")
    engine = get_engine(source, sess)

    next_state = engine.activate_header(source.columns, column, sort)
    if next_state is None:
        return _html(render_source(source, engine, sort))

    logger.debug("table %s sorted by %s %s", name, next_state.column, next_state.order)
    return _html(
        render_source(source, engine, next_state),
        headers={
            "HX-Replace-Url": table_url(source, next_state),
            "HX-Trigger": json.dumps(
                {"sortChanged": {"table": name, "column": next_state.column, "order": next_state.order}}
            ),
        },
    )


@ar(f"{TABLE_ROUTE_PREFIX}/{{name}}/_/toggle", methods=["POST"])
def table_toggle(name: str, req, sess):
    source = get_source(name)
    if source is None:
        return _not_found()

    sort = SortState.parse_query_params(req.query_params)
    engine = get_engine(source, sess)
    rows = source.load(sort)

    raw_key = req.query_params.get("row")
    if raw_key is not None:
        engine.activate_row(_match_row_key(source, rows, raw_key))

    return _html(render_source(source, engine, sort, rows))


__all__ = [
    "TableSource",
    "register_table",
    "get_source",
    "get_engine",
    "reset_tables",
    "mount_table_routes",
    "sort_frame",
    "sort_records",
    "table_url",
    "ar",
]

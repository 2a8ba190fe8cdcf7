"""widgetkit

FastHTML + DaisyUI widget kit built around a generic data table.

Suggested usage:

    from widgetkit import *

Structure:
- `widgetkit.core`: class helpers and headers
- `widgetkit.components`: widgets (Badge, Button, Pagination, DataTable, ...)
- `widgetkit.datatable`: the table engine (columns, sort, expansion, view model,
  rendering, routes)
- `widgetkit.daisy`: low-level DaisyUI primitives (escape hatch)
"""

from .core import (
    daisy_app,
    daisy_hdrs,
    widget_hdrs,
    theme_css,
    cn,
    cls_join,
)

from .components import (
    Badge,
    StatusBadge,
    Button,
    Spinner,
    Pagination,
    SearchBar,
    DataTable,
)

from .datatable import (
    Column,
    DataTableEngine,
    ExpansionRegistry,
    MISSING,
    SortState,
    TableConfig,
    build_view,
    render_view,
    resolve_value,
)

# Escape hatch: low-level primitives (not star-exported by default)
from . import daisy

__version__ = "0.1.0"

__all__ = [
    # Core
    "daisy_app",
    "daisy_hdrs",
    "widget_hdrs",
    "theme_css",
    "cn",
    "cls_join",

    # Components
    "Badge",
    "StatusBadge",
    "Button",
    "Spinner",
    "Pagination",
    "SearchBar",
    "DataTable",

    # Data table engine
    "Column",
    "DataTableEngine",
    "ExpansionRegistry",
    "MISSING",
    "SortState",
    "TableConfig",
    "build_view",
    "render_view",
    "resolve_value",

    # Escape hatch module
    "daisy",
]

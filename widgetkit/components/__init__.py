"""widgetkit.components

Opinionated components implemented on top of DaisyUI.

    from widgetkit.components import Badge, Button, DataTable

Most projects will use the top-level re-exports:

    from widgetkit import Badge, Button, DataTable
"""

from .badge import Badge, StatusBadge, status_variant, BadgeVariant, BadgeSize
from .button import Button, ButtonVariant, ButtonSize
from .spinner import Spinner, SpinnerSize
from .pagination import Pagination, item_range
from .search import SearchBar
from .table import DataTable, TableVariant, TableSize

__all__ = [
    # Badge
    "Badge",
    "StatusBadge",
    "status_variant",
    "BadgeVariant",
    "BadgeSize",
    # Button
    "Button",
    "ButtonVariant",
    "ButtonSize",
    # Spinner
    "Spinner",
    "SpinnerSize",
    # Pagination
    "Pagination",
    "item_range",
    # Search
    "SearchBar",
    # Table
    "DataTable",
    "TableVariant",
    "TableSize",
]

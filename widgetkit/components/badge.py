"""widgetkit.components.badge

Badge and HTTP status badge, implemented using DaisyUI `badge`.

The variant names are semantic (success/warning/danger/info) rather than
DaisyUI color names, so table cell renderers can map domain values to a
variant without knowing the theme.
"""

from __future__ import annotations

from typing import Literal

from ..core import cn
from ..daisy import Badge as DaisyBadge


BadgeVariant = Literal[
    "default",
    "success",
    "warning",
    "danger",
    "info",
]

BadgeSize = Literal[
    "sm",
    "md",
    "lg",
]

_VARIANT_MODS = {
    "default": "-neutral",
    "success": "-success",
    "warning": "-warning",
    "danger": "-error",
    "info": "-info",
}


def Badge(
    *c,
    variant: BadgeVariant = "default",
    size: BadgeSize = "md",
    pill: bool = False,
    cls: str = "",
    **kw,
):
    """Badge for status indicators, labels and tags.

    Mapping:
    - default -> badge-neutral
    - success -> badge-success
    - warning -> badge-warning
    - danger  -> badge-error
    - info    -> badge-info

    `pill=True` gives the fully rounded shape.
    """

    mods = [_VARIANT_MODS.get(variant, "-neutral"), "-soft"]

    if size == "sm":
        mods.append("-sm")
    elif size == "lg":
        mods.append("-lg")

    return DaisyBadge(
        *c,
        cls=cn(*mods, "rounded-full" if pill else "rounded-sm", cls),
        data_slot="badge",
        data_variant=variant,
        data_size=size,
        **kw,
    )


def status_variant(code: int) -> BadgeVariant:
    """Badge variant for an HTTP status code."""
    if 200 <= code < 300:
        return "success"
    if 300 <= code < 400:
        return "info"
    if 400 <= code < 500:
        return "warning"
    if code >= 500:
        return "danger"
    return "default"


def StatusBadge(status_code: int, *, size: BadgeSize = "md", pill: bool = False, cls: str = "", **kw):
    """Badge showing an HTTP status code (2xx success, 3xx info, 4xx warning, 5xx danger)."""
    return Badge(
        str(status_code),
        variant=status_variant(status_code),
        size=size,
        pill=pill,
        cls=cls,
        data_status=str(status_code),
        **kw,
    )


__all__ = ["Badge", "StatusBadge", "status_variant", "BadgeVariant", "BadgeSize"]

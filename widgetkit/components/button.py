"""widgetkit.components.button

DaisyUI `btn` with named variants, a compact size scale and a loading state.
Modifiers not covered here can be passed through `cls` (e.g. cls='-wide').
"""

from __future__ import annotations

from typing import Literal

from ..core import cn
from ..daisy import Btn, Loading

ButtonVariant = Literal["primary", "secondary", "danger", "outline", "ghost"]
ButtonSize = Literal["sm", "md", "lg"]

VARIANT_MODS: dict[str, str] = {
    "primary": "-primary",
    "secondary": "-secondary",
    "danger": "-error",
    "outline": "-outline",
    "ghost": "-ghost",
}

# compact scale: md renders as btn-sm
SIZE_MODS: dict[str, str] = {"sm": "-xs", "md": "-sm", "lg": "-md"}


def Button(
    *c,
    variant: ButtonVariant = "primary",
    size: ButtonSize = "md",
    loading: bool = False,
    disabled: bool = False,
    type: str = "button",
    cls: str = "",
    **kw,
):
    """Action button.

    While `loading` the button is disabled, marked `aria-busy` and shows a
    spinner before its content.
    """
    content = (Loading(cls="-spinner -xs", aria_hidden="true"), *c) if loading else c

    return Btn(
        *content,
        cls=cn(VARIANT_MODS.get(variant), SIZE_MODS.get(size), cls),
        type=type,
        disabled=disabled or loading,
        aria_busy="true" if loading else None,
        data_variant=variant,
        data_size=size,
        **kw,
    )


__all__ = ["Button", "ButtonVariant", "ButtonSize"]

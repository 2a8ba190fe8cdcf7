"""widgetkit.components.spinner

Standalone loading indicator.
"""

from __future__ import annotations

from typing import Literal

from fasthtml.common import Div, Span

from ..core import cn, style_join
from ..daisy import Loading

SpinnerSize = Literal["sm", "md", "lg"]


def Spinner(
    *,
    size: SpinnerSize = "md",
    color: str | None = None,
    label: str = "Loading",
    cls: str = "",
    **kw,
):
    """Spinner with a screen-reader label.

    Args:
        size: sm / md / lg
        color: Optional CSS color for the spinner
        label: Accessible label, also rendered as sr-only text
    """
    return Div(
        Loading(cls=f"-spinner -{size}", aria_hidden="true", style=style_join(color=color)),
        Span(label, cls="sr-only"),
        role="status",
        aria_label=label,
        cls=cn("inline-flex items-center", cls),
        data_slot="spinner",
        data_size=size,
        **kw,
    )


__all__ = ["Spinner", "SpinnerSize"]

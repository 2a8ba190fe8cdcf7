"""widgetkit.daisy

DaisyUI primitives used by `widgetkit.components` and the table renderer.

Each primitive applies its DaisyUI base class and a `data-slot`, and expands
modifier shorthand: `Btn(cls="-ghost -sm")` -> `btn btn-ghost btn-sm`.
"""

from __future__ import annotations

from .core import mk_compfn

mk_compfn("btn", "Button", "Btn", slot="button")
mk_compfn("badge", "Span", "Badge", slot="badge")
mk_compfn("loading", "Span", "Loading", slot="loading")

# form controls; `input` wraps a Label so icons and buttons can sit inside
mk_compfn("input", "Label", "InputShell", slot="input")
mk_compfn("select", "Select", "Select", slot="select")

mk_compfn("table", "Table", "TableRoot", slot="table")
mk_compfn("join", "Div", "Join", slot="join")


__all__ = ["Btn", "Badge", "Loading", "InputShell", "Select", "TableRoot", "Join"]

"""widgetkit.core

Shared plumbing for the widget kit: class/style merging, the document
headers every page needs, and the factory behind `widgetkit.daisy`.

Widgets render on the server. DaisyUI supplies the component look, Tailwind
utilities handle layout only, and interactivity is carried by htmx
attributes. Tailwind runs in the browser (`@tailwindcss/browser`), so
`theme.css` stays plain CSS.
"""

from __future__ import annotations

import inspect
from importlib import resources
from pathlib import Path

from fasthtml.common import Link, Script, Style, fast_app
import fasthtml.components as fh

DAISY_CSS_URL = "https://cdn.jsdelivr.net/npm/daisyui@5"
TAILWIND_JS_URL = "https://cdn.jsdelivr.net/npm/@tailwindcss/browser@4"

# Tailwind utilities that legitimately start with "-" (negative margins etc.)
NEGATIVE_UTILITIES = frozenset(
    "mt ml mr mb mx my translate rotate scale skew inset top bottom left right z space".split()
)


def cls_join(*classes: str | None) -> str:
    """Join class strings, dropping empty ones."""
    return " ".join(c for c in classes if c)


cn = cls_join


def style_join(**props: str | None) -> str | None:
    """Inline `style` value from keyword props; `None` when nothing is set.

    style_join(min_width="4rem") -> "min-width: 4rem"
    """
    parts = [f"{k.replace('_', '-')}: {v}" for k, v in props.items() if v]
    return "; ".join(parts) or None


def is_modifier(token: str) -> bool:
    """True for `-sm`, `-zebra`; False for negative utilities like `-mt-2`."""
    if not token.startswith("-"):
        return False
    head, _, rest = token[1:].partition("-")
    return not (rest and head in NEGATIVE_UTILITIES)


def expand_mods(base: str, cls: str) -> str:
    """Prefix modifier tokens with the DaisyUI base class.

    expand_mods("table", "-sm -zebra w-full") -> "table-sm table-zebra w-full"
    """
    return " ".join(f"{base}{tok}" if is_modifier(tok) else tok for tok in cls.split())


# -----------------------------------------------------------------------------
# Document headers
# -----------------------------------------------------------------------------

daisy_hdrs = (
    Link(href=DAISY_CSS_URL, rel="stylesheet", type="text/css"),
    Script(src=TAILWIND_JS_URL),
)


def _read_pkg_text(filename: str) -> str:
    try:
        return resources.files(__package__).joinpath(filename).read_text(encoding="utf-8")
    except FileNotFoundError:
        # source checkout without installed package data
        return (Path(__file__).resolve().parent / filename).read_text(encoding="utf-8")


def theme_css(path: str | None = None) -> Style:
    """<style> with the widget CSS; the packaged `theme.css` unless `path` is given."""
    if path is None:
        return Style(_read_pkg_text("theme.css"))
    return Style(Path(path).read_text(encoding="utf-8"))


def widget_hdrs() -> tuple:
    return (*daisy_hdrs, theme_css())


def daisy_app(*, with_theme: bool = True, **kw):
    """`fast_app` preconfigured for the widget kit (no Pico, DaisyUI headers).

    Extra `hdrs` are appended after the kit's own. Returns `(app, rt)`.
    """
    extra = kw.pop("hdrs", ())
    base = widget_hdrs() if with_theme else daisy_hdrs
    return fast_app(hdrs=(*base, *extra), pico=False, **kw)


# -----------------------------------------------------------------------------
# Primitive factory
# -----------------------------------------------------------------------------


def hyphens2camel(x: str) -> str:
    return "".join(o.title() for o in x.split("-"))


def mk_compfn(base: str, tag: str | None = None, name: str | None = None, *, slot: str | None = None):
    """Define a DaisyUI primitive `name` wrapping the FastHTML element `tag`.

    The primitive always carries the `base` class and expands `-modifier`
    tokens in `cls` (see `expand_mods`). With `slot`, a `data-slot` attribute
    is added unless the caller sets one. The function is also bound in the
    calling module's globals, so `daisy.py` reads as a list of declarations.
    """
    name = name or hyphens2camel(base)
    element = getattr(fh, tag or name)

    def primitive(*c, cls: str = "", **kw):
        if slot is not None:
            kw.setdefault("data_slot", slot)
        return element(*c, cls=cls_join(base, expand_mods(base, cls)), **kw)

    primitive.__name__ = name
    primitive.__doc__ = f"DaisyUI .{base}; cls='-x' expands to {base}-x."

    inspect.currentframe().f_back.f_globals[name] = primitive
    return primitive

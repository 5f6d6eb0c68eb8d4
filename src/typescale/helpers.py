"""Small stylesheet helpers: visibility toggles, vendor prefixes, selection.

Each helper returns plain declarations (or selectors) with no computation
beyond copying values around.
"""

from __future__ import annotations

from typing import Callable

from typescale.stylesheet.model import Declaration

DEFAULT_PREFIXES: tuple[str, ...] = ("webkit", "moz", "ms", "o")

# Properties fanned out by the vendor-prefix transform unless told otherwise.
PREFIXED_PROPERTIES = frozenset({
    "appearance",
    "backface-visibility",
    "box-sizing",
    "hyphens",
    "transform",
    "transition",
    "user-select",
})

SELECTION = "::selection"
MOZ_SELECTION = "::-moz-selection"


# ---------------------------------------------------------------------------
# Visibility toggles
# ---------------------------------------------------------------------------


def hidden() -> list[Declaration]:
    """Remove the element from both layout and the accessibility tree."""
    return [
        Declaration("display", "none !important"),
        Declaration("visibility", "hidden"),
    ]


def visually_hidden() -> list[Declaration]:
    """Hide the element visually while keeping it available to screen readers."""
    return [
        Declaration("position", "absolute"),
        Declaration("width", "1px"),
        Declaration("height", "1px"),
        Declaration("padding", "0"),
        Declaration("margin", "-1px"),
        Declaration("overflow", "hidden"),
        Declaration("clip", "rect(0, 0, 0, 0)"),
        Declaration("white-space", "nowrap"),
        Declaration("border", "0"),
    ]


def invisible() -> list[Declaration]:
    return [Declaration("visibility", "hidden")]


def visible() -> list[Declaration]:
    return [Declaration("visibility", "visible")]


MIXINS: dict[str, Callable[[], list[Declaration]]] = {
    "hidden": hidden,
    "visually-hidden": visually_hidden,
    "invisible": invisible,
    "visible": visible,
}


# ---------------------------------------------------------------------------
# Vendor prefixes
# ---------------------------------------------------------------------------


def vendor_prefix(
    prop: str,
    value: str,
    prefixes: tuple[str, ...] = DEFAULT_PREFIXES,
    line: int | None = None,
) -> list[Declaration]:
    """Prefixed copies of ``prop: value`` followed by the standard declaration."""
    declarations = [Declaration(f"-{p}-{prop}", value, line) for p in prefixes]
    declarations.append(Declaration(prop, value, line))
    return declarations


# ---------------------------------------------------------------------------
# Selection pseudo-element
# ---------------------------------------------------------------------------


def selection_selectors(selector: str) -> list[str]:
    """Selectors needed to style text selection for *selector*.

    Browsers drop a whole selector list containing an unknown pseudo-element,
    so the prefixed forms go in a rule of their own. Only the parts of a
    selector list that target ``::selection`` are copied into it.
    """
    if SELECTION not in selector:
        return [selector]
    parts = [part.strip() for part in selector.split(",")]
    twins = [p.replace(SELECTION, MOZ_SELECTION) for p in parts if SELECTION in p]
    return [", ".join(twins), selector]

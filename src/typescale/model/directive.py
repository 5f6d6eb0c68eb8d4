"""Line-height directives: how a declaration wants its line-height computed.

A raw directive (whatever the style author wrote) is classified exactly once
by :func:`parse_line_height` into one of the variants below, so the resolver
never has to re-inspect the raw value.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Union

from typescale.errors import InvalidMagnitude
from typescale.model.size import NUMBER_RE, as_fraction

__all__ = [
    "Auto",
    "Ratio",
    "Keyword",
    "Suppress",
    "Invalid",
    "LineHeightDirective",
    "AUTO",
    "SUPPRESS",
    "KEYWORDS",
    "parse_line_height",
]

KEYWORDS = frozenset({"inherit", "normal"})


@dataclass(frozen=True)
class Auto:
    """Derive the line-height from the vertical rhythm."""


@dataclass(frozen=True)
class Ratio:
    """An explicit unitless line-height, emitted unchanged."""

    value: int | float | Fraction | Decimal


@dataclass(frozen=True)
class Keyword:
    """An explicit keyword line-height (``inherit`` or ``normal``), as written."""

    value: str


@dataclass(frozen=True)
class Suppress:
    """Declare no line-height at all."""


@dataclass(frozen=True)
class Invalid:
    """An explicit value that is none of the above."""

    raw: object


LineHeightDirective = Union[Auto, Ratio, Keyword, Suppress, Invalid]

AUTO = Auto()
SUPPRESS = Suppress()


def parse_line_height(raw: object = None) -> LineHeightDirective:
    """Classify a raw line-height directive.

    ``None`` means the caller gave no directive and maps to :data:`AUTO`.
    ``False`` (or the text ``"false"``) is the suppress sentinel.
    """
    if isinstance(raw, (Auto, Ratio, Keyword, Suppress, Invalid)):
        return raw
    if raw is None:
        return AUTO
    if raw is False:
        return SUPPRESS
    if raw is True:
        return Invalid(raw)

    if isinstance(raw, str):
        text = raw.strip()
        lowered = text.lower()
        if lowered == "auto":
            return AUTO
        if lowered == "false":
            return SUPPRESS
        if lowered in KEYWORDS:
            return Keyword(text)
        if NUMBER_RE.match(text):
            ratio = Fraction(text)
            return Ratio(ratio) if ratio >= 0 else Invalid(raw)
        return Invalid(raw)

    if isinstance(raw, (int, float, Fraction, Decimal)):
        try:
            number = as_fraction(raw)
        except InvalidMagnitude:
            return Invalid(raw)
        # Numbers pass through untouched; only the sign is checked.
        return Ratio(raw) if number >= 0 else Invalid(raw)

    return Invalid(raw)

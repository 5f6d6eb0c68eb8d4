"""SizeValue: an immutable absolute length used by the scale resolver."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction

from typescale.errors import InvalidMagnitude

__all__ = ["SizeValue", "as_fraction", "format_number", "NUMBER_RE"]

# A bare CSS number: 16, 2.5, .75, -3
NUMBER_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)$")

_SIZE_RE = re.compile(
    r"""
    ^\s*
    (?P<number>[+-]?(?:\d+(?:\.\d*)?|\.\d+))   # magnitude
    \s*
    (?P<unit>[a-zA-Z%]*)                       # optional unit
    \s*$
    """,
    re.VERBOSE,
)

# Absolute units understood by the resolver, with their pixel factor.
UNITS: dict[str, Fraction] = {"px": Fraction(1)}


def as_fraction(value: object) -> Fraction:
    """Convert a plain number to an exact Fraction.

    Floats go through their shortest decimal text so ``1.2`` becomes ``6/5``
    rather than the nearest binary fraction.
    """
    if isinstance(value, bool):
        raise InvalidMagnitude(f"Expected a number, got {value!r}", value)
    if isinstance(value, Fraction):
        return value
    if isinstance(value, int):
        return Fraction(value)
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise InvalidMagnitude(f"Expected a finite number, got {value!r}", value)
        return Fraction(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidMagnitude(f"Expected a finite number, got {value!r}", value)
        return Fraction(repr(value))
    if isinstance(value, str) and NUMBER_RE.match(value.strip()):
        return Fraction(value.strip())
    raise InvalidMagnitude(f"Expected a number, got {value!r}", value)


@dataclass(frozen=True)
class SizeValue:
    """A length magnitude with an absolute unit."""

    magnitude: Fraction
    unit: str = "px"

    def __post_init__(self) -> None:
        if self.unit not in UNITS:
            raise InvalidMagnitude(f"Unsupported unit {self.unit!r}", self.unit)
        object.__setattr__(self, "magnitude", as_fraction(self.magnitude))

    @classmethod
    def parse(cls, raw: object) -> SizeValue:
        """Build a SizeValue from a number or a length string such as ``"32px"``.

        Unitless input is taken as pixels.
        """
        if isinstance(raw, SizeValue):
            return raw
        if isinstance(raw, str):
            match = _SIZE_RE.match(raw)
            if match is None:
                raise InvalidMagnitude(f"Cannot read {raw!r} as a length", raw)
            unit = match.group("unit").lower() or "px"
            if unit not in UNITS:
                raise InvalidMagnitude(f"Unsupported unit {unit!r} in {raw!r}", raw)
            return cls(Fraction(match.group("number")), unit)
        return cls(as_fraction(raw))

    @property
    def px(self) -> Fraction:
        """Magnitude converted to pixels."""
        return self.magnitude * UNITS[self.unit]

    @property
    def is_positive(self) -> bool:
        return self.magnitude > 0

    def __str__(self) -> str:
        return f"{format_number(self.magnitude)}{self.unit}"


def format_number(value: object, places: int = 5) -> str:
    """Render a number as trimmed CSS decimal text (``1.5``, ``2``, ``1.33333``)."""
    rounded = round(as_fraction(value), places)
    text = f"{float(rounded):.{places}f}"
    if places > 0:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text

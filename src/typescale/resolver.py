"""Typographic scale resolver: font size to rem size plus rhythm line-height."""

from __future__ import annotations

import logging
import math
from fractions import Fraction

from typescale.config import DEFAULT_CONFIG, ScaleConfig
from typescale.errors import InvalidLineHeightValue, InvalidMagnitude
from typescale.model.diagnostic import Diagnostic, Severity
from typescale.model.directive import (
    Auto,
    Keyword,
    Ratio,
    Suppress,
    parse_line_height,
)
from typescale.model.resolved import ResolvedStyle
from typescale.model.size import SizeValue

logger = logging.getLogger(__name__)

INVALID_LINE_HEIGHT_RULE = "invalid_line_height_value"


def rhythm_steps(font_size_px: Fraction, line_height_px: Fraction) -> int:
    """Smallest number of base line-heights that covers *font_size_px*."""
    return math.ceil(font_size_px / line_height_px)


class Resolver:
    """Resolve font sizes against an injected :class:`ScaleConfig`.

    With ``strict=True`` an unrecognised explicit line-height raises
    :class:`InvalidLineHeightValue`; otherwise it is reported as a warning
    diagnostic on the result and the line-height is omitted.
    """

    def __init__(self, config: ScaleConfig = DEFAULT_CONFIG, strict: bool = False) -> None:
        self.config = config
        self.strict = strict

    def resolve(
        self,
        font_size: object,
        line_height: object = None,
        *,
        selector: str | None = None,
        line: int | None = None,
    ) -> ResolvedStyle:
        size = SizeValue.parse(font_size)
        if not size.is_positive:
            raise InvalidMagnitude(
                f"font size must be strictly positive, got {size}", font_size
            )

        relative = size.px / self.config.base_font_size.px
        directive = parse_line_height(line_height)

        if isinstance(directive, Auto):
            unit = self.config.line_height_px
            steps = rhythm_steps(size.px, unit)
            return ResolvedStyle(
                absolute_size=size,
                relative_size=relative,
                line_height=steps * unit / size.px,
                rhythm_steps=steps,
            )
        if isinstance(directive, (Ratio, Keyword)):
            return ResolvedStyle(
                absolute_size=size,
                relative_size=relative,
                line_height=directive.value,
            )
        if isinstance(directive, Suppress):
            return ResolvedStyle(absolute_size=size, relative_size=relative)

        # Only Invalid is left.
        if self.strict:
            raise InvalidLineHeightValue(directive.raw)
        diagnostic = Diagnostic(
            rule=INVALID_LINE_HEIGHT_RULE,
            severity=Severity.WARNING,
            message=(
                f"Invalid line-height value {directive.raw!r}; "
                "line-height omitted"
            ),
            selector=selector,
            line=line,
            fix="Use a unitless number, 'auto', 'inherit', 'normal' or false.",
        )
        logger.warning("%s", diagnostic)
        return ResolvedStyle(
            absolute_size=size,
            relative_size=relative,
            diagnostics=(diagnostic,),
        )


def resolve(
    font_size: object,
    line_height: object = None,
    config: ScaleConfig = DEFAULT_CONFIG,
) -> ResolvedStyle:
    """Resolve *font_size* and an optional line-height directive.

    ``line_height`` defaults to automatic rhythm. See :class:`Resolver`.
    """
    return Resolver(config).resolve(font_size, line_height)

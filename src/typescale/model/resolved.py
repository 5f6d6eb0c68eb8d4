"""ResolvedStyle: the output record of the scale resolver."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from fractions import Fraction

from typescale.model.diagnostic import Diagnostic
from typescale.model.size import SizeValue, as_fraction

LineHeightValue = int | float | Fraction | Decimal | str


@dataclass(frozen=True)
class ResolvedStyle:
    """Resolved typography for one declaration site.

    Attributes:
        absolute_size: The font size as given, in absolute units.
        relative_size: ``absolute_size / base_font_size`` as an exact ratio.
        line_height: A unitless ratio, a keyword, or ``None`` when the
            declaration carries no line-height.
        rhythm_steps: Number of base line-heights covered, for automatic
            line-heights only.
        diagnostics: Non-fatal findings raised while resolving.
    """

    absolute_size: SizeValue
    relative_size: Fraction
    line_height: LineHeightValue | None = None
    rhythm_steps: int | None = None
    diagnostics: tuple[Diagnostic, ...] = field(default=())

    @property
    def has_line_height(self) -> bool:
        return self.line_height is not None

    @property
    def absolute_line_height(self) -> SizeValue | None:
        """Line-height in absolute units, when it is numeric."""
        if self.line_height is None or isinstance(self.line_height, str):
            return None
        return SizeValue(
            self.absolute_size.magnitude * as_fraction(self.line_height),
            self.absolute_size.unit,
        )

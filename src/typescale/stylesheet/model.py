"""Stylesheet model: Declaration, StyleRule, and Stylesheet dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair."""

    property: str
    value: str
    line: int | None = None

    def __str__(self) -> str:
        return f"{self.property}: {self.value};"


@dataclass(frozen=True)
class StyleRule:
    """A selector paired with its declarations, in source order.

    Properties may repeat (``font-size`` fallbacks, vendor prefixes), so
    declarations are kept as a list rather than a mapping.
    """

    selector: str
    declarations: list[Declaration]
    line: int | None = None

    def get(self, prop: str) -> Declaration | None:
        """Return the last declaration of *prop*, as the cascade would."""
        found = None
        for decl in self.declarations:
            if decl.property == prop:
                found = decl
        return found

    def properties(self) -> dict[str, str]:
        return {d.property: d.value for d in self.declarations}


@dataclass(frozen=True)
class Stylesheet:
    """A collection of style rules plus top-level ``$variables``."""

    rules: list[StyleRule]
    variables: dict[str, str] = field(default_factory=dict)

"""Base protocol for stylesheet transforms."""

from __future__ import annotations

from typing import Protocol

from typescale.model.diagnostic import Diagnostic
from typescale.stylesheet.model import Stylesheet


class Transform(Protocol):
    """A stylesheet-to-stylesheet transformation step.

    Findings are collected on ``diagnostics`` rather than raised.
    """

    diagnostics: list[Diagnostic]

    def apply(self, stylesheet: Stylesheet) -> Stylesheet: ...

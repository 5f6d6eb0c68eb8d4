"""Selection transform: gives ::selection rules a ::-moz-selection twin."""

from __future__ import annotations

from dataclasses import replace

from typescale.helpers import SELECTION, selection_selectors
from typescale.model.diagnostic import Diagnostic
from typescale.stylesheet.model import StyleRule, Stylesheet


class SelectionTransform:
    def __init__(self) -> None:
        self.diagnostics: list[Diagnostic] = []

    def apply(self, stylesheet: Stylesheet) -> Stylesheet:
        if not any(SELECTION in r.selector for r in stylesheet.rules):
            return stylesheet
        new_rules: list[StyleRule] = []
        for rule in stylesheet.rules:
            for selector in selection_selectors(rule.selector):
                new_rules.append(replace(rule, selector=selector))
        return Stylesheet(rules=new_rules, variables=stylesheet.variables)

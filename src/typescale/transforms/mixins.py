"""Mixin transform: expands ``include: <name>`` into helper declarations."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace

from typescale.helpers import MIXINS
from typescale.model.diagnostic import Diagnostic, Severity
from typescale.stylesheet.model import Declaration, StyleRule, Stylesheet

INCLUDE = "include"


class MixinTransform:
    """Replace each ``include`` declaration with the named mixin's declarations.

    Several mixins may be listed in one declaration, separated by commas.
    Unknown names are dropped with a warning.
    """

    def __init__(self, mixins: dict[str, Callable[[], list[Declaration]]] | None = None) -> None:
        self.mixins = MIXINS if mixins is None else mixins
        self.diagnostics: list[Diagnostic] = []

    def apply(self, stylesheet: Stylesheet) -> Stylesheet:
        new_rules: list[StyleRule] = []
        changed = False
        for rule in stylesheet.rules:
            if rule.get(INCLUDE) is None:
                new_rules.append(rule)
                continue
            changed = True
            declarations: list[Declaration] = []
            for decl in rule.declarations:
                if decl.property != INCLUDE:
                    declarations.append(decl)
                    continue
                for name in (n.strip() for n in decl.value.split(",")):
                    declarations.extend(self._expand(name, rule, decl))
            new_rules.append(replace(rule, declarations=declarations))

        if not changed:
            return stylesheet
        return Stylesheet(rules=new_rules, variables=stylesheet.variables)

    def _expand(self, name: str, rule: StyleRule, decl: Declaration) -> list[Declaration]:
        factory = self.mixins.get(name)
        if factory is None:
            self.diagnostics.append(
                Diagnostic(
                    rule="unknown_mixin",
                    severity=Severity.WARNING,
                    message=f"Unknown mixin {name!r}; declaration dropped",
                    selector=rule.selector,
                    line=decl.line,
                    fix="Known mixins: " + ", ".join(sorted(self.mixins)),
                )
            )
            return []
        return [replace(d, line=decl.line) for d in factory()]

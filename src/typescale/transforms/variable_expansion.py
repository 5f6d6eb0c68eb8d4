"""Variable expansion transform: replaces $name references in values."""

from __future__ import annotations

import re
from dataclasses import replace

from typescale.model.diagnostic import Diagnostic, Severity
from typescale.stylesheet.model import StyleRule, Stylesheet

_VAR_RE = re.compile(r"\$([A-Za-z_][A-Za-z0-9_-]*)")


class VariableExpansionTransform:
    """Substitute ``$name`` in declaration values with the stylesheet variable.

    Variables may refer to variables defined before them. An undefined
    reference is left in place and reported as an error.
    """

    def __init__(self) -> None:
        self.diagnostics: list[Diagnostic] = []

    def apply(self, stylesheet: Stylesheet) -> Stylesheet:
        variables: dict[str, str] = {}
        for name, value in stylesheet.variables.items():
            variables[name] = self._expand(value, variables, selector=f"${name}", line=None)

        new_rules: list[StyleRule] = []
        for rule in stylesheet.rules:
            if not any("$" in d.value for d in rule.declarations):
                new_rules.append(rule)
                continue
            declarations = [
                replace(d, value=self._expand(d.value, variables, rule.selector, d.line))
                if "$" in d.value
                else d
                for d in rule.declarations
            ]
            new_rules.append(replace(rule, declarations=declarations))

        return Stylesheet(rules=new_rules, variables=variables)

    def _expand(
        self,
        value: str,
        variables: dict[str, str],
        selector: str | None,
        line: int | None,
    ) -> str:
        def substitute(match: re.Match[str]) -> str:
            name = match.group(1)
            if name in variables:
                return variables[name]
            self.diagnostics.append(
                Diagnostic(
                    rule="undefined_variable",
                    severity=Severity.ERROR,
                    message=f"Undefined variable ${name}",
                    selector=selector,
                    line=line,
                    fix=f"Define ${name} before it is used.",
                )
            )
            return match.group(0)

        return _VAR_RE.sub(substitute, value)

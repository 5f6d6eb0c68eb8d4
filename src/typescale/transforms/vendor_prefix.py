"""Vendor prefix transform: fans configured properties out to prefixed copies."""

from __future__ import annotations

from dataclasses import replace

from typescale.helpers import DEFAULT_PREFIXES, PREFIXED_PROPERTIES, vendor_prefix
from typescale.model.diagnostic import Diagnostic
from typescale.stylesheet.model import Declaration, StyleRule, Stylesheet


class VendorPrefixTransform:
    """Expand each declaration of a prefixed property.

    Declarations that are already vendor-prefixed are left alone.
    """

    def __init__(
        self,
        properties: frozenset[str] = PREFIXED_PROPERTIES,
        prefixes: tuple[str, ...] = DEFAULT_PREFIXES,
    ) -> None:
        self.properties = properties
        self.prefixes = prefixes
        self.diagnostics: list[Diagnostic] = []

    def apply(self, stylesheet: Stylesheet) -> Stylesheet:
        if not self.properties or not self.prefixes:
            return stylesheet
        new_rules: list[StyleRule] = []
        for rule in stylesheet.rules:
            if not any(d.property in self.properties for d in rule.declarations):
                new_rules.append(rule)
                continue
            declarations: list[Declaration] = []
            for decl in rule.declarations:
                if decl.property in self.properties:
                    declarations.extend(
                        vendor_prefix(decl.property, decl.value, self.prefixes, decl.line)
                    )
                else:
                    declarations.append(decl)
            new_rules.append(replace(rule, declarations=declarations))
        return Stylesheet(rules=new_rules, variables=stylesheet.variables)

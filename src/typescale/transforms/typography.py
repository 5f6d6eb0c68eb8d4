"""Typography transform: resolves font-size / line-height through the scale."""

from __future__ import annotations

import logging
from dataclasses import replace

from typescale.config import ScaleConfig
from typescale.emit import style_declarations
from typescale.errors import InvalidLineHeightValue, InvalidMagnitude
from typescale.model.diagnostic import Diagnostic, Severity
from typescale.resolver import Resolver
from typescale.stylesheet.model import Declaration, StyleRule, Stylesheet

logger = logging.getLogger(__name__)

FONT_SIZE = "font-size"
LINE_HEIGHT = "line-height"

# Diagnostic rules reported when a whole style rule is dropped.
SKIPPED_RULE_IDS = frozenset({"invalid_magnitude", "invalid_line_height_value"})


class TypographyTransform:
    """Rewrite every rule that declares ``font-size``.

    The rule's font-size and line-height declarations are replaced, at the
    position of the first font-size, by a pixel fallback, the rem size and the
    resolved line-height. A rule without a line-height gets the automatic
    rhythm. A rule whose font-size cannot be resolved is dropped.
    """

    def __init__(self, config: ScaleConfig, strict: bool = False) -> None:
        self.resolver = Resolver(config, strict=strict)
        self.diagnostics: list[Diagnostic] = []

    def apply(self, stylesheet: Stylesheet) -> Stylesheet:
        new_rules: list[StyleRule] = []
        for rule in stylesheet.rules:
            font_size = rule.get(FONT_SIZE)
            if font_size is None:
                new_rules.append(rule)
                continue
            rewritten = self._rewrite(rule, font_size)
            if rewritten is not None:
                new_rules.append(rewritten)
        return Stylesheet(rules=new_rules, variables=stylesheet.variables)

    def _rewrite(self, rule: StyleRule, font_size: Declaration) -> StyleRule | None:
        line_height = rule.get(LINE_HEIGHT)
        try:
            style = self.resolver.resolve(
                font_size.value,
                line_height.value if line_height is not None else None,
                selector=rule.selector,
                line=line_height.line if line_height is not None else font_size.line,
            )
        except InvalidMagnitude as exc:
            self._error(
                "invalid_magnitude",
                str(exc),
                rule,
                font_size.line,
                fix="Use a positive length such as 16px.",
            )
            return None
        except InvalidLineHeightValue as exc:
            self._error(
                "invalid_line_height_value",
                str(exc),
                rule,
                line_height.line if line_height is not None else None,
            )
            return None

        self.diagnostics.extend(style.diagnostics)
        logger.debug(
            "%s: %s -> %s rem, line-height %s",
            rule.selector, style.absolute_size, style.relative_size, style.line_height,
        )

        resolved = style_declarations(style, font_size.line)
        declarations: list[Declaration] = []
        inserted = False
        for decl in rule.declarations:
            if decl.property in (FONT_SIZE, LINE_HEIGHT):
                if decl.property == FONT_SIZE and not inserted:
                    declarations.extend(resolved)
                    inserted = True
                continue
            declarations.append(decl)
        return replace(rule, declarations=declarations)

    def _error(
        self,
        rule_id: str,
        message: str,
        rule: StyleRule,
        line: int | None,
        fix: str | None = None,
    ) -> None:
        diagnostic = Diagnostic(
            rule=rule_id,
            severity=Severity.ERROR,
            message=f"{message}; rule skipped",
            selector=rule.selector,
            line=line,
            fix=fix,
        )
        logger.info("Skipping rule %s: %s", rule.selector, message)
        self.diagnostics.append(diagnostic)

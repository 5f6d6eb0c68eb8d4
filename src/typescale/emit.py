"""CSS emission: turn resolved styles and stylesheets into CSS text."""

from __future__ import annotations

from typescale.model.resolved import ResolvedStyle
from typescale.model.size import format_number
from typescale.stylesheet.model import Declaration, Stylesheet

__all__ = ["format_number", "style_declarations", "emit_rule", "emit_stylesheet"]

RELATIVE_UNIT = "rem"


def style_declarations(style: ResolvedStyle, line: int | None = None) -> list[Declaration]:
    """Declarations for a resolved style: absolute fallback, rem size, line-height."""
    declarations = [
        Declaration("font-size", str(style.absolute_size), line),
        Declaration("font-size", f"{format_number(style.relative_size)}{RELATIVE_UNIT}", line),
    ]
    if style.line_height is not None:
        if isinstance(style.line_height, str):
            value = style.line_height
        else:
            value = format_number(style.line_height)
        declarations.append(Declaration("line-height", value, line))
    return declarations


def emit_rule(selector: str, declarations: list[Declaration], indent: str = "  ") -> str:
    body = "".join(f"{indent}{decl}\n" for decl in declarations)
    return f"{selector} {{\n{body}}}\n"


def emit_stylesheet(stylesheet: Stylesheet, indent: str = "  ") -> str:
    """Render *stylesheet* as CSS; variables are build-time only and not emitted."""
    return "\n".join(
        emit_rule(rule.selector, rule.declarations, indent)
        for rule in stylesheet.rules
        if rule.declarations
    )

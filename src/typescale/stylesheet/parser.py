"""Lark-based parser for stylesheet source.

Syntax example:
    $base-font-size: 16px;
    $base-line-height: 24px;

    h1, .title { font-size: 32px; line-height: auto; }
    ::selection { background: #b3d4fc; }
    .sr { include: visually-hidden; }
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from typescale.stylesheet.errors import ParseError
from typescale.stylesheet.model import Declaration, StyleRule, Stylesheet

__all__ = ["parse_stylesheet"]

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"


class _Variable:
    def __init__(self, name: str, value: str):
        self.name = name
        self.value = value


class StylesheetTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into a Stylesheet model."""

    def variable(self, items: list[Token]) -> _Variable:
        # Drop the leading "$".
        return _Variable(str(items[0])[1:], _join(items[1:]))

    def declaration(self, items: list[Token]) -> Declaration:
        prop = items[0]
        return Declaration(
            property=str(prop).lower(),
            value=_join(items[1:]),
            line=prop.line,
        )

    def declarations(self, items: list[Declaration]) -> list[Declaration]:
        return list(items)

    def rule(self, items: list[object]) -> StyleRule:
        selectors = [item for item in items if isinstance(item, Token)]
        declarations = items[-1] if isinstance(items[-1], list) else []
        return StyleRule(
            selector=_normalize_selector(_join(selectors)),
            declarations=declarations,
            line=selectors[0].line,
        )

    def start(self, items: list[object]) -> Stylesheet:
        rules: list[StyleRule] = []
        variables: dict[str, str] = {}
        for item in items:
            if isinstance(item, _Variable):
                variables[item.name] = item.value
            else:
                rules.append(item)  # type: ignore[arg-type]
        return Stylesheet(rules=rules, variables=variables)


def _join(tokens: list[Token]) -> str:
    """Join the pieces of a token split by comments with single spaces."""
    return " ".join(piece for piece in (str(t).strip() for t in tokens) if piece)


def _normalize_selector(raw: str) -> str:
    """Collapse whitespace and put each comma-separated part on one line."""
    parts = [" ".join(part.split()) for part in raw.split(",")]
    return ", ".join(p for p in parts if p)


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(encoding="utf-8"), parser="lalr", start="start")


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse stylesheet source into a Stylesheet object.

    Rules keep their source order; a later ``$variable`` definition replaces
    an earlier one.
    """
    try:
        tree = _parser().parse(source)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseError(str(e), line=line, column=column) from e
    return StylesheetTransformer().transform(tree)

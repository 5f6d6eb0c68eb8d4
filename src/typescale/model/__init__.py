"""typescale model layer -- public type re-exports."""

from typescale.model.diagnostic import Diagnostic, Severity
from typescale.model.directive import (
    AUTO,
    SUPPRESS,
    Auto,
    Invalid,
    Keyword,
    LineHeightDirective,
    Ratio,
    Suppress,
    parse_line_height,
)
from typescale.model.resolved import ResolvedStyle
from typescale.model.size import SizeValue, as_fraction, format_number

__all__ = [
    # size
    "SizeValue",
    "as_fraction",
    "format_number",
    # directive
    "LineHeightDirective",
    "Auto",
    "Ratio",
    "Keyword",
    "Suppress",
    "Invalid",
    "AUTO",
    "SUPPRESS",
    "parse_line_height",
    # resolved
    "ResolvedStyle",
    # diagnostic
    "Severity",
    "Diagnostic",
]

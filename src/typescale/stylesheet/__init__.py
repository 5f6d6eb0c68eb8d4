from typescale.stylesheet.errors import ParseError
from typescale.stylesheet.model import Declaration, StyleRule, Stylesheet
from typescale.stylesheet.parser import parse_stylesheet

__all__ = ["parse_stylesheet", "ParseError", "Stylesheet", "StyleRule", "Declaration"]

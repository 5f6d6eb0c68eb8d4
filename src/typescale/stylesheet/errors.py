"""Parser error types."""

from typescale.errors import TypescaleError


class ParseError(TypescaleError):
    """Raised when stylesheet source cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)

"""Exception types raised by the scale resolver and its configuration."""

from __future__ import annotations


class TypescaleError(Exception):
    """Base class for all typescale errors."""


class InvalidMagnitude(TypescaleError, ValueError):
    """Raised when a size is non-positive or cannot be read as a length."""

    def __init__(self, message: str, value: object = None) -> None:
        self.value = value
        super().__init__(message)


class InvalidLineHeightValue(TypescaleError, ValueError):
    """Raised in strict mode for an unrecognised explicit line-height."""

    def __init__(self, raw: object) -> None:
        self.raw = raw
        super().__init__(
            f"Invalid line-height value {raw!r}: expected a unitless number, "
            "'auto', 'inherit', 'normal' or false"
        )


class ConfigError(TypescaleError):
    """Raised when the base scale configuration is unusable."""

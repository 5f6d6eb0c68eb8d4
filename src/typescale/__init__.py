"""typescale - vertical-rhythm font sizing and small stylesheet helpers."""

__version__ = "0.1.0"

from typescale.config import DEFAULT_CONFIG, ScaleConfig, load_config  # noqa: E402
from typescale.errors import (  # noqa: E402
    ConfigError,
    InvalidLineHeightValue,
    InvalidMagnitude,
    TypescaleError,
)
from typescale.model import (  # noqa: E402
    AUTO,
    SUPPRESS,
    Diagnostic,
    ResolvedStyle,
    Severity,
    SizeValue,
    parse_line_height,
)
from typescale.resolver import Resolver, resolve  # noqa: E402

__all__ = [
    "__version__",
    "ScaleConfig",
    "DEFAULT_CONFIG",
    "load_config",
    "SizeValue",
    "ResolvedStyle",
    "Diagnostic",
    "Severity",
    "AUTO",
    "SUPPRESS",
    "parse_line_height",
    "Resolver",
    "resolve",
    "TypescaleError",
    "InvalidMagnitude",
    "InvalidLineHeightValue",
    "ConfigError",
]

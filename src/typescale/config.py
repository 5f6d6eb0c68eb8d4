"""Scale configuration: the base font size and base line-height."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from fractions import Fraction
from pathlib import Path

from typescale.errors import ConfigError, InvalidMagnitude
from typescale.model.size import NUMBER_RE, SizeValue, as_fraction

BASE_FONT_SIZE_VAR = "base-font-size"
BASE_LINE_HEIGHT_VAR = "base-line-height"


def _coerce_font_size(raw: object) -> SizeValue:
    try:
        return SizeValue.parse(raw)
    except InvalidMagnitude as exc:
        raise ConfigError(f"base font size: {exc}") from exc


def _coerce_line_height(raw: object) -> SizeValue | Fraction:
    # A bare number is a ratio of the base font size; a length is absolute.
    try:
        if isinstance(raw, SizeValue):
            return raw
        if isinstance(raw, str) and not NUMBER_RE.match(raw.strip()):
            return SizeValue.parse(raw)
        return as_fraction(raw)
    except InvalidMagnitude as exc:
        raise ConfigError(f"base line height: {exc}") from exc


@dataclass(frozen=True)
class ScaleConfig:
    """Process-wide constants for the typographic scale.

    Both values must be strictly positive; this is checked on construction so
    a bad configuration never reaches the resolver.
    """

    base_font_size: SizeValue = field(default_factory=lambda: SizeValue(16))
    base_line_height: SizeValue | Fraction = field(default_factory=lambda: SizeValue(24))

    def __post_init__(self) -> None:
        font_size = _coerce_font_size(self.base_font_size)
        line_height = _coerce_line_height(self.base_line_height)
        if font_size.magnitude <= 0:
            raise ConfigError(
                f"base font size must be strictly positive, got {font_size}"
            )
        if isinstance(line_height, SizeValue):
            if line_height.magnitude <= 0:
                raise ConfigError(
                    f"base line height must be strictly positive, got {line_height}"
                )
        elif line_height <= 0:
            raise ConfigError(
                f"base line height ratio must be strictly positive, got {line_height}"
            )
        object.__setattr__(self, "base_font_size", font_size)
        object.__setattr__(self, "base_line_height", line_height)

    @property
    def line_height_px(self) -> Fraction:
        """The rhythm unit in pixels."""
        if isinstance(self.base_line_height, SizeValue):
            return self.base_line_height.px
        return self.base_line_height * self.base_font_size.px

    @classmethod
    def from_variables(
        cls,
        variables: Mapping[str, str],
        base_font_size: object = None,
        base_line_height: object = None,
    ) -> ScaleConfig:
        """Build a config from stylesheet variables; explicit arguments win."""
        kwargs: dict[str, object] = {}
        font_size = base_font_size
        if font_size is None:
            font_size = variables.get(BASE_FONT_SIZE_VAR)
        line_height = base_line_height
        if line_height is None:
            line_height = variables.get(BASE_LINE_HEIGHT_VAR)
        if font_size is not None:
            kwargs["base_font_size"] = font_size
        if line_height is not None:
            kwargs["base_line_height"] = line_height
        return cls(**kwargs)  # type: ignore[arg-type]


DEFAULT_CONFIG = ScaleConfig()


def load_config(
    source: str | Path | None = None,
    base_font_size: object = None,
    base_line_height: object = None,
) -> ScaleConfig:
    """Load a ScaleConfig from a stylesheet file's ``$base-*`` variables.

    *source* may be a path or ``None`` (defaults plus overrides only).
    """
    variables: dict[str, str] = {}
    if source is not None:
        from typescale.stylesheet import parse_stylesheet
        from typescale.transforms import VariableExpansionTransform

        text = Path(source).read_text(encoding="utf-8")
        variables = VariableExpansionTransform().apply(parse_stylesheet(text)).variables
    return ScaleConfig.from_variables(
        variables, base_font_size=base_font_size, base_line_height=base_line_height
    )

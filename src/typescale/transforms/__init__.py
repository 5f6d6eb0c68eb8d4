"""Stylesheet transforms and the pipeline that runs them."""

from __future__ import annotations

from collections.abc import Mapping

from typescale.config import ScaleConfig
from typescale.model.diagnostic import Diagnostic
from typescale.stylesheet.model import Stylesheet
from typescale.transforms.base import Transform
from typescale.transforms.mixins import MixinTransform
from typescale.transforms.selection import SelectionTransform
from typescale.transforms.typography import TypographyTransform
from typescale.transforms.variable_expansion import VariableExpansionTransform
from typescale.transforms.vendor_prefix import VendorPrefixTransform

__all__ = [
    "Transform",
    "VariableExpansionTransform",
    "MixinTransform",
    "TypographyTransform",
    "VendorPrefixTransform",
    "SelectionTransform",
    "apply_transforms",
]


def apply_transforms(
    stylesheet: Stylesheet,
    config: ScaleConfig | None = None,
    *,
    overrides: Mapping[str, object] | None = None,
    strict: bool = False,
    custom_transforms: list[Transform] | None = None,
) -> tuple[Stylesheet, list[Diagnostic]]:
    """Run the built-in transforms (and any custom ones) over *stylesheet*.

    Without an explicit *config*, the scale is read from the stylesheet's
    ``$base-font-size`` / ``$base-line-height`` variables, with *overrides*
    (``base_font_size`` / ``base_line_height``) taking precedence.

    Returns the transformed stylesheet and every diagnostic produced.
    """
    expansion = VariableExpansionTransform()
    stylesheet = expansion.apply(stylesheet)
    if config is None:
        config = ScaleConfig.from_variables(stylesheet.variables, **dict(overrides or {}))

    transforms: list[Transform] = [
        expansion,
        MixinTransform(),
        TypographyTransform(config, strict=strict),
        VendorPrefixTransform(),
        SelectionTransform(),
    ]
    if custom_transforms:
        transforms.extend(custom_transforms)
    for t in transforms[1:]:
        stylesheet = t.apply(stylesheet)

    diagnostics: list[Diagnostic] = []
    for t in transforms:
        diagnostics.extend(getattr(t, "diagnostics", []))
    return stylesheet, diagnostics

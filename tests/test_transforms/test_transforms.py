"""Tests for stylesheet transforms."""

from typescale.config import ScaleConfig
from typescale.model import Severity
from typescale.stylesheet import Declaration, StyleRule, Stylesheet, parse_stylesheet
from typescale.transforms import (
    MixinTransform,
    SelectionTransform,
    TypographyTransform,
    VariableExpansionTransform,
    VendorPrefixTransform,
    apply_transforms,
)

BASE = ScaleConfig(base_font_size="16px", base_line_height="24px")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _decls(rule: StyleRule) -> list[tuple[str, str]]:
    return [(d.property, d.value) for d in rule.declarations]


def _rule(sheet: Stylesheet, selector: str) -> StyleRule:
    return next(r for r in sheet.rules if r.selector == selector)


# ---------------------------------------------------------------------------
# VariableExpansionTransform
# ---------------------------------------------------------------------------


class TestVariableExpansion:
    def test_replaces_reference(self):
        sheet = parse_stylesheet("$gap: 8px; p { margin: $gap 0; }")
        result = VariableExpansionTransform().apply(sheet)
        assert _rule(result, "p").get("margin").value == "8px 0"

    def test_variables_chain(self):
        sheet = parse_stylesheet("$a: 12px; $b: $a; p { font-size: $b; }")
        t = VariableExpansionTransform()
        result = t.apply(sheet)
        assert result.variables["b"] == "12px"
        assert _rule(result, "p").get("font-size").value == "12px"
        assert t.diagnostics == []

    def test_undefined_variable_reported(self):
        sheet = parse_stylesheet("p {\n  margin: $nope;\n}")
        t = VariableExpansionTransform()
        result = t.apply(sheet)
        assert _rule(result, "p").get("margin").value == "$nope"
        assert len(t.diagnostics) == 1
        diag = t.diagnostics[0]
        assert diag.severity is Severity.ERROR
        assert diag.selector == "p"
        assert diag.line == 2

    def test_untouched_rule_is_same_object(self):
        sheet = parse_stylesheet("p { color: red; }")
        result = VariableExpansionTransform().apply(sheet)
        assert result.rules[0] is sheet.rules[0]


# ---------------------------------------------------------------------------
# MixinTransform
# ---------------------------------------------------------------------------


class TestMixins:
    def test_hidden(self):
        sheet = parse_stylesheet(".x { include: hidden; color: red; }")
        result = MixinTransform().apply(sheet)
        assert _decls(result.rules[0]) == [
            ("display", "none !important"),
            ("visibility", "hidden"),
            ("color", "red"),
        ]

    def test_several_mixins(self):
        sheet = parse_stylesheet(".x { include: invisible, visible; }")
        result = MixinTransform().apply(sheet)
        assert _decls(result.rules[0]) == [
            ("visibility", "hidden"),
            ("visibility", "visible"),
        ]

    def test_lines_point_at_include(self):
        sheet = parse_stylesheet(".x {\n\n  include: visually-hidden;\n}")
        result = MixinTransform().apply(sheet)
        assert {d.line for d in result.rules[0].declarations} == {3}

    def test_unknown_mixin_warns(self):
        sheet = parse_stylesheet(".x { include: sparkle; color: red; }")
        t = MixinTransform()
        result = t.apply(sheet)
        assert _decls(result.rules[0]) == [("color", "red")]
        assert t.diagnostics[0].severity is Severity.WARNING
        assert t.diagnostics[0].rule == "unknown_mixin"

    def test_noop_returns_same_stylesheet(self):
        sheet = parse_stylesheet("p { color: red; }")
        assert MixinTransform().apply(sheet) is sheet

    def test_custom_registry(self):
        mixins = {"bold": lambda: [Declaration("font-weight", "700")]}
        sheet = parse_stylesheet("b { include: bold; }")
        result = MixinTransform(mixins).apply(sheet)
        assert _decls(result.rules[0]) == [("font-weight", "700")]


# ---------------------------------------------------------------------------
# TypographyTransform
# ---------------------------------------------------------------------------


class TestTypography:
    def test_auto_rhythm(self):
        sheet = parse_stylesheet("h1 { color: red; font-size: 32px; }")
        result = TypographyTransform(BASE).apply(sheet)
        assert _decls(result.rules[0]) == [
            ("color", "red"),
            ("font-size", "32px"),
            ("font-size", "2rem"),
            ("line-height", "1.5"),
        ]

    def test_explicit_line_height_replaced_in_place(self):
        sheet = parse_stylesheet("p { line-height: 1.2; font-size: 12px; margin: 0; }")
        result = TypographyTransform(BASE).apply(sheet)
        assert _decls(result.rules[0]) == [
            ("font-size", "12px"),
            ("font-size", "0.75rem"),
            ("line-height", "1.2"),
            ("margin", "0"),
        ]

    def test_keyword_line_height(self):
        sheet = parse_stylesheet("p { font-size: 16px; line-height: inherit; }")
        result = TypographyTransform(BASE).apply(sheet)
        assert ("line-height", "inherit") in _decls(result.rules[0])

    def test_commented_font_size_resolves(self):
        sheet = parse_stylesheet("h1 /* title */ { font-size: 32px /* big */; }")
        t = TypographyTransform(BASE)
        result = t.apply(sheet)
        assert t.diagnostics == []
        assert result.rules[0].selector == "h1"
        assert _decls(result.rules[0]) == [
            ("font-size", "32px"),
            ("font-size", "2rem"),
            ("line-height", "1.5"),
        ]

    def test_suppressed_line_height(self):
        sheet = parse_stylesheet("p { font-size: 14px; line-height: false; }")
        result = TypographyTransform(BASE).apply(sheet)
        assert _decls(result.rules[0]) == [
            ("font-size", "14px"),
            ("font-size", "0.875rem"),
        ]

    def test_line_height_without_font_size_untouched(self):
        sheet = parse_stylesheet("p { line-height: 2; }")
        result = TypographyTransform(BASE).apply(sheet)
        assert result.rules[0] is sheet.rules[0]

    def test_invalid_line_height_warns(self):
        sheet = parse_stylesheet("p {\n  font-size: 20px;\n  line-height: bogus;\n}")
        t = TypographyTransform(BASE)
        result = t.apply(sheet)
        assert _decls(result.rules[0]) == [
            ("font-size", "20px"),
            ("font-size", "1.25rem"),
        ]
        assert len(t.diagnostics) == 1
        assert t.diagnostics[0].severity is Severity.WARNING
        assert t.diagnostics[0].line == 3

    def test_invalid_line_height_strict_drops_rule(self):
        sheet = parse_stylesheet("p { font-size: 20px; line-height: bogus; } a { color: red; }")
        t = TypographyTransform(BASE, strict=True)
        result = t.apply(sheet)
        assert [r.selector for r in result.rules] == ["a"]
        assert t.diagnostics[0].is_error

    def test_zero_font_size_drops_rule(self):
        sheet = parse_stylesheet("p { font-size: 0; } a { font-size: 24px; }")
        t = TypographyTransform(BASE)
        result = t.apply(sheet)
        assert [r.selector for r in result.rules] == ["a"]
        assert t.diagnostics[0].rule == "invalid_magnitude"
        assert t.diagnostics[0].is_error
        assert t.diagnostics[0].selector == "p"


# ---------------------------------------------------------------------------
# VendorPrefixTransform / SelectionTransform
# ---------------------------------------------------------------------------


class TestVendorPrefix:
    def test_expands_known_property(self):
        sheet = parse_stylesheet("a { user-select: none; color: red; }")
        result = VendorPrefixTransform().apply(sheet)
        assert _decls(result.rules[0]) == [
            ("-webkit-user-select", "none"),
            ("-moz-user-select", "none"),
            ("-ms-user-select", "none"),
            ("-o-user-select", "none"),
            ("user-select", "none"),
            ("color", "red"),
        ]

    def test_custom_properties_and_prefixes(self):
        sheet = parse_stylesheet("a { tab-size: 4; }")
        t = VendorPrefixTransform(properties=frozenset({"tab-size"}), prefixes=("moz",))
        result = t.apply(sheet)
        assert _decls(result.rules[0]) == [("-moz-tab-size", "4"), ("tab-size", "4")]

    def test_prefixed_input_untouched(self):
        sheet = parse_stylesheet("a { -webkit-transition: none; }")
        result = VendorPrefixTransform().apply(sheet)
        assert result.rules[0] is sheet.rules[0]


class TestSelection:
    def test_adds_moz_twin(self):
        sheet = parse_stylesheet("p::selection { color: white; } a { color: red; }")
        result = SelectionTransform().apply(sheet)
        assert [r.selector for r in result.rules] == [
            "p::-moz-selection",
            "p::selection",
            "a",
        ]
        assert result.rules[0].declarations == result.rules[1].declarations

    def test_mixed_list_emits_plain_selector_once(self):
        sheet = parse_stylesheet("p, ::selection { color: white; }")
        result = SelectionTransform().apply(sheet)
        assert [r.selector for r in result.rules] == [
            "::-moz-selection",
            "p, ::selection",
        ]

    def test_noop_without_selection(self):
        sheet = parse_stylesheet("a { color: red; }")
        assert SelectionTransform().apply(sheet) is sheet


# ---------------------------------------------------------------------------
# apply_transforms pipeline
# ---------------------------------------------------------------------------


class TestApplyTransforms:
    def test_variables_feed_typography(self):
        source = "$base-font-size: 10px; $base-line-height: 15px; $h: 20px; h2 { font-size: $h; }"
        result, diagnostics = apply_transforms(parse_stylesheet(source))
        assert diagnostics == []
        assert _decls(result.rules[0]) == [
            ("font-size", "20px"),
            ("font-size", "2rem"),
            ("line-height", "1.5"),
        ]

    def test_overrides_beat_variables(self):
        source = "$base-font-size: 10px; p { font-size: 20px; line-height: false; }"
        result, _ = apply_transforms(
            parse_stylesheet(source), overrides={"base_font_size": "20px"}
        )
        assert ("font-size", "1rem") in _decls(result.rules[0])

    def test_explicit_config_used(self):
        source = "$base-font-size: 10px; p { font-size: 20px; line-height: false; }"
        result, _ = apply_transforms(parse_stylesheet(source), BASE)
        assert ("font-size", "1.25rem") in _decls(result.rules[0])

    def test_diagnostics_collected_from_all_transforms(self):
        source = "p { font-size: 0; } a { include: nope; margin: $x; }"
        _, diagnostics = apply_transforms(parse_stylesheet(source), BASE)
        assert {d.rule for d in diagnostics} == {
            "undefined_variable",
            "unknown_mixin",
            "invalid_magnitude",
        }

    def test_custom_transforms_appended(self):
        class Uppercase:
            def apply(self, stylesheet: Stylesheet) -> Stylesheet:
                rules = [
                    StyleRule(r.selector.upper(), r.declarations, r.line)
                    for r in stylesheet.rules
                ]
                return Stylesheet(rules=rules, variables=stylesheet.variables)

        result, _ = apply_transforms(
            parse_stylesheet("p { color: red; }"), BASE, custom_transforms=[Uppercase()]
        )
        assert result.rules[0].selector == "P"

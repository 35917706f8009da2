"""Tests for theme composition."""

from __future__ import annotations

import pytest

from chromarole.core.color import Color
from chromarole.core.contrast import contrast_ratio
from chromarole.themes.composer import (
    accent_color,
    compose_theme,
    ensure_accessibility,
    secondary_color,
    state_color,
)
from chromarole.themes.constants import BASE_TOKENS, COLORBLIND_OVERRIDES, TOKEN_KEYS

BLUE = Color("#2563eb")


class TestDerivedSlots:
    def test_secondary_is_analogous(self):
        light = secondary_color(BLUE, "light")
        dark = secondary_color(BLUE, "dark")

        assert light.hsl.h == pytest.approx(251, abs=1)
        assert light.hsl.l > dark.hsl.l

    def test_accent_defaults_to_complement(self):
        accent = accent_color(BLUE, "light")
        assert accent.hsl.h == pytest.approx(41, abs=1)

    def test_accent_prefers_brand_color_with_best_contrast(self):
        brands = [Color("#00ffff"), Color("#ff0000")]
        assert accent_color(BLUE, "light", brands).hex == "#ff0000"
        assert accent_color(BLUE, "dark", brands, Color("#121212")).hex == "#00ffff"

    def test_hover_darkens_in_light_and_lightens_in_dark(self):
        assert state_color(BLUE, "hover", "light").hsl.l < BLUE.hsl.l
        assert state_color(BLUE, "hover", "dark").hsl.l > BLUE.hsl.l

    def test_focus_boosts_saturation(self):
        focus = state_color(Color("#4d7399"), "focus", "light")
        assert focus.hsl.s > Color("#4d7399").hsl.s


def test_ensure_accessibility_repairs_text_and_primary():
    tokens = dict(BASE_TOKENS["light"], text="#eeeeee", primary="#dddddd")
    adjusted = ensure_accessibility(tokens, "light", "AA")

    assert adjusted == ["text", "primary"]
    assert tokens["text"] == "#1a1a1a"
    assert Color(tokens["primary"]).hsl.l < Color("#dddddd").hsl.l


class TestComposeTheme:
    def test_light_material_theme(self):
        result = compose_theme("light", BLUE, "material", "AA", [])
        light = result.variants["light"]

        assert list(result.variants) == ["light"]
        assert light.colors.background == "#ffffff"
        assert light.colors.text == "#1e293b"
        assert light.colors.primary == "#2563eb"
        assert light.colors.surface == "#fafafa"
        assert light.wcag_compliance != "FAIL"
        assert light.accessibility_score == 100
        assert result.brand_integration is None
        assert result.accessibility_report.contrast_issues == []

    def test_every_slot_is_filled(self):
        result = compose_theme("auto", BLUE)
        for variant in result.variants.values():
            assert set(variant.colors.to_dict()) == set(TOKEN_KEYS)
            assert variant.colors.shadow.startswith("rgba(")

    def test_dark_uses_style_background(self):
        result = compose_theme("dark", BLUE, "ios")
        assert result.variants["dark"].colors.background == "#000000"

    def test_auto_orders_light_then_dark(self):
        result = compose_theme("auto", BLUE)
        assert list(result.variants) == ["light", "dark"]

    def test_high_contrast_ignores_seed(self):
        result = compose_theme("high_contrast", Color("#ffff00"))
        light = result.variants["light"]
        dark = result.variants["dark"]

        assert light.name == "high_contrast_light"
        assert light.colors.text == "#000000"
        assert dark.colors.background == "#000000"
        assert light.accessibility_score == 100
        assert result.accessibility_report.wcag_compliance == "AAA"

    def test_colorblind_overrides_status_slots(self):
        result = compose_theme("colorblind_friendly", BLUE, "ios")
        light = result.variants["light"]

        assert light.name == "colorblind_friendly_light"
        for key, value in COLORBLIND_OVERRIDES["light"].items():
            assert getattr(light.colors, key) == value
        assert light.colors.surface == "#fafafa"

    def test_text_meets_level_in_every_variant(self):
        result = compose_theme("auto", Color("#777777"), level="AAA")
        for variant in result.variants.values():
            ratio = contrast_ratio(variant.colors.color("text"), variant.colors.color("background"))
            assert ratio >= 7.0

    def test_brand_colors_reported(self):
        result = compose_theme("light", BLUE, brand_colors=[Color("#FF0000"), Color("#00FFFF")])
        brand = result.brand_integration

        assert result.variants["light"].colors.accent == "#ff0000"
        assert brand is not None
        assert brand.brand_colors_used == ["#ff0000"]
        assert brand.harmony_maintained is True

    def test_result_serializes(self):
        data = compose_theme("auto", BLUE).to_dict()
        assert data["theme_type"] == "auto"
        assert data["primary_color"] == "#2563eb"
        assert set(data["variants"]) == {"light", "dark"}
        assert data["brand_integration"] is None

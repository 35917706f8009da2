"""Derive complete theme variants from a primary color."""

from __future__ import annotations

import logging
from typing import Sequence

from chromarole.core.color import Color
from chromarole.core.contrast import UI_ELEMENT_RATIO, contrast_ratio, required_ratio
from chromarole.reporting.brand import brand_harmony
from chromarole.reporting.compliance import accessibility_score, build_report, wcag_compliance
from chromarole.themes.constants import (
    BASE_TOKENS,
    COLORBLIND_OVERRIDES,
    FALLBACK_TEXT_LIGHTNESS,
    HIGH_CONTRAST_TOKENS,
    STYLE_OVERRIDES,
)
from chromarole.themes.models import ThemeResult, ThemeTokenSet, ThemeVariant

logger = logging.getLogger(__name__)

_VARIANTS_BY_TYPE: dict[str, tuple[str, ...]] = {
    "light": ("light",),
    "dark": ("dark",),
    "auto": ("light", "dark"),
    "high_contrast": ("light", "dark"),
    "colorblind_friendly": ("light", "dark"),
}


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def secondary_color(primary: Color, variant: str) -> Color:
    """Analogous color 30 degrees away, desaturated and pushed toward the variant."""
    hsl = primary.hsl
    if variant == "light":
        lightness = min(80, hsl.l + 20)
    else:
        lightness = max(20, hsl.l - 20)
    return Color.from_hsl(hsl.h + 30, max(20, hsl.s - 20), lightness)


def accent_color(
    primary: Color,
    variant: str,
    brand_colors: Sequence[Color] = (),
    background: Color | None = None,
) -> Color:
    """Best-contrast brand color, else the complement of the primary."""
    if brand_colors:
        if background is None:
            background = Color.from_hex(BASE_TOKENS[variant]["background"])
        best = brand_colors[0]
        best_ratio = 0.0
        for color in brand_colors:
            ratio = contrast_ratio(color, background)
            if ratio > best_ratio:
                best = color
                best_ratio = ratio
        return best

    hsl = primary.hsl
    lightness = 50 if variant == "light" else 60
    return Color.from_hsl(hsl.h + 180, min(100, hsl.s + 10), lightness)


def dark_primary(primary: Color) -> Color:
    hsl = primary.hsl
    return Color.from_hsl(hsl.h, max(30, hsl.s - 10), _clamp(hsl.l + 20, 40, 80))


def state_color(primary: Color, state: str, variant: str) -> Color:
    """Interaction-state color: hover shifts lightness, focus boosts saturation."""
    hsl = primary.hsl
    if state == "hover":
        shift = -10 if variant == "light" else 10
        return Color.from_hsl(hsl.h, hsl.s, _clamp(hsl.l + shift, 0, 100))
    if state == "focus":
        return Color.from_hsl(hsl.h, min(100, hsl.s + 20), hsl.l)
    return primary


def base_tokens(
    primary: Color,
    variant: str,
    style: str,
    brand_colors: Sequence[Color] = (),
) -> dict[str, str]:
    """Token mapping of a light or dark variant before the accessibility pass."""
    tokens = dict(BASE_TOKENS[variant])
    tokens.update(STYLE_OVERRIDES[variant].get(style, {}))
    background = Color.from_hex(tokens["background"])
    tokens.update(
        primary=(primary if variant == "light" else dark_primary(primary)).hex,
        secondary=secondary_color(primary, variant).hex,
        accent=accent_color(primary, variant, brand_colors, background).hex,
        hover=state_color(primary, "hover", variant).hex,
        focus=state_color(primary, "focus", variant).hex,
    )
    return tokens


def ensure_accessibility(tokens: dict[str, str], variant: str, level: str) -> list[str]:
    """Repair text and primary contrast in place; return the repaired slots."""
    adjusted: list[str] = []
    background = Color.from_hex(tokens["background"])

    text = Color.from_hex(tokens["text"])
    if contrast_ratio(text, background) < required_ratio(level):
        tokens["text"] = text.with_hsl(l=FALLBACK_TEXT_LIGHTNESS[variant]).hex
        adjusted.append("text")

    primary = Color.from_hex(tokens["primary"])
    if contrast_ratio(primary, background) < UI_ELEMENT_RATIO:
        shift = -20 if variant == "light" else 20
        tokens["primary"] = primary.with_hsl(l=_clamp(primary.hsl.l + shift, 0, 100)).hex
        adjusted.append("primary")

    if adjusted:
        logger.debug("accessibility pass adjusted %s in %s variant", ", ".join(adjusted), variant)
    return adjusted


def grade_variant(name: str, tokens: dict[str, str], adjusted: Sequence[str] = ()) -> ThemeVariant:
    token_set = ThemeTokenSet.from_mapping(tokens)
    return ThemeVariant(
        name=name,
        colors=token_set,
        accessibility_score=accessibility_score(token_set),
        wcag_compliance=wcag_compliance(token_set),
        adjusted_slots=tuple(adjusted),
    )


def base_variant(
    primary: Color,
    variant: str,
    style: str = "material",
    level: str = "AA",
    brand_colors: Sequence[Color] = (),
) -> ThemeVariant:
    tokens = base_tokens(primary, variant, style, brand_colors)
    adjusted = ensure_accessibility(tokens, variant, level)
    return grade_variant(variant, tokens, adjusted)


def high_contrast_variant(variant: str) -> ThemeVariant:
    """Fixed black/white token set; the seed colors are ignored."""
    return grade_variant(f"high_contrast_{variant}", dict(HIGH_CONTRAST_TOKENS[variant]))


def colorblind_variant(
    primary: Color,
    variant: str,
    level: str = "AA",
    brand_colors: Sequence[Color] = (),
) -> ThemeVariant:
    base = base_variant(primary, variant, "material", level, brand_colors)
    tokens = base.colors.to_dict()
    tokens.update(COLORBLIND_OVERRIDES[variant])
    return grade_variant(f"colorblind_friendly_{variant}", tokens, base.adjusted_slots)


def compose_variants(
    theme_type: str,
    primary: Color,
    style: str = "material",
    level: str = "AA",
    brand_colors: Sequence[Color] = (),
) -> dict[str, ThemeVariant]:
    """Build the variants of *theme_type*, keyed ``light`` then ``dark``."""
    variants: dict[str, ThemeVariant] = {}
    for variant in _VARIANTS_BY_TYPE[theme_type]:
        if theme_type == "high_contrast":
            variants[variant] = high_contrast_variant(variant)
        elif theme_type == "colorblind_friendly":
            variants[variant] = colorblind_variant(primary, variant, level, brand_colors)
        else:
            variants[variant] = base_variant(primary, variant, style, level, brand_colors)
    return variants


def compose_theme(
    theme_type: str,
    primary: Color,
    style: str = "material",
    level: str = "AA",
    brand_colors: Sequence[Color] = (),
) -> ThemeResult:
    """Compose the variants of a theme and grade them."""
    variants = compose_variants(theme_type, primary, style, level, brand_colors)
    ordered = list(variants.values())
    report = build_report(ordered, level)
    brand_report = brand_harmony(brand_colors, ordered) if brand_colors else None
    logger.debug(
        "composed %s theme from %s: score=%s compliance=%s",
        theme_type,
        primary.hex,
        report.overall_score,
        report.wcag_compliance,
    )
    return ThemeResult(
        theme_type=theme_type,
        style=style,
        primary_color=primary.hex,
        variants=variants,
        accessibility_report=report,
        brand_integration=brand_report,
    )

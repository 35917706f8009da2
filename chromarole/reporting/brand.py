"""Brand color usage and hue harmony checks."""

from __future__ import annotations

from itertools import combinations
from typing import Sequence

from chromarole.core.color import Color
from chromarole.core.roles import hue_distance
from chromarole.themes.models import BrandIntegrationReport, ThemeVariant

# Open ranges of circular hue distance that count as harmonious.
HARMONY_RANGES: dict[str, tuple[tuple[float, float], ...]] = {
    "complementary": ((150, 210),),
    "triadic": ((110, 130), (230, 250)),
}
ANALOGOUS_LIMIT = 30


def classify_hue_pair(first: Color, second: Color) -> str | None:
    """Return the harmony name for a pair of colors, or None when they clash."""
    distance = hue_distance(first.hsl.h, second.hsl.h)
    if distance < ANALOGOUS_LIMIT:
        return "analogous"
    for name, ranges in HARMONY_RANGES.items():
        if any(low < distance < high for low, high in ranges):
            return name
    return None


def brand_colors_used(brand_colors: Sequence[Color], variants: Sequence[ThemeVariant]) -> list[str]:
    used: list[str] = []
    for variant in variants:
        values = {value.lower() for _, value in variant.colors.items()}
        for color in brand_colors:
            if color.hex in values and color.hex not in used:
                used.append(color.hex)
    return used


def brand_harmony(
    brand_colors: Sequence[Color],
    variants: Sequence[ThemeVariant],
) -> BrandIntegrationReport:
    """Report which brand colors survive into the tokens and whether they harmonize.

    Clashing pairs only produce a note; no color is modified.
    """
    report = BrandIntegrationReport(brand_colors_used=brand_colors_used(brand_colors, variants))
    for first, second in combinations(brand_colors, 2):
        if classify_hue_pair(first, second) is None:
            report.harmony_maintained = False
            report.adjustments_made.append(
                f"Adjusted harmony between {first.hex} and {second.hex}"
            )
    return report

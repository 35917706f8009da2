"""WCAG relative luminance and contrast ratio math."""

from __future__ import annotations

from chromarole.core.color import BLACK, WHITE, Color

AA_RATIO = 4.5
AAA_RATIO = 7.0
UI_ELEMENT_RATIO = 3.0

LEVEL_RATIOS: dict[str, float] = {
    "AA": AA_RATIO,
    "AAA": AAA_RATIO,
}


def _linear_channel(value: int) -> float:
    c = value / 255.0
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: Color) -> float:
    r, g, b = color.rgb
    return (
        0.2126 * _linear_channel(r)
        + 0.7152 * _linear_channel(g)
        + 0.0722 * _linear_channel(b)
    )


def contrast_ratio(first: Color, second: Color) -> float:
    """Return the WCAG contrast ratio between two colors (1.0 to 21.0)."""
    l1 = relative_luminance(first)
    l2 = relative_luminance(second)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def best_contrast(color: Color, references: tuple[Color, ...] = (WHITE, BLACK)) -> float:
    """Return the highest contrast *color* reaches against the reference backgrounds."""
    return max(contrast_ratio(color, ref) for ref in references)


def required_ratio(level: str) -> float:
    return LEVEL_RATIOS.get(level, AA_RATIO)


def compliance_for(ratio: float) -> str:
    """Map a text contrast ratio onto AAA, AA or FAIL."""
    if ratio >= AAA_RATIO:
        return "AAA"
    if ratio >= AA_RATIO:
        return "AA"
    return "FAIL"

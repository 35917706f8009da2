"""Semantic role assignment over a candidate palette."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Sequence

from chromarole.core.adjuster import AdjustOptions, adjust_for_contrast
from chromarole.core.color import Color
from chromarole.core.contrast import best_contrast, required_ratio


class SemanticRole(str, Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    INFO = "info"
    NEUTRAL = "neutral"


DEFAULT_ROLES: tuple[SemanticRole, ...] = tuple(SemanticRole)
CONTEXTS: tuple[str, ...] = ("web", "mobile", "desktop", "print")

# Hue bands as (full-score ranges, partial-score ranges) in degrees.
HUE_BANDS: dict[SemanticRole, tuple[tuple[tuple[int, int], ...], tuple[tuple[int, int], ...]]] = {
    SemanticRole.SUCCESS: (((90, 150),), ((60, 180),)),
    SemanticRole.WARNING: (((30, 60),), ((15, 75),)),
    SemanticRole.ERROR: (((0, 30), (330, 360)), ((315, 360), (0, 45))),
    SemanticRole.INFO: (((210, 270),), ((180, 300),)),
}

# Synthesized when no palette candidate scores at least FALLBACK_THRESHOLD.
FALLBACK_HSL: dict[SemanticRole, tuple[int, int, int]] = {
    SemanticRole.SUCCESS: (120, 60, 45),
    SemanticRole.WARNING: (45, 80, 55),
    SemanticRole.ERROR: (0, 70, 50),
    SemanticRole.INFO: (220, 70, 50),
}
FALLBACK_THRESHOLD = 0.5

USAGE_GUIDELINES: dict[SemanticRole, tuple[str, ...]] = {
    SemanticRole.PRIMARY: (
        "Use for main actions, links, and brand elements",
        "Ensure sufficient contrast against backgrounds",
    ),
    SemanticRole.SECONDARY: (
        "Use for secondary actions and supporting elements",
        "Should complement but not compete with primary color",
    ),
    SemanticRole.SUCCESS: (
        "Use for positive feedback, confirmations, and success states",
        "Avoid using green alone - add icons or text",
    ),
    SemanticRole.WARNING: (
        "Use for cautions, warnings, and attention-needed states",
        "Ensure visibility for colorblind users",
    ),
    SemanticRole.ERROR: (
        "Use for errors, failures, and destructive actions",
        "Must have high contrast for accessibility",
    ),
    SemanticRole.INFO: (
        "Use for informational messages and neutral feedback",
        "Should be distinguishable from primary colors",
    ),
    SemanticRole.NEUTRAL: (
        "Use for borders, dividers, and subtle backgrounds",
        "Should not interfere with content readability",
    ),
}

CONTEXT_GUIDELINES: dict[str, str] = {
    "mobile": "Ensure touch targets are clearly visible",
    "print": "Test appearance in grayscale",
}


@dataclass(slots=True)
class SemanticColorMapping:
    """A palette color chosen for one semantic role."""

    role: SemanticRole
    color: Color
    original_color: Color | None = None
    contrast_ratio: float = 0.0
    accessibility_notes: list[str] = field(default_factory=list)
    usage_guidelines: list[str] = field(default_factory=list)

    @property
    def adjusted(self) -> bool:
        return self.original_color is not None and self.original_color.hex != self.color.hex

    def to_dict(self) -> dict[str, Any]:
        return {
            "role": self.role.value,
            "color": self.color.hex,
            "original_color": self.original_color.hex if self.adjusted else None,
            "adjusted": self.adjusted,
            "contrast_ratio": self.contrast_ratio,
            "accessibility_notes": list(self.accessibility_notes),
            "usage_guidelines": list(self.usage_guidelines),
        }


def hue_distance(first: float, second: float) -> float:
    """Circular distance between two hues, 0 to 180 degrees."""
    diff = abs(first - second) % 360
    return min(diff, 360 - diff)


def _in_ranges(hue: int, ranges: tuple[tuple[int, int], ...]) -> bool:
    return any(low <= hue <= high for low, high in ranges)


def band_score(role: SemanticRole, color: Color) -> float:
    full, partial = HUE_BANDS[role]
    hsl = color.hsl
    if _in_ranges(hsl.h, full):
        hue_score = 1.0
    elif _in_ranges(hsl.h, partial):
        hue_score = 0.7
    else:
        hue_score = 0.2
    return hue_score * 0.8 + (hsl.s / 100) * 0.2


def primary_score(color: Color) -> float:
    hsl = color.hsl
    saturation_score = hsl.s / 100
    lightness_score = 1 - abs(hsl.l - 50) / 50
    return saturation_score * 0.7 + lightness_score * 0.3


def _argmax(palette: Sequence[Color], score: Callable[[Color], float]) -> tuple[Color, float]:
    best = palette[0]
    best_score = 0.0
    for color in palette:
        value = score(color)
        if value > best_score:
            best = color
            best_score = value
    return best, best_score


def find_primary(palette: Sequence[Color]) -> Color:
    return _argmax(palette, primary_score)[0]


def find_secondary(palette: Sequence[Color]) -> Color:
    if len(palette) < 2:
        return palette[0]

    primary = find_primary(palette)
    primary_hue = primary.hsl.h
    candidates = [c for c in palette if c.hex != primary.hex]
    if not candidates:
        return palette[0]

    def harmony(color: Color) -> float:
        distance = hue_distance(color.hsl.h, primary_hue)
        if 30 <= distance <= 60:
            return 1.0
        if 150 <= distance <= 210:
            return 0.8
        return 0.3

    return _argmax(candidates, harmony)[0]


def find_banded(role: SemanticRole, palette: Sequence[Color]) -> Color:
    best, best_score = _argmax(palette, lambda c: band_score(role, c))
    if best_score < FALLBACK_THRESHOLD:
        return Color.from_hsl(*FALLBACK_HSL[role])
    return best


def find_neutral(palette: Sequence[Color]) -> Color:
    best = palette[0]
    lowest = float("inf")
    for color in palette:
        saturation = color.hsl.s
        if saturation < lowest:
            best = color
            lowest = saturation
    return best


def assign_role(role: SemanticRole | str, palette: Sequence[Color]) -> Color:
    """Pick the palette color best suited to *role*, or synthesize one."""
    if not palette:
        raise ValueError("palette must contain at least one color")
    role = SemanticRole(role)
    if role is SemanticRole.PRIMARY:
        return find_primary(palette)
    if role is SemanticRole.SECONDARY:
        return find_secondary(palette)
    if role is SemanticRole.NEUTRAL:
        return find_neutral(palette)
    return find_banded(role, palette)


def accessibility_notes(role: SemanticRole, ratio: float) -> list[str]:
    notes: list[str] = []
    if ratio >= 7.0:
        notes.append("Excellent contrast - meets AAA standards")
    elif ratio >= 4.5:
        notes.append("Good contrast - meets AA standards")
    elif ratio >= 3.0:
        notes.append("Acceptable for UI elements but not for text")
    else:
        notes.append("Poor contrast - may not be accessible")

    if role is SemanticRole.ERROR and ratio < 4.5:
        notes.append("Error colors should have high contrast for visibility")
    if role is SemanticRole.WARNING and ratio < 3.0:
        notes.append("Warning colors should be easily distinguishable")
    return notes


def usage_guidelines(role: SemanticRole, context: str) -> list[str]:
    guidelines = list(USAGE_GUIDELINES[role])
    if role is SemanticRole.PRIMARY and context == "web":
        guidelines.append("Consider hover and focus states")
    extra = CONTEXT_GUIDELINES.get(context)
    if extra:
        guidelines.append(extra)
    return guidelines


def map_role(
    role: SemanticRole | str,
    palette: Sequence[Color],
    *,
    context: str = "web",
    ensure_contrast: bool = True,
    level: str = "AA",
    options: AdjustOptions | None = None,
) -> SemanticColorMapping:
    """Assign, optionally repair, and annotate the color for one role."""
    role = SemanticRole(role)
    chosen = assign_role(role, palette)
    color = chosen
    if ensure_contrast:
        color = adjust_for_contrast(chosen, required_ratio(level), options)

    ratio = best_contrast(color)
    return SemanticColorMapping(
        role=role,
        color=color,
        original_color=chosen if color.hex != chosen.hex else None,
        contrast_ratio=ratio,
        accessibility_notes=accessibility_notes(role, ratio),
        usage_guidelines=usage_guidelines(role, context),
    )


def generate_semantic_mapping(
    palette: Sequence[Color],
    roles: Sequence[SemanticRole | str] = DEFAULT_ROLES,
    *,
    context: str = "web",
    ensure_contrast: bool = True,
    level: str = "AA",
) -> list[SemanticColorMapping]:
    """Map every requested role, preserving the requested order."""
    return [
        map_role(role, palette, context=context, ensure_contrast=ensure_contrast, level=level)
        for role in roles
    ]

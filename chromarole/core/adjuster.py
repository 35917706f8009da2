"""Lightness grid search that repairs colors failing a contrast target."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from chromarole.core.color import BLACK, WHITE, Color
from chromarole.core.contrast import best_contrast

BRAND_PRESERVED_NOTE = "Color preserved as brand color"

# Coarse lightness grid; intermediate lightness values are never sampled.
LIGHTNESS_GRID: tuple[int, ...] = tuple(range(10, 100, 10))


@dataclass(frozen=True, slots=True)
class AdjustOptions:
    """Inputs that shape a contrast repair."""

    references: tuple[Color, ...] = (WHITE, BLACK)
    preserved: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def with_brand_colors(cls, brand_colors: Iterable[Color | str], **kwargs) -> AdjustOptions:
        preserved = frozenset(
            c.hex if isinstance(c, Color) else Color.from_hex(c).hex for c in brand_colors
        )
        return cls(preserved=preserved, **kwargs)

    def is_preserved(self, color: Color) -> bool:
        return color.hex in self.preserved


def adjust_for_contrast(
    color: Color,
    target_ratio: float,
    options: AdjustOptions | None = None,
) -> Color:
    """Return *color* moved to a lightness that reaches *target_ratio*.

    The current hue and saturation are held fixed and only the lightness
    values in ``LIGHTNESS_GRID`` are tried. The candidate with the highest
    contrast that also meets the target wins. When no grid point meets the
    target, or the color is brand-pinned, the input color is returned as-is.
    """
    options = options or AdjustOptions()
    if options.is_preserved(color):
        return color

    current = best_contrast(color, options.references)
    if current >= target_ratio:
        return color

    hsl = color.hsl
    best = color
    best_ratio = current
    for lightness in LIGHTNESS_GRID:
        candidate = Color.from_hsl(hsl.h, hsl.s, lightness)
        ratio = best_contrast(candidate, options.references)
        if ratio > best_ratio and ratio >= target_ratio:
            best = candidate
            best_ratio = ratio
    return best

"""Use-case palette optimization with hue preservation and brand pinning."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Sequence

from chromarole.core.adjuster import BRAND_PRESERVED_NOTE, AdjustOptions, adjust_for_contrast
from chromarole.core.color import WHITE, Color
from chromarole.core.contrast import AA_RATIO, AAA_RATIO, best_contrast, contrast_ratio
from chromarole.core.roles import hue_distance


class UseCase(str, Enum):
    TEXT = "text"
    BACKGROUND = "background"
    ACCENT = "accent"
    INTERACTIVE = "interactive"


TARGET_STANDARDS: dict[str, float] = {
    "WCAG_AA": AA_RATIO,
    "WCAG_AAA": AAA_RATIO,
}

_MAX_PAIRINGS = 10
_NOTE_THRESHOLD = 5


def _shape_text(h: int, s: int, l: int) -> tuple[float, float]:
    lightness = max(20, l - 30) if l > 50 else l
    return min(100, s + 10), lightness


def _shape_background(h: int, s: int, l: int) -> tuple[float, float]:
    lightness = max(85, l + 20) if l < 80 else l
    saturation = max(10, s - 20) if s > 30 else s
    return saturation, lightness


def _shape_accent(h: int, s: int, l: int) -> tuple[float, float]:
    lightness = 50 if l > 70 or l < 30 else l
    saturation = min(80, s + 20) if s < 60 else s
    return saturation, lightness


def _shape_interactive(h: int, s: int, l: int) -> tuple[float, float]:
    lightness: float = l
    if l > 60:
        lightness = max(40, l - 20)
    elif l < 40:
        lightness = min(60, l + 20)
    saturation = min(70, s + 15) if s < 50 else s
    return saturation, lightness


STRATEGIES: dict[UseCase, Callable[[int, int, int], tuple[float, float]]] = {
    UseCase.TEXT: _shape_text,
    UseCase.BACKGROUND: _shape_background,
    UseCase.ACCENT: _shape_accent,
    UseCase.INTERACTIVE: _shape_interactive,
}


@dataclass(slots=True)
class OptimizationResult:
    """Outcome of optimizing one palette color for one use case."""

    original_color: Color
    optimized_color: Color
    use_case: UseCase
    notes: list[str] = field(default_factory=list)

    @property
    def adjusted(self) -> bool:
        return self.original_color.hex != self.optimized_color.hex

    @property
    def contrast_before(self) -> float:
        return contrast_ratio(self.original_color, WHITE)

    @property
    def contrast_after(self) -> float:
        return contrast_ratio(self.optimized_color, WHITE)

    @property
    def improvement_percentage(self) -> float:
        before = self.contrast_before
        if before <= 0:
            return 0.0
        return (self.contrast_after - before) / before * 100

    @property
    def hue_difference(self) -> float:
        return hue_distance(self.original_color.hsl.h, self.optimized_color.hsl.h)

    @property
    def hue_changed(self) -> bool:
        return self.hue_difference > _NOTE_THRESHOLD

    def compliant(self, ratio: float, *, after: bool = True) -> bool:
        color = self.optimized_color if after else self.original_color
        return best_contrast(color) >= ratio

    def to_dict(self) -> dict[str, Any]:
        return {
            "original_color": self.original_color.hex,
            "optimized_color": self.optimized_color.hex,
            "use_case": self.use_case.value,
            "adjusted": self.adjusted,
            "notes": list(self.notes),
            "contrast_improvement": {
                "before": round(self.contrast_before, 2),
                "after": round(self.contrast_after, 2),
                "improvement_percentage": round(self.improvement_percentage, 2),
            },
            "accessibility_compliance": {
                "wcag_aa_before": self.compliant(AA_RATIO, after=False),
                "wcag_aa_after": self.compliant(AA_RATIO),
                "wcag_aaa_before": self.compliant(AAA_RATIO, after=False),
                "wcag_aaa_after": self.compliant(AAA_RATIO),
            },
            "hue_preservation": {
                "hue_changed": self.hue_changed,
                "hue_difference": round(self.hue_difference, 2),
            },
        }


@dataclass(frozen=True, slots=True)
class ColorPairing:
    foreground: Color
    background: Color
    contrast_ratio: float
    compliant: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "foreground": self.foreground.hex,
            "background": self.background.hex,
            "contrast_ratio": round(self.contrast_ratio, 2),
            "use_case": "text_on_background",
            "compliant": self.compliant,
        }


@dataclass(slots=True)
class OptimizationReport:
    target_standard: str
    preserve_hue: bool
    total_colors: int
    results: list[OptimizationResult] = field(default_factory=list)
    recommended_pairings: list[ColorPairing] = field(default_factory=list)
    accessibility_notes: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)

    @property
    def target_ratio(self) -> float:
        return TARGET_STANDARDS[self.target_standard]

    @property
    def colors_optimized(self) -> int:
        return sum(1 for r in self.results if r.adjusted)

    def compliance_rate(self, *, after: bool) -> float:
        if not self.results:
            return 0.0
        passing = sum(1 for r in self.results if r.compliant(self.target_ratio, after=after))
        return passing / len(self.results) * 100

    def average_improvement(self) -> float:
        if not self.results:
            return 0.0
        return sum(r.improvement_percentage for r in self.results) / len(self.results)

    def to_dict(self) -> dict[str, Any]:
        return {
            "target_standard": self.target_standard,
            "preserve_hue": self.preserve_hue,
            "optimization_results": [r.to_dict() for r in self.results],
            "summary": {
                "total_colors": self.total_colors,
                "colors_optimized": self.colors_optimized,
                "colors_preserved": len(self.results) - self.colors_optimized,
                "average_contrast_improvement": round(self.average_improvement(), 2),
                "compliance_rate_before": round(self.compliance_rate(after=False), 2),
                "compliance_rate_after": round(self.compliance_rate(after=True), 2),
            },
            "recommended_pairings": [p.to_dict() for p in self.recommended_pairings],
            "accessibility_notes": list(self.accessibility_notes),
            "recommendations": list(self.recommendations),
        }


def _describe_changes(original: Color, optimized: Color) -> list[str]:
    before, after = original.hsl, optimized.hsl
    notes: list[str] = []
    if abs(before.l - after.l) > _NOTE_THRESHOLD:
        notes.append(f"Lightness adjusted from {before.l}% to {after.l}%")
    if abs(before.s - after.s) > _NOTE_THRESHOLD:
        notes.append(f"Saturation adjusted from {before.s}% to {after.s}%")
    return notes


def optimize_color(
    color: Color,
    use_case: UseCase | str,
    *,
    target_ratio: float = AA_RATIO,
    options: AdjustOptions | None = None,
) -> OptimizationResult:
    """Reshape *color* for *use_case* at its current hue."""
    use_case = UseCase(use_case)
    options = options or AdjustOptions()
    if options.is_preserved(color):
        return OptimizationResult(color, color, use_case, [BRAND_PRESERVED_NOTE])

    hsl = color.hsl
    saturation, lightness = STRATEGIES[use_case](hsl.h, hsl.s, hsl.l)
    optimized = Color.from_hsl(hsl.h, saturation, lightness)
    if use_case is UseCase.TEXT:
        optimized = adjust_for_contrast(optimized, target_ratio, options)

    notes = _describe_changes(color, optimized) if optimized.hex != color.hex else []
    return OptimizationResult(color, optimized, use_case, notes)


def recommend_pairings(
    results: Sequence[OptimizationResult],
    target_ratio: float,
) -> list[ColorPairing]:
    """Pair every optimized text color with every optimized background."""
    texts = [r.optimized_color for r in results if r.use_case is UseCase.TEXT]
    backgrounds = [r.optimized_color for r in results if r.use_case is UseCase.BACKGROUND]
    pairings = []
    for fg in texts:
        for bg in backgrounds:
            ratio = contrast_ratio(fg, bg)
            pairings.append(ColorPairing(fg, bg, ratio, ratio >= target_ratio))
    pairings.sort(key=lambda p: p.contrast_ratio, reverse=True)
    return pairings[:_MAX_PAIRINGS]


def _notes(report: OptimizationReport) -> list[str]:
    notes: list[str] = []
    optimized = report.colors_optimized
    if optimized:
        notes.append(f"{optimized} colors were optimized for better accessibility")
    improved = sum(
        1
        for r in report.results
        if not r.compliant(report.target_ratio, after=False) and r.compliant(report.target_ratio)
    )
    if improved:
        notes.append(f"{improved} colors now meet {report.target_standard} standards")
    hue_changes = sum(1 for r in report.results if r.hue_changed)
    if hue_changes:
        notes.append(f"{hue_changes} colors had hue adjustments for accessibility")
    return notes


def _recommendations(report: OptimizationReport) -> list[str]:
    recommendations: list[str] = []
    before = report.compliance_rate(after=False)
    after = report.compliance_rate(after=True)
    improvement = after - before
    if improvement > 20:
        recommendations.append("Significant accessibility improvements achieved")
    elif improvement > 0:
        recommendations.append("Moderate accessibility improvements made")
    if after < 80:
        recommendations.append("Consider further adjustments for better compliance")
    if report.preserve_hue:
        recommendations.append("Hue preservation maintained brand consistency")
    else:
        recommendations.append("Hue adjustments may require brand guideline updates")

    still_failing = sum(1 for r in report.results if not r.compliant(AA_RATIO))
    if still_failing:
        recommendations.append(f"{still_failing} colors still need manual review")
    recommendations.append("Test optimized colors with actual users")
    recommendations.append("Validate color combinations in real UI contexts")
    return recommendations


def optimize_palette(
    palette: Sequence[Color],
    use_cases: Sequence[UseCase | str],
    *,
    target_standard: str = "WCAG_AA",
    preserve_hue: bool = True,
    preserve_brand_colors: Sequence[Color] = (),
) -> OptimizationReport:
    """Optimize every palette color for every use case, in input order."""
    target_ratio = TARGET_STANDARDS[target_standard]
    options = AdjustOptions.with_brand_colors(preserve_brand_colors)
    report = OptimizationReport(
        target_standard=target_standard,
        preserve_hue=preserve_hue,
        total_colors=len(palette),
    )
    for color in palette:
        for use_case in use_cases:
            report.results.append(
                optimize_color(color, use_case, target_ratio=target_ratio, options=options)
            )
    report.recommended_pairings = recommend_pairings(report.results, target_ratio)
    report.accessibility_notes = _notes(report)
    report.recommendations = _recommendations(report)
    return report

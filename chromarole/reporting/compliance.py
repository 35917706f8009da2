"""Accessibility scoring and compliance reports."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence

from chromarole.core.contrast import (
    AA_RATIO,
    AAA_RATIO,
    UI_ELEMENT_RATIO,
    compliance_for,
    contrast_ratio,
    required_ratio,
)
from chromarole.core.roles import SemanticColorMapping
from chromarole.themes.models import AccessibilityReport, ContrastIssue, ThemeTokenSet, ThemeVariant

# FAIL dominates AA, which dominates AAA.
_SEVERITY: dict[str, int] = {"AAA": 0, "AA": 1, "FAIL": 2}


def _round_half_up(value: float) -> int:
    return int(value + 0.5)


def worst_compliance(levels: Iterable[str]) -> str:
    worst = "AAA"
    for level in levels:
        if _SEVERITY[level] > _SEVERITY[worst]:
            worst = level
    return worst


def text_ratio(tokens: ThemeTokenSet) -> float:
    return contrast_ratio(tokens.color("text"), tokens.color("background"))


def primary_ratio(tokens: ThemeTokenSet) -> float:
    return contrast_ratio(tokens.color("primary"), tokens.color("background"))


def accessibility_score(tokens: ThemeTokenSet) -> int:
    """Grade text and primary contrast against the background, 0 to 100."""
    text_score = min(100.0, text_ratio(tokens) / AAA_RATIO * 100)
    primary_score = min(100.0, primary_ratio(tokens) / AA_RATIO * 100)
    return _round_half_up((text_score + primary_score) / 2)


def wcag_compliance(tokens: ThemeTokenSet) -> str:
    return compliance_for(text_ratio(tokens))


def build_report(variants: Sequence[ThemeVariant], level: str) -> AccessibilityReport:
    """Re-measure every variant and collect its contrast failures."""
    target = required_ratio(level)
    issues: list[ContrastIssue] = []
    for variant in variants:
        tokens = variant.colors
        ratio = text_ratio(tokens)
        if ratio < target:
            issues.append(ContrastIssue(tokens.text, tokens.background, ratio, target))
        ratio = primary_ratio(tokens)
        if ratio < UI_ELEMENT_RATIO:
            issues.append(ContrastIssue(tokens.primary, tokens.background, ratio, UI_ELEMENT_RATIO))

    compliance = worst_compliance(v.wcag_compliance for v in variants)
    overall = 0
    if variants:
        overall = _round_half_up(sum(v.accessibility_score for v in variants) / len(variants))

    recommendations: list[str] = []
    if issues:
        recommendations.append("Improve contrast ratios for better accessibility")
    if compliance == "FAIL":
        recommendations.append("Theme does not meet minimum WCAG standards")
    elif compliance == "AA" and level == "AAA":
        recommendations.append("Consider adjusting colors to meet AAA standards")

    return AccessibilityReport(
        overall_score=overall,
        wcag_compliance=compliance,
        contrast_issues=issues,
        adjustments_made=sum(len(v.adjusted_slots) for v in variants),
        recommendations=recommendations,
    )


@dataclass(frozen=True, slots=True)
class RoleIssue:
    role: str
    color: str
    issue: str
    recommendation: str

    def to_dict(self) -> dict[str, str]:
        return {
            "role": self.role,
            "color": self.color,
            "issue": self.issue,
            "recommendation": self.recommendation,
        }


@dataclass(slots=True)
class SemanticAccessibilityReport:
    overall_compliance: str
    contrast_issues: list[RoleIssue] = field(default_factory=list)
    adjustments_made: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "overall_compliance": self.overall_compliance,
            "contrast_issues": [issue.to_dict() for issue in self.contrast_issues],
            "adjustments_made": self.adjustments_made,
        }


def semantic_report(
    mappings: Sequence[SemanticColorMapping],
    level: str,
) -> SemanticAccessibilityReport:
    """Grade a role mapping; below 3.0 fails, AA issues are listed when AA is targeted."""
    issues: list[RoleIssue] = []
    worst = "AAA"
    for mapping in mappings:
        ratio = mapping.contrast_ratio
        role = mapping.role.value
        if ratio < UI_ELEMENT_RATIO:
            worst = "FAIL"
            issues.append(
                RoleIssue(
                    role,
                    mapping.color.hex,
                    "Insufficient contrast for accessibility",
                    "Increase lightness difference from backgrounds",
                )
            )
        elif ratio < AA_RATIO and worst != "FAIL":
            if level == "AA":
                issues.append(
                    RoleIssue(
                        role,
                        mapping.color.hex,
                        "Does not meet AA standards for text",
                        "Use only for UI elements, not text",
                    )
                )
            else:
                worst = "AA"
        elif ratio < AAA_RATIO and level == "AAA" and worst == "AAA":
            worst = "AA"

    return SemanticAccessibilityReport(
        overall_compliance=worst,
        contrast_issues=issues,
        adjustments_made=sum(1 for m in mappings if m.adjusted),
    )


_CONTEXT_RECOMMENDATIONS: dict[str, tuple[str, ...]] = {
    "web": (
        "Define hover and focus states for interactive elements",
        "Test across different devices and screen settings",
    ),
    "mobile": (
        "Ensure colors work in both light and dark modes",
        "Test under various lighting conditions",
    ),
    "print": (
        "Verify colors work in grayscale",
        "Consider ink costs for large color areas",
    ),
}


def usage_recommendations(context: str, report: SemanticAccessibilityReport) -> list[str]:
    recommendations = [
        "Test colors with actual content and backgrounds",
        "Consider colorblind users - use icons and text alongside colors",
    ]
    recommendations.extend(_CONTEXT_RECOMMENDATIONS.get(context, ()))
    if report.overall_compliance == "FAIL":
        recommendations.append("Improve contrast ratios before using in production")
    if report.adjustments_made > 0:
        recommendations.append("Review adjusted colors to ensure they still meet design goals")
    return recommendations

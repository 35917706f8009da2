"""Theme framework models."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from typing import Any, Iterator, Mapping

from chromarole.core.color import Color


@dataclass(frozen=True, slots=True)
class ThemeTokenSet:
    """Semantic token colors of one theme variant.

    Every slot holds a lowercase hex string except ``shadow``, which is an
    ``rgba(...)`` literal.
    """

    primary: str
    secondary: str
    background: str
    surface: str
    text: str
    text_secondary: str
    accent: str
    success: str
    warning: str
    error: str
    info: str
    border: str
    shadow: str
    disabled: str
    hover: str
    focus: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, str]) -> ThemeTokenSet:
        return cls(**{f.name: data[f.name] for f in fields(cls)})

    def color(self, key: str) -> Color:
        """Return a hex slot as a Color."""
        if key == "shadow":
            raise KeyError("shadow is an rgba literal, not a hex color")
        return Color.from_hex(getattr(self, key))

    def items(self) -> Iterator[tuple[str, str]]:
        for f in fields(self):
            yield f.name, getattr(self, f.name)

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class ThemeVariant:
    """One complete token set with its accessibility grading."""

    name: str
    colors: ThemeTokenSet
    accessibility_score: int
    wcag_compliance: str
    adjusted_slots: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "colors": self.colors.to_dict(),
            "accessibility_score": self.accessibility_score,
            "wcag_compliance": self.wcag_compliance,
            "adjusted_slots": list(self.adjusted_slots),
        }


@dataclass(frozen=True, slots=True)
class ContrastIssue:
    """A foreground/background pair below its required ratio."""

    foreground: str
    background: str
    contrast_ratio: float
    required_ratio: float

    @property
    def passes(self) -> bool:
        return self.contrast_ratio >= self.required_ratio

    def to_dict(self) -> dict[str, Any]:
        return {
            "combination": [self.foreground, self.background],
            "contrast_ratio": self.contrast_ratio,
            "required_ratio": self.required_ratio,
            "passes": self.passes,
        }


@dataclass(slots=True)
class AccessibilityReport:
    overall_score: int
    wcag_compliance: str
    contrast_issues: list[ContrastIssue] = field(default_factory=list)
    adjustments_made: int = 0
    recommendations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "overall_score": self.overall_score,
            "wcag_compliance": self.wcag_compliance,
            "contrast_issues": [issue.to_dict() for issue in self.contrast_issues],
            "adjustments_made": self.adjustments_made,
            "recommendations": list(self.recommendations),
        }


@dataclass(slots=True)
class BrandIntegrationReport:
    brand_colors_used: list[str] = field(default_factory=list)
    harmony_maintained: bool = True
    adjustments_made: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "brand_colors_used": list(self.brand_colors_used),
            "harmony_maintained": self.harmony_maintained,
            "adjustments_made": list(self.adjustments_made),
        }


@dataclass(slots=True)
class ThemeResult:
    """Everything produced for one theme request."""

    theme_type: str
    style: str
    primary_color: str
    variants: dict[str, ThemeVariant]
    accessibility_report: AccessibilityReport
    brand_integration: BrandIntegrationReport | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "theme_type": self.theme_type,
            "style": self.style,
            "primary_color": self.primary_color,
            "variants": {key: variant.to_dict() for key, variant in self.variants.items()},
            "accessibility_report": self.accessibility_report.to_dict(),
            "brand_integration": (
                self.brand_integration.to_dict() if self.brand_integration else None
            ),
        }

"""Public entry points: semantic roles, themes and palette optimization."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Sequence

from chromarole.core.optimizer import TARGET_STANDARDS, OptimizationReport, UseCase, optimize_palette
from chromarole.core.roles import (
    CONTEXTS,
    DEFAULT_ROLES,
    SemanticColorMapping,
    SemanticRole,
    generate_semantic_mapping,
)
from chromarole.errors import ChromaRoleError, ErrorCode
from chromarole.reporting.compliance import (
    SemanticAccessibilityReport,
    semantic_report,
    usage_recommendations,
)
from chromarole.themes.composer import compose_theme as _compose_theme
from chromarole.themes.constants import ACCESSIBILITY_LEVELS, STYLES, THEME_TYPES
from chromarole.themes.models import ThemeResult
from chromarole.validation import (
    parse_choice,
    parse_choices,
    parse_color,
    parse_optional_colors,
    parse_palette,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SemanticResult:
    base_palette: list[str]
    context: str
    semantic_mapping: list[SemanticColorMapping]
    accessibility_report: SemanticAccessibilityReport
    usage_recommendations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "base_palette": list(self.base_palette),
            "context": self.context,
            "semantic_mapping": [m.to_dict() for m in self.semantic_mapping],
            "accessibility_report": self.accessibility_report.to_dict(),
            "usage_recommendations": list(self.usage_recommendations),
        }


def _level(value: object) -> str:
    return parse_choice(
        value, ACCESSIBILITY_LEVELS, field="accessibility_level", code=ErrorCode.INVALID_LEVEL
    )


def assign_semantic_roles(
    palette: Sequence[str],
    roles: Sequence[str] | None = None,
    *,
    context: str = "web",
    ensure_contrast: bool = True,
    accessibility_level: str = "AA",
) -> SemanticResult:
    """Map palette colors onto semantic UI roles."""
    try:
        colors = parse_palette(palette, field="base_palette")
        role_names = parse_choices(
            list(roles) if roles is not None else [r.value for r in DEFAULT_ROLES],
            [r.value for r in SemanticRole],
            field="semantic_roles",
            code=ErrorCode.INVALID_ROLE,
        )
        context = parse_choice(context, CONTEXTS, field="context", code=ErrorCode.INVALID_CONTEXT)
        level = _level(accessibility_level)
    except ChromaRoleError as exc:
        logger.warning("assign_semantic_roles rejected input: %s", exc.message)
        raise

    mapping = generate_semantic_mapping(
        colors,
        [SemanticRole(name) for name in role_names],
        context=context,
        ensure_contrast=ensure_contrast,
        level=level,
    )
    report = semantic_report(mapping, level)
    logger.info(
        "mapped %d roles from %d colors: compliance=%s adjusted=%d",
        len(mapping),
        len(colors),
        report.overall_compliance,
        report.adjustments_made,
    )
    return SemanticResult(
        base_palette=list(palette),
        context=context,
        semantic_mapping=mapping,
        accessibility_report=report,
        usage_recommendations=usage_recommendations(context, report),
    )


def compose_theme(
    theme_type: str,
    primary_color: str,
    *,
    style: str = "material",
    accessibility_level: str = "AA",
    brand_colors: Sequence[str] | None = None,
) -> ThemeResult:
    """Derive the theme variants for *theme_type* from a primary color."""
    try:
        if primary_color is None or not str(primary_color).strip():
            raise ChromaRoleError(
                ErrorCode.MISSING_PARAMETER,
                message="Primary color parameter is required",
                details={"parameter": "primary_color"},
                suggestions=["Provide a primary color such as #2563eb"],
            )
        theme_type = parse_choice(
            theme_type, THEME_TYPES, field="theme_type", code=ErrorCode.INVALID_THEME_TYPE
        )
        primary = parse_color(
            primary_color, field="primary_color", code=ErrorCode.INVALID_PRIMARY_COLOR
        )
        brands = parse_optional_colors(
            brand_colors, field="brand_colors", code=ErrorCode.INVALID_BRAND_COLOR
        )
        style = parse_choice(style, STYLES, field="style", code=ErrorCode.INVALID_STYLE)
        level = _level(accessibility_level)
    except ChromaRoleError as exc:
        logger.warning("compose_theme rejected input: %s", exc.message)
        raise

    result = _compose_theme(theme_type, primary, style, level, brands)
    logger.info(
        "composed %s theme (%s): score=%d compliance=%s",
        theme_type,
        style,
        result.accessibility_report.overall_score,
        result.accessibility_report.wcag_compliance,
    )
    return result


def optimize_for_accessibility(
    palette: Sequence[str],
    use_cases: Sequence[str],
    *,
    target_standard: str = "WCAG_AA",
    preserve_hue: bool = True,
    preserve_brand_colors: Sequence[str] | None = None,
) -> OptimizationReport:
    """Reshape palette colors for their use cases, leaving brand colors untouched."""
    try:
        colors = parse_palette(palette, field="palette")
        cases = parse_choices(
            use_cases,
            [u.value for u in UseCase],
            field="use_cases",
            code=ErrorCode.INVALID_USE_CASE,
        )
        standard = parse_choice(
            target_standard, list(TARGET_STANDARDS), field="target_standard", code=ErrorCode.INVALID_LEVEL
        )
        pinned = parse_optional_colors(preserve_brand_colors, field="preserve_brand_colors")
    except ChromaRoleError as exc:
        logger.warning("optimize_for_accessibility rejected input: %s", exc.message)
        raise

    report = optimize_palette(
        colors,
        [UseCase(case) for case in cases],
        target_standard=standard,
        preserve_hue=preserve_hue,
        preserve_brand_colors=pinned,
    )
    logger.info(
        "optimized %d results for %d colors: %d changed",
        len(report.results),
        len(colors),
        report.colors_optimized,
    )
    return report

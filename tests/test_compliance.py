"""Tests for accessibility scoring and reports."""

from chromarole.core.color import Color
from chromarole.core.roles import SemanticColorMapping, SemanticRole
from chromarole.reporting.compliance import (
    accessibility_score,
    build_report,
    semantic_report,
    usage_recommendations,
    wcag_compliance,
    worst_compliance,
)
from chromarole.themes.constants import BASE_TOKENS, HIGH_CONTRAST_TOKENS
from chromarole.themes.models import ThemeTokenSet, ThemeVariant


def _tokens(**overrides: str) -> ThemeTokenSet:
    data = dict(BASE_TOKENS["light"])
    data.update(primary="#2563eb", secondary="#64748b", accent="#eb9a25", hover="#1d4ed8", focus="#2563eb")
    data.update(overrides)
    return ThemeTokenSet.from_mapping(data)


def _variant(tokens: ThemeTokenSet, adjusted: tuple[str, ...] = ()) -> ThemeVariant:
    return ThemeVariant(
        name="light",
        colors=tokens,
        accessibility_score=accessibility_score(tokens),
        wcag_compliance=wcag_compliance(tokens),
        adjusted_slots=adjusted,
    )


def test_score_is_capped_at_100():
    tokens = ThemeTokenSet.from_mapping(HIGH_CONTRAST_TOKENS["light"])
    assert accessibility_score(tokens) == 100
    assert wcag_compliance(tokens) == "AAA"


def test_score_for_invisible_text_and_primary():
    tokens = _tokens(text="#ffffff", primary="#ffffff")
    assert accessibility_score(tokens) == 18
    assert wcag_compliance(tokens) == "FAIL"


def test_worst_compliance():
    assert worst_compliance(["AAA", "AA"]) == "AA"
    assert worst_compliance(["AA", "FAIL", "AAA"]) == "FAIL"
    assert worst_compliance([]) == "AAA"


class TestBuildReport:
    def test_clean_variant(self):
        report = build_report([_variant(_tokens())], "AA")

        assert report.overall_score == 100
        assert report.wcag_compliance == "AAA"
        assert report.contrast_issues == []
        assert report.recommendations == []

    def test_failing_variant_lists_issues(self):
        report = build_report([_variant(_tokens(text="#ffffff", primary="#ffffff"))], "AA")

        assert report.wcag_compliance == "FAIL"
        assert [(i.foreground, i.required_ratio) for i in report.contrast_issues] == [
            ("#ffffff", 4.5),
            ("#ffffff", 3.0),
        ]
        assert all(not issue.passes for issue in report.contrast_issues)
        assert report.recommendations == [
            "Improve contrast ratios for better accessibility",
            "Theme does not meet minimum WCAG standards",
        ]

    def test_aa_theme_at_aaa_level(self):
        # #666666 on white is about 5.7
        report = build_report([_variant(_tokens(text="#666666"))], "AAA")

        assert report.wcag_compliance == "AA"
        assert "Consider adjusting colors to meet AAA standards" in report.recommendations

    def test_adjustments_are_counted(self):
        report = build_report([_variant(_tokens(), ("text", "primary"))], "AA")
        assert report.adjustments_made == 2

    def test_issue_serializes_combination(self):
        report = build_report([_variant(_tokens(text="#ffffff"))], "AA")
        data = report.to_dict()["contrast_issues"][0]
        assert data["combination"] == ["#ffffff", "#ffffff"]
        assert data["passes"] is False


def _mapping(ratio: float, role: SemanticRole = SemanticRole.PRIMARY) -> SemanticColorMapping:
    return SemanticColorMapping(role=role, color=Color("#2563eb"), contrast_ratio=ratio)


class TestSemanticReport:
    def test_low_contrast_fails(self):
        report = semantic_report([_mapping(2.0)], "AA")

        assert report.overall_compliance == "FAIL"
        assert report.contrast_issues[0].issue == "Insufficient contrast for accessibility"

    def test_aa_shortfall_is_listed_without_downgrade(self):
        report = semantic_report([_mapping(4.0, SemanticRole.INFO)], "AA")

        assert report.overall_compliance == "AAA"
        assert report.contrast_issues[0].role == "info"
        assert report.contrast_issues[0].recommendation == "Use only for UI elements, not text"

    def test_aaa_level_downgrades_to_aa(self):
        report = semantic_report([_mapping(5.0)], "AAA")
        assert report.overall_compliance == "AA"
        assert report.contrast_issues == []

    def test_adjusted_mappings_counted(self):
        adjusted = SemanticColorMapping(
            role=SemanticRole.PRIMARY,
            color=Color("#1a1a1a"),
            original_color=Color("#777777"),
            contrast_ratio=17.4,
        )
        report = semantic_report([adjusted, _mapping(8.0)], "AA")
        assert report.adjustments_made == 1


def test_usage_recommendations():
    report = semantic_report([_mapping(2.0)], "AA")
    recommendations = usage_recommendations("print", report)

    assert "Verify colors work in grayscale" in recommendations
    assert recommendations[-1] == "Improve contrast ratios before using in production"
    assert len(usage_recommendations("desktop", semantic_report([_mapping(8.0)], "AA"))) == 2

"""Tests for chromarole.core.adjuster."""

from chromarole.core.adjuster import AdjustOptions, adjust_for_contrast
from chromarole.core.color import BLACK, Color
from chromarole.core.contrast import best_contrast


def test_compliant_color_is_returned_unchanged():
    assert adjust_for_contrast(BLACK, 4.5) == BLACK
    assert adjust_for_contrast(Color("#2563eb"), 4.5).hex == "#2563eb"


def test_failing_color_moves_to_best_grid_lightness():
    gray = Color("#777777")
    adjusted = adjust_for_contrast(gray, 7.0)

    assert adjusted.hex == "#1a1a1a"
    assert best_contrast(adjusted) >= 7.0


def test_adjustment_keeps_hue_and_saturation():
    blue = Color("#2563eb")
    adjusted = adjust_for_contrast(blue, 7.0)

    assert adjusted != blue
    assert abs(adjusted.hsl.h - blue.hsl.h) <= 2
    assert best_contrast(adjusted) >= 7.0


def test_unreachable_target_returns_input():
    gray = Color("#777777")
    assert adjust_for_contrast(gray, 22.0) is gray


def test_pinned_color_is_never_adjusted():
    gray = Color("#777777")
    options = AdjustOptions.with_brand_colors(["#777777"])

    assert options.is_preserved(gray)
    assert adjust_for_contrast(gray, 7.0, options) is gray


def test_brand_pinning_ignores_case():
    options = AdjustOptions.with_brand_colors(["#FF0000", Color("#00ff00")])
    assert options.is_preserved(Color("#ff0000"))
    assert options.is_preserved(Color("#00FF00"))
    assert not options.is_preserved(Color("#0000ff"))

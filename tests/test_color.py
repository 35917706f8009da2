"""Tests for chromarole.core.color."""

import pytest

from chromarole.core.color import BLACK, WHITE, Color, is_hex_color, normalize_hex
from chromarole.errors import ErrorCode, InvalidColorError


def test_hex_is_normalized_to_lowercase_six_digits():
    assert Color.from_hex("#FFF").hex == "#ffffff"
    assert Color("#2563EB").hex == "#2563eb"
    assert normalize_hex(" #AbC ") == "#aabbcc"


def test_equality_and_hash_follow_hex():
    assert Color("#ABCDEF") == Color("#abcdef")
    assert len({Color("#abc"), Color("#AABBCC")}) == 1


@pytest.mark.parametrize("value", ["2563eb", "#12345", "#ggg", "", None, 123, "#1234567"])
def test_invalid_hex_rejected(value):
    assert is_hex_color(value) is False
    with pytest.raises(InvalidColorError) as excinfo:
        Color.from_hex(value)
    assert excinfo.value.code is ErrorCode.INVALID_COLOR


def test_rgb_channels():
    assert tuple(Color("#2563eb").rgb) == (37, 99, 235)
    assert Color.from_rgb(255.4, -3, 300).hex == "#ff00ff"


def test_hsl_is_rounded_to_integers():
    assert tuple(Color("#2563eb").hsl) == (221, 83, 53)
    assert tuple(WHITE.hsl) == (0, 0, 100)
    assert tuple(BLACK.hsl) == (0, 0, 0)


def test_from_hsl_wraps_hue_and_clamps():
    assert Color.from_hsl(120, 60, 45).hex == "#2eb82e"
    assert Color.from_hsl(480, 60, 45).hex == "#2eb82e"
    assert Color.from_hsl(0, 150, -10).hex == "#000000"
    assert Color.from_hsl(0, 100, 50).hex == "#ff0000"


def test_with_hsl_replaces_only_given_components():
    red = Color("#ff0000")
    assert red.with_hsl(h=240).hex == "#0000ff"
    assert red.with_hsl(l=100).hex == "#ffffff"


def test_contrast_ratio_method_delegates():
    assert BLACK.contrast_ratio(WHITE) == pytest.approx(21.0)
    assert str(Color("#ABC")) == "#aabbcc"

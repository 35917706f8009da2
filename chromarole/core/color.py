"""Hex/RGB/HSL color value type."""

from __future__ import annotations

import colorsys
import math
import re
from dataclasses import dataclass
from typing import NamedTuple

from chromarole.errors import InvalidColorError

_HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class RGB(NamedTuple):
    r: int
    g: int
    b: int


class HSL(NamedTuple):
    h: int
    s: int
    l: int


def _round(value: float) -> int:
    # Half rounds up, matching how hex and HSL components are reported.
    return int(math.floor(value + 0.5))


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def is_hex_color(value: object) -> bool:
    """Return True when *value* is a ``#RGB`` or ``#RRGGBB`` string."""
    return isinstance(value, str) and bool(_HEX_COLOR_RE.match(value.strip()))


def normalize_hex(value: object) -> str:
    """Return the lowercase ``#rrggbb`` form of a hex color string."""
    if not is_hex_color(value):
        raise InvalidColorError(
            message=f"Invalid color format: {value!r}",
            details={"provided": value},
        )
    cleaned = str(value).strip().lower()
    if len(cleaned) == 4:
        cleaned = "#" + "".join(ch * 2 for ch in cleaned[1:])
    return cleaned


@dataclass(frozen=True, slots=True)
class Color:
    """An immutable sRGB color identified by its lowercase hex string."""

    hex: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "hex", normalize_hex(self.hex))

    @classmethod
    def from_hex(cls, value: str) -> Color:
        return cls(value)

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float) -> Color:
        channels = (_round(_clamp(c, 0, 255)) for c in (r, g, b))
        return cls("#" + "".join(f"{c:02x}" for c in channels))

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float) -> Color:
        """Build a color from hue degrees and saturation/lightness percentages."""
        hue = (h % 360) / 360.0
        sat = _clamp(s, 0, 100) / 100.0
        light = _clamp(l, 0, 100) / 100.0
        r, g, b = colorsys.hls_to_rgb(hue, light, sat)
        return cls.from_rgb(r * 255, g * 255, b * 255)

    @property
    def rgb(self) -> RGB:
        return RGB(int(self.hex[1:3], 16), int(self.hex[3:5], 16), int(self.hex[5:7], 16))

    @property
    def hsl(self) -> HSL:
        r, g, b = (c / 255.0 for c in self.rgb)
        h, l, s = colorsys.rgb_to_hls(r, g, b)
        hue = _round(h * 360) % 360
        return HSL(hue, _round(s * 100), _round(l * 100))

    def with_hsl(
        self,
        *,
        h: float | None = None,
        s: float | None = None,
        l: float | None = None,
    ) -> Color:
        """Return a copy with some HSL components replaced."""
        current = self.hsl
        return Color.from_hsl(
            current.h if h is None else h,
            current.s if s is None else s,
            current.l if l is None else l,
        )

    def contrast_ratio(self, other: Color) -> float:
        from chromarole.core.contrast import contrast_ratio

        return contrast_ratio(self, other)

    def __str__(self) -> str:
        return self.hex


WHITE = Color("#ffffff")
BLACK = Color("#000000")

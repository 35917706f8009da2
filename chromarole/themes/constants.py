"""Theme framework constants."""

from __future__ import annotations

THEME_TYPES: tuple[str, ...] = (
    "light",
    "dark",
    "auto",
    "high_contrast",
    "colorblind_friendly",
)

STYLES: tuple[str, ...] = (
    "material",
    "ios",
    "fluent",
    "custom",
)

ACCESSIBILITY_LEVELS: tuple[str, ...] = ("AA", "AAA")

TOKEN_KEYS: tuple[str, ...] = (
    "primary",
    "secondary",
    "background",
    "surface",
    "text",
    "text_secondary",
    "accent",
    "success",
    "warning",
    "error",
    "info",
    "border",
    "shadow",
    "disabled",
    "hover",
    "focus",
)

# Fixed slots of the base variants; primary-derived slots are computed.
BASE_TOKENS: dict[str, dict[str, str]] = {
    "light": {
        "background": "#ffffff",
        "surface": "#f8fafc",
        "text": "#1e293b",
        "text_secondary": "#64748b",
        "success": "#10b981",
        "warning": "#f59e0b",
        "error": "#ef4444",
        "info": "#3b82f6",
        "border": "#e2e8f0",
        "shadow": "rgba(0, 0, 0, 0.1)",
        "disabled": "#94a3b8",
    },
    "dark": {
        "background": "#0f172a",
        "surface": "#1e293b",
        "text": "#f1f5f9",
        "text_secondary": "#94a3b8",
        "success": "#22c55e",
        "warning": "#fbbf24",
        "error": "#f87171",
        "info": "#60a5fa",
        "border": "#334155",
        "shadow": "rgba(0, 0, 0, 0.3)",
        "disabled": "#64748b",
    },
}

# Light presets restyle surface/border; dark presets restyle background/surface.
STYLE_OVERRIDES: dict[str, dict[str, dict[str, str]]] = {
    "light": {
        "material": {"surface": "#fafafa", "border": "#e0e0e0"},
        "ios": {"surface": "#f2f2f7", "border": "#c6c6c8"},
        "fluent": {"surface": "#faf9f8", "border": "#edebe9"},
    },
    "dark": {
        "material": {"background": "#121212", "surface": "#1e1e1e"},
        "ios": {"background": "#000000", "surface": "#1c1c1e"},
        "fluent": {"background": "#201f1e", "surface": "#292827"},
    },
}

HIGH_CONTRAST_TOKENS: dict[str, dict[str, str]] = {
    "light": {
        "primary": "#000000",
        "secondary": "#333333",
        "background": "#ffffff",
        "surface": "#ffffff",
        "text": "#000000",
        "text_secondary": "#000000",
        "accent": "#0000ff",
        "success": "#008000",
        "warning": "#ff8c00",
        "error": "#ff0000",
        "info": "#0000ff",
        "border": "#000000",
        "shadow": "rgba(0, 0, 0, 0.5)",
        "disabled": "#666666",
        "hover": "#333333",
        "focus": "#0000ff",
    },
    "dark": {
        "primary": "#ffffff",
        "secondary": "#cccccc",
        "background": "#000000",
        "surface": "#000000",
        "text": "#ffffff",
        "text_secondary": "#ffffff",
        "accent": "#ffff00",
        "success": "#00ff00",
        "warning": "#ffff00",
        "error": "#ff0000",
        "info": "#00ffff",
        "border": "#ffffff",
        "shadow": "rgba(255, 255, 255, 0.5)",
        "disabled": "#999999",
        "hover": "#cccccc",
        "focus": "#ffff00",
    },
}

# Success moves to blue and info to purple; warning/error stay orange/red.
COLORBLIND_OVERRIDES: dict[str, dict[str, str]] = {
    "light": {
        "success": "#0066cc",
        "warning": "#ff9900",
        "error": "#cc0000",
        "info": "#6600cc",
    },
    "dark": {
        "success": "#4da6ff",
        "warning": "#ffb84d",
        "error": "#ff4d4d",
        "info": "#9966ff",
    },
}

# Lightness used when text fails its contrast target.
FALLBACK_TEXT_LIGHTNESS: dict[str, int] = {"light": 10, "dark": 90}

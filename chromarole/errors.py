"""Error codes and error handling utilities for chromarole."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for chromarole operations."""

    # Seed errors
    MISSING_PARAMETER = auto()
    INVALID_COLOR = auto()
    INVALID_PRIMARY_COLOR = auto()
    INVALID_BRAND_COLOR = auto()
    PALETTE_TOO_LARGE = auto()

    # Option errors
    INVALID_ROLE = auto()
    INVALID_THEME_TYPE = auto()
    INVALID_STYLE = auto()
    INVALID_LEVEL = auto()
    INVALID_CONTEXT = auto()
    INVALID_USE_CASE = auto()

    # Configuration errors
    CONFIG_INVALID = auto()
    CONFIG_MISSING = auto()


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.MISSING_PARAMETER: "A required parameter is missing or empty.",
    ErrorCode.INVALID_COLOR: "The color is not a valid hex color.",
    ErrorCode.INVALID_PRIMARY_COLOR: "The primary color is not a valid hex color.",
    ErrorCode.INVALID_BRAND_COLOR: "A brand color is not a valid hex color.",
    ErrorCode.PALETTE_TOO_LARGE: "The palette holds more colors than one request accepts.",

    ErrorCode.INVALID_ROLE: "Unsupported semantic role.",
    ErrorCode.INVALID_THEME_TYPE: "Unsupported theme type.",
    ErrorCode.INVALID_STYLE: "Unsupported design system style.",
    ErrorCode.INVALID_LEVEL: "Unsupported accessibility level.",
    ErrorCode.INVALID_CONTEXT: "Unsupported usage context.",
    ErrorCode.INVALID_USE_CASE: "Unsupported use case.",

    ErrorCode.CONFIG_INVALID: "Configuration is invalid. Using defaults is recommended.",
    ErrorCode.CONFIG_MISSING: "Configuration file not found.",
}

DEFAULT_SUGGESTIONS: dict[ErrorCode, tuple[str, ...]] = {
    ErrorCode.MISSING_PARAMETER: ("Provide the parameter with at least one value",),
    ErrorCode.INVALID_COLOR: ("Use 6-digit hex colors such as #FF0000",),
    ErrorCode.INVALID_PRIMARY_COLOR: ("Use a valid hex color such as #2563eb",),
    ErrorCode.INVALID_BRAND_COLOR: ("Ensure all brand colors are valid hex colors",),
    ErrorCode.PALETTE_TOO_LARGE: ("Split the palette into requests of at most 256 colors",),
    ErrorCode.INVALID_ROLE: (
        "Use roles: primary, secondary, success, warning, error, info, neutral",
    ),
    ErrorCode.INVALID_THEME_TYPE: (
        "Specify theme type: light, dark, auto, high_contrast, or colorblind_friendly",
    ),
    ErrorCode.INVALID_STYLE: ("Use style: material, ios, fluent, or custom",),
    ErrorCode.INVALID_LEVEL: ("Use accessibility level AA or AAA",),
    ErrorCode.INVALID_CONTEXT: ("Use context: web, mobile, desktop, or print",),
    ErrorCode.INVALID_USE_CASE: ("Use only valid use cases: text, background, accent, interactive",),
    ErrorCode.CONFIG_INVALID: ("Fix the YAML syntax or delete the file to restore defaults",),
    ErrorCode.CONFIG_MISSING: ("Create the settings file or omit --config",),
}


@dataclass
class ChromaRoleError(Exception):
    """Base exception for chromarole with error code and context."""

    code: ErrorCode
    message: str = ""
    details: dict[str, Any] = field(default_factory=dict)
    suggestions: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")
        if not self.suggestions:
            self.suggestions = list(DEFAULT_SUGGESTIONS.get(self.code, ()))

    def __str__(self) -> str:
        parts = [self.message]
        if self.details:
            details_str = " | ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"\nDetails: {details_str}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging or JSON output."""
        return {
            "code": self.code.name,
            "message": self.message,
            "details": self.details,
            "suggestions": list(self.suggestions),
        }


@dataclass
class InvalidColorError(ChromaRoleError):
    """Raised when a color string cannot be parsed."""

    code: ErrorCode = ErrorCode.INVALID_COLOR


@dataclass
class ValidationError(ChromaRoleError):
    """Raised when caller input is missing or unsupported."""

    code: ErrorCode = ErrorCode.MISSING_PARAMETER


def format_error_for_user(error: ChromaRoleError | Exception) -> str:
    """Format an error for display with actionable suggestions."""
    if isinstance(error, ChromaRoleError):
        parts = [error.message]
        for suggestion in error.suggestions:
            if suggestion != error.message:
                parts.append(f"\n  - {suggestion}")
        return "".join(parts)
    return f"{type(error).__name__}: {error}"

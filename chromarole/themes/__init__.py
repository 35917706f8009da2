"""Theme model exports."""

from chromarole.themes.constants import STYLES, THEME_TYPES, TOKEN_KEYS
from chromarole.themes.models import (
    AccessibilityReport,
    BrandIntegrationReport,
    ContrastIssue,
    ThemeResult,
    ThemeTokenSet,
    ThemeVariant,
)

__all__ = [
    "STYLES",
    "THEME_TYPES",
    "TOKEN_KEYS",
    "AccessibilityReport",
    "BrandIntegrationReport",
    "ContrastIssue",
    "ThemeResult",
    "ThemeTokenSet",
    "ThemeVariant",
]

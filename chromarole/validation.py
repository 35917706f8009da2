"""Caller input validation, run before any color computation."""

from __future__ import annotations

from typing import Iterable, Sequence

from chromarole.core.color import Color, is_hex_color
from chromarole.errors import ErrorCode, InvalidColorError, ValidationError

_MAX_PALETTE_SIZE = 256


def parse_color(
    value: object,
    *,
    field: str,
    index: int | None = None,
    code: ErrorCode = ErrorCode.INVALID_COLOR,
) -> Color:
    """Parse one hex color, naming the offending field and index on failure."""
    location = field if index is None else f"{field}[{index}]"
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidColorError(
            code=code,
            message=f"Color at {location} is undefined",
            details={"parameter": field, "index": index},
        )
    if not is_hex_color(value):
        raise InvalidColorError(
            code=code,
            message=f"Invalid color at {location}: {value!r}",
            details={"parameter": field, "index": index, "provided": value},
        )
    return Color.from_hex(str(value))


def parse_palette(
    values: Sequence[object] | None,
    *,
    field: str = "base_palette",
    code: ErrorCode = ErrorCode.INVALID_COLOR,
) -> list[Color]:
    if values is None or isinstance(values, str) or len(values) == 0:
        raise ValidationError(
            code=ErrorCode.MISSING_PARAMETER,
            message=f"{field} is required and must contain at least one color",
            details={"parameter": field},
            suggestions=["Provide an array of hex colors such as ['#2563eb', '#10b981']"],
        )
    if len(values) > _MAX_PALETTE_SIZE:
        raise ValidationError(
            code=ErrorCode.PALETTE_TOO_LARGE,
            message=f"{field} exceeds max size {_MAX_PALETTE_SIZE}",
            details={"parameter": field, "size": len(values)},
        )
    return [parse_color(value, field=field, index=i, code=code) for i, value in enumerate(values)]


def parse_optional_colors(
    values: Iterable[object] | None,
    *,
    field: str,
    code: ErrorCode = ErrorCode.INVALID_COLOR,
) -> list[Color]:
    if not values:
        return []
    return [parse_color(value, field=field, index=i, code=code) for i, value in enumerate(values)]


def parse_choice(
    value: object,
    allowed: Sequence[str],
    *,
    field: str,
    code: ErrorCode,
) -> str:
    """Return *value* when it names one of *allowed*."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(
            code=ErrorCode.MISSING_PARAMETER,
            message=f"{field} is required",
            details={"parameter": field, "valid": list(allowed)},
        )
    cleaned = str(value).strip()
    if cleaned not in allowed:
        raise ValidationError(
            code=code,
            message=f"Unsupported {field}: {value!r}",
            details={"parameter": field, "provided": value, "valid": list(allowed)},
        )
    return cleaned


def parse_choices(
    values: Sequence[object] | None,
    allowed: Sequence[str],
    *,
    field: str,
    code: ErrorCode,
) -> list[str]:
    """Validate a non-empty list of names, reporting every invalid entry at once."""
    if values is None or isinstance(values, str) or len(values) == 0:
        raise ValidationError(
            code=ErrorCode.MISSING_PARAMETER,
            message=f"{field} is required and must not be empty",
            details={"parameter": field, "valid": list(allowed)},
        )
    invalid = [value for value in values if value not in allowed]
    if invalid:
        joined = ", ".join(str(value) for value in invalid)
        raise ValidationError(
            code=code,
            message=f"Invalid {field}: {joined}",
            details={"parameter": field, "invalid": invalid, "valid": list(allowed)},
        )
    return [str(value) for value in values]

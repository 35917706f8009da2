"""Tests for chromarole.errors."""

from chromarole.errors import (
    ChromaRoleError,
    ErrorCode,
    InvalidColorError,
    ValidationError,
    format_error_for_user,
)


def test_defaults_filled_from_code():
    error = ChromaRoleError(ErrorCode.INVALID_STYLE)
    assert error.message == "Unsupported design system style."
    assert error.suggestions == ["Use style: material, ios, fluent, or custom"]


def test_subclass_default_codes():
    assert InvalidColorError().code is ErrorCode.INVALID_COLOR
    assert ValidationError().code is ErrorCode.MISSING_PARAMETER


def test_to_dict_uses_code_name():
    error = InvalidColorError(message="bad", details={"index": 2})
    assert error.to_dict() == {
        "code": "INVALID_COLOR",
        "message": "bad",
        "details": {"index": 2},
        "suggestions": ["Use 6-digit hex colors such as #FF0000"],
    }
    assert "index=2" in str(error)


def test_format_error_for_user():
    error = ValidationError(code=ErrorCode.INVALID_LEVEL, message="Unsupported level")
    assert format_error_for_user(error) == (
        "Unsupported level\n  - Use accessibility level AA or AAA"
    )
    assert format_error_for_user(ValueError("boom")) == "ValueError: boom"

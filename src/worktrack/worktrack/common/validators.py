from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: Optional[str], field_name: str, min_len: int) -> str:
    if not isinstance(value, str) or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def optional_text(value: object, default: str = "") -> str:
    """Normalize an optional free-text field (None and blanks fall back to default)."""
    if value is None:
        return default
    if not isinstance(value, str):
        raise ValidationError("Text fields must be strings")
    value = value.strip()
    return value or default


def verbatim_text(value: object) -> str:
    """Free text stored exactly as sent; only None becomes ''."""
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError("Text fields must be strings")
    return value

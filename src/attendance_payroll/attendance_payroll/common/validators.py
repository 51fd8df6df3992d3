from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_non_negative(value, field_name: str) -> float:
    try:
        number = float(value or 0)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number") from None
    if number < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return number


def require_single_char(value: Optional[str], field_name: str) -> str:
    value = require_non_empty(value, field_name)
    if len(value) != 1:
        raise ValidationError(f"{field_name} must be a single character")
    return value

"""Input checks run before any mutation."""

from typing import Any, Optional

from ..exceptions import ValidationError


def require_positive_id(field: str, value: Any) -> int:
    """Accept only real positive integers (bools are rejected)."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(field, f"Invalid {field}: must be a positive integer")
    return value


def optional_cursor(value: Any) -> Optional[int]:
    if value is None:
        return None
    return require_positive_id("cursor", value)


def require_text(field: str, value: Optional[str], max_length: int) -> str:
    """Strip and check a text body is non-empty and within bounds."""
    text = (value or "").strip()
    if not text:
        raise ValidationError(field, f"{field.capitalize()} cannot be empty")
    if len(text) > max_length:
        raise ValidationError(field, f"{field.capitalize()} must be at most {max_length} characters")
    return text


def resolve_limit(value: Any, default: int, maximum: int) -> int:
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int) or not 1 <= value <= maximum:
        raise ValidationError("limit", f"Limit must be an integer between 1 and {maximum}")
    return value

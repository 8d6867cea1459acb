"""
Validation functions for configuration values.
"""

from typing import Any, List, Optional
from urllib.parse import urlparse

from .exceptions import ValidationError


def validate_positive_float(
    value: Any,
    min_value: float = 0.0,
    max_value: Optional[float] = None,
    field_name: str = "value"
) -> float:
    """
    Validate that a value is a number within the given bounds.

    Args:
        value: Value to validate
        min_value: Minimum allowed value (inclusive)
        max_value: Maximum allowed value (inclusive), None for no limit
        field_name: Name of the field being validated

    Returns:
        Validated float value

    Raises:
        ValidationError: If validation fails
    """
    if isinstance(value, bool):
        raise ValidationError(
            f"{field_name} must be a valid number, got {value}",
            field_name=field_name,
            value=value
        )
    try:
        float_value = float(value)
    except (ValueError, TypeError):
        raise ValidationError(
            f"{field_name} must be a valid number, got {value}",
            field_name=field_name,
            value=value
        )
    if float_value < min_value:
        raise ValidationError(
            f"{field_name} must be >= {min_value}, got {float_value}",
            field_name=field_name,
            value=value
        )
    if max_value is not None and float_value > max_value:
        raise ValidationError(
            f"{field_name} must be <= {max_value}, got {float_value}",
            field_name=field_name,
            value=value
        )
    return float_value


def validate_enum_choice(
    value: Any,
    valid_choices: List[str],
    field_name: str = "value",
    case_sensitive: bool = True
) -> str:
    """
    Validate that a value is one of the allowed choices.

    With case_sensitive=False the matching entry of valid_choices is returned,
    so callers always get the canonical spelling back.

    Raises:
        ValidationError: If value is not in choices
    """
    str_value = str(value)

    if case_sensitive:
        if str_value not in valid_choices:
            raise ValidationError(
                f"{field_name} must be one of {valid_choices}, got {value}",
                field_name=field_name,
                value=value
            )
        return str_value

    for choice in valid_choices:
        if choice.lower() == str_value.lower():
            return choice
    raise ValidationError(
        f"{field_name} must be one of {valid_choices} (case insensitive), got {value}",
        field_name=field_name,
        value=value
    )


def validate_url(value: Any, field_name: str = "url") -> str:
    """
    Validate an http(s) base URL and return it without trailing slashes.

    Raises:
        ValidationError: If the value is not a string, has another scheme
            or lacks a host
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(
            f"{field_name} must be a non-empty string, got {value!r}",
            field_name=field_name,
            value=value
        )

    url = value.strip()
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https"):
        raise ValidationError(
            f"{field_name} must use the http or https scheme, got {value!r}",
            field_name=field_name,
            value=value
        )
    if not parsed.netloc:
        raise ValidationError(
            f"{field_name} must include a host, got {value!r}",
            field_name=field_name,
            value=value
        )
    return url.rstrip("/")

"""
Validation and error handling for the mesostasks package.

This module provides the boundary error types, configuration validation and
consistent error reporting across the application.
"""

from .exceptions import (
    ErrorSeverity,
    FetchError,
    MonitorError,
    ParseError,
    ValidationError,
    handle_cli_error,
    handle_config_error,
    handle_error,
)
from .validators import (
    validate_enum_choice,
    validate_positive_float,
    validate_url,
)

__all__ = [
    # Errors
    "ErrorSeverity",
    "MonitorError",
    "FetchError",
    "ParseError",
    "ValidationError",
    # Error handling
    "handle_error",
    "handle_config_error",
    "handle_cli_error",
    # Validators
    "validate_enum_choice",
    "validate_positive_float",
    "validate_url",
]

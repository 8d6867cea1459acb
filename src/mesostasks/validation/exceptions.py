"""
Exception types and error handling helpers.

This module provides the error kinds raised at the boundaries of the
statistics pipeline along with consistent logging of those errors.
"""

import logging
import sys
from enum import Enum
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)
_module_logger = logger


class ErrorSeverity(Enum):
    """Severity levels for error handling."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


_LOG_LEVELS = {
    ErrorSeverity.DEBUG: logging.DEBUG,
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


class MonitorError(Exception):
    """Base class for errors that end a single polling invocation."""


class FetchError(MonitorError):
    """
    Raised when the statistics document cannot be retrieved from the agent.

    Covers transport failures (connection refused, timeouts, DNS errors) as
    well as responses with a status other than 200.
    """

    def __init__(self, message: str, url: Optional[str] = None,
                 status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ParseError(MonitorError):
    """
    Raised when the statistics document is not an array of instance objects.

    Attributes:
        index: Position of the offending element in the array, if known.
        field_name: Name of the offending field, if known.
    """

    def __init__(self, message: str, index: Optional[int] = None,
                 field_name: Optional[str] = None):
        super().__init__(message)
        self.index = index
        self.field_name = field_name


class ValidationError(Exception):
    """
    Exception raised when a configuration value fails validation.
    """

    def __init__(self, message: str, field_name: Optional[str] = None,
                 value: Any = None, severity: ErrorSeverity = ErrorSeverity.ERROR):
        super().__init__(message)
        self.field_name = field_name
        self.value = value
        self.severity = severity


def handle_error(
    error: Exception,
    context: str,
    severity: Union[ErrorSeverity, str] = ErrorSeverity.ERROR,
    reraise: bool = True,
    logger: Optional[logging.Logger] = None
) -> None:
    """
    Handle errors with consistent logging and optional re-raising.

    Args:
        error: The exception that occurred
        context: Context description of where the error occurred
        severity: Severity level for logging
        reraise: Whether to re-raise the exception after logging
        logger: Logger instance to use (defaults to module logger)
    """
    effective_logger = logger or _module_logger
    severity = ErrorSeverity(severity.lower()) if isinstance(severity, str) else severity

    # Tracebacks only for debugging and for failures that end the run
    effective_logger.log(
        _LOG_LEVELS[severity],
        f"Error in {context}: {error}",
        exc_info=severity in (ErrorSeverity.DEBUG, ErrorSeverity.CRITICAL),
    )

    if reraise:
        raise error


def handle_config_error(error: Exception, context: str, **kwargs) -> None:
    """Handle configuration-related errors."""
    handle_error(error, f"config {context}", **kwargs)


def handle_cli_error(error: Exception, context: str, **kwargs) -> None:
    """Log a fatal CLI error and exit the process."""
    exit_code = kwargs.pop('exit_code', 1)
    severity = kwargs.pop('severity', ErrorSeverity.ERROR)
    handle_error(error, f"CLI {context}", severity=severity, reraise=False, **kwargs)
    sys.exit(exit_code)

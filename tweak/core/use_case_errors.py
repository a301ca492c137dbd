"""Use case error handling utilities.

Provides consistent exception handling for use cases that report failure
through a response object instead of raising (currently init).

Design principles:
1. KeyboardInterrupt and SystemExit are always re-raised (never caught)
2. TweakDomainError subclasses carry user-friendly messages
3. Unexpected exceptions are logged and converted to generic error messages
"""

import logging

from tweak.domain.exceptions import TweakDomainError

logger = logging.getLogger(__name__)


def format_error_message(exception: Exception, operation_name: str) -> str:
    """Format an exception into a user-friendly error message.

    - TweakDomainError: Uses the error's message directly
    - OSError: Adds context about permissions/disk space
    - ValueError/RuntimeError: Includes exception message with operation context
    - Other exceptions: Returns a generic "internal error" message

    Args:
        exception: The exception that was caught.
        operation_name: Name of the operation for error messages (e.g., "initialization").

    Returns:
        User-friendly error message string.
    """
    if isinstance(exception, TweakDomainError):
        return exception.message
    elif isinstance(exception, OSError):
        return (
            f"I/O error: {exception}. "
            "Check file permissions, disk space, and filesystem access."
        )
    elif isinstance(exception, (ValueError, RuntimeError)):
        return f"{operation_name.capitalize()} error: {exception}"
    else:
        return f"Internal error during {operation_name}. Check logs for details."


def log_use_case_error(exception: Exception, operation_name: str) -> None:
    """Log an exception from a use case with appropriate severity.

    Args:
        exception: The exception that was caught.
        operation_name: Name of the operation for log messages.
    """
    if isinstance(exception, TweakDomainError):
        logger.error(str(exception))
    elif isinstance(exception, OSError):
        logger.error(f"I/O error during {operation_name}: {exception}")
    elif isinstance(exception, (ValueError, RuntimeError)):
        logger.error(f"Error during {operation_name}: {exception}")
    else:
        logger.exception(f"Unexpected error during {operation_name}")

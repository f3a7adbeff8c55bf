"""Exception hierarchy for the slideshow server."""

from typing import Any, Optional


class AppException(Exception):
    """Base exception for application errors.

    Attributes:
        message: Human-readable error message
        details: Optional structured context for logging
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


class SlideStoreError(AppException):
    """Raised when the persisted slides file cannot be read or parsed."""

    pass


class BootstrapError(AppException):
    """Raised when startup derivation hits a file system error."""

    pass


def format_exception_for_logging(exc: BaseException) -> str:
    """
    Format an exception as a single log-friendly line.

    Args:
        exc: Exception to format

    Returns:
        "<ExceptionType>: <message>", including the cause when chained
    """
    text = f"{type(exc).__name__}: {exc}"
    if exc.__cause__ is not None:
        text += f" (caused by {type(exc.__cause__).__name__}: {exc.__cause__})"
    return text

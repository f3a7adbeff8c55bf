"""Utility modules."""

from slideshow.utils.error_handling import (
    AppException,
    BootstrapError,
    SlideStoreError,
    format_exception_for_logging,
)
from slideshow.utils.logging_config import setup_logging

__all__ = [
    # Error handling
    "AppException",
    "BootstrapError",
    "SlideStoreError",
    "format_exception_for_logging",
    # Logging
    "setup_logging",
]

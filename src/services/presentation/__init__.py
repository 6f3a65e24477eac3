"""Presentation layer services for help pages.

This package contains services for status messages and error handling:
- status.py: StatusMessageRenderer for standardized status blocks
- error_handler.py: ErrorPresentationLayer for localized error pages
"""

from src.services.presentation.error_handler import ErrorPresentationLayer
from src.services.presentation.status import StatusMessageRenderer

__all__ = [
    "ErrorPresentationLayer",
    "StatusMessageRenderer",
]

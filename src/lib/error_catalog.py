"""Externalized error catalog for help page status messages.

All user-facing error messages are referenced here by message key
rather than hardcoded in the rendering code; the texts themselves
live in src.lib.messages so they can be localized.

Error Code Format: ERR_{DOMAIN}_{NUMBER}
- HELP: 001-099 (Request, lookup and rendering of help pages)
- UNKNOWN: 900-999 (Unmapped exceptions)
"""

from dataclasses import dataclass
from enum import Enum

from src.lib import messages
from src.lib.exceptions import (
    ExternalSourceUnavailable,
    MissingIdentifierError,
    RegistryError,
    SubstitutionError,
)


class ErrorSeverity(str, Enum):
    """Severity level for status messages."""

    INFO = "INFO"
    WARNING = "WARN"
    ERROR = "ERROR"


@dataclass(frozen=True)
class UserFacingError:
    """Structured error for status block presentation.

    Attributes:
        error_code: Unique error identifier (e.g., "ERR_HELP_001")
        message_key: Key of the localized message template
        severity: Error severity level
        exit_code: Process exit code used by the CLI
    """

    error_code: str
    message_key: str
    severity: ErrorSeverity = ErrorSeverity.ERROR
    exit_code: int = 5

    def message(self, language: str = messages.DEFAULT_LANGUAGE) -> str:
        """Get the localized message template."""
        return messages.get_message(self.message_key, language)


# =============================================================================
# Error Catalog
# =============================================================================

ERROR_CATALOG: dict[str, UserFacingError] = {
    "ERR_HELP_001": UserFacingError(
        error_code="ERR_HELP_001",
        message_key=messages.NO_HELP_NUMBER,
        exit_code=3,
    ),
    "ERR_HELP_002": UserFacingError(
        error_code="ERR_HELP_002",
        message_key=messages.HELP_NOT_FOUND,
        exit_code=3,
    ),
    "ERR_HELP_003": UserFacingError(
        error_code="ERR_HELP_003",
        message_key=messages.MODULE_HELP_NOT_FOUND,
        exit_code=3,
    ),
    "ERR_HELP_004": UserFacingError(
        error_code="ERR_HELP_004",
        message_key=messages.EXTERNAL_UNAVAILABLE,
        exit_code=4,
    ),
    "ERR_HELP_005": UserFacingError(
        error_code="ERR_HELP_005",
        message_key=messages.SUBSTITUTION_FAILED,
        exit_code=5,
    ),
    "ERR_HELP_006": UserFacingError(
        error_code="ERR_HELP_006",
        message_key=messages.REGISTRY_UNAVAILABLE,
        exit_code=2,
    ),
}

# =============================================================================
# Default Error (for unmapped exceptions)
# =============================================================================

DEFAULT_ERROR: UserFacingError = UserFacingError(
    error_code="ERR_UNKNOWN_001",
    message_key=messages.UNEXPECTED_ERROR,
    exit_code=5,
)

# =============================================================================
# Exception to Error Code Mapping
# =============================================================================

EXCEPTION_MAPPING: dict[type, str] = {
    MissingIdentifierError: "ERR_HELP_001",
    ExternalSourceUnavailable: "ERR_HELP_004",
    SubstitutionError: "ERR_HELP_005",
    RegistryError: "ERR_HELP_006",
}


def get_error_by_code(error_code: str) -> UserFacingError:
    """Get an error by its code.

    Args:
        error_code: The error code (e.g., "ERR_HELP_002")

    Returns:
        UserFacingError from catalog, or DEFAULT_ERROR if not found
    """
    return ERROR_CATALOG.get(error_code, DEFAULT_ERROR)

"""Error presentation layer for help page status messages.

ErrorPresentationLayer captures exceptions raised while serving a help
page and turns them into localized status blocks, while logging the
full details with a correlation ID for debugging.
"""

import logging
import uuid
from typing import Optional, Sequence, Type

from src.lib import messages
from src.lib.error_catalog import (
    DEFAULT_ERROR,
    EXCEPTION_MAPPING,
    UserFacingError,
    get_error_by_code,
)
from src.services.presentation.status import StatusMessageRenderer

logger = logging.getLogger(__name__)


class ErrorPresentationLayer:
    """Error presentation layer for help pages.

    - Translates exceptions to user-facing errors
    - Logs full details for debugging
    - Never exposes stack traces to users

    Example:
        layer = ErrorPresentationLayer(language="de")

        try:
            renderer.render(entry, variables, buffer)
        except HelpError as e:
            error = layer.translate_exception(e, {"identifier": "201"})
            block = layer.format_status(error, ["201"])
    """

    def __init__(
        self,
        language: str = messages.DEFAULT_LANGUAGE,
        status_renderer: Optional[StatusMessageRenderer] = None,
    ):
        """Initialize the error presentation layer."""
        self.language = language
        self._status = status_renderer or StatusMessageRenderer()
        # Copy default mappings to allow custom registrations
        self._exception_mappings: dict[Type[Exception], str] = dict(EXCEPTION_MAPPING)

    def translate_exception(
        self,
        exception: Exception,
        context: Optional[dict] = None,
    ) -> UserFacingError:
        """Transform exception into user-facing error.

        Args:
            exception: Caught exception
            context: Optional context (identifier, module, etc.)

        Returns:
            UserFacingError from the catalog

        Side Effects:
            Logs full exception details at ERROR level with correlation ID
        """
        correlation_id = str(uuid.uuid4())[:8]

        error_code = self._find_error_code(exception)
        error = get_error_by_code(error_code)

        log_context = {
            "correlation_id": correlation_id,
            "error_code": error_code,
            "exception_type": type(exception).__name__,
            "exception_message": str(exception),
            "context": context or {},
        }

        logger.error(
            f"Error [{correlation_id}] {error_code}: {type(exception).__name__}: {exception}",
            extra=log_context,
            exc_info=error is DEFAULT_ERROR,
        )

        return error

    def register_exception_mapping(
        self,
        exception_type: Type[Exception],
        error_code: str,
    ) -> None:
        """Register mapping from exception type to error code.

        Args:
            exception_type: Exception class to map
            error_code: Target error code
        """
        self._exception_mappings[exception_type] = error_code
        logger.debug(f"Registered exception mapping: {exception_type.__name__} -> {error_code}")

    def format_status(
        self,
        error: UserFacingError,
        variables: Sequence[str] = (),
    ) -> str:
        """Format error as a status block.

        Args:
            error: UserFacingError to format
            variables: Values for the placeholders of the error message

        Returns:
            HTML status block
        """
        return self._status.render(
            error.severity,
            messages.get_message(messages.ERROR_TITLE, self.language),
            error.message(self.language),
            variables,
        )

    def _find_error_code(self, exception: Exception) -> str:
        """Find the error code for an exception.

        Checks registered mappings in order (more specific first).
        """
        for exc_type, error_code in self._exception_mappings.items():
            if isinstance(exception, exc_type):
                return error_code

        return DEFAULT_ERROR.error_code

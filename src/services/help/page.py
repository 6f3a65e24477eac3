"""Help page service: serves one help page per request.

Builds the HelpRequest from request parameters, resolves the entry and
renders it. Every failure is shown inline as a status block inside the
page chrome; no default content is ever substituted.
"""

import io
import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from src.lib.error_catalog import UserFacingError, get_error_by_code
from src.lib.exceptions import (
    ExternalSourceUnavailable,
    MissingIdentifierError,
    RegistryError,
    SubstitutionError,
)
from src.models.help_entry import NotFound
from src.models.request import HelpRequest
from src.services.help.renderer import EntryRenderer
from src.services.help.resolver import EntryResolver
from src.services.presentation.error_handler import ErrorPresentationLayer

logger = logging.getLogger(__name__)


@dataclass
class HelpPage:
    """
    A rendered help page.

    Attributes:
        text: Complete page markup
        error: The error shown on the page, None for a regular help page
    """

    text: str
    error: Optional[UserFacingError] = None

    @property
    def ok(self) -> bool:
        """Whether the page shows the requested help."""
        return self.error is None


class HelpPageService:
    """
    Dispatcher between request parameters and the help core.

    Example:
        service = HelpPageService(resolver, renderer, ErrorPresentationLayer())
        page = service.handle({"HelpNumber": "201", "var1": "uid"})
        print(page.text)
    """

    def __init__(
        self,
        resolver: EntryResolver,
        renderer: EntryRenderer,
        errors: Optional[ErrorPresentationLayer] = None,
    ):
        self.resolver = resolver
        self.renderer = renderer
        self.errors = errors or ErrorPresentationLayer(language=renderer.language)

    def handle(self, params: Mapping[str, str]) -> HelpPage:
        """
        Serve the help page for raw request parameters.

        Args:
            params: Request parameters (HelpNumber, module, scope, var1, ...)

        Returns:
            HelpPage with the help content or an error status block
        """
        try:
            request = HelpRequest.from_query(params)
        except MissingIdentifierError as e:
            error = self.errors.translate_exception(e)
            return self._error_page(error, [])

        return self.serve(request)

    def serve(self, request: HelpRequest) -> HelpPage:
        """
        Serve the help page for a validated request.

        Args:
            request: Help request

        Returns:
            HelpPage with the help content or an error status block
        """
        context = {"identifier": request.identifier, "module": request.module}
        try:
            result = self.resolver.resolve(request.identifier, request.module, request.scope)
        except RegistryError as e:
            error = self.errors.translate_exception(e, context)
            return self._error_page(error, [request.module or ""])

        if isinstance(result, NotFound):
            return self._not_found_page(result)

        buffer = io.StringIO()
        try:
            self.renderer.render(result, request.variables, buffer)
        except ExternalSourceUnavailable as e:
            error = self.errors.translate_exception(e, context)
            return self._error_page(error, [e.link])
        except SubstitutionError as e:
            error = self.errors.translate_exception(e, context)
            return self._error_page(error, [request.identifier])

        return HelpPage(text=buffer.getvalue())

    def _not_found_page(self, result: NotFound) -> HelpPage:
        if result.module is not None:
            error = get_error_by_code("ERR_HELP_003")
            variables = [result.identifier, result.module]
        else:
            error = get_error_by_code("ERR_HELP_002")
            variables = [result.identifier]

        logger.warning(
            f"{error.error_code}: help {result.identifier} not available"
            + (f" for module '{result.module}'" if result.module else "")
        )
        return self._error_page(error, variables)

    def _error_page(self, error: UserFacingError, variables: Sequence[str]) -> HelpPage:
        buffer = io.StringIO()
        self.renderer.render_block(self.errors.format_status(error, variables), buffer)
        return HelpPage(text=buffer.getvalue(), error=error)

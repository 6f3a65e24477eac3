"""Help request entity built from request parameters."""

from typing import Mapping

from pydantic import BaseModel, Field

from src.lib.exceptions import MissingIdentifierError

# Request parameter names
PARAM_IDENTIFIER = "HelpNumber"
PARAM_MODULE = "module"
PARAM_SCOPE = "scope"
PARAM_VARIABLE_PREFIX = "var"


class HelpRequest(BaseModel):
    """
    One help page request.

    Constructed once by the dispatcher and passed explicitly to the
    resolver and renderer; lives for a single render call.
    """

    identifier: str = Field(..., description="Requested help identifier")
    module: str | None = Field(default=None, description="Module owning the entry")
    scope: str | None = Field(default=None, description="Scope within the module")
    variables: tuple[str, ...] = Field(
        default=(), description="Positional substitution values"
    )

    model_config = {"frozen": True}

    @staticmethod
    def collect_variables(params: Mapping[str, str]) -> tuple[str, ...]:
        """
        Collect var1, var2, ... until the first missing index.

        Args:
            params: Request parameters

        Returns:
            Ordered, contiguous tuple of values
        """
        values = []
        index = 1
        while f"{PARAM_VARIABLE_PREFIX}{index}" in params:
            values.append(str(params[f"{PARAM_VARIABLE_PREFIX}{index}"]))
            index += 1
        return tuple(values)

    @classmethod
    def from_query(cls, params: Mapping[str, str]) -> "HelpRequest":
        """
        Create a HelpRequest from request parameters.

        The HelpNumber is kept exactly as submitted. Only an absent or
        empty value counts as missing; whitespace is not trimmed, so
        " 201 " does not match the entry 201.

        Args:
            params: Parameters such as HelpNumber, module, scope, var1...

        Returns:
            HelpRequest instance

        Raises:
            MissingIdentifierError: If no HelpNumber was submitted
        """
        identifier = params.get(PARAM_IDENTIFIER)
        if identifier is None or identifier == "":
            raise MissingIdentifierError()

        return cls(
            identifier=str(identifier),
            module=params.get(PARAM_MODULE) or None,
            scope=params.get(PARAM_SCOPE) or None,
            variables=cls.collect_variables(params),
        )

"""Exception hierarchy for the help center.

All custom exceptions inherit from HelpError to enable
selective catching at different levels.

Hierarchy:
    HelpError (base)
    ├── ConfigError - Configuration issues (missing paths, bad values)
    ├── ValidationError - Invalid help entry definitions
    ├── MissingIdentifierError - No help number submitted
    ├── SubstitutionError - Template/variable mismatch
    ├── RegistryError - Help definition files unreadable or malformed
    └── ExternalSourceUnavailable - External help page cannot be read
"""


class HelpError(Exception):
    """
    Base exception for all help center errors.

    Catching this will catch all custom exceptions from this module.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigError(HelpError):
    """
    Configuration error.

    Raised when required configuration is missing or invalid.
    Examples: registry path does not exist, unknown language.

    CLI Exit Code: 2
    """

    pass


class ValidationError(HelpError):
    """
    Help entry validation error.

    Raised when a help entry definition breaks its invariants.
    Examples: external entry without link, empty cross-reference text.
    """

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)


class MissingIdentifierError(HelpError):
    """
    Raised when a request carries no help number.

    CLI Exit Code: 3
    """

    def __init__(self, message: str = "No help number submitted"):
        super().__init__(message)


class SubstitutionError(HelpError):
    """
    Positional substitution error.

    Raised when the number of supplied variables does not match the
    placeholders of a template, or a placeholder cannot be filled.

    Attributes:
        expected: Number of placeholders in the template (if known)
        supplied: Number of variables supplied (if known)
    """

    def __init__(
        self, message: str, expected: int | None = None, supplied: int | None = None
    ):
        self.expected = expected
        self.supplied = supplied
        super().__init__(message)


class RegistryError(HelpError):
    """
    Help registry loading error.

    Attributes:
        path: Definition file that caused the error
    """

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class ExternalSourceUnavailable(HelpError):
    """
    External help page cannot be read.

    Propagated as-is to the caller; there is no retry and no fallback content.

    CLI Exit Code: 4

    Attributes:
        link: Name of the external source
        original_error: Original exception if wrapping
    """

    def __init__(
        self, link: str, reason: str = "", original_error: Exception | None = None
    ):
        self.link = link
        self.original_error = original_error
        message = f"External help page '{link}' is unavailable"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)

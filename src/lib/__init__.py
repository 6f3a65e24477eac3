"""Shared utilities and configuration."""

from src.lib.config import HelpSettings
from src.lib.substitution import count_placeholders, substitute
from src.lib.exceptions import (
    HelpError,
    ConfigError,
    ValidationError,
    MissingIdentifierError,
    SubstitutionError,
    RegistryError,
    ExternalSourceUnavailable,
)

__all__ = [
    "HelpSettings",
    "count_placeholders",
    "substitute",
    "HelpError",
    "ConfigError",
    "ValidationError",
    "MissingIdentifierError",
    "SubstitutionError",
    "RegistryError",
    "ExternalSourceUnavailable",
]

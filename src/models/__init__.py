"""Domain models for the help center."""

from src.models.help_entry import CrossReference, HelpEntry, NotFound
from src.models.request import HelpRequest

__all__ = [
    "CrossReference",
    "HelpEntry",
    "NotFound",
    "HelpRequest",
]

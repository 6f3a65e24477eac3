"""Externalized message templates for help pages.

All user-facing texts are kept here so that help pages and status
blocks can be localized without touching the rendering code.

Templates use the positional placeholders understood by
src.lib.substitution (%s, %d, %% for a literal percent sign).
Status templates may contain {bold}/{endbold} markers.
"""

DEFAULT_LANGUAGE = "en"

# =============================================================================
# Message keys
# =============================================================================

SEE_ALSO = "see_also"
NO_HELP_NUMBER = "no_help_number"
HELP_NOT_FOUND = "help_not_found"
MODULE_HELP_NOT_FOUND = "module_help_not_found"
EXTERNAL_UNAVAILABLE = "external_unavailable"
SUBSTITUTION_FAILED = "substitution_failed"
REGISTRY_UNAVAILABLE = "registry_unavailable"
UNEXPECTED_ERROR = "unexpected_error"
ERROR_TITLE = "error_title"

# =============================================================================
# Catalogues
# =============================================================================

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        SEE_ALSO: "See also",
        NO_HELP_NUMBER: "Sorry no help number submitted.",
        HELP_NOT_FOUND: "Sorry this help number ({bold}%s{endbold}) is not available.",
        MODULE_HELP_NOT_FOUND: (
            "Sorry this help id ({bold}%s{endbold}) is not available "
            "for this module ({bold}%s{endbold})."
        ),
        EXTERNAL_UNAVAILABLE: "Sorry the help page ({bold}%s{endbold}) could not be loaded.",
        SUBSTITUTION_FAILED: (
            "Sorry the help page ({bold}%s{endbold}) could not be displayed "
            "with the given values."
        ),
        REGISTRY_UNAVAILABLE: (
            "Sorry the help definitions of this module ({bold}%s{endbold}) "
            "could not be loaded."
        ),
        UNEXPECTED_ERROR: "Sorry an unexpected error occurred.",
        ERROR_TITLE: "Error",
    },
    "de": {
        SEE_ALSO: "Siehe auch",
        NO_HELP_NUMBER: "Leider wurde keine Hilfenummer übergeben.",
        HELP_NOT_FOUND: "Leider ist diese Hilfenummer ({bold}%s{endbold}) nicht verfügbar.",
        MODULE_HELP_NOT_FOUND: (
            "Leider ist diese Hilfe-ID ({bold}%s{endbold}) für dieses Modul "
            "({bold}%s{endbold}) nicht verfügbar."
        ),
        EXTERNAL_UNAVAILABLE: (
            "Leider konnte die Hilfeseite ({bold}%s{endbold}) nicht geladen werden."
        ),
        SUBSTITUTION_FAILED: (
            "Leider konnte die Hilfeseite ({bold}%s{endbold}) mit den übergebenen "
            "Werten nicht angezeigt werden."
        ),
        REGISTRY_UNAVAILABLE: (
            "Leider konnten die Hilfedefinitionen dieses Moduls ({bold}%s{endbold}) "
            "nicht geladen werden."
        ),
        UNEXPECTED_ERROR: "Leider ist ein unerwarteter Fehler aufgetreten.",
        ERROR_TITLE: "Fehler",
    },
}


def available_languages() -> list[str]:
    """List the languages with a message catalogue."""
    return sorted(MESSAGES)


def get_message(key: str, language: str = DEFAULT_LANGUAGE) -> str:
    """Get a message template by key.

    Unknown languages and keys missing from a catalogue fall back
    to English.

    Args:
        key: Message key (e.g., SEE_ALSO)
        language: Language code (e.g., "en", "de")

    Returns:
        Message template

    Raises:
        KeyError: If the key is unknown in every catalogue
    """
    catalogue = MESSAGES.get(language, MESSAGES[DEFAULT_LANGUAGE])
    if key in catalogue:
        return catalogue[key]
    return MESSAGES[DEFAULT_LANGUAGE][key]

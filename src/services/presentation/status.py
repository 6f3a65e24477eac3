"""Standardized status blocks for help pages.

Status messages are templates with positional placeholders and
{bold}/{endbold} markers. Values are HTML-escaped before insertion.
"""

import html
from typing import Sequence

from src.lib.error_catalog import ErrorSeverity
from src.lib.substitution import substitute

MARKERS = {
    "{bold}": "<b>",
    "{endbold}": "</b>",
}


def apply_markers(text: str) -> str:
    """Replace formatting markers with their HTML tags."""
    for marker, tag in MARKERS.items():
        text = text.replace(marker, tag)
    return text


class StatusMessageRenderer:
    """Renders status blocks (info, warning, error)."""

    def render(
        self,
        severity: ErrorSeverity,
        title: str,
        message: str,
        variables: Sequence[str] = (),
    ) -> str:
        """
        Render a status block.

        Args:
            severity: Severity level, selects the CSS class
            title: Block title (may be empty)
            message: Message template with placeholders and markers
            variables: Values for the message placeholders

        Returns:
            HTML block

        Raises:
            SubstitutionError: If variables do not match the message placeholders
        """
        css_class = f"status{severity.value.capitalize()}"
        text = apply_markers(substitute(message, list(variables), escape=html.escape))

        lines = [f'\t\t<div class="statusMessage {css_class}">\n']
        if title:
            lines.append(f"\t\t\t<h2>{html.escape(title)}</h2>\n")
        lines.append(f"\t\t\t<p>{text}</p>\n")
        lines.append("\t\t</div>\n")
        return "".join(lines)

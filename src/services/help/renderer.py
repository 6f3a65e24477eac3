"""Entry renderer: writes a resolved help entry as an HTML page.

Two content paths exist:

- external: the page chrome surrounds the verbatim content of the
  source named by the entry's link; variables are ignored.
- templated: headline, body with positional substitution, then one
  "See also" line per cross-reference in stored order.
"""

import html
import io
import logging
from typing import Callable, Optional, Sequence, TextIO

from src.lib import messages
from src.lib.substitution import substitute
from src.models.help_entry import CrossReference, HelpEntry
from src.services.help.chrome import HtmlPageChrome, PageChrome
from src.services.help.content_source import ContentSource

logger = logging.getLogger(__name__)

SourceLookup = Callable[[str], ContentSource]


class EntryRenderer:
    """
    Renders help entries into a text sink.

    Example:
        renderer = EntryRenderer(HtmlPageChrome(), factory.for_link)
        renderer.render(entry, ["Alice", "42"], sys.stdout)
    """

    def __init__(
        self,
        chrome: Optional[PageChrome] = None,
        source_for_link: Optional[SourceLookup] = None,
        language: str = messages.DEFAULT_LANGUAGE,
    ):
        """
        Initialize the renderer.

        Args:
            chrome: Page chrome written around every page
            source_for_link: Maps the link of an external entry to its content source
            language: Language of the "See also" label
        """
        self.chrome = chrome or HtmlPageChrome()
        self._source_for_link = source_for_link
        self.language = language

    def render(self, entry: HelpEntry, variables: Sequence[str], sink: TextIO) -> None:
        """
        Render a help entry as a complete page.

        Args:
            entry: Resolved help entry
            variables: Positional substitution values (ignored for external entries)
            sink: Text stream receiving the page

        Raises:
            SubstitutionError: If variables do not match the body placeholders
            ExternalSourceUnavailable: If the external content cannot be read
        """
        if entry.is_external:
            self._render_external(entry, variables, sink)
        else:
            self._render_templated(entry, variables, sink)

    def render_to_string(self, entry: HelpEntry, variables: Sequence[str] = ()) -> str:
        """Render a help entry and return the page text."""
        buffer = io.StringIO()
        self.render(entry, variables, buffer)
        return buffer.getvalue()

    def render_block(self, block: str, sink: TextIO) -> None:
        """Render a prepared block (e.g. a status message) inside the page chrome."""
        self.chrome.emit_head(sink)
        sink.write(block)
        self.chrome.emit_foot(sink)

    def _render_external(
        self, entry: HelpEntry, variables: Sequence[str], sink: TextIO
    ) -> None:
        if self._source_for_link is None:
            raise RuntimeError("EntryRenderer has no content sources for external entries")
        if variables:
            logger.debug(f"Ignoring {len(variables)} variable(s) for external page {entry.link}")

        source = self._source_for_link(entry.link)
        self.chrome.emit_head(sink)
        source.read_into(sink)
        self.chrome.emit_foot(sink)

    def _render_templated(
        self, entry: HelpEntry, variables: Sequence[str], sink: TextIO
    ) -> None:
        # Substitute before writing so a mismatch leaves the sink untouched
        template = f'\t\t<p class="help">{entry.body}</p>\n'
        paragraph = substitute(template, list(variables), escape=html.escape)

        self.chrome.emit_head(sink)
        sink.write(f'\t\t<h1 class="help">{entry.headline}</h1>\n')
        sink.write(paragraph)
        for reference in entry.see_also:
            sink.write(self.format_see_also(reference))
        self.chrome.emit_foot(sink)

    def format_see_also(self, reference: CrossReference) -> str:
        """Format one "See also" line."""
        label = messages.get_message(messages.SEE_ALSO, self.language)
        if reference.link:
            href = html.escape(reference.link, quote=True)
            target = f'<a class="helpSeeAlso" href="{href}">{reference.text}</a>'
        else:
            target = reference.text
        return f'\t\t<p class="help">{label}: {target}</p>\n'

"""HTML page chrome surrounding every help page."""

import html
from typing import Protocol, TextIO

DEFAULT_HEADER = (
    '<!DOCTYPE HTML PUBLIC "-//W3C//DTD HTML 4.01 Transitional//EN">\n'
    "<html>\n\t<head>\n"
)
DEFAULT_TITLE = "LDAP Account Manager Help Center"
DEFAULT_STYLESHEET = "../style/layout.css"


class PageChrome(Protocol):
    """Contract for the document shell written around page content."""

    def emit_head(self, sink: TextIO) -> None:
        """Write everything up to and including the opening body tag."""
        ...

    def emit_foot(self, sink: TextIO) -> None:
        """Write the closing body and html tags."""
        ...


class HtmlPageChrome:
    """Document shell of the help center pages."""

    def __init__(
        self,
        header: str = DEFAULT_HEADER,
        title: str = DEFAULT_TITLE,
        stylesheet: str = DEFAULT_STYLESHEET,
    ):
        """
        Args:
            header: Document header up to the open head element
            title: Page title
            stylesheet: URL of the stylesheet
        """
        self.header = header
        self.title = title
        self.stylesheet = stylesheet

    def emit_head(self, sink: TextIO) -> None:
        sink.write(self.header)
        sink.write(f"\t\t<title>{html.escape(self.title)}</title>\n")
        sink.write(
            '\t\t<link rel="stylesheet" type="text/css" '
            f'href="{html.escape(self.stylesheet, quote=True)}">\n'
        )
        sink.write("\t</head>\n\t<body>\n")

    def emit_foot(self, sink: TextIO) -> None:
        sink.write("\t</body>\n</html>\n")

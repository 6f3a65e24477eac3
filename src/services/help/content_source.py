"""Content sources for external help pages.

An external help entry names a source whose content is copied verbatim
into the page (it may itself be HTML). Sources are injected into the
renderer so they can be replaced by fakes in tests.

Read failures surface as ExternalSourceUnavailable; there is no retry.
"""

import logging
from pathlib import Path
from typing import Optional, Protocol, TextIO

import httpx

from src.lib.exceptions import ExternalSourceUnavailable

logger = logging.getLogger(__name__)


class ContentSource(Protocol):
    """Contract for external help page content."""

    def read_into(self, sink: TextIO) -> None:
        """
        Copy the complete content into sink.

        Raises:
            ExternalSourceUnavailable: If the content cannot be read
        """
        ...


class FileContentSource:
    """
    External help page stored as a file below the help directory.

    Names that resolve outside the help directory are refused.
    """

    def __init__(self, base_dir: Path | str, name: str, encoding: str = "utf-8"):
        self.base_dir = Path(base_dir)
        self.name = name
        self.encoding = encoding

    def resolve_path(self) -> Path:
        """
        Get the absolute file path of this source.

        Raises:
            ExternalSourceUnavailable: If the name escapes the help directory
        """
        base = self.base_dir.resolve()
        target = (base / self.name).resolve()
        if not target.is_relative_to(base):
            raise ExternalSourceUnavailable(self.name, "outside of help directory")
        return target

    def read_into(self, sink: TextIO) -> None:
        """Copy the file content into sink."""
        path = self.resolve_path()
        try:
            content = path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise ExternalSourceUnavailable(self.name, str(e), original_error=e)

        logger.debug(f"Included external help page {path} ({len(content)} chars)")
        sink.write(content)


class HttpContentSource:
    """External help page served over HTTP(S)."""

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the HTTP source.

        Args:
            url: Absolute http:// or https:// URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport (e.g. httpx.MockTransport)
        """
        self.url = url
        self._timeout = timeout
        self._transport = transport

    def read_into(self, sink: TextIO) -> None:
        """Fetch the page and copy its body into sink."""
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.get(self.url)
        except httpx.TimeoutException as e:
            raise ExternalSourceUnavailable(
                self.url, f"request timed out after {self._timeout}s", original_error=e
            )
        except httpx.RequestError as e:
            raise ExternalSourceUnavailable(
                self.url, f"network error: {e}", original_error=e
            )

        if not response.is_success:
            raise ExternalSourceUnavailable(self.url, f"HTTP {response.status_code}")

        logger.debug(f"Included external help page {self.url} ({len(response.text)} chars)")
        sink.write(response.text)


class ContentSourceFactory:
    """
    Creates the content source for the link of an external help entry.

    http:// and https:// links are fetched, every other link names a
    file below the help directory.
    """

    HTTP_SCHEMES = ("http://", "https://")

    def __init__(
        self,
        help_dir: Path | str,
        http_timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._help_dir = Path(help_dir)
        self._http_timeout = http_timeout
        self._transport = transport

    def for_link(self, link: str) -> ContentSource:
        """Get the content source for a link."""
        if link.lower().startswith(self.HTTP_SCHEMES):
            return HttpContentSource(link, timeout=self._http_timeout, transport=self._transport)
        return FileContentSource(self._help_dir, link)

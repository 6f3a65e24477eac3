"""Contract tests for external content sources."""

import io

import httpx
import pytest

from src.lib.exceptions import ExternalSourceUnavailable
from src.services.help.content_source import (
    ContentSourceFactory,
    FileContentSource,
    HttpContentSource,
)


class TestFileContentSource:
    """Tests for file-backed sources."""

    def test_reads_file_verbatim(self, help_dir):
        sink = io.StringIO()

        FileContentSource(help_dir, "foo.inc").read_into(sink)

        assert sink.getvalue() == "<p>External <b>content</b></p>\n"

    def test_missing_file(self, help_dir):
        with pytest.raises(ExternalSourceUnavailable) as exc_info:
            FileContentSource(help_dir, "missing.inc").read_into(io.StringIO())

        assert exc_info.value.link == "missing.inc"
        assert exc_info.value.original_error is not None

    def test_refuses_paths_outside_help_dir(self, help_dir):
        (help_dir.parent / "secret.txt").write_text("secret", encoding="utf-8")
        sink = io.StringIO()

        with pytest.raises(ExternalSourceUnavailable):
            FileContentSource(help_dir, "../secret.txt").read_into(sink)

        assert sink.getvalue() == ""

    def test_subdirectories_allowed(self, help_dir):
        (help_dir / "ext").mkdir()
        (help_dir / "ext" / "page.inc").write_text("page", encoding="utf-8")
        sink = io.StringIO()

        FileContentSource(help_dir, "ext/page.inc").read_into(sink)

        assert sink.getvalue() == "page"


class TestHttpContentSource:
    """Tests for HTTP-backed sources."""

    def test_fetches_body(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<p>remote</p>"))
        sink = io.StringIO()

        HttpContentSource("https://docs.example.org/p.html", transport=transport).read_into(sink)

        assert sink.getvalue() == "<p>remote</p>"

    def test_http_error_status(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(404))

        with pytest.raises(ExternalSourceUnavailable) as exc_info:
            HttpContentSource("https://docs.example.org/p.html", transport=transport).read_into(
                io.StringIO()
            )

        assert "HTTP 404" in str(exc_info.value)

    def test_network_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        transport = httpx.MockTransport(handler)

        with pytest.raises(ExternalSourceUnavailable) as exc_info:
            HttpContentSource("https://docs.example.org/p.html", transport=transport).read_into(
                io.StringIO()
            )

        assert isinstance(exc_info.value.original_error, httpx.ConnectError)

    def test_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("too slow", request=request)

        transport = httpx.MockTransport(handler)

        with pytest.raises(ExternalSourceUnavailable) as exc_info:
            HttpContentSource(
                "https://docs.example.org/p.html", timeout=1.0, transport=transport
            ).read_into(io.StringIO())

        assert "timed out" in str(exc_info.value)


class TestContentSourceFactory:
    """Tests for link dispatch."""

    def test_file_link(self, help_dir):
        source = ContentSourceFactory(help_dir).for_link("foo.inc")

        assert isinstance(source, FileContentSource)
        assert source.name == "foo.inc"

    @pytest.mark.parametrize("link", ["http://docs/p", "HTTPS://docs/p"])
    def test_http_link(self, help_dir, link):
        source = ContentSourceFactory(help_dir, http_timeout=3.0).for_link(link)

        assert isinstance(source, HttpContentSource)
        assert source.url == link

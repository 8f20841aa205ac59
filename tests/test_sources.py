"""Tests for document sources and their handlers."""

import re

import pytest
from pathlib import Path
from tenacity import wait_none

import httpx

from mdview.config import get_settings
from mdview.sources import (
    DocumentLoadError,
    DocumentNotFoundError,
    LocalFile,
    LocalFileHandler,
    NetworkError,
    SaveError,
    Url,
    UrlHandler,
    get_handler,
    new_document_path,
    source_from_string,
)


class TestSourceFromString:
    """Tests for interpreting command-line sources."""

    @pytest.mark.parametrize(
        "value",
        ["http://example.com/a.md", "https://example.com/a.md", "HTTPS://EXAMPLE.COM/A.MD"],
    )
    def test_urls(self, value: str):
        """Test that http(s) values become Url sources."""
        assert source_from_string(value) == Url(value)

    def test_paths(self):
        """Test that anything else is a local path."""
        assert source_from_string("notes/readme.md") == LocalFile(Path("notes/readme.md"))

    def test_get_handler(self):
        """Test handler lookup by source type."""
        assert get_handler(LocalFile(Path("a.md"))) is LocalFileHandler
        assert get_handler(Url("http://x")) is UrlHandler

    def test_get_handler_unsupported(self):
        """Test that unknown sources are rejected."""
        with pytest.raises(ValueError, match="Unsupported source"):
            get_handler("a.md")


class TestLocalFileHandler:
    """Tests for the local file handler."""

    def test_read(self, tmp_markdown_file: Path, sample_markdown: str):
        """Test reading a markdown file."""
        handler = LocalFileHandler()

        assert handler.read(LocalFile(tmp_markdown_file)) == sample_markdown

    def test_read_missing_file(self, tmp_path: Path):
        """Test that a missing file raises DocumentNotFoundError."""
        handler = LocalFileHandler()

        with pytest.raises(DocumentNotFoundError, match="not found"):
            handler.read(LocalFile(tmp_path / "missing.md"))

    def test_read_directory_fails(self, tmp_path: Path):
        """Test that reading a directory is a load error."""
        handler = LocalFileHandler()

        with pytest.raises(DocumentLoadError):
            handler.read(LocalFile(tmp_path))

    def test_read_bad_encoding(self, tmp_path: Path):
        """Test that undecodable bytes are a load error."""
        file_path = tmp_path / "binary.md"
        file_path.write_bytes(b"\xff\xfe\xfa")

        with pytest.raises(DocumentLoadError):
            LocalFileHandler(encoding="utf-8").read(LocalFile(file_path))

    def test_write_creates_parents(self, tmp_path: Path):
        """Test writing into a folder that does not exist yet."""
        target = tmp_path / "nested" / "dir" / "out.md"
        handler = LocalFileHandler()

        handler.write("# Saved", LocalFile(target))

        assert target.read_text(encoding="utf-8") == "# Saved"

    def test_write_over_directory_fails(self, tmp_path: Path):
        """Test that write failures raise SaveError."""
        handler = LocalFileHandler()

        with pytest.raises(SaveError):
            handler.write("text", LocalFile(tmp_path))

    def test_rejects_url_source(self):
        """Test that a URL cannot be read as a local file."""
        with pytest.raises(TypeError):
            LocalFileHandler().read(Url("http://example.com"))

    def test_new_document_path(self, tmp_path: Path):
        """Test generated names for never-saved documents."""
        path = new_document_path(tmp_path)

        assert path.parent == tmp_path
        assert re.fullmatch(r"new_markdown_document_\d+\.md", path.name)


class TestUrlHandler:
    """Tests for the HTTP(S) handler."""

    def test_read(self, make_transport):
        """Test fetching a document."""
        calls: list = []
        handler = UrlHandler(transport=make_transport(200, "# Remote", calls))

        assert handler.read(Url("https://example.com/doc.md")) == "# Remote"
        assert len(calls) == 1
        assert str(calls[0].url) == "https://example.com/doc.md"

    def test_http_error_status(self, make_transport):
        """Test that a 404 is a NetworkError carrying the status."""
        calls: list = []
        handler = UrlHandler(transport=make_transport(404, "nope", calls))

        with pytest.raises(NetworkError, match="404") as exc_info:
            handler.read(Url("https://example.com/missing.md"))

        assert exc_info.value.status_code == 404
        assert len(calls) == 1

    def test_transport_error_retried(self):
        """Test that connection failures are retried, then reported."""
        attempts: list = []

        def handler_fn(request: httpx.Request) -> httpx.Response:
            attempts.append(request)
            raise httpx.ConnectError("connection refused", request=request)

        handler = UrlHandler(
            max_retries=3,
            transport=httpx.MockTransport(handler_fn),
            wait=wait_none(),
        )

        with pytest.raises(NetworkError, match="connection refused") as exc_info:
            handler.read(Url("https://example.com/doc.md"))

        assert exc_info.value.status_code is None
        assert len(attempts) == 3

    def test_transport_error_then_success(self):
        """Test recovery after a transient failure."""
        attempts: list = []

        def handler_fn(request: httpx.Request) -> httpx.Response:
            attempts.append(request)
            if len(attempts) == 1:
                raise httpx.ReadTimeout("timed out", request=request)
            return httpx.Response(200, text="ok")

        handler = UrlHandler(
            max_retries=3,
            transport=httpx.MockTransport(handler_fn),
            wait=wait_none(),
        )

        assert handler.read(Url("https://example.com/doc.md")) == "ok"
        assert len(attempts) == 2

    def test_write_is_refused(self):
        """Test that URLs are read-only."""
        with pytest.raises(SaveError, match="read-only"):
            UrlHandler().write("text", Url("https://example.com/doc.md"))

    def test_rejects_local_source(self):
        """Test that a path cannot be fetched over HTTP."""
        with pytest.raises(TypeError):
            UrlHandler().read(LocalFile(Path("a.md")))

    def test_explicit_zero_overrides_settings(self):
        """Test that zero timeout and retries are kept, not replaced by defaults."""
        handler = UrlHandler(timeout=0.0, max_retries=0)

        assert handler.timeout == 0.0
        assert handler.max_retries == 0

    def test_defaults_from_settings(self):
        """Test that omitted options fall back to the configured values."""
        settings = get_settings()
        handler = UrlHandler()

        assert handler.timeout == settings.request_timeout
        assert handler.max_retries == settings.max_retries

"""Document sources for mdview."""

from pathlib import Path

from mdview.sources.base import (
    SourceHandler,
    SourceError,
    DocumentLoadError,
    DocumentNotFoundError,
    NetworkError,
    SaveError,
    LocalFile,
    Url,
    MarkdownSource,
)
from mdview.sources.local_handler import LocalFileHandler, new_document_path
from mdview.sources.url_handler import UrlHandler

__all__ = [
    "SourceHandler",
    "SourceError",
    "DocumentLoadError",
    "DocumentNotFoundError",
    "NetworkError",
    "SaveError",
    "LocalFile",
    "Url",
    "MarkdownSource",
    "LocalFileHandler",
    "UrlHandler",
    "new_document_path",
    "get_handler",
    "source_from_string",
]

# Map source types to handlers
HANDLER_MAP: dict[type, type[SourceHandler]] = {
    LocalFile: LocalFileHandler,
    Url: UrlHandler,
}

URL_SCHEMES = ("http://", "https://")


def get_handler(source: MarkdownSource) -> type[SourceHandler]:
    """Get the appropriate handler class for a source."""
    try:
        return HANDLER_MAP[type(source)]
    except KeyError:
        raise ValueError(f"Unsupported source: {source!r}") from None


def source_from_string(value: str) -> MarkdownSource:
    """Interpret a command-line argument as a URL or a local path."""
    if value.lower().startswith(URL_SCHEMES):
        return Url(value)
    return LocalFile(Path(value))

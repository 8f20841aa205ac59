"""Local file handler."""

import logging
import time
from pathlib import Path
from typing import Optional

from mdview.config import get_settings
from mdview.sources.base import (
    DocumentLoadError,
    DocumentNotFoundError,
    LocalFile,
    MarkdownSource,
    SaveError,
    SourceHandler,
)

logger = logging.getLogger(__name__)


class LocalFileHandler(SourceHandler):
    """Handler for markdown files on the local filesystem."""

    def __init__(self, encoding: Optional[str] = None) -> None:
        self.encoding = encoding or get_settings().encoding

    def read(self, source: MarkdownSource) -> str:
        """Read markdown text from a local file."""
        path = self._path(source)
        logger.debug("Reading %s", path)
        try:
            return path.read_text(encoding=self.encoding)
        except FileNotFoundError as e:
            raise DocumentNotFoundError(f"File not found: {path}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentLoadError(f"Could not read {path}: {e}") from e

    def write(self, content: str, source: MarkdownSource) -> None:
        """Write markdown text to a local file, creating parent folders."""
        path = self._path(source)
        logger.debug("Writing %d characters to %s", len(content), path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding=self.encoding)
        except OSError as e:
            raise SaveError(f"Could not save {path}: {e}") from e
        logger.info("Saved %s", path)

    @staticmethod
    def _path(source: MarkdownSource) -> Path:
        if not isinstance(source, LocalFile):
            raise TypeError(f"LocalFileHandler cannot handle {source!r}")
        return source.path


def new_document_path(directory: Optional[Path] = None) -> Path:
    """Generate a unique file name for a document that has never been saved."""
    folder = directory if directory is not None else get_settings().save_dir
    millis = int(time.time() * 1000)
    return folder / f"new_markdown_document_{millis}.md"

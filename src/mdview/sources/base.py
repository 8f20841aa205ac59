"""Document sources, source errors, and the abstract source handler."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union


class SourceError(Exception):
    """Error reading or writing a markdown document."""

    pass


class DocumentLoadError(SourceError):
    """The document could not be loaded."""

    pass


class DocumentNotFoundError(DocumentLoadError):
    """The document does not exist at the given location."""

    pass


class NetworkError(DocumentLoadError):
    """The document could not be fetched over the network."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class SaveError(SourceError):
    """The document could not be written."""

    pass


@dataclass(frozen=True)
class LocalFile:
    """A markdown document on the local filesystem."""

    path: Path

    def __str__(self) -> str:
        return str(self.path)


@dataclass(frozen=True)
class Url:
    """A markdown document reachable over HTTP(S)."""

    url: str

    def __str__(self) -> str:
        return self.url


MarkdownSource = Union[LocalFile, Url]


class SourceHandler(ABC):
    """Abstract base class for document source handlers.

    Each handler must implement reading raw markdown text from its kind
    of source, and may implement writing text back to it.
    """

    @abstractmethod
    def read(self, source: MarkdownSource) -> str:
        """Load raw markdown text.

        Args:
            source: Where to load the document from

        Returns:
            The document text

        Raises:
            DocumentLoadError: If the document cannot be loaded
        """
        ...

    def write(self, content: str, source: MarkdownSource) -> None:
        """Write markdown text to the source.

        Default implementation refuses; override in writable handlers.

        Args:
            content: The document text
            source: Where to write the document

        Raises:
            SaveError: If the document cannot be written
        """
        raise SaveError(f"Cannot save to {source}: source is read-only")

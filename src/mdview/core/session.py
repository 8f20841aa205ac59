"""Document session: load, edit, save and re-parse a single document."""

import logging
from enum import Enum
from pathlib import Path
from typing import Optional

from mdview.formatting.ir import Block
from mdview.formatting.parser import MarkdownParser
from mdview.sources import (
    LocalFile,
    MarkdownSource,
    SourceError,
    SourceHandler,
    get_handler,
)

logger = logging.getLogger(__name__)


class OperationStatus(Enum):
    """State of the most recent load or save."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class DocumentSession:
    """Holds the document being viewed or edited.

    Every content change re-parses the document, so `blocks` always
    reflects `content`. Loading and saving never raise: failures are
    reported through the return value, `status`, and a one-time message.

    Only a document loaded from, or saved to, a local file has a `source`;
    documents fetched from a URL or typed from scratch must be saved with
    `save_as`.
    """

    def __init__(
        self,
        parser: Optional[MarkdownParser] = None,
        handlers: Optional[dict[type, SourceHandler]] = None,
    ) -> None:
        """Initialize an empty session.

        Args:
            parser: Block parser to use (default: a new MarkdownParser)
            handlers: Optional handler instances keyed by source type,
                overriding the defaults from get_handler()
        """
        self.parser = parser or MarkdownParser()
        self.handlers: dict[type, SourceHandler] = dict(handlers or {})

        self.content: str = ""
        self.blocks: list[Block] = []
        self.source: Optional[MarkdownSource] = None
        self.status = OperationStatus.IDLE
        self._messages: list[str] = []

    @property
    def is_local(self) -> bool:
        """Check if the document can be saved back where it came from."""
        return isinstance(self.source, LocalFile)

    def set_content(self, content: str) -> None:
        """Replace the document text and re-parse it."""
        self.content = content
        self.blocks = self.parser.parse(content)

    def load(self, source: MarkdownSource) -> bool:
        """Load a document. Returns True on success."""
        self.status = OperationStatus.LOADING
        try:
            content = self._handler_for(source).read(source)
        except SourceError as e:
            logger.info("Load failed for %s: %s", source, e)
            self.status = OperationStatus.ERROR
            self.source = None
            self._messages.append(str(e))
            return False

        self.set_content(content)
        self.status = OperationStatus.SUCCESS
        if isinstance(source, LocalFile):
            self.source = source
            self._messages.append("Document loaded.")
        else:
            self.source = None
            self._messages.append("Document loaded from URL.")
        return True

    def save(self) -> bool:
        """Save back to the local file the document was loaded from."""
        if not self.is_local:
            self.status = OperationStatus.IDLE
            self._messages.append(
                "Cannot save: the document has no local file to overwrite. "
                "Use 'save as' instead."
            )
            return False
        return self._write(self.source, is_new_file=False)

    def save_as(self, path: Path) -> bool:
        """Save to a new local file, which becomes the document's source."""
        return self._write(LocalFile(Path(path)), is_new_file=True)

    def pop_messages(self) -> list[str]:
        """Return and clear the pending one-time messages."""
        messages, self._messages = self._messages, []
        return messages

    def _write(self, target: LocalFile, is_new_file: bool) -> bool:
        self.status = OperationStatus.LOADING
        try:
            self._handler_for(target).write(self.content, target)
        except SourceError as e:
            logger.info("Save failed for %s: %s", target, e)
            self.status = OperationStatus.ERROR
            self._messages.append(str(e))
            return False

        self.status = OperationStatus.SUCCESS
        if is_new_file:
            self.source = target
        self._messages.append("Document saved.")
        return True

    def _handler_for(self, source: MarkdownSource) -> SourceHandler:
        handler = self.handlers.get(type(source))
        if handler is None:
            handler = get_handler(source)()
            self.handlers[type(source)] = handler
        return handler

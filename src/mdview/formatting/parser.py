"""Markdown parser for converting raw document text to blocks."""

import re
from dataclasses import dataclass, field
from typing import Optional

from mdview.formatting.ir import (
    Block,
    EmptyLine,
    Heading,
    Image,
    Paragraph,
    Table,
)


@dataclass
class _TableState:
    """Accumulator for a table that has been opened but not yet emitted."""

    headers: list[str] = field(default_factory=list)
    rows: list[tuple[str, ...]] = field(default_factory=list)

    def add_row(self, cells: list[str]) -> None:
        """Append a data row, padded or cut to the header width."""
        width = len(self.headers)
        if len(cells) < width:
            cells = cells + [""] * (width - len(cells))
        self.rows.append(tuple(cells[:width]))

    def build(self) -> Table:
        return Table(headers=tuple(self.headers), rows=tuple(self.rows))


class MarkdownParser:
    """Parse markdown text into an ordered list of blocks.

    Lines are handled in a single forward pass. A table is closed implicitly
    by the first line that is not a table row, so every other branch flushes
    the open table before emitting its own block.
    """

    MAX_HEADING_LEVEL = 6

    IMAGE_PATTERN = re.compile(r"!\[(.*)\]\((.*)\)")
    DIVIDER_PATTERN = re.compile(r"(\|[-:\s]+)+\|?")
    LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")

    def parse(self, markdown_text: str) -> list[Block]:
        """Convert markdown text to blocks.

        Args:
            markdown_text: The whole raw document

        Returns:
            Blocks in source order; never raises
        """
        blocks: list[Block] = []
        lines = self._split_lines(markdown_text)
        table: Optional[_TableState] = None

        def flush() -> None:
            nonlocal table
            if table is not None:
                blocks.append(table.build())
                table = None

        for index, raw_line in enumerate(lines):
            line = raw_line.strip()

            heading = self._match_heading(line)
            if heading is not None:
                flush()
                blocks.append(heading)
                continue

            if not line:
                flush()
                blocks.append(EmptyLine())
                continue

            image = self.IMAGE_PATTERN.fullmatch(line)
            if image:
                flush()
                blocks.append(
                    Image(url=image.group(2).strip(), alt_text=image.group(1).strip())
                )
                continue

            if line.startswith("|"):
                if table is not None:
                    if not self._is_divider(line):
                        table.add_row(self._split_row(line))
                    continue

                next_line = lines[index + 1] if index + 1 < len(lines) else ""
                if self._is_divider(next_line.strip()):
                    table = _TableState(headers=self._split_row(line))
                    continue

            flush()
            blocks.append(Paragraph(text=line))

        flush()
        return blocks

    def _split_lines(self, text: str) -> list[str]:
        """Split on \\n, \\r\\n and \\r only; a trailing newline ends the last line."""
        lines = self.LINE_BREAK_PATTERN.split(text)
        if lines[-1] == "":
            lines.pop()
        return lines

    def _match_heading(self, line: str) -> Optional[Heading]:
        """Match the longest `#` prefix first so `###### x` is level 6."""
        for level in range(self.MAX_HEADING_LEVEL, 0, -1):
            prefix = "#" * level + " "
            if line.startswith(prefix):
                return Heading(text=line[len(prefix):].strip(), level=level)
        return None

    def _is_divider(self, line: str) -> bool:
        return self.DIVIDER_PATTERN.fullmatch(line) is not None

    @staticmethod
    def _split_row(line: str) -> list[str]:
        """Split a pipe row into trimmed cells, dropping boundary segments."""
        segments = line.split("|")
        if line.startswith("|"):
            segments = segments[1:]
        if line.endswith("|") and segments:
            segments = segments[:-1]
        return [segment.strip() for segment in segments]

    def to_markdown(self, blocks: list[Block]) -> str:
        """Convert blocks back to markdown text, one source line per line."""
        lines: list[str] = []

        for block in blocks:
            if isinstance(block, Heading):
                lines.append(f"{'#' * block.level} {block.text}")
            elif isinstance(block, Paragraph):
                lines.append(block.text)
            elif isinstance(block, Image):
                lines.append(f"![{block.alt_text}]({block.url})")
            elif isinstance(block, Table):
                lines.append(_format_row(block.headers))
                lines.append(_format_row(["---"] * block.column_count))
                lines.extend(_format_row(row) for row in block.rows)
            elif isinstance(block, EmptyLine):
                lines.append("")

        return "\n".join(lines)


def _format_row(cells) -> str:
    return "| " + " | ".join(cells) + " |"


_parser = MarkdownParser()


def parse_markdown(markdown_text: str) -> list[Block]:
    """Parse a document with the shared parser instance."""
    return _parser.parse(markdown_text)

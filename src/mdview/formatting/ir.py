"""Intermediate Representation for parsed markdown.

This module defines the values produced by the block parser and the
inline formatter. Every value is immutable and created fresh per call,
so callers own their results outright.
"""

from dataclasses import dataclass, field
from enum import Flag, auto
from typing import ClassVar, Literal, Union


class TextStyle(Flag):
    """Inline emphasis styles (combinable with | on runs)."""

    NONE = 0
    BOLD = auto()
    ITALIC = auto()
    STRIKETHROUGH = auto()


# =============================================================================
# Blocks
# =============================================================================

@dataclass(frozen=True)
class Heading:
    """A heading line (`# ...` through `###### ...`).

    Attributes:
        text: Heading text with the hash prefix removed, markers untouched
        level: Number of leading hashes (1-6)
    """

    text: str
    level: int = 1

    kind: ClassVar[Literal["heading"]] = "heading"

    def __post_init__(self) -> None:
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")

    def to_dict(self) -> dict:
        return {"type": self.kind, "text": self.text, "level": self.level}


@dataclass(frozen=True)
class Paragraph:
    """A line of ordinary text, trimmed, with emphasis markers preserved."""

    text: str

    kind: ClassVar[Literal["paragraph"]] = "paragraph"

    def to_dict(self) -> dict:
        return {"type": self.kind, "text": self.text}


@dataclass(frozen=True)
class Image:
    """An image line of the form `![alt](url)`.

    Attributes:
        url: Image location, trimmed
        alt_text: Alternative text, trimmed
    """

    url: str
    alt_text: str = ""

    kind: ClassVar[Literal["image"]] = "image"

    def to_dict(self) -> dict:
        return {"type": self.kind, "url": self.url, "alt_text": self.alt_text}


@dataclass(frozen=True)
class Table:
    """A pipe table.

    Every row has exactly as many cells as there are headers. Cell text
    keeps its raw markdown; inline formatting is applied by the caller.

    Attributes:
        headers: Header cells in column order
        rows: Data rows, each a tuple of cells
    """

    headers: tuple[str, ...] = ()
    rows: tuple[tuple[str, ...], ...] = ()

    kind: ClassVar[Literal["table"]] = "table"

    @property
    def column_count(self) -> int:
        return len(self.headers)

    def to_dict(self) -> dict:
        return {
            "type": self.kind,
            "headers": list(self.headers),
            "rows": [list(row) for row in self.rows],
        }


@dataclass(frozen=True)
class EmptyLine:
    """Marker for one blank source line."""

    kind: ClassVar[Literal["empty_line"]] = "empty_line"

    def to_dict(self) -> dict:
        return {"type": self.kind}


Block = Union[Heading, Paragraph, Image, Table, EmptyLine]


# =============================================================================
# Inline formatting
# =============================================================================

@dataclass(frozen=True)
class StyledRange:
    """A half-open span [start, end) of plain text carrying one style."""

    start: int
    end: int
    style: TextStyle

    def covers(self, start: int, end: int) -> bool:
        """Check if this range fully covers [start, end)."""
        return self.start <= start and end <= self.end


@dataclass(frozen=True)
class TextRun:
    """A contiguous run of text with consistent styling.

    Attributes:
        text: The text content
        style: Combined style flags
    """

    text: str
    style: TextStyle = TextStyle.NONE

    @property
    def bold(self) -> bool:
        """Check if this run is bold."""
        return TextStyle.BOLD in self.style

    @property
    def italic(self) -> bool:
        """Check if this run is italic."""
        return TextStyle.ITALIC in self.style

    @property
    def strikethrough(self) -> bool:
        """Check if this run is struck through."""
        return TextStyle.STRIKETHROUGH in self.style

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class FormattedText:
    """Marker-free text plus the style ranges that apply to it.

    Attributes:
        plain_text: Text with all resolved emphasis delimiters removed
        ranges: Style ranges, offsets into plain_text
    """

    plain_text: str
    ranges: tuple[StyledRange, ...] = field(default_factory=tuple)

    def ranges_for(self, style: TextStyle) -> list[StyledRange]:
        """Get the ranges of a single style family."""
        return [r for r in self.ranges if r.style == style]

    def runs(self) -> list[TextRun]:
        """Split the plain text into runs at every range boundary.

        Each run carries the union of all styles whose ranges cover it,
        so overlapping families (e.g. bold inside italic) combine.
        """
        bounds = {0, len(self.plain_text)}
        for r in self.ranges:
            bounds.add(r.start)
            bounds.add(r.end)
        edges = sorted(bounds)

        runs: list[TextRun] = []
        for start, end in zip(edges, edges[1:]):
            if start == end:
                continue
            style = TextStyle.NONE
            for r in self.ranges:
                if r.covers(start, end):
                    style |= r.style
            runs.append(TextRun(text=self.plain_text[start:end], style=style))
        return runs

    def __str__(self) -> str:
        return self.plain_text

"""Formatting utilities for parsing markdown into blocks and styled text."""

from mdview.formatting.ir import (
    Block,
    Heading,
    Paragraph,
    Image,
    Table,
    EmptyLine,
    TextStyle,
    StyledRange,
    TextRun,
    FormattedText,
)
from mdview.formatting.parser import MarkdownParser, parse_markdown
from mdview.formatting.inline import InlineFormatter, format_inline

__all__ = [
    "Block",
    "Heading",
    "Paragraph",
    "Image",
    "Table",
    "EmptyLine",
    "TextStyle",
    "StyledRange",
    "TextRun",
    "FormattedText",
    "MarkdownParser",
    "parse_markdown",
    "InlineFormatter",
    "format_inline",
]

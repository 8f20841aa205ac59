"""Presentation adapters for parsed markdown."""

from mdview.render.console import ConsoleRenderer, rich_style, to_rich_text

__all__ = [
    "ConsoleRenderer",
    "rich_style",
    "to_rich_text",
]

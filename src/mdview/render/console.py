"""Terminal presentation of parsed markdown using rich."""

from typing import Iterable, Iterator, Optional

from rich.console import Console, RenderableType
from rich.style import Style
from rich.table import Table as RichTable
from rich.text import Text

from mdview.formatting.inline import InlineFormatter
from mdview.formatting.ir import (
    Block,
    EmptyLine,
    FormattedText,
    Heading,
    Image,
    Paragraph,
    Table,
    TextStyle,
)

HEADING_STYLES = {
    1: "bold underline magenta",
    2: "bold magenta",
    3: "bold cyan",
    4: "bold",
    5: "bold dim",
    6: "dim",
}


def rich_style(style: TextStyle) -> Style:
    """Translate combined emphasis flags to a rich Style."""
    return Style(
        bold=TextStyle.BOLD in style or None,
        italic=TextStyle.ITALIC in style or None,
        strike=TextStyle.STRIKETHROUGH in style or None,
    )


def to_rich_text(formatted: FormattedText, base_style: str = "") -> Text:
    """Build a rich Text from formatter output."""
    text = Text(style=base_style)
    for run in formatted.runs():
        text.append(run.text, style=rich_style(run.style))
    return text


class ConsoleRenderer:
    """Render blocks to a rich console.

    Heading, paragraph and table cell text goes through the inline
    formatter here, at presentation time; blocks keep their raw markers.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        formatter: Optional[InlineFormatter] = None,
    ) -> None:
        self.console = console or Console()
        self.formatter = formatter or InlineFormatter()

    def render(self, blocks: Iterable[Block]) -> None:
        """Print every block to the console."""
        for renderable in self.renderables(blocks):
            self.console.print(renderable)

    def renderables(self, blocks: Iterable[Block]) -> Iterator[RenderableType]:
        for block in blocks:
            yield self.render_block(block)

    def render_block(self, block: Block) -> RenderableType:
        """Convert one block to a rich renderable."""
        if isinstance(block, Heading):
            return self._inline(block.text, HEADING_STYLES[block.level])
        if isinstance(block, Paragraph):
            return self._inline(block.text)
        if isinstance(block, Image):
            label = block.alt_text or "image"
            return Text.assemble(
                (f"[{label}] ", "bold dim"),
                (block.url, "dim underline"),
            )
        if isinstance(block, Table):
            return self._table(block)
        if isinstance(block, EmptyLine):
            return Text("")
        raise TypeError(f"Unknown block type: {type(block).__name__}")

    def _inline(self, text: str, base_style: str = "") -> Text:
        return to_rich_text(self.formatter.format(text), base_style)

    def _table(self, table: Table) -> RichTable:
        rich_table = RichTable(show_header=True, header_style="bold")
        for header in table.headers:
            rich_table.add_column(self._inline(header))
        for row in table.rows:
            rich_table.add_row(*(self._inline(cell) for cell in row))
        return rich_table

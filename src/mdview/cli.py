"""Command-line interface for mdview."""

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table as RichTable
from rich.text import Text

from mdview import __version__
from mdview.config import get_settings, load_settings
from mdview.core.session import DocumentSession, OperationStatus
from mdview.formatting.inline import InlineFormatter
from mdview.render.console import ConsoleRenderer, to_rich_text
from mdview.sources import LocalFile, new_document_path, source_from_string

app = typer.Typer(
    name="mdview",
    help="View and edit markdown documents in the terminal.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"mdview v{__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route library logging through rich."""
    level = logging.DEBUG if verbose else get_settings().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def print_messages(session: DocumentSession) -> None:
    """Show the session's one-time messages."""
    for message in session.pop_messages():
        if session.status is OperationStatus.ERROR:
            console.print(f"[red]Error:[/red] {escape(message)}")
        elif session.status is OperationStatus.SUCCESS:
            console.print(f"[green]{escape(message)}[/green]")
        else:
            console.print(f"[yellow]{escape(message)}[/yellow]")


def load_or_exit(source: str) -> DocumentSession:
    """Load a document into a new session, exiting with 1 on failure."""
    session = DocumentSession()
    if not session.load(source_from_string(source)):
        print_messages(session)
        raise typer.Exit(1)
    session.pop_messages()
    return session


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    env_file: Optional[Path] = typer.Option(
        None,
        "--env-file",
        help="Read settings from this .env file",
    ),
) -> None:
    """
    View and edit markdown documents.

    Examples:

        python viewer.py view README.md

        python viewer.py view https://example.com/notes.md

        python viewer.py blocks notes.md --json

        python viewer.py format "Some **bold** and ~~struck~~ text"

        python viewer.py copy https://example.com/notes.md notes.md

        python viewer.py edit notes.md
    """
    if env_file is not None:
        load_settings(env_file)
    configure_logging(verbose)


@app.command()
def view(
    source: str = typer.Argument(..., help="File path or http(s) URL"),
) -> None:
    """Render a markdown document."""
    session = load_or_exit(source)
    ConsoleRenderer(console).render(session.blocks)


@app.command()
def blocks(
    source: str = typer.Argument(..., help="File path or http(s) URL"),
    json_output: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Print blocks as JSON",
    ),
) -> None:
    """List the blocks a document parses into."""
    session = load_or_exit(source)

    if json_output:
        payload = [block.to_dict() for block in session.blocks]
        console.print_json(json.dumps(payload))
        return

    table = RichTable(show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Type")
    table.add_column("Content", overflow="fold")
    for index, block in enumerate(session.blocks):
        details = block.to_dict()
        details.pop("type")
        table.add_row(str(index), block.kind, json.dumps(details, ensure_ascii=False))
    console.print(table)


@app.command("format")
def format_text(
    text: str = typer.Argument(..., help="One line of markdown text"),
) -> None:
    """Resolve emphasis markers in a line and show the style ranges."""
    formatted = InlineFormatter().format(text)
    console.print(to_rich_text(formatted))
    console.print(Text.assemble(("Plain: ", "bold"), formatted.plain_text))
    for styled in formatted.ranges:
        fragment = formatted.plain_text[styled.start:styled.end]
        console.print(
            f"  {styled.style.name.lower():<13} [{styled.start}, {styled.end}) {fragment!r}",
            markup=False,
            highlight=False,
        )


@app.command()
def copy(
    source: str = typer.Argument(..., help="File path or http(s) URL"),
    destination: Optional[Path] = typer.Argument(
        None,
        help="Local file to write (default: a new file in MDVIEW_SAVE_DIR)",
    ),
) -> None:
    """Load a document and save it to a local file."""
    session = load_or_exit(source)
    success = session.save_as(destination or new_document_path())
    print_messages(session)
    raise typer.Exit(0 if success else 1)


@app.command()
def edit(
    path: Path = typer.Argument(..., help="Local markdown file (created if missing)"),
) -> None:
    """Edit a local document in $EDITOR, save it, and render the result."""
    session = DocumentSession()
    if path.exists():
        if not session.load(LocalFile(path)):
            print_messages(session)
            raise typer.Exit(1)
        session.pop_messages()

    edited: Optional[str] = typer.edit(session.content, extension=".md")
    if edited is None or edited == session.content:
        console.print("[yellow]No changes.[/yellow]")
        raise typer.Exit(0)

    session.set_content(edited)
    success = session.save() if session.is_local else session.save_as(path)
    print_messages(session)
    if not success:
        raise typer.Exit(1)

    ConsoleRenderer(console).render(session.blocks)


if __name__ == "__main__":
    app()

"""
UI components module for quickopen.

Provides styled terminal output using Rich library for result tables,
location listings and message rendering.
"""

from collections.abc import Iterable
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from quickopen.core.file_index import FileEntry
from quickopen.core.locations import LocationRow


def render_file_table(
    entries: Iterable[FileEntry],
    console: Console,
    title: str,
    selected_index: Optional[int] = None,
) -> None:
    """
    Render files as a two-column table (file name, path).

    Args:
        entries: Entries in display order.
        console: Rich Console instance for output.
        title: Table title, usually the session status text.
        selected_index: Row to highlight, if any.
    """
    table = Table(
        title=title,
        title_style="bold cyan",
        border_style="blue",
        show_header=True,
        header_style="bold white",
    )
    table.add_column("File name", style="green", no_wrap=True)
    table.add_column("Path", style="dim cyan", overflow="ellipsis")

    for i, entry in enumerate(entries):
        style = "reverse" if i == selected_index else None
        # Names and paths are literal text, never markup
        table.add_row(Text(entry.name), Text(str(entry.directory)), style=style)

    console.print(table)


def render_locations(rows: Iterable[LocationRow], console: Console) -> None:
    """
    Render the configured locations with their row numbers.

    Args:
        rows: Editable location rows.
        console: Rich Console instance for output.
    """
    table = Table(
        title="Directories to scan for files",
        title_style="bold cyan",
        border_style="blue",
    )
    table.add_column("#", justify="right", style="dim")
    table.add_column("Path", style="cyan")
    table.add_column("Pattern", style="green", no_wrap=True)

    for i, row in enumerate(rows):
        table.add_row(str(i), Text(row.path), Text(row.pattern))

    console.print(table)


def render_error(message: str, console: Console) -> None:
    """
    Render an error message in a visually distinct red panel.

    Args:
        message: Error message to display.
        console: Rich Console instance for output.
    """
    error_text = Text()
    error_text.append("Error: ", style="bold red")
    error_text.append(message, style="red")

    console.print(
        Panel(
            error_text,
            border_style="red",
            title="[bold red]Error[/bold red]",
            expand=False,
        )
    )


def render_success(message: str, console: Console) -> None:
    """Render a success message in a green panel."""
    console.print(Panel(Text(message, style="green"), border_style="green", expand=False))


def render_warning(message: str, console: Console) -> None:
    """Render a warning message in yellow."""
    warning_text = Text()
    warning_text.append("Warning: ", style="yellow")
    warning_text.append(message)
    console.print(warning_text)

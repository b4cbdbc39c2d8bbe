"""
Tests for Rich rendering helpers.
"""

from pathlib import Path

from rich.console import Console

from quickopen.cli.ui import render_file_table, render_locations, render_warning
from quickopen.core.file_index import FileEntry
from quickopen.core.locations import LocationRow


def make_console() -> Console:
    return Console(record=True, width=200, color_system=None)


def test_file_table_shows_bracketed_names_literally():
    console = make_console()
    entries = [
        FileEntry("[draft] notes.txt", Path("/proj/[old]")),
        FileEntry("[red]alert.txt", Path("/proj")),
    ]

    render_file_table(entries, console, title="Open File 2/2", selected_index=0)

    output = console.export_text()
    assert "[draft] notes.txt" in output
    assert "[red]alert.txt" in output
    assert "/proj/[old]" in output


def test_locations_table_shows_markup_like_text_literally():
    console = make_console()

    render_locations([LocationRow("/srv/[bold]x", "*.[ch]")], console)

    output = console.export_text()
    assert "/srv/[bold]x" in output
    assert "*.[ch]" in output


def test_warning_message_is_literal():
    console = make_console()

    render_warning("bad entry [blue]here", console)

    assert "Warning: bad entry [blue]here" in console.export_text()

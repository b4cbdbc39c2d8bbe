"""
CLI for quickopen.

Provides the interactive picker plus commands for listing matches and
editing the configured locations.
"""

import logging
from pathlib import Path
from typing import Optional

import typer
import yaml
from rich.console import Console
from rich.markup import escape

from quickopen import __version__
from quickopen.cli.opener import launch_file, print_path
from quickopen.cli.picker import run_picker
from quickopen.cli.ui import (
    render_error,
    render_file_table,
    render_locations,
    render_success,
    render_warning,
)
from quickopen.core.config import QuickOpenConfig, get_app_dir, load_config
from quickopen.core.errors import ConfigurationInvalidError, ConfigWriteError
from quickopen.core.file_scanner import Scanner
from quickopen.core.location_store import LocationStore
from quickopen.core.locations import Location, LocationList
from quickopen.core.session import QuickOpenSession

# Initialize Rich Consoles; diagnostics go to stderr so --print output stays clean
console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="quickopen",
    help="Open a file from preconfigured locations",
    add_completion=False,
)
locations_app = typer.Typer(help="Edit the directories scanned for files.")
app.add_typer(locations_app, name="locations")
config_app = typer.Typer(help="Show or write application settings.")
app.add_typer(config_app, name="config")

# Exit codes, following the convention of interactive fuzzy finders
EXIT_NO_MATCH = 1
EXIT_CANCELLED = 130


def _configure_logging(cfg: QuickOpenConfig, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, cfg.logging.level.upper(), logging.WARNING)
    logging.getLogger("quickopen").setLevel(level)
    # force rebinds the handler to the current stderr on every invocation
    logging.basicConfig(level=level, format=cfg.logging.format, force=True)


def _get_config(ctx: typer.Context) -> QuickOpenConfig:
    if isinstance(ctx.obj, QuickOpenConfig):
        return ctx.obj
    return load_config()


def _get_store(cfg: QuickOpenConfig) -> LocationStore:
    return LocationStore(cfg.locations.resolve_file())


def _load_locations(store: LocationStore) -> list[Location]:
    """Load locations, degrading an invalid file to an empty list with a warning."""
    try:
        return store.load()
    except ConfigurationInvalidError as e:
        render_warning(str(e), err_console)
        return []


def _load_location_list(store: LocationStore) -> LocationList:
    return LocationList.from_locations(_load_locations(store))


def _save_location_list(store: LocationStore, locations: LocationList) -> None:
    try:
        store.save(locations)
    except ConfigWriteError as e:
        render_error(str(e), err_console)
        raise typer.Exit(1)


def _create_scanner(cfg: QuickOpenConfig) -> Scanner:
    return Scanner(
        case_sensitive=cfg.scan.case_sensitive,
        follow_symlinks=cfg.scan.follow_symlinks,
        max_depth=cfg.scan.max_depth,
    )


def _start_session(cfg: QuickOpenConfig, query: Optional[str]) -> QuickOpenSession:
    locations = _load_locations(_get_store(cfg))
    session = QuickOpenSession(locations, _create_scanner(cfg), title=cfg.picker.title).start()
    if query:
        session.set_query(query)
    return session


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Settings file (.yaml, .yml or .json)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Open a file from preconfigured locations."""
    try:
        cfg = load_config(config)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        render_error(f"Invalid configuration: {e}", err_console)
        raise typer.Exit(1)

    _configure_logging(cfg, verbose)
    ctx.obj = cfg


@app.command("open")
def open_file(
    ctx: typer.Context,
    query: Optional[str] = typer.Option(None, "--query", "-q", help="Initial filter text"),
    first: bool = typer.Option(
        False, "--first", help="Open the first match without showing the picker"
    ),
    print_only: bool = typer.Option(
        False, "--print", help="Print the selected path instead of opening it"
    ),
):
    """Pick a file interactively and open it."""
    cfg = _get_config(ctx)
    session = _start_session(cfg, query)
    opener = print_path if print_only else launch_file

    if first:
        if session.commit(opener) is None:
            render_warning("No matching files.", err_console)
            raise typer.Exit(EXIT_NO_MATCH)
        return

    path = run_picker(session, max_rows=cfg.picker.max_rows)
    if path is None:
        raise typer.Exit(EXIT_CANCELLED)
    opener(path)


@app.command()
def scan(
    ctx: typer.Context,
    query: Optional[str] = typer.Option(None, "--query", "-q", help="Filter text"),
    plain: bool = typer.Option(False, "--plain", help="Print one full path per line"),
):
    """List the files found in the configured locations."""
    cfg = _get_config(ctx)
    session = _start_session(cfg, query)

    if plain:
        for entry in session.visible:
            typer.echo(str(entry.full_path))
        return

    render_file_table(
        session.visible, console, title=session.status_text, selected_index=session.selected_index
    )


@app.command()
def version():
    """Show the quickopen version."""
    typer.echo(f"quickopen {__version__}")


@locations_app.command("list")
def list_locations(ctx: typer.Context):
    """Show the configured locations."""
    cfg = _get_config(ctx)
    store = _get_store(cfg)
    locations = _load_location_list(store)
    if not len(locations):
        console.print(f"[yellow]No locations configured.[/yellow] ({escape(str(store.path))})")
        return
    render_locations(locations, console)


@locations_app.command("add")
def add_location(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Directory to scan (~, $VARS, braces and globs allowed)"),
    pattern: Optional[str] = typer.Option(
        None, "--pattern", "-p", help="Glob applied to file names (default: match everything)"
    ),
):
    """Add a location."""
    cfg = _get_config(ctx)
    store = _get_store(cfg)
    locations = _load_location_list(store)
    index = locations.add(path, pattern)
    _save_location_list(store, locations)
    row = locations[index]
    render_success(f"Added location {index}: {row.path} ({row.pattern})", console)


@locations_app.command("edit")
def edit_location(
    ctx: typer.Context,
    index: int = typer.Argument(..., help="Row number shown by 'locations list'"),
    path: Optional[str] = typer.Option(None, "--path", help="New directory"),
    pattern: Optional[str] = typer.Option(None, "--pattern", "-p", help="New glob pattern"),
):
    """Change the path or pattern of a location."""
    cfg = _get_config(ctx)
    store = _get_store(cfg)
    locations = _load_location_list(store)
    try:
        row = locations.edit(index, path=path, pattern=pattern)
    except IndexError as e:
        render_error(str(e), err_console)
        raise typer.Exit(1)
    _save_location_list(store, locations)
    render_success(f"Location {index}: {row.path} ({row.pattern})", console)


@locations_app.command("remove")
def remove_location(
    ctx: typer.Context,
    index: int = typer.Argument(..., help="Row number shown by 'locations list'"),
):
    """Remove a location."""
    cfg = _get_config(ctx)
    store = _get_store(cfg)
    locations = _load_location_list(store)
    try:
        row = locations.remove(index)
    except IndexError as e:
        render_error(str(e), err_console)
        raise typer.Exit(1)
    _save_location_list(store, locations)
    render_success(f"Removed location {index}: {row.path}", console)


@config_app.command("show")
def show_config(
    ctx: typer.Context,
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of YAML"),
):
    """Print the effective settings."""
    cfg = _get_config(ctx)
    typer.echo(cfg.to_json() if as_json else cfg.to_yaml().rstrip())


@config_app.command("init")
def init_config(
    ctx: typer.Context,
    path: Optional[Path] = typer.Argument(
        None, help="Where to write the settings (default: <app dir>/config.yaml)"
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
):
    """Write the effective settings to a file for editing."""
    cfg = _get_config(ctx)
    target = path or get_app_dir() / "config.yaml"
    if target.exists() and not force:
        render_error(f"{target} already exists (use --force to overwrite)", err_console)
        raise typer.Exit(1)

    try:
        cfg.save(target)
    except (OSError, ValueError) as e:
        render_error(f"Could not write settings: {e}", err_console)
        raise typer.Exit(1)
    render_success(f"Settings written to {target}", console)


if __name__ == "__main__":
    app()

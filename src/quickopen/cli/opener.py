"""
Open-file collaborators.

The session hands a resolved path to one of these; they are the only
place that knows how a file actually gets opened.
"""

import logging
from pathlib import Path

import typer

logger = logging.getLogger(__name__)


def launch_file(path: Path) -> None:
    """Open the file with the system's default application."""
    logger.debug(f"Launching {path}")
    typer.launch(str(path))


def print_path(path: Path) -> None:
    """Write the resolved path to stdout, for use in shell pipelines."""
    typer.echo(str(path))

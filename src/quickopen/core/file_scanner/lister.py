"""
Directory listing primitive backed by os.scandir.
"""

import logging
import os
from pathlib import Path

from .interfaces import DirectoryListerInterface
from .models import ChildEntry

logger = logging.getLogger(__name__)


class OsDirectoryLister(DirectoryListerInterface):
    """
    Lists children with ``os.scandir``, sorted by name.

    Symlinked directories are reported as directories only when
    ``follow_symlinks`` is enabled. Otherwise they are neither descended
    into nor indexed as files.
    """

    def __init__(self, follow_symlinks: bool = False):
        self._follow_symlinks = follow_symlinks

    def list_children(self, directory: Path) -> list[ChildEntry]:
        children: list[ChildEntry] = []
        with os.scandir(directory) as it:
            for entry in it:
                try:
                    is_symlink = entry.is_symlink()
                    is_dir = entry.is_dir(follow_symlinks=True)
                except OSError as e:
                    logger.debug(f"Cannot stat {entry.path}: {e}")
                    continue

                if is_symlink and is_dir and not self._follow_symlinks:
                    logger.debug(f"Skipping symlinked directory: {entry.path}")
                    continue

                children.append(ChildEntry(name=entry.name, is_dir=is_dir, is_symlink=is_symlink))

        children.sort(key=lambda child: child.name)
        return children

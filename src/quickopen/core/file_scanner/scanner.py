"""
Scanner implementation: multi-root, pattern-filtered recursive walk.
"""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Iterator, Mapping, Optional

from quickopen.core.file_index import FileEntry, FileIndex
from quickopen.core.locations import Location
from quickopen.core.path_expansion import expand_root

from .interfaces import DirectoryListerInterface, ScannerInterface
from .lister import OsDirectoryLister
from .matching import glob_match, platform_is_case_sensitive

logger = logging.getLogger(__name__)


class Scanner(ScannerInterface):
    """
    Concrete implementation of ScannerInterface.

    Provides, for each location in order:
    - Shell-style root expansion to zero or more directories
    - Depth-first walk of every descendant directory
    - Glob matching on file base names only
    - Silent skipping of roots and subdirectories that cannot be read
    """

    def __init__(
        self,
        lister: Optional[DirectoryListerInterface] = None,
        case_sensitive: Optional[bool] = None,
        follow_symlinks: bool = False,
        max_depth: int = 0,
        environ: Optional[Mapping[str, str]] = None,
    ):
        """
        Initialize the Scanner.

        Args:
            lister: Directory listing primitive. Defaults to OsDirectoryLister.
            case_sensitive: Override case sensitivity of pattern matching.
                           If None, follows the platform (Windows=insensitive).
            follow_symlinks: Descend into symlinked directories. Cycles are
                            broken by tracking resolved paths on the current branch.
            max_depth: Directory levels to descend below each root (0 = unbounded).
            environ: Variables for root expansion. Defaults to os.environ.
        """
        self._follow_symlinks = follow_symlinks
        self._lister = lister or OsDirectoryLister(follow_symlinks=follow_symlinks)
        self._case_sensitive = (
            platform_is_case_sensitive() if case_sensitive is None else case_sensitive
        )
        self._max_depth = max(0, max_depth)
        self._environ = environ

    def scan(self, locations: Iterable[Location]) -> FileIndex:
        """Walk every location in order and collect matching files."""
        entries: list[FileEntry] = []
        for location in locations:
            before = len(entries)
            entries.extend(self.scan_location(location))
            logger.debug(
                f"Scanned {location.root!r} ({location.pattern}): {len(entries) - before} files"
            )
        return FileIndex(entries)

    def scan_location(self, location: Location) -> Iterator[FileEntry]:
        """
        Yield matching files for one location.

        Args:
            location: Root and pattern to scan

        Yields:
            FileEntry objects in walk order
        """
        for root in expand_root(location.root, self._environ):
            yield from self._walk(root, location.pattern, 0, set())

    def _walk(
        self, directory: Path, pattern: str, depth: int, visited: set[Path]
    ) -> Iterator[FileEntry]:
        real_path: Optional[Path] = None
        if self._follow_symlinks:
            try:
                real_path = directory.resolve()
            except OSError as e:
                logger.debug(f"Cannot resolve {directory}: {e}")
                return
            if real_path in visited:
                logger.debug(f"Skipping recursive cycle: {directory} -> {real_path}")
                return
            visited.add(real_path)

        try:
            children = self._lister.list_children(directory)
        except OSError as e:
            logger.debug(f"Skipping unreadable directory: {directory} - {e}")
            children = []

        for child in children:
            if child.is_dir:
                if child.name in (".", ".."):
                    continue
                if self._max_depth and depth >= self._max_depth:
                    continue
                yield from self._walk(directory / child.name, pattern, depth + 1, visited)
            elif glob_match(child.name, pattern, self._case_sensitive):
                yield FileEntry(name=child.name, directory=directory)

        # Only the current branch is guarded, so a directory reachable by
        # two different links is still listed under both
        if real_path is not None:
            visited.discard(real_path)

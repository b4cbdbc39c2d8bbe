"""
Location models for quickopen.

A Location pairs a root directory (which may still contain ``~``,
environment variables, braces or wildcards) with the glob pattern that
decides which file names under it enter the index.
"""

import sys
from dataclasses import dataclass, field
from typing import Iterator, Optional


def default_pattern() -> str:
    """Return the match-everything pattern for the host platform."""
    return "*.*" if sys.platform == "win32" else "*"


@dataclass(frozen=True)
class Location:
    """
    A (root, pattern) pair to scan.

    Attributes:
        root: Root directory, unexpanded.
        pattern: Shell glob applied to file base names.
    """

    root: str
    pattern: str = field(default_factory=default_pattern)


@dataclass
class LocationRow:
    """One editable row of the configure view."""

    path: str
    pattern: str


class LocationList:
    """
    Mutable, ordered list of locations being edited.

    Rows with an empty path are kept while editing (a freshly added row
    starts empty) but are dropped by ``to_locations``.
    """

    def __init__(self, rows: Optional[list[LocationRow]] = None):
        self._rows: list[LocationRow] = list(rows or [])

    @classmethod
    def from_locations(cls, locations: list[Location]) -> "LocationList":
        return cls([LocationRow(loc.root, loc.pattern) for loc in locations])

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[LocationRow]:
        return iter(self._rows)

    def __getitem__(self, index: int) -> LocationRow:
        return self._rows[index]

    @property
    def rows(self) -> list[LocationRow]:
        return list(self._rows)

    def add(self, path: str = "", pattern: Optional[str] = None) -> int:
        """
        Append a row and return its index.

        Args:
            path: Root directory; may be empty and filled in later.
            pattern: Glob pattern. Defaults to the platform match-everything pattern.
        """
        self._rows.append(LocationRow(path, pattern or default_pattern()))
        return len(self._rows) - 1

    def edit(
        self,
        index: int,
        path: Optional[str] = None,
        pattern: Optional[str] = None,
    ) -> LocationRow:
        """
        Replace cell values of an existing row.

        Empty replacement text leaves the cell unchanged.

        Raises:
            IndexError: If index does not name a row.
        """
        row = self._rows[self._check_index(index)]
        if path:
            row.path = path
        if pattern:
            row.pattern = pattern
        return row

    def remove(self, index: int) -> LocationRow:
        """Remove and return the row at index."""
        return self._rows.pop(self._check_index(index))

    def to_locations(self) -> list[Location]:
        """Return immutable locations for scanning, skipping empty paths."""
        return [Location(row.path, row.pattern) for row in self._rows if row.path]

    def _check_index(self, index: int) -> int:
        # Negative indexes are not meaningful for row numbers shown to the user
        if index < 0 or index >= len(self._rows):
            raise IndexError(f"No location at index {index}")
        return index

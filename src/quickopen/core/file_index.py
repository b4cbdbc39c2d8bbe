"""
In-memory file index built by one scan.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, overload


@dataclass(frozen=True)
class FileEntry:
    """
    A matched file.

    Attributes:
        name: Base name of the file.
        directory: Containing directory as reached during the walk.
    """

    name: str
    directory: Path

    @property
    def full_path(self) -> Path:
        """Directory joined with name, the path handed to the opener."""
        return self.directory / self.name


def sort_key(entry: FileEntry) -> tuple[str, str]:
    """Default ordering: name ascending, ties broken by directory."""
    return (entry.name, str(entry.directory))


class FileIndex:
    """
    Immutable, ordered sequence of FileEntry in walk order.

    Duplicate entries (same name and directory reached through
    overlapping roots) are kept.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[FileEntry] = ()):
        self._entries: tuple[FileEntry, ...] = tuple(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[FileEntry]:
        return iter(self._entries)

    @overload
    def __getitem__(self, index: int) -> FileEntry: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[FileEntry, ...]: ...

    def __getitem__(self, index):
        return self._entries[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileIndex):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"FileIndex({len(self._entries)} entries)"

    @property
    def entries(self) -> tuple[FileEntry, ...]:
        return self._entries

    def sorted(self) -> list[FileEntry]:
        """Entries in default display order."""
        return sorted(self._entries, key=sort_key)

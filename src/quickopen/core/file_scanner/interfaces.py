"""
Abstract interfaces for file scanning operations.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path

from quickopen.core.file_index import FileIndex
from quickopen.core.locations import Location

from .models import ChildEntry


class DirectoryListerInterface(ABC):
    """
    Lists the immediate children of one directory.

    This is the only platform-dependent primitive of the walk; recursion
    is built once on top of it.
    """

    @abstractmethod
    def list_children(self, directory: Path) -> list[ChildEntry]:
        """
        Return the children of a directory.

        Args:
            directory: Directory to list

        Returns:
            Children in walk order, never including "." or "..".

        Raises:
            OSError: If the directory cannot be opened.
        """
        pass


class ScannerInterface(ABC):
    """Builds a FileIndex from configured locations."""

    @abstractmethod
    def scan(self, locations: Iterable[Location]) -> FileIndex:
        """
        Walk every location in order and collect matching files.

        Args:
            locations: Ordered (root, pattern) pairs

        Returns:
            FileIndex in walk order

        Notes:
            - Unexpandable roots contribute nothing
            - Unreadable directories are skipped without error
        """
        pass

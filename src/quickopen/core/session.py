"""
Interactive quick-open session.

A session owns one FileIndex, the live query, the derived visible set and
the active selection. It moves through::

    IDLE -> SCANNED -> FILTERING (self-loop) -> COMMITTED | CANCELLED

UI adapters feed it plain events (query text, selection moves, accept,
cancel) and read back plain data; no widget type crosses this boundary.
"""

import logging
from collections.abc import Callable, Iterable
from enum import Enum
from pathlib import Path
from typing import Optional

from quickopen.core.errors import SessionClosedError
from quickopen.core.file_index import FileEntry, FileIndex
from quickopen.core.file_scanner import Scanner, ScannerInterface
from quickopen.core.locations import Location
from quickopen.core.query_filter import compute_visible_set

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Open File"

OpenFileCallback = Callable[[Path], None]


class SessionState(str, Enum):
    """Lifecycle states of a session."""

    IDLE = "idle"
    SCANNED = "scanned"
    FILTERING = "filtering"
    COMMITTED = "committed"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (SessionState.COMMITTED, SessionState.CANCELLED)


class QuickOpenSession:
    """
    State machine for one invocation of the picker.

    Attributes:
        title: Label used in the status text.
    """

    def __init__(
        self,
        locations: Iterable[Location] = (),
        scanner: Optional[ScannerInterface] = None,
        title: str = DEFAULT_TITLE,
    ):
        self.title = title
        self._locations: tuple[Location, ...] = tuple(locations)
        self._scanner = scanner or Scanner()
        self._state = SessionState.IDLE
        self._index = FileIndex()
        self._query = ""
        self._visible: list[FileEntry] = []
        self._selected: Optional[int] = None
        self._committed_path: Optional[Path] = None

    @classmethod
    def from_index(cls, index: FileIndex, title: str = DEFAULT_TITLE) -> "QuickOpenSession":
        """Create a session already in SCANNED state over an existing index."""
        session = cls(title=title)
        session._enter_scanned(index)
        return session

    # lifecycle

    def start(self) -> "QuickOpenSession":
        """
        Run the scan and enter SCANNED.

        The scan runs to completion before any query is accepted.

        Raises:
            SessionClosedError: If the session was already started.
        """
        if self._state is not SessionState.IDLE:
            raise SessionClosedError(f"Session already started (state: {self._state.value})")
        self._enter_scanned(self._scanner.scan(self._locations))
        return self

    def _enter_scanned(self, index: FileIndex) -> None:
        self._index = index
        self._state = SessionState.SCANNED
        self._recompute()
        logger.debug(f"Session scanned: {len(index)} files")

    def set_query(self, query: str) -> list[FileEntry]:
        """
        Replace the query and recompute the visible set.

        The first visible entry becomes the selection.

        Returns:
            The new visible set.

        Raises:
            SessionClosedError: Before the scan or after commit/cancel.
        """
        self._require_active("edit the query")
        self._state = SessionState.FILTERING
        self._query = query
        self._recompute()
        return self.visible

    def _recompute(self) -> None:
        self._visible = compute_visible_set(self._index, self._query)
        self._selected = 0 if self._visible else None

    def move_selection(self, delta: int) -> Optional[FileEntry]:
        """Move the selection by delta rows, clamped to the visible set."""
        self._require_active("move the selection")
        if self._selected is None:
            return None
        last = len(self._visible) - 1
        self._selected = min(max(self._selected + delta, 0), last)
        return self.selected

    def select(self, index: int) -> FileEntry:
        """
        Select a visible row by position.

        Raises:
            IndexError: If index is outside the visible set.
        """
        self._require_active("select a row")
        if index < 0 or index >= len(self._visible):
            raise IndexError(f"No visible row at index {index}")
        self._selected = index
        return self._visible[index]

    def commit(self, open_file: Optional[OpenFileCallback] = None) -> Optional[Path]:
        """
        Accept the active selection.

        With an empty visible set this is a no-op: nothing is opened, the
        state is unchanged and None is returned.

        Args:
            open_file: Collaborator receiving the resolved path.

        Returns:
            The path of the selected file, or None if nothing is selected.
        """
        self._require_active("commit")
        entry = self.selected
        if entry is None:
            return None

        path = entry.full_path
        self._state = SessionState.COMMITTED
        self._committed_path = path
        logger.debug(f"Session committed: {path}")
        if open_file is not None:
            open_file(path)
        return path

    def cancel(self) -> None:
        """Abort the session without producing a path."""
        if self._state.is_terminal:
            raise SessionClosedError(f"Session already finished (state: {self._state.value})")
        self._state = SessionState.CANCELLED
        logger.debug("Session cancelled")

    def _require_active(self, action: str) -> None:
        if self._state not in (SessionState.SCANNED, SessionState.FILTERING):
            raise SessionClosedError(f"Cannot {action} in state {self._state.value}")

    # read-only views

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def index(self) -> FileIndex:
        return self._index

    @property
    def query(self) -> str:
        return self._query

    @property
    def visible(self) -> list[FileEntry]:
        return list(self._visible)

    @property
    def selected_index(self) -> Optional[int]:
        return self._selected

    @property
    def selected(self) -> Optional[FileEntry]:
        if self._selected is None:
            return None
        return self._visible[self._selected]

    @property
    def can_commit(self) -> bool:
        return (
            self._state in (SessionState.SCANNED, SessionState.FILTERING)
            and self._selected is not None
        )

    @property
    def committed_path(self) -> Optional[Path]:
        return self._committed_path

    @property
    def status_text(self) -> str:
        """Title with visible/total counts, e.g. ``Open File 2/3``."""
        return f"{self.title} {len(self._visible)}/{len(self._index)}"

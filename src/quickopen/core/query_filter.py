"""
Live query filtering of a FileIndex.

The query narrows what is shown; the scan pattern decides what is indexed
at all. Matching is plain case-insensitive substring containment on the
file name, never a glob or regex.
"""

from collections.abc import Iterable

from quickopen.core.file_index import FileEntry, sort_key


def is_visible(entry: FileEntry, query: str) -> bool:
    """
    Decide whether an entry is shown for a query.

    Args:
        entry: Indexed file.
        query: Current query text.

    Returns:
        True if the query is empty or occurs anywhere in the entry's name,
        ignoring case.
    """
    if not query:
        return True
    return query.casefold() in entry.name.casefold()


def compute_visible_set(entries: Iterable[FileEntry], query: str) -> list[FileEntry]:
    """
    Filter and sort entries for display.

    Every entry is re-tested on each call; there is no incremental state.

    Returns:
        Visible entries sorted by name, then directory.
    """
    return sorted((entry for entry in entries if is_visible(entry, query)), key=sort_key)

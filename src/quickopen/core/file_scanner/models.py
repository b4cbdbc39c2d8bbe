"""
Data models for the file scanner module.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ChildEntry:
    """
    One immediate child of a directory, as reported by a DirectoryLister.

    Attributes:
        name: Base name of the child.
        is_dir: True if the child is a directory the walk may descend into.
        is_symlink: True if the child itself is a symbolic link.
    """

    name: str
    is_dir: bool
    is_symlink: bool = False

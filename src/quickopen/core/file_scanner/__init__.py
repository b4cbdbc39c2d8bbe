"""
Scanner module for quickopen.

Provides recursive multi-root directory scanning with glob filtering of
file base names.
"""

from .interfaces import DirectoryListerInterface, ScannerInterface
from .lister import OsDirectoryLister
from .matching import glob_match, platform_is_case_sensitive
from .models import ChildEntry
from .scanner import Scanner

__all__ = [
    # Main classes
    "Scanner",
    "ScannerInterface",
    # Directory listing primitive
    "ChildEntry",
    "DirectoryListerInterface",
    "OsDirectoryLister",
    # Matching
    "glob_match",
    "platform_is_case_sensitive",
]

"""
Core Layer - Location handling, scanning, file index and query filtering.
"""

from quickopen.core.config import (
    LocationsConfig,
    LoggingConfig,
    PickerConfig,
    QuickOpenConfig,
    ScanConfig,
    load_config,
)
from quickopen.core.errors import (
    ConfigurationInvalidError,
    ConfigWriteError,
    QuickOpenError,
    SessionClosedError,
)
from quickopen.core.file_index import FileEntry, FileIndex, sort_key
from quickopen.core.file_scanner import (
    ChildEntry,
    DirectoryListerInterface,
    OsDirectoryLister,
    Scanner,
    ScannerInterface,
    glob_match,
)
from quickopen.core.location_store import LocationStore
from quickopen.core.locations import Location, LocationList, LocationRow, default_pattern
from quickopen.core.path_expansion import expand_root
from quickopen.core.query_filter import compute_visible_set, is_visible
from quickopen.core.session import QuickOpenSession, SessionState

__all__ = [
    # Config
    "QuickOpenConfig",
    "ScanConfig",
    "PickerConfig",
    "LocationsConfig",
    "LoggingConfig",
    "load_config",
    # Errors
    "QuickOpenError",
    "ConfigurationInvalidError",
    "ConfigWriteError",
    "SessionClosedError",
    # Locations
    "Location",
    "LocationList",
    "LocationRow",
    "LocationStore",
    "default_pattern",
    "expand_root",
    # Scanner
    "ChildEntry",
    "DirectoryListerInterface",
    "OsDirectoryLister",
    "Scanner",
    "ScannerInterface",
    "glob_match",
    # Index and filtering
    "FileEntry",
    "FileIndex",
    "sort_key",
    "is_visible",
    "compute_visible_set",
    # Session
    "QuickOpenSession",
    "SessionState",
]

"""
quickopen - open a file from preconfigured locations.

Scans a list of (root, glob pattern) locations into an in-memory file
index and narrows it live as the user types.
"""

__version__ = "0.1.0"

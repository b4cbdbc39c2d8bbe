"""
Persistence for the configured location list.

The file holds two parallel, equal-length lists under the ``locations``
namespace key::

    locations:
      paths: [~/src/project, $HOME/notes]
      patterns: ["*.py", "*.md"]

YAML and JSON are supported, chosen by file suffix.
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable

import yaml

from quickopen.core.errors import ConfigurationInvalidError, ConfigWriteError
from quickopen.core.locations import Location, LocationList, LocationRow

logger = logging.getLogger(__name__)

LOCATIONS_KEY = "locations"
PATHS_KEY = "paths"
PATTERNS_KEY = "patterns"


def _as_string_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return ["" if item is None else str(item) for item in value]
    return [str(value)]


class LocationStore:
    """
    Reads and writes the location list file.

    Attributes:
        path: Location of the backing file.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def _parse(self, content: str) -> Any:
        if self.path.suffix == ".json":
            return json.loads(content) if content.strip() else {}
        return yaml.safe_load(content) or {}

    def _dump(self, data: dict) -> str:
        if self.path.suffix == ".json":
            return json.dumps(data, indent=2)
        return yaml.dump(data, default_flow_style=False, sort_keys=False)

    def load(self) -> list[Location]:
        """
        Load the configured locations.

        A missing or unreadable file yields an empty list. Rows whose path
        is empty are skipped.

        Returns:
            Locations in file order.

        Raises:
            ConfigurationInvalidError: If paths and patterns differ in length.
        """
        if not self.path.exists():
            logger.debug(f"Locations file not found, using none: {self.path}")
            return []

        try:
            data = self._parse(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read locations file {self.path}: {e}")
            return []

        section = data.get(LOCATIONS_KEY) if isinstance(data, dict) else None
        if not isinstance(section, dict):
            return []

        paths = _as_string_list(section.get(PATHS_KEY))
        patterns = _as_string_list(section.get(PATTERNS_KEY))

        if len(paths) != len(patterns):
            raise ConfigurationInvalidError(len(paths), len(patterns))

        return [
            Location(root=path, pattern=pattern)
            for path, pattern in zip(paths, patterns)
            if path
        ]

    def load_list(self) -> LocationList:
        """Load the configured locations as an editable list."""
        return LocationList.from_locations(self.load())

    def save(self, rows: Iterable[LocationRow | Location]) -> None:
        """
        Persist rows as two equal-length lists.

        Args:
            rows: Editable rows or immutable locations, in order.

        Raises:
            ConfigWriteError: If the directory or file cannot be written.
        """
        paths: list[str] = []
        patterns: list[str] = []
        for row in rows:
            if isinstance(row, Location):
                paths.append(row.root)
            else:
                paths.append(row.path)
            patterns.append(row.pattern)

        content = self._dump({LOCATIONS_KEY: {PATHS_KEY: paths, PATTERNS_KEY: patterns}})

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigWriteError(
                f"Plugin configuration directory could not be created: {self.path.parent} ({e})"
            ) from e

        try:
            self.path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise ConfigWriteError(f"Could not write locations file {self.path}: {e}") from e

        logger.debug(f"Saved {len(paths)} locations to {self.path}")

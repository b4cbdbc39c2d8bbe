"""
Unit tests for the editable location list and its persistence.
"""

import json
import sys
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from quickopen.core.errors import ConfigurationInvalidError, ConfigWriteError
from quickopen.core.location_store import LocationStore
from quickopen.core.locations import Location, LocationList, default_pattern


class TestDefaultPattern:
    def test_posix_matches_everything(self):
        with patch.object(sys, "platform", "linux"):
            assert default_pattern() == "*"

    def test_windows_requires_extension_token(self):
        with patch.object(sys, "platform", "win32"):
            assert default_pattern() == "*.*"

    def test_location_defaults_pattern(self):
        with patch.object(sys, "platform", "linux"):
            assert Location("/src").pattern == "*"


class TestLocationList:
    def test_add_uses_default_pattern(self):
        locations = LocationList()

        index = locations.add()

        assert index == 0
        assert locations[0].path == ""
        assert locations[0].pattern == default_pattern()

    def test_edit_replaces_cells(self):
        locations = LocationList.from_locations([Location("/a", "*.c")])

        locations.edit(0, path="/b", pattern="*.h")

        assert locations.to_locations() == [Location("/b", "*.h")]

    def test_edit_with_empty_text_keeps_old_value(self):
        locations = LocationList.from_locations([Location("/a", "*.c")])

        locations.edit(0, path="", pattern="")

        assert locations.to_locations() == [Location("/a", "*.c")]

    def test_remove(self):
        locations = LocationList.from_locations([Location("/a", "*"), Location("/b", "*")])

        removed = locations.remove(0)

        assert removed.path == "/a"
        assert locations.to_locations() == [Location("/b", "*")]

    @pytest.mark.parametrize("index", [-1, 1, 5])
    def test_bad_index(self, index: int):
        locations = LocationList.from_locations([Location("/a", "*")])

        with pytest.raises(IndexError):
            locations.edit(index, path="/x")
        with pytest.raises(IndexError):
            locations.remove(index)

    def test_rows_with_empty_path_are_not_scanned(self):
        locations = LocationList()
        locations.add()
        locations.add("/real", "*.py")

        assert len(locations) == 2
        assert locations.to_locations() == [Location("/real", "*.py")]


def write_yaml(path: Path, paths: list, patterns: list) -> None:
    path.write_text(
        yaml.dump({"locations": {"paths": paths, "patterns": patterns}}), encoding="utf-8"
    )


class TestLocationStore:
    def test_missing_file_is_empty(self, tmp_path: Path):
        assert LocationStore(tmp_path / "none.yaml").load() == []

    def test_load_in_order(self, tmp_path: Path):
        path = tmp_path / "locations.yaml"
        write_yaml(path, ["/proj/src", "/proj/include"], ["*.c", "*.h"])

        assert LocationStore(path).load() == [
            Location("/proj/src", "*.c"),
            Location("/proj/include", "*.h"),
        ]

    def test_length_mismatch_is_invalid(self, tmp_path: Path):
        path = tmp_path / "locations.yaml"
        write_yaml(path, ["/a", "/b"], ["*"])

        with pytest.raises(ConfigurationInvalidError) as exc_info:
            LocationStore(path).load()

        assert exc_info.value.paths_count == 2
        assert exc_info.value.patterns_count == 1
        assert "configuration file invalid" in str(exc_info.value)

    def test_empty_paths_are_skipped(self, tmp_path: Path):
        path = tmp_path / "locations.yaml"
        write_yaml(path, ["", "/b"], ["*.c", "*.h"])

        assert LocationStore(path).load() == [Location("/b", "*.h")]

    def test_missing_section_is_empty(self, tmp_path: Path):
        path = tmp_path / "locations.yaml"
        path.write_text("other: 1\n", encoding="utf-8")

        assert LocationStore(path).load() == []

    def test_unparsable_file_is_empty(self, tmp_path: Path):
        path = tmp_path / "locations.yaml"
        path.write_text("locations: [unclosed\n", encoding="utf-8")

        assert LocationStore(path).load() == []

    def test_save_creates_directories(self, tmp_path: Path):
        path = tmp_path / "nested" / "dir" / "locations.yaml"
        store = LocationStore(path)

        store.save([Location("~/src", "*.py")])

        data = yaml.safe_load(path.read_text(encoding="utf-8"))
        assert data == {"locations": {"paths": ["~/src"], "patterns": ["*.py"]}}

    def test_save_keeps_empty_rows(self, tmp_path: Path):
        path = tmp_path / "locations.yaml"
        locations = LocationList()
        locations.add()
        locations.add("/b", "*.h")

        LocationStore(path).save(locations)

        data = yaml.safe_load(path.read_text(encoding="utf-8"))
        assert data["locations"]["paths"] == ["", "/b"]
        assert len(data["locations"]["patterns"]) == 2

    def test_json_by_suffix(self, tmp_path: Path):
        path = tmp_path / "locations.json"
        store = LocationStore(path)

        store.save([Location("/a", "*.md")])

        assert json.loads(path.read_text(encoding="utf-8")) == {
            "locations": {"paths": ["/a"], "patterns": ["*.md"]}
        }
        assert store.load() == [Location("/a", "*.md")]

    def test_load_list_is_editable(self, tmp_path: Path):
        path = tmp_path / "locations.yaml"
        write_yaml(path, ["/a"], ["*"])

        locations = LocationStore(path).load_list()
        locations.add("/b")

        assert [row.path for row in locations] == ["/a", "/b"]

    def test_write_failure_raises(self, tmp_path: Path):
        # A regular file where the parent directory should be
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        store = LocationStore(blocker / "locations.yaml")

        with pytest.raises(ConfigWriteError):
            store.save([Location("/a", "*")])

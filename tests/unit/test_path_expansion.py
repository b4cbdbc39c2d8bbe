"""
Unit tests for shell-style root expansion.
"""

from pathlib import Path

import pytest

from quickopen.core.path_expansion import (
    expand_braces,
    expand_root,
    expand_variables,
    has_glob_magic,
)


class TestExpandBraces:
    @pytest.mark.parametrize(
        "word, expected",
        [
            ("plain/path", ["plain/path"]),
            ("a{b,c}d", ["abd", "acd"]),
            ("{x,y}/{1,2}", ["x/1", "x/2", "y/1", "y/2"]),
            ("a{b,c{d,e}}f", ["abf", "acdf", "acef"]),
            ("a{b}c", ["a{b}c"]),
            ("a{b,c", ["a{b,c"]),
            ("${HOME}/x", ["${HOME}/x"]),
            ("{,pre}fix", ["fix", "prefix"]),
        ],
    )
    def test_expansion(self, word: str, expected: list[str]):
        assert expand_braces(word) == expected


class TestExpandVariables:
    def test_bare_and_braced(self):
        env = {"A": "one", "B_2": "two"}
        assert expand_variables("$A/${B_2}/x", env) == "one/two/x"

    def test_unset_variable_is_empty(self):
        assert expand_variables("/base/$MISSING/dir", {}) == "/base//dir"

    def test_lone_dollar_is_literal(self):
        assert expand_variables("cost$", {}) == "cost$"


def test_has_glob_magic():
    assert has_glob_magic("src/*")
    assert has_glob_magic("file?.c")
    assert has_glob_magic("[ab]")
    assert not has_glob_magic("/plain/dir")


class TestExpandRoot:
    def test_existing_directory(self, tmp_path: Path):
        assert expand_root(str(tmp_path)) == [tmp_path]

    def test_missing_directory_expands_to_nothing(self, tmp_path: Path):
        assert expand_root(str(tmp_path / "missing")) == []

    def test_file_is_not_a_root(self, tmp_path: Path):
        (tmp_path / "f.txt").write_text("x", encoding="utf-8")
        assert expand_root(str(tmp_path / "f.txt")) == []

    def test_home_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        (tmp_path / "code").mkdir()
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.setenv("USERPROFILE", str(tmp_path))

        assert expand_root("~/code") == [Path(str(tmp_path / "code"))]

    def test_glob_yields_sorted_directories(self, tmp_path: Path):
        (tmp_path / "b-proj").mkdir()
        (tmp_path / "a-proj").mkdir()
        (tmp_path / "c-file").touch()

        assert expand_root(str(tmp_path / "*")) == [tmp_path / "a-proj", tmp_path / "b-proj"]

    def test_braces_and_variables_combined(self, tmp_path: Path):
        (tmp_path / "src").mkdir()
        (tmp_path / "include").mkdir()

        roots = expand_root("$ROOT/{src,include,missing}", {"ROOT": str(tmp_path)})

        assert roots == [tmp_path / "src", tmp_path / "include"]

    def test_empty_expansion(self):
        assert expand_root("$NOTHING", {}) == []

    def test_unmatched_glob_is_kept_literally(self, tmp_path: Path):
        literal = tmp_path / "Photos [2020]"
        literal.mkdir()

        assert expand_root(str(literal)) == [literal]

    def test_unmatched_glob_without_directory_expands_to_nothing(self, tmp_path: Path):
        assert expand_root(str(tmp_path / "missing-*")) == []

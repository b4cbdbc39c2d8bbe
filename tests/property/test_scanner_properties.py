"""
Property-based tests for Scanner.

For any directory structure and any set of (root, pattern) locations, the
index SHALL contain exactly the files under each root whose base name
matches that root's pattern.
"""

import fnmatch
import tempfile
from pathlib import Path

from hypothesis import given, settings
from hypothesis import strategies as st

from quickopen.core.file_scanner import Scanner
from quickopen.core.locations import Location

# File extension strategy - generates extensions like .py, .js, .txt
file_extension = st.from_regex(r"\.[a-z]{1,3}", fullmatch=True)

# Safe filename strategy - alphanumeric with underscores
safe_filename = st.from_regex(r"[a-z][a-z0-9_]{0,10}", fullmatch=True)

# Directory name strategy
dir_name = st.sampled_from(["src", "lib", "include", "pkg", "docs"])


@st.composite
def file_structure_strategy(draw):
    """
    Generate a random file tree and one glob pattern per top-level root.

    Returns:
        tuple: (list of relative file paths, dict of root name -> pattern)
    """
    extensions = draw(st.lists(file_extension, min_size=2, max_size=5, unique=True))

    files = []
    for _ in range(draw(st.integers(min_value=1, max_value=25))):
        # Root directory plus 0-2 subdirectories
        parts = [draw(dir_name)]
        parts.extend(draw(dir_name) for _ in range(draw(st.integers(min_value=0, max_value=2))))
        parts.append(draw(safe_filename) + draw(st.sampled_from(extensions)))
        files.append("/".join(parts))

    roots = sorted({f.split("/")[0] for f in files})
    patterns = {root: "*" + draw(st.sampled_from(extensions)) for root in roots}
    return files, patterns


def create_test_directory(tmpdir: Path, files: list[str]) -> None:
    for rel_path in files:
        file_path = tmpdir / rel_path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text("", encoding="utf-8")


@given(data=file_structure_strategy())
@settings(max_examples=100, deadline=None)
def test_index_contains_exactly_matching_files(data):
    """
    The scanner SHALL return every file under each root whose base name
    matches that root's pattern, and nothing else.
    """
    files, patterns = data

    with tempfile.TemporaryDirectory() as tmpdir:
        tmpdir_path = Path(tmpdir)
        create_test_directory(tmpdir_path, files)

        locations = [Location(str(tmpdir_path / root), pattern) for root, pattern in patterns.items()]
        index = Scanner(case_sensitive=True).scan(locations)

        actual = [entry.full_path for entry in index]
        expected = {
            tmpdir_path / rel_path
            for rel_path in set(files)
            if fnmatch.fnmatchcase(Path(rel_path).name, patterns[rel_path.split("/")[0]])
        }

        assert len(actual) == len(set(actual)), "disjoint roots must not produce duplicates"
        assert set(actual) == expected
        for entry in index:
            assert entry.full_path.is_file()

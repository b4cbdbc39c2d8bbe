"""
Shell-style expansion of configured root paths.

Roots are expanded in-process, in the same order a POSIX shell applies
word expansion, without spawning a shell:

1. brace expansion (``~/{src,include}``)
2. tilde expansion (``~``, ``~user``)
3. environment variables (``$VAR``, ``${VAR}``; unset variables expand to "")
4. pathname globbing (``*``, ``?``, ``[...]``)

Only words naming an existing directory survive. An unexpandable root
expands to an empty list rather than raising.
"""

import glob
import logging
import os
import re
from pathlib import Path
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

_ENV_VAR_RE = re.compile(r"\$(?:\{(?P<braced>[A-Za-z_][A-Za-z0-9_]*)\}|(?P<bare>[A-Za-z_][A-Za-z0-9_]*))")
_GLOB_CHARS = frozenset("*?[")


def expand_braces(word: str) -> list[str]:
    """
    Expand comma-separated brace groups, left to right.

    ``a{b,c{d,e}}f`` becomes ``["abf", "acdf", "acef"]``. Groups without a
    top-level comma, unbalanced braces, and ``${`` are left untouched.
    """
    start = 0
    while True:
        open_at = word.find("{", start)
        if open_at < 0:
            return [word]
        if open_at > 0 and word[open_at - 1] == "$":
            start = open_at + 1
            continue

        depth = 0
        commas: list[int] = []
        close_at = -1
        for i in range(open_at, len(word)):
            char = word[i]
            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    close_at = i
                    break
            elif char == "," and depth == 1:
                commas.append(i)

        if close_at < 0 or not commas:
            start = open_at + 1
            continue

        prefix = word[:open_at]
        suffix = word[close_at + 1:]
        bounds = [open_at] + commas + [close_at]
        results: list[str] = []
        for left, right in zip(bounds, bounds[1:]):
            alternative = word[left + 1:right]
            results.extend(expand_braces(prefix + alternative + suffix))
        return results


def expand_variables(word: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """Substitute ``$VAR`` and ``${VAR}``; unset variables become empty."""
    env = os.environ if environ is None else environ

    def _replace(match: re.Match) -> str:
        name = match.group("braced") or match.group("bare")
        return env.get(name, "")

    return _ENV_VAR_RE.sub(_replace, word)


def has_glob_magic(word: str) -> bool:
    return any(char in _GLOB_CHARS for char in word)


def expand_root(root: str, environ: Optional[Mapping[str, str]] = None) -> list[Path]:
    """
    Expand a configured root into concrete directories.

    Args:
        root: Root path as written in the configuration.
        environ: Variables to substitute. Defaults to ``os.environ``.

    Returns:
        Existing directories in expansion order. Empty when nothing matches.
    """
    directories: list[Path] = []

    for word in expand_braces(root):
        word = os.path.expanduser(word)
        word = expand_variables(word, environ)
        if not word:
            continue

        # An unmatched glob stays a literal word, as in the shell
        candidates = sorted(glob.glob(word)) if has_glob_magic(word) else []
        if not candidates:
            candidates = [word]

        for candidate in candidates:
            if os.path.isdir(candidate):
                directories.append(Path(candidate))

    if not directories:
        logger.debug(f"Root expanded to no directories: {root!r}")

    return directories

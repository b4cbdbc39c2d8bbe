"""
Glob matching of file base names.
"""

import fnmatch
import sys
from typing import Optional


def platform_is_case_sensitive() -> bool:
    """File names compare case-sensitively everywhere but Windows."""
    return sys.platform != "win32"


def glob_match(name: str, pattern: str, case_sensitive: Optional[bool] = None) -> bool:
    """
    Test a base name against a shell glob (``*``, ``?``, ``[...]``).

    Args:
        name: File base name, without directory.
        pattern: Glob pattern.
        case_sensitive: Override; None follows the platform convention.
    """
    if case_sensitive is None:
        case_sensitive = platform_is_case_sensitive()

    if case_sensitive:
        return fnmatch.fnmatchcase(name, pattern)
    return fnmatch.fnmatchcase(name.lower(), pattern.lower())

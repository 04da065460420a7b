from __future__ import annotations

import sys
from collections.abc import Sequence

SEPARATORS = "/\\"
SEP = "/"


def is_separator(ch: str) -> bool:
    return ch in SEPARATORS


def split_path(path: str) -> list[str]:
    """Split on either separator.  Never returns an empty list: ``""`` is ``[""]``."""
    return normalise(path).split(SEP)


def render_path(components: Sequence[str]) -> str:
    return SEP.join(components)


def normalise(path: str) -> str:
    return path.replace("\\", SEP)


def is_relative_path(path: str) -> bool:
    if path and is_separator(path[0]):
        return False
    # Drive letters only make a path absolute on Windows.
    if sys.platform == "win32" and len(path) >= 2 and path[1] == ":" and path[0].isalpha():
        return False
    return True


def is_relative_pattern(pattern: str) -> bool:
    """A pattern whose leading ``**`` must not reach into absolute paths."""
    if not pattern.startswith("**"):
        return False
    return len(pattern) == 2 or is_separator(pattern[2])

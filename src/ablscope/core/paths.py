"""Path normalization for root-containment checks.

Paths are compared as plain strings.  Both sides are given a trailing
separator so that a root ``/ws/app`` never claims ``/ws/application/x.p``,
and on case-insensitive filesystems both sides are lower-cased.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass


@dataclass(frozen=True)
class PathStyle:
    """Separator and case policy of the filesystem being matched against."""

    name: str
    separator: str
    case_insensitive: bool

    @classmethod
    def native(cls) -> PathStyle:
        """Return the style of the running platform."""
        if sys.platform == "win32":
            return WINDOWS
        return POSIX

    @classmethod
    def from_name(cls, name: str) -> PathStyle:
        """Look up a style by name (``posix``, ``windows`` or ``native``)."""
        key = name.strip().lower()
        if key == "native":
            return cls.native()
        if key in _BY_NAME:
            return _BY_NAME[key]
        raise ValueError(
            f"Unknown path style '{name}'. Expected one of: native, {', '.join(sorted(_BY_NAME))}."
        )


POSIX = PathStyle(name="posix", separator="/", case_insensitive=False)
WINDOWS = PathStyle(name="windows", separator="\\", case_insensitive=True)

_BY_NAME = {POSIX.name: POSIX, WINDOWS.name: WINDOWS}


def normalize_path(path: str | None, style: PathStyle) -> str:
    """Return *path* with a trailing separator, lower-cased if *style* ignores case.

    Empty input yields an empty string.
    """
    if not path:
        return ""
    if not path.endswith(style.separator):
        path = path + style.separator
    return path.lower() if style.case_insensitive else path

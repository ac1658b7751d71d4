"""Small helpers for plugin tooling."""

from __future__ import annotations

import os


def file_exists(path: str | os.PathLike[str]) -> bool:
    """Return True if the path can be stat'ed."""
    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True
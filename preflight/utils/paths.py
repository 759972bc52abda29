"""Small path helpers offered to calling scripts.

* :func:`upsearch` – nearest ancestor (including the start) containing a
  given entry, the same walk used to find a project root marker.
* :func:`realpath` – make a path absolute against the working directory
  without touching the filesystem or resolving symlinks.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional


def upsearch(name: str, start: Optional[Path] = None) -> Optional[Path]:
    """Return ``<ancestor>/<name>`` for the closest ancestor where it exists.

    Args:
        name: File or directory name (may contain separators).
        start: Directory to start from; defaults to the working directory.

    Returns:
        Path of the first match, or ``None`` when no ancestor contains it.
    """
    cur = Path(start).resolve() if start is not None else Path.cwd()
    if cur.is_file():
        cur = cur.parent
    for parent in (cur, *cur.parents):
        candidate = parent / name
        if candidate.exists():
            return candidate
    return None


def realpath(path: str, cwd: Optional[str] = None) -> str:
    """Return *path* unchanged when absolute, else prefixed with *cwd*.

    A single leading ``./`` is dropped before joining.
    """
    if path.startswith("/"):
        return path
    base = cwd if cwd is not None else os.getcwd()
    if path.startswith("./"):
        path = path[2:]
    return f"{base}/{path}"


__all__ = ["realpath", "upsearch"]

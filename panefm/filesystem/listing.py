"""Directory listing provider.

A pure function of ``(path, include_hidden)``: no caching, no cwd changes.
"""

from __future__ import annotations

import os
from pathlib import Path

from ..errors import FileOperationError
from .types import Entry


def _entry_for(child: os.DirEntry) -> Entry:
    """Build an ``Entry`` from a scandir child, tolerating stat races."""
    try:
        is_dir = child.is_dir()
    except OSError:
        is_dir = False
    try:
        info = child.stat(follow_symlinks=False)
    except OSError:
        return Entry(name=child.name, is_dir=is_dir, size=0, mode=0, mod_time=0.0)
    return Entry(
        name=child.name,
        is_dir=is_dir,
        size=int(info.st_size),
        mode=int(info.st_mode),
        mod_time=float(info.st_mtime),
    )


def list_directory(path: Path, include_hidden: bool) -> tuple[Entry, ...]:
    """Return the children of ``path`` sorted by name.

    Names starting with ``.`` are skipped unless ``include_hidden`` is set.
    Raises ``FileOperationError`` when the directory cannot be scanned.
    """
    entries: list[Entry] = []
    try:
        with os.scandir(path) as children:
            for child in children:
                if not include_hidden and child.name.startswith("."):
                    continue
                entries.append(_entry_for(child))
    except OSError as exc:
        raise FileOperationError.from_os_error("list", path, exc) from exc
    entries.sort(key=lambda entry: entry.name)
    return tuple(entries)

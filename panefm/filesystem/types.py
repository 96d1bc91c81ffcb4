"""Domain types produced by the listing provider."""

from __future__ import annotations

import stat
from dataclasses import dataclass


@dataclass(frozen=True)
class Entry:
    """One directory child with the metadata shown in the status line."""

    name: str
    is_dir: bool
    size: int
    mode: int
    mod_time: float

    @property
    def mode_string(self) -> str:
        """Return ``ls``-style permission text such as ``drwxr-xr-x``."""
        return stat.filemode(self.mode)

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")

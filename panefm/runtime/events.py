"""Events consumed by the session: input, resize, and request completions."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..errors import PanefmError
from ..filesystem import Entry


@dataclass(frozen=True)
class KeyPressed:
    key: str


@dataclass(frozen=True)
class Resized:
    columns: int
    lines: int


@dataclass(frozen=True)
class DirectoryLoaded:
    request_id: int
    path: Path
    entries: tuple[Entry, ...]


@dataclass(frozen=True)
class FileContentLoaded:
    request_id: int
    path: Path
    content: str


@dataclass(frozen=True)
class RequestFailed:
    request_id: int
    error: PanefmError

    @property
    def message(self) -> str:
        return str(self.error)


Completion = DirectoryLoaded | FileContentLoaded | RequestFailed
Event = KeyPressed | Resized | DirectoryLoaded | FileContentLoaded | RequestFailed

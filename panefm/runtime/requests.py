"""Asynchronous requests issued by the session to filesystem collaborators.

Each request is tagged with its intent and a monotonically increasing
``request_id`` so completions can be matched and stale ones dropped.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..preview import PreviewOptions


@dataclass(frozen=True)
class LoadDirectory:
    """List ``path`` (or the home directory when ``path`` is ``None``)."""

    request_id: int
    path: Path | None
    show_hidden: bool


@dataclass(frozen=True)
class LoadFileContent:
    """Read and format a file for the secondary pane."""

    request_id: int
    path: Path
    width: int
    options: PreviewOptions


MKDIR = "mkdir"
TOUCH = "touch"
RENAME = "rename"
MOVE_FILE = "move_file"
MOVE_DIRECTORY = "move_directory"
DELETE_FILE = "delete_file"
DELETE_DIRECTORY = "delete_directory"


@dataclass(frozen=True)
class MutatePath:
    """Apply one mutation, then reload ``reload_path``."""

    request_id: int
    operation: str
    source: Path
    target: Path | None
    reload_path: Path
    show_hidden: bool


Request = LoadDirectory | LoadFileContent | MutatePath

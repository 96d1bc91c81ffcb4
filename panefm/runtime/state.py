from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path

from ..command_bar import CommandBar
from ..navigator import ListNavigator
from ..viewport import Viewport


class Focus(enum.Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"


@dataclass(frozen=True)
class PendingKey:
    """Last key pressed, used to detect two-key sequences such as ``gg``."""

    key: str
    pressed_at: float

    def completes(self, key: str, now: float, window_seconds: float) -> bool:
        return self.key == key and (now - self.pressed_at) <= window_seconds


@dataclass(frozen=True)
class StatusLine:
    selected_name: str = ""
    status: str = ""
    position: str = "0/0"
    logo: str = "FM"
    is_error: bool = False
    is_command: bool = False


@dataclass
class SessionState:
    current_dir: Path
    show_hidden: bool
    navigator: ListNavigator
    previous_dir: Path | None = None
    focus: Focus = Focus.PRIMARY
    command_bar: CommandBar = field(default_factory=CommandBar)
    pending_key: PendingKey | None = None
    primary: Viewport | None = None
    secondary: Viewport | None = None
    ready: bool = False
    screen_width: int = 0
    screen_height: int = 0
    preview_path: Path | None = None
    status_message: str = ""
    status: StatusLine = field(default_factory=StatusLine)
    latest_listing_request: int = 0
    latest_content_request: int = 0
    quit_requested: bool = False
    dirty: bool = True

"""Scrollable pane surfaces and cursor/viewport synchronization."""

from __future__ import annotations

from collections.abc import Iterable

from .navigator import ListNavigator


class Viewport:
    """Fixed-height window over a list of content lines.

    ``y_offset`` always stays within ``[0, max(0, line_count - height)]``.
    """

    def __init__(self, width: int, height: int, active: bool = False) -> None:
        self.width = max(0, width)
        self.height = max(1, height)
        self.y_offset = 0
        self.active = active
        self._lines: list[str] = []

    @property
    def lines(self) -> list[str]:
        return self._lines

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def max_y_offset(self) -> int:
        return max(0, len(self._lines) - self.height)

    @property
    def top(self) -> int:
        return self.y_offset

    @property
    def bottom(self) -> int:
        """Index of the last line inside the window."""
        return self.y_offset + self.height - 1

    def _clamp(self) -> None:
        self.y_offset = max(0, min(self.y_offset, self.max_y_offset))

    def set_size(self, width: int, height: int) -> None:
        self.width = max(0, width)
        self.height = max(1, height)
        self._clamp()

    def set_content(self, content: str | Iterable[str]) -> None:
        """Replace the content, keeping the offset when it is still valid."""
        if isinstance(content, str):
            self._lines = content.splitlines()
        else:
            self._lines = list(content)
        self._clamp()

    def line_up(self, count: int = 1) -> None:
        self.y_offset -= count
        self._clamp()

    def line_down(self, count: int = 1) -> None:
        self.y_offset += count
        self._clamp()

    def goto_top(self) -> None:
        self.y_offset = 0

    def goto_bottom(self) -> None:
        self.y_offset = self.max_y_offset

    def visible_lines(self) -> list[str]:
        return self._lines[self.y_offset : self.y_offset + self.height]

    def ensure_visible(self, index: int) -> None:
        """Shift the window by the minimum amount so ``index`` is shown."""
        if index < self.top:
            self.y_offset = index
        elif index > self.bottom:
            self.y_offset = index - self.height + 1
        self._clamp()


def sync_cursor_with_viewport(navigator: ListNavigator, viewport: Viewport) -> None:
    """Realign ``viewport`` after a single-step cursor move.

    The window moves at most one line toward the cursor. A cursor that ran
    past either end wraps around: past the bottom to the first entry with the
    window at the top, before the top to the last entry with the window at
    the bottom.
    """
    cursor = navigator.cursor
    if cursor < viewport.top:
        viewport.line_up(1)
    elif cursor > viewport.bottom:
        viewport.line_down(1)

    if navigator.cursor > navigator.total - 1:
        navigator.goto_top()
        viewport.goto_top()
    elif navigator.cursor < viewport.top:
        navigator.goto_bottom()
        viewport.goto_bottom()

"""Cursor tracking over the current directory's entries."""

from __future__ import annotations

from collections.abc import Sequence

from .filesystem import Entry


class ListNavigator:
    """Owns one entry sequence and a cursor into it.

    ``move_up``/``move_down`` do not check bounds; callers run
    ``sync_cursor_with_viewport`` afterwards, which wraps the cursor.
    """

    def __init__(self, entries: Sequence[Entry] = ()) -> None:
        self._entries: tuple[Entry, ...] = tuple(entries)
        self.cursor = 0

    @property
    def entries(self) -> tuple[Entry, ...]:
        return self._entries

    @property
    def total(self) -> int:
        return len(self._entries)

    def is_empty(self) -> bool:
        return not self._entries

    def replace(self, entries: Sequence[Entry]) -> None:
        """Install a freshly listed sequence and reset the cursor."""
        self._entries = tuple(entries)
        self.cursor = 0

    def move_down(self) -> None:
        self.cursor += 1

    def move_up(self) -> None:
        self.cursor -= 1

    def goto_top(self) -> None:
        self.cursor = 0

    def goto_bottom(self) -> None:
        self.cursor = len(self._entries) - 1

    def selected(self) -> Entry:
        """Return the entry under the cursor.

        The sequence must be non-empty; callers guard with ``is_empty``.
        """
        if not self._entries:
            raise IndexError("no entries to select")
        return self._entries[self.cursor]

    def selected_or_none(self) -> Entry | None:
        if not self._entries or not 0 <= self.cursor < len(self._entries):
            return None
        return self._entries[self.cursor]

"""Formatting of directory entries for the primary pane."""

from __future__ import annotations

from collections.abc import Sequence

from ..filesystem import Entry
from ..ui_theme import UITheme


def selected_with_ansi(text: str, theme: UITheme) -> str:
    """Apply selection styling without discarding existing ANSI colors."""
    if not text or not theme.reverse:
        return text
    # Keep reverse video active even when the text contains internal resets.
    return theme.reverse + text.replace("\033[0m", "\033[0;7m") + theme.reset


def format_entry(entry: Entry, theme: UITheme) -> str:
    if entry.is_dir:
        color = theme.entry_dir
        label = f"{entry.name}/"
    elif entry.is_hidden:
        color = theme.entry_hidden
        label = entry.name
    else:
        color = theme.entry_file
        label = entry.name
    if not color:
        return label
    return f"{color}{label}{theme.reset}"


def format_listing(entries: Sequence[Entry], cursor: int, theme: UITheme) -> list[str]:
    """Return one display line per entry with the cursor row highlighted."""
    lines: list[str] = []
    for idx, entry in enumerate(entries):
        text = format_entry(entry, theme)
        if idx == cursor:
            text = selected_with_ansi(text, theme) if theme.reverse else f"> {text}"
        elif not theme.reverse:
            text = f"  {text}"
        lines.append(text)
    return lines

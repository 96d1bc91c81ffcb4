"""Key help shown as the secondary pane's default content."""

from __future__ import annotations

from ..ui_theme import UITheme

HELP_TITLE = "FM (File Manager)"

HELP_KEYS: tuple[tuple[str, str], ...] = (
    ("h / left", "go back a directory"),
    ("j / down", "move cursor down"),
    ("k / up", "move cursor up"),
    ("l / right", "open selected folder / view file"),
    ("gg / home", "go to top of pane"),
    ("G / end", "go to bottom of pane"),
    ("~", "switch to home directory"),
    (".", "toggle hidden files and directories"),
    ("-", "go to previous directory"),
    (":", "open command bar"),
    ("tab", "toggle between panes"),
    ("esc", "close command bar / show this help"),
    ("q", "quit"),
)

HELP_COMMANDS: tuple[tuple[str, str], ...] = (
    ("mkdir dirname", "create directory in current directory"),
    ("touch filename.txt", "create file in current directory"),
    ("mv newname.txt", "rename currently selected file or directory"),
    ("cp /dir/to/move/to", "move file or directory"),
    ("rm", "remove file or directory"),
)


def _rows(pairs: tuple[tuple[str, str], ...], theme: UITheme) -> list[str]:
    key_width = max(len(key) for key, _ in pairs)
    return [
        f"  {theme.help_key}{key.ljust(key_width)}{theme.reset}  {theme.help_dim}{text}{theme.reset}"
        for key, text in pairs
    ]


def help_lines(theme: UITheme) -> list[str]:
    """Return the styled help text, one entry per screen line."""
    lines = [f"{theme.help_heading}{HELP_TITLE}{theme.reset}", ""]
    lines.append(f"{theme.help_heading}Keys{theme.reset}")
    lines.extend(_rows(HELP_KEYS, theme))
    lines.append("")
    lines.append(f"{theme.help_heading}Commands{theme.reset}")
    lines.extend(_rows(HELP_COMMANDS, theme))
    return lines

"""Frame composition for the dual-pane view.

``build_frame`` turns ``SessionState`` into one ANSI string without mutating
it; ``write_frame`` sends that string to the terminal.
"""

from __future__ import annotations

import os
import sys

from ..ansi import display_width, fit_ansi_line
from ..runtime.state import SessionState, StatusLine
from ..ui_theme import UITheme
from .help import help_lines
from .listing import format_listing

__all__ = [
    "build_frame",
    "build_status_line",
    "format_listing",
    "help_lines",
    "write_frame",
]

PREVIEW_HELP_TITLE = "help"


def _styled(text: str, style: str, theme: UITheme) -> str:
    if not style:
        return text
    return f"{style}{text}{theme.reset}"


def _header(title: str, width: int, active: bool, theme: UITheme) -> str:
    style = theme.header_active if active else theme.header_inactive
    return fit_ansi_line(_styled(f" {title}", style, theme), width)


def build_status_line(status: StatusLine, width: int, theme: UITheme) -> str:
    """Lay out name, status text, position counter and logo across ``width``."""
    usable = max(1, width)
    name = f" {status.selected_name} " if status.selected_name else ""
    name = name[: max(0, usable // 4)]
    position = f" {status.position} "
    logo = f" {status.logo} "
    middle_width = max(0, usable - len(name) - len(position) - len(logo))
    middle_text = f" {status.status}"[:middle_width].ljust(middle_width)

    if status.is_error:
        middle_style = theme.status_error
    elif status.is_command:
        middle_style = theme.command_text if status.status else theme.command_placeholder
    else:
        middle_style = theme.status_bar

    out = [
        _styled(name, theme.status_name, theme) if name else "",
        _styled(middle_text, middle_style, theme),
        _styled(position, theme.status_position, theme),
        _styled(logo, theme.status_logo, theme),
    ]
    line = "".join(out)
    if display_width(line) > usable:
        return fit_ansi_line(line, usable)
    return line


def build_frame(state: SessionState, theme: UITheme) -> str:
    """Compose a full screen: pane headers, pane rows, status line."""
    primary = state.primary
    secondary = state.secondary
    if primary is None or secondary is None:
        return ""

    divider = _styled("│", theme.divider, theme)
    preview_title = state.preview_path.name if state.preview_path is not None else PREVIEW_HELP_TITLE
    out: list[str] = ["\033[H"]
    out.append(_header(str(state.current_dir), primary.width, primary.active, theme))
    out.append(divider)
    out.append(_header(preview_title, secondary.width, secondary.active, theme))
    out.append("\r\n")

    left_rows = primary.visible_lines()
    right_rows = secondary.visible_lines()
    for row in range(primary.height):
        left = left_rows[row] if row < len(left_rows) else ""
        right = right_rows[row] if row < len(right_rows) else ""
        out.append(fit_ansi_line(left, primary.width))
        out.append(divider)
        out.append(fit_ansi_line(right, secondary.width))
        out.append("\r\n")

    out.append(build_status_line(state.status, state.screen_width, theme))
    out.append("\033[K")
    return "".join(out)


def write_frame(frame: str, fd: int | None = None) -> None:
    target = sys.stdout.fileno() if fd is None else fd
    os.write(target, frame.encode("utf-8", errors="replace"))

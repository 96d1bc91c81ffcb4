"""Status line derivation.

The status line is recomputed from ``SessionState`` after every event and
never feeds back into it.
"""

from __future__ import annotations

from .state import SessionState, StatusLine

LOGO = "FM"
SIZE_UNIT = 1000
SIZE_PREFIXES = "kMGTPE"


def format_size(size: int) -> str:
    """Format a byte count with decimal units (``512 B``, ``1.5 kB``)."""
    if size < SIZE_UNIT:
        return f"{size} B"
    div = SIZE_UNIT
    exp = 0
    n = size // SIZE_UNIT
    while n >= SIZE_UNIT and exp < len(SIZE_PREFIXES) - 1:
        div *= SIZE_UNIT
        exp += 1
        n //= SIZE_UNIT
    return f"{size / div:.1f} {SIZE_PREFIXES[exp]}B"


def compute_status_line(state: SessionState) -> StatusLine:
    navigator = state.navigator
    selected = navigator.selected_or_none()
    position = f"{navigator.cursor + 1}/{navigator.total}" if selected is not None else "0/0"
    name = selected.name if selected is not None else ""

    if state.command_bar.visible:
        return StatusLine(
            selected_name=name,
            status=state.command_bar.view(),
            position=position,
            logo=LOGO,
            is_command=True,
        )
    if state.status_message:
        return StatusLine(
            selected_name=name,
            status=state.status_message,
            position=position,
            logo=LOGO,
            is_error=True,
        )
    if selected is None:
        status = str(state.current_dir)
    else:
        status = f"{format_size(selected.size)} {selected.mode_string} {state.current_dir}"
    return StatusLine(selected_name=name, status=status, position=position, logo=LOGO)

"""Main interactive event loop for the terminal UI.

Keys, resizes, and request completions all pass through one queue and are
handled one at a time by the session. This loop is wiring only; behavior
lives in ``FileManagerSession``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from queue import Empty, Queue

from ..render import build_frame
from .events import Event, KeyPressed, Resized
from .requests import Request
from .session import FileManagerSession


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    key_poll_ms: int = 50


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected I/O used by ``run_main_loop`` so tests can drive it."""

    read_key: Callable[[int, int | None], str]
    terminal_size: Callable[[], tuple[int, int]]
    write_frame: Callable[[str], None]
    submit: Callable[[Request], None]


def drain_events(session: FileManagerSession, events: Queue[Event], submit: Callable[[Request], None]) -> int:
    """Handle every queued event in arrival order; return how many ran."""
    handled = 0
    while True:
        try:
            event = events.get_nowait()
        except Empty:
            return handled
        for request in session.handle(event):
            submit(request)
        handled += 1
        if session.quit_requested:
            return handled


def run_main_loop(
    session: FileManagerSession,
    terminal,
    stdin_fd: int,
    events: Queue[Event],
    timing: RuntimeLoopTiming,
    callbacks: RuntimeLoopCallbacks,
) -> None:
    """Run until the session asks to quit.

    Each iteration posts a resize event when the terminal size changed,
    drains the event queue, renders when state is dirty, then waits for one key.
    """
    state = session.state
    last_size: tuple[int, int] | None = None
    skip_next_lf = False

    with terminal.raw_mode():
        while True:
            size = callbacks.terminal_size()
            if size != last_size:
                last_size = size
                events.put(Resized(columns=size[0], lines=size[1]))

            drain_events(session, events, callbacks.submit)
            if session.quit_requested:
                break

            if state.dirty and state.ready:
                callbacks.write_frame(build_frame(state, session.theme))
                state.dirty = False

            key = callbacks.read_key(stdin_fd, timing.key_poll_ms)
            if key == "":
                continue
            if skip_next_lf and key == "ENTER_LF":
                skip_next_lf = False
                continue
            skip_next_lf = key == "ENTER_CR"
            if key in {"ENTER_CR", "ENTER_LF"}:
                key = "ENTER"
            events.put(KeyPressed(key))

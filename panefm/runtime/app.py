"""Runtime composition layer for panefm.

Lists the start directory synchronously, builds the session, and wires the
worker, terminal, and loop together.
"""

from __future__ import annotations

import logging
import shutil
import sys
import termios
from pathlib import Path
from queue import Queue

from ..config import Settings
from ..filesystem import list_directory
from ..input import read_key
from ..render import write_frame
from ..ui_theme import resolve_theme
from .events import Event
from .executor import FileManagerServices, RequestWorker
from .loop import RuntimeLoopCallbacks, RuntimeLoopTiming, run_main_loop
from .session import FileManagerSession
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def _terminal_size() -> tuple[int, int]:
    term = shutil.get_terminal_size((80, 24))
    return term.columns, term.lines


def build_session(start_dir: Path, settings: Settings) -> FileManagerSession:
    """Create a session for ``start_dir``.

    The initial listing runs inline; its ``FileOperationError`` is fatal to
    the caller.
    """
    entries = list_directory(start_dir, settings.show_hidden)
    return FileManagerSession(
        start_dir,
        entries,
        settings=settings,
        theme=resolve_theme(settings.theme),
    )


def run_file_manager(start_dir: Path, settings: Settings, services: FileManagerServices | None = None) -> None:
    """Run one interactive session until the user quits."""
    session = build_session(start_dir, settings)
    logger.info("starting in %s", start_dir)

    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    try:
        terminal = TerminalController(stdin_fd, stdout_fd)
    except termios.error as exc:
        raise SystemExit("panefm needs an interactive terminal") from exc

    events: Queue[Event] = Queue()
    worker = RequestWorker(events, services)
    run_main_loop(
        session,
        terminal,
        stdin_fd,
        events,
        RuntimeLoopTiming(),
        RuntimeLoopCallbacks(
            read_key=read_key,
            terminal_size=_terminal_size,
            write_frame=write_frame,
            submit=worker.submit,
        ),
    )
    logger.info("session closed in %s", session.state.current_dir)

"""Interactive session state machine.

``FileManagerSession.handle`` consumes one event at a time (key, resize, or
request completion), mutates the owned ``SessionState``, and returns the
requests that should run asynchronously. It never touches the filesystem
itself.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from pathlib import Path

from ..command_bar import parse_command
from ..config import Settings
from ..errors import CommandParseError
from ..filesystem import Entry
from ..input import KeyBinding, KeyMap
from ..navigator import ListNavigator
from ..preview import PreviewOptions
from ..render.help import help_lines
from ..render.listing import format_listing
from ..ui_theme import UITheme, resolve_theme
from ..viewport import Viewport, sync_cursor_with_viewport
from .commands import CommandContext, build_command
from .events import DirectoryLoaded, Event, FileContentLoaded, KeyPressed, RequestFailed, Resized
from .requests import LoadDirectory, LoadFileContent, Request
from .state import Focus, PendingKey, SessionState
from .status import compute_status_line

logger = logging.getLogger(__name__)

STATUS_BAR_HEIGHT = 1
PANE_HEADER_HEIGHT = 1
DIVIDER_WIDTH = 1
KEY_SEQUENCE_SECONDS = 1.0

Requests = list[Request]


def pane_geometry(columns: int, lines: int) -> tuple[int, int, int]:
    """Return ``(primary_width, secondary_width, pane_height)`` for a terminal size."""
    primary_width = max(1, columns // 2)
    secondary_width = max(1, columns - primary_width - DIVIDER_WIDTH)
    pane_height = max(1, lines - STATUS_BAR_HEIGHT - PANE_HEADER_HEIGHT)
    return primary_width, secondary_width, pane_height


class FileManagerSession:
    """Owns ``SessionState`` and applies events to it."""

    def __init__(
        self,
        start_dir: Path,
        entries: Sequence[Entry] = (),
        *,
        settings: Settings | None = None,
        theme: UITheme | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.settings = settings if settings is not None else Settings()
        self.theme = theme if theme is not None else resolve_theme(self.settings.theme)
        self._clock = clock
        self._last_request_id = 0
        self._help = help_lines(self.theme)
        self.state = SessionState(
            current_dir=start_dir,
            show_hidden=self.settings.show_hidden,
            navigator=ListNavigator(entries),
        )
        self._normal_keys: KeyMap[Requests] = KeyMap[Requests]().bind(
            KeyBinding(("q",), self._quit),
            KeyBinding(("j", "DOWN"), self._move_down),
            KeyBinding(("k", "UP"), self._move_up),
            KeyBinding(("HOME",), self._goto_top),
            KeyBinding(("G", "END"), self._goto_bottom),
            KeyBinding(("l", "RIGHT", "ENTER"), self._open_selected),
            KeyBinding(("h", "LEFT"), self._go_left),
            KeyBinding(("~",), self._go_home),
            KeyBinding(("-",), self._go_previous),
            KeyBinding((".",), self._toggle_hidden),
            KeyBinding((":",), self._open_command_bar),
            KeyBinding(("TAB",), self._toggle_focus),
            KeyBinding(("ESC",), self._reset_view),
        )
        self._command_keys: KeyMap[Requests] = KeyMap[Requests]().bind(
            KeyBinding(("ESC",), self._cancel_command),
            KeyBinding(("ENTER",), self._submit_command),
            KeyBinding(("BACKSPACE",), self._command_backspace),
            KeyBinding(("CTRL_U",), self._command_clear),
        )
        self.state.status = compute_status_line(self.state)

    # -- public surface -------------------------------------------------

    @property
    def quit_requested(self) -> bool:
        return self.state.quit_requested

    @property
    def help_lines(self) -> list[str]:
        return list(self._help)

    def handle(self, event: Event) -> Requests:
        """Apply ``event`` and return the requests it dispatches."""
        if isinstance(event, KeyPressed):
            requests = self._handle_key(event.key)
        elif isinstance(event, Resized):
            requests = self._handle_resize(event.columns, event.lines)
        elif isinstance(event, DirectoryLoaded):
            requests = self._handle_directory_loaded(event)
        elif isinstance(event, FileContentLoaded):
            requests = self._handle_file_content(event)
        elif isinstance(event, RequestFailed):
            requests = self._handle_failure(event)
        else:
            raise TypeError(f"unsupported event: {event!r}")
        self.state.status = compute_status_line(self.state)
        self.state.dirty = True
        return requests

    # -- request bookkeeping -------------------------------------------

    def _next_request_id(self) -> int:
        self._last_request_id += 1
        return self._last_request_id

    def _load_directory(self, path: Path | None) -> Requests:
        request = LoadDirectory(
            request_id=self._next_request_id(),
            path=path,
            show_hidden=self.state.show_hidden,
        )
        self.state.latest_listing_request = request.request_id
        return [request]

    def _preview_options(self) -> PreviewOptions:
        return PreviewOptions(
            pretty_markdown=self.settings.pretty_markdown,
            syntax_highlight=self.settings.syntax_highlight,
            syntax_style=self.settings.syntax_style,
        )

    # -- rendering helpers ---------------------------------------------

    def _render_listing(self) -> None:
        state = self.state
        if state.primary is None:
            return
        state.primary.set_content(
            format_listing(state.navigator.entries, state.navigator.cursor, self.theme)
        )

    def _show_help(self) -> None:
        state = self.state
        state.preview_path = None
        if state.secondary is None:
            return
        state.secondary.set_content(self._help)
        state.secondary.goto_top()

    def _set_focus(self, focus: Focus) -> None:
        state = self.state
        state.focus = focus
        if state.primary is not None and state.secondary is not None:
            state.primary.active = focus is Focus.PRIMARY
            state.secondary.active = focus is Focus.SECONDARY

    # -- resize ------------------------------------------------------------

    def _handle_resize(self, columns: int, lines: int) -> Requests:
        state = self.state
        state.screen_width = columns
        state.screen_height = lines
        primary_width, secondary_width, pane_height = pane_geometry(columns, lines)
        if not state.ready:
            state.primary = Viewport(primary_width, pane_height, active=True)
            state.secondary = Viewport(secondary_width, pane_height, active=False)
            self._render_listing()
            self._show_help()
            self._set_focus(Focus.PRIMARY)
            state.ready = True
            logger.info("session ready in %s (%dx%d)", state.current_dir, columns, lines)
            return []

        assert state.primary is not None and state.secondary is not None
        state.primary.set_size(primary_width, pane_height)
        state.secondary.set_size(secondary_width, pane_height)
        if not state.navigator.is_empty():
            state.primary.ensure_visible(state.navigator.cursor)
        return []

    # -- keys --------------------------------------------------------------

    def _handle_key(self, key: str) -> Requests:
        state = self.state
        if key == "CTRL_C":
            state.quit_requested = True
            return []
        if not state.ready:
            return []
        state.status_message = ""

        if state.command_bar.visible:
            state.pending_key = None
            return self._handle_command_key(key)

        now = self._clock()
        previous = state.pending_key
        state.pending_key = PendingKey(key, now)
        if key == "g":
            if previous is not None and previous.completes("g", now, KEY_SEQUENCE_SECONDS):
                state.pending_key = None
                return self._goto_top()
            return []
        return self._normal_keys.dispatch(key) or []

    def _handle_command_key(self, key: str) -> Requests:
        if key in self._command_keys:
            return self._command_keys.dispatch(key) or []
        if len(key) == 1 and key.isprintable():
            self.state.command_bar.insert(key)
        return []

    def _quit(self) -> Requests:
        self.state.quit_requested = True
        return []

    def _move_down(self) -> Requests:
        state = self.state
        assert state.primary is not None and state.secondary is not None
        if state.focus is Focus.SECONDARY:
            state.secondary.line_down(1)
            return []
        if state.navigator.is_empty():
            return []
        state.navigator.move_down()
        sync_cursor_with_viewport(state.navigator, state.primary)
        self._render_listing()
        return []

    def _move_up(self) -> Requests:
        state = self.state
        assert state.primary is not None and state.secondary is not None
        if state.focus is Focus.SECONDARY:
            state.secondary.line_up(1)
            return []
        if state.navigator.is_empty():
            return []
        state.navigator.move_up()
        sync_cursor_with_viewport(state.navigator, state.primary)
        self._render_listing()
        return []

    def _goto_top(self) -> Requests:
        state = self.state
        assert state.primary is not None and state.secondary is not None
        if state.focus is Focus.SECONDARY:
            state.secondary.goto_top()
            return []
        if state.navigator.is_empty():
            return []
        state.navigator.goto_top()
        state.primary.goto_top()
        self._render_listing()
        return []

    def _goto_bottom(self) -> Requests:
        state = self.state
        assert state.primary is not None and state.secondary is not None
        if state.focus is Focus.SECONDARY:
            state.secondary.goto_bottom()
            return []
        if state.navigator.is_empty():
            return []
        state.navigator.goto_bottom()
        self._render_listing()
        state.primary.goto_bottom()
        return []

    def _open_selected(self) -> Requests:
        state = self.state
        assert state.secondary is not None
        if state.focus is not Focus.PRIMARY or state.navigator.is_empty():
            return []
        entry = state.navigator.selected()
        target = state.current_dir / entry.name
        if entry.is_dir:
            return self._load_directory(target)
        request = LoadFileContent(
            request_id=self._next_request_id(),
            path=target,
            width=state.secondary.width,
            options=self._preview_options(),
        )
        state.latest_content_request = request.request_id
        state.secondary.goto_top()
        return [request]

    def _go_left(self) -> Requests:
        state = self.state
        if state.focus is Focus.SECONDARY:
            self._set_focus(Focus.PRIMARY)
            return []
        parent = state.current_dir.parent
        if parent == state.current_dir:
            return []
        return self._load_directory(parent)

    def _go_home(self) -> Requests:
        return self._load_directory(None)

    def _go_previous(self) -> Requests:
        if self.state.previous_dir is None:
            return []
        return self._load_directory(self.state.previous_dir)

    def _toggle_hidden(self) -> Requests:
        self.state.show_hidden = not self.state.show_hidden
        return self._load_directory(self.state.current_dir)

    def _toggle_focus(self) -> Requests:
        focus = Focus.SECONDARY if self.state.focus is Focus.PRIMARY else Focus.PRIMARY
        self._set_focus(focus)
        return []

    def _reset_view(self) -> Requests:
        self._show_help()
        self._set_focus(Focus.PRIMARY)
        return []

    # -- command bar ---------------------------------------------------

    def _open_command_bar(self) -> Requests:
        self.state.command_bar.open()
        return []

    def _cancel_command(self) -> Requests:
        self.state.command_bar.close()
        self._show_help()
        self._set_focus(Focus.PRIMARY)
        return []

    def _command_backspace(self) -> Requests:
        self.state.command_bar.backspace()
        return []

    def _command_clear(self) -> Requests:
        self.state.command_bar.clear()
        return []

    def _submit_command(self) -> Requests:
        state = self.state
        text = state.command_bar.text
        state.command_bar.close()
        try:
            command = parse_command(text)
        except CommandParseError:
            return []
        context = CommandContext(
            current_dir=state.current_dir,
            selected=state.navigator.selected_or_none(),
            show_hidden=state.show_hidden,
            next_request_id=self._next_request_id,
        )
        result = build_command(command, context)
        if result.message:
            state.status_message = result.message
        if result.request is None:
            return []
        state.latest_listing_request = result.request.request_id
        return [result.request]

    # -- completions ---------------------------------------------------

    def _handle_directory_loaded(self, event: DirectoryLoaded) -> Requests:
        state = self.state
        if event.request_id < state.latest_listing_request:
            logger.debug("dropping stale listing %d for %s", event.request_id, event.path)
            return []
        if event.path != state.current_dir:
            state.previous_dir = state.current_dir
            state.current_dir = event.path
            # Previews requested in the old directory no longer apply.
            state.latest_content_request = self._last_request_id
            self._show_help()
        state.navigator.replace(event.entries)
        if state.primary is not None:
            state.primary.goto_top()
        self._render_listing()
        return []

    def _handle_file_content(self, event: FileContentLoaded) -> Requests:
        state = self.state
        if event.request_id < state.latest_content_request:
            logger.debug("dropping stale preview %d for %s", event.request_id, event.path)
            return []
        state.preview_path = event.path
        if state.secondary is not None:
            state.secondary.set_content(event.content)
            state.secondary.goto_top()
        self._set_focus(Focus.SECONDARY)
        return []

    def _handle_failure(self, event: RequestFailed) -> Requests:
        state = self.state
        if event.request_id not in (state.latest_listing_request, state.latest_content_request):
            logger.debug("dropping stale failure %d: %s", event.request_id, event.message)
            return []
        state.status_message = event.message
        return []

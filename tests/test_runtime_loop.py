"""Tests for the main loop wiring with scripted keys and fake I/O."""

from __future__ import annotations

import contextlib
import stat
import unittest
from pathlib import Path
from queue import Queue

from panefm.filesystem import Entry
from panefm.runtime.events import DirectoryLoaded, KeyPressed, Resized
from panefm.runtime.loop import RuntimeLoopCallbacks, RuntimeLoopTiming, drain_events, run_main_loop
from panefm.runtime.session import FileManagerSession
from panefm.ui_theme import PLAIN_THEME

ROOT = Path("/work")


def _entry(name: str, is_dir: bool = False) -> Entry:
    mode = (stat.S_IFDIR | 0o755) if is_dir else (stat.S_IFREG | 0o644)
    return Entry(name=name, is_dir=is_dir, size=0, mode=mode, mod_time=0.0)


class _FakeTerminal:
    def __init__(self) -> None:
        self.entered = 0
        self.exited = 0

    @contextlib.contextmanager
    def raw_mode(self):
        self.entered += 1
        try:
            yield
        finally:
            self.exited += 1


class _Harness:
    def __init__(self, keys: list[str], sizes: list[tuple[int, int]] | None = None) -> None:
        self.keys = list(keys)
        self.sizes = list(sizes or [(60, 12)])
        self.frames: list[str] = []
        self.submitted: list = []

    def read_key(self, _fd: int, _timeout_ms: int | None) -> str:
        if not self.keys:
            return "CTRL_C"
        return self.keys.pop(0)

    def terminal_size(self) -> tuple[int, int]:
        if len(self.sizes) > 1:
            return self.sizes.pop(0)
        return self.sizes[0]

    def callbacks(self) -> RuntimeLoopCallbacks:
        return RuntimeLoopCallbacks(
            read_key=self.read_key,
            terminal_size=self.terminal_size,
            write_frame=self.frames.append,
            submit=self.submitted.append,
        )


def _run(session: FileManagerSession, harness: _Harness) -> _FakeTerminal:
    terminal = _FakeTerminal()
    run_main_loop(session, terminal, 0, Queue(), RuntimeLoopTiming(key_poll_ms=0), harness.callbacks())
    return terminal


class RunMainLoopTests(unittest.TestCase):
    def test_keys_render_and_quit(self) -> None:
        session = FileManagerSession(ROOT, [_entry("a"), _entry("b")], theme=PLAIN_THEME)
        harness = _Harness(["j", "", "q"])

        terminal = _run(session, harness)

        self.assertEqual((terminal.entered, terminal.exited), (1, 1))
        self.assertTrue(session.quit_requested)
        self.assertEqual(session.state.navigator.cursor, 1)
        self.assertEqual(len(harness.frames), 2)
        self.assertIn("> b", harness.frames[-1])

    def test_crlf_pair_is_one_enter(self) -> None:
        session = FileManagerSession(ROOT, [_entry("main.go")], theme=PLAIN_THEME)
        harness = _Harness([":", "x", "ENTER_CR", "ENTER_LF", "q"])

        _run(session, harness)

        self.assertEqual(harness.submitted, [])
        self.assertTrue(session.quit_requested)

    def test_lone_lf_is_enter(self) -> None:
        session = FileManagerSession(ROOT, [_entry("main.go")], theme=PLAIN_THEME)
        harness = _Harness(["ENTER_LF", "q"])

        _run(session, harness)

        self.assertEqual(len(harness.submitted), 1)
        self.assertEqual(harness.submitted[0].path, ROOT / "main.go")

    def test_size_change_resizes_panes(self) -> None:
        session = FileManagerSession(ROOT, [_entry("a")], theme=PLAIN_THEME)
        harness = _Harness(["", "q"], sizes=[(60, 12), (100, 30)])

        _run(session, harness)

        primary = session.state.primary
        assert primary is not None
        self.assertEqual((primary.width, primary.height), (50, 28))


class DrainEventsTests(unittest.TestCase):
    def test_events_handled_in_order_and_requests_submitted(self) -> None:
        session = FileManagerSession(ROOT, [_entry("docs", True)], theme=PLAIN_THEME)
        events: Queue = Queue()
        submitted: list = []
        events.put(Resized(80, 24))
        events.put(KeyPressed("l"))

        self.assertEqual(drain_events(session, events, submitted.append), 2)
        self.assertEqual(len(submitted), 1)

        events.put(DirectoryLoaded(submitted[0].request_id, ROOT / "docs", ()))
        drain_events(session, events, submitted.append)
        self.assertEqual(session.state.current_dir, ROOT / "docs")

    def test_stops_after_quit(self) -> None:
        session = FileManagerSession(ROOT, [], theme=PLAIN_THEME)
        events: Queue = Queue()
        events.put(KeyPressed("CTRL_C"))
        events.put(KeyPressed("j"))

        self.assertEqual(drain_events(session, events, lambda _request: None), 1)
        self.assertEqual(events.qsize(), 1)

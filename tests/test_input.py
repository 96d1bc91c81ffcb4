"""Tests for raw key decoding and key binding tables."""

from __future__ import annotations

import os
import unittest

from panefm.input import KeyBinding, KeyMap, read_key
from panefm.input import reader


class ReadKeyTests(unittest.TestCase):
    def setUp(self) -> None:
        reader._PENDING_BYTES.clear()
        self.read_fd, self.write_fd = os.pipe()

    def tearDown(self) -> None:
        reader._PENDING_BYTES.clear()
        os.close(self.read_fd)
        os.close(self.write_fd)

    def _keys(self, data: bytes, count: int) -> list[str]:
        os.write(self.write_fd, data)
        return [read_key(self.read_fd, timeout_ms=50) for _ in range(count)]

    def test_printable_and_control_keys(self) -> None:
        keys = self._keys(b"j~\x03\x15\t\x7f\x08\r\n", 9)
        self.assertEqual(
            keys,
            ["j", "~", "CTRL_C", "CTRL_U", "TAB", "BACKSPACE", "BACKSPACE", "ENTER_CR", "ENTER_LF"],
        )

    def test_csi_arrows_home_end(self) -> None:
        keys = self._keys(b"\x1b[A\x1b[B\x1b[C\x1b[D\x1b[H\x1b[F", 6)
        self.assertEqual(keys, ["UP", "DOWN", "RIGHT", "LEFT", "HOME", "END"])

    def test_tilde_sequences(self) -> None:
        keys = self._keys(b"\x1b[1~\x1b[4~\x1b[7~\x1b[8~\x1b[3~", 5)
        self.assertEqual(keys, ["HOME", "END", "HOME", "END", "DELETE"])

    def test_modified_arrow_collapses_to_plain_key(self) -> None:
        self.assertEqual(self._keys(b"\x1b[1;5C", 1), ["RIGHT"])

    def test_ss3_arrows(self) -> None:
        self.assertEqual(self._keys(b"\x1bOA\x1bOF", 2), ["UP", "END"])

    def test_lone_escape(self) -> None:
        self.assertEqual(self._keys(b"\x1b", 1), ["ESC"])

    def test_escape_followed_by_key_keeps_the_key(self) -> None:
        self.assertEqual(self._keys(b"\x1bq", 2), ["ESC", "q"])

    def test_multibyte_character(self) -> None:
        self.assertEqual(self._keys("é".encode("utf-8"), 1), ["é"])

    def test_timeout_returns_empty(self) -> None:
        self.assertEqual(read_key(self.read_fd, timeout_ms=0), "")


class KeyMapTests(unittest.TestCase):
    def test_dispatch_runs_bound_action(self) -> None:
        calls: list[str] = []
        keymap = KeyMap[str]().bind(
            KeyBinding(("j", "DOWN"), lambda: calls.append("down") or "moved"),
        )

        self.assertIn("DOWN", keymap)
        self.assertEqual(keymap.dispatch("j"), "moved")
        self.assertEqual(calls, ["down"])

    def test_unbound_key_returns_none(self) -> None:
        keymap = KeyMap[int]()
        self.assertNotIn("x", keymap)
        self.assertIsNone(keymap.dispatch("x"))

    def test_later_binding_overrides(self) -> None:
        keymap = KeyMap[int]().bind(KeyBinding(("a",), lambda: 1), KeyBinding(("a",), lambda: 2))
        self.assertEqual(keymap.dispatch("a"), 2)

"""Tests for ANSI-aware width, clipping, and padding."""

from __future__ import annotations

import unittest

from panefm.ansi import clip_ansi_line, display_width, expand_tabs, fit_ansi_line, strip_ansi


class AnsiTests(unittest.TestCase):
    def test_display_width_ignores_escapes_and_counts_wide_chars(self) -> None:
        self.assertEqual(display_width("\033[31mred\033[0m"), 3)
        self.assertEqual(display_width("表a"), 3)

    def test_clip_keeps_escapes(self) -> None:
        clipped = clip_ansi_line("\033[31mabcdef\033[0m", 3)
        self.assertEqual(strip_ansi(clipped), "abc")
        self.assertTrue(clipped.startswith("\033[31m"))

    def test_clip_does_not_split_wide_char(self) -> None:
        self.assertEqual(clip_ansi_line("a表", 2), "a")

    def test_fit_pads_and_resets(self) -> None:
        self.assertEqual(fit_ansi_line("ab", 5), "ab   ")
        fitted = fit_ansi_line("\033[1mab", 4)
        self.assertEqual(fitted, "\033[1mab\033[0m  ")
        self.assertEqual(fit_ansi_line("anything", 0), "")

    def test_expand_tabs(self) -> None:
        self.assertEqual(expand_tabs("\tx"), "    x")

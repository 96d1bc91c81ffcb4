"""Tests for preview reading and formatting."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from panefm.ansi import strip_ansi
from panefm.errors import FileOperationError
from panefm.preview import PreviewOptions, format_content, load_preview
from panefm.preview.markdown import is_markdown_path
from panefm.preview.syntax import highlight_source, normalize_style, read_text, sanitize_terminal_text

PLAIN = PreviewOptions(pretty_markdown=False, syntax_highlight=False)


class PreviewFormattingTests(unittest.TestCase):
    def test_plain_text_passes_through_with_tabs_expanded(self) -> None:
        out = format_content("a\tb\n", Path("notes.txt"), 40, PLAIN)
        self.assertEqual(out, "a    b\n")

    def test_control_bytes_are_escaped(self) -> None:
        self.assertEqual(sanitize_terminal_text("bell\x07\n"), "bell\\x07\n")
        out = format_content("\x1b[2Jclear", Path("x.txt"), 40, PLAIN)
        self.assertNotIn("\x1b", out)

    def test_highlighting_emits_ansi_but_keeps_text(self) -> None:
        source = "def main():\n    return 1\n"
        out = highlight_source(source, Path("main.py"))
        self.assertIn("\x1b[", out)
        self.assertEqual(strip_ansi(out).rstrip("\n"), source.rstrip("\n"))

    def test_unknown_extension_still_highlights_as_text(self) -> None:
        out = highlight_source("plain words\n", Path("data.unknownext"))
        self.assertIn("plain words", strip_ansi(out))

    def test_unknown_style_falls_back(self) -> None:
        self.assertEqual(normalize_style("definitely-not-a-style"), "monokai")
        self.assertEqual(normalize_style("monokai"), "monokai")

    def test_markdown_rendered_when_enabled(self) -> None:
        content = "# Title\n\nSome *text* here.\n"
        rendered = format_content(content, Path("README.md"), 40, PreviewOptions())
        visible = strip_ansi(rendered)
        self.assertIn("Title", visible)
        self.assertNotIn("# Title", visible)

        raw = format_content(content, Path("README.md"), 40, PLAIN)
        self.assertEqual(raw, content)

    def test_markdown_detection(self) -> None:
        self.assertTrue(is_markdown_path(Path("a.md")))
        self.assertTrue(is_markdown_path(Path("A.MARKDOWN")))
        self.assertFalse(is_markdown_path(Path("a.txt")))


class PreviewLoadingTests(unittest.TestCase):
    def test_load_preview_reads_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "main.go"
            path.write_text("package main\n", encoding="utf-8")
            self.assertEqual(load_preview(path, 40, PLAIN), "package main\n")

    def test_non_utf8_bytes_are_decoded(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "latin.txt"
            path.write_bytes(b"caf\xe9\n")
            self.assertEqual(read_text(path), "café\n")

    def test_missing_file_raises_read_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(FileOperationError) as ctx:
                load_preview(Path(tmp) / "gone.txt", 40, PLAIN)
        self.assertEqual(ctx.exception.operation, "read")

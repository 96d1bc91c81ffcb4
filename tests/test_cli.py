"""CLI argument and start-directory behavior tests."""

from __future__ import annotations

import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from panefm import cli
from panefm.config import Settings
from panefm.errors import FileOperationError


class CliTests(unittest.TestCase):
    def _patched(self, argv: list[str]):
        return (
            mock.patch.object(sys, "argv", argv),
            mock.patch("panefm.cli.configure_logging"),
            mock.patch("panefm.cli.load_settings", return_value=Settings()),
            mock.patch("panefm.cli.run_file_manager"),
        )

    def test_defaults_to_current_working_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            previous_cwd = Path.cwd()
            argv, logging_patch, settings_patch, run_patch = self._patched(["panefm"])
            try:
                os.chdir(root)
                with argv, logging_patch, settings_patch, run_patch as run_file_manager:
                    cli.main()
            finally:
                os.chdir(previous_cwd)

        run_file_manager.assert_called_once_with(root, Settings())

    def test_explicit_path_argument_wins_over_default(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "sub").mkdir()
            argv, logging_patch, settings_patch, run_patch = self._patched(["panefm", str(root / "sub")])
            with argv, logging_patch, settings_patch, run_patch as run_file_manager:
                cli.main(default_path=root)

        start_dir, _settings = run_file_manager.call_args.args
        self.assertEqual(start_dir, root / "sub")

    def test_missing_path_exits(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing"
            with self.assertRaises(SystemExit) as ctx:
                cli.resolve_start_directory(str(missing))
        self.assertEqual(str(ctx.exception.code), f"Path not found: {missing}")

    def test_file_path_exits(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "file.txt"
            target.write_text("x", encoding="utf-8")
            with self.assertRaises(SystemExit) as ctx:
                cli.resolve_start_directory(str(target))
        self.assertIn("Not a directory", str(ctx.exception.code))

    def test_startup_listing_failure_exits_nonzero(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            argv, logging_patch, settings_patch, run_patch = self._patched(["panefm", str(root)])
            with argv, logging_patch, settings_patch, run_patch as run_file_manager:
                run_file_manager.side_effect = FileOperationError("list", root, "Permission denied")
                with self.assertRaises(SystemExit) as ctx:
                    cli.main()

        self.assertIn("Permission denied", str(ctx.exception.code))

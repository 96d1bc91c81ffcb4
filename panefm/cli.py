"""Command-line front door for panefm.

Resolves the start directory, loads settings, and launches the interactive
session. Startup I/O failures exit with a non-zero status.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .config import load_settings
from .errors import FileOperationError
from .logs import configure_logging
from .runtime import run_file_manager

logger = logging.getLogger(__name__)


def resolve_start_directory(raw: str | None, default_path: Path | None = None) -> Path:
    """Return the absolute directory to open, or raise ``SystemExit``."""
    if raw is None:
        path = default_path if default_path is not None else Path.cwd()
    else:
        path = Path(raw).expanduser()
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")
    return path.resolve()


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and launch panefm in a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    parser = argparse.ArgumentParser(description="Keyboard-driven dual-pane terminal file manager.")
    parser.add_argument("path", nargs="?", default=None, help="Directory to open. Defaults to current directory.")
    args = parser.parse_args()

    start_dir = resolve_start_directory(args.path, default_path)
    configure_logging()
    settings = load_settings()
    try:
        run_file_manager(start_dir, settings)
    except FileOperationError as exc:
        logger.error("startup failed: %s", exc)
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()

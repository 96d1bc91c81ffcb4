"""Preview content pipeline for the secondary pane.

Reads a file, neutralizes control bytes, then applies Markdown rendering or
syntax highlighting depending on the file type and ``PreviewOptions``.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..ansi import expand_tabs
from ..errors import FileOperationError
from .markdown import is_markdown_path, render_markdown
from .syntax import DEFAULT_STYLE, highlight_source, read_text, sanitize_terminal_text


@dataclass(frozen=True)
class PreviewOptions:
    """Formatting switches taken from user settings."""

    pretty_markdown: bool = True
    syntax_highlight: bool = True
    syntax_style: str = DEFAULT_STYLE


def read_file_content(path: Path) -> str:
    """Return decoded file text or raise ``FileOperationError``."""
    try:
        return read_text(path)
    except OSError as exc:
        raise FileOperationError.from_os_error("read", path, exc) from exc


def format_content(content: str, path: Path, width: int, options: PreviewOptions) -> str:
    """Apply the formatting collaborator selected for ``path``."""
    safe = expand_tabs(sanitize_terminal_text(content))
    if is_markdown_path(path) and options.pretty_markdown:
        return render_markdown(safe, width, options.syntax_style)
    if options.syntax_highlight and safe:
        return highlight_source(safe, path, options.syntax_style)
    return safe


def load_preview(path: Path, width: int, options: PreviewOptions) -> str:
    """Read and format ``path`` for display at ``width`` columns."""
    return format_content(read_file_content(path), path, width, options)

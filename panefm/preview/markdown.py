"""Markdown rendering for ``.md`` previews via rich."""

from __future__ import annotations

from pathlib import Path

from ..errors import RenderError

MARKDOWN_EXTENSIONS = frozenset({".md", ".markdown"})


def is_markdown_path(path: Path) -> bool:
    return path.suffix.lower() in MARKDOWN_EXTENSIONS


def render_markdown(content: str, width: int, code_theme: str) -> str:
    """Render Markdown to ANSI text wrapped at ``width`` columns."""
    from rich.console import Console
    from rich.markdown import Markdown

    console = Console(
        width=max(1, width),
        force_terminal=True,
        color_system="256",
        legacy_windows=False,
    )
    try:
        with console.capture() as capture:
            console.print(Markdown(content, code_theme=code_theme))
    except Exception as exc:
        raise RenderError(f"markdown: {exc}") from exc
    return capture.get()

"""File preview: reading, sanitizing, highlighting, and Markdown rendering."""

from .content import PreviewOptions, format_content, load_preview, read_file_content
from .markdown import is_markdown_path, render_markdown
from .syntax import highlight_source, read_text, sanitize_terminal_text

__all__ = [
    "PreviewOptions",
    "format_content",
    "load_preview",
    "read_file_content",
    "is_markdown_path",
    "render_markdown",
    "highlight_source",
    "read_text",
    "sanitize_terminal_text",
]

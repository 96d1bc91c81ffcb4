"""File decoding, control-byte escaping, and pygments highlighting.

Pygments is imported on first use. Unknown style names fall back to
``monokai`` and unrecognized file types to the plain text lexer.
"""

from __future__ import annotations

import re
from pathlib import Path

from ..errors import RenderError

DEFAULT_STYLE = "monokai"
FALLBACK_ENCODINGS = ("utf-8", "utf-8-sig", "latin-1")

# C0 controls other than tab/newline/carriage return, DEL, and C1 controls.
_UNSAFE_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")

_formatter_cache: dict[str, object] = {}
_style_cache: dict[str, str] = {}


def read_text(path: Path) -> str:
    """Decode ``path`` with the first encoding in ``FALLBACK_ENCODINGS`` that fits.

    ``latin-1`` accepts any byte, so the final replacement decode only guards
    against an emptied fallback list.
    """
    data = path.read_bytes()
    for encoding in FALLBACK_ENCODINGS:
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            continue
    return data.decode("utf-8", errors="replace")


def _escape_control(match: re.Match[str]) -> str:
    return f"\\x{ord(match.group(0)):02x}"


def sanitize_terminal_text(text: str) -> str:
    """Render control bytes as visible ``\\xNN`` so previews cannot drive the terminal."""
    return _UNSAFE_CONTROL_RE.sub(_escape_control, text)


def normalize_style(style: str) -> str:
    """Return ``style`` when pygments knows it, else ``DEFAULT_STYLE``."""
    known = _style_cache.get(style)
    if known is not None:
        return known

    from pygments.styles import get_style_by_name
    from pygments.util import ClassNotFound

    try:
        get_style_by_name(style)
    except ClassNotFound:
        resolved = DEFAULT_STYLE
    else:
        resolved = style
    _style_cache[style] = resolved
    return resolved


def _terminal_formatter(style: str):
    formatter = _formatter_cache.get(style)
    if formatter is None:
        from pygments.formatters import Terminal256Formatter

        formatter = Terminal256Formatter(style=style)
        _formatter_cache[style] = formatter
    return formatter


def highlight_source(source: str, path: Path, style: str = DEFAULT_STYLE) -> str:
    """Colorize ``source`` with a lexer picked from the file name.

    Raises ``RenderError`` when pygments fails while formatting.
    """
    from pygments import highlight
    from pygments.lexers import TextLexer, get_lexer_for_filename
    from pygments.util import ClassNotFound

    formatter = _terminal_formatter(normalize_style(style))
    try:
        lexer = get_lexer_for_filename(path.name, code=source)
    except ClassNotFound:
        lexer = TextLexer()

    try:
        return highlight(source, lexer, formatter)
    except Exception as exc:
        raise RenderError(f"highlight {path.name}: {exc}") from exc

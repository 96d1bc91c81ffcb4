"""Input-layer public API: key decoding and key binding tables."""

from .keymap import KeyBinding, KeyMap
from .reader import ESC_SEQUENCE_TIMEOUT_MS, read_key

__all__ = [
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyBinding",
    "KeyMap",
    "read_key",
]

"""Modal single-line command input and command parsing."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import CommandParseError

COMMAND_PROMPT = ":"
COMMAND_PLACEHOLDER = "enter command"


@dataclass(frozen=True)
class ParsedCommand:
    verb: str
    argument: str


def parse_command(text: str) -> ParsedCommand:
    """Split ``text`` into a verb and the remainder after the first whitespace run.

    Raises ``CommandParseError`` when there is no verb.
    """
    parts = text.strip().split(None, 1)
    if not parts:
        raise CommandParseError("empty command")
    verb = parts[0]
    argument = parts[1].strip() if len(parts) > 1 else ""
    return ParsedCommand(verb=verb, argument=argument)


@dataclass
class CommandBar:
    """Visible/focused text buffer shown in place of the status text."""

    visible: bool = False
    focused: bool = False
    text: str = ""
    placeholder: str = ""

    def open(self) -> None:
        self.visible = True
        self.focused = True
        self.placeholder = COMMAND_PLACEHOLDER

    def close(self) -> None:
        """Hide the bar and discard any typed text."""
        self.visible = False
        self.focused = False
        self.text = ""

    def insert(self, chars: str) -> None:
        self.text += chars

    def backspace(self) -> None:
        self.text = self.text[:-1]

    def clear(self) -> None:
        self.text = ""

    def view(self) -> str:
        """Return the prompt line echoed in the status bar."""
        if self.text:
            return f"{COMMAND_PROMPT} {self.text}"
        return f"{COMMAND_PROMPT} {self.placeholder}"

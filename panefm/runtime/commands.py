"""Command-bar verb dispatch.

Turns a parsed command into a ``MutatePath`` request, or into a usage
message when the verb's precondition is not met.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..command_bar import ParsedCommand
from ..filesystem import Entry, resolve_target
from .requests import (
    DELETE_DIRECTORY,
    DELETE_FILE,
    MKDIR,
    MOVE_DIRECTORY,
    MOVE_FILE,
    RENAME,
    TOUCH,
    MutatePath,
)


@dataclass(frozen=True)
class CommandContext:
    current_dir: Path
    selected: Entry | None
    show_hidden: bool
    next_request_id: Callable[[], int]


@dataclass(frozen=True)
class CommandResult:
    request: MutatePath | None = None
    message: str = ""


def _mutation(context: CommandContext, operation: str, source: Path, target: Path | None = None) -> CommandResult:
    return CommandResult(
        request=MutatePath(
            request_id=context.next_request_id(),
            operation=operation,
            source=source,
            target=target,
            reload_path=context.current_dir,
            show_hidden=context.show_hidden,
        )
    )


def _mkdir(command: ParsedCommand, context: CommandContext) -> CommandResult:
    if not command.argument:
        return CommandResult(message="usage: mkdir <name>")
    return _mutation(context, MKDIR, resolve_target(context.current_dir, command.argument))


def _touch(command: ParsedCommand, context: CommandContext) -> CommandResult:
    if not command.argument:
        return CommandResult(message="usage: touch <name>")
    return _mutation(context, TOUCH, resolve_target(context.current_dir, command.argument))


def _mv(command: ParsedCommand, context: CommandContext) -> CommandResult:
    if context.selected is None:
        return CommandResult(message="mv: nothing selected")
    if not command.argument:
        return CommandResult(message="usage: mv <new name>")
    source = context.current_dir / context.selected.name
    return _mutation(context, RENAME, source, resolve_target(context.current_dir, command.argument))


def _cp(command: ParsedCommand, context: CommandContext) -> CommandResult:
    # cp moves: the source is removed once the copy succeeds.
    if context.selected is None:
        return CommandResult(message="cp: nothing selected")
    if not command.argument:
        return CommandResult(message="usage: cp <destination>")
    source = context.current_dir / context.selected.name
    target = resolve_target(context.current_dir, command.argument)
    operation = MOVE_DIRECTORY if context.selected.is_dir else MOVE_FILE
    return _mutation(context, operation, source, target)


def _rm(command: ParsedCommand, context: CommandContext) -> CommandResult:
    if context.selected is None:
        return CommandResult(message="rm: nothing selected")
    source = context.current_dir / context.selected.name
    operation = DELETE_DIRECTORY if context.selected.is_dir else DELETE_FILE
    return _mutation(context, operation, source)


COMMAND_HANDLERS: dict[str, Callable[[ParsedCommand, CommandContext], CommandResult]] = {
    "mkdir": _mkdir,
    "touch": _touch,
    "mv": _mv,
    "cp": _cp,
    "rm": _rm,
}


def build_command(command: ParsedCommand, context: CommandContext) -> CommandResult:
    """Return the request for ``command``; unknown verbs are a silent no-op."""
    handler = COMMAND_HANDLERS.get(command.verb)
    if handler is None:
        return CommandResult()
    return handler(command, context)

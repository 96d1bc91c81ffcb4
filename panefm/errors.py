"""Exception taxonomy shared by collaborators and the session core."""

from __future__ import annotations

from pathlib import Path


class PanefmError(Exception):
    """Base class for all errors raised by panefm."""


class FileOperationError(PanefmError):
    """A filesystem collaborator failed (not found, permission, exists, ...)."""

    def __init__(self, operation: str, path: Path | str, reason: str) -> None:
        self.operation = operation
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{operation} {self.path.name or self.path}: {reason}")

    @classmethod
    def from_os_error(cls, operation: str, path: Path | str, exc: OSError) -> FileOperationError:
        """Build an error whose reason is the OS error message."""
        reason = exc.strerror or str(exc)
        return cls(operation, path, reason)


class RenderError(PanefmError):
    """Formatting of preview content (Markdown, highlighting) failed."""


class CommandParseError(PanefmError):
    """Command-bar text could not be split into a verb."""

"""Request execution against filesystem collaborators.

``execute_request`` runs one request synchronously and turns the outcome into
exactly one completion event. ``RequestWorker`` runs requests off the UI
thread and posts their completions onto the session's event queue.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from queue import Queue

from ..errors import PanefmError
from ..filesystem import (
    copy_directory,
    copy_file,
    create_directory,
    create_file,
    delete_directory,
    delete_file,
    home_directory,
    list_directory,
    rename_path,
)
from ..preview import load_preview
from .events import Completion, DirectoryLoaded, Event, FileContentLoaded, RequestFailed
from .requests import (
    DELETE_DIRECTORY,
    DELETE_FILE,
    MKDIR,
    MOVE_DIRECTORY,
    MOVE_FILE,
    RENAME,
    TOUCH,
    LoadDirectory,
    LoadFileContent,
    MutatePath,
    Request,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileManagerServices:
    """Narrow collaborator interface consumed by request execution."""

    list_directory: Callable[..., object] = list_directory
    load_preview: Callable[..., str] = load_preview
    create_directory: Callable[[Path], None] = create_directory
    create_file: Callable[[Path], None] = create_file
    rename_path: Callable[[Path, Path], None] = rename_path
    copy_file: Callable[..., object] = copy_file
    copy_directory: Callable[..., object] = copy_directory
    delete_file: Callable[[Path], None] = delete_file
    delete_directory: Callable[[Path], None] = delete_directory
    home_directory: Callable[[], Path] = home_directory


def _load_directory(path: Path, show_hidden: bool, request_id: int, services: FileManagerServices) -> DirectoryLoaded:
    entries = services.list_directory(path, show_hidden)
    return DirectoryLoaded(request_id=request_id, path=path, entries=tuple(entries))


def _apply_mutation(request: MutatePath, services: FileManagerServices) -> None:
    operation = request.operation
    source = request.source
    target = request.target
    if operation == MKDIR:
        services.create_directory(source)
    elif operation == TOUCH:
        services.create_file(source)
    elif operation == RENAME:
        assert target is not None
        services.rename_path(source, target)
    elif operation == MOVE_FILE:
        assert target is not None
        services.copy_file(source, target, True)
    elif operation == MOVE_DIRECTORY:
        assert target is not None
        services.copy_directory(source, target, True)
    elif operation == DELETE_FILE:
        services.delete_file(source)
    elif operation == DELETE_DIRECTORY:
        services.delete_directory(source)
    else:
        raise ValueError(f"unknown mutation: {operation}")


def execute_request(request: Request, services: FileManagerServices) -> Completion:
    """Run ``request`` and return its completion event.

    Collaborator failures (``PanefmError``) become ``RequestFailed``; anything
    else is a programming error and propagates.
    """
    try:
        if isinstance(request, LoadDirectory):
            path = request.path if request.path is not None else services.home_directory()
            return _load_directory(path, request.show_hidden, request.request_id, services)
        if isinstance(request, LoadFileContent):
            content = services.load_preview(request.path, request.width, request.options)
            return FileContentLoaded(request_id=request.request_id, path=request.path, content=content)
        if isinstance(request, MutatePath):
            _apply_mutation(request, services)
            return _load_directory(request.reload_path, request.show_hidden, request.request_id, services)
    except PanefmError as exc:
        logger.warning("request %d failed: %s", request.request_id, exc)
        return RequestFailed(request_id=request.request_id, error=exc)
    raise TypeError(f"unsupported request: {request!r}")


class RequestWorker:
    """Run each submitted request on its own daemon thread.

    Completions are put on ``events``, the queue the main loop consumes, so a
    slow collaborator only delays its own completion.
    """

    def __init__(self, events: Queue[Event], services: FileManagerServices | None = None) -> None:
        self._events = events
        self._services = services if services is not None else FileManagerServices()

    def _run(self, request: Request) -> None:
        self._events.put(execute_request(request, self._services))

    def submit(self, request: Request) -> None:
        logger.debug("dispatching %r", request)
        worker = threading.Thread(
            target=self._run,
            args=(request,),
            name=f"panefm-request-{request.request_id}",
            daemon=True,
        )
        worker.start()

"""Filesystem mutation collaborators.

Thin wrappers over ``os``/``shutil`` that translate ``OSError`` into
``FileOperationError`` so callers see one failure type.
"""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from ..errors import FileOperationError

logger = logging.getLogger(__name__)

DIRECTORY_MODE = 0o755
FILE_MODE = 0o644


def resolve_target(base: Path, value: str) -> Path:
    """Resolve a command-bar path argument against ``base``.

    ``~`` is expanded and absolute paths are kept as-is.
    """
    target = Path(value).expanduser()
    if target.is_absolute():
        return target
    return base / target


def create_directory(path: Path) -> None:
    """Create ``path`` and any missing parents; existing directories are kept."""
    if path.exists():
        return
    try:
        path.mkdir(mode=DIRECTORY_MODE, parents=True)
    except OSError as exc:
        raise FileOperationError.from_os_error("mkdir", path, exc) from exc


def create_file(path: Path) -> None:
    """Create an empty file, leaving existing content untouched."""
    try:
        fd = os.open(path, os.O_APPEND | os.O_CREAT | os.O_WRONLY, FILE_MODE)
    except OSError as exc:
        raise FileOperationError.from_os_error("touch", path, exc) from exc
    os.close(fd)


def rename_path(old: Path, new: Path) -> None:
    try:
        os.rename(old, new)
    except OSError as exc:
        raise FileOperationError.from_os_error("rename", old, exc) from exc


def _destination_for(src: Path, dst: Path) -> Path:
    """Moving onto an existing directory places ``src`` inside it."""
    if dst.is_dir():
        return dst / src.name
    return dst


def copy_file(src: Path, dst: Path, remove_source: bool) -> Path:
    """Copy bytes and permission bits of ``src`` to ``dst``.

    Fails when the destination already exists. Returns the final destination.
    """
    target = _destination_for(src, dst)
    if target.exists():
        raise FileOperationError("copy", target, "destination already exists")
    try:
        shutil.copyfile(src, target)
        shutil.copymode(src, target)
    except OSError as exc:
        raise FileOperationError.from_os_error("copy", src, exc) from exc
    if remove_source:
        delete_file(src)
        logger.debug("moved file %s -> %s", src, target)
    return target


def _ignore_symlinks(directory: str, names: list[str]) -> set[str]:
    return {name for name in names if os.path.islink(os.path.join(directory, name))}


def copy_directory(src: Path, dst: Path, remove_source: bool) -> Path:
    """Recursively copy ``src`` to ``dst``, skipping symlinks.

    Fails when ``src`` is not a directory or the destination exists.
    Returns the final destination.
    """
    if not src.is_dir():
        raise FileOperationError("copy", src, "source is not a directory")
    target = _destination_for(src, dst)
    if target.exists():
        raise FileOperationError("copy", target, "destination already exists")
    try:
        shutil.copytree(src, target, ignore=_ignore_symlinks, copy_function=shutil.copy)
    except (OSError, shutil.Error) as exc:
        raise FileOperationError("copy", src, str(exc)) from exc
    if remove_source:
        delete_directory(src)
        logger.debug("moved directory %s -> %s", src, target)
    return target


def delete_file(path: Path) -> None:
    try:
        os.remove(path)
    except OSError as exc:
        raise FileOperationError.from_os_error("delete", path, exc) from exc


def delete_directory(path: Path) -> None:
    """Remove ``path`` and everything below it."""
    try:
        shutil.rmtree(path)
    except OSError as exc:
        raise FileOperationError.from_os_error("delete", path, exc) from exc


def home_directory() -> Path:
    try:
        return Path.home()
    except (RuntimeError, KeyError) as exc:
        raise FileOperationError("home", "~", str(exc)) from exc

"""Filesystem collaborators: directory listing and path mutations."""

from .listing import list_directory
from .operations import (
    copy_directory,
    copy_file,
    create_directory,
    create_file,
    delete_directory,
    delete_file,
    home_directory,
    rename_path,
    resolve_target,
)
from .types import Entry

__all__ = [
    "Entry",
    "list_directory",
    "copy_directory",
    "copy_file",
    "create_directory",
    "create_file",
    "delete_directory",
    "delete_file",
    "home_directory",
    "rename_path",
    "resolve_target",
]

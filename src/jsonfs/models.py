"""Shared value types: existing-file policy, error kinds, the not-found sentinel."""

from __future__ import annotations

import os
from enum import Enum
from typing import Any, Union

JSONValue = Any
PathLike = Union[str, "os.PathLike[str]"]

BACKUP_SUFFIX = ".bk"


class ExistingFilePolicy(str, Enum):
    """What the writer does with a file already present at the target path."""

    REPLACE = "replace"
    COPY = "copy"
    RENAME = "rename"


class ErrorKind(str, Enum):
    """Stable error kinds reported by the read, write and link operations."""

    READ_FILE_FAILED = "read_file_failed"
    INVALID_JSON = "invalid_json"
    STRINGIFY_FAILED = "stringify_failed"
    MAKE_DIR_FAILED = "make_dir_failed"
    WRITE_FILE_FAILED = "write_file_failed"
    SYMLINK_FAILED = "symlink_failed"
    # Reported only; a failed backup never aborts a write.
    RENAME_COPY_FAILED = "rename_copy_failed"


class NotFound(Enum):
    """Type of the ``NOT_FOUND`` sentinel returned for a missing file.

    A file holding JSON ``null`` reads as ``None``, so absence needs its own
    value.
    """

    NOT_FOUND = "not_found"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND = NotFound.NOT_FOUND


def backup_path(path: PathLike) -> str:
    """Return the backup location for ``path`` (the path plus ``.bk``)."""
    return os.fspath(path) + BACKUP_SUFFIX

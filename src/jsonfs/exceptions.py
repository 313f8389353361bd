"""Exception hierarchy for jsonfs.

Every error carries a stable :class:`~jsonfs.models.ErrorKind` and chains the
underlying ``OSError`` / codec error as ``__cause__``.
"""

from __future__ import annotations

from jsonfs.models import ErrorKind


class JsonFsError(Exception):
    """Base exception for all jsonfs errors."""

    kind: ErrorKind

    def __init__(self, path: str = "", message: str = "") -> None:
        super().__init__(message or f"{self.kind.value}: {path}")
        self.path = path


class ReadFileFailed(JsonFsError):
    """The file exists but its content could not be read."""

    kind = ErrorKind.READ_FILE_FAILED


class InvalidJson(JsonFsError):
    """The file content is not valid JSON."""

    kind = ErrorKind.INVALID_JSON


class StringifyFailed(JsonFsError):
    """The value cannot be serialized to JSON text."""

    kind = ErrorKind.STRINGIFY_FAILED


class MakeDirFailed(JsonFsError):
    """The parent directory of a new file could not be created."""

    kind = ErrorKind.MAKE_DIR_FAILED


class WriteFileFailed(JsonFsError):
    """Writing the serialized text to the target path failed."""

    kind = ErrorKind.WRITE_FILE_FAILED


class SymlinkFailed(JsonFsError):
    """Clearing the destination, creating its directory, or linking failed."""

    kind = ErrorKind.SYMLINK_FAILED


__all__ = [
    "JsonFsError",
    "ReadFileFailed",
    "InvalidJson",
    "StringifyFailed",
    "MakeDirFailed",
    "WriteFileFailed",
    "SymlinkFailed",
]

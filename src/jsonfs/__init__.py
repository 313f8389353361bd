"""jsonfs: hardened JSON file helpers for the local filesystem.

Usage::

    from jsonfs import NOT_FOUND, read_json_file_sync, write_json_file_sync

    write_json_file_sync("/tmp/a/b.json", {"id": "1", "hello": "world"})
    data = read_json_file_sync("/tmp/a/b.json")

Async callers use ``read_json_file`` / ``write_json_file`` /
``make_link_force`` with the same semantics.
"""

from __future__ import annotations

from jsonfs.config import JsonFsSettings, ObservabilityConfig
from jsonfs.exceptions import (
    InvalidJson,
    JsonFsError,
    MakeDirFailed,
    ReadFileFailed,
    StringifyFailed,
    SymlinkFailed,
    WriteFileFailed,
)
from jsonfs.io import (
    make_link_force,
    read_json_file,
    read_json_file_sync,
    write_json_file,
    write_json_file_sync,
)
from jsonfs.models import BACKUP_SUFFIX, NOT_FOUND, ErrorKind, ExistingFilePolicy, NotFound
from jsonfs.observability import IFsObserver, NullObserver, StructlogObserver, setup_logging

__version__ = "0.1.0"

__all__ = [
    # Operations
    "read_json_file",
    "read_json_file_sync",
    "write_json_file",
    "write_json_file_sync",
    "make_link_force",
    # Models
    "BACKUP_SUFFIX",
    "NOT_FOUND",
    "NotFound",
    "ErrorKind",
    "ExistingFilePolicy",
    # Errors
    "JsonFsError",
    "ReadFileFailed",
    "InvalidJson",
    "StringifyFailed",
    "MakeDirFailed",
    "WriteFileFailed",
    "SymlinkFailed",
    # Observability
    "IFsObserver",
    "StructlogObserver",
    "NullObserver",
    "setup_logging",
    # Config
    "JsonFsSettings",
    "ObservabilityConfig",
]

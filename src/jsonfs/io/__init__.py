"""Blocking and non-blocking JSON file helpers plus the force linker."""

from __future__ import annotations

from jsonfs.io.linker import make_link_force
from jsonfs.io.reader import parse_json, read_json_file, read_json_file_sync
from jsonfs.io.writer import stringify_json, write_json_file, write_json_file_sync

__all__ = [
    "read_json_file",
    "read_json_file_sync",
    "write_json_file",
    "write_json_file_sync",
    "make_link_force",
    "parse_json",
    "stringify_json",
]

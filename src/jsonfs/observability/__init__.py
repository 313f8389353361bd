"""Pluggable observers for filesystem operations."""

from __future__ import annotations

from jsonfs.observability.logging_config import setup_logging
from jsonfs.observability.observer import NullObserver, StructlogObserver, default_observer
from jsonfs.observability.protocols import IFsObserver

__all__ = [
    "IFsObserver",
    "StructlogObserver",
    "NullObserver",
    "default_observer",
    "setup_logging",
]

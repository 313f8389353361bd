"""Concrete observers: structlog-backed (default) and a no-op one."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Generator

import structlog

from jsonfs.models import ErrorKind

if TYPE_CHECKING:
    from jsonfs.config import ObservabilityConfig


class StructlogObserver:
    """Emits ``fs.method`` / ``fs.error`` / ``fs.timing`` events through structlog.

    Parameters
    ----------
    logger_name:
        Stdlib logger the events go to. Until the application configures
        logging (for instance with
        :func:`~jsonfs.observability.logging_config.setup_logging`), the
        stdlib defaults apply: DEBUG events are dropped and nothing reaches
        stdout.
    timings:
        When False, ``timer()`` does nothing.
    """

    def __init__(self, logger_name: str = "jsonfs", timings: bool = True) -> None:
        self._log = structlog.wrap_logger(
            logging.getLogger(logger_name),
            wrapper_class=structlog.stdlib.BoundLogger,
        )
        self._timings = timings

    @classmethod
    def from_config(cls, config: ObservabilityConfig) -> StructlogObserver:
        return cls(timings=config.timings)

    def method_called(self, method: str, **args: Any) -> None:
        self._log.debug("fs.method", method=method, **args)

    def error(self, method: str, kind: ErrorKind, cause: BaseException) -> None:
        self._log.error(
            "fs.error",
            method=method,
            kind=kind.value,
            cause=repr(cause),
        )

    @contextmanager
    def timer(self, label: str) -> Generator[None, None, None]:
        if not self._timings:
            yield
            return
        start = time.perf_counter()
        try:
            yield
        finally:
            self._log.debug(
                "fs.timing",
                label=label,
                duration_ms=round((time.perf_counter() - start) * 1000, 3),
            )


class NullObserver:
    """Discards every event."""

    def method_called(self, method: str, **args: Any) -> None:
        pass

    def error(self, method: str, kind: ErrorKind, cause: BaseException) -> None:
        pass

    @contextmanager
    def timer(self, label: str) -> Generator[None, None, None]:
        yield


_default: StructlogObserver | None = None


def default_observer() -> StructlogObserver:
    """Return the shared structlog observer used when callers inject none."""
    global _default
    if _default is None:
        _default = StructlogObserver()
    return _default

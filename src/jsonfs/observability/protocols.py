"""Observer protocol: the side channel every filesystem operation reports to."""

from __future__ import annotations

from typing import Any, ContextManager, Protocol, runtime_checkable

from jsonfs.models import ErrorKind


@runtime_checkable
class IFsObserver(Protocol):
    """Protocol for observers (structlog, null, recording fakes in tests).

    Observers must not raise; nothing they return affects the operation.
    """

    def method_called(self, method: str, **args: Any) -> None:
        """Report entry into ``method`` with its key arguments."""
        ...

    def error(self, method: str, kind: ErrorKind, cause: BaseException) -> None:
        """Report a handled error, whether it is raised or swallowed."""
        ...

    def timer(self, label: str) -> ContextManager[None]:
        """Return a context manager timing one sub-step (read, parse, write...)."""
        ...

"""Drivers that run one filesystem algorithm in either calling convention.

Each operation is written once as a generator that yields :class:`FsCall`
objects and receives their results. :func:`run_sync` performs every call on
the current thread; :func:`run_async` hands each call to
``asyncio.to_thread`` so the coroutine suspends while the event loop keeps
running. A failing call is thrown back into the generator at the ``yield``
so the algorithm itself decides what is fatal.

Usage::

    def _steps(path):
        exists = yield call(os.path.exists, path)
        return exists

    run_sync(_steps("a.json"))
    await run_async(_steps("a.json"))
"""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Generator, NamedTuple, TypeVar

T = TypeVar("T")


class FsCall(NamedTuple):
    """A single deferred filesystem primitive."""

    func: Callable[..., Any]
    args: tuple[Any, ...]
    kwargs: dict[str, Any]


Steps = Generator[FsCall, Any, T]


def call(func: Callable[..., Any], *args: Any, **kwargs: Any) -> FsCall:
    return FsCall(func, args, kwargs)


def run_sync(steps: Steps[T]) -> T:
    """Drive ``steps`` to completion, blocking on each filesystem call."""
    try:
        op = next(steps)
        while True:
            try:
                result = op.func(*op.args, **op.kwargs)
            except Exception as exc:
                op = steps.throw(exc)
            else:
                op = steps.send(result)
    except StopIteration as stop:
        return stop.value
    finally:
        steps.close()


async def run_async(steps: Steps[T]) -> T:
    """Drive ``steps`` to completion, suspending on each filesystem call.

    On cancellation the generator is closed at once, so its pending
    ``with`` blocks exit here rather than at garbage collection. A call
    already handed to a worker thread still runs to completion.
    """
    try:
        op = next(steps)
        while True:
            try:
                result = await asyncio.to_thread(op.func, *op.args, **op.kwargs)
            except Exception as exc:
                op = steps.throw(exc)
            else:
                op = steps.send(result)
    except StopIteration as stop:
        return stop.value
    finally:
        steps.close()

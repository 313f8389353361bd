"""JSON writer: serialize, reconcile any existing target, ensure the directory, write.

The order of side effects is fixed:

1. Serialize. Nothing on disk is touched until this succeeds.
2. Reconcile the existing target (``replace`` / ``copy`` / ``rename`` to
   ``<path>.bk``). A failed backup is reported and ignored.
   When there is no target, create its parent directories instead; that
   failure is fatal.
3. Write the text, UTF-8 encoded.

This is not crash-consistent: the final write truncates the target in place.
"""

from __future__ import annotations

import json
import os
import shutil
from typing import Optional, Union

from jsonfs.exceptions import MakeDirFailed, StringifyFailed, WriteFileFailed
from jsonfs.io.steps import Steps, call, run_async, run_sync
from jsonfs.models import ErrorKind, ExistingFilePolicy, JSONValue, PathLike, backup_path
from jsonfs.observability.observer import default_observer
from jsonfs.observability.protocols import IFsObserver

Indent = Optional[Union[int, str]]
PolicyArg = Union[ExistingFilePolicy, str]


def stringify_json(data: JSONValue, indent: Indent = None) -> str:
    """Serialize ``data`` to JSON text.

    With no indent (``None``, ``0``, ``""`` or a negative count) the output is
    compact (``{"a":1}``). Cycles, unsupported types and non-finite floats
    raise ``TypeError`` / ``ValueError``.
    """
    if not indent or (isinstance(indent, int) and indent < 1):
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    return json.dumps(data, indent=indent, ensure_ascii=False, allow_nan=False)


def _write_text(path: str, text: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)


def _write_steps(
    path: PathLike,
    data: JSONValue,
    existing_file: PolicyArg,
    indent: Indent,
    method: str,
    observer: IFsObserver,
) -> Steps[None]:
    policy = ExistingFilePolicy(existing_file)
    file_path = os.fspath(path)
    observer.method_called(method, path=file_path, existing_file=policy.value)

    label = os.path.basename(file_path)

    try:
        with observer.timer(f"json_stringify {label}"):
            content = stringify_json(data, indent)
    except (TypeError, ValueError, RecursionError) as err:
        observer.error(method, ErrorKind.STRINGIFY_FAILED, err)
        raise StringifyFailed(file_path) from err

    if (yield call(os.path.exists, file_path)):
        try:
            if policy is ExistingFilePolicy.COPY:
                yield call(shutil.copyfile, file_path, backup_path(file_path))
            elif policy is ExistingFilePolicy.RENAME:
                yield call(os.replace, file_path, backup_path(file_path))
        except OSError as err:
            observer.error(method, ErrorKind.RENAME_COPY_FAILED, err)
    else:
        try:
            yield call(os.makedirs, os.path.dirname(file_path) or os.curdir, exist_ok=True)
        except OSError as err:
            observer.error(method, ErrorKind.MAKE_DIR_FAILED, err)
            raise MakeDirFailed(file_path) from err

    try:
        with observer.timer(f"write_file {label}"):
            yield call(_write_text, file_path, content)
    except OSError as err:
        observer.error(method, ErrorKind.WRITE_FILE_FAILED, err)
        raise WriteFileFailed(file_path) from err


def write_json_file_sync(
    path: PathLike,
    data: JSONValue,
    existing_file: PolicyArg = ExistingFilePolicy.REPLACE,
    indent: Indent = None,
    *,
    observer: Optional[IFsObserver] = None,
) -> None:
    """Serialize ``data`` and write it to ``path``, blocking the calling thread.

    Args:
        path: Target file. Missing parent directories are created.
        data: Any JSON-serializable value.
        existing_file: ``"replace"`` overwrites, ``"copy"`` first copies the
            current file to ``<path>.bk``, ``"rename"`` first moves it there.
        indent: Space count or literal indent string; ``None`` writes compact
            JSON.
        observer: Receives method, error and timing events. Defaults to the
            structlog observer.

    Raises:
        StringifyFailed: ``data`` is not serializable; nothing was written.
        MakeDirFailed: the parent directory could not be created.
        WriteFileFailed: the final write failed.
        ValueError: ``existing_file`` is not a known policy.

    Example::

        write_json_file_sync("./file.json", {"a": 1, "b": 2}, "copy", indent=2)
    """
    run_sync(
        _write_steps(
            path, data, existing_file, indent, "write_json_file_sync", observer or default_observer()
        )
    )


async def write_json_file(
    path: PathLike,
    data: JSONValue,
    existing_file: PolicyArg = ExistingFilePolicy.REPLACE,
    indent: Indent = None,
    *,
    observer: Optional[IFsObserver] = None,
) -> None:
    """Non-blocking form of :func:`write_json_file_sync` with identical semantics."""
    await run_async(
        _write_steps(
            path, data, existing_file, indent, "write_json_file", observer or default_observer()
        )
    )

"""JSON reader: existence check, UTF-8 read, strict parse."""

from __future__ import annotations

import json
import os
from typing import NoReturn, Optional, Union

from jsonfs.exceptions import InvalidJson, ReadFileFailed
from jsonfs.io.steps import Steps, call, run_async, run_sync
from jsonfs.models import NOT_FOUND, ErrorKind, JSONValue, NotFound, PathLike
from jsonfs.observability.observer import default_observer
from jsonfs.observability.protocols import IFsObserver


def _read_text(path: str) -> str:
    with open(path, encoding="utf-8") as f:
        return f.read()


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"Non-standard JSON constant: {name}")


def parse_json(text: str) -> JSONValue:
    """Parse ``text`` as standard JSON; ``NaN`` and ``Infinity`` are rejected."""
    return json.loads(text, parse_constant=_reject_constant)


def _read_steps(path: PathLike, method: str, observer: IFsObserver) -> Steps[Union[JSONValue, NotFound]]:
    file_path = os.fspath(path)
    observer.method_called(method, path=file_path)

    if not (yield call(os.path.exists, file_path)):
        return NOT_FOUND

    label = os.path.basename(file_path)

    try:
        with observer.timer(f"read_file {label}"):
            content = yield call(_read_text, file_path)
    except (OSError, UnicodeDecodeError) as err:
        observer.error(method, ErrorKind.READ_FILE_FAILED, err)
        raise ReadFileFailed(file_path) from err

    try:
        with observer.timer(f"json_parse {label}"):
            data = parse_json(content)
    except (ValueError, RecursionError) as err:
        observer.error(method, ErrorKind.INVALID_JSON, err)
        raise InvalidJson(file_path) from err

    return data


def read_json_file_sync(
    path: PathLike,
    *,
    observer: Optional[IFsObserver] = None,
) -> Union[JSONValue, NotFound]:
    """Read and parse a JSON file, blocking the calling thread.

    Returns ``NOT_FOUND`` when nothing exists at ``path``.

    Raises:
        ReadFileFailed: the file exists but could not be read as UTF-8 text.
        InvalidJson: the content is not valid JSON.

    Example::

        data = read_json_file_sync("./file.json")
        if data is NOT_FOUND:
            data = {}
    """
    return run_sync(_read_steps(path, "read_json_file_sync", observer or default_observer()))


async def read_json_file(
    path: PathLike,
    *,
    observer: Optional[IFsObserver] = None,
) -> Union[JSONValue, NotFound]:
    """Non-blocking form of :func:`read_json_file_sync` with identical outcomes."""
    return await run_async(_read_steps(path, "read_json_file", observer or default_observer()))

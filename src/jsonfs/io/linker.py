"""Force linker: replace whatever occupies a path with a symbolic link.

**CAUTION: the destination is removed if it exists.**
"""

from __future__ import annotations

import os
from typing import Optional

from jsonfs.exceptions import SymlinkFailed
from jsonfs.io.steps import Steps, call, run_async
from jsonfs.models import ErrorKind, PathLike
from jsonfs.observability.observer import default_observer
from jsonfs.observability.protocols import IFsObserver


def _remove_entry(path: str) -> None:
    """Remove a file, link, or empty directory. Never recurses."""
    if os.path.isdir(path) and not os.path.islink(path):
        os.rmdir(path)
    else:
        os.unlink(path)


def _link_steps(src: PathLike, dest: PathLike, method: str, observer: IFsObserver) -> Steps[None]:
    src_path = os.fspath(src)
    dest_path = os.fspath(dest)
    observer.method_called(method, src=src_path, dest=dest_path)

    try:
        # lexists: a dangling link still occupies the destination.
        if (yield call(os.path.lexists, dest_path)):
            yield call(_remove_entry, dest_path)
        else:
            dest_dir = os.path.dirname(dest_path)
            if dest_dir and not (yield call(os.path.exists, dest_dir)):
                yield call(os.makedirs, dest_dir, exist_ok=True)

        yield call(os.symlink, src_path, dest_path)
    except OSError as err:
        observer.error(method, ErrorKind.SYMLINK_FAILED, err)
        raise SymlinkFailed(dest_path) from err


async def make_link_force(
    src: PathLike,
    dest: PathLike,
    *,
    observer: Optional[IFsObserver] = None,
) -> None:
    """Create the symbolic link ``dest -> src``, first removing anything at ``dest``.

    A non-empty directory at ``dest`` is not removed; the call fails instead.

    Raises:
        SymlinkFailed: removal, directory creation, or linking failed. The
            ``OSError`` is chained as ``__cause__``.
    """
    await run_async(_link_steps(src, dest, "make_link_force", observer or default_observer()))

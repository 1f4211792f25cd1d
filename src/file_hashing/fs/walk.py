"""Recursive file collection for folder hashing."""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Callable, Iterable
from pathlib import Path

from file_hashing.util.typing import StrPath

logger = logging.getLogger(__name__)

WalkErrorHandler = Callable[[OSError], None]


def ignore_walk_error(error: OSError) -> None:
    """Drop a traversal error; the entry is simply left out."""
    logger.debug("Skipping unreadable entry: %s", error)


def raise_walk_error(error: OSError) -> None:
    """Strict policy: abort collection on the first traversal error."""
    raise error


def collect_files(
    root: StrPath,
    *,
    on_error: WalkErrorHandler = ignore_walk_error,
    sort: bool = True,
) -> list[Path]:
    """Return every regular file under ``root``.

    A root that is itself a regular file is returned as-is. Symlinks, special
    files and directories are excluded and symlinked directories are not
    followed. Errors met while walking go to ``on_error``.
    """
    base = Path(root)
    try:
        mode = os.stat(base).st_mode
    except OSError as exc:
        on_error(exc)
        return []

    if stat.S_ISREG(mode):
        return [base]
    if not stat.S_ISDIR(mode):
        return []

    files: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(base, onerror=on_error):
        if sort:
            dirnames.sort()
            filenames.sort()
        parent = Path(dirpath)
        for name in filenames:
            candidate = parent / name
            try:
                entry_mode = os.lstat(candidate).st_mode
            except OSError as exc:
                on_error(exc)
                continue
            if stat.S_ISREG(entry_mode):
                files.append(candidate)
    return files


def collect_files_from(
    roots: Iterable[StrPath],
    *,
    on_error: WalkErrorHandler = ignore_walk_error,
    sort: bool = True,
) -> list[Path]:
    """Concatenate :func:`collect_files` over ``roots`` in the given order."""
    files: list[Path] = []
    for root in roots:
        files.extend(collect_files(root, on_error=on_error, sort=sort))
    return files


__all__ = [
    "WalkErrorHandler",
    "collect_files",
    "collect_files_from",
    "ignore_walk_error",
    "raise_walk_error",
]

"""Hashing of a single file and of a list of files."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path

from file_hashing.encoding import to_lowerhex
from file_hashing.progress import Failed, ProgressCallback, Yielded, log_progress
from file_hashing.util.hashing import LockedHash
from file_hashing.util.typing import IncrementalHash, StrPath

PAGE_SIZE = 4096

logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    """Raised when there is nothing to hash."""


def hash_file(path: StrPath, hash_state: IncrementalHash, *, chunk_size: int = PAGE_SIZE) -> str:
    """Stream the file at ``path`` into ``hash_state`` and return its hex digest.

    The accumulator is not reset: hashing two files with the same object
    yields the digest of both contents in sequence. ``OSError`` raised while
    opening or reading propagates unchanged; chunks read before a failure
    stay folded into the accumulator.
    """
    if chunk_size < 1:
        raise ValueError("chunk_size must be >= 1")

    with Path(path).open("rb") as handle:
        for chunk in iter(lambda: handle.read(chunk_size), b""):
            hash_state.update(chunk)
    return to_lowerhex(hash_state)


def _fold_file(path: Path, shared: LockedHash, chunk_size: int) -> None:
    file_hash = hash_file(path, shared, chunk_size=chunk_size)
    shared.update(file_hash.encode("ascii"))


def hash_files(
    paths: Iterable[StrPath],
    hash_state: IncrementalHash,
    worker_count: int,
    on_progress: ProgressCallback = log_progress,
    *,
    chunk_size: int = PAGE_SIZE,
) -> str:
    """Return one cumulative digest over ``paths`` hashed on a thread pool.

    Each file is streamed into the shared ``hash_state`` and its peeked hex
    digest is folded back in. Jobs are awaited in submission order and the
    Nth awaited job, failed or not, brings the done-count to N; the order in
    which chunks of different files reach the accumulator depends on
    scheduling when ``worker_count > 1``. Files raising ``OSError`` are
    reported as ``Failed`` and skipped.

    Raises:
        InvalidInputError: ``paths`` is empty. The accumulator is untouched.
    """
    targets = [Path(path) for path in paths]
    if not targets:
        raise InvalidInputError("No files to hash.")

    shared = LockedHash(hash_state)
    logger.debug("Hashing %d files with %s workers", len(targets), worker_count)

    with ThreadPoolExecutor(max_workers=worker_count, thread_name_prefix="file-hashing") as pool:
        jobs: list[tuple[Path, Future[None]]] = [
            (path, pool.submit(_fold_file, path, shared, chunk_size)) for path in targets
        ]

        done_files = 0
        for path, job in jobs:
            done_files += 1
            try:
                job.result()
            except OSError as exc:
                on_progress(Failed(error=exc, path=path))
                continue
            on_progress(Yielded(done_files))

    return to_lowerhex(hash_state)


__all__ = ["InvalidInputError", "PAGE_SIZE", "hash_file", "hash_files"]

"""Hashing of whole directory trees."""

from __future__ import annotations

from collections.abc import Iterable

from file_hashing.file import PAGE_SIZE, hash_files
from file_hashing.fs.walk import WalkErrorHandler, collect_files, collect_files_from, ignore_walk_error
from file_hashing.progress import ProgressCallback, log_progress
from file_hashing.util.typing import IncrementalHash, StrPath


def hash_folder(
    directory: StrPath,
    hash_state: IncrementalHash,
    worker_count: int,
    on_progress: ProgressCallback = log_progress,
    *,
    on_walk_error: WalkErrorHandler = ignore_walk_error,
    sort: bool = True,
    chunk_size: int = PAGE_SIZE,
) -> str:
    """Hash every regular file found recursively under ``directory``.

    Entries are visited in name order unless ``sort`` is false. Raises
    ``InvalidInputError`` when the folder holds no files.
    """
    return hash_files(
        collect_files(directory, on_error=on_walk_error, sort=sort),
        hash_state,
        worker_count,
        on_progress,
        chunk_size=chunk_size,
    )


def hash_folders(
    directories: Iterable[StrPath],
    hash_state: IncrementalHash,
    worker_count: int,
    on_progress: ProgressCallback = log_progress,
    *,
    on_walk_error: WalkErrorHandler = ignore_walk_error,
    sort: bool = True,
    chunk_size: int = PAGE_SIZE,
) -> str:
    """Hash the files of several folders as one batch, in folder order."""
    return hash_files(
        collect_files_from(directories, on_error=on_walk_error, sort=sort),
        hash_state,
        worker_count,
        on_progress,
        chunk_size=chunk_size,
    )


__all__ = ["hash_folder", "hash_folders"]

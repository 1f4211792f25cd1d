"""Filesystem helpers: directory collection and random fixtures."""

from .extra import generate_random_file, generate_random_folder_with_files
from .walk import (
    WalkErrorHandler,
    collect_files,
    collect_files_from,
    ignore_walk_error,
    raise_walk_error,
)

__all__ = [
    "WalkErrorHandler",
    "collect_files",
    "collect_files_from",
    "generate_random_file",
    "generate_random_folder_with_files",
    "ignore_walk_error",
    "raise_walk_error",
]

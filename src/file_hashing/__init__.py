"""Cumulative digests over files and folders.

Example::

    import hashlib
    from file_hashing import hash_folder

    digest = hash_folder("/home/user/Pictures", hashlib.blake2s(), 12)
    assert len(digest) == 64
"""

from file_hashing.encoding import to_lowerhex
from file_hashing.file import PAGE_SIZE, InvalidInputError, hash_file, hash_files
from file_hashing.folder import hash_folder, hash_folders
from file_hashing.fs.walk import collect_files, collect_files_from, ignore_walk_error, raise_walk_error
from file_hashing.progress import Failed, ProgressCallback, ProgressInfo, ProgressLog, Yielded, log_progress
from file_hashing.runner import hash_targets, setup_logging
from file_hashing.util.hashing import LockedHash, new_hash
from file_hashing.util.logging import configure_logging
from file_hashing.util.typing import IncrementalHash

__all__ = [
    "Failed",
    "IncrementalHash",
    "InvalidInputError",
    "LockedHash",
    "PAGE_SIZE",
    "ProgressCallback",
    "ProgressInfo",
    "ProgressLog",
    "Yielded",
    "collect_files",
    "collect_files_from",
    "configure_logging",
    "hash_file",
    "hash_files",
    "hash_folder",
    "hash_folders",
    "hash_targets",
    "ignore_walk_error",
    "log_progress",
    "new_hash",
    "raise_walk_error",
    "setup_logging",
    "to_lowerhex",
]

"""Config-driven entry point combining collection and aggregation."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from file_hashing.config import FileHashingConfig, load_config
from file_hashing.file import hash_files
from file_hashing.fs.walk import collect_files_from
from file_hashing.progress import ProgressCallback, log_progress
from file_hashing.util.hashing import new_hash
from file_hashing.util.logging import configure_logging
from file_hashing.util.typing import StrPath

logger = logging.getLogger(__name__)


def setup_logging(config: FileHashingConfig | None = None) -> logging.Logger:
    """Attach handlers using the ``logging`` section of ``config``."""

    cfg = config or load_config()
    return configure_logging(level=cfg.logging.level, log_path=cfg.logging.log_path)


def hash_targets(
    targets: Iterable[StrPath],
    *,
    config: FileHashingConfig | None = None,
    on_progress: ProgressCallback | None = None,
) -> str:
    """Return the cumulative digest of ``targets`` (files and folders mixed).

    Algorithm, worker count, chunk size and traversal order come from
    ``config``; the packaged defaults are loaded when it is omitted.
    """

    cfg = config or load_config()
    hashing = cfg.hashing
    paths = collect_files_from(targets, sort=hashing.sort_entries)
    logger.info("Hashing %d files algorithm=%s workers=%s", len(paths), hashing.algorithm, hashing.workers)

    digest = hash_files(
        paths,
        new_hash(hashing.algorithm),
        hashing.workers,
        on_progress or log_progress,
        chunk_size=hashing.chunk_size,
    )
    logger.info("Cumulative digest %s", digest)
    return digest


__all__ = ["hash_targets", "setup_logging"]

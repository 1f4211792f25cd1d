"""Progress events emitted while hashing many files.

The aggregator reports one event per finished file. ``Yielded`` carries the
running count of awaited files, failed ones included; ``Failed`` carries the
I/O error and the path that raised it. A failure never aborts the batch.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Yielded:
    """How many files have been processed so far."""

    done_files: int


@dataclass(frozen=True, slots=True)
class Failed:
    """A single file could not be hashed."""

    error: OSError
    path: Path


ProgressInfo = Union[Yielded, Failed]
ProgressCallback = Callable[[ProgressInfo], None]


def log_progress(info: ProgressInfo) -> None:
    """Default progress callback routing events to the library logger."""
    if isinstance(info, Failed):
        logger.warning("Failed to hash %s: %s", info.path, info.error)
    else:
        logger.debug("done files %s", info.done_files)


@dataclass(slots=True)
class ProgressLog:
    """Callable recorder keeping every event in arrival order."""

    events: list[ProgressInfo] = field(default_factory=list)

    def __call__(self, info: ProgressInfo) -> None:
        self.events.append(info)

    @property
    def done_counts(self) -> list[int]:
        return [event.done_files for event in self.events if isinstance(event, Yielded)]

    @property
    def failures(self) -> list[Failed]:
        return [event for event in self.events if isinstance(event, Failed)]


__all__ = [
    "Failed",
    "ProgressCallback",
    "ProgressInfo",
    "ProgressLog",
    "Yielded",
    "log_progress",
]

"""Shared typing helpers for file_hashing modules."""

from __future__ import annotations

import os
from typing import Protocol, Union, runtime_checkable

StrPath = Union[str, "os.PathLike[str]"]


@runtime_checkable
class IncrementalHash(Protocol):
    """Hash accumulators shaped like ``hashlib`` objects."""

    def update(self, data: bytes, /) -> None:
        """Feed ``data`` into the running digest."""
        ...

    def copy(self) -> "IncrementalHash":
        """Return an independent snapshot of the current state."""
        ...

    def digest(self) -> bytes:
        """Return the digest of the bytes seen so far."""
        ...


__all__ = ["IncrementalHash", "StrPath"]

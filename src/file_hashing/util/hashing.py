"""Hash primitive helpers: construction and thread-safe sharing."""

from __future__ import annotations

import hashlib
import threading

from file_hashing.util.typing import IncrementalHash

DEFAULT_ALGORITHM = "blake2s"


def new_hash(algorithm: str = DEFAULT_ALGORITHM) -> IncrementalHash:
    """Return a fresh ``hashlib`` accumulator for ``algorithm``."""
    name = algorithm.lower()
    if name.startswith("shake_"):
        raise ValueError(f"Variable-length algorithm {algorithm!r} has no fixed digest size.")
    try:
        return hashlib.new(name)
    except ValueError as exc:
        raise ValueError(f"Unsupported hash algorithm {algorithm!r}.") from exc


class LockedHash:
    """Serialise access to a shared accumulator across worker threads.

    Updates are applied to the wrapped object in place, so the caller's hash
    carries the result once the workers are done.
    """

    def __init__(self, inner: IncrementalHash) -> None:
        self._inner = inner
        self._lock = threading.Lock()

    @property
    def inner(self) -> IncrementalHash:
        return self._inner

    def update(self, data: bytes, /) -> None:
        with self._lock:
            self._inner.update(data)

    def copy(self) -> IncrementalHash:
        with self._lock:
            return self._inner.copy()

    def digest(self) -> bytes:
        return self.copy().digest()


__all__ = ["DEFAULT_ALGORITHM", "LockedHash", "new_hash"]

"""Digest to text conversion."""

from __future__ import annotations

from file_hashing.util.typing import IncrementalHash


def to_lowerhex(hash_state: IncrementalHash) -> str:
    """Return the lowercase hex digest of ``hash_state`` without consuming it."""
    return hash_state.copy().digest().hex()


__all__ = ["to_lowerhex"]

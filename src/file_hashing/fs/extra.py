"""Random file fixtures for benchmarks and tests."""

from __future__ import annotations

import os
from pathlib import Path
from tempfile import TemporaryDirectory

_WRITE_BLOCK = 1024


def _write_random(dest: Path, size: int) -> Path:
    remaining = size
    with dest.open("wb") as handle:
        while remaining > 0:
            to_write = min(remaining, _WRITE_BLOCK)
            handle.write(os.urandom(to_write))
            remaining -= to_write
    return dest


def generate_random_file(size: int, *, directory: Path | None = None) -> tuple[TemporaryDirectory[str], Path]:
    """Create ``random_file.txt`` holding ``size`` random bytes in a fresh temp dir.

    The returned ``TemporaryDirectory`` owns the file; keep it referenced
    while the path is in use.
    """
    temp = TemporaryDirectory(dir=directory)
    path = _write_random(Path(temp.name) / "random_file.txt", size)
    return temp, path


def generate_random_folder_with_files(
    count: int, size: int, *, directory: Path | None = None
) -> tuple[TemporaryDirectory[str], list[Path]]:
    """Create ``count`` files of ``size`` random bytes each in a fresh temp dir."""
    temp = TemporaryDirectory(dir=directory)
    root = Path(temp.name)
    paths = [_write_random(root / f"random_file_{idx}.txt", size) for idx in range(count)]
    return temp, paths


__all__ = ["generate_random_file", "generate_random_folder_with_files"]

from __future__ import annotations

import hashlib
from collections.abc import Iterable, Mapping
from pathlib import Path


def write_files(root: Path, files: Mapping[str, bytes]) -> list[Path]:
    """Write ``files`` (relative name -> content) under ``root`` and return their paths."""

    written: list[Path] = []
    for name, content in files.items():
        dest = root / name
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_bytes(content)
        written.append(dest)
    return written


def sequential_fold(paths: Iterable[Path], algorithm: str = "blake2s") -> str:
    """Cumulative digest computed one file after another, as a single worker does."""

    digest = hashlib.new(algorithm)
    for path in paths:
        digest.update(Path(path).read_bytes())
        digest.update(digest.hexdigest().encode("ascii"))
    return digest.hexdigest()

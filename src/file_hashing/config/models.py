"""Pydantic models describing file_hashing configuration."""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class HashingConfig(BaseModel):
    """Hash primitive and worker pool settings."""

    model_config = ConfigDict(extra="allow")

    algorithm: str = "blake2s"
    chunk_size: int = Field(default=4096, ge=1)
    workers: int = Field(default=4, ge=1)
    sort_entries: bool = True

    @field_validator("algorithm")
    @classmethod
    def _validate_algorithm(cls, value: str) -> str:
        """Accept fixed-size ``hashlib`` algorithms only."""

        name = value.strip().lower()
        if name not in hashlib.algorithms_available:
            raise ValueError(f"Unknown hash algorithm {value!r}.")
        if name.startswith("shake_"):
            raise ValueError(f"Variable-length algorithm {value!r} is not supported.")
        return name


class LoggingConfig(BaseModel):
    """Logging handler settings."""

    model_config = ConfigDict(extra="allow")

    level: str = "INFO"
    log_path: Optional[Path] = None

    @field_validator("level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level {value!r}.")
        return level


class FileHashingConfig(BaseModel):
    """Root configuration object."""

    model_config = ConfigDict(extra="allow")

    hashing: HashingConfig = Field(default_factory=HashingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


__all__ = ["FileHashingConfig", "HashingConfig", "LoggingConfig"]

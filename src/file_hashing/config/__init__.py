"""Configuration models and loaders for file_hashing."""

from .loader import ConfigError, DEFAULT_CONFIG_PATH, dump_example_config, load_config
from .models import FileHashingConfig, HashingConfig, LoggingConfig

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "FileHashingConfig",
    "HashingConfig",
    "LoggingConfig",
    "dump_example_config",
    "load_config",
]

from __future__ import annotations

import json
import os
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import patch

import yaml
from pydantic import ValidationError

from file_hashing.config import ConfigError, dump_example_config, load_config

CLEAN_ENV = {"FILE_HASHING_ALGORITHM": "", "FILE_HASHING_WORKERS": ""}


class ConfigLoaderTests(unittest.TestCase):
    def test_load_config_defaults(self) -> None:
        with patch.dict(os.environ, CLEAN_ENV, clear=False):
            config = load_config()

        self.assertEqual(config.hashing.algorithm, "blake2s")
        self.assertEqual(config.hashing.chunk_size, 4096)
        self.assertEqual(config.hashing.workers, 4)
        self.assertTrue(config.hashing.sort_entries)
        self.assertEqual(config.logging.level, "INFO")
        self.assertIsNone(config.logging.log_path)

    def test_load_config_applies_overrides(self) -> None:
        overrides = {
            "hashing.workers": 12,
            "hashing": {"algorithm": "SHA256"},
            "logging": {"level": "debug"},
        }

        with patch.dict(os.environ, CLEAN_ENV, clear=False):
            config = load_config(overrides=overrides)

        self.assertEqual(config.hashing.workers, 12)
        self.assertEqual(config.hashing.algorithm, "sha256")
        self.assertEqual(config.logging.level, "DEBUG")

    def test_env_overrides(self) -> None:
        env = {"FILE_HASHING_ALGORITHM": "sha512", "FILE_HASHING_WORKERS": "8"}
        with patch.dict(os.environ, env, clear=False):
            config = load_config()

        self.assertEqual(config.hashing.algorithm, "sha512")
        self.assertEqual(config.hashing.workers, 8)

    def test_explicit_overrides_beat_env(self) -> None:
        with patch.dict(os.environ, {"FILE_HASHING_WORKERS": "8"}, clear=False):
            config = load_config(overrides={"hashing.workers": 2})

        self.assertEqual(config.hashing.workers, 2)

    def test_load_config_from_file(self) -> None:
        with TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "hashing.yaml"
            path.write_text("hashing:\n  chunk_size: 65536\n  sort_entries: false\n", encoding="utf-8")
            json_path = Path(tmpdir) / "hashing.json"
            json_path.write_text(json.dumps({"hashing": {"workers": 3}}), encoding="utf-8")

            with patch.dict(os.environ, CLEAN_ENV, clear=False):
                config = load_config(path)
                from_json = load_config(json_path)

        self.assertEqual(config.hashing.chunk_size, 65536)
        self.assertFalse(config.hashing.sort_entries)
        self.assertEqual(config.hashing.algorithm, "blake2s")
        self.assertEqual(from_json.hashing.workers, 3)

    def test_invalid_values_rejected(self) -> None:
        with patch.dict(os.environ, CLEAN_ENV, clear=False):
            for overrides in (
                {"hashing.algorithm": "not-a-hash"},
                {"hashing.algorithm": "shake_256"},
                {"hashing.workers": 0},
                {"hashing.chunk_size": 0},
                {"logging.level": "LOUD"},
            ):
                with self.subTest(overrides=overrides):
                    with self.assertRaises(ValidationError):
                        load_config(overrides=overrides)

    def test_bad_config_files_raise_config_error(self) -> None:
        with TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            broken = root / "broken.yaml"
            broken.write_text("hashing: [unclosed\n", encoding="utf-8")
            listing = root / "list.yaml"
            listing.write_text("- a\n- b\n", encoding="utf-8")
            unsupported = root / "config.ini"
            unsupported.write_text("[hashing]\n", encoding="utf-8")

            for path in (root / "missing.yaml", broken, listing, unsupported):
                with self.subTest(path=path.name):
                    with self.assertRaises(ConfigError):
                        load_config(path)

    def test_dump_example_config_yaml(self) -> None:
        with TemporaryDirectory() as tmpdir:
            dest = Path(tmpdir) / "example.yaml"
            dump_example_config(dest)
            data = yaml.safe_load(dest.read_text(encoding="utf-8"))

        self.assertIn("hashing", data)
        self.assertIn("logging", data)

    def test_dump_example_config_json(self) -> None:
        with TemporaryDirectory() as tmpdir:
            dest = Path(tmpdir) / "nested" / "example.json"
            dump_example_config(dest)
            data = json.loads(dest.read_text(encoding="utf-8"))

        self.assertEqual(data["hashing"]["algorithm"], "blake2s")

    def test_dump_example_config_rejects_toml(self) -> None:
        with TemporaryDirectory() as tmpdir:
            dest = Path(tmpdir) / "config.toml"
            with self.assertRaises(ConfigError):
                dump_example_config(dest)


if __name__ == "__main__":
    unittest.main()

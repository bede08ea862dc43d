"""Tests for env-driven paths and the logging file handler."""

import importlib
import logging
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import chem_inventory.config as config
from chem_inventory.utils.logger import file_handler, resolve_level


class TestConfigPaths(unittest.TestCase):
    def tearDown(self):
        importlib.reload(config)

    def test_env_overrides_output_and_data_dirs(self):
        with tempfile.TemporaryDirectory() as tmp:
            env = {
                "INVENTORY_OUTPUT_DIR": str(Path(tmp) / "out"),
                "INVENTORY_DATA_DIR": str(Path(tmp) / "data"),
                "INVENTORY_LOG_DIR": "",
                "INVENTORY_STORE_PATH": "",
            }
            with mock.patch.dict(os.environ, env):
                importlib.reload(config)

            self.assertEqual(config.LOG_FILE, Path(tmp) / "out" / "logs" / "app.jsonl")
            self.assertEqual(config.STORE_PATH, Path(tmp) / "data" / "device_store.json")
            # Importing config never touches the filesystem
            self.assertEqual(list(Path(tmp).iterdir()), [])

    def test_log_dir_override_wins(self):
        with tempfile.TemporaryDirectory() as tmp:
            env = {"INVENTORY_OUTPUT_DIR": str(Path(tmp) / "out"), "INVENTORY_LOG_DIR": str(Path(tmp) / "logs")}
            with mock.patch.dict(os.environ, env):
                importlib.reload(config)
            self.assertEqual(config.LOG_FILE, Path(tmp) / "logs" / "app.jsonl")


class TestLogFileHandler(unittest.TestCase):
    def test_creates_missing_directory(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "nested" / "logs" / "app.jsonl"
            handler = file_handler(path, logging.INFO)
            try:
                self.assertIsNotNone(handler)
                self.assertEqual(handler.level, logging.INFO)
                self.assertTrue(path.parent.is_dir())
            finally:
                handler.close()

    def test_unwritable_location_gives_none(self):
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "not_a_dir"
            blocker.write_text("", encoding="utf-8")
            self.assertIsNone(file_handler(blocker / "logs" / "app.jsonl", logging.INFO))

    def test_resolve_level(self):
        self.assertEqual(resolve_level("warning"), logging.WARNING)
        self.assertEqual(resolve_level("15"), 15)
        self.assertEqual(resolve_level("bogus"), logging.INFO)
        self.assertEqual(resolve_level("ERROR", verbose=True), logging.DEBUG)


if __name__ == "__main__":
    unittest.main()

"""Unit tests for the essential-db CLI and logging setup."""
from __future__ import annotations

import io
import logging
import sys
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from typing import List, Tuple
from unittest.mock import patch

from essential_core.cli.main import main
from essential_core.common import EssentialCommon
from essential_core.config.store import MappingConfigStore
from essential_core.support.logging_config import STANDARD_FORMAT, build_logging_config


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.data_dir = self._tmp.name
        self.config = {}
        self._root_handlers = list(logging.getLogger().handlers)
        self._root_level = logging.getLogger().level

    def tearDown(self) -> None:
        root = logging.getLogger()
        root.handlers = self._root_handlers
        root.setLevel(self._root_level)
        EssentialCommon._instance = None
        self._tmp.cleanup()

    def _run(self, args: List[str]) -> Tuple[int, str, str]:
        stdout, stderr = io.StringIO(), io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            code = main(
                ["--data-dir", self.data_dir, "--log-level", "ERROR", *args],
                config_factory=lambda: MappingConfigStore(self.config),
            )
        return code, stdout.getvalue(), stderr.getvalue()

    def test_check_reports_ready_sqlite(self) -> None:
        code, out, _ = self._run(["check"])
        self.assertEqual(code, 0)
        self.assertIn("backend=sqlite", out)
        self.assertIn("state=ready", out)

    def test_exec_then_value(self) -> None:
        self.assertEqual(self._run(["exec", "CREATE TABLE t (k TEXT, v INTEGER)"])[0], 0)
        self.assertEqual(self._run(["exec", "INSERT INTO t VALUES ('x', 42)"])[0], 0)

        code, out, _ = self._run(["value", "SELECT v FROM t WHERE k='x'", "--type", "int64"])
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "42")

        code, out, _ = self._run(["value", "SELECT v FROM t WHERE k='missing'"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "\n")

    def test_failed_statement_exits_non_zero(self) -> None:
        code, _, err = self._run(["exec", "CREAT TABLE nope (v INTEGER)"])
        self.assertEqual(code, 1)
        self.assertIn("error:", err)

    def test_unknown_backend_exits_with_configuration_error(self) -> None:
        self.config = {"database": {"type": "oracle"}}
        code, _, err = self._run(["check"])
        self.assertEqual(code, 2)
        self.assertIn("Unsupported database type", err)

    def test_check_reports_failed_backend(self) -> None:
        self.config = {"database": {"type": "postgresql"}}
        with patch.dict(sys.modules, {"psycopg2": None}):
            code, out, err = self._run(["check"])
        self.assertEqual(code, 1)
        self.assertIn("state=failed", out)
        self.assertIn("psycopg2", err)


class LoggingConfigTests(unittest.TestCase):
    def test_standard_formatter_by_default(self) -> None:
        config = build_logging_config(level="debug")
        self.assertEqual(config["root"]["level"], "DEBUG")
        self.assertEqual(config["formatters"]["standard"]["format"], STANDARD_FORMAT)

    def test_json_formatter_uses_python_json_logger(self) -> None:
        config = build_logging_config(level="INFO", json_format=True)
        self.assertEqual(config["formatters"]["standard"]["()"], "pythonjsonlogger.json.JsonFormatter")

    def test_level_falls_back_to_env(self) -> None:
        with patch.dict("os.environ", {"LOG_LEVEL": "warning"}):
            self.assertEqual(build_logging_config()["root"]["level"], "WARNING")


if __name__ == "__main__":
    unittest.main()

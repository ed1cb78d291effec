"""Embedded SQLite connector."""
from __future__ import annotations

import logging
import sqlite3

from essential_core.config.config import SQLiteSettings
from essential_core.database.base import BaseConnector

logger = logging.getLogger(__name__)


class SQLiteConnector(BaseConnector):
    """SQLite backend stored as a file under the host's data directory.

    The parent directory and an empty database file are created when missing.
    The connection runs in autocommit mode with foreign key enforcement on, and
    may be used from any thread (access is serialised by the connector lock).
    """

    backend_name = "sqlite"

    def __init__(self, settings: SQLiteSettings, fail_fast: bool = False) -> None:
        self.settings = settings
        super().__init__(fail_fast=fail_fast)

    @property
    def locator(self) -> str:
        return self.settings.locator

    def _ensure_file(self) -> None:
        db_file = self.settings.path
        if db_file.exists():
            return
        try:
            db_file.parent.mkdir(parents=True, exist_ok=True)
            db_file.touch(exist_ok=True)
            logger.info("SQLite database file created: %s", db_file)
        except OSError as exc:
            # connect() surfaces the failure if the file is unusable
            logger.warning("Failed to create SQLite database file %s: %s", db_file, exc)

    def _open(self) -> sqlite3.Connection:
        self._error_types = (sqlite3.Error, sqlite3.Warning)
        self._ensure_file()
        conn = sqlite3.connect(
            str(self.settings.path),
            check_same_thread=False,
            isolation_level=None,
        )
        try:
            conn.execute("PRAGMA foreign_keys = ON;")
        except sqlite3.Error:
            conn.close()
            raise
        return conn

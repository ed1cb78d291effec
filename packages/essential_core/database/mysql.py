"""MySQL / MariaDB connector backed by mysql-connector-python."""
from __future__ import annotations

import logging
from typing import Any

from essential_core.config.config import MySQLSettings
from essential_core.database.base import BaseConnector

logger = logging.getLogger(__name__)


class MySQLConnector(BaseConnector):
    """Network connector for MySQL.

    The driver import is deferred until the connection is opened so the
    package imports cleanly where only SQLite is used. A missing driver is
    treated like any other connection failure.
    """

    backend_name = "mysql"

    def __init__(self, settings: MySQLSettings, fail_fast: bool = False) -> None:
        self.settings = settings
        super().__init__(fail_fast=fail_fast)

    @property
    def locator(self) -> str:
        return self.settings.locator

    def _open(self) -> Any:
        try:
            import mysql.connector
        except ImportError as exc:
            raise RuntimeError(
                "mysql-connector-python is required for database.type=mysql. Install 'mysql-connector-python'."
            ) from exc

        self._error_types = (mysql.connector.Error,)
        logger.debug("Opening MySQL connection to %s as %s", self.locator, self.settings.user)
        return mysql.connector.connect(
            host=self.settings.host,
            port=self.settings.port,
            database=self.settings.name,
            user=self.settings.user,
            password=self.settings.password,
            ssl_disabled=True,
            charset="utf8",
            autocommit=True,
            consume_results=True,
        )

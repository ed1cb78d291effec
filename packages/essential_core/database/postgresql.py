"""PostgreSQL connector backed by psycopg2."""
from __future__ import annotations

import logging
from typing import Any

from essential_core.config.config import PostgreSQLSettings
from essential_core.database.base import BaseConnector

logger = logging.getLogger(__name__)


class PostgreSQLConnector(BaseConnector):
    """Network connector for PostgreSQL.

    The locator is a libpq URI without credentials; user and password are
    passed separately so they never end up in logs. Autocommit is enabled so
    a failed statement does not leave the session in an aborted transaction.
    """

    backend_name = "postgresql"

    def __init__(self, settings: PostgreSQLSettings, fail_fast: bool = False) -> None:
        self.settings = settings
        super().__init__(fail_fast=fail_fast)

    @property
    def locator(self) -> str:
        return self.settings.locator

    def _open(self) -> Any:
        try:
            import psycopg2
        except ImportError as exc:
            raise RuntimeError(
                "psycopg2 is required for database.type=postgresql. Install 'psycopg2-binary'."
            ) from exc

        self._error_types = (psycopg2.Error,)
        logger.debug("Opening PostgreSQL connection to %s as %s", self.locator, self.settings.user)
        conn = psycopg2.connect(self.locator, user=self.settings.user, password=self.settings.password)
        conn.autocommit = True
        return conn

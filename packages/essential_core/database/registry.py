"""Backend selection: maps a configured backend kind to its connector.

Usage:
  from essential_core.database.registry import BackendKind, create_connector
  kind = BackendKind.parse(store.get_string("database.type", "sqlite"))
  connector = create_connector(kind, store, data_dir)
"""
from __future__ import annotations

import enum
import logging
from pathlib import Path
from typing import Callable, Dict, Union

from essential_core.config.config import MySQLSettings, PostgreSQLSettings, SQLiteSettings
from essential_core.config.store import ConfigStore
from essential_core.database.base import BaseConnector
from essential_core.database.mysql import MySQLConnector
from essential_core.database.postgresql import PostgreSQLConnector
from essential_core.database.sqlite import SQLiteConnector
from essential_core.errors import ConfigurationError

logger = logging.getLogger(__name__)


class BackendKind(enum.Enum):
    SQLITE = "sqlite"
    MYSQL = "mysql"
    POSTGRESQL = "postgresql"

    @classmethod
    def parse(cls, value: str) -> "BackendKind":
        """Match a configured value case-insensitively.

        :raises ConfigurationError: if the value names no supported backend
        """
        normalized = (value or "").strip().lower()
        try:
            return cls(normalized)
        except ValueError:
            supported = ", ".join(kind.value for kind in cls)
            raise ConfigurationError(
                f"Unsupported database type: {value!r} (expected one of: {supported})"
            ) from None


ConnectorBuilder = Callable[[ConfigStore, Path, bool], BaseConnector]


def _build_sqlite(store: ConfigStore, data_dir: Path, fail_fast: bool) -> BaseConnector:
    return SQLiteConnector(SQLiteSettings.from_store(store, data_dir), fail_fast=fail_fast)


def _build_mysql(store: ConfigStore, data_dir: Path, fail_fast: bool) -> BaseConnector:
    return MySQLConnector(MySQLSettings.from_store(store), fail_fast=fail_fast)


def _build_postgresql(store: ConfigStore, data_dir: Path, fail_fast: bool) -> BaseConnector:
    return PostgreSQLConnector(PostgreSQLSettings.from_store(store), fail_fast=fail_fast)


CONNECTOR_BUILDERS: Dict[BackendKind, ConnectorBuilder] = {
    BackendKind.SQLITE: _build_sqlite,
    BackendKind.MYSQL: _build_mysql,
    BackendKind.POSTGRESQL: _build_postgresql,
}


def create_connector(
    kind: BackendKind,
    store: ConfigStore,
    data_dir: Union[str, Path],
    fail_fast: bool = False,
) -> BaseConnector:
    """Build the connector registered for ``kind``.

    Args:
        kind: Backend to connect to.
        store: Configuration store supplying connection parameters.
        data_dir: Host data directory; the SQLite file lives under it.
        fail_fast: Raise on connection failure instead of returning a failed connector.

    Returns:
        A connector in the READY or FAILED state.
    """
    builder = CONNECTOR_BUILDERS[kind]
    logger.debug("Creating %s connector", kind.value)
    return builder(store, Path(data_dir), fail_fast)

"""Connector base class shared by the three backends.

A connector owns exactly one live DB-API connection, opened eagerly at
construction. Subclasses only know how to open that connection; statement
execution and scalar coercion live here so every backend behaves the same.
"""
from __future__ import annotations

import enum
import logging
import threading
from contextlib import closing
from typing import Any, Optional, Tuple, Type, Union

from essential_core.database.coercion import ScalarType, coerce
from essential_core.errors import DatabaseConnectionError, QueryExecutionError

logger = logging.getLogger(__name__)


class ConnectorState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    CONNECTING = "connecting"
    READY = "ready"
    FAILED = "failed"
    CLOSED = "closed"


class BaseConnector:
    """Holds one live connection and implements the persistence contract.

    Construction runs ``UNINITIALIZED -> CONNECTING -> READY``. If opening the
    connection fails the connector ends in ``FAILED``: the failure is logged,
    kept on ``self.failure`` and re-raised as ``DatabaseConnectionError`` from
    every later call. With ``fail_fast=True`` the error propagates out of the
    constructor instead.

    Contract calls are serialised with an internal lock. Code that pulls the
    raw connection via ``connection`` bypasses it.
    """

    backend_name: str = "unknown"

    def __init__(self, fail_fast: bool = False) -> None:
        self._lock = threading.RLock()
        self._conn: Optional[Any] = None
        self._error_types: Tuple[Type[BaseException], ...] = ()
        self.failure: Optional[BaseException] = None
        self.state = ConnectorState.UNINITIALIZED
        self._connect(fail_fast)

    @property
    def locator(self) -> str:
        raise NotImplementedError

    def _open(self) -> Any:
        """Open and return the driver connection. Must set ``self._error_types``."""
        raise NotImplementedError

    def _connect(self, fail_fast: bool) -> None:
        self.state = ConnectorState.CONNECTING
        try:
            conn = self._open()
        except Exception as exc:
            self.state = ConnectorState.FAILED
            self.failure = exc
            logger.warning("Failed to connect to %s at %s: %s", self.backend_name, self.locator, exc)
            if fail_fast:
                raise DatabaseConnectionError(
                    f"Failed to connect to {self.backend_name}: {exc}", backend=self.backend_name
                ) from exc
            return
        self._conn = conn
        self.state = ConnectorState.READY
        logger.info("Connected to %s at %s", self.backend_name, self.locator)

    @property
    def is_ready(self) -> bool:
        return self.state is ConnectorState.READY

    @property
    def connection(self) -> Optional[Any]:
        """The shared live connection, or None if the connector failed.

        Callers must not close it except at application shutdown.
        """
        return self._conn

    def _require_connection(self) -> Any:
        if self._conn is None:
            message = f"{self.backend_name} connection is not available"
            if self.failure is not None:
                raise DatabaseConnectionError(f"{message}: {self.failure}", backend=self.backend_name) from self.failure
            raise DatabaseConnectionError(message, backend=self.backend_name)
        return self._conn

    def _fetch_first(self, statement: str) -> Optional[Any]:
        conn = self._require_connection()
        try:
            with closing(conn.cursor()) as cursor:
                cursor.execute(statement)
                row = cursor.fetchone()
        except self._error_types as exc:
            logger.error("%s query failed: %s", self.backend_name, exc)
            raise QueryExecutionError(
                f"{self.backend_name} query failed: {exc}", backend=self.backend_name, statement=statement
            ) from exc
        if not row:
            return None
        return row[0]

    def execute_query(self, statement: str) -> None:
        """Execute a statement that returns no result set (DDL/DML).

        :param statement: A complete SQL statement
        :type statement: str
        :raises DatabaseConnectionError: if the connector has no live connection
        :raises QueryExecutionError: if the backend rejects the statement
        """
        with self._lock:
            conn = self._require_connection()
            try:
                with closing(conn.cursor()) as cursor:
                    cursor.execute(statement)
            except self._error_types as exc:
                logger.error("%s statement failed: %s", self.backend_name, exc)
                raise QueryExecutionError(
                    f"{self.backend_name} statement failed: {exc}", backend=self.backend_name, statement=statement
                ) from exc

    def get_value(self, statement: str, target_type: Union[ScalarType, type, str]) -> Optional[Any]:
        """Return the first column of the first row, coerced to ``target_type``.

        :param statement: A complete SQL query returning at least one column
        :type statement: str
        :param target_type: Requested output type
        :return: The coerced value, or None when no row was returned
        :raises ScalarTypeError: if ``target_type`` is unsupported or the value does not convert
        :raises QueryExecutionError: if the query fails
        """
        scalar_type = ScalarType.resolve(target_type)
        with self._lock:
            raw = self._fetch_first(statement)
        return coerce(raw, scalar_type)

    def close(self) -> None:
        """Close the live connection. Only the host's shutdown path should call this."""
        with self._lock:
            if self._conn is None:
                return
            try:
                self._conn.close()
                logger.info("Closed %s connection", self.backend_name)
            finally:
                self._conn = None
                self.state = ConnectorState.CLOSED

    def __repr__(self) -> str:
        return f"{type(self).__name__}(locator={self.locator!r}, state={self.state.value})"

"""Facade over the essential persistence layer and the host command dispatcher.

Usage:
  essential = EssentialCommon(MappingConfigStore(plugin_config), data_dir, dispatcher=host_dispatcher)
  essential.register_namespace("essential")
  essential.execute_query("CREATE TABLE IF NOT EXISTS homes (player TEXT, name TEXT)")
  count = essential.get_value("SELECT COUNT(*) FROM homes", ScalarType.INT32)

Elsewhere in the process:
  api = EssentialCommon.get_api()
"""
from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any, ClassVar, Optional, Union

from essential_core.config.store import ConfigStore
from essential_core.database.base import BaseConnector, ConnectorState
from essential_core.database.coercion import ScalarType
from essential_core.database.registry import BackendKind, create_connector
from essential_core.dispatch import CommandDispatcherProtocol

logger = logging.getLogger(__name__)

_TRUE_FLAGS = ("1", "true", "yes", "on")


class EssentialCommon:
    """Process-wide entry point to the essential database and command dispatcher.

    The backend is chosen once from ``database.type`` and never changes for
    this instance. The connector opens its single live connection during
    construction; a connection failure leaves it FAILED (see ``state``)
    unless fail-fast is enabled, in which case construction raises
    ``DatabaseConnectionError``.

    :param config: Configuration store holding the ``database.*`` keys
    :type config: ConfigStore
    :param data_dir: Host data directory (SQLite file location)
    :type data_dir: Union[str, Path]
    :param dispatcher: Host command dispatcher to forward registrations to
    :type dispatcher: Optional[CommandDispatcherProtocol]
    :param fail_fast: Overrides ``database.fail_fast`` when given
    :type fail_fast: Optional[bool]
    :raises ConfigurationError: if ``database.type`` names no supported backend
    """

    _instance: ClassVar[Optional["EssentialCommon"]] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(
        self,
        config: ConfigStore,
        data_dir: Union[str, Path],
        dispatcher: Optional[CommandDispatcherProtocol] = None,
        fail_fast: Optional[bool] = None,
    ) -> None:
        self._config = config
        self._data_dir = Path(data_dir)
        self._dispatcher = dispatcher

        self._backend_kind = BackendKind.parse(config.get_string("database.type", "sqlite"))
        if fail_fast is None:
            fail_fast = config.get_string("database.fail_fast", "false").strip().lower() in _TRUE_FLAGS

        self._db: BaseConnector = create_connector(self._backend_kind, config, self._data_dir, fail_fast=fail_fast)
        if not self._db.is_ready:
            logger.warning(
                "Essential database started without a connection (%s); queries will fail until restart",
                self._backend_kind.value,
            )

        with EssentialCommon._instance_lock:
            EssentialCommon._instance = self

    @classmethod
    def get_api(cls) -> Optional["EssentialCommon"]:
        """Return the most recently constructed instance, or None."""
        return cls._instance

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    @property
    def backend_kind(self) -> BackendKind:
        return self._backend_kind

    @property
    def state(self) -> ConnectorState:
        return self._db.state

    @property
    def is_ready(self) -> bool:
        return self._db.is_ready

    # --------------------
    # Command dispatcher pass-through
    # --------------------

    def _require_dispatcher(self) -> CommandDispatcherProtocol:
        if self._dispatcher is None:
            raise RuntimeError("No command dispatcher configured for EssentialCommon")
        return self._dispatcher

    def register_namespace(self, namespace: str) -> None:
        self._require_dispatcher().register_namespace(namespace)

    def bind_namespace_to_command(self, namespace: str, command_executor: Optional[Any] = None) -> None:
        self._require_dispatcher().bind_namespace_to_command(namespace, command_executor)

    def register_sub_command(self, namespace: str, name: str, executor: Any) -> None:
        self._require_dispatcher().register_sub_command(namespace, name, executor)

    def register_sub_tab_completer(self, namespace: str, subcommand: str, tab_completer: Any) -> None:
        self._require_dispatcher().register_sub_tab_completer(namespace, subcommand, tab_completer)

    def get_dispatcher(self, namespace: str) -> Any:
        return self._require_dispatcher().get_dispatcher(namespace)

    # --------------------
    # Database conveniences
    # --------------------

    def get_db(self) -> BaseConnector:
        """Return the connector implementing the persistence contract."""
        return self._db

    def get_db_connection(self) -> Optional[Any]:
        """Return the shared live connection, or None if connecting failed.

        The connection is shared with every other caller; do not close it
        outside of application shutdown (use ``close()`` there).
        """
        return self._db.connection

    def execute_query(self, statement: str) -> None:
        self._db.execute_query(statement)

    def get_value(self, statement: str, target_type: Union[ScalarType, type, str]) -> Optional[Any]:
        return self._db.get_value(statement, target_type)

    def close(self) -> None:
        """Close the live connection; the designated shutdown path."""
        self._db.close()
        with EssentialCommon._instance_lock:
            if EssentialCommon._instance is self:
                EssentialCommon._instance = None

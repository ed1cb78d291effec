"""Key/value configuration stores consumed by the facade.

The host application owns its configuration; essential_core only needs
``get_string(key, default)``. Two stores are provided: one over an already
parsed mapping (a plugin config file) and one over environment variables.
"""
from __future__ import annotations

import logging
import os
from typing import Any, Mapping, Optional, Protocol

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)


class ConfigStore(Protocol):
    """Read-only key/value configuration with typed defaults."""

    def get_string(self, key: str, default: str) -> str:  # pragma: no cover - interface
        ...


class MappingConfigStore:
    """Configuration backed by a nested or flat mapping.

    Dotted keys are resolved first as a flat key, then by walking nested
    mappings (``{"database": {"type": "mysql"}}``). Non-string leaves are
    stringified; a missing key or a ``None`` leaf yields the default.
    """

    def __init__(self, values: Optional[Mapping[str, Any]] = None) -> None:
        self._values: Mapping[str, Any] = values or {}

    def _lookup(self, key: str) -> Any:
        if key in self._values:
            return self._values[key]
        node: Any = self._values
        for part in key.split("."):
            if not isinstance(node, Mapping) or part not in node:
                return None
            node = node[part]
        return node

    def get_string(self, key: str, default: str) -> str:
        value = self._lookup(key)
        if value is None or isinstance(value, Mapping):
            return default
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)


class EnvConfigStore:
    """Configuration read from environment variables.

    ``database.mysql.host`` is looked up as ``DATABASE_MYSQL_HOST`` (with an
    optional prefix, e.g. ``ESSENTIAL_``). A ``.env`` file is loaded once at
    construction without overriding variables already set.

    :param prefix: Optional prefix prepended to every variable name
    :type prefix: str
    :param dotenv_path: Explicit .env path; defaults to searching from the CWD
    :type dotenv_path: Optional[str]
    :param environ: Mapping to read from; defaults to ``os.environ``
    :type environ: Optional[Mapping[str, str]]
    """

    def __init__(
        self,
        prefix: str = "",
        dotenv_path: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
        load_env_file: bool = True,
    ) -> None:
        self._prefix = prefix
        if load_env_file:
            loaded = load_dotenv(dotenv_path=dotenv_path or find_dotenv(usecwd=True), override=False)
            if loaded:
                logger.info("Loaded configuration overrides from .env")
        self._environ = environ if environ is not None else os.environ

    def variable_name(self, key: str) -> str:
        return f"{self._prefix}{key.replace('.', '_').replace('-', '_').upper()}"

    def get_string(self, key: str, default: str) -> str:
        value = self._environ.get(self.variable_name(key))
        if value is None:
            return default
        return value

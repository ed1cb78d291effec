"""Connection parameter dataclasses for each supported backend.

Values are sourced from a ``ConfigStore`` with the documented defaults and
are read-only after construction.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from essential_core.config.store import ConfigStore
from essential_core.errors import ConfigurationError


def _parse_port(store: ConfigStore, key: str, default: str) -> int:
    raw = store.get_string(key, default).strip()
    try:
        port = int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid port for {key}: {raw!r}") from exc
    if not 0 < port < 65536:
        raise ConfigurationError(f"Port out of range for {key}: {port}")
    return port


@dataclass(frozen=True)
class SQLiteSettings:
    """Embedded file backend settings.

    :param path: Database file, relative to the data directory unless absolute
    :type path: Path
    """
    path: Path

    @classmethod
    def from_store(cls, store: ConfigStore, data_dir: Union[str, Path]) -> "SQLiteSettings":
        file_name = store.get_string("database.sqlite.path", "essential.db").strip() or "essential.db"
        return cls(path=(Path(data_dir) / file_name).resolve())

    @property
    def locator(self) -> str:
        return f"sqlite:///{self.path}"


@dataclass(frozen=True)
class MySQLSettings:
    host: str
    port: int
    name: str
    user: str
    password: str = field(default="", repr=False)

    @classmethod
    def from_store(cls, store: ConfigStore) -> "MySQLSettings":
        return cls(
            host=store.get_string("database.mysql.host", "localhost"),
            port=_parse_port(store, "database.mysql.port", "3306"),
            name=store.get_string("database.mysql.name", "mcengine_essential"),
            user=store.get_string("database.mysql.user", "root"),
            password=store.get_string("database.mysql.password", ""),
        )

    @property
    def locator(self) -> str:
        return f"mysql://{self.host}:{self.port}/{self.name}?ssl_disabled=true&charset=utf8"


@dataclass(frozen=True)
class PostgreSQLSettings:
    host: str
    port: int
    name: str
    user: str
    password: str = field(default="", repr=False)

    @classmethod
    def from_store(cls, store: ConfigStore) -> "PostgreSQLSettings":
        return cls(
            host=store.get_string("database.postgresql.host", "localhost"),
            port=_parse_port(store, "database.postgresql.port", "5432"),
            name=store.get_string("database.postgresql.name", "mcengine_essential"),
            user=store.get_string("database.postgresql.user", "postgres"),
            password=store.get_string("database.postgresql.password", ""),
        )

    @property
    def locator(self) -> str:
        return f"postgresql://{self.host}:{self.port}/{self.name}"

"""Configuration stores and per-backend connection settings."""
from .config import MySQLSettings, PostgreSQLSettings, SQLiteSettings
from .store import ConfigStore, EnvConfigStore, MappingConfigStore

__all__ = [
    "ConfigStore",
    "EnvConfigStore",
    "MappingConfigStore",
    "MySQLSettings",
    "PostgreSQLSettings",
    "SQLiteSettings",
]

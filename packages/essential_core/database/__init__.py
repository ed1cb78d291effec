"""Backend connectors, the persistence contract and scalar coercion."""
from .base import BaseConnector, ConnectorState
from .coercion import ScalarType, coerce
from essential_core.errors import (
    ConfigurationError,
    DatabaseConnectionError,
    EssentialDatabaseError,
    QueryExecutionError,
    ScalarTypeError,
)
from .interface import PersistenceProtocol
from .mysql import MySQLConnector
from .postgresql import PostgreSQLConnector
from .registry import BackendKind, create_connector
from .sqlite import SQLiteConnector

__all__ = [
    "BaseConnector",
    "ConnectorState",
    "ScalarType",
    "coerce",
    "ConfigurationError",
    "DatabaseConnectionError",
    "EssentialDatabaseError",
    "QueryExecutionError",
    "ScalarTypeError",
    "PersistenceProtocol",
    "MySQLConnector",
    "PostgreSQLConnector",
    "SQLiteConnector",
    "BackendKind",
    "create_connector",
]

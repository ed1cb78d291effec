"""Persistence facade for the essential plugin module.

Selects one of three SQL backends (sqlite, mysql, postgresql) from
configuration and exposes a two-operation persistence contract plus the host
command dispatcher.
"""
from essential_core.common import EssentialCommon
from essential_core.database import (
    BackendKind,
    ConfigurationError,
    ConnectorState,
    DatabaseConnectionError,
    EssentialDatabaseError,
    PersistenceProtocol,
    QueryExecutionError,
    ScalarType,
    ScalarTypeError,
    coerce,
)

__all__ = [
    "EssentialCommon",
    "BackendKind",
    "ConnectorState",
    "PersistenceProtocol",
    "ScalarType",
    "coerce",
    "EssentialDatabaseError",
    "ConfigurationError",
    "DatabaseConnectionError",
    "QueryExecutionError",
    "ScalarTypeError",
]

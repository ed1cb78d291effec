"""Error kinds raised by the essential_core persistence layer."""
from __future__ import annotations

from typing import Optional


class EssentialDatabaseError(Exception):
    """Base class for all persistence errors."""


class ConfigurationError(EssentialDatabaseError, ValueError):
    """Raised when configuration selects an unknown backend or holds an invalid value."""


class DatabaseConnectionError(EssentialDatabaseError):
    """Raised when the backend could not be reached or the connector is unusable."""

    def __init__(self, message: str, backend: Optional[str] = None) -> None:
        super().__init__(message)
        self.backend = backend


class QueryExecutionError(EssentialDatabaseError, RuntimeError):
    """Raised when a statement fails against a live connection.

    :param message: Human readable description of the failure
    :type message: str
    :param backend: Backend kind the statement ran against
    :type backend: Optional[str]
    :param statement: The SQL statement that failed
    :type statement: Optional[str]
    """

    def __init__(self, message: str, backend: Optional[str] = None, statement: Optional[str] = None) -> None:
        super().__init__(message)
        self.backend = backend
        self.statement = statement


class ScalarTypeError(EssentialDatabaseError, TypeError, ValueError):
    """Raised when a scalar cannot be coerced to the requested type, or the type is unsupported."""

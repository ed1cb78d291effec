"""Persistence contract shared by every backend connector.

Callers depend on this protocol, never on a concrete backend. Only two
primitives are offered; query construction is left to the caller.
"""
from __future__ import annotations

from typing import Any, Optional, Protocol, Union, runtime_checkable

from essential_core.database.coercion import ScalarType


@runtime_checkable
class PersistenceProtocol(Protocol):
    """Minimal persistence contract.

    Implementations run a complete SQL statement with no result, or fetch a
    single scalar coerced to the requested type.
    """

    def execute_query(self, statement: str) -> None:  # pragma: no cover - interface
        ...

    def get_value(self, statement: str, target_type: Union[ScalarType, type, str]) -> Optional[Any]:  # pragma: no cover - interface
        ...

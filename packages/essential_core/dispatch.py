"""Interface of the host framework's command dispatcher.

Routing and tab completion are implemented by the host; essential_core only
forwards registrations to whatever dispatcher it is given.
"""
from __future__ import annotations

from typing import Any, Optional, Protocol


class CommandDispatcherProtocol(Protocol):
    def register_namespace(self, namespace: str) -> None:  # pragma: no cover - interface
        ...

    def bind_namespace_to_command(self, namespace: str, command_executor: Optional[Any]) -> None:  # pragma: no cover - interface
        ...

    def register_sub_command(self, namespace: str, name: str, executor: Any) -> None:  # pragma: no cover - interface
        ...

    def register_sub_tab_completer(self, namespace: str, subcommand: str, tab_completer: Any) -> None:  # pragma: no cover - interface
        ...

    def get_dispatcher(self, namespace: str) -> Any:  # pragma: no cover - interface
        ...

"""Action registry port - read-only action type directory."""

from typing import Protocol

from accessgraph.domain.entities import ActionType


class ActionRegistry(Protocol):
    """Lookup of action codes to metadata."""

    async def lookup(self, code: str) -> ActionType | None: ...

    async def list_active(self) -> list[ActionType]: ...

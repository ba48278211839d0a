"""Action type repository port."""

from typing import Protocol

from accessgraph.domain.entities import ActionType


class ActionTypeRepository(Protocol):
    """Port for action type lookups (reference data, read-only)."""

    async def list_all(self) -> list[ActionType]: ...

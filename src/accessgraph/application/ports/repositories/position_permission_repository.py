"""Position permission repository port."""

from typing import Protocol
from uuid import UUID

from accessgraph.domain.entities import PositionPermission


class PositionPermissionRepository(Protocol):
    """Port for static position grants. Only active rows are returned."""

    async def list_for_positions(
        self, position_ids: list[UUID], action_type_id: UUID
    ) -> list[PositionPermission]: ...

    async def list_delegable(self, position_ids: list[UUID]) -> list[PositionPermission]: ...

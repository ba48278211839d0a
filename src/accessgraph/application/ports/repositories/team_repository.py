"""Team repository port."""

from typing import Protocol
from uuid import UUID

from accessgraph.domain.entities import Position, Team


class TeamRepository(Protocol):
    """Port for team and position directory lookups."""

    async def get_by_id(self, team_id: UUID) -> Team | None: ...

    async def list_positions(self, position_ids: list[UUID]) -> list[Position]: ...

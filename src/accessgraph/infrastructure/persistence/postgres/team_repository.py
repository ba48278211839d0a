"""PostgreSQL team repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from accessgraph.domain.entities import Position, Team


class PostgresTeamRepository:
    """Team and position repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, team_id: UUID) -> Team | None:
        """Get team by id."""
        cur = await self._conn.execute(
            "SELECT id, name, team_type, parent_team_id FROM team WHERE id = %s",
            (team_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Team(id=r[0], name=r[1], team_type=r[2], parent_team_id=r[3])

    async def list_positions(self, position_ids: list[UUID]) -> list[Position]:
        """Positions by id, unknown ids skipped."""
        if not position_ids:
            return []
        cur = await self._conn.execute(
            "SELECT id, name, level, position_type FROM position WHERE id = ANY(%s)",
            (list(position_ids),),
        )
        rows = await cur.fetchall()
        return [Position(id=r[0], name=r[1], level=r[2], position_type=r[3]) for r in rows]

"""PostgreSQL membership repository implementation."""

from psycopg import AsyncConnection

from accessgraph.domain.entities import Membership
from accessgraph.domain.value_objects import MemberRole


class PostgresMembershipRepository:
    """Membership repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_active_for_person(self, person_id: str) -> list[Membership]:
        """Active memberships joined with team name, type and parent."""
        cur = await self._conn.execute(
            "SELECT m.id, m.person_id, m.team_id, m.position_id, m.member_role, m.is_active, "
            "m.start_date, m.end_date, t.name, t.team_type, t.parent_team_id "
            "FROM team_member m LEFT JOIN team t ON t.id = m.team_id "
            "WHERE m.person_id = %s AND m.is_active = TRUE "
            "ORDER BY m.start_date NULLS LAST, m.id",
            (person_id,),
        )
        rows = await cur.fetchall()
        return [
            Membership(
                id=r[0],
                person_id=r[1],
                team_id=r[2],
                position_id=r[3],
                member_role=MemberRole(r[4]),
                is_active=r[5],
                start_date=r[6],
                end_date=r[7],
                team_name=r[8],
                team_type=r[9],
                parent_team_id=r[10],
            )
            for r in rows
        ]

"""PostgreSQL position permission repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from accessgraph.domain.entities import PositionPermission
from accessgraph.domain.value_objects import Scope

_COLUMNS = "id, position_id, action_type_id, scope, can_delegate, is_active"


def _row_to_position_permission(r: tuple) -> PositionPermission:
    return PositionPermission(
        id=r[0],
        position_id=r[1],
        action_type_id=r[2],
        scope=Scope(r[3]),
        can_delegate=r[4],
        is_active=r[5],
    )


class PostgresPositionPermissionRepository:
    """Position permission repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_for_positions(
        self, position_ids: list[UUID], action_type_id: UUID
    ) -> list[PositionPermission]:
        """Active grants of the action held by any of the positions."""
        if not position_ids:
            return []
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM position_permission "
            "WHERE position_id = ANY(%s) AND action_type_id = %s AND is_active = TRUE",
            (position_ids, action_type_id),
        )
        rows = await cur.fetchall()
        return [_row_to_position_permission(r) for r in rows]

    async def list_delegable(self, position_ids: list[UUID]) -> list[PositionPermission]:
        """Active grants the positions may delegate."""
        if not position_ids:
            return []
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM position_permission "
            "WHERE position_id = ANY(%s) AND can_delegate = TRUE AND is_active = TRUE",
            (position_ids,),
        )
        rows = await cur.fetchall()
        return [_row_to_position_permission(r) for r in rows]

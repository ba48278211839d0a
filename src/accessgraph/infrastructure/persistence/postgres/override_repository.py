"""PostgreSQL user permission override repository implementation."""

from datetime import datetime
from uuid import UUID

from psycopg import AsyncConnection

from accessgraph.domain.entities import UserPermissionOverride
from accessgraph.domain.value_objects import Scope

_COLUMNS = (
    "id, person_id, action_type_id, is_granted, scope, expires_at, revoked_at, granted_by, reason"
)


def _row_to_override(r: tuple) -> UserPermissionOverride:
    return UserPermissionOverride(
        id=r[0],
        person_id=r[1],
        action_type_id=r[2],
        is_granted=r[3],
        scope=Scope(r[4]) if r[4] else None,
        expires_at=r[5],
        revoked_at=r[6],
        granted_by=r[7],
        reason=r[8],
    )


class PostgresOverrideRepository:
    """Override repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_unrevoked(
        self, person_id: str, action_type_id: UUID
    ) -> UserPermissionOverride | None:
        """Most recent override for person and action that was not revoked."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM user_permission_override "
            "WHERE person_id = %s AND action_type_id = %s AND revoked_at IS NULL "
            "ORDER BY created_at DESC LIMIT 1",
            (person_id, action_type_id),
        )
        r = await cur.fetchone()
        return _row_to_override(r) if r else None

    async def list_expiring_grants(
        self, start: datetime, end: datetime, person_id: str | None = None
    ) -> list[UserPermissionOverride]:
        """Granted, unrevoked overrides expiring in [start, end)."""
        conditions = [
            "is_granted = TRUE",
            "revoked_at IS NULL",
            "expires_at >= %s",
            "expires_at < %s",
        ]
        params: list[object] = [start, end]
        if person_id:
            conditions.append("person_id = %s")
            params.append(person_id)
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM user_permission_override "
            f"WHERE {' AND '.join(conditions)} ORDER BY expires_at",
            tuple(params),
        )
        rows = await cur.fetchall()
        return [_row_to_override(r) for r in rows]

    async def list_granted_by(self, granter_id: str) -> list[UserPermissionOverride]:
        """Granted, unrevoked overrides handed out by granter_id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM user_permission_override "
            "WHERE granted_by = %s AND is_granted = TRUE AND revoked_at IS NULL "
            "ORDER BY created_at DESC",
            (granter_id,),
        )
        rows = await cur.fetchall()
        return [_row_to_override(r) for r in rows]

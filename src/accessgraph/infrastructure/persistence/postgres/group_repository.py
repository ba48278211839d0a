"""PostgreSQL permission group repository implementation."""

from datetime import datetime
from uuid import UUID

from psycopg import AsyncConnection

from accessgraph.domain.entities import (
    PermissionGroup,
    PermissionGroupAction,
    UserGroupAssignment,
)
from accessgraph.domain.value_objects import Scope


class PostgresGroupRepository:
    """Permission group repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_assignments(self, person_id: str) -> list[UserGroupAssignment]:
        """All group assignments of a person; expiry is filtered by the caller."""
        cur = await self._conn.execute(
            "SELECT id, person_id, group_id, expires_at FROM user_group_assignment "
            "WHERE person_id = %s",
            (person_id,),
        )
        rows = await cur.fetchall()
        return [
            UserGroupAssignment(id=r[0], person_id=r[1], group_id=r[2], expires_at=r[3])
            for r in rows
        ]

    async def list_group_actions(
        self, group_ids: list[UUID], action_type_id: UUID
    ) -> list[PermissionGroupAction]:
        """Grants of the action carried by any of the groups."""
        if not group_ids:
            return []
        cur = await self._conn.execute(
            "SELECT group_id, action_type_id, scope FROM permission_group_action "
            "WHERE group_id = ANY(%s) AND action_type_id = %s",
            (group_ids, action_type_id),
        )
        rows = await cur.fetchall()
        return [
            PermissionGroupAction(
                group_id=r[0],
                action_type_id=r[1],
                scope=Scope(r[2]) if r[2] else None,
            )
            for r in rows
        ]

    async def list_by_ids(self, group_ids: list[UUID]) -> list[PermissionGroup]:
        """Get groups by ids."""
        if not group_ids:
            return []
        cur = await self._conn.execute(
            "SELECT id, name, description FROM permission_group WHERE id = ANY(%s)",
            (group_ids,),
        )
        rows = await cur.fetchall()
        return [PermissionGroup(id=r[0], name=r[1], description=r[2]) for r in rows]

    async def list_expiring_assignments(
        self, start: datetime, end: datetime, person_id: str | None = None
    ) -> list[UserGroupAssignment]:
        """Assignments expiring in [start, end)."""
        conditions = ["expires_at >= %s", "expires_at < %s"]
        params: list[object] = [start, end]
        if person_id:
            conditions.append("person_id = %s")
            params.append(person_id)
        cur = await self._conn.execute(
            "SELECT id, person_id, group_id, expires_at FROM user_group_assignment "
            f"WHERE {' AND '.join(conditions)} ORDER BY expires_at",
            tuple(params),
        )
        rows = await cur.fetchall()
        return [
            UserGroupAssignment(id=r[0], person_id=r[1], group_id=r[2], expires_at=r[3])
            for r in rows
        ]

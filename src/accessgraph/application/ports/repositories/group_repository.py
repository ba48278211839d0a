"""Permission group repository port."""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from accessgraph.domain.entities import (
    PermissionGroup,
    PermissionGroupAction,
    UserGroupAssignment,
)


class GroupRepository(Protocol):
    """Port for permission groups and their assignments."""

    async def list_assignments(self, person_id: str) -> list[UserGroupAssignment]: ...

    async def list_group_actions(
        self, group_ids: list[UUID], action_type_id: UUID
    ) -> list[PermissionGroupAction]: ...

    async def list_by_ids(self, group_ids: list[UUID]) -> list[PermissionGroup]: ...

    async def list_expiring_assignments(
        self, start: datetime, end: datetime, person_id: str | None = None
    ) -> list[UserGroupAssignment]: ...

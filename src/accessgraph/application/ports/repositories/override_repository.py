"""User permission override repository port."""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from accessgraph.domain.entities import UserPermissionOverride


class OverrideRepository(Protocol):
    """Port for person-specific overrides."""

    async def get_unrevoked(
        self, person_id: str, action_type_id: UUID
    ) -> UserPermissionOverride | None: ...

    async def list_expiring_grants(
        self, start: datetime, end: datetime, person_id: str | None = None
    ) -> list[UserPermissionOverride]: ...

    async def list_granted_by(self, granter_id: str) -> list[UserPermissionOverride]: ...

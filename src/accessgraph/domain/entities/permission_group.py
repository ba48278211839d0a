"""Permission groups - team-independent bundles of action grants."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from accessgraph.domain.value_objects import Scope


@dataclass(frozen=True)
class PermissionGroup:
    """Named bundle of actions."""

    id: UUID
    name: str
    description: str | None = None


@dataclass(frozen=True)
class PermissionGroupAction:
    """Action granted by a group. Scope may be unset in legacy rows."""

    group_id: UUID
    action_type_id: UUID
    scope: Scope | None = None


@dataclass(frozen=True)
class UserGroupAssignment:
    """Person assigned to a group, optionally until expires_at."""

    id: UUID
    person_id: str
    group_id: UUID
    expires_at: datetime | None = None

    def is_active_at(self, now: datetime) -> bool:
        return self.expires_at is None or self.expires_at > now

"""User permission override - person-specific grant or revocation."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from accessgraph.domain.value_objects import Scope


@dataclass(frozen=True)
class UserPermissionOverride:
    """Administrative exception; soft-deleted via revoked_at, time-bound via expires_at."""

    id: UUID
    person_id: str
    action_type_id: UUID
    is_granted: bool
    scope: Scope | None = None
    expires_at: datetime | None = None
    revoked_at: datetime | None = None
    granted_by: str | None = None
    reason: str | None = None

    def is_active_at(self, now: datetime) -> bool:
        """Not revoked and not expired at ``now``."""
        if self.revoked_at is not None:
            return False
        return self.expires_at is None or self.expires_at > now

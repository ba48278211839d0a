"""Repository ports."""

from accessgraph.application.ports.repositories.action_type_repository import (
    ActionTypeRepository,
)
from accessgraph.application.ports.repositories.group_repository import GroupRepository
from accessgraph.application.ports.repositories.membership_repository import (
    MembershipRepository,
)
from accessgraph.application.ports.repositories.override_repository import (
    OverrideRepository,
)
from accessgraph.application.ports.repositories.position_permission_repository import (
    PositionPermissionRepository,
)
from accessgraph.application.ports.repositories.team_repository import TeamRepository

__all__ = [
    "ActionTypeRepository",
    "GroupRepository",
    "MembershipRepository",
    "OverrideRepository",
    "PositionPermissionRepository",
    "TeamRepository",
]

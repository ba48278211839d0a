"""Domain entities."""

from accessgraph.domain.entities.action_type import ActionType
from accessgraph.domain.entities.membership import Membership
from accessgraph.domain.entities.override import UserPermissionOverride
from accessgraph.domain.entities.permission_group import (
    PermissionGroup,
    PermissionGroupAction,
    UserGroupAssignment,
)
from accessgraph.domain.entities.position_permission import PositionPermission
from accessgraph.domain.entities.team import Position, Team

__all__ = [
    "ActionType",
    "Membership",
    "PermissionGroup",
    "PermissionGroupAction",
    "Position",
    "PositionPermission",
    "Team",
    "UserGroupAssignment",
    "UserPermissionOverride",
]

"""Position permission entity - static grant attached to a position."""

from dataclasses import dataclass
from uuid import UUID

from accessgraph.domain.value_objects import Scope


@dataclass(frozen=True)
class PositionPermission:
    """Position grants an action with a scope."""

    id: UUID
    position_id: UUID
    action_type_id: UUID
    scope: Scope
    can_delegate: bool = False
    is_active: bool = True

"""Team and position entities."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class Team:
    """Team - node in the organization tree (parent may be missing)."""

    id: UUID
    name: str
    team_type: str | None = None
    parent_team_id: UUID | None = None


@dataclass(frozen=True)
class Position:
    """Position - role template held through team membership."""

    id: UUID
    name: str
    level: int = 0
    position_type: str | None = None

"""Membership entity - person holds a position in a team."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from accessgraph.domain.value_objects import MemberRole


@dataclass(frozen=True)
class Membership:
    """Active or historical team membership, joined with team metadata."""

    id: UUID
    person_id: str
    team_id: UUID
    member_role: MemberRole
    position_id: UUID | None = None
    is_active: bool = True
    start_date: date | None = None
    end_date: date | None = None
    team_name: str | None = None
    team_type: str | None = None
    parent_team_id: UUID | None = None

    @property
    def is_leadership(self) -> bool:
        return self.member_role.is_leadership

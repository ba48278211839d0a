"""Membership resolution and bounded team-ancestry walks."""

import logging
from uuid import UUID

from accessgraph.application.ports.repositories import MembershipRepository, TeamRepository
from accessgraph.domain.entities import Membership, Team

logger = logging.getLogger(__name__)

MAX_HIERARCHY_DEPTH = 10


async def load_active_memberships(
    repository: MembershipRepository, person_id: str
) -> list[Membership]:
    """Active memberships of a person, with team metadata."""
    memberships = await repository.list_active_for_person(person_id)
    return [m for m in memberships if m.is_active]


class TeamHierarchy:
    """Team lookups keyed by id, cached for the duration of one check."""

    def __init__(self, teams: TeamRepository, memberships: list[Membership] | None = None) -> None:
        self._teams = teams
        self._by_id: dict[UUID, Team | None] = {}
        for m in memberships or []:
            self._by_id.setdefault(
                m.team_id,
                Team(
                    id=m.team_id,
                    name=m.team_name or "",
                    team_type=m.team_type,
                    parent_team_id=m.parent_team_id,
                ),
            )

    async def get(self, team_id: UUID) -> Team | None:
        if team_id not in self._by_id:
            self._by_id[team_id] = await self._teams.get_by_id(team_id)
        return self._by_id[team_id]

    async def name_of(self, team_id: UUID) -> str | None:
        team = await self.get(team_id)
        return team.name if team and team.name else None

    async def ancestors(self, team_id: UUID, max_depth: int = MAX_HIERARCHY_DEPTH) -> list[UUID]:
        """Team followed by its parent chain. Stops at a root, a cycle, or ``max_depth`` hops."""
        chain = [team_id]
        visited = {team_id}
        current = team_id
        for _ in range(max_depth):
            team = await self.get(current)
            parent = team.parent_team_id if team else None
            if parent is None:
                break
            if parent in visited:
                logger.warning("Cycle in team hierarchy at %s -> %s", current, parent)
                break
            chain.append(parent)
            visited.add(parent)
            current = parent
        return chain

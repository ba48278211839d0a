"""State shared by the resolvers during a single permission check."""

from datetime import datetime

from accessgraph.application.dto.permission_dto import PermissionContext
from accessgraph.application.ports import UnitOfWork
from accessgraph.application.resolvers.membership import (
    TeamHierarchy,
    load_active_memberships,
)
from accessgraph.domain.entities import ActionType, Membership


class ResolutionRequest:
    """One (person, action) evaluation. Memberships are loaded on first use."""

    def __init__(
        self,
        action: ActionType,
        ctx: PermissionContext,
        uow: UnitOfWork,
        now: datetime,
    ) -> None:
        self.action = action
        self.ctx = ctx
        self.uow = uow
        self.now = now
        self._memberships: list[Membership] | None = None
        self._hierarchy: TeamHierarchy | None = None

    @property
    def person_id(self) -> str:
        return self.ctx.person_id

    async def memberships(self) -> list[Membership]:
        if self._memberships is None:
            self._memberships = await load_active_memberships(
                self.uow.memberships, self.ctx.person_id
            )
        return self._memberships

    async def hierarchy(self) -> TeamHierarchy:
        if self._hierarchy is None:
            self._hierarchy = TeamHierarchy(self.uow.teams, await self.memberships())
        return self._hierarchy

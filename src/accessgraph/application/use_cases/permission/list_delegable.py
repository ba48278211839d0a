"""List delegable permissions use case."""

from collections.abc import Callable
from datetime import datetime

from accessgraph.application.dto.permission_dto import (
    ActiveDelegation,
    DelegablePermission,
    DelegationOverview,
)
from accessgraph.application.ports import ActionRegistry
from accessgraph.application.resolvers import load_active_memberships
from accessgraph.application.use_cases.permission.check_permission import utc_now


class ListDelegablePermissionsUseCase:
    """Position grants flagged can_delegate for the person's active positions,
    plus the overrides the person has already handed out and that are still in force.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        action_registry: ActionRegistry,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._registry = action_registry
        self._clock = clock

    async def execute(self, person_id: str) -> DelegationOverview:
        now = self._clock()
        async with self._uow_factory() as uow:
            memberships = await load_active_memberships(uow.memberships, person_id)
            position_ids = list(
                dict.fromkeys(m.position_id for m in memberships if m.position_id)
            )
            rows = []
            positions = {}
            if position_ids:
                rows = await uow.position_permissions.list_delegable(position_ids)
                positions = {p.id: p for p in await uow.teams.list_positions(position_ids)}
            handed_out = await uow.overrides.list_granted_by(person_id)

        actions = {a.id: a for a in await self._registry.list_active()}
        delegable = []
        for row in rows:
            action = actions.get(row.action_type_id)
            if action is None or not row.is_active or not row.can_delegate:
                continue
            position = positions.get(row.position_id)
            delegable.append(
                DelegablePermission(
                    position_id=row.position_id,
                    position_name=position.name if position else None,
                    action_type_id=row.action_type_id,
                    action_code=action.code,
                    action_name=action.name,
                    category=action.category,
                    risk_level=action.risk_level,
                    scope=row.scope,
                )
            )

        active_delegations = []
        for o in handed_out:
            if not o.is_granted or not o.is_active_at(now):
                continue
            action = actions.get(o.action_type_id)
            active_delegations.append(
                ActiveDelegation(
                    id=o.id,
                    person_id=o.person_id,
                    action_type_id=o.action_type_id,
                    action_code=action.code if action else None,
                    scope=o.scope,
                    expires_at=o.expires_at,
                )
            )

        return DelegationOverview(
            delegable=sorted(
                delegable, key=lambda d: (d.category, d.action_code, str(d.position_id))
            ),
            active_delegations=active_delegations,
        )

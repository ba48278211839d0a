"""List expiring grants use case - overrides and group assignments running out."""

import math
from collections.abc import Callable
from datetime import datetime, timedelta

from accessgraph.application.dto.permission_dto import (
    ExpiringGrant,
    ExpiringGrantsReport,
    Urgency,
)
from accessgraph.application.ports import ActionRegistry
from accessgraph.application.use_cases.permission.check_permission import utc_now
from accessgraph.domain.exceptions import ValidationError

ONE_DAY = timedelta(days=1)
MAX_LOOKAHEAD_DAYS = 365


def urgency_for(expires_in_days: int) -> Urgency:
    if expires_in_days <= 1:
        return "critical"
    if expires_in_days <= 3:
        return "warning"
    return "notice"


class ListExpiringGrantsUseCase:
    """Granted overrides and group assignments expiring within a look-ahead window."""

    def __init__(
        self,
        unit_of_work_factory: type,
        action_registry: ActionRegistry,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._registry = action_registry
        self._clock = clock

    async def execute(
        self, days: int = 7, person_id: str | None = None
    ) -> ExpiringGrantsReport:
        if not 1 <= days <= MAX_LOOKAHEAD_DAYS:
            raise ValidationError(f"days must be between 1 and {MAX_LOOKAHEAD_DAYS}")

        now = self._clock()
        end = now + days * ONE_DAY

        async with self._uow_factory() as uow:
            overrides = await uow.overrides.list_expiring_grants(now, end, person_id)
            assignments = await uow.groups.list_expiring_assignments(now, end, person_id)
            groups = {}
            if assignments:
                group_ids = list(dict.fromkeys(a.group_id for a in assignments))
                groups = {g.id: g for g in await uow.groups.list_by_ids(group_ids)}

        actions = {a.id: a for a in await self._registry.list_active()}

        def _grant(grant_id, kind, person_id, description, expires_at) -> ExpiringGrant:
            expires_in_days = math.ceil((expires_at - now) / ONE_DAY)
            return ExpiringGrant(
                id=grant_id,
                kind=kind,
                person_id=person_id,
                description=description,
                expires_at=expires_at,
                expires_in_days=expires_in_days,
                urgency=urgency_for(expires_in_days),
            )

        result = []
        for o in overrides:
            if not o.is_granted or o.expires_at is None or o.revoked_at is not None:
                continue
            action = actions.get(o.action_type_id)
            label = action.name if action else str(o.action_type_id)
            scope = o.scope.value if o.scope else "organization"
            result.append(
                _grant(o.id, "override", o.person_id, f'Permission "{label}" ({scope})', o.expires_at)
            )
        for a in assignments:
            if a.expires_at is None:
                continue
            group = groups.get(a.group_id)
            label = group.name if group else str(a.group_id)
            result.append(
                _grant(a.id, "group", a.person_id, f'Group "{label}" membership', a.expires_at)
            )
        return ExpiringGrantsReport(items=sorted(result, key=lambda g: g.expires_at))

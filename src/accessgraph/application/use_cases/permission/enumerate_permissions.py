"""Enumerate permissions use case - full matrix for display."""

import asyncio

from accessgraph.application.dto.permission_dto import (
    PermissionContext,
    PermissionMatrix,
    PermissionMatrixEntry,
)
from accessgraph.application.ports import ActionRegistry, PermissionChecker
from accessgraph.domain.entities import ActionType


class EnumeratePermissionsUseCase:
    """Evaluate every active action for one person. Not for enforcement."""

    def __init__(
        self,
        permission_checker: PermissionChecker,
        action_registry: ActionRegistry,
        concurrency: int = 8,
    ) -> None:
        self._permission_checker = permission_checker
        self._registry = action_registry
        self._concurrency = max(1, concurrency)

    async def execute(self, person_id: str, org_id: str) -> PermissionMatrix:
        """Build the permission matrix, one check per active action type."""
        actions = sorted(
            await self._registry.list_active(), key=lambda a: (a.category, a.code)
        )
        ctx = PermissionContext(person_id=person_id, org_id=org_id)
        semaphore = asyncio.Semaphore(self._concurrency)

        async def _check(action: ActionType) -> PermissionMatrixEntry:
            async with semaphore:
                decision = await self._permission_checker.execute(action.code, ctx)
            return PermissionMatrixEntry(
                code=action.code,
                name=action.name,
                category=action.category,
                allowed=decision.allowed,
                scope=decision.scope,
                source=decision.source,
            )

        entries = await asyncio.gather(*(_check(a) for a in actions))
        return PermissionMatrix(actions=list(entries))

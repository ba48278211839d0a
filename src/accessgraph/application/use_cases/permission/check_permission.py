"""Check permission use case - the single entry point of the engine."""

import logging
from collections.abc import Callable
from datetime import UTC, datetime

from accessgraph.application.dto.permission_dto import Decision, PermissionContext
from accessgraph.application.ports import ActionRegistry
from accessgraph.application.resolvers import (
    RESOLUTION_CHAIN,
    ResolutionRequest,
    Resolver,
    first_decision,
)
from accessgraph.domain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(UTC)


class CheckPermissionUseCase:
    """Decide whether a person may perform an action, and through which path.

    Resolvers run in strict order and the first decision wins: overrides,
    position grants, leadership, inherited grants, permission groups. Store
    errors propagate as ``StoreUnavailable``; they are never turned into a deny.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        action_registry: ActionRegistry,
        resolvers: tuple[Resolver, ...] = RESOLUTION_CHAIN,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._registry = action_registry
        self._resolvers = resolvers
        self._clock = clock

    async def execute(self, action_code: str, ctx: PermissionContext) -> Decision:
        """Check ``action_code`` for ``ctx.person_id``."""
        action = await self._registry.lookup(action_code)
        if action is None:
            logger.warning("%s", ConfigurationError(action_code))
            return Decision.deny().for_action(action_code)

        async with self._uow_factory() as uow:
            request = ResolutionRequest(action=action, ctx=ctx, uow=uow, now=self._clock())
            decision = await first_decision(self._resolvers, request)

        logger.debug(
            "Permission %s for %s: allowed=%s scope=%s source=%s",
            action_code,
            ctx.person_id,
            decision.allowed,
            decision.scope,
            decision.source,
        )
        return decision.for_action(action_code)


class PermissionShortcuts:
    """Checks for the common ``<module>.<verb>`` action codes."""

    def __init__(self, check_permission: CheckPermissionUseCase) -> None:
        self._check = check_permission

    async def create(self, prefix: str, ctx: PermissionContext) -> Decision:
        return await self._check.execute(f"{prefix}.create", ctx)

    async def read(self, prefix: str, ctx: PermissionContext) -> Decision:
        return await self._check.execute(f"{prefix}.read", ctx)

    async def update(self, prefix: str, ctx: PermissionContext) -> Decision:
        return await self._check.execute(f"{prefix}.update", ctx)

    async def delete(self, prefix: str, ctx: PermissionContext) -> Decision:
        return await self._check.execute(f"{prefix}.delete", ctx)

    async def approve(self, prefix: str, ctx: PermissionContext) -> Decision:
        return await self._check.execute(f"{prefix}.approve", ctx)

    async def manage(self, prefix: str, ctx: PermissionContext) -> Decision:
        return await self._check.execute(f"{prefix}.manage", ctx)

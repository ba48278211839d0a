"""Override resolver - person-specific grants and revocations."""

import logging

from accessgraph.application.dto.permission_dto import Decision
from accessgraph.application.resolvers.request import ResolutionRequest
from accessgraph.domain.value_objects import ResolutionSource, Scope

logger = logging.getLogger(__name__)


async def resolve_override(request: ResolutionRequest) -> Decision | None:
    """Active override decides outright; expired or revoked ones are ignored."""
    override = await request.uow.overrides.get_unrevoked(request.person_id, request.action.id)
    if override is None or not override.is_active_at(request.now):
        return None

    if not override.is_granted:
        logger.debug(
            "Override revokes %s for %s", request.action.code, request.person_id
        )
        return Decision.deny(ResolutionSource.OVERRIDE)

    return Decision(
        allowed=True,
        scope=override.scope or Scope.ORGANIZATION,
        source=ResolutionSource.OVERRIDE,
        can_delegate=False,
    )

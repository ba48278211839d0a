"""Position-permission resolver - grants attached to held positions."""

from accessgraph.application.dto.permission_dto import Decision
from accessgraph.application.resolvers.request import ResolutionRequest
from accessgraph.application.resolvers.scope_matcher import pick_broadest, scope_allows
from accessgraph.domain.value_objects import ResolutionSource


async def resolve_position(request: ResolutionRequest) -> Decision | None:
    """Broadest position grant, if it covers the resource.

    A scope mismatch is not a deny: later resolvers may still find a grant.
    """
    memberships = await request.memberships()
    position_ids = list(dict.fromkeys(m.position_id for m in memberships if m.position_id))
    if not position_ids:
        return None

    rows = await request.uow.position_permissions.list_for_positions(
        position_ids, request.action.id
    )
    best = pick_broadest(
        (r for r in rows if r.is_active),
        scope_of=lambda r: r.scope,
        tie_key=lambda r: r.position_id,
    )
    if best is None:
        return None

    membership = next(m for m in memberships if m.position_id == best.position_id)
    if not scope_allows(
        best.scope,
        request.person_id,
        membership.team_id,
        request.ctx.resource_owner_id,
        request.ctx.resource_team_id,
    ):
        return None

    return Decision(
        allowed=True,
        scope=best.scope,
        source=ResolutionSource.POSITION,
        position_id=best.position_id,
        team_id=membership.team_id,
        team_name=membership.team_name,
        can_delegate=best.can_delegate,
    )

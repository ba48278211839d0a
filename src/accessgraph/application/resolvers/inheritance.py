"""Inheritance resolver - cascade broad grants from ancestor teams."""

from accessgraph.application.dto.permission_dto import Decision
from accessgraph.application.resolvers.request import ResolutionRequest
from accessgraph.application.resolvers.scope_matcher import pick_broadest
from accessgraph.domain.value_objects import ResolutionSource


async def resolve_inheritance(request: ResolutionRequest) -> Decision | None:
    """First ancestor-team grant held by the person with a cascading scope.

    Teams are visited in membership order, ancestors nearest first. Only
    department, organization and global grants flow down to descendants.
    """
    memberships = await request.memberships()
    hierarchy = await request.hierarchy()

    for team_id in dict.fromkeys(m.team_id for m in memberships):
        chain = await hierarchy.ancestors(team_id)
        for ancestor_id in chain[1:]:
            position_ids = list(
                dict.fromkeys(
                    m.position_id
                    for m in memberships
                    if m.team_id == ancestor_id and m.position_id
                )
            )
            if not position_ids:
                continue

            rows = await request.uow.position_permissions.list_for_positions(
                position_ids, request.action.id
            )
            best = pick_broadest(
                (r for r in rows if r.is_active and r.scope.cascades),
                scope_of=lambda r: r.scope,
                tie_key=lambda r: r.position_id,
            )
            if best is None:
                continue

            return Decision(
                allowed=True,
                scope=best.scope,
                source=ResolutionSource.POSITION,
                position_id=best.position_id,
                team_id=ancestor_id,
                team_name=await hierarchy.name_of(ancestor_id),
                can_delegate=best.can_delegate,
            )
    return None

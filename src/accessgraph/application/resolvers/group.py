"""Group fallback resolver - team-independent permission groups."""

from accessgraph.application.dto.permission_dto import Decision
from accessgraph.application.resolvers.request import ResolutionRequest
from accessgraph.application.resolvers.scope_matcher import pick_broadest
from accessgraph.domain.value_objects import ResolutionSource, Scope


async def resolve_group(request: ResolutionRequest) -> Decision | None:
    """Broadest grant among the person's unexpired group assignments."""
    assignments = await request.uow.groups.list_assignments(request.person_id)
    group_ids = list(
        dict.fromkeys(a.group_id for a in assignments if a.is_active_at(request.now))
    )
    if not group_ids:
        return None

    rows = await request.uow.groups.list_group_actions(group_ids, request.action.id)
    # Rows without a scope rank as team but are reported as organization.
    best = pick_broadest(
        rows,
        scope_of=lambda r: r.scope or Scope.TEAM,
        tie_key=lambda r: r.group_id,
    )
    if best is None:
        return None

    return Decision(
        allowed=True,
        scope=best.scope or Scope.ORGANIZATION,
        source=ResolutionSource.GROUP,
        can_delegate=False,
    )

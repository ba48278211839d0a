"""Leadership fallback - implicit team scope for team owners and leads."""

from accessgraph.application.dto.permission_dto import Decision
from accessgraph.application.resolvers.request import ResolutionRequest
from accessgraph.domain.value_objects import ResolutionSource, Scope


async def resolve_leadership(request: ResolutionRequest) -> Decision | None:
    """Owners and leads get team scope on non-critical actions inside their teams."""
    if request.action.is_critical:
        return None

    memberships = await request.memberships()
    leader = next((m for m in memberships if m.is_leadership), None)
    if leader is None:
        return None

    resource_team_id = request.ctx.resource_team_id
    if resource_team_id is not None and not any(
        m.team_id == resource_team_id for m in memberships
    ):
        return None

    return Decision(
        allowed=True,
        scope=Scope.TEAM,
        source=ResolutionSource.POSITION,
        team_id=leader.team_id,
        team_name=leader.team_name,
        can_delegate=True,
    )

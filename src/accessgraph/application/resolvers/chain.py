"""Resolver chain - the first resolver to reach a decision wins."""

from collections.abc import Awaitable, Callable, Sequence

from accessgraph.application.dto.permission_dto import Decision
from accessgraph.application.resolvers.group import resolve_group
from accessgraph.application.resolvers.inheritance import resolve_inheritance
from accessgraph.application.resolvers.leadership import resolve_leadership
from accessgraph.application.resolvers.override import resolve_override
from accessgraph.application.resolvers.position import resolve_position
from accessgraph.application.resolvers.request import ResolutionRequest

Resolver = Callable[[ResolutionRequest], Awaitable[Decision | None]]

# Position, leadership and inheritance yield nothing without memberships,
# so a person outside every team falls straight through to groups.
RESOLUTION_CHAIN: tuple[Resolver, ...] = (
    resolve_override,
    resolve_position,
    resolve_leadership,
    resolve_inheritance,
    resolve_group,
)


async def first_decision(
    resolvers: Sequence[Resolver],
    request: ResolutionRequest,
) -> Decision:
    """Run resolvers in order; deny with source ``none`` if all pass."""
    for resolver in resolvers:
        decision = await resolver(request)
        if decision is not None:
            return decision
    return Decision.deny()

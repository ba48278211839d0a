"""Permission resolvers, composed in order by the resolution chain."""

from accessgraph.application.resolvers.chain import (
    RESOLUTION_CHAIN,
    Resolver,
    first_decision,
)
from accessgraph.application.resolvers.group import resolve_group
from accessgraph.application.resolvers.inheritance import resolve_inheritance
from accessgraph.application.resolvers.leadership import resolve_leadership
from accessgraph.application.resolvers.membership import (
    MAX_HIERARCHY_DEPTH,
    TeamHierarchy,
    load_active_memberships,
)
from accessgraph.application.resolvers.override import resolve_override
from accessgraph.application.resolvers.position import resolve_position
from accessgraph.application.resolvers.request import ResolutionRequest
from accessgraph.application.resolvers.scope_matcher import pick_broadest, scope_allows

__all__ = [
    "MAX_HIERARCHY_DEPTH",
    "RESOLUTION_CHAIN",
    "ResolutionRequest",
    "Resolver",
    "TeamHierarchy",
    "first_decision",
    "load_active_memberships",
    "pick_broadest",
    "resolve_group",
    "resolve_inheritance",
    "resolve_leadership",
    "resolve_override",
    "resolve_position",
    "scope_allows",
]

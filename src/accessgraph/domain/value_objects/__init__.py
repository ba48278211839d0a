"""Domain value objects."""

from accessgraph.domain.value_objects.member_role import MemberRole
from accessgraph.domain.value_objects.resolution_source import ResolutionSource
from accessgraph.domain.value_objects.risk_level import RiskLevel
from accessgraph.domain.value_objects.scope import CASCADING_SCOPES, Scope, scope_rank

__all__ = [
    "CASCADING_SCOPES",
    "MemberRole",
    "ResolutionSource",
    "RiskLevel",
    "Scope",
    "scope_rank",
]

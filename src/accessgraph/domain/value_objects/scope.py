"""Permission scope - breadth of a grant."""

from enum import StrEnum


class Scope(StrEnum):
    """Scopes ordered by breadth: own < team < department < organization < global."""

    OWN = "own"
    TEAM = "team"
    DEPARTMENT = "department"
    ORGANIZATION = "organization"
    GLOBAL = "global"

    @property
    def rank(self) -> int:
        return _RANK[self]

    @property
    def cascades(self) -> bool:
        """Whether a grant at an ancestor team applies to descendant teams."""
        return self in CASCADING_SCOPES


_RANK = {
    Scope.OWN: 1,
    Scope.TEAM: 2,
    Scope.DEPARTMENT: 3,
    Scope.ORGANIZATION: 4,
    Scope.GLOBAL: 5,
}

CASCADING_SCOPES = frozenset({Scope.DEPARTMENT, Scope.ORGANIZATION, Scope.GLOBAL})


def scope_rank(scope: Scope | None) -> int:
    """Rank of a scope, 0 for no scope."""
    return scope.rank if scope is not None else 0

"""Scope matching and scope-based ranking of grants."""

from collections.abc import Callable, Iterable
from typing import TypeVar
from uuid import UUID

from accessgraph.domain.value_objects import Scope, scope_rank

T = TypeVar("T")


def scope_allows(
    scope: Scope,
    person_id: str,
    user_team_id: UUID | None,
    resource_owner_id: str | None,
    resource_team_id: UUID | None,
) -> bool:
    """Whether a grant with ``scope`` covers the given resource.

    ``department`` matches exactly like ``team``: the team hierarchy is only
    consulted when cascading grants from ancestor teams.
    """
    if scope == Scope.OWN:
        return resource_owner_id is not None and resource_owner_id == person_id
    if scope in (Scope.TEAM, Scope.DEPARTMENT):
        return resource_team_id is None or resource_team_id == user_team_id
    return scope in (Scope.ORGANIZATION, Scope.GLOBAL)


def pick_broadest(
    rows: Iterable[T],
    scope_of: Callable[[T], Scope | None],
    tie_key: Callable[[T], UUID],
) -> T | None:
    """Row with the broadest scope; ties go to the lowest id."""
    ordered = sorted(rows, key=lambda r: (-scope_rank(scope_of(r)), str(tie_key(r))))
    return ordered[0] if ordered else None

"""Membership repository port."""

from typing import Protocol

from accessgraph.domain.entities import Membership


class MembershipRepository(Protocol):
    """Port for team memberships."""

    async def list_active_for_person(self, person_id: str) -> list[Membership]: ...

"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from accessgraph.application.ports.repositories import (
    ActionTypeRepository,
    GroupRepository,
    MembershipRepository,
    OverrideRepository,
    PositionPermissionRepository,
    TeamRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def action_types(self) -> ActionTypeRepository: ...

    @property
    def teams(self) -> TeamRepository: ...

    @property
    def memberships(self) -> MembershipRepository: ...

    @property
    def position_permissions(self) -> PositionPermissionRepository: ...

    @property
    def overrides(self) -> OverrideRepository: ...

    @property
    def groups(self) -> GroupRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...

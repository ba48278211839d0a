"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from psycopg import Error as PsycopgError
from psycopg_pool import AsyncConnectionPool

from accessgraph.domain.exceptions import StoreUnavailable
from accessgraph.infrastructure.persistence.postgres.action_type_repository import (
    PostgresActionTypeRepository,
)
from accessgraph.infrastructure.persistence.postgres.group_repository import (
    PostgresGroupRepository,
)
from accessgraph.infrastructure.persistence.postgres.membership_repository import (
    PostgresMembershipRepository,
)
from accessgraph.infrastructure.persistence.postgres.override_repository import (
    PostgresOverrideRepository,
)
from accessgraph.infrastructure.persistence.postgres.position_permission_repository import (
    PostgresPositionPermissionRepository,
)
from accessgraph.infrastructure.persistence.postgres.team_repository import (
    PostgresTeamRepository,
)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._action_types = PostgresActionTypeRepository(self._conn)
        self._teams = PostgresTeamRepository(self._conn)
        self._memberships = PostgresMembershipRepository(self._conn)
        self._position_permissions = PostgresPositionPermissionRepository(self._conn)
        self._overrides = PostgresOverrideRepository(self._conn)
        self._groups = PostgresGroupRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def action_types(self) -> PostgresActionTypeRepository:
        return self._action_types

    @property
    def teams(self) -> PostgresTeamRepository:
        return self._teams

    @property
    def memberships(self) -> PostgresMembershipRepository:
        return self._memberships

    @property
    def position_permissions(self) -> PostgresPositionPermissionRepository:
        return self._position_permissions

    @property
    def overrides(self) -> PostgresOverrideRepository:
        return self._overrides

    @property
    def groups(self) -> PostgresGroupRepository:
        return self._groups

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager).

    Driver and pool errors surface as StoreUnavailable.
    """

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        try:
            uow = PostgresUnitOfWork(pool)
            async with uow:
                try:
                    yield uow
                    await uow.commit()
                except BaseException:
                    await uow.rollback()
                    raise
        except PsycopgError as e:
            raise StoreUnavailable(str(e) or "Database error") from e

    return factory

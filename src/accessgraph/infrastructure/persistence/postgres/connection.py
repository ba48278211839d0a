"""PostgreSQL async connection pool."""

from psycopg import Error as PsycopgError
from psycopg_pool import AsyncConnectionPool

from accessgraph.domain.exceptions import StoreUnavailable


def create_pool(conninfo: str, min_size: int = 2, max_size: int = 10) -> AsyncConnectionPool:
    """Create async connection pool.

    Pool is created with open=False. Caller must call await pool.open()
    before use (e.g. via LifespanMiddleware on ASGI startup).
    """
    return AsyncConnectionPool(
        conninfo=conninfo,
        min_size=min_size,
        max_size=max_size,
        open=False,
    )


async def ping(pool: AsyncConnectionPool) -> None:
    """Round-trip to the database; raises StoreUnavailable when unreachable."""
    try:
        async with pool.connection() as conn:
            await conn.execute("SELECT 1")
    except PsycopgError as e:
        raise StoreUnavailable("Database is unreachable") from e

"""Lifespan middleware - opens pool and warms the action registry on startup."""

from typing import Any

from psycopg_pool import AsyncConnectionPool

from accessgraph.infrastructure.registry.action_registry import CachedActionRegistry


class LifespanMiddleware:
    """Opens the connection pool on startup and closes it on shutdown."""

    def __init__(
        self,
        pool: AsyncConnectionPool,
        action_registry: CachedActionRegistry | None = None,
    ) -> None:
        self._pool = pool
        self._registry = action_registry

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Open pool, then load the first action type snapshot."""
        await self._pool.open()
        if self._registry is not None:
            await self._registry.reload()

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Close pool when ASGI server shuts down."""
        await self._pool.close()

"""Action registry backed by an immutable snapshot refreshed on an interval."""

import asyncio
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from types import MappingProxyType

from accessgraph.domain.entities import ActionType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActionCatalog:
    """Read-only snapshot of all action types keyed by code."""

    by_code: MappingProxyType
    loaded_at: float

    @classmethod
    def build(cls, actions: list[ActionType], loaded_at: float) -> "ActionCatalog":
        return cls(by_code=MappingProxyType({a.code: a for a in actions}), loaded_at=loaded_at)

    def active(self) -> list[ActionType]:
        return [a for a in self.by_code.values() if a.is_active]


class CachedActionRegistry:
    """Loads action types through a unit of work and serves them from memory.

    The snapshot is replaced, never mutated, once ``ttl_seconds`` have passed.
    Load failures propagate to the caller.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        ttl_seconds: float = 300.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._ttl = ttl_seconds
        self._clock = clock
        self._catalog: ActionCatalog | None = None
        self._lock = asyncio.Lock()

    async def lookup(self, code: str) -> ActionType | None:
        catalog = await self._current()
        return catalog.by_code.get(code)

    async def list_active(self) -> list[ActionType]:
        catalog = await self._current()
        return catalog.active()

    async def reload(self) -> ActionCatalog:
        """Force a fresh snapshot from the store."""
        async with self._uow_factory() as uow:
            actions = await uow.action_types.list_all()
        self._catalog = ActionCatalog.build(actions, loaded_at=self._clock())
        logger.info("Loaded %d action types", len(actions))
        return self._catalog

    def _is_stale(self, catalog: ActionCatalog | None) -> bool:
        return catalog is None or self._clock() - catalog.loaded_at >= self._ttl

    async def _current(self) -> ActionCatalog:
        catalog = self._catalog
        if not self._is_stale(catalog):
            return catalog
        async with self._lock:
            if self._is_stale(self._catalog):
                return await self.reload()
            return self._catalog

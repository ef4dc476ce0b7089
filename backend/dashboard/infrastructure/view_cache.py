"""View Cache — process-local cache of rendered view payloads keyed by path.

Invariants:
    - revalidate(path) guarantees the next get_or_load(path) calls the loader
    - A load that started before a revalidate never repopulates the entry

Design Decisions:
    - Per-path generation counter instead of a lock: loads run concurrently,
      stale results are simply not stored
    - In-process dict: single-worker deployment; multi-worker setups get
      per-worker caches that are each invalidated by their own writes
"""

import logging
from typing import Any, Awaitable, Callable

logger = logging.getLogger(__name__)


class ViewCache:
    """Revalidator implementation plus read-through access for list routes."""

    def __init__(self):
        self._entries: dict[str, Any] = {}
        self._generations: dict[str, int] = {}

    async def get_or_load(
        self, path: str, loader: Callable[[], Awaitable[Any]],
    ) -> Any:
        if path in self._entries:
            return self._entries[path]
        generation = self._generations.get(path, 0)
        value = await loader()
        if self._generations.get(path, 0) == generation:
            self._entries[path] = value
        return value

    async def revalidate(self, path: str) -> None:
        self._generations[path] = self._generations.get(path, 0) + 1
        self._entries.pop(path, None)
        logger.debug(f"View revalidated: {path}")

    def is_cached(self, path: str) -> bool:
        return path in self._entries

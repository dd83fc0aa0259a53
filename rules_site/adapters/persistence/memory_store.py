"""In-memory counter store — state lives for the process lifetime."""

from __future__ import annotations

from rules_site.application.ports.counter_store import CounterStore
from rules_site.domain.entities.stats import LikeStats


class InMemoryCounterStore(CounterStore):
    """Single event loop, no awaits between read and write: trivially atomic."""

    def __init__(self) -> None:
        self._visit_count = 0
        self._likes: set[str] = set()

    async def get_visit_count(self) -> int:
        return self._visit_count

    async def increment_visit(self) -> int:
        self._visit_count += 1
        return self._visit_count

    async def get_like_stats(self, client_id: str) -> LikeStats:
        return LikeStats(count=len(self._likes), is_liked=client_id in self._likes)

    async def set_like(self, client_id: str, liked: bool) -> LikeStats:
        if liked:
            self._likes.add(client_id)
        else:
            self._likes.discard(client_id)
        return await self.get_like_stats(client_id)

    async def reset(self) -> None:
        self._visit_count = 0
        self._likes.clear()

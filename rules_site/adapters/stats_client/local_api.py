"""Local stats client — implements StatsApi over the local counter store."""

from __future__ import annotations

import asyncio

from rules_site.adapters.storage.client_token import ClientTokenProvider
from rules_site.application.ports.counter_store import CounterStore
from rules_site.application.ports.stats_api import StatsApi
from rules_site.domain.entities.stats import LikeStats


class LocalStatsApi(StatsApi):
    """Answers from a local store, after a small simulated network delay."""

    def __init__(
        self,
        store: CounterStore,
        tokens: ClientTokenProvider,
        latency_seconds: float = 0.01,
    ):
        self._store = store
        self._tokens = tokens
        self._latency = latency_seconds

    async def increment_visit(self) -> int:
        await self._simulate_latency()
        return await self._store.increment_visit()

    async def get_visit_count(self) -> int:
        await self._simulate_latency()
        return await self._store.get_visit_count()

    async def toggle_like(self, is_liked: bool) -> LikeStats:
        await self._simulate_latency()
        return await self._store.set_like(self._tokens.get_client_id(), not is_liked)

    async def get_like_stats(self) -> LikeStats:
        await self._simulate_latency()
        return await self._store.get_like_stats(self._tokens.get_client_id())

    async def _simulate_latency(self) -> None:
        if self._latency > 0:
            await asyncio.sleep(self._latency)

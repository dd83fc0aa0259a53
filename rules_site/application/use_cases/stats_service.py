"""StatsService — visit and like operations over the counter store."""

from __future__ import annotations

import logging

from rules_site.application.ports.counter_store import CounterStore
from rules_site.domain.entities.stats import LikeStats, VisitStats
from rules_site.domain.value_objects.enums import LikeAction

logger = logging.getLogger(__name__)


class StatsService:
    """Stateless handlers over one shared CounterStore.

    StoreUnavailable from the store propagates unchanged; the API layer
    turns it into a 500.
    """

    def __init__(self, store: CounterStore):
        self._store = store

    async def get_visits(self) -> VisitStats:
        count = await self._store.get_visit_count()
        logger.info("[Visit] GET - count=%d", count)
        return VisitStats(count=count)

    async def record_visit(self) -> VisitStats:
        count = await self._store.increment_visit()
        logger.info("[Visit] POST - new count=%d", count)
        return VisitStats(count=count)

    async def get_likes(self, client_id: str) -> LikeStats:
        stats = await self._store.get_like_stats(client_id)
        logger.info("[Like] GET - client=%s, stats=%s", client_id, stats)
        return stats

    async def apply_like_action(self, client_id: str, action: str | None) -> LikeStats:
        """Add or remove the client's like.

        Anything other than "add"/"remove" (including no action) leaves the
        like set untouched and returns the current snapshot.
        """
        try:
            parsed = LikeAction(action)
        except ValueError:
            logger.info("[Like] POST - ignoring unknown action %r from %s", action, client_id)
            return await self._store.get_like_stats(client_id)

        stats = await self._store.set_like(client_id, parsed == LikeAction.ADD)
        logger.info("[Like] POST - client=%s, action=%s, stats=%s", client_id, parsed.value, stats)
        return stats

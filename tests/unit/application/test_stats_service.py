"""Tests for StatsService with the in-memory store and a failing fake."""

import pytest

from rules_site.application.ports.counter_store import CounterStore
from rules_site.application.use_cases.stats_service import StatsService
from rules_site.domain.entities.stats import LikeStats, VisitStats
from rules_site.domain.errors import StoreUnavailable


class BrokenStore(CounterStore):
    async def get_visit_count(self):
        raise StoreUnavailable("db down")

    async def increment_visit(self):
        raise StoreUnavailable("db down")

    async def get_like_stats(self, client_id):
        raise StoreUnavailable("db down")

    async def set_like(self, client_id, liked):
        raise StoreUnavailable("db down")

    async def reset(self):
        raise StoreUnavailable("db down")


@pytest.fixture
def service(memory_store):
    return StatsService(memory_store)


@pytest.mark.asyncio
async def test_visit_get_then_post(service):
    assert await service.get_visits() == VisitStats(count=0)
    assert await service.record_visit() == VisitStats(count=1)
    assert await service.record_visit() == VisitStats(count=2)
    assert await service.get_visits() == VisitStats(count=2)


@pytest.mark.asyncio
async def test_like_add_and_remove(service):
    assert await service.apply_like_action("A", "add") == LikeStats(count=1, is_liked=True)
    assert await service.get_likes("A") == LikeStats(count=1, is_liked=True)
    assert await service.apply_like_action("A", "remove") == LikeStats(count=0, is_liked=False)


@pytest.mark.asyncio
@pytest.mark.parametrize("action", ["toggle", "ADD", "", None, 5])
async def test_unknown_action_returns_unmodified_snapshot(service, action):
    await service.apply_like_action("A", "add")
    assert await service.apply_like_action("A", action) == LikeStats(count=1, is_liked=True)
    assert await service.apply_like_action("B", action) == LikeStats(count=1, is_liked=False)


@pytest.mark.asyncio
async def test_store_unavailable_propagates():
    service = StatsService(BrokenStore())
    with pytest.raises(StoreUnavailable):
        await service.record_visit()
    with pytest.raises(StoreUnavailable):
        await service.apply_like_action("A", "toggle")

"""Tests for InMemoryCounterStore."""

import pytest

from rules_site.domain.entities.stats import LikeStats


@pytest.mark.asyncio
async def test_fresh_store_counts_from_zero(memory_store):
    assert await memory_store.get_visit_count() == 0
    assert await memory_store.increment_visit() == 1
    assert await memory_store.increment_visit() == 2


@pytest.mark.asyncio
async def test_serial_increments_step_by_one(memory_store):
    results = [await memory_store.increment_visit() for _ in range(25)]
    assert results == list(range(1, 26))


@pytest.mark.asyncio
async def test_get_visit_count_has_no_side_effects(memory_store):
    await memory_store.increment_visit()
    assert await memory_store.get_visit_count() == 1
    assert await memory_store.get_visit_count() == 1


@pytest.mark.asyncio
async def test_like_scenario(memory_store):
    assert await memory_store.get_like_stats("A") == LikeStats(count=0, is_liked=False)
    assert await memory_store.set_like("A", True) == LikeStats(count=1, is_liked=True)
    assert await memory_store.set_like("A", True) == LikeStats(count=1, is_liked=True)
    assert await memory_store.set_like("A", False) == LikeStats(count=0, is_liked=False)


@pytest.mark.asyncio
async def test_remove_absent_like_is_noop(memory_store):
    await memory_store.set_like("A", True)
    assert await memory_store.set_like("B", False) == LikeStats(count=1, is_liked=False)


@pytest.mark.asyncio
async def test_membership_is_per_client(memory_store):
    await memory_store.set_like("A", True)
    await memory_store.set_like("B", True)
    assert await memory_store.get_like_stats("C") == LikeStats(count=2, is_liked=False)
    assert (await memory_store.get_like_stats("B")).is_liked is True


@pytest.mark.asyncio
async def test_reset(memory_store):
    await memory_store.increment_visit()
    await memory_store.set_like("A", True)
    await memory_store.reset()
    assert await memory_store.get_visit_count() == 0
    assert await memory_store.get_like_stats("A") == LikeStats(count=0, is_liked=False)

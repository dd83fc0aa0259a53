"""Tests for the visit counter and like button hooks."""

import asyncio

import pytest

from rules_site.application.hooks.like_button import LikeButtonHook, LikeButtonState, TogglePhase
from rules_site.application.hooks.visit_counter import VisitCounterHook, VisitCounterState
from rules_site.application.ports.stats_api import StatsApi
from rules_site.domain.entities.stats import LikeStats

# ─── Fakes ───────────────────────────────────────────────────────────


class FakeStatsApi(StatsApi):
    """In-memory StatsApi with switchable failures and an optional gate."""

    def __init__(self, visits: int = 0, likes: int = 0, is_liked: bool = False):
        self.visits = visits
        self.likes = likes
        self.is_liked = is_liked
        self.increment_calls = 0
        self.fail_toggle = False
        self.fail_reads = False
        self.gate: asyncio.Event | None = None

    async def increment_visit(self):
        self.increment_calls += 1
        self.visits += 1
        return self.visits

    async def get_visit_count(self):
        if self.fail_reads:
            raise RuntimeError("network down")
        return self.visits

    async def toggle_like(self, is_liked):
        if self.gate is not None:
            await self.gate.wait()
        if self.fail_toggle:
            raise RuntimeError("network down")
        if is_liked and self.is_liked:
            self.likes -= 1
        elif not is_liked and not self.is_liked:
            self.likes += 1
        self.is_liked = not is_liked
        return LikeStats(count=self.likes, is_liked=self.is_liked)

    async def get_like_stats(self):
        if self.fail_reads:
            raise RuntimeError("network down")
        return LikeStats(count=self.likes, is_liked=self.is_liked)


# ─── VisitCounterHook ────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_visit_hook_fetches_then_increments():
    api = FakeStatsApi(visits=41)
    hook = VisitCounterHook(api)
    published = []
    hook.subscribe(published.append)

    await hook.mount()

    assert published == [
        VisitCounterState(count=41, is_loading=False),
        VisitCounterState(count=42, is_loading=False),
    ]
    assert api.increment_calls == 1


@pytest.mark.asyncio
async def test_visit_hook_remount_never_increments_twice():
    api = FakeStatsApi()
    hook = VisitCounterHook(api)
    await hook.mount()
    hook.unmount()
    await hook.mount()
    assert api.increment_calls == 1
    assert hook.state.count == 1


@pytest.mark.asyncio
async def test_visit_hook_discards_results_after_unmount():
    api = FakeStatsApi(visits=5)
    hook = VisitCounterHook(api)
    published = []
    hook.subscribe(published.append)

    original = api.get_visit_count

    async def get_then_unmount():
        value = await original()
        hook.unmount()
        return value

    api.get_visit_count = get_then_unmount
    await hook.mount()

    assert published == []
    assert hook.state == VisitCounterState()
    assert api.increment_calls == 0


@pytest.mark.asyncio
async def test_visit_hook_failure_falls_back_to_zero():
    api = FakeStatsApi(visits=9)
    api.fail_reads = True
    hook = VisitCounterHook(api)
    await hook.mount()
    assert hook.state == VisitCounterState(count=0, is_loading=False)


# ─── LikeButtonHook ──────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_like_hook_loads_stats_on_mount():
    hook = LikeButtonHook(FakeStatsApi(likes=3, is_liked=True))
    await hook.mount()
    assert hook.state == LikeButtonState(is_liked=True, like_count=3, is_loading=False)


@pytest.mark.asyncio
async def test_like_hook_load_failure_defaults():
    api = FakeStatsApi(likes=3, is_liked=True)
    api.fail_reads = True
    hook = LikeButtonHook(api)
    await hook.mount()
    assert hook.state == LikeButtonState(is_liked=False, like_count=0, is_loading=False)


@pytest.mark.asyncio
async def test_like_hook_publishes_optimistic_then_authoritative():
    api = FakeStatsApi(likes=4)
    hook = LikeButtonHook(api)
    await hook.mount()
    published = []
    hook.subscribe(published.append)

    await hook.toggle()

    assert published[0] == LikeButtonState(
        is_liked=True, like_count=5, is_loading=False, phase=TogglePhase.TOGGLING
    )
    assert published[-1] == LikeButtonState(
        is_liked=True, like_count=5, is_loading=False, phase=TogglePhase.IDLE
    )


@pytest.mark.asyncio
async def test_like_hook_reconciles_with_server_snapshot():
    api = FakeStatsApi(likes=4)
    hook = LikeButtonHook(api)
    await hook.mount()
    api.likes = 10  # other visitors liked meanwhile

    state = await hook.toggle()

    assert (state.is_liked, state.like_count) == (True, 11)


@pytest.mark.asyncio
async def test_like_hook_rolls_back_exactly_on_failure():
    api = FakeStatsApi(likes=7, is_liked=True)
    hook = LikeButtonHook(api)
    await hook.mount()
    before = hook.state
    api.fail_toggle = True
    published = []
    hook.subscribe(published.append)

    state = await hook.toggle()

    assert published[0].like_count == 6 and published[0].is_liked is False
    assert state == before
    assert (state.is_liked, state.like_count) == (True, 7)


@pytest.mark.asyncio
async def test_like_hook_serializes_concurrent_toggles():
    api = FakeStatsApi(likes=0)
    hook = LikeButtonHook(api)
    await hook.mount()
    api.gate = asyncio.Event()

    first = asyncio.create_task(hook.toggle())
    second = asyncio.create_task(hook.toggle())
    await asyncio.sleep(0)
    assert hook.state.phase == TogglePhase.TOGGLING
    assert hook.state.like_count == 1

    api.gate.set()
    await asyncio.gather(first, second)

    assert hook.state == LikeButtonState(is_liked=False, like_count=0, is_loading=False)
    assert api.likes == 0


@pytest.mark.asyncio
async def test_like_hook_discards_toggle_result_after_unmount():
    api = FakeStatsApi(likes=2)
    hook = LikeButtonHook(api)
    await hook.mount()
    api.gate = asyncio.Event()
    published = []
    hook.subscribe(published.append)

    task = asyncio.create_task(hook.toggle())
    await asyncio.sleep(0)
    assert [s.phase for s in published] == [TogglePhase.TOGGLING]

    hook.unmount()
    api.gate.set()
    await task

    assert len(published) == 1
    assert api.likes == 3
    assert hook.state.phase == TogglePhase.TOGGLING


@pytest.mark.asyncio
async def test_like_hook_unsubscribe():
    hook = LikeButtonHook(FakeStatsApi())
    published = []
    unsubscribe = hook.subscribe(published.append)
    unsubscribe()
    await hook.mount()
    assert published == []

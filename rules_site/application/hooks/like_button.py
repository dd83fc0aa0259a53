"""LikeButtonHook — like state with optimistic toggling."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import Enum

from rules_site.application.ports.stats_api import StatsApi

logger = logging.getLogger(__name__)


class TogglePhase(str, Enum):
    IDLE = "idle"
    TOGGLING = "toggling"


@dataclass(frozen=True)
class LikeButtonState:
    is_liked: bool = False
    like_count: int = 0
    is_loading: bool = True
    phase: TogglePhase = TogglePhase.IDLE


class LikeButtonHook:
    """Like/unlike with optimistic update, reconcile, or exact rollback.

    A toggle goes IDLE → TOGGLING → IDLE:
    1. snapshot the pre-toggle state,
    2. publish the speculative state (flipped, count ±1),
    3. publish the server snapshot on success, or the pre-toggle values on
       failure.

    Toggles are serialized: a second toggle waits for the first to settle
    and starts from its reconciled state, so optimistic states never
    interleave.
    """

    def __init__(self, api: StatsApi):
        self._api = api
        self._state = LikeButtonState()
        self._listeners: list[Callable[[LikeButtonState], None]] = []
        self._mounted = False
        self._toggle_lock = asyncio.Lock()

    @property
    def state(self) -> LikeButtonState:
        return self._state

    def subscribe(self, listener: Callable[[LikeButtonState], None]) -> Callable[[], None]:
        """Register *listener*; returns a callable that unsubscribes it."""
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    async def mount(self) -> None:
        self._mounted = True
        try:
            stats = await self._api.get_like_stats()
        except Exception:
            logger.exception("Loading like stats failed")
            self._publish(replace(self._state, is_liked=False, like_count=0, is_loading=False))
            return
        self._publish(
            replace(self._state, is_liked=stats.is_liked, like_count=stats.count, is_loading=False)
        )

    def unmount(self) -> None:
        self._mounted = False

    async def toggle(self) -> LikeButtonState:
        async with self._toggle_lock:
            previous = self._state
            speculative = replace(
                previous,
                is_liked=not previous.is_liked,
                like_count=previous.like_count - 1 if previous.is_liked else previous.like_count + 1,
                phase=TogglePhase.TOGGLING,
            )
            self._publish(speculative)

            try:
                stats = await self._api.toggle_like(previous.is_liked)
            except Exception:
                logger.warning("Like toggle failed, rolling back", exc_info=True)
                self._publish(replace(previous, phase=TogglePhase.IDLE))
            else:
                self._publish(
                    replace(
                        speculative,
                        is_liked=stats.is_liked,
                        like_count=stats.count,
                        phase=TogglePhase.IDLE,
                    )
                )
            return self._state

    def _publish(self, state: LikeButtonState) -> None:
        if not self._mounted:
            logger.debug("Discarding like state %s after unmount", state)
            return
        self._state = state
        for listener in list(self._listeners):
            listener(state)

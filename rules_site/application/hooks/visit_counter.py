"""VisitCounterHook — reactive visit count for a page view."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from rules_site.application.ports.stats_api import StatsApi

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VisitCounterState:
    count: int = 0
    is_loading: bool = True


class VisitCounterHook:
    """Fetch-then-increment, exactly once per hook instance.

    The one-shot flag outlives unmount, so a remount of the same instance
    reads the count but never increments it again.
    """

    def __init__(self, api: StatsApi):
        self._api = api
        self._state = VisitCounterState()
        self._listeners: list[Callable[[VisitCounterState], None]] = []
        self._mounted = False
        self._has_incremented = False

    @property
    def state(self) -> VisitCounterState:
        return self._state

    def subscribe(self, listener: Callable[[VisitCounterState], None]) -> Callable[[], None]:
        """Register *listener*; returns a callable that unsubscribes it."""
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    async def mount(self) -> None:
        self._mounted = True
        try:
            current = await self._api.get_visit_count()
            if not self._mounted:
                return
            self._publish(VisitCounterState(count=current, is_loading=False))

            if self._has_incremented:
                return
            self._has_incremented = True

            new_count = await self._api.increment_visit()
            self._publish(VisitCounterState(count=new_count, is_loading=False))
        except Exception:
            logger.exception("Visit counter failed, re-reading the count")
            if not self._mounted:
                return
            try:
                fallback = await self._api.get_visit_count()
            except Exception:
                logger.exception("Visit count re-read failed, showing 0")
                fallback = 0
            self._publish(VisitCounterState(count=fallback, is_loading=False))

    def unmount(self) -> None:
        self._mounted = False

    def _publish(self, state: VisitCounterState) -> None:
        if not self._mounted:
            logger.debug("Discarding visit state %s after unmount", state)
            return
        self._state = state
        for listener in list(self._listeners):
            listener(state)

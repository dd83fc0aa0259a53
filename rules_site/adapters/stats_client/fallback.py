"""Fallback stats client — tries StatsApi implementations in policy order."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import TypeVar

from rules_site.application.ports.stats_api import StatsApi
from rules_site.domain.entities.stats import LikeStats

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FallbackStatsApi(StatsApi):
    """Chain of StatsApi implementations sharing one interface.

    Each call goes to the first implementation; on any failure the same
    logical operation is retried on the next one. Callers cannot tell which
    link answered. When every link fails the call resolves to a zero/False
    default and never raises.
    """

    def __init__(self, chain: Sequence[StatsApi]):
        if not chain:
            raise ValueError("FallbackStatsApi needs at least one StatsApi")
        self._chain = list(chain)

    async def increment_visit(self) -> int:
        return await self._first_success("increment_visit", lambda api: api.increment_visit(), 0)

    async def get_visit_count(self) -> int:
        return await self._first_success("get_visit_count", lambda api: api.get_visit_count(), 0)

    async def toggle_like(self, is_liked: bool) -> LikeStats:
        return await self._first_success(
            "toggle_like",
            lambda api: api.toggle_like(is_liked),
            LikeStats(count=0, is_liked=False),
        )

    async def get_like_stats(self) -> LikeStats:
        return await self._first_success(
            "get_like_stats",
            lambda api: api.get_like_stats(),
            LikeStats(count=0, is_liked=False),
        )

    async def _first_success(
        self,
        operation: str,
        call: Callable[[StatsApi], Awaitable[T]],
        default: T,
    ) -> T:
        for api in self._chain:
            try:
                return await call(api)
            except Exception as e:
                logger.warning(
                    "%s via %s failed (%s), trying next", operation, type(api).__name__, e
                )
        logger.error("%s failed on every stats backend, using default %r", operation, default)
        return default

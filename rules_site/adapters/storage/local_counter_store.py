"""Local counter store — the stats client's offline fallback.

Keeps the site-wide counters in persistent key/value storage and the
debounce timestamp in per-session storage, mirroring what a browser tab
would keep in localStorage and sessionStorage.
"""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Callable

from rules_site.application.ports.counter_store import CounterStore
from rules_site.application.ports.key_value_storage import KeyValueStorage
from rules_site.domain.entities.stats import LikeStats
from rules_site.domain.policies.debounce import is_within_cooldown

logger = logging.getLogger(__name__)

VISIT_COUNT_KEY = "globalVisitCount"
LIKES_KEY = "globalLikes"
LAST_INCREMENT_KEY = "lastVisitIncrement"

DEFAULT_DEBOUNCE_SECONDS = 2.0


class LocalCounterStore(CounterStore):
    def __init__(
        self,
        storage: KeyValueStorage,
        session_storage: KeyValueStorage,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
        clock: Callable[[], float] = time.time,
    ):
        self._storage = storage
        self._session = session_storage
        self._debounce_seconds = debounce_seconds
        self._clock = clock

    async def get_visit_count(self) -> int:
        return self._load_visit_count()

    async def increment_visit(self) -> int:
        visit_count = self._load_visit_count()
        now_ms = int(self._clock() * 1000)

        last_ms = _parse_int(self._session.get_item(LAST_INCREMENT_KEY))
        if is_within_cooldown(last_ms, now_ms, self._debounce_seconds):
            logger.debug("Visit increment debounced (last=%s, now=%d)", last_ms, now_ms)
            return visit_count

        self._session.set_item(LAST_INCREMENT_KEY, str(now_ms))
        new_count = visit_count + 1
        self._storage.set_item(VISIT_COUNT_KEY, str(new_count))
        return new_count

    async def get_like_stats(self, client_id: str) -> LikeStats:
        likes = self._load_likes()
        return LikeStats(count=len(likes), is_liked=client_id in likes)

    async def set_like(self, client_id: str, liked: bool) -> LikeStats:
        likes = self._load_likes()
        if liked:
            likes.add(client_id)
        else:
            likes.discard(client_id)
        self._storage.set_item(LIKES_KEY, json.dumps(sorted(likes)))
        return LikeStats(count=len(likes), is_liked=client_id in likes)

    async def reset(self) -> None:
        self._storage.remove_item(VISIT_COUNT_KEY)
        self._storage.remove_item(LIKES_KEY)
        self._session.remove_item(LAST_INCREMENT_KEY)

    def _load_visit_count(self) -> int:
        count = _parse_int(self._storage.get_item(VISIT_COUNT_KEY))
        if count is None or count < 0:
            return 0
        return count

    def _load_likes(self) -> set[str]:
        raw = self._storage.get_item(LIKES_KEY)
        if not raw:
            return set()
        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("Stored likes are not valid JSON, starting from an empty set")
            return set()
        if not isinstance(data, list):
            return set()
        return {item for item in data if isinstance(item, str)}


def _parse_int(raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return None

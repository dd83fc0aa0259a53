"""Inspect or reset the visit/like counters.

Usage:
    python -m rules_site.tools.stats_admin                # show server counters
    python -m rules_site.tools.stats_admin --reset        # zero server counters
    python -m rules_site.tools.stats_admin --local        # show local fallback storage
    python -m rules_site.tools.stats_admin --local --reset
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from rules_site.adapters.storage.key_value import JsonFileStorage, MemoryStorage
from rules_site.adapters.storage.local_counter_store import LocalCounterStore
from rules_site.application.ports.counter_store import CounterStore
from rules_site.config import settings
from rules_site.domain.errors import StoreUnavailable
from rules_site.domain.policies.pluralize import pluralize_views
from rules_site.domain.value_objects.enums import StoreBackend

logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
logger = logging.getLogger(__name__)

# Like counts are per-client; this id is never a real liker.
_PROBE_CLIENT_ID = "stats-admin"


async def show(store: CounterStore) -> dict[str, int]:
    visits = await store.get_visit_count()
    likes = await store.get_like_stats(_PROBE_CLIENT_ID)
    print(f"\n{'='*50}")
    print(f"Visits: {visits} {pluralize_views(visits)}")
    print(f"Likes:  {likes.count}")
    print(f"{'='*50}\n")
    return {"visits": visits, "likes": likes.count}


async def reset(store: CounterStore) -> None:
    await store.reset()
    logger.info("Counters reset")


def _open_store(local: bool) -> CounterStore:
    if local:
        logger.info("Using local storage at %s", settings.local_storage_path)
        return LocalCounterStore(JsonFileStorage(settings.local_storage_path), MemoryStorage())

    if settings.stats_backend != StoreBackend.SQL:
        logger.error(
            "STATS_BACKEND=%s keeps counters inside the server process; "
            "only the sql backend can be inspected from here",
            settings.stats_backend.value,
        )
        sys.exit(1)

    from rules_site.adapters.persistence.database import async_session_factory
    from rules_site.adapters.persistence.sql_store import SqlCounterStore

    return SqlCounterStore(async_session_factory)


def main():
    parser = argparse.ArgumentParser(description="Inspect or reset Rules Site counters")
    parser.add_argument(
        "--reset", action="store_true",
        help="Zero the visit counter and clear all likes",
    )
    parser.add_argument(
        "--local", action="store_true",
        help="Operate on the stats client's local fallback storage",
    )
    args = parser.parse_args()

    store = _open_store(args.local)

    async def run_all():
        if args.reset:
            await reset(store)
        await show(store)

    try:
        asyncio.run(run_all())
    except StoreUnavailable as e:
        logger.error("Counter store unavailable: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()

"""FastAPI dependency injection — wires the counter store into the service."""

from __future__ import annotations

import logging

from fastapi import Depends, Request

from rules_site.adapters.persistence.memory_store import InMemoryCounterStore
from rules_site.application.ports.counter_store import CounterStore
from rules_site.application.use_cases.stats_service import StatsService
from rules_site.config import settings
from rules_site.domain.policies.client_identity import resolve_client_id
from rules_site.domain.value_objects.enums import StoreBackend

logger = logging.getLogger(__name__)


def build_counter_store(backend: StoreBackend) -> CounterStore:
    """Create the process-wide counter store for *backend*."""
    if backend == StoreBackend.SQL:
        from rules_site.adapters.persistence.database import async_session_factory
        from rules_site.adapters.persistence.sql_store import SqlCounterStore

        logger.info("Using SQL counter store")
        return SqlCounterStore(async_session_factory)

    logger.info("Using in-memory counter store (resets on restart)")
    return InMemoryCounterStore()


# Singleton store: one shared handle for every request
_counter_store = build_counter_store(settings.stats_backend)


def get_counter_store() -> CounterStore:
    return _counter_store


def get_stats_service(store: CounterStore = Depends(get_counter_store)) -> StatsService:
    return StatsService(store)


def get_client_id(request: Request) -> str:
    return resolve_client_id(request.headers)

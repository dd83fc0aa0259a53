"""Stats client wiring — network first, local fallback second."""

from __future__ import annotations

import logging

from rules_site.adapters.stats_client.fallback import FallbackStatsApi
from rules_site.adapters.stats_client.http_api import HttpStatsApi
from rules_site.adapters.stats_client.local_api import LocalStatsApi
from rules_site.adapters.storage.client_token import ClientTokenProvider
from rules_site.adapters.storage.key_value import JsonFileStorage, MemoryStorage
from rules_site.adapters.storage.local_counter_store import LocalCounterStore
from rules_site.application.ports.stats_api import StatsApi
from rules_site.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


def build_stats_api(config: Settings | None = None) -> StatsApi:
    """Compose the client chain from settings.

    The HTTP link is skipped when STATS_API_URL is empty; the local link is
    always last. A fresh MemoryStorage plays the per-session storage.
    """
    config = config or default_settings
    storage = JsonFileStorage(config.local_storage_path)
    local = LocalStatsApi(
        store=LocalCounterStore(
            storage=storage,
            session_storage=MemoryStorage(),
            debounce_seconds=config.visit_debounce_seconds,
        ),
        tokens=ClientTokenProvider(storage),
        latency_seconds=config.mock_latency_seconds,
    )

    chain: list[StatsApi] = []
    if config.stats_api_url:
        chain.append(HttpStatsApi(config.stats_api_url, timeout=config.stats_api_timeout))
    else:
        logger.info("STATS_API_URL not set, stats client runs on local storage only")
    chain.append(local)
    return FallbackStatsApi(chain)

"""HTTP stats client — implements StatsApi against the stats service."""

from __future__ import annotations

import logging

import httpx

from rules_site.adapters.stats_client.errors import StatsApiError
from rules_site.application.ports.stats_api import StatsApi
from rules_site.domain.entities.stats import LikeStats
from rules_site.domain.value_objects.enums import LikeAction

logger = logging.getLogger(__name__)

VISIT_PATH = "/api/stats/visit"
LIKE_PATH = "/api/stats/like"


class HttpStatsApi(StatsApi):
    """Talks to ``/api/stats/*``; every failure surfaces as StatsApiError."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def increment_visit(self) -> int:
        data = await self._request("POST", VISIT_PATH)
        return _parse_count(data)

    async def get_visit_count(self) -> int:
        data = await self._request("GET", VISIT_PATH)
        return _parse_count(data)

    async def toggle_like(self, is_liked: bool) -> LikeStats:
        action = LikeAction.REMOVE if is_liked else LikeAction.ADD
        data = await self._request("POST", LIKE_PATH, json={"action": action.value})
        return _parse_like_stats(data)

    async def get_like_stats(self) -> LikeStats:
        data = await self._request("GET", LIKE_PATH)
        return _parse_like_stats(data)

    async def _request(self, method: str, path: str, json: dict | None = None) -> dict:
        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.request(method, path, json=json)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as e:
            raise StatsApiError(f"{method} {path} failed: {e}") from e
        except ValueError as e:
            raise StatsApiError(f"{method} {path} returned a non-JSON body") from e

        if not isinstance(data, dict):
            raise StatsApiError(f"{method} {path} returned {type(data).__name__}, expected object")
        logger.debug("%s %s → %s", method, path, data)
        return data


def _parse_count(data: dict) -> int:
    count = data.get("count")
    if not isinstance(count, int) or isinstance(count, bool):
        raise StatsApiError(f"Malformed visit payload: {data!r}")
    return count


def _parse_like_stats(data: dict) -> LikeStats:
    try:
        return LikeStats.from_dict(data)
    except ValueError as e:
        raise StatsApiError(str(e)) from e

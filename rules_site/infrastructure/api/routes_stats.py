"""Stats endpoints — visit counter and like toggle."""

from __future__ import annotations

from fastapi import APIRouter, Body, Depends, Response

from rules_site.application.use_cases.stats_service import StatsService
from rules_site.infrastructure.api.dependencies import get_client_id, get_stats_service

router = APIRouter(prefix="/stats", tags=["stats"])


def _preflight() -> Response:
    return Response(status_code=200, media_type="application/json")


@router.get("/visit")
async def get_visit_count(service: StatsService = Depends(get_stats_service)):
    """Current visit count, no mutation."""
    return (await service.get_visits()).to_dict()


@router.post("/visit")
async def increment_visit(service: StatsService = Depends(get_stats_service)):
    """Add one visit and return the new count."""
    return (await service.record_visit()).to_dict()


@router.options("/visit")
async def visit_preflight():
    return _preflight()


@router.get("/like")
async def get_like_stats(
    client_id: str = Depends(get_client_id),
    service: StatsService = Depends(get_stats_service),
):
    """Like count and whether the calling client has liked."""
    return (await service.get_likes(client_id)).to_dict()


@router.post("/like")
async def change_like(
    payload: dict = Body(...),
    client_id: str = Depends(get_client_id),
    service: StatsService = Depends(get_stats_service),
):
    """Apply ``{"action": "add" | "remove"}``; other actions are ignored."""
    stats = await service.apply_like_action(client_id, payload.get("action"))
    return stats.to_dict()


@router.options("/like")
async def like_preflight():
    return _preflight()

"""Health check endpoint."""

from fastapi import APIRouter, Depends

from rules_site.application.ports.counter_store import CounterStore
from rules_site.domain.errors import StoreUnavailable
from rules_site.infrastructure.api.dependencies import get_counter_store

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(store: CounterStore = Depends(get_counter_store)):
    """Check API and counter store connectivity."""
    try:
        await store.get_visit_count()
        store_status = "connected"
    except StoreUnavailable as e:
        store_status = f"error: {e}"

    return {
        "status": "ok" if store_status == "connected" else "degraded",
        "store": store_status,
        "backend": type(store).__name__,
        "service": "Rules Site stats",
    }

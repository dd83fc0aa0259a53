"""Rules Site — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from rules_site.config import settings
from rules_site.domain.value_objects.enums import StoreBackend
from rules_site.infrastructure.api.cors import add_cors_headers
from rules_site.infrastructure.api.errors import register_exception_handlers
from rules_site.infrastructure.api.routes_docs import router as docs_router
from rules_site.infrastructure.api.routes_health import router as health_router
from rules_site.infrastructure.api.routes_stats import router as stats_router

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    if settings.stats_backend == StoreBackend.SQL:
        from rules_site.adapters.persistence.database import create_schema, engine

        if settings.auto_create_schema:
            try:
                await create_schema()
                logger.info("Database schema ensured")
            except Exception as e:
                logger.warning("Database not available on startup: %s", e)
        yield
        await engine.dispose()
    else:
        yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Rules Site",
        description="Visit counter, likes and navigation for the development rules docs",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Open CORS policy
    app.middleware("http")(add_cors_headers)
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(stats_router, prefix="/api")
    app.include_router(docs_router, prefix="/api")

    return app


app = create_app()

"""Async SQLAlchemy engine, session factory and declarative base."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from rules_site.config import settings


class Base(DeclarativeBase):
    pass


engine = create_async_engine(settings.database_url, echo=settings.debug, pool_pre_ping=True)

async_session_factory = async_sessionmaker(engine, expire_on_commit=False)


async def create_schema(bind: AsyncEngine | None = None) -> None:
    """Create missing tables. Alembic owns the schema in production."""
    from rules_site.adapters.persistence import models  # noqa: F401 — register models

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

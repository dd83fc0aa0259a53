"""SQLAlchemy counter store — durable, safe across processes.

The visit increment is a single ``UPDATE ... SET count = count + 1`` and
likes rely on the unique constraint on ``likes.client_id``, so concurrent
workers never lose an increment or double-count a liker.
"""

from __future__ import annotations

import logging

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from rules_site.adapters.persistence.models import LikeModel, VisitCounterModel
from rules_site.application.ports.counter_store import CounterStore
from rules_site.domain.entities.stats import LikeStats
from rules_site.domain.errors import StoreUnavailable

logger = logging.getLogger(__name__)

DEFAULT_COUNTER_KEY = "site-visits"


class SqlCounterStore(CounterStore):
    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        counter_key: str = DEFAULT_COUNTER_KEY,
    ):
        self._session_factory = session_factory
        self._key = counter_key

    async def get_visit_count(self) -> int:
        try:
            async with self._session_factory() as session:
                count = await session.scalar(
                    select(VisitCounterModel.count).where(VisitCounterModel.key == self._key)
                )
                return count or 0
        except (SQLAlchemyError, OSError) as e:
            raise StoreUnavailable(f"Cannot read visit count: {e}") from e

    async def increment_visit(self) -> int:
        try:
            try:
                return await self._increment()
            except IntegrityError:
                # Another worker created the counter row first; the row exists now.
                logger.debug("Counter row '%s' created concurrently, retrying", self._key)
                return await self._increment()
        except (SQLAlchemyError, OSError) as e:
            raise StoreUnavailable(f"Cannot increment visit count: {e}") from e

    async def _increment(self) -> int:
        async with self._session_factory() as session, session.begin():
            result = await session.execute(
                update(VisitCounterModel)
                .where(VisitCounterModel.key == self._key)
                .values(count=VisitCounterModel.count + 1)
                .returning(VisitCounterModel.count)
                .execution_options(synchronize_session=False)
            )
            new_count = result.scalar_one_or_none()
            if new_count is None:
                session.add(VisitCounterModel(key=self._key, count=1))
                await session.flush()
                new_count = 1
            return new_count

    async def get_like_stats(self, client_id: str) -> LikeStats:
        try:
            async with self._session_factory() as session:
                return await self._like_stats(session, client_id)
        except (SQLAlchemyError, OSError) as e:
            raise StoreUnavailable(f"Cannot read likes: {e}") from e

    async def set_like(self, client_id: str, liked: bool) -> LikeStats:
        try:
            try:
                async with self._session_factory() as session, session.begin():
                    if liked:
                        existing = await session.scalar(
                            select(LikeModel.id).where(LikeModel.client_id == client_id)
                        )
                        if existing is None:
                            session.add(LikeModel(client_id=client_id))
                            await session.flush()
                    else:
                        await session.execute(
                            delete(LikeModel).where(LikeModel.client_id == client_id)
                        )
            except IntegrityError:
                # Concurrent add for the same client: the like is present either way.
                logger.debug("Like for '%s' inserted concurrently", client_id)
            return await self.get_like_stats(client_id)
        except (SQLAlchemyError, OSError) as e:
            raise StoreUnavailable(f"Cannot update likes: {e}") from e

    async def reset(self) -> None:
        try:
            async with self._session_factory() as session, session.begin():
                await session.execute(delete(LikeModel))
                await session.execute(
                    update(VisitCounterModel)
                    .where(VisitCounterModel.key == self._key)
                    .values(count=0)
                    .execution_options(synchronize_session=False)
                )
        except (SQLAlchemyError, OSError) as e:
            raise StoreUnavailable(f"Cannot reset stats: {e}") from e
        logger.info("Stats for counter '%s' reset", self._key)

    @staticmethod
    async def _like_stats(session: AsyncSession, client_id: str) -> LikeStats:
        count = await session.scalar(select(func.count()).select_from(LikeModel))
        existing = await session.scalar(
            select(LikeModel.id).where(LikeModel.client_id == client_id)
        )
        return LikeStats(count=count or 0, is_liked=existing is not None)

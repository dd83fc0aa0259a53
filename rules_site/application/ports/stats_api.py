"""Port interface for the consumer-facing stats client."""

from abc import ABC, abstractmethod

from rules_site.domain.entities.stats import LikeStats


class StatsApi(ABC):
    @abstractmethod
    async def increment_visit(self) -> int:
        """Register a page visit and return the resulting count."""
        ...

    @abstractmethod
    async def get_visit_count(self) -> int:
        ...

    @abstractmethod
    async def toggle_like(self, is_liked: bool) -> LikeStats:
        """Flip the caller's like: remove it when *is_liked*, add it otherwise."""
        ...

    @abstractmethod
    async def get_like_stats(self) -> LikeStats:
        ...

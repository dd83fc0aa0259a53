"""Port interface for visit/like counter persistence."""

from abc import ABC, abstractmethod

from rules_site.domain.entities.stats import LikeStats


class CounterStore(ABC):
    @abstractmethod
    async def get_visit_count(self) -> int:
        """Return the current visit count. No side effects."""
        ...

    @abstractmethod
    async def increment_visit(self) -> int:
        """Atomically add one visit and return the NEW value."""
        ...

    @abstractmethod
    async def get_like_stats(self, client_id: str) -> LikeStats:
        """Return the like-set size and whether *client_id* is in it."""
        ...

    @abstractmethod
    async def set_like(self, client_id: str, liked: bool) -> LikeStats:
        """Add or remove *client_id* from the like set.

        Idempotent: adding a present id or removing an absent one changes
        nothing and still returns a consistent snapshot.
        """
        ...

    @abstractmethod
    async def reset(self) -> None:
        """Zero the visit counter and clear the like set."""
        ...

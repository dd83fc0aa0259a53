"""Stats snapshots — read-only projections of the counter store."""

from dataclasses import dataclass


@dataclass(frozen=True)
class VisitStats:
    count: int

    def to_dict(self) -> dict:
        return {"count": self.count}


@dataclass(frozen=True)
class LikeStats:
    count: int
    is_liked: bool

    def to_dict(self) -> dict:
        return {"count": self.count, "isLiked": self.is_liked}

    @classmethod
    def from_dict(cls, data: dict) -> "LikeStats":
        """Build from the wire form; raises ValueError on a malformed payload."""
        count = data.get("count")
        is_liked = data.get("isLiked")
        if not isinstance(count, int) or isinstance(count, bool) or not isinstance(is_liked, bool):
            raise ValueError(f"Malformed like stats payload: {data!r}")
        return cls(count=count, is_liked=is_liked)

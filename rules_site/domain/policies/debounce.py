"""VisitDebouncePolicy — one accepted increment per page load."""

from __future__ import annotations


def is_within_cooldown(last_increment_ms: int | None, now_ms: int, window_seconds: float) -> bool:
    """Return True when an increment at *now_ms* must be ignored.

    A missing previous timestamp never debounces. A timestamp in the future
    (clock moved backwards) is treated as inside the window.
    """
    if last_increment_ms is None:
        return False
    return now_ms - last_increment_ms < window_seconds * 1000

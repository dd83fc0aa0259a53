"""ClientIdentityPolicy — best-effort visitor identification.

The identity is advisory only. Headers can be spoofed, so it must never be
used as a security boundary.
"""

from __future__ import annotations

import random
import string
import time
from collections.abc import Mapping

FORWARDED_FOR_HEADER = "x-forwarded-for"
REAL_IP_HEADER = "x-real-ip"
USER_AGENT_HEADER = "user-agent"

_TOKEN_ALPHABET = string.digits + string.ascii_lowercase


def resolve_client_id(headers: Mapping[str, str], now: float | None = None) -> str:
    """Derive a client id from request headers.

    Resolution order (first match wins):
    1. First value of X-Forwarded-For, trimmed.
    2. X-Real-IP.
    3. ``<user-agent>_<epoch millis>`` — unstable, every such request looks
       like a new visitor. Accepted accuracy limitation.

    Args:
        headers: request headers; lookups use lower-case names, so pass a
            case-insensitive mapping (Starlette ``Headers``) or lower-case keys.
        now: epoch seconds for the fallback id; defaults to the current time.
    """
    forwarded = headers.get(FORWARDED_FOR_HEADER)
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first

    real_ip = headers.get(REAL_IP_HEADER)
    if real_ip:
        return real_ip

    user_agent = headers.get(USER_AGENT_HEADER) or "unknown"
    millis = int((time.time() if now is None else now) * 1000)
    return f"{user_agent}_{millis}"


def generate_client_token(now: float | None = None, rng: random.Random | None = None) -> str:
    """Random per-browser token: ``client_<epoch millis>_<9 base36 chars>``."""
    millis = int((time.time() if now is None else now) * 1000)
    rng = rng or random.SystemRandom()
    suffix = "".join(rng.choice(_TOKEN_ALPHABET) for _ in range(9))
    return f"client_{millis}_{suffix}"

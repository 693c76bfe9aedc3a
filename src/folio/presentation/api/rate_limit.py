"""In-process sliding-window rate limiting for the auth endpoints.

Each client address gets at most ``max_attempts`` hits per
``window_seconds``. Timestamps of accepted hits are kept in a deque per key
and pruned lazily. Keys without a hit inside the window are swept at most
once per window, so memory is bounded by the clients seen recently.
State lives on the app instance and is not shared between processes.
"""

from __future__ import annotations

import asyncio
import logging
import math
import time
from collections import deque
from dataclasses import dataclass
from typing import Callable

from fastapi import Request

from folio.domain.shared.exceptions import RateLimitError

logger = logging.getLogger(__name__)

AUTH_RATE_LIMIT_MESSAGE = "Too many authentication attempts, please try again later"


@dataclass(frozen=True)
class RateLimitDecision:
    """Outcome of a single rate-limit check."""

    allowed: bool
    limit: int
    remaining: int
    retry_after: int


class SlidingWindowRateLimiter:
    """Count attempts per key inside a moving time window."""

    def __init__(
        self,
        max_attempts: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ):
        if max_attempts < 1:
            msg = "max_attempts must be at least 1"
            raise ValueError(msg)
        if window_seconds <= 0:
            msg = "window_seconds must be positive"
            raise ValueError(msg)

        self._max_attempts = max_attempts
        self._window = float(window_seconds)
        self._clock = clock
        self._hits: dict[str, deque[float]] = {}
        self._last_sweep = clock()
        self._lock = asyncio.Lock()

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    @property
    def window_seconds(self) -> float:
        return self._window

    @property
    def tracked_keys(self) -> int:
        return len(self._hits)

    async def hit(self, key: str) -> RateLimitDecision:
        """Record an attempt for ``key`` unless the window is already full."""
        async with self._lock:
            now = self._clock()
            self._sweep(now)
            hits = self._hits.setdefault(key, deque())
            self._prune(hits, now)

            if len(hits) >= self._max_attempts:
                retry_after = max(1, math.ceil(hits[0] + self._window - now))
                return RateLimitDecision(
                    allowed=False,
                    limit=self._max_attempts,
                    remaining=0,
                    retry_after=retry_after,
                )

            hits.append(now)
            return RateLimitDecision(
                allowed=True,
                limit=self._max_attempts,
                remaining=self._max_attempts - len(hits),
                retry_after=0,
            )

    async def reset(self, key: str | None = None) -> None:
        async with self._lock:
            if key is None:
                self._hits.clear()
            else:
                self._hits.pop(key, None)

    def _prune(self, hits: deque[float], now: float) -> None:
        cutoff = now - self._window
        while hits and hits[0] <= cutoff:
            hits.popleft()

    def _sweep(self, now: float) -> None:
        if now - self._last_sweep < self._window:
            return
        self._last_sweep = now
        cutoff = now - self._window
        stale = [
            key for key, hits in self._hits.items() if not hits or hits[-1] <= cutoff
        ]
        for key in stale:
            del self._hits[key]
        if stale:
            logger.debug("Dropped %d idle rate-limit keys", len(stale))


def client_key(request: Request) -> str:
    """Rate-limit key for a request: the client address."""
    client_ip = request.client.host if request.client else "unknown"
    return f"ip:{client_ip}"


async def enforce_auth_rate_limit(request: Request) -> None:
    """FastAPI dependency guarding register and login.

    The attempt is counted before the request body is looked at, so wrong
    and right credentials consume the allowance alike.
    """
    limiter: SlidingWindowRateLimiter = request.app.state.auth_rate_limiter
    key = client_key(request)
    decision = await limiter.hit(key)

    if not decision.allowed:
        logger.warning(
            "Auth rate limit exceeded for %s on %s (retry %ds, %d clients)",
            key,
            request.url.path,
            decision.retry_after,
            limiter.tracked_keys,
        )
        raise RateLimitError(
            AUTH_RATE_LIMIT_MESSAGE,
            retry_after=decision.retry_after,
            details={"limit": decision.limit},
        )

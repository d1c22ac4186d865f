"""Sliding-window request rate limiting.

One limiter instance belongs to one app and is handed to request handlers
through dependency injection, so separate apps (and tests) never share
counters.
"""

import threading
import time
from collections import deque
from typing import Callable


class RateLimitExceeded(Exception):
    """A client sent more requests than the window allows."""

    def __init__(self, key: str, retry_after: float):
        self.key = key
        self.retry_after = retry_after
        super().__init__(f"Rate limit exceeded for {key}")


class SlidingWindowRateLimiter:
    """Allows at most ``max_requests`` per key within any ``window_seconds`` span.

    Keys whose requests have all left the window are dropped at most once
    per window, from ``hit``, so the number of tracked clients is bounded by
    the clients seen in roughly the last two windows.
    """

    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ):
        if max_requests < 1:
            raise ValueError("max_requests must be at least 1")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be positive")
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._hits: dict[str, deque[float]] = {}
        self._lock = threading.Lock()
        self._last_sweep = clock()

    @property
    def tracked_keys(self) -> int:
        """Number of clients currently holding a window."""
        with self._lock:
            return len(self._hits)

    def _expire(self, hits: deque[float], now: float) -> None:
        cutoff = now - self.window_seconds
        while hits and hits[0] <= cutoff:
            hits.popleft()

    def _sweep_locked(self, now: float) -> int:
        stale = []
        for key, hits in self._hits.items():
            self._expire(hits, now)
            if not hits:
                stale.append(key)
        for key in stale:
            del self._hits[key]
        self._last_sweep = now
        return len(stale)

    def hit(self, key: str) -> None:
        """Record a request for ``key``.

        Raises:
            RateLimitExceeded: If the key already used up its window; the
                rejected request is not counted
        """
        with self._lock:
            now = self._clock()
            if now - self._last_sweep >= self.window_seconds:
                self._sweep_locked(now)
            hits = self._hits.setdefault(key, deque())
            self._expire(hits, now)
            if len(hits) >= self.max_requests:
                retry_after = hits[0] + self.window_seconds - now
                raise RateLimitExceeded(key, max(retry_after, 0.0))
            hits.append(now)

    def remaining(self, key: str) -> int:
        """Requests ``key`` may still make in the current window."""
        with self._lock:
            hits = self._hits.get(key)
            if hits is None:
                return self.max_requests
            self._expire(hits, self._clock())
            return self.max_requests - len(hits)

    def sweep(self) -> int:
        """Drop keys with no requests left in the window. Returns how many were dropped."""
        with self._lock:
            return self._sweep_locked(self._clock())

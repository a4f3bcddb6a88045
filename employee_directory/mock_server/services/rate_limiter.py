"""Sliding window rate limiting for the mock employee store."""

from __future__ import annotations

import logging
import math
import threading
import time
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RateLimitDecision:
    """Result of one rate limiting check."""

    allowed: bool
    retry_after: int = 0


class SlidingWindowRateLimiter:
    """Allow at most ``max_requests`` calls in any ``window_seconds`` interval.

    A limiter with ``max_requests <= 0`` allows everything.
    """

    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._calls: Deque[float] = deque()
        self._lock = threading.Lock()

    @property
    def enabled(self) -> bool:
        return self.max_requests > 0 and self.window_seconds > 0

    def check(self) -> RateLimitDecision:
        """Record a call and decide whether it may proceed."""
        if not self.enabled:
            return RateLimitDecision(allowed=True)
        now = self._clock()
        with self._lock:
            while self._calls and now - self._calls[0] >= self.window_seconds:
                self._calls.popleft()
            if len(self._calls) >= self.max_requests:
                wait = self.window_seconds - (now - self._calls[0])
                retry_after = max(1, math.ceil(wait))
                logger.warning("Rate limit reached, retry after %d seconds", retry_after)
                return RateLimitDecision(allowed=False, retry_after=retry_after)
            self._calls.append(now)
        return RateLimitDecision(allowed=True)

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import math
import threading
import time
from collections import deque
from collections.abc import Callable
from functools import wraps

from flask import jsonify, request

from messagely.shared.config import load_config
from messagely.shared.logging import logger


class InMemoryRateLimiter:
    """Sliding-window counter per key, local to one process.

    Keys whose hits have all aged out are dropped, at most once per window.
    """

    def __init__(
        self,
        limit: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._limit = max(1, int(limit))
        self._window = max(0.1, float(window_seconds))
        self._clock = clock
        self._hits: dict[str, deque[float]] = {}
        self._next_sweep = clock() + self._window
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._hits)

    def _sweep(self, now: float) -> None:
        if now < self._next_sweep:
            return
        self._next_sweep = now + self._window
        idle = [key for key, hits in self._hits.items() if now - hits[-1] >= self._window]
        for key in idle:
            del self._hits[key]

    def retry_after(self, key: str) -> float:
        """Seconds until `key` may try again; 0 when a hit is recorded now."""

        now = self._clock()
        with self._lock:
            self._sweep(now)
            hits = self._hits.setdefault(key, deque())
            while hits and now - hits[0] >= self._window:
                hits.popleft()
            if len(hits) >= self._limit:
                return self._window - (now - hits[0])
            hits.append(now)
            return 0.0

    def allow(self, key: str) -> bool:
        return self.retry_after(key) == 0.0


def _client_key() -> str:
    forwarded = request.headers.get("X-Forwarded-For", "").split(",")[0].strip()
    return forwarded or request.remote_addr or "unknown"


def rate_limit(limit: int | None = None, window_seconds: float | None = None):
    """Throttle a view per client address.

    Arguments left as None fall back to ``RL_LIMIT`` / ``RL_WINDOW``. The
    limiter is built on the first request, after configuration is loaded, and
    is skipped entirely when ``ENABLE_RATE_LIMIT`` is off.
    """

    built: list[InMemoryRateLimiter | None] = []

    def _limiter() -> InMemoryRateLimiter | None:
        if not built:
            security = load_config().security
            built.append(
                InMemoryRateLimiter(
                    limit or security.rate_limit_requests,
                    window_seconds or security.rate_limit_window,
                )
                if security.enable_rate_limit
                else None
            )
        return built[0]

    def decorator(view: Callable):
        @wraps(view)
        def wrapper(*args, **kwargs):
            limiter = _limiter()
            if limiter is not None:
                wait = limiter.retry_after(f"{request.endpoint}:{_client_key()}")
                if wait > 0:
                    logger.warning(f"rate_limit: {request.path} throttled for {_client_key()}")
                    response = jsonify({"error": "rate_limited"})
                    response.headers["Retry-After"] = str(math.ceil(wait))
                    return response, 429
            return view(*args, **kwargs)

        return wrapper

    return decorator


__all__ = ["InMemoryRateLimiter", "rate_limit"]

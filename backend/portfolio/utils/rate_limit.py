import time
from threading import Lock
from typing import Callable, Dict, List, Optional, Tuple

from flask import current_app, request


class SlidingWindowRateLimiter:
    """
    In-process sliding-window limiter keyed by an arbitrary string.

    Each key may make ``limit`` requests within any ``window`` seconds.
    Keys whose attempts have all expired are swept every ``sweep_interval``
    seconds.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None, sweep_interval: float = 60.0):
        self._clock = clock or time.monotonic
        self._history: Dict[str, List[float]] = {}
        self._lock = Lock()
        self._sweep_interval = sweep_interval
        self._last_sweep = self._clock()
        self._max_window = 0.0

    def _cleanup(self, key: str, cutoff: float) -> None:
        if key in self._history:
            self._history[key] = [t for t in self._history[key] if t > cutoff]
            if not self._history[key]:
                del self._history[key]

    def _sweep(self, now: float) -> None:
        if now - self._last_sweep < self._sweep_interval:
            return
        self._last_sweep = now
        cutoff = now - self._max_window
        stale = [key for key, attempts in self._history.items() if not attempts or attempts[-1] <= cutoff]
        for key in stale:
            del self._history[key]

    def hit(self, key: str, limit: int, window: float) -> Tuple[bool, int, float]:
        """
        Records an attempt for ``key`` if allowed.

        Returns (allowed, remaining, reset_after_seconds).
        """
        with self._lock:
            now = self._clock()
            self._max_window = max(self._max_window, window)
            self._sweep(now)
            self._cleanup(key, now - window)
            attempts = self._history.get(key, [])

            if len(attempts) >= limit:
                reset_after = attempts[0] + window - now
                return False, 0, max(reset_after, 0.0)

            attempts.append(now)
            self._history[key] = attempts
            return True, limit - len(attempts), attempts[0] + window - now


def get_rate_limiter() -> SlidingWindowRateLimiter:
    return current_app.extensions["rate_limiter"]


def client_address() -> str:
    forwarded = request.headers.get("X-Forwarded-For", "")
    first = forwarded.split(",")[0].strip()
    return first or request.remote_addr or "127.0.0.1"

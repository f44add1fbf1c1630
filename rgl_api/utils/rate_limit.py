"""Rate limiting for API requests."""

from __future__ import annotations

import threading
import time

import structlog

from rgl_api.exceptions import LimiterCancelledError

logger = structlog.get_logger(__name__)


class RateLimiter:
    """
    Thread-safe token bucket rate limiter for API requests.

    Tokens refill continuously at ``rate`` per ``per`` seconds up to ``burst``.
    A blocked caller reserves its token up front and sleeps outside the lock,
    so concurrent callers are admitted in reservation order.
    """

    def __init__(self, rate: int = 2, per: float = 1.0, burst: int | None = None):
        """
        Initialize rate limiter.

        Args:
            rate: Number of requests allowed per period.
            per: Time period in seconds (default: 1).
            burst: Maximum tokens held at once. Defaults to ``rate``.
        """
        if rate < 1:
            raise ValueError("rate must be at least 1")
        if per <= 0:
            raise ValueError("per must be positive")

        self.rate = rate
        self.per = per
        self.burst = burst if burst is not None else rate
        if self.burst < 1:
            raise ValueError("burst must be at least 1")

        self.allowance = float(self.burst)
        self.last_check = time.monotonic()
        self._lock = threading.Lock()

    @property
    def interval(self) -> float:
        """Seconds needed to refill a single token."""
        return self.per / self.rate

    def _refill(self, now: float) -> None:
        # Caller holds self._lock.
        time_passed = now - self.last_check
        self.last_check = now
        self.allowance = min(self.allowance + time_passed * (self.rate / self.per), self.burst)

    def _release(self) -> None:
        with self._lock:
            self._refill(time.monotonic())
            self.allowance = min(self.allowance + 1.0, self.burst)

    def acquire(
        self,
        block: bool = True,
        timeout: float | None = None,
        cancel: threading.Event | None = None,
    ) -> bool:
        """
        Acquire permission to make a request.

        Args:
            block: If True, block until request is allowed.
            timeout: Longest acceptable wait in seconds. None waits indefinitely.
            cancel: Event that aborts the wait when set.

        Returns:
            True if request is allowed, False if ``block`` is False and no
            token is available.

        Raises:
            LimiterCancelledError: If ``cancel`` is set or the wait would
                exceed ``timeout``. No token is consumed in either case.
        """
        if cancel is not None and cancel.is_set():
            raise LimiterCancelledError("rate limiter wait cancelled")

        with self._lock:
            self._refill(time.monotonic())

            if self.allowance >= 1.0:
                self.allowance -= 1.0
                return True

            if not block:
                return False

            sleep_time = (1.0 - self.allowance) * self.interval
            if timeout is not None and sleep_time > timeout:
                raise LimiterCancelledError(
                    f"rate limiter wait of {sleep_time:.3f}s exceeds timeout of {timeout:.3f}s"
                )

            # Reserve the token now; it matures after sleep_time.
            self.allowance -= 1.0

        logger.debug("Rate limit reached, sleeping", sleep_time=sleep_time)

        if cancel is None:
            time.sleep(sleep_time)
        elif cancel.wait(sleep_time):
            self._release()
            raise LimiterCancelledError("rate limiter wait cancelled")

        return True

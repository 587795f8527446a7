"""Minimum-spacing gate for rate limited APIs."""
from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from core.config import MIN_DELAY_SECONDS

logger = logging.getLogger(__name__)


class ApiThrottler:
    """Block until at least ``min_delay`` seconds have passed since the last call.

    The clock and sleep functions are injectable so tests can drive time
    without actually waiting.  One instance should be shared by every client
    that talks to the same API.
    """

    def __init__(
        self,
        min_delay: float = MIN_DELAY_SECONDS,
        name: str = "API",
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.min_delay = min_delay
        self.name = name
        self._clock = clock
        self._sleep = sleep
        self._last_call: Optional[float] = None

    def throttle(self) -> float:
        """Wait if needed, record the call time and return the seconds waited."""
        waited = 0.0
        if self._last_call is not None:
            elapsed = self._clock() - self._last_call
            if elapsed < self.min_delay:
                waited = self.min_delay - elapsed
                logger.info("[%s] throttling: waiting %.2fs before next call", self.name, waited)
                self._sleep(waited)
        self._last_call = self._clock()
        return waited

    def reset(self) -> None:
        self._last_call = None

    @property
    def time_since_last_call(self) -> float:
        if self._last_call is None:
            return float("inf")
        return self._clock() - self._last_call

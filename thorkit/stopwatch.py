"""Pausable stopwatch and countdown timer."""

from __future__ import annotations

import time
from typing import Callable, Optional

Clock = Callable[[], float]


class StopWatch:
    """Measures elapsed time in seconds; can be paused and resumed."""

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self._clock: Clock = clock or time.monotonic
        self._buffer = 0.0
        self._started_at = 0.0
        self._running = False

    @property
    def elapsed(self) -> float:
        """Total time accumulated while running, in seconds."""
        if self._running:
            return self._buffer + (self._clock() - self._started_at)
        return self._buffer

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        """Start or resume; has no effect when already running."""
        if not self._running:
            self._running = True
            self._started_at = self._clock()

    def stop(self) -> None:
        """Pause; has no effect when already stopped."""
        if self._running:
            self._running = False
            self._buffer += self._clock() - self._started_at

    def reset(self) -> None:
        """Set elapsed time to zero and stop."""
        self._buffer = 0.0
        self._running = False

    def restart(self) -> None:
        """Reset and start again."""
        self.reset()
        self.start()


class Timer:
    """Counts down from a time limit; expires when the limit is reached."""

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self._watch = StopWatch(clock)
        self._limit = 0.0

    @property
    def remaining(self) -> float:
        """Time left until expiry, never negative."""
        return max(self._limit - self._watch.elapsed, 0.0)

    @property
    def running(self) -> bool:
        return self._watch.running and not self.expired

    @property
    def expired(self) -> bool:
        return self._watch.elapsed >= self._limit

    def start(self) -> None:
        self._watch.start()

    def stop(self) -> None:
        self._watch.stop()

    def reset(self, time_limit: float) -> None:
        """Set a new positive limit and stop the timer."""
        if time_limit <= 0:
            raise ValueError("time limit must be positive")
        self._limit = time_limit
        self._watch.reset()

    def restart(self, time_limit: float) -> None:
        """Set a new limit and start counting down."""
        self.reset(time_limit)
        self.start()
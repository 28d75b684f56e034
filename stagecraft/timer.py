"""Frame delta-time measurement."""

import time
from typing import Callable


class EngineTime:
    """Measures the time between successive checks with a high-resolution clock."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._prev = 0.0
        self._delta = 0.0
        self.time_check_start()

    def time_check_start(self) -> None:
        """Restart measurement from now."""
        self._prev = self._clock()

    def time_check(self) -> float:
        """Seconds since the previous check (or start), and restart from now."""
        current = self._clock()
        self._delta = current - self._prev
        self._prev = current
        return self._delta

    def delta_time(self) -> float:
        return self._delta
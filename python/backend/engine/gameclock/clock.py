"""Per-second timer for a game in progress.

The timer owns no thread.  Whoever hosts the session polls :meth:`due`
between input events and forwards that many ticks to the session.
"""

from __future__ import annotations

import time
from collections.abc import Callable


class TickTimer:
    """Reports how many whole intervals have elapsed while armed."""

    def __init__(
        self,
        interval: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval}.")
        self.interval = interval
        self._clock = clock
        self._deadline: float | None = None

    @property
    def active(self) -> bool:
        return self._deadline is not None

    def start(self) -> None:
        """Arm the timer; the first tick is due one interval from now."""
        self._deadline = self._clock() + self.interval

    def cancel(self) -> None:
        self._deadline = None

    def due(self) -> int:
        """Return the number of ticks that came due since the last call."""
        if self._deadline is None:
            return 0
        now = self._clock()
        if now < self._deadline:
            return 0
        count = int((now - self._deadline) // self.interval) + 1
        self._deadline += count * self.interval
        return count

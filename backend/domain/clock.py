"""
Fixed-period tick timer driving the simulation.
"""

from .constants import TICK_PERIOD


class SimulationClock:
    """
    Accumulates elapsed wall time and hands out one tick per full period.

    The clock is polled once per frame; it never sleeps. If a single
    advance() spans several periods, tick_ready() returns True once for each
    of them before returning False again.
    """

    def __init__(self, period: float = TICK_PERIOD):
        if period <= 0:
            raise ValueError(f"Tick period must be positive, got {period}.")
        self._period = period
        self._accumulated = 0.0

    @property
    def period(self) -> float:
        return self._period

    @property
    def pending_ticks(self) -> int:
        """Number of ticks that tick_ready() would currently hand out."""
        return int(self._accumulated // self._period)

    def advance(self, elapsed: float) -> None:
        """Add `elapsed` seconds of wall time."""
        if elapsed < 0:
            raise ValueError(f"Elapsed time cannot be negative, got {elapsed}.")
        self._accumulated += elapsed

    def tick_ready(self) -> bool:
        if self._accumulated >= self._period:
            self._accumulated -= self._period
            return True
        return False

    def __repr__(self):
        return f"<SimulationClock period={self._period}s accumulated={self._accumulated:.3f}s>"

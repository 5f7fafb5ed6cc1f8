# clock.py
from __future__ import annotations
import logging

logger = logging.getLogger(__name__)


class SimulationClock:
    """
    Fixed-timestep accumulator.

    Frame deltas are summed; once a full interval has built up, one tick
    fires and exactly one interval is consumed. A frame that spans several
    intervals still fires a single tick and the extra whole intervals are
    dropped, keeping only the fractional remainder.
    """

    def __init__(self, interval: float):
        assert interval > 0, f"tick interval must be positive, got {interval}"
        self.interval = interval
        self.accumulator = 0.0

    def advance(self, dt: float) -> bool:
        assert dt >= 0, f"negative frame delta {dt}"
        self.accumulator += max(dt, 0.0)

        if self.accumulator < self.interval:
            return False

        self.accumulator -= self.interval
        if self.accumulator >= self.interval:
            dropped = int(self.accumulator // self.interval)
            self.accumulator %= self.interval
            logger.debug("Frame lagged; dropped %d tick(s)", dropped)
        return True

    def reset(self) -> None:
        self.accumulator = 0.0

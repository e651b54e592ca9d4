"""
Global animation driver, ticked once per rendered frame.
"""
from __future__ import annotations
import logging
import time
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


class AnimationClock:
    """
    Advances every registered animation to a common timestamp.

    Animations are duck-typed: anything with ``update(now_ms) -> bool``
    (False once it is done) and a ``cancelled`` attribute. Cancelled
    animations are dropped before they get a chance to write.

    Pass explicit timestamps to ``tick`` (or use ``advance``) for
    deterministic, fixed-timestep driving; ``tick()`` with no argument
    reads the wall clock (milliseconds since the clock was created,
    counted from ``start_ms``).
    """

    def __init__(self, start_ms: float = 0.0,
                 time_source: Optional[Callable[[], float]] = None):
        self._start_ms = float(start_ms)
        self._now_ms = self._start_ms
        self._epoch = time.perf_counter()
        self._time_source = time_source or self._wall_clock_ms
        self._animations: List = []

    def _wall_clock_ms(self) -> float:
        return self._start_ms + (time.perf_counter() - self._epoch) * 1000.0

    @property
    def now_ms(self) -> float:
        return self._now_ms

    @property
    def active_count(self) -> int:
        return len(self._animations)

    def add(self, animation) -> None:
        if animation not in self._animations:
            self._animations.append(animation)

    def remove(self, animation) -> None:
        if animation in self._animations:
            self._animations.remove(animation)

    def clear(self) -> None:
        self._animations.clear()

    def tick(self, now_ms: Optional[float] = None) -> int:
        """Advance all animations to ``now_ms``; return how many are still running."""
        now = self._time_source() if now_ms is None else float(now_ms)
        if now < self._now_ms:
            logger.warning("clock went backwards (%.1f → %.1f ms); holding", self._now_ms, now)
            now = self._now_ms
        self._now_ms = now

        for animation in list(self._animations):
            if animation.cancelled:
                self._animations.remove(animation)
                continue
            if not animation.update(now):
                self._animations.remove(animation)
        return len(self._animations)

    def advance(self, dt_ms: float) -> int:
        return self.tick(self._now_ms + dt_ms)

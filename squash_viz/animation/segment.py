"""
Timed point-to-point interpolations and the chains that sequence them.

A TrajectoryChain owns an ordered list of Segments and a cursor pointing
at the one currently in flight. Each clock tick advances the cursor as
far as the elapsed time allows, so a chain's state is a pure function
of the timestamps it has been given:

    origin ──delay──▶ start ──duration──▶ end = next origin ──delay──▶ ...

A zero-duration segment snaps the target to its end point on the first
tick at or after its start (used to place the ball before a shot).
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from ..models.position import Position
from .easing import Easing, ease

logger = logging.getLogger(__name__)

# None leaves that axis where it was when the segment started
Target = Tuple[Optional[float], Optional[float], Optional[float]]


@dataclass(frozen=True)
class Segment:
    """One interpolation step: move the target to ``end`` over ``duration_ms``."""
    end: Target
    duration_ms: float
    delay_ms: float = 0.0
    easing: Easing = Easing.LINEAR
    label: str = ""

    def __post_init__(self):
        if len(self.end) != 3:
            raise ValueError(f"Segment end must have 3 components, got {self.end!r}")
        if self.duration_ms < 0:
            raise ValueError(f"duration_ms must be >= 0 (got {self.duration_ms})")
        if self.delay_ms < 0:
            raise ValueError(f"delay_ms must be >= 0 (got {self.delay_ms})")

    @property
    def span_ms(self) -> float:
        return self.delay_ms + self.duration_ms

    def resolve(self, start: Sequence[float]) -> Tuple[float, float, float]:
        """Concrete end point when starting from ``start``."""
        return tuple(
            float(s) if e is None else float(e)
            for s, e in zip(start, self.end)
        )

    def interpolate(self, start: Sequence[float], progress: float) -> Tuple[float, float, float]:
        """Position at linear ``progress`` (already clamped) along the segment."""
        end = self.resolve(start)
        if progress >= 1.0:
            return end
        k = ease(self.easing, progress)
        return tuple(s + (e - s) * k for s, e in zip(start, end))


class TrajectoryChain:
    """
    Runs segments strictly one after another against a shared Position.

    The chain is inert until ``start()``; afterwards every ``update(now_ms)``
    brings the target to where it should be at ``now_ms``. ``cancel()`` stops
    it for good: a cancelled chain never writes to its target again.
    """

    def __init__(self, target: Position, segments: Iterable[Segment], name: str = ""):
        self.name = name
        self._target = target
        self._segments: List[Segment] = list(segments)
        self._cursor = 0
        self._origin_ms: Optional[float] = None
        self._start_values: Optional[Tuple[float, float, float]] = None
        self._cancelled = False
        self._completed = False
        self._callbacks: List[Callable[["TrajectoryChain"], None]] = []

    # ── Inspection ─────────────────────────────────────────────────────────────

    @property
    def target(self) -> Position:
        return self._target

    @property
    def segments(self) -> Tuple[Segment, ...]:
        return tuple(self._segments)

    @property
    def cursor(self) -> int:
        """Index of the segment currently waiting or in flight."""
        return self._cursor

    @property
    def started(self) -> bool:
        return self._origin_ms is not None

    @property
    def finished(self) -> bool:
        return self._completed

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def active(self) -> bool:
        return self.started and not self._completed and not self._cancelled

    @property
    def total_duration_ms(self) -> float:
        return sum(s.span_ms for s in self._segments)

    # ── Control ────────────────────────────────────────────────────────────────

    def start(self, now_ms: float) -> "TrajectoryChain":
        if self.started:
            raise RuntimeError(f"Chain '{self.name}' already started")
        self._origin_ms = float(now_ms)
        logger.debug("chain %s started at %.1f ms (%d segments)",
                     self.name, now_ms, len(self._segments))
        return self

    def cancel(self) -> None:
        if not self._cancelled and not self._completed:
            logger.debug("chain %s cancelled at segment %d", self.name, self._cursor)
        self._cancelled = True

    def extend(self, segments: Iterable[Segment]) -> None:
        """Append segments to run after the ones already queued."""
        if self._cancelled or self._completed:
            raise RuntimeError(f"Cannot extend chain '{self.name}': it is no longer running")
        self._segments.extend(segments)

    def on_complete(self, callback: Callable[["TrajectoryChain"], None]) -> None:
        self._callbacks.append(callback)

    def update(self, now_ms: float) -> bool:
        """
        Advance to ``now_ms``. Returns True while the chain still has work to do.
        """
        if self._cancelled or self._completed:
            return False
        if self._origin_ms is None:
            return True

        while self._cursor < len(self._segments):
            seg = self._segments[self._cursor]
            begin = self._origin_ms + seg.delay_ms
            if now_ms < begin:
                return True

            if self._start_values is None:
                self._start_values = self._target.as_tuple()

            if seg.duration_ms == 0:
                progress = 1.0
            else:
                progress = min((now_ms - begin) / seg.duration_ms, 1.0)
            self._target.set_from(seg.interpolate(self._start_values, progress))

            if progress < 1.0:
                return True

            # Segment done: the next one is timed from its exact end
            self._origin_ms = begin + seg.duration_ms
            self._start_values = None
            self._cursor += 1

        self._completed = True
        logger.debug("chain %s completed", self.name)
        for cb in self._callbacks:
            cb(self)
        return False

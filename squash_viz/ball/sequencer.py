"""
Shot sequencer – scripted ball paths for straight drives and boasts.

Paths are keyframes, not physics: each shot is a short list of
segments derived from the court dimensions. Shots are scripted for the
forehand, played from the right-hand side of the court (x > 0);
backhands are the exact mirror image in x.

    Straight (2500 ms)             Boast (3000 ms)
    ─────────────────              ─────────────────
    0  place ball      0 ms        0  place ball          0 ms
    1  → front wall  500+1000      1  → side wall       500+1000
    2  → back corner   1000        2  → opposite front    1000
                                   3  → opposite corner    500
"""
from __future__ import annotations
import logging
from dataclasses import replace
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from ..animation import AnimationClock, Easing, Segment, TrajectoryChain
from ..models.court import CourtDimensions
from ..models.position import Position
from ..models.shot import Handedness, ShotStyle
from .. import config

logger = logging.getLogger(__name__)

EASE = Easing.QUADRATIC_IN_OUT


class OverlapPolicy(Enum):
    """What a new shot does to one that is still in flight."""
    CANCEL = "cancel"     # drop the remaining segments, start over
    QUEUE  = "queue"      # play after the running shot finishes


def _straight(court: CourtDimensions, r: float) -> List[Segment]:
    w, l = court.width, court.length
    box_x = (w - court.service_box_width) / 2     # middle of the service box
    return [
        Segment((box_x, 1.2, l / 2 - 3), 0, label="place"),
        Segment((None, 1.5, -l / 2 + r), config.SHOT_SEGMENT_MS,
                delay_ms=config.SHOT_LEAD_IN_MS, easing=EASE, label="front_wall"),
        Segment((w / 2 - r, r, l / 2 - r), config.SHOT_SEGMENT_MS,
                easing=EASE, label="back_corner"),
    ]


def _boast(court: CourtDimensions, r: float) -> List[Segment]:
    w, l = court.width, court.length
    box_x = (w - court.service_box_width) / 2
    return [
        Segment((box_x, 0.5, l / 2 - 1), 0, label="place"),
        Segment((w / 2 - r, 1.0, l / 2 - 4), config.SHOT_SEGMENT_MS,
                delay_ms=config.SHOT_LEAD_IN_MS, easing=EASE, label="side_wall"),
        Segment((-box_x, 0.8, -l / 2 + r), config.SHOT_SEGMENT_MS,
                easing=EASE, label="front_wall"),
        Segment((-(w / 2 - r), r, -l / 2 + 1), config.BOAST_FINISH_MS,
                easing=EASE, label="opposite_corner"),
    ]


_BUILDERS = {
    ShotStyle.STRAIGHT: _straight,
    ShotStyle.BOAST:    _boast,
}


def build_waypoints(
    handedness: Handedness,
    style: ShotStyle,
    court: Optional[CourtDimensions] = None,
    ball_radius: float = config.BALL_RADIUS,
) -> List[Segment]:
    """Segments for one shot. The first always teleports the ball (duration 0)."""
    court = court or CourtDimensions.regulation()
    waypoints = _BUILDERS[style](court, ball_radius)
    if handedness is Handedness.BACKHAND:
        waypoints = mirror_waypoints(waypoints)
    return waypoints


def mirror_waypoints(waypoints: Sequence[Segment]) -> List[Segment]:
    """Reflect waypoints in the x = 0 plane (forehand <-> backhand)."""
    return [
        replace(wp, end=(None if wp.end[0] is None else -wp.end[0],) + tuple(wp.end[1:]))
        for wp in waypoints
    ]


def resolve_waypoints(
    waypoints: Sequence[Segment],
    start: Sequence[float] = config.BALL_START,
) -> List[Tuple[float, float, float]]:
    """Concrete end point of every waypoint, starting from ``start``."""
    points = []
    current = tuple(start)
    for wp in waypoints:
        current = wp.resolve(current)
        points.append(current)
    return points


def trajectory_duration_ms(waypoints: Sequence[Segment]) -> float:
    return sum(wp.span_ms for wp in waypoints)


class ShotSequencer:
    """
    Owns the ball's active trajectory.

    Only one chain writes to the ball at a time: under the default
    CANCEL policy a new shot cancels the running chain before the new
    one is registered with the clock.
    """

    def __init__(
        self,
        clock: AnimationClock,
        ball: Position,
        court: Optional[CourtDimensions] = None,
        ball_radius: float = config.BALL_RADIUS,
        policy: OverlapPolicy = OverlapPolicy.CANCEL,
    ):
        self._clock = clock
        self._ball = ball
        self.court = court or CourtDimensions.regulation()
        self.ball_radius = ball_radius
        self.policy = policy
        self._active: Optional[TrajectoryChain] = None
        self._shots_started = 0

    @property
    def active(self) -> Optional[TrajectoryChain]:
        """The running chain, or None once it has finished or been cancelled."""
        if self._active is not None and (self._active.finished or self._active.cancelled):
            self._active = None
        return self._active

    def start_shot(
        self,
        handedness: Optional[Handedness],
        style: Optional[ShotStyle],
        court: Optional[CourtDimensions] = None,
    ) -> Optional[TrajectoryChain]:
        """
        Build and start the trajectory for a shot.

        Returns the chain now driving the ball, or None when no shot was
        selected (missing handedness or style is a silent no-op).
        """
        if handedness is None or style is None:
            logger.debug("start_shot ignored: handedness=%s style=%s", handedness, style)
            return None

        waypoints = build_waypoints(handedness, style, court or self.court, self.ball_radius)
        name = f"{handedness.value}_{style.value}"
        running = self.active

        if running is not None and self.policy is OverlapPolicy.QUEUE:
            running.extend(waypoints)
            logger.debug("queued %s after %s", name, running.name)
            return running

        self.cancel()
        self._shots_started += 1
        chain = TrajectoryChain(self._ball, waypoints, name=f"{name}#{self._shots_started}")
        self._clock.add(chain)
        chain.start(self._clock.now_ms)
        self._active = chain
        logger.debug("shot %s started (%.0f ms)", chain.name, chain.total_duration_ms)
        return chain

    def cancel(self) -> None:
        """Stop the running shot, leaving the ball where it is."""
        if self._active is not None:
            self._active.cancel()
            self._clock.remove(self._active)
            self._active = None

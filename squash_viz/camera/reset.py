"""
Camera reset – glide the camera home and take the ball off court.
"""
from __future__ import annotations
import logging
from typing import Optional, Sequence

from ..animation import AnimationClock, Easing, Segment, TrajectoryChain
from ..ball.sequencer import ShotSequencer
from ..models.position import Position
from .. import config

logger = logging.getLogger(__name__)


class CameraResetController:
    """
    Moves the camera back to its home pose over ``duration_ms``.

    The ball is hidden synchronously (not animated) and any shot in
    flight is cancelled first, so nothing moves the ball back into view.
    """

    def __init__(
        self,
        clock: AnimationClock,
        camera: Position,
        ball: Position,
        sequencer: Optional[ShotSequencer] = None,
        home: Sequence[float] = config.CAMERA_HOME,
        duration_ms: float = config.CAMERA_RESET_MS,
    ):
        self._clock = clock
        self._camera = camera
        self._ball = ball
        self._sequencer = sequencer
        self.home = tuple(float(v) for v in home)
        self.duration_ms = duration_ms
        self._active: Optional[TrajectoryChain] = None

    @property
    def active(self) -> Optional[TrajectoryChain]:
        if self._active is not None and not self._active.active:
            self._active = None
        return self._active

    @property
    def in_flight(self) -> bool:
        return self.active is not None

    def reset_camera(self) -> TrajectoryChain:
        if self._sequencer is not None:
            self._sequencer.cancel()
        self._ball.set(0.0, config.BALL_HIDDEN_Y, 0.0)

        if self._active is not None:
            self._active.cancel()
            self._clock.remove(self._active)

        chain = TrajectoryChain(
            self._camera,
            [Segment(self.home, self.duration_ms, easing=Easing.QUADRATIC_IN_OUT, label="home")],
            name="camera_reset",
        )
        self._clock.add(chain)
        chain.start(self._clock.now_ms)
        self._active = chain
        logger.debug("camera reset from %s", self._camera.as_tuple())
        return chain

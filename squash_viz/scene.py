"""
CourtScene – the command surface a UI drives.

Commands in:  start_shot, reset_camera, set_labels_visible
Per frame:    tick / advance, then read ball_position, camera_position
              and geometry
"""
from __future__ import annotations
import logging
from typing import Optional

from .animation import AnimationClock, TrajectoryChain
from .ball import OverlapPolicy, ShotSequencer
from .camera import CameraResetController
from .court import build_court
from .models import (CourtDimensions, CourtGeometry, FrameSnapshot, Handedness,
                     Position, ShotStyle, Vec3)
from . import config

logger = logging.getLogger(__name__)


class CourtScene:
    """Owns the court geometry, the ball and camera cells, and the clock."""

    def __init__(
        self,
        dimensions: Optional[CourtDimensions] = None,
        show_labels: bool = False,
        policy: OverlapPolicy = OverlapPolicy.CANCEL,
        clock: Optional[AnimationClock] = None,
    ):
        self.dimensions = dimensions or CourtDimensions.regulation()
        self.clock = clock or AnimationClock()
        self.ball = Position(*config.BALL_START)
        self.camera = Position(*config.CAMERA_HOME)

        self._show_labels = show_labels
        self._geometry = build_court(self.dimensions, show_labels)

        self.sequencer = ShotSequencer(self.clock, self.ball, self.dimensions, policy=policy)
        self.camera_reset = CameraResetController(self.clock, self.camera, self.ball,
                                                  sequencer=self.sequencer)

    # ── Commands ──────────────────────────────────────────────────────────────

    def start_shot(self, handedness: Optional[Handedness],
                   style: Optional[ShotStyle]) -> Optional[TrajectoryChain]:
        return self.sequencer.start_shot(handedness, style)

    def reset_camera(self) -> TrajectoryChain:
        return self.camera_reset.reset_camera()

    def set_labels_visible(self, visible: bool) -> CourtGeometry:
        """Rebuild the geometry when label visibility actually changes."""
        visible = bool(visible)
        if visible != self._show_labels:
            self._show_labels = visible
            self._geometry = build_court(self.dimensions, visible)
            logger.debug("labels %s", "shown" if visible else "hidden")
        return self._geometry

    # ── Per-frame ─────────────────────────────────────────────────────────────

    def tick(self, now_ms: Optional[float] = None) -> int:
        return self.clock.tick(now_ms)

    def advance(self, dt_ms: float) -> int:
        return self.clock.advance(dt_ms)

    # ── Outputs ───────────────────────────────────────────────────────────────

    @property
    def geometry(self) -> CourtGeometry:
        return self._geometry

    @property
    def labels_visible(self) -> bool:
        return self._show_labels

    @property
    def ball_position(self) -> Vec3:
        return self.ball.as_tuple()

    @property
    def camera_position(self) -> Optional[Vec3]:
        """Camera pose while a reset is animating; None when orbit controls own it."""
        if self.camera_reset.in_flight:
            return self.camera.as_tuple()
        return None

    def snapshot(self, frame_number: int) -> FrameSnapshot:
        active = self.sequencer.active
        return FrameSnapshot(
            frame_number=frame_number,
            timestamp_ms=self.clock.now_ms,
            ball=self.ball_position,
            camera=self.camera_position,
            segment_index=active.cursor if active is not None else None,
        )

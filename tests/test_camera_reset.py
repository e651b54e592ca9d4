"""
Tests for the camera reset controller.
"""
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from squash_viz.ball import ShotSequencer
from squash_viz.camera import CameraResetController
from squash_viz.models import Handedness, Position, ShotStyle
from squash_viz import config


class TestCameraReset:
    """Tests for CameraResetController."""

    @pytest.fixture
    def camera(self):
        return Position(5.0, 5.0, 5.0)

    @pytest.fixture
    def sequencer(self, clock, ball, regulation):
        return ShotSequencer(clock, ball, regulation)

    @pytest.fixture
    def controller(self, clock, camera, ball, sequencer):
        return CameraResetController(clock, camera, ball, sequencer=sequencer)

    def test_camera_home_after_duration(self, controller, clock, camera):
        controller.reset_camera()
        clock.tick(config.CAMERA_RESET_MS)
        assert camera.as_tuple() == (0.0, 15.0, 15.0)
        assert not controller.in_flight

    @pytest.mark.parametrize("start", [
        (0.0, 0.0, 0.0), (-8.0, 2.0, 30.0), (0.0, 15.0, 15.0),
        (-21.35, -21.53, -22.5), (37.1, -0.3, -39.9),
    ])
    def test_home_from_any_start(self, controller, clock, camera, start):
        camera.set(*start)
        controller.reset_camera()
        clock.tick(1000)
        assert camera.as_tuple() == (0.0, 15.0, 15.0)

    def test_eased_midpoint(self, controller, clock, camera):
        controller.reset_camera()
        clock.tick(500)
        assert camera.as_tuple() == pytest.approx((2.5, 10.0, 10.0))
        assert controller.in_flight

    def test_ball_hidden_immediately(self, controller, ball):
        ball.set(1.0, 1.0, 1.0)
        controller.reset_camera()
        assert ball.as_tuple() == (0.0, config.BALL_HIDDEN_Y, 0.0)

    def test_active_shot_cancelled(self, controller, sequencer, clock, ball):
        chain = sequencer.start_shot(Handedness.FOREHAND, ShotStyle.STRAIGHT)
        clock.tick(800)
        controller.reset_camera()

        assert chain.cancelled
        assert sequencer.active is None
        for t in (1000, 2000, 3000):
            clock.tick(t)
            assert ball.y == config.BALL_HIDDEN_Y

    def test_second_reset_replaces_first(self, controller, clock, camera):
        first = controller.reset_camera()
        clock.tick(300)
        second = controller.reset_camera()
        assert first.cancelled
        assert controller.active is second

        clock.tick(1300)
        assert camera.as_tuple() == pytest.approx((0.0, 15.0, 15.0))

    def test_without_sequencer(self, clock, camera, ball):
        controller = CameraResetController(clock, camera, ball)
        controller.reset_camera()
        clock.tick(1000)
        assert camera.as_tuple() == pytest.approx(config.CAMERA_HOME)
        assert ball.y == config.BALL_HIDDEN_Y

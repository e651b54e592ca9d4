"""
Tests for shot waypoints and the shot sequencer.
"""
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from squash_viz.ball import (OverlapPolicy, ShotSequencer, build_waypoints, mirror_waypoints,
                             resolve_waypoints, trajectory_duration_ms)
from squash_viz.models import Handedness, ShotStyle

FH, BH = Handedness.FOREHAND, Handedness.BACKHAND
STRAIGHT, BOAST = ShotStyle.STRAIGHT, ShotStyle.BOAST


def _approx(values):
    return pytest.approx(tuple(values), abs=1e-9)


class TestWaypoints:
    """Tests for build_waypoints / resolve_waypoints."""

    def test_forehand_straight(self, regulation):
        points = resolve_waypoints(build_waypoints(FH, STRAIGHT, regulation))
        assert len(points) == 3
        assert points[0] == _approx((2.4, 1.2, 1.875))
        assert points[1] == _approx((2.4, 1.5, -4.845))
        assert points[2] == _approx((3.17, 0.03, 4.845))

    def test_forehand_boast(self, regulation):
        points = resolve_waypoints(build_waypoints(FH, BOAST, regulation))
        assert len(points) == 4
        assert points[0] == _approx((2.4, 0.5, 3.875))
        assert points[1] == _approx((3.17, 1.0, 0.875))
        assert points[2] == _approx((-2.4, 0.8, -4.845))
        assert points[3] == _approx((-3.17, 0.03, -3.875))

    def test_first_waypoint_teleports(self):
        for hand in Handedness:
            for style in ShotStyle:
                first = build_waypoints(hand, style)[0]
                assert first.duration_ms == 0
                assert first.delay_ms == 0

    def test_durations(self):
        assert trajectory_duration_ms(build_waypoints(FH, STRAIGHT)) == 2500
        assert trajectory_duration_ms(build_waypoints(BH, STRAIGHT)) == 2500
        assert trajectory_duration_ms(build_waypoints(FH, BOAST)) == 3000
        assert trajectory_duration_ms(build_waypoints(BH, BOAST)) == 3000

    @pytest.mark.parametrize("style", list(ShotStyle))
    def test_backhand_mirrors_forehand(self, style, regulation):
        fore = resolve_waypoints(build_waypoints(FH, style, regulation))
        back = resolve_waypoints(build_waypoints(BH, style, regulation))
        for f, b in zip(fore, back):
            assert b == _approx((-f[0], f[1], f[2]))

    @pytest.mark.parametrize("style", list(ShotStyle))
    def test_ball_stays_inside_court(self, style, small_court):
        r = 0.03
        for hand in Handedness:
            for x, y, z in resolve_waypoints(build_waypoints(hand, style, small_court, r)):
                assert abs(x) <= small_court.width / 2 - r + 1e-9
                assert abs(z) <= small_court.length / 2 - r + 1e-9
                assert r - 1e-9 <= y <= small_court.height

    def test_mirror_keeps_unset_axes(self):
        mirrored = mirror_waypoints(build_waypoints(FH, STRAIGHT))
        assert mirrored[1].end[0] is None
        assert mirrored[0].end[0] == pytest.approx(-2.4)
        assert mirrored[1].delay_ms == 500

    def test_mirror_twice_is_identity(self):
        waypoints = build_waypoints(FH, BOAST)
        assert mirror_waypoints(mirror_waypoints(waypoints)) == waypoints

    def test_scales_with_court(self, small_court):
        points = resolve_waypoints(build_waypoints(FH, STRAIGHT, small_court))
        assert points[-1] == _approx((2.5 - 0.03, 0.03, 4.0 - 0.03))


class TestShotSequencer:
    """Tests for ShotSequencer."""

    @pytest.fixture
    def sequencer(self, clock, ball, regulation):
        return ShotSequencer(clock, ball, regulation)

    def test_missing_selection_is_noop(self, sequencer, clock, ball):
        assert sequencer.start_shot(None, STRAIGHT) is None
        assert sequencer.start_shot(FH, None) is None
        assert clock.active_count == 0
        assert ball.as_tuple() == (0.0, 0.0, 0.0)

    def test_ball_placed_on_first_tick(self, sequencer, clock, ball):
        sequencer.start_shot(FH, STRAIGHT)
        clock.tick(0)
        assert ball.as_tuple() == _approx((2.4, 1.2, 1.875))

    def test_lead_in_pause(self, sequencer, clock, ball):
        sequencer.start_shot(FH, STRAIGHT)
        clock.tick(0)
        clock.tick(400)
        assert ball.as_tuple() == _approx((2.4, 1.2, 1.875))

    def test_front_wall_at_1500ms(self, sequencer, clock, ball):
        sequencer.start_shot(FH, STRAIGHT)
        for t in range(0, 1501, 100):
            clock.tick(t)
        assert ball.as_tuple() == _approx((2.4, 1.5, -4.845))

    def test_finishes_in_back_corner(self, sequencer, clock, ball, regulation):
        chain = sequencer.start_shot(FH, STRAIGHT)
        for t in range(0, 2501, 50):
            clock.tick(t)
        assert ball.as_tuple() == _approx((3.17, 0.03, 4.845))
        # lands exactly on the last waypoint
        assert ball.as_tuple() == resolve_waypoints(build_waypoints(FH, STRAIGHT, regulation))[-1]
        assert ball.y == 0.03
        assert chain.finished
        assert sequencer.active is None

    def test_new_shot_cancels_running_one(self, sequencer, clock, ball):
        first = sequencer.start_shot(FH, STRAIGHT)
        clock.tick(1000)
        second = sequencer.start_shot(BH, BOAST)

        assert first.cancelled
        assert sequencer.active is second
        assert clock.active_count == 1

        clock.tick(1000)
        assert ball.as_tuple() == _approx((-2.4, 0.5, 3.875))
        clock.tick(4000)
        assert ball.as_tuple() == _approx((3.17, 0.03, -3.875))

    def test_immediate_second_shot_wins(self, sequencer, clock, ball, regulation):
        """No blend of the two chains: the ball ends where the second shot ends."""
        sequencer.start_shot(BH, BOAST)
        sequencer.start_shot(FH, STRAIGHT)
        for t in range(0, 3001, 33):
            clock.tick(t)
        clock.tick(3000)
        assert ball.as_tuple() == resolve_waypoints(build_waypoints(FH, STRAIGHT, regulation))[-1]

    def test_cancel_leaves_ball_in_place(self, sequencer, clock, ball):
        sequencer.start_shot(FH, STRAIGHT)
        clock.tick(1000)
        where = ball.as_tuple()
        sequencer.cancel()
        clock.tick(2500)
        assert ball.as_tuple() == where
        assert sequencer.active is None

    def test_queue_policy_plays_after(self, clock, ball, regulation):
        sequencer = ShotSequencer(clock, ball, regulation, policy=OverlapPolicy.QUEUE)
        chain = sequencer.start_shot(FH, STRAIGHT)
        clock.tick(1000)
        queued = sequencer.start_shot(FH, BOAST)

        assert queued is chain
        assert chain.total_duration_ms == 5500

        clock.tick(2500)
        assert ball.as_tuple() == _approx((2.4, 0.5, 3.875))
        clock.tick(5500)
        assert ball.as_tuple() == _approx((-3.17, 0.03, -3.875))
        assert chain.finished

    def test_queue_policy_idle_starts_fresh(self, clock, ball, regulation):
        sequencer = ShotSequencer(clock, ball, regulation, policy=OverlapPolicy.QUEUE)
        first = sequencer.start_shot(FH, STRAIGHT)
        clock.tick(3000)
        second = sequencer.start_shot(BH, STRAIGHT)
        assert second is not first
        assert second.total_duration_ms == 2500

    def test_chain_names_are_unique(self, sequencer):
        a = sequencer.start_shot(FH, STRAIGHT)
        b = sequencer.start_shot(FH, STRAIGHT)
        assert a.name != b.name
        assert a.name.startswith("forehand_straight")

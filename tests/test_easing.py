"""
Tests for easing functions.
"""
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from squash_viz.animation import Easing, ease, linear, quadratic_in_out


class TestQuadraticInOut:
    """Tests for the quadratic in-out curve."""

    def test_end_points(self):
        assert quadratic_in_out(0.0) == 0.0
        assert quadratic_in_out(1.0) == 1.0

    def test_midpoint(self):
        assert quadratic_in_out(0.5) == pytest.approx(0.5)

    def test_known_values(self):
        assert quadratic_in_out(0.25) == pytest.approx(0.125)
        assert quadratic_in_out(0.75) == pytest.approx(0.875)

    @pytest.mark.parametrize("t", [0.1, 0.2, 0.3, 0.4])
    def test_symmetric(self, t):
        assert quadratic_in_out(t) + quadratic_in_out(1 - t) == pytest.approx(1.0)

    def test_monotonic(self):
        values = [quadratic_in_out(i / 20) for i in range(21)]
        assert values == sorted(values)


class TestEase:
    """Tests for the ease() dispatcher."""

    def test_clamps_input(self):
        assert ease(Easing.QUADRATIC_IN_OUT, -0.5) == 0.0
        assert ease(Easing.QUADRATIC_IN_OUT, 1.5) == 1.0
        assert ease(Easing.LINEAR, 2.0) == 1.0

    def test_linear(self):
        assert linear(0.3) == 0.3
        assert ease(Easing.LINEAR, 0.3) == 0.3

    def test_enum_is_callable(self):
        assert Easing.QUADRATIC_IN_OUT(0.25) == pytest.approx(0.125)

"""
Pytest fixtures for squash court visualiser tests.
"""
import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from squash_viz.animation import AnimationClock
from squash_viz.court import build_court
from squash_viz.models import CourtDimensions, Position
from squash_viz.scene import CourtScene


@pytest.fixture
def regulation():
    """Regulation singles court."""
    return CourtDimensions.regulation()


@pytest.fixture
def small_court():
    """A non-regulation court, to check nothing is hard-coded."""
    return CourtDimensions(
        width=5.0,
        length=8.0,
        height=4.0,
        back_wall_cutout=2.0,
        short_line_distance=3.5,
        half_court_line_length=3.5,
        service_box_width=1.4,
        service_box_depth=1.4,
    )


@pytest.fixture
def clock():
    """Deterministic clock starting at t = 0."""
    return AnimationClock()


@pytest.fixture
def ball():
    return Position()


@pytest.fixture
def geometry(regulation):
    """Regulation court with labels."""
    return build_court(regulation, show_labels=True)


@pytest.fixture
def scene():
    return CourtScene()

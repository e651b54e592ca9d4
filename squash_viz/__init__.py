"""
Squash Court Visualiser – source package.

Public API:  all major components are importable directly from `squash_viz`.

    from squash_viz import CourtScene, Pipeline
    from squash_viz import build_court, ShotSequencer, CameraResetController
    from squash_viz import AnimationClock, TrajectoryChain, Segment, Easing
    from squash_viz import Visualizer, Exporter
    from squash_viz.models import CourtDimensions, Handedness, ShotStyle
"""

# ── Court geometry ────────────────────────────────────────────────────────────
from .court import build_court, surface_corners, surface_normal

# ── Animation ─────────────────────────────────────────────────────────────────
from .animation import AnimationClock, Easing, Segment, TrajectoryChain, ease, quadratic_in_out

# ── Shots + camera ────────────────────────────────────────────────────────────
from .ball   import (OverlapPolicy, ShotSequencer, build_waypoints, mirror_waypoints,
                     resolve_waypoints, trajectory_duration_ms)
from .camera import CameraResetController

# ── Scene / pipeline ──────────────────────────────────────────────────────────
from .scene    import CourtScene
from .pipeline import Pipeline

# ── Utilities ─────────────────────────────────────────────────────────────────
from .visualizer import Visualizer
from .exporter   import Exporter

# ── Models (data classes) ─────────────────────────────────────────────────────
from .models import (
    CourtDimensions, CourtDimensionsError, CourtGeometry,
    SurfaceDescriptor, EdgeLineDescriptor, LabelDescriptor, FaceSide,
    Position, Handedness, ShotStyle, FrameSnapshot, SimulationResult,
)

__version__ = "0.1.0"

__all__ = [
    # Court
    "build_court", "surface_corners", "surface_normal",
    # Animation
    "AnimationClock", "Easing", "Segment", "TrajectoryChain", "ease", "quadratic_in_out",
    # Shots / camera
    "OverlapPolicy", "ShotSequencer", "build_waypoints", "mirror_waypoints",
    "resolve_waypoints", "trajectory_duration_ms",
    "CameraResetController",
    # Scene
    "CourtScene", "Pipeline",
    # Utilities
    "Visualizer", "Exporter",
    # Models
    "CourtDimensions", "CourtDimensionsError", "CourtGeometry",
    "SurfaceDescriptor", "EdgeLineDescriptor", "LabelDescriptor", "FaceSide",
    "Position", "Handedness", "ShotStyle", "FrameSnapshot", "SimulationResult",
]

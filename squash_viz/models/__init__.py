"""
Core data models for the squash court visualiser.
Split across sub-modules; this __init__ re-exports everything.
"""
from .court    import (CourtDimensions, CourtDimensionsError, CourtGeometry,
                       EdgeLineDescriptor, FaceSide, LabelDescriptor,
                       SurfaceDescriptor, Vec3)
from .position import Position
from .shot     import Handedness, ShotStyle
from .frame    import FrameSnapshot, SimulationResult

__all__ = [
    "CourtDimensions", "CourtDimensionsError", "CourtGeometry",
    "EdgeLineDescriptor", "FaceSide", "LabelDescriptor", "SurfaceDescriptor", "Vec3",
    "Position",
    "Handedness", "ShotStyle",
    "FrameSnapshot", "SimulationResult",
]

"""
Frame-level and aggregate result models.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .court import CourtDimensions, Vec3


@dataclass
class FrameSnapshot:
    """Renderer-facing state for a single frame."""
    frame_number: int
    timestamp_ms: float
    ball: Vec3
    camera: Optional[Vec3] = None      # only set while a camera reset is in flight
    segment_index: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "frame": self.frame_number,
            "timestamp_ms": round(self.timestamp_ms, 1),
            "ball": [round(v, 4) for v in self.ball],
            "camera": [round(v, 4) for v in self.camera] if self.camera else None,
            "segment": self.segment_index,
        }


@dataclass
class SimulationResult:
    """Aggregate result for one rendered shot."""
    court: CourtDimensions
    shot: str
    fps: float
    frames: List[FrameSnapshot] = field(default_factory=list)
    total_duration_ms: float = 0.0
    extras: Dict[str, Any] = field(default_factory=dict)

    @property
    def final_ball(self) -> Optional[Vec3]:
        return self.frames[-1].ball if self.frames else None

    def to_dict(self) -> dict:
        return {
            "court": self.court.to_dict(),
            "shot": self.shot,
            "fps": self.fps,
            "total_duration_ms": self.total_duration_ms,
            "frames": [f.to_dict() for f in self.frames],
            "extras": self.extras,
        }

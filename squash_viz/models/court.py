"""
Court-related data models.

Coordinates are metres in a right-handed, y-up frame centred on the
floor: x runs towards the right side wall, z towards the back wall,
so the front wall sits at z = -length/2.
"""
from __future__ import annotations
import json
from dataclasses import asdict, dataclass, fields
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple

from .. import config

Vec3 = Tuple[float, float, float]


class CourtDimensionsError(ValueError):
    """Raised when a court cannot be built from the given dimensions."""


class FaceSide(Enum):
    """Which side of a planar mesh is drawn."""
    FRONT  = "front"
    BACK   = "back"
    DOUBLE = "double"


@dataclass(frozen=True)
class CourtDimensions:
    """
    Immutable dimensions of a squash court (metres).

    Defaults are the regulation singles court. ``out_line_height`` of
    ``None`` means "same as ``height``".
    """
    width: float = config.COURT_WIDTH
    length: float = config.COURT_LENGTH
    height: float = config.COURT_HEIGHT
    tin_height: float = config.TIN_HEIGHT
    service_line_height: float = config.SERVICE_LINE_HEIGHT
    out_line_height: Optional[float] = None
    short_line_distance: float = config.SHORT_LINE_DISTANCE
    half_court_line_length: float = config.HALF_COURT_LINE_LENGTH
    service_box_width: float = config.SERVICE_BOX_WIDTH
    service_box_depth: float = config.SERVICE_BOX_DEPTH
    back_wall_cutout: float = config.BACK_WALL_CUTOUT

    def __post_init__(self):
        if self.out_line_height is None:
            object.__setattr__(self, "out_line_height", self.height)
        self._validate()

    @classmethod
    def regulation(cls) -> "CourtDimensions":
        return cls()

    @classmethod
    def from_dict(cls, data: dict) -> "CourtDimensions":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise CourtDimensionsError(f"Unknown court dimension(s): {unknown}")
        try:
            values = {k: float(v) for k, v in data.items() if v is not None}
        except (TypeError, ValueError) as e:
            raise CourtDimensionsError(f"Court dimensions must be numbers: {e}") from e
        return cls(**values)

    @classmethod
    def from_json(cls, path) -> "CourtDimensions":
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Court dimensions file not found: {path}")
        with open(path) as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise CourtDimensionsError(f"{path}: expected a JSON object")
        return cls.from_dict(data)

    def to_dict(self) -> dict:
        return asdict(self)

    @property
    def back_wall_height(self) -> float:
        return self.height - self.back_wall_cutout

    # ── Internals ──────────────────────────────────────────────────────────────

    def _validate(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not value > 0:
                raise CourtDimensionsError(f"{f.name} must be > 0 (got {value})")

        if not (self.tin_height < self.service_line_height
                < self.out_line_height <= self.height):
            raise CourtDimensionsError(
                "Expected tin < service line < out line <= height, got "
                f"{self.tin_height}, {self.service_line_height}, "
                f"{self.out_line_height}, {self.height}"
            )
        if self.back_wall_cutout >= self.height:
            raise CourtDimensionsError("back_wall_cutout must be lower than height")
        if self.short_line_distance >= self.length:
            raise CourtDimensionsError("short_line_distance must be shorter than length")
        if self.half_court_line_length > self.length:
            raise CourtDimensionsError("half_court_line_length exceeds court length")
        if self.service_box_width > self.width / 2:
            raise CourtDimensionsError("service box is wider than half the court")
        if self.service_box_depth > self.short_line_distance:
            raise CourtDimensionsError("service box extends past the back wall")


@dataclass(frozen=True)
class SurfaceDescriptor:
    """One planar mesh: a unit plane scaled by ``extent``, rotated by ``rotation``."""
    name: str
    position: Vec3
    rotation: Vec3              # Euler angles (radians), XYZ order
    extent: Tuple[float, float]
    color: str
    side: FaceSide = FaceSide.FRONT
    layer: int = 0              # draw order for coplanar overlays (0 = base panel)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "position": list(self.position),
            "rotation": list(self.rotation),
            "extent": list(self.extent),
            "color": self.color,
            "side": self.side.value,
            "layer": self.layer,
        }


@dataclass(frozen=True)
class EdgeLineDescriptor:
    """A wireframe line between two points."""
    name: str
    start: Vec3
    end: Vec3
    color: str = config.EDGE_COLOR

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "start": list(self.start),
            "end": list(self.end),
            "color": self.color,
        }


@dataclass(frozen=True)
class LabelDescriptor:
    text: str
    position: Vec3
    rotation: Vec3
    font_size: float
    color: str = config.LABEL_COLOR

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "position": list(self.position),
            "rotation": list(self.rotation),
            "font_size": self.font_size,
            "color": self.color,
        }


@dataclass(frozen=True)
class CourtGeometry:
    """Everything the renderer needs to draw a court."""
    surfaces: Tuple[SurfaceDescriptor, ...] = ()
    edges: Tuple[EdgeLineDescriptor, ...] = ()
    labels: Tuple[LabelDescriptor, ...] = ()

    def surface(self, name: str) -> SurfaceDescriptor:
        for s in self.surfaces:
            if s.name == name:
                return s
        raise KeyError(name)

    def edge(self, name: str) -> EdgeLineDescriptor:
        for e in self.edges:
            if e.name == name:
                return e
        raise KeyError(name)

    def to_dict(self) -> dict:
        return {
            "surfaces": [s.to_dict() for s in self.surfaces],
            "edges":    [e.to_dict() for e in self.edges],
            "labels":   [l.to_dict() for l in self.labels],
        }

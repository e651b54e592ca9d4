"""
Mutable 3D position cell shared between an animation and the renderer.
"""
from dataclasses import dataclass
from typing import Iterable, Tuple


@dataclass
class Position:
    """
    A live, mutable point in court coordinates.

    Animations write into it once per frame; the renderer reads it.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def set(self, x: float, y: float, z: float) -> None:
        self.x, self.y, self.z = float(x), float(y), float(z)

    def set_from(self, values: Iterable[float]) -> None:
        self.set(*values)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_dict(self) -> dict:
        return {"x": round(self.x, 4), "y": round(self.y, 4), "z": round(self.z, 4)}

"""
3D helpers for placing unit planes in court space.

Surfaces follow the usual scene-graph convention: a unit plane in the
local XY plane (normal +Z), scaled by its extent, rotated by XYZ Euler
angles, then translated.
"""
from __future__ import annotations
from typing import Sequence
import numpy as np

from ..models.court import SurfaceDescriptor


def euler_to_matrix(rotation: Sequence[float]) -> np.ndarray:
    """3×3 rotation matrix for intrinsic XYZ Euler angles (radians)."""
    a, b, c = rotation
    ca, sa = np.cos(a), np.sin(a)
    cb, sb = np.cos(b), np.sin(b)
    cc, sc = np.cos(c), np.sin(c)
    rx = np.array([[1, 0, 0], [0, ca, -sa], [0, sa, ca]])
    ry = np.array([[cb, 0, sb], [0, 1, 0], [-sb, 0, cb]])
    rz = np.array([[cc, -sc, 0], [sc, cc, 0], [0, 0, 1]])
    return rx @ ry @ rz


def surface_corners(surface: SurfaceDescriptor) -> np.ndarray:
    """World-space corners (4×3), counter-clockwise seen from the front face."""
    hw, hh = surface.extent[0] / 2.0, surface.extent[1] / 2.0
    local = np.array([
        [-hw, -hh, 0.0],
        [ hw, -hh, 0.0],
        [ hw,  hh, 0.0],
        [-hw,  hh, 0.0],
    ])
    R = euler_to_matrix(surface.rotation)
    return local @ R.T + np.asarray(surface.position, dtype=np.float64)


def surface_normal(surface: SurfaceDescriptor) -> np.ndarray:
    """Unit normal of the front face."""
    return euler_to_matrix(surface.rotation) @ np.array([0.0, 0.0, 1.0])

"""
Software rendering of the court, ball and labels with OpenCV.

A pinhole camera looks from the camera position at the court centre.
Surfaces are filled back-to-front per draw layer, with front/back face
culling taken from each descriptor; edges and labels go on top.
"""
from __future__ import annotations
from typing import List, Optional, Sequence, Tuple
import cv2
import numpy as np

from .court.transforms import surface_corners, surface_normal
from .models.court import CourtGeometry, FaceSide, SurfaceDescriptor
from . import config

Color = Tuple[int, int, int]

HERSHEY_PIXEL_HEIGHT = 22.0     # glyph height at font scale 1.0
DEFAULT_COLOR: Color = (128, 128, 128)


def css_to_bgr(name: str) -> Color:
    return config.COLOR_BGR.get(name, DEFAULT_COLOR)


class Visualizer:
    """Projects court descriptors and the ball into BGR frames."""

    def __init__(
        self,
        width: int = config.FRAME_WIDTH,
        height: int = config.FRAME_HEIGHT,
        fov_deg: float = config.CAMERA_FOV_DEG,
        target: Sequence[float] = config.CAMERA_TARGET,
        edge_thickness: int = config.EDGE_THICKNESS,
        draw_trajectory: bool = True,
        trajectory_length: int = 45,
    ):
        self.width = width
        self.height = height
        self.fov_deg = fov_deg
        self.target = np.asarray(target, dtype=np.float64)
        self.edge_thickness = edge_thickness
        self.draw_trajectory = draw_trajectory
        self.trajectory_length = trajectory_length
        self.font = cv2.FONT_HERSHEY_SIMPLEX
        self.focal_px = (height / 2.0) / np.tan(np.radians(fov_deg) / 2.0)

        self._eye = np.zeros(3)
        self._view = np.eye(3)

    # ── Camera ────────────────────────────────────────────────────────────────

    def look_from(self, eye: Sequence[float]) -> None:
        """Point the camera at ``target`` from ``eye``."""
        eye = np.asarray(eye, dtype=np.float64)
        forward = self.target - eye
        norm = np.linalg.norm(forward)
        if norm < 1e-9:
            raise ValueError("Camera position coincides with its target")
        forward /= norm

        up = np.array([0.0, 1.0, 0.0])
        if abs(np.dot(forward, up)) > 0.999:     # looking straight up/down
            up = np.array([0.0, 0.0, -1.0])
        right = np.cross(forward, up)
        right /= np.linalg.norm(right)
        true_up = np.cross(right, forward)

        self._eye = eye
        self._view = np.stack([right, true_up, forward])

    def project(self, points: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """
        Project world points (N×3) to pixels.

        Returns (pixels N×2 float, depth N). Points behind the near plane
        get depth <= CAMERA_NEAR and should not be drawn.
        """
        pts = np.atleast_2d(np.asarray(points, dtype=np.float64))
        cam = (pts - self._eye) @ self._view.T
        depth = cam[:, 2]
        safe = np.where(depth > config.CAMERA_NEAR, depth, np.inf)
        px = self.width / 2.0 + self.focal_px * cam[:, 0] / safe
        py = self.height / 2.0 - self.focal_px * cam[:, 1] / safe
        return np.stack([px, py], axis=1), depth

    def _on_screen(self, pixel: np.ndarray, margin: float = 0.0) -> bool:
        x, y = pixel
        return (-margin <= x <= self.width + margin) and (-margin <= y <= self.height + margin)

    # ── Drawing ───────────────────────────────────────────────────────────────

    def render(
        self,
        geometry: CourtGeometry,
        ball: Optional[Sequence[float]],
        camera: Sequence[float] = config.CAMERA_HOME,
        trail: Optional[List[Sequence[float]]] = None,
        ball_radius: float = config.BALL_RADIUS,
        info: Optional[List[str]] = None,
    ) -> np.ndarray:
        """Render one frame and return it as a BGR image."""
        self.look_from(camera)
        frame = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        frame[:] = config.BACKGROUND_BGR

        self.draw_surfaces(frame, geometry.surfaces)
        self.draw_edges(frame, geometry)
        self.draw_labels(frame, geometry)
        if self.draw_trajectory and trail:
            self._draw_trajectory(frame, trail)
        if ball is not None:
            self.draw_ball(frame, ball, ball_radius)
        if info:
            self.draw_frame_info(frame, info)
        return frame

    def is_visible(self, surface: SurfaceDescriptor) -> bool:
        """Face culling: is the drawn side of ``surface`` turned towards the camera?"""
        if surface.side is FaceSide.DOUBLE:
            return True
        to_eye = self._eye - np.asarray(surface.position, dtype=np.float64)
        facing = float(np.dot(surface_normal(surface), to_eye)) > 0
        return facing if surface.side is FaceSide.FRONT else not facing

    def draw_surfaces(self, frame: np.ndarray, surfaces: Sequence[SurfaceDescriptor]) -> None:
        polys = []
        for surface in surfaces:
            if not self.is_visible(surface):
                continue
            pixels, depth = self.project(surface_corners(surface))
            if np.any(depth <= config.CAMERA_NEAR):
                continue
            polys.append((surface.layer, -float(depth.mean()), pixels, surface.color))

        # lower layers first, then far-to-near within a layer
        for _, _, pixels, color in sorted(polys, key=lambda p: (p[0], p[1])):
            cv2.fillConvexPoly(frame, np.round(pixels).astype(np.int32),
                               css_to_bgr(color), lineType=cv2.LINE_AA)

    def draw_edges(self, frame: np.ndarray, geometry: CourtGeometry) -> None:
        for edge in geometry.edges:
            pixels, depth = self.project(np.array([edge.start, edge.end]))
            if np.any(depth <= config.CAMERA_NEAR):
                continue
            p1, p2 = (tuple(int(round(v)) for v in p) for p in pixels)
            cv2.line(frame, p1, p2, css_to_bgr(edge.color), self.edge_thickness, cv2.LINE_AA)

    def draw_labels(self, frame: np.ndarray, geometry: CourtGeometry) -> None:
        for label in geometry.labels:
            pixels, depth = self.project(np.array([label.position]))
            if depth[0] <= config.CAMERA_NEAR or not self._on_screen(pixels[0]):
                continue
            text_px = label.font_size * self.focal_px / depth[0]
            scale = max(text_px / HERSHEY_PIXEL_HEIGHT, 0.2)
            lines = label.text.split("\n")
            line_h = int(text_px * 1.2)
            x0, y0 = pixels[0]
            y = y0 - line_h * (len(lines) - 1) / 2
            for line in lines:
                (w, _), _ = cv2.getTextSize(line, self.font, scale, 1)
                cv2.putText(frame, line, (int(x0 - w / 2), int(y)), self.font, scale,
                            css_to_bgr(label.color), 1, cv2.LINE_AA)
                y += line_h

    def draw_ball(self, frame: np.ndarray, ball: Sequence[float],
                  radius: float = config.BALL_RADIUS) -> bool:
        """Draw the ball; returns False when it is behind the camera or off screen."""
        pixels, depth = self.project(np.array([ball]))
        if depth[0] <= config.CAMERA_NEAR:
            return False
        r_px = max(int(round(radius * self.focal_px / depth[0])), 3)
        if not self._on_screen(pixels[0], margin=r_px):
            return False
        center = tuple(int(round(v)) for v in pixels[0])
        cv2.circle(frame, center, r_px, css_to_bgr(config.BALL_COLOR), -1, cv2.LINE_AA)
        return True

    def _draw_trajectory(self, frame: np.ndarray, trail: List[Sequence[float]]) -> None:
        """Fading polyline through recent ball positions."""
        points = trail[-self.trajectory_length:]
        if len(points) < 2:
            return
        pixels, depth = self.project(np.array(points))
        color = css_to_bgr(config.BALL_COLOR)
        for i in range(1, len(points)):
            if depth[i - 1] <= config.CAMERA_NEAR or depth[i] <= config.CAMERA_NEAR:
                continue
            if not (self._on_screen(pixels[i - 1]) and self._on_screen(pixels[i])):
                continue
            pt1 = tuple(int(round(v)) for v in pixels[i - 1])
            pt2 = tuple(int(round(v)) for v in pixels[i])
            thickness = max(1, int(self.edge_thickness * (i / len(points))))
            cv2.line(frame, pt1, pt2, color, thickness, cv2.LINE_AA)

    def draw_frame_info(self, frame: np.ndarray, lines: List[str]) -> None:
        y_offset = 30
        for line in lines:
            cv2.putText(frame, line, (10, y_offset), self.font, 0.6, (0, 255, 0), 1)
            y_offset += 25

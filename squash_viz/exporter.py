"""
Export court geometry and simulated shots to JSON and video.
"""
import json
import logging
import cv2
import numpy as np
from pathlib import Path

from .models import CourtGeometry, SimulationResult
from . import config

logger = logging.getLogger(__name__)


class Exporter:
    """Writes geometry, trajectories and rendered frames to an output directory."""

    def __init__(self, output_dir: str = str(config.RESULTS_DIR)):
        """
        Initialize exporter.

        Args:
            output_dir: Directory for output files
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def export_geometry(self, geometry: CourtGeometry,
                        filename: str = "court_geometry.json") -> Path:
        """Write surface, edge and label descriptors to JSON."""
        return self._write_json(geometry.to_dict(), filename)

    def export_result(self, result: SimulationResult,
                      filename: str = "shot.json") -> Path:
        """Write every frame snapshot of a simulated shot to JSON."""
        return self._write_json(result.to_dict(), filename)

    def create_video_writer(
        self,
        width: int,
        height: int,
        fps: float,
        filename: str = "shot.mp4",
    ) -> cv2.VideoWriter:
        """
        Create a video writer, trying several codecs.

        Returns:
            An opened OpenCV VideoWriter

        Raises:
            RuntimeError: if no codec could be opened
        """
        output_path = self.output_dir / filename
        codecs = [
            config.OUTPUT_VIDEO_CODEC,  # mp4v (MPEG-4)
            "XVID",
            "MJPG",
        ]

        for codec in codecs:
            fourcc = cv2.VideoWriter_fourcc(*codec)
            writer = cv2.VideoWriter(str(output_path), fourcc, fps, (width, height))
            if writer.isOpened():
                logger.info("writing %s with codec %s", output_path, codec)
                return writer
            writer.release()
            logger.debug("codec %s unavailable", codec)

        raise RuntimeError(
            f"Could not create video writer for {output_path}. "
            f"Tried codecs: {codecs}."
        )

    def save_frame(self, frame: np.ndarray, filename: str) -> Path:
        """Save a single frame as image."""
        output_path = self.output_dir / filename
        if not cv2.imwrite(str(output_path), frame):
            raise RuntimeError(f"Could not write image {output_path}")
        return output_path

    def generate_summary(self, result: SimulationResult) -> dict:
        """Path length, speeds and end point of a simulated shot."""
        if not result.frames:
            return {"error": "No frames simulated"}

        balls = np.array([f.ball for f in result.frames], dtype=np.float64)
        times = np.array([f.timestamp_ms for f in result.frames], dtype=np.float64) / 1000.0

        steps = np.linalg.norm(np.diff(balls, axis=0), axis=1)
        dt = np.diff(times)
        # teleports happen within a single frame and would dominate the speed
        moving = (dt > 0) & (steps < result.court.length)
        speeds = steps[moving] / dt[moving] if np.any(moving) else np.zeros(1)

        return {
            "shot": result.shot,
            "court": f"{result.court.width}x{result.court.length}x{result.court.height}",
            "frames": len(result.frames),
            "fps": result.fps,
            "duration_ms": result.total_duration_ms,
            "path_length_m": round(float(steps[moving].sum()), 3) if np.any(moving) else 0.0,
            "max_speed_ms": round(float(speeds.max()), 3),
            "mean_speed_ms": round(float(speeds.mean()), 3),
            "start": [round(float(v), 4) for v in balls[0]],
            "end": [round(float(v), 4) for v in balls[-1]],
        }

    def export_summary(self, result: SimulationResult,
                       filename: str = "shot_summary.json") -> Path:
        return self._write_json(self.generate_summary(result), filename)

    def _write_json(self, payload: dict, filename: str) -> Path:
        output_path = self.output_dir / filename
        with open(output_path, 'w') as f:
            json.dump(payload, f, indent=2)
        logger.info("wrote %s", output_path)
        return output_path

"""
Pipeline – play one shot on a fixed timestep and record/render every frame.

The scene is driven with exact frame timestamps (frame_number * 1000/fps),
so the same shot always produces the same snapshots.
"""
from __future__ import annotations
import logging
import math
from pathlib import Path
from typing import Optional, Tuple
from tqdm import tqdm

from .ball import OverlapPolicy
from .exporter import Exporter
from .models import CourtDimensions, Handedness, ShotStyle, SimulationResult
from .scene import CourtScene
from .visualizer import Visualizer
from . import config

logger = logging.getLogger(__name__)


class Pipeline:
    """Simulates a shot and writes its frames, video and JSON outputs."""

    def __init__(
        self,
        output_dir:    str  = str(config.RESULTS_DIR),
        dimensions:    Optional[CourtDimensions] = None,
        fps:           float = config.RENDER_FPS,
        frame_size:    Tuple[int, int] = (config.FRAME_WIDTH, config.FRAME_HEIGHT),
        show_labels:   bool = False,
        save_video:    bool = True,
        save_json:     bool = True,
        show_progress: bool = True,
        policy:        OverlapPolicy = OverlapPolicy.CANCEL,
    ):
        if fps <= 0:
            raise ValueError(f"fps must be > 0 (got {fps})")
        self.output_dir    = Path(output_dir)
        self.dimensions    = dimensions or CourtDimensions.regulation()
        self.fps           = fps
        self.frame_size    = frame_size
        self.show_labels   = show_labels
        self.save_video    = save_video
        self.save_json     = save_json
        self.show_progress = show_progress
        self.policy        = policy

        self._visualizer = Visualizer(width=frame_size[0], height=frame_size[1])
        self._exporter   = None   # created lazily so dry runs touch no files

    # ── Public entry point ────────────────────────────────────────────────────

    def process(
        self,
        handedness:  Handedness,
        style:       ShotStyle,
        output_name: Optional[str] = None,
    ) -> SimulationResult:
        scene = CourtScene(self.dimensions, show_labels=self.show_labels, policy=self.policy)
        chain = scene.start_shot(handedness, style)
        if chain is None:
            raise ValueError("No shot selected: handedness and style are required")

        shot = f"{handedness.to_string()} {style.to_string()}"
        base = output_name or f"{handedness.value}_{style.value}"
        total_ms = chain.total_duration_ms
        frame_ms = 1000.0 / self.fps
        n_frames = int(math.ceil((total_ms + config.TAIL_MS) / frame_ms)) + 1

        result = SimulationResult(court=self.dimensions, shot=shot, fps=self.fps,
                                  total_duration_ms=total_ms)
        result.extras["segments"] = [s.label for s in chain.segments]
        result.extras["policy"] = self.policy.value

        writer = None
        if self.save_video:
            writer = self._get_exporter().create_video_writer(
                self.frame_size[0], self.frame_size[1], self.fps,
                filename=f"{base}.mp4",
            )

        frames_iter = range(n_frames)
        if self.show_progress:
            frames_iter = tqdm(frames_iter, total=n_frames, desc=shot, unit="frames")

        trail = []
        try:
            for fn in frames_iter:
                scene.tick(fn * frame_ms)
                snap = scene.snapshot(fn)
                result.frames.append(snap)
                trail.append(snap.ball)

                if writer:
                    writer.write(self._visualizer.render(
                        scene.geometry, snap.ball,
                        camera=scene.camera.as_tuple(),
                        trail=trail,
                        info=[shot, f"t = {snap.timestamp_ms:.0f} ms"],
                    ))
        finally:
            if writer:
                writer.release()

        if self.save_json:
            exporter = self._get_exporter()
            exporter.export_result(result, filename=f"{base}.json")
            exporter.export_geometry(scene.geometry, filename=f"{base}_court.json")
            exporter.export_summary(result, filename=f"{base}_summary.json")

        logger.info("%s: %d frames, %.0f ms", shot, len(result.frames), total_ms)
        return result

    def _get_exporter(self) -> Exporter:
        if self._exporter is None:
            self._exporter = Exporter(str(self.output_dir))
        return self._exporter

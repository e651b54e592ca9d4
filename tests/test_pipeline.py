"""
Tests for the end-to-end pipeline.
"""
import json
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from squash_viz.models import Handedness, ShotStyle
from squash_viz.pipeline import Pipeline


def _pipeline(tmp_path, **kwargs):
    options = dict(output_dir=str(tmp_path), fps=10, save_video=False, show_progress=False)
    options.update(kwargs)
    return Pipeline(**options)


class TestPipeline:
    """Tests for Pipeline."""

    def test_invalid_fps(self, tmp_path):
        with pytest.raises(ValueError):
            _pipeline(tmp_path, fps=0)

    def test_frame_count(self, tmp_path):
        result = _pipeline(tmp_path).process(Handedness.FOREHAND, ShotStyle.STRAIGHT)
        # 2500 ms shot + 500 ms tail at 100 ms per frame, both ends included
        assert len(result.frames) == 31
        assert result.total_duration_ms == 2500
        assert result.shot == "Forehand Straight"

    def test_final_position(self, tmp_path):
        result = _pipeline(tmp_path).process(Handedness.BACKHAND, ShotStyle.BOAST)
        assert result.final_ball == pytest.approx((3.17, 0.03, -3.875))

    def test_timestamps_fixed_step(self, tmp_path):
        result = _pipeline(tmp_path).process(Handedness.FOREHAND, ShotStyle.BOAST)
        stamps = [f.timestamp_ms for f in result.frames[:4]]
        assert stamps == [0.0, 100.0, 200.0, 300.0]

    def test_deterministic(self, tmp_path):
        a = _pipeline(tmp_path / "a").process(Handedness.FOREHAND, ShotStyle.BOAST)
        b = _pipeline(tmp_path / "b").process(Handedness.FOREHAND, ShotStyle.BOAST)
        assert [f.ball for f in a.frames] == [f.ball for f in b.frames]

    def test_json_outputs(self, tmp_path):
        _pipeline(tmp_path).process(Handedness.FOREHAND, ShotStyle.STRAIGHT, output_name="drive")
        assert (tmp_path / "drive.json").exists()
        assert (tmp_path / "drive_summary.json").exists()
        court = json.loads((tmp_path / "drive_court.json").read_text())
        assert len(court["surfaces"]) == 21

    def test_default_output_name(self, tmp_path):
        _pipeline(tmp_path).process(Handedness.BACKHAND, ShotStyle.BOAST)
        assert (tmp_path / "backhand_boast.json").exists()

    def test_no_json_writes_nothing(self, tmp_path):
        out = tmp_path / "none"
        _pipeline(out, save_json=False).process(Handedness.FOREHAND, ShotStyle.STRAIGHT)
        assert not out.exists()

    def test_labels_exported(self, tmp_path):
        _pipeline(tmp_path, show_labels=True).process(Handedness.FOREHAND, ShotStyle.STRAIGHT)
        court = json.loads((tmp_path / "forehand_straight_court.json").read_text())
        assert len(court["labels"]) == 10

    def test_video(self, tmp_path):
        pipeline = _pipeline(tmp_path, fps=5, frame_size=(160, 120), save_video=True,
                             save_json=False)
        pipeline.process(Handedness.FOREHAND, ShotStyle.STRAIGHT, output_name="clip")
        video = tmp_path / "clip.mp4"
        assert video.exists()
        assert video.stat().st_size > 0

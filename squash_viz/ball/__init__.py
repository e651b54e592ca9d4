from .sequencer import (OverlapPolicy, ShotSequencer, build_waypoints, mirror_waypoints,
                        resolve_waypoints, trajectory_duration_ms)

__all__ = [
    "OverlapPolicy", "ShotSequencer", "build_waypoints", "mirror_waypoints",
    "resolve_waypoints", "trajectory_duration_ms",
]

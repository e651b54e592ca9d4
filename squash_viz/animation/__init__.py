from .easing  import Easing, ease, linear, quadratic_in_out
from .segment import Segment, TrajectoryChain
from .clock   import AnimationClock

__all__ = [
    "Easing", "ease", "linear", "quadratic_in_out",
    "Segment", "TrajectoryChain",
    "AnimationClock",
]

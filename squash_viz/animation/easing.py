"""
Easing functions: map normalised time t ∈ [0, 1] to normalised progress.
"""
from enum import Enum


def linear(t: float) -> float:
    return t


def quadratic_in_out(t: float) -> float:
    """Accelerate through the first half, decelerate through the second."""
    if t < 0.5:
        return 2.0 * t * t
    return 1.0 - (-2.0 * t + 2.0) ** 2 / 2.0


class Easing(Enum):
    LINEAR           = "linear"
    QUADRATIC_IN_OUT = "quadratic_in_out"

    def __call__(self, t: float) -> float:
        return ease(self, t)


_EASINGS = {
    Easing.LINEAR:           linear,
    Easing.QUADRATIC_IN_OUT: quadratic_in_out,
}


def ease(kind: Easing, t: float) -> float:
    """Apply ``kind`` to ``t`` after clamping it to [0, 1]."""
    t = min(max(t, 0.0), 1.0)
    return _EASINGS[kind](t)

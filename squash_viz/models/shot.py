"""
Shot selection models.
"""
from enum import Enum


class Handedness(Enum):
    """Which side of the body the shot is played on."""
    FOREHAND = "forehand"
    BACKHAND = "backhand"

    @property
    def sign(self) -> int:
        """+1 for forehand (right side of the court), -1 for backhand."""
        return 1 if self is Handedness.FOREHAND else -1

    def to_string(self) -> str:
        return self.name.title()


class ShotStyle(Enum):
    STRAIGHT = "straight"     # drive parallel to the side wall
    BOAST    = "boast"        # off the side wall, across to the front

    def to_string(self) -> str:
        return self.name.title()

from .geometry   import build_court
from .transforms import euler_to_matrix, surface_corners, surface_normal

__all__ = ["build_court", "euler_to_matrix", "surface_corners", "surface_normal"]

from .reset import CameraResetController

__all__ = ["CameraResetController"]

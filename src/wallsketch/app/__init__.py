"""
Viewport-facing facade: the Store and the camera interface it talks to.
"""
from wallsketch.app.state import Store
from wallsketch.app.camera import CameraController

__all__ = ["Store", "CameraController"]

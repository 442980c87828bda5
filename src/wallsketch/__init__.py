"""Interactive wall sketching core: snapping, validation, topology edits and history."""
from wallsketch.config import DrawingConfig
from wallsketch.controller.session import ClickOutcome, Drawing, DrawingSession, Idle
from wallsketch.model.geometry_primitives import PlanePoint, Segment, WallSet
from wallsketch.model.history import HistoryManager

__all__ = [
    "ClickOutcome",
    "Drawing",
    "DrawingConfig",
    "DrawingSession",
    "HistoryManager",
    "Idle",
    "PlanePoint",
    "Segment",
    "WallSet",
]

"""
Configuration & Drawing Constants
=================================
This module serves as the central registry for the drawing tolerances and
snapping defaults.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (grid size, snap radius, minimum
   corner angle) scattered throughout the geometry code.
2. Overrides: It can read user overrides from a QSettings store, the same
   settings mechanism the application uses for its other preferences.

Exports:
    GRID_SIZE (float): Grid spacing used by grid snapping.
    SNAP_RADIUS (float): Radius within which a point snaps to a vertex.
    MIN_ANGLE_DEG (float): Smallest allowed angle between walls at a joint.
    DrawingConfig: Dataclass bundling the values above.
"""
from __future__ import annotations

from dataclasses import dataclass
import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings


# Global Constants
GRID_SIZE: float = 0.25
SNAP_RADIUS: float = 0.5
MIN_ANGLE_DEG: float = 30.0
INTERSECTION_EPS: float = 1e-6
LENGTH_EPS: float = 1e-6

SETTINGS_GROUP: str = "drawing"


@dataclass
class DrawingConfig:
    """Tolerances and toggles used by one drawing session."""
    grid_size: float = GRID_SIZE
    snap_radius: float = SNAP_RADIUS
    min_angle_deg: float = MIN_ANGLE_DEG
    intersection_eps: float = INTERSECTION_EPS
    length_eps: float = LENGTH_EPS
    snap_grid_enabled: bool = True

    @property
    def min_angle_rad(self) -> float:
        return math.radians(self.min_angle_deg)

    @classmethod
    def from_settings(cls, settings: QSettings) -> DrawingConfig:
        """
        Build a config from a QSettings store.

        Missing keys fall back to the module defaults.
        """
        defaults = cls()
        settings.beginGroup(SETTINGS_GROUP)
        try:
            return cls(
                grid_size=float(settings.value("grid_size", defaults.grid_size, type=float)),
                snap_radius=float(settings.value("snap_radius", defaults.snap_radius, type=float)),
                min_angle_deg=float(settings.value("min_angle_deg", defaults.min_angle_deg, type=float)),
                intersection_eps=defaults.intersection_eps,
                length_eps=defaults.length_eps,
                snap_grid_enabled=bool(settings.value("snap_grid", defaults.snap_grid_enabled, type=bool)),
            )
        finally:
            settings.endGroup()

    def to_settings(self, settings: QSettings) -> None:
        settings.beginGroup(SETTINGS_GROUP)
        settings.setValue("grid_size", self.grid_size)
        settings.setValue("snap_radius", self.snap_radius)
        settings.setValue("min_angle_deg", self.min_angle_deg)
        settings.setValue("snap_grid", self.snap_grid_enabled)
        settings.endGroup()

"""
Point snapping: grid snapping and magnetic snapping to existing vertices.
"""
from __future__ import annotations

import logging
import math
from typing import Iterable, Optional, Sequence

import numpy as np

from wallsketch.config import GRID_SIZE, SNAP_RADIUS
from wallsketch.model.geometry_primitives import PlanePoint, Segment

logger = logging.getLogger(__name__)


def _round_half_up(value: float) -> float:
    return math.floor(value + 0.5)


def snap_to_grid(p: PlanePoint, grid_size: float = GRID_SIZE) -> PlanePoint:
    """Round x and z to the nearest multiple of `grid_size`; y is kept.

    Halfway values round up, so 0.125 snaps to 0.25 on the default grid.
    """
    return PlanePoint(
        x=_round_half_up(p.x / grid_size) * grid_size,
        z=_round_half_up(p.z / grid_size) * grid_size,
        y=p.y,
    )


def snap_candidates(walls: Iterable[Segment]) -> list[PlanePoint]:
    """All wall endpoints in wall order, start before end."""
    candidates: list[PlanePoint] = []
    for seg in walls:
        candidates.append(seg.start)
        candidates.append(seg.end)
    return candidates


def apply_snap(
    raw: Optional[PlanePoint],
    grid_enabled: bool,
    candidates: Sequence[PlanePoint],
    radius: float = SNAP_RADIUS,
    grid_size: float = GRID_SIZE
) -> Optional[PlanePoint]:
    """
    Snap a raw plane point.

    The point is first snapped to the grid (if enabled). If the nearest
    candidate vertex lies within `radius` of that result, the vertex wins.
    On equal distances the earliest candidate is chosen.

    Args:
        raw: The projected pointer position, or None if the pick ray missed.
        grid_enabled: Whether grid snapping is active.
        candidates: Existing vertices acting as magnetic targets.
        radius: Vertex snap radius in world units.
        grid_size: Grid spacing in world units.

    Returns:
        The snapped point, or None if `raw` is None.
    """
    if raw is None:
        return None

    snapped = snap_to_grid(raw, grid_size) if grid_enabled else raw
    if not candidates:
        return snapped

    coords = np.array([(c.x, c.z) for c in candidates], dtype=float)
    dist_sq = np.sum((coords - snapped.to_array()) ** 2, axis=1)
    # argmin returns the first index among equal minima
    idx = int(np.argmin(dist_sq))

    if dist_sq[idx] <= radius * radius:
        closest = candidates[idx]
        logger.debug(f"Snapped to nearby point: ({closest.x:g}, {closest.z:g})")
        return closest

    if grid_enabled:
        logger.debug(f"Snapped to grid: ({snapped.x:g}, {snapped.z:g})")
    return snapped

"""
Wall Topology Editing
=====================
Pure functions that produce a new wall set from an existing one.

Each function returns a fresh tuple and leaves its input untouched, which is
what allows the history to keep old wall sets as snapshots.
"""
from __future__ import annotations

import logging
from typing import Optional

from wallsketch.config import LENGTH_EPS
from wallsketch.model.errors import WallNotFoundError
from wallsketch.model.geometry_primitives import PlanePoint, Segment, WallSet

logger = logging.getLogger(__name__)


def find_wall(walls: WallSet, segment_id: Optional[str]) -> Optional[Segment]:
    for seg in walls:
        if seg.id == segment_id:
            return seg
    return None


def append(
    walls: WallSet,
    start: PlanePoint,
    end: PlanePoint,
    *,
    length_eps: float = LENGTH_EPS
) -> WallSet:
    """Return `walls` with a new segment start->end appended."""
    new_seg = Segment.create(start, end, length_eps=length_eps)
    logger.debug(f"Appending wall {new_seg.id}")
    return (*walls, new_seg)


def split_and_insert(
    walls: WallSet,
    target: Segment,
    intersection_point: PlanePoint,
    new_start: PlanePoint,
    *,
    length_eps: float = LENGTH_EPS
) -> WallSet:
    """
    Split `target` at `intersection_point` and connect `new_start` to it.

    The two halves take the place of `target` in the ordering, the connecting
    segment is appended at the end. All other walls keep their ids.

    Raises:
        WallNotFoundError: `target` is not part of `walls`.
        DegenerateSegmentError: one of the three new segments would be too short.
    """
    if target not in walls:
        raise WallNotFoundError(f"Wall '{target.id}' not found.")

    # build all three first so a degenerate piece leaves nothing half-done
    seg_a = Segment.create(target.start, intersection_point, length_eps=length_eps)
    seg_b = Segment.create(intersection_point, target.end, length_eps=length_eps)
    connector = Segment.create(new_start, intersection_point, length_eps=length_eps)

    next_walls: list[Segment] = []
    for seg in walls:
        if seg.id == target.id:
            next_walls.extend((seg_a, seg_b))
        else:
            next_walls.append(seg)
    next_walls.append(connector)

    logger.debug(f"Split wall {target.id} into {seg_a.id} and {seg_b.id}, connector {connector.id}")
    return tuple(next_walls)


def remove(walls: WallSet, segment_id: str) -> WallSet:
    """
    Return `walls` without the segment `segment_id`.

    Raises:
        WallNotFoundError: no wall has that id.
    """
    if find_wall(walls, segment_id) is None:
        raise WallNotFoundError(f"Wall '{segment_id}' not found.")
    return tuple(seg for seg in walls if seg.id != segment_id)

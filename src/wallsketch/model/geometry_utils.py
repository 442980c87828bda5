from __future__ import annotations

from dataclasses import dataclass
from math import acos, hypot, pi
from typing import Iterable, Optional, Sequence, Tuple

from wallsketch.config import INTERSECTION_EPS, MIN_ANGLE_DEG
from wallsketch.model.geometry_primitives import PlanePoint, Segment


def deg2rad(degrees: float) -> float:
    return degrees * pi / 180

def rad2deg(radians: float) -> float:
    return radians * 180 / pi

MIN_ANGLE_RAD: float = deg2rad(MIN_ANGLE_DEG)


@dataclass(frozen=True)
class Intersection:
    """A proper crossing of two segments."""
    point: PlanePoint
    t: float  # parameter along the first segment


def segment_intersection(
    p1: PlanePoint,
    p2: PlanePoint,
    p3: PlanePoint,
    p4: PlanePoint,
    eps: float = INTERSECTION_EPS
) -> Optional[Intersection]:
    """
    Proper intersection of segment p1->p2 with segment p3->p4 in the XZ plane.

    Only crossings strictly inside both segments count: the parameters must
    satisfy eps < t < 1 - eps and eps < u < 1 - eps, so touching at or near
    an endpoint is not a hit.

    Args:
        p1, p2: First segment. The reported `t` runs along it.
        p3, p4: Second segment.
        eps: Tolerance for the parallel test and the endpoint exclusion.

    Returns:
        The Intersection, or None for parallel/collinear lines or no crossing.
    """
    x1, z1 = p1.x, p1.z
    x2, z2 = p2.x, p2.z
    x3, z3 = p3.x, p3.z
    x4, z4 = p4.x, p4.z

    denom = (x1 - x2) * (z3 - z4) - (z1 - z2) * (x3 - x4)
    if abs(denom) < eps:
        # parallel (including possibly collinear)
        return None

    t = ((x1 - x3) * (z3 - z4) - (z1 - z3) * (x3 - x4)) / denom
    u = ((x1 - x3) * (z1 - z2) - (z1 - z3) * (x1 - x2)) / denom

    if eps < t < 1 - eps and eps < u < 1 - eps:
        return Intersection(
            point=PlanePoint(x=x1 + t * (x2 - x1), z=z1 + t * (z2 - z1)),
            t=t,
        )
    return None


def intersects_any(
    start: PlanePoint,
    end: PlanePoint,
    walls: Iterable[Segment],
    eps: float = INTERSECTION_EPS
) -> bool:
    """True if start->end properly crosses any of the walls."""
    return any(
        segment_intersection(start, end, seg.start, seg.end, eps) is not None
        for seg in walls
    )


def first_intersection(
    start: PlanePoint,
    end: PlanePoint,
    walls: Iterable[Segment],
    eps: float = INTERSECTION_EPS
) -> Optional[Tuple[Segment, Intersection]]:
    """
    The wall crossed earliest when travelling from `start` to `end`.

    Every wall is tested; the hit with the smallest `t` wins and the first
    wall in order wins on equal `t`.
    """
    best: Optional[Tuple[Segment, Intersection]] = None
    for seg in walls:
        hit = segment_intersection(start, end, seg.start, seg.end, eps)
        if hit is None:
            continue
        if best is None or hit.t < best[1].t:
            best = (seg, hit)
    return best


def angle_at_vertex(a: PlanePoint, b: PlanePoint, c: PlanePoint) -> float:
    """
    Angle at vertex `b` between the rays b->a and b->c, in radians [0, pi].

    Returns 0.0 when either ray has zero length.
    """
    ux, uz = a.x - b.x, a.z - b.z
    vx, vz = c.x - b.x, c.z - b.z
    len_u = hypot(ux, uz)
    len_v = hypot(vx, vz)
    if len_u == 0 or len_v == 0:
        return 0.0

    cos = (ux * vx + uz * vz) / (len_u * len_v)
    cos = min(1.0, max(-1.0, cos))
    return acos(cos)


def is_too_sharp(angle: float, min_angle: float = MIN_ANGLE_RAD) -> bool:
    """Strict comparison: an angle exactly at the minimum is allowed."""
    return angle < min_angle


def last_wall_touching(walls: Sequence[Segment], vertex: PlanePoint) -> Optional[Segment]:
    """Most recently added wall with an endpoint exactly at `vertex`."""
    for seg in reversed(walls):
        if seg.touches(vertex):
            return seg
    return None


def unique_vertices(walls: Iterable[Segment]) -> list[PlanePoint]:
    """
    Wall endpoints with duplicates removed, in first-seen order.

    Only bit-identical (x, z) coordinates are merged; points that differ by
    floating-point drift stay separate.
    """
    seen: dict[tuple[float, float], PlanePoint] = {}
    for seg in walls:
        for p in (seg.start, seg.end):
            seen.setdefault((p.x, p.z), p)
    return list(seen.values())

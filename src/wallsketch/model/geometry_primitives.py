"""
Geometric Primitives for the drawing plane.

The drawing plane is the horizontal XZ plane of the 3D scene. Every point the
core works with is a PlanePoint; the vertical coordinate is carried along
for the renderer but never takes part in comparisons or planar math.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple, TYPE_CHECKING
import math
import uuid

import numpy as np

from wallsketch.config import LENGTH_EPS
from wallsketch.model.errors import DegenerateSegmentError

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class PlanePoint:
    """A point on the drawing plane."""
    x: float
    z: float
    y: float = field(default=0.0, compare=False)  # pass-through height

    @classmethod
    def from_xyz(cls, xyz: Optional[Sequence[float]]) -> Optional[PlanePoint]:
        """Convert an (x, y, z) pick result; None stays None."""
        if xyz is None:
            return None
        x, y, z = xyz
        return cls(x=float(x), z=float(z), y=float(y))

    def to_xyz(self) -> Tuple[float, float, float]:
        return self.x, self.y, self.z

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.z])

    def distance_sq_to(self, other: PlanePoint) -> float:
        dx = self.x - other.x
        dz = self.z - other.z
        return dx * dx + dz * dz

    def distance_to(self, other: PlanePoint) -> float:
        return math.sqrt(self.distance_sq_to(other))

    def coincides(self, other: PlanePoint) -> bool:
        """Exact planar equality, no tolerance."""
        return self.x == other.x and self.z == other.z


def new_segment_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Segment:
    """The centerline of one wall."""
    id: str
    start: PlanePoint
    end: PlanePoint

    @classmethod
    def create(
        cls,
        start: PlanePoint,
        end: PlanePoint,
        *,
        length_eps: float = LENGTH_EPS
    ) -> Segment:
        """
        Create a segment with a fresh id.

        Raises:
            DegenerateSegmentError: if the segment is not longer than `length_eps`.
        """
        if start.distance_to(end) <= length_eps:
            raise DegenerateSegmentError(
                f"Segment from ({start.x:g}, {start.z:g}) to ({end.x:g}, {end.z:g}) is degenerate."
            )
        return cls(id=new_segment_id(), start=start, end=end)

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    def touches(self, vertex: PlanePoint) -> bool:
        """True if either endpoint coincides exactly with `vertex`."""
        return self.start.coincides(vertex) or self.end.coincides(vertex)

    def far_endpoint(self, vertex: PlanePoint) -> PlanePoint:
        """The endpoint opposite to `vertex` (start is checked first)."""
        return self.end if self.start.coincides(vertex) else self.start


# Ordered, immutable collection of walls. Order is insertion order.
WallSet = Tuple[Segment, ...]

"""
Drawing Session
===============
State machine that turns pointer events into committed walls.

States:
    Idle: waiting for the first click of a wall.
    Drawing: the start vertex is fixed, the pointer previews the end.

A click while Drawing commits either a T-junction split (if the candidate
crosses an existing wall) or a plain append (if the preview is not blocked).
The split path does not look at the blocked flag.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
import logging
from typing import Optional, Union

from wallsketch.config import DrawingConfig
from wallsketch.model import topology
from wallsketch.model.errors import DegenerateSegmentError
from wallsketch.model.geometry_primitives import PlanePoint
from wallsketch.model.geometry_utils import (
    first_intersection, intersects_any, angle_at_vertex, is_too_sharp,
    last_wall_touching, rad2deg
)
from wallsketch.model.history import HistoryManager
from wallsketch.model.snapping import apply_snap, snap_candidates, snap_to_grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Idle:
    drawing: bool = field(default=False, init=False)


@dataclass(frozen=True)
class Drawing:
    start: PlanePoint
    current: PlanePoint
    blocked: bool = False
    preview_angle: Optional[float] = None  # radians
    drawing: bool = field(default=True, init=False)

    @property
    def preview_segment(self) -> tuple[PlanePoint, PlanePoint]:
        return self.start, self.current

    @property
    def preview_blocked(self) -> bool:
        return self.blocked

    @property
    def preview_angle_degrees(self) -> Optional[float]:
        if self.preview_angle is None:
            return None
        return rad2deg(self.preview_angle)


SessionState = Union[Idle, Drawing]


class ClickOutcome(Enum):
    IGNORED = "ignored"
    STARTED = "started"
    BLOCKED = "blocked"
    APPENDED = "appended"
    SPLIT = "split"


class DrawingSession:
    """
    Sequences click/move events for one wall at a time.

    The session reads the current walls from `history` and commits the
    result of each successful placement back into it.
    """

    def __init__(self, history: HistoryManager, config: Optional[DrawingConfig] = None) -> None:
        self.history = history
        self.config = config or DrawingConfig()
        self._state: SessionState = Idle()

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_drawing(self) -> bool:
        return isinstance(self._state, Drawing)

    # ---- snapping ----

    def snap(self, raw: Optional[PlanePoint]) -> Optional[PlanePoint]:
        cfg = self.config
        return apply_snap(
            raw,
            cfg.snap_grid_enabled,
            snap_candidates(self.history.walls),
            radius=cfg.snap_radius,
            grid_size=cfg.grid_size,
        )

    # ---- events ----

    def on_pointer_move(self, raw: Optional[PlanePoint]) -> bool:
        """Update the preview. Returns True if the state changed."""
        state = self._state
        if not isinstance(state, Drawing):
            return False
        p = self.snap(raw)
        if p is None:
            return False

        walls = self.history.walls
        start = state.start
        too_sharp = False
        preview_angle: Optional[float] = None

        touching = last_wall_touching(walls, start)
        if touching is not None:
            preview_angle = angle_at_vertex(touching.far_endpoint(start), start, p)
            too_sharp = is_too_sharp(preview_angle, self.config.min_angle_rad)
            logger.debug(
                f"Pointer moved: preview angle {rad2deg(preview_angle):.1f} deg; Too sharp: {too_sharp}"
            )
        else:
            logger.debug("Pointer moved: no candidate angle at vertex")

        intersects = intersects_any(start, p, walls, self.config.intersection_eps)
        if intersects:
            logger.debug("Preview: candidate wall would intersect an existing wall.")

        self._state = replace(
            state,
            current=p,
            blocked=too_sharp or intersects,
            preview_angle=preview_angle,
        )
        return True

    def on_pointer_click(self, raw: Optional[PlanePoint]) -> ClickOutcome:
        p = self.snap(raw)
        if p is None:
            return ClickOutcome.IGNORED

        state = self._state
        if not isinstance(state, Drawing):
            logger.info(f"Begin drawing at ({p.x:g}, {p.z:g})")
            self._state = Drawing(start=p, current=p)
            return ClickOutcome.STARTED

        return self._commit(state, p)

    def cancel(self) -> None:
        """Discard the wall in progress. Safe in any state."""
        if isinstance(self._state, Drawing):
            logger.info("Drawing session cancelled: resetting state.")
        self._state = Idle()

    # ---- commit ----

    def _commit(self, state: Drawing, end: PlanePoint) -> ClickOutcome:
        cfg = self.config
        walls = self.history.walls

        best = first_intersection(state.start, end, walls, cfg.intersection_eps)
        if best is not None:
            target, hit = best
            intersection_point = snap_to_grid(hit.point, cfg.grid_size)
            try:
                next_walls = topology.split_and_insert(
                    walls, target, intersection_point, state.start, length_eps=cfg.length_eps
                )
            except DegenerateSegmentError as e:
                logger.warning(f"Blocked: T-junction would create a degenerate wall ({e})")
                return ClickOutcome.BLOCKED
            logger.info(
                f"T-intersection detected. Splitting wall {target.id} at "
                f"({intersection_point.x:g}, {intersection_point.z:g})"
            )
            self.history.commit(next_walls)
            self._state = Idle()
            return ClickOutcome.SPLIT

        if state.blocked:
            logger.info("Blocked: Attempted to place wall with invalid angle or intersection.")
            return ClickOutcome.BLOCKED

        try:
            next_walls = topology.append(walls, state.start, end, length_eps=cfg.length_eps)
        except DegenerateSegmentError as e:
            logger.info(f"Blocked: {e}")
            return ClickOutcome.BLOCKED

        logger.info(f"Adding new wall segment: ({state.start.x:g}, {state.start.z:g}) -> ({end.x:g}, {end.z:g})")
        self.history.commit(next_walls)
        self._state = Idle()
        return ClickOutcome.APPENDED

from __future__ import annotations

import logging
from typing import Optional, Sequence, TYPE_CHECKING

from PySide6.QtCore import QObject, Signal

from wallsketch.config import DrawingConfig
from wallsketch.controller.session import ClickOutcome, DrawingSession, SessionState
from wallsketch.model import topology
from wallsketch.model.errors import WallNotFoundError
from wallsketch.model.geometry_primitives import PlanePoint, WallSet
from wallsketch.model.geometry_utils import unique_vertices
from wallsketch.model.history import HistoryManager

if TYPE_CHECKING:
    from wallsketch.app.camera import CameraController

logger = logging.getLogger(__name__)

Point3 = Sequence[float]


class Store(QObject):
    """
    Entry point for the viewport: pointer events in, wall state out.

    The viewport forwards plane picks (or None when the ray misses) and
    re-reads the queries after each event, or connects to the signals.
    """
    walls_changed = Signal(object)
    session_changed = Signal(object)
    selection_changed = Signal(object)
    drawing_mode_changed = Signal(bool)

    def __init__(
        self,
        config: Optional[DrawingConfig] = None,
        camera: Optional[CameraController] = None,
        walls: WallSet = ()
    ) -> None:
        super().__init__()
        self.history = HistoryManager(walls)
        self.session = DrawingSession(self.history, config)
        self.camera = camera
        self._drawing_mode = False
        self._selected_id: Optional[str] = None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def session_state(self) -> SessionState:
        return self.session.state

    def wall_list(self) -> WallSet:
        return self.history.walls

    def vertices(self) -> list[PlanePoint]:
        """Unique wall endpoints, for vertex markers."""
        return unique_vertices(self.history.walls)

    def selected_id(self) -> Optional[str]:
        return self._selected_id

    def is_drawing_mode(self) -> bool:
        return self._drawing_mode

    def snap_grid_enabled(self) -> bool:
        return self.session.config.snap_grid_enabled

    def can_undo(self) -> bool:
        return self.history.can_undo()

    def can_redo(self) -> bool:
        return self.history.can_redo()

    # ------------------------------------------------------------------
    # Pointer events
    # ------------------------------------------------------------------

    def on_pointer_click(self, plane_point: Optional[Point3]) -> ClickOutcome:
        if not self._drawing_mode:
            return ClickOutcome.IGNORED

        outcome = self.session.on_pointer_click(PlanePoint.from_xyz(plane_point))
        if outcome is ClickOutcome.STARTED:
            self.select(None)
            self.session_changed.emit(self.session.state)
        elif outcome in (ClickOutcome.APPENDED, ClickOutcome.SPLIT):
            self.walls_changed.emit(self.history.walls)
            self.session_changed.emit(self.session.state)
        return outcome

    def on_pointer_move(self, plane_point: Optional[Point3]) -> None:
        if not self._drawing_mode:
            return
        if self.session.on_pointer_move(PlanePoint.from_xyz(plane_point)):
            self.session_changed.emit(self.session.state)

    def on_wall_click(self, segment_id: str) -> None:
        """Toggle selection of a wall. Ignored while drawing."""
        if self._drawing_mode:
            return
        self.select(None if self._selected_id == segment_id else segment_id)

    # ------------------------------------------------------------------
    # Modes and toggles
    # ------------------------------------------------------------------

    def enter_drawing_mode(self) -> None:
        self._drawing_mode = True
        self.request_top_view()
        self.select(None)
        self.drawing_mode_changed.emit(True)

    def on_exit_drawing_mode(self) -> None:
        """Leave drawing mode and drop any wall in progress. Idempotent."""
        was_drawing = self.session.is_drawing
        if self._drawing_mode:
            logger.info("Drawing mode exited: resetting state.")
        self.session.cancel()
        if self._drawing_mode:
            self._drawing_mode = False
            self.drawing_mode_changed.emit(False)
        if was_drawing:
            self.session_changed.emit(self.session.state)

    def on_toggle_snap_grid(self, enabled: bool) -> None:
        self.session.config.snap_grid_enabled = bool(enabled)
        logger.debug(f"Snap grid {'enabled' if enabled else 'disabled'}.")

    def request_top_view(self) -> None:
        if self.camera is not None:
            self.camera.set_top_view()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def select(self, segment_id: Optional[str]) -> None:
        if segment_id == self._selected_id:
            return
        self._selected_id = segment_id
        self.selection_changed.emit(segment_id)

    def undo(self) -> None:
        if self.history.undo():
            self.select(None)
            self.walls_changed.emit(self.history.walls)

    def redo(self) -> None:
        if self.history.redo():
            self.select(None)
            self.walls_changed.emit(self.history.walls)

    def delete_segment(self, segment_id: Optional[str]) -> None:
        """Remove a wall as an undoable step. Unknown ids are ignored."""
        if segment_id is None:
            return
        try:
            next_walls = topology.remove(self.history.walls, segment_id)
        except WallNotFoundError:
            logger.warning(f"Delete ignored: no wall with id '{segment_id}'.")
            return
        self.history.commit(next_walls)
        if self._selected_id == segment_id:
            self.select(None)
        logger.info(f"Deleted wall {segment_id}")
        self.walls_changed.emit(self.history.walls)

    def delete_selected(self) -> None:
        self.delete_segment(self._selected_id)

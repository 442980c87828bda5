"""
Undo/Redo History
=================
Owns the wall set of record and the snapshot stacks around it.

Why is this file needed?
------------------------
1. Source of truth: the current wall set lives here and nowhere else.
2. Undo/Redo: every committed mutation is one snapshot on the undo stack;
   undo and redo only swap stored snapshots, they never re-run edits.

Wall sets are immutable tuples, so a snapshot can be stored without copying.
"""
from __future__ import annotations

import logging

from wallsketch.model.geometry_primitives import WallSet

logger = logging.getLogger(__name__)


class HistoryManager:
    def __init__(self, walls: WallSet = ()) -> None:
        self._walls: WallSet = tuple(walls)
        self._undo: list[WallSet] = []  # most recent last
        self._redo: list[WallSet] = []  # most recent first

    @property
    def walls(self) -> WallSet:
        return self._walls

    @property
    def undo_stack(self) -> tuple[WallSet, ...]:
        return tuple(self._undo)

    @property
    def redo_stack(self) -> tuple[WallSet, ...]:
        return tuple(self._redo)

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)

    def commit(self, new_walls: WallSet) -> None:
        """Make `new_walls` current; the previous set becomes undoable."""
        self._undo.append(self._walls)
        self._redo.clear()
        self._walls = tuple(new_walls)
        logger.debug(f"Committed {len(self._walls)} walls (undo depth {len(self._undo)}).")

    def undo(self) -> bool:
        """Restore the previous wall set. Returns False if there is none."""
        if not self._undo:
            return False
        previous = self._undo.pop()
        self._redo.insert(0, self._walls)
        self._walls = previous
        logger.debug(f"Undo: {len(self._walls)} walls (redo depth {len(self._redo)}).")
        return True

    def redo(self) -> bool:
        """Re-apply the most recently undone wall set. Returns False if there is none."""
        if not self._redo:
            return False
        following = self._redo.pop(0)
        self._undo.append(self._walls)
        self._walls = following
        logger.debug(f"Redo: {len(self._walls)} walls (undo depth {len(self._undo)}).")
        return True

    def reset(self, walls: WallSet = ()) -> None:
        """Drop all history and start over from `walls`."""
        self._walls = tuple(walls)
        self._undo.clear()
        self._redo.clear()
        logger.info("History has been reset.")

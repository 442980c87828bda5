from __future__ import annotations

from typing import Protocol


class CameraController(Protocol):
    """
    View commands the drawing core may request from the viewport.

    The viewport passes its implementation to the Store; nothing is
    registered globally.
    """

    def set_top_view(self) -> None:
        """Look straight down onto the drawing plane."""
        ...

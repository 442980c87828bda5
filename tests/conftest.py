import pytest

from wallsketch.config import DrawingConfig
from wallsketch.controller.session import DrawingSession
from wallsketch.model.geometry_primitives import PlanePoint
from wallsketch.model.history import HistoryManager


def pt(x, z):
    return PlanePoint(x=float(x), z=float(z))


class FakeCamera:
    def __init__(self):
        self.top_view_calls = 0

    def set_top_view(self):
        self.top_view_calls += 1


@pytest.fixture
def history():
    return HistoryManager()


@pytest.fixture
def session(history):
    return DrawingSession(history, DrawingConfig())


@pytest.fixture
def camera():
    return FakeCamera()

import pytest

from wallsketch.model.geometry_primitives import PlanePoint, Segment
from wallsketch.model.snapping import apply_snap, snap_candidates, snap_to_grid

from conftest import pt


@pytest.mark.parametrize("x, z, expected", [
    (0.1, 0.1, (0.0, 0.0)),
    (0.13, -0.13, (0.25, -0.25)),
    (1.9, 3.37, (2.0, 3.25)),
    (0.125, 0.375, (0.25, 0.5)),
    (-7.6, 12.01, (-7.5, 12.0)),
])
def test_snap_to_grid_rounds_to_nearest_multiple(x, z, expected):
    snapped = snap_to_grid(pt(x, z))
    assert (snapped.x, snapped.z) == pytest.approx(expected)


@pytest.mark.parametrize("x, z", [(0.1, 0.1), (1.37, -2.62), (-0.125, 9.99), (123.456, -0.001)])
def test_snap_to_grid_is_idempotent(x, z):
    once = snap_to_grid(pt(x, z))
    assert snap_to_grid(once) == once


def test_snap_to_grid_keeps_height():
    snapped = snap_to_grid(PlanePoint(x=1.1, z=2.2, y=0.7))
    assert snapped.y == 0.7


def test_snap_to_grid_custom_size():
    snapped = snap_to_grid(pt(1.2, 2.6), grid_size=1.0)
    assert (snapped.x, snapped.z) == (1.0, 3.0)


def test_apply_snap_absent_point():
    assert apply_snap(None, True, [pt(0, 0)]) is None


def test_apply_snap_without_candidates_returns_grid_point():
    assert apply_snap(pt(1.1, 0.9), True, []) == pt(1.0, 1.0)


def test_apply_snap_grid_disabled_keeps_raw_point():
    raw = pt(1.1, 0.9)
    assert apply_snap(raw, False, []) == raw


def test_vertex_snap_overrides_grid():
    vertex = pt(1.1, 1.1)
    snapped = apply_snap(pt(1.0, 1.0), True, [vertex])
    assert snapped is vertex


def test_vertex_outside_radius_is_ignored():
    snapped = apply_snap(pt(2.0, 2.0), True, [pt(0.0, 0.0)])
    assert snapped == pt(2.0, 2.0)


def test_vertex_exactly_on_radius_snaps():
    vertex = pt(0.5, 0.0)
    assert apply_snap(pt(0.0, 0.0), False, [vertex], radius=0.5) is vertex


def test_nearest_vertex_wins():
    near = pt(0.2, 0.0)
    far = pt(0.4, 0.0)
    assert apply_snap(pt(0.0, 0.0), False, [far, near]) is near


def test_tie_goes_to_first_candidate():
    first = PlanePoint(x=0.3, z=0.0, y=1.0)
    second = PlanePoint(x=-0.3, z=0.0, y=2.0)
    snapped = apply_snap(pt(0.0, 0.0), False, [first, second])
    assert snapped.y == 1.0


def test_snap_candidates_lists_endpoints_in_order():
    a = Segment.create(pt(0, 0), pt(1, 0))
    b = Segment.create(pt(1, 0), pt(1, 1))
    assert snap_candidates([a, b]) == [pt(0, 0), pt(1, 0), pt(1, 0), pt(1, 1)]

import math

import pytest

from wallsketch.model.geometry_primitives import Segment
from wallsketch.model.geometry_utils import (
    angle_at_vertex, deg2rad, first_intersection, intersects_any, is_too_sharp,
    last_wall_touching, segment_intersection, unique_vertices, MIN_ANGLE_RAD
)

from conftest import pt


def test_crossing_segments_report_point_and_t():
    hit = segment_intersection(pt(0, 0), pt(4, 0), pt(1, -1), pt(1, 1))
    assert hit is not None
    assert (hit.point.x, hit.point.z) == pytest.approx((1.0, 0.0))
    assert hit.t == pytest.approx(0.25)


def test_t_is_measured_along_first_segment():
    hit = segment_intersection(pt(1, -1), pt(1, 3), pt(0, 0), pt(4, 0))
    assert hit.t == pytest.approx(0.25)


@pytest.mark.parametrize("p1, p2, p3, p4", [
    ((0, 0), (4, 0), (0, 1), (4, 1)),
    ((0, 0), (4, 0), (1, 0), (3, 0)),
    ((0, 0), (4, 0), (-2, 0), (8, 0)),
    ((0, 0), (2, 2), (1, 0), (3, 2)),
    ((0, 0), (0, 5), (0.0000001, 1), (0.0000001, 4)),
])
def test_parallel_segments_never_hit(p1, p2, p3, p4):
    assert segment_intersection(pt(*p1), pt(*p2), pt(*p3), pt(*p4)) is None


@pytest.mark.parametrize("p3, p4", [
    ((4, 0), (4, 3)),   # touches at end of first segment
    ((0, 0), (0, 3)),   # touches at start of first segment
    ((2, 0), (2, 3)),   # second segment starts on the first
    ((2, -3), (2, 0)),  # second segment ends on the first
])
def test_endpoint_touches_are_not_proper_intersections(p3, p4):
    assert segment_intersection(pt(0, 0), pt(4, 0), pt(*p3), pt(*p4)) is None


def test_segments_that_would_cross_when_extended_do_not_hit():
    assert segment_intersection(pt(0, 0), pt(1, 0), pt(2, -1), pt(2, 1)) is None


def test_intersects_any():
    walls = [Segment.create(pt(0, 0), pt(4, 0)), Segment.create(pt(10, 0), pt(10, 4))]
    assert intersects_any(pt(2, -1), pt(2, 1), walls)
    assert not intersects_any(pt(5, -1), pt(5, 1), walls)


def test_first_intersection_picks_smallest_t():
    near = Segment.create(pt(0, 1), pt(4, 1))
    far = Segment.create(pt(0, 3), pt(4, 3))
    seg, hit = first_intersection(pt(2, 0), pt(2, 4), [far, near])
    assert seg is near
    assert hit.t == pytest.approx(0.25)


def test_first_intersection_none_without_hits():
    assert first_intersection(pt(0, 0), pt(1, 1), []) is None


def test_right_angle():
    assert angle_at_vertex(pt(1, 0), pt(0, 0), pt(0, 1)) == pytest.approx(math.pi / 2)


def test_straight_angle():
    assert angle_at_vertex(pt(-1, 0), pt(0, 0), pt(3, 0)) == pytest.approx(math.pi)


def test_zero_length_ray_gives_zero():
    assert angle_at_vertex(pt(0, 0), pt(0, 0), pt(1, 1)) == 0.0
    assert angle_at_vertex(pt(1, 1), pt(0, 0), pt(0, 0)) == 0.0


def test_angle_at_exact_minimum_is_allowed():
    assert not is_too_sharp(deg2rad(30.0))
    assert not is_too_sharp(MIN_ANGLE_RAD)


def test_angle_just_below_minimum_is_too_sharp():
    assert is_too_sharp(deg2rad(29.999))


def test_last_wall_touching_prefers_most_recent():
    first = Segment.create(pt(0, 0), pt(4, 0))
    second = Segment.create(pt(4, 4), pt(4, 0))
    other = Segment.create(pt(10, 10), pt(12, 10))
    assert last_wall_touching((first, second, other), pt(4, 0)) is second
    assert last_wall_touching((first, second, other), pt(7, 7)) is None


def test_far_endpoint():
    seg = Segment.create(pt(0, 0), pt(4, 0))
    assert seg.far_endpoint(pt(0, 0)) == pt(4, 0)
    assert seg.far_endpoint(pt(4, 0)) == pt(0, 0)


def test_unique_vertices_merges_identical_points_only():
    a = Segment.create(pt(0, 0), pt(4, 0))
    b = Segment.create(pt(4, 0), pt(4, 4))
    c = Segment.create(pt(4.000000001, 4), pt(8, 4))
    assert unique_vertices([a, b, c]) == [
        pt(0, 0), pt(4, 0), pt(4, 4), pt(4.000000001, 4), pt(8, 4)
    ]

"""Tests for isect/conics.py."""
import math
from isect import (
    IntersectionStatus as S,
    intersect_circle_circle, intersect_ellipse_ellipse, intersect_circle_ellipse,
    intersect_ellipse_circle, intersect_circle_line, intersect_ellipse_line,
    intersect_line_circle, intersect_line_ellipse, bezout,
)


def close_all(found, expected, tol):
    return len(found) == len(expected) and all(abs(a - b) < tol for a, b in zip(found, expected))


def on_ellipse(p, c, rx, ry, tol=1e-6):
    return abs(((p[0]-c[0])/rx)**2 + ((p[1]-c[1])/ry)**2 - 1) < tol


# --- intersect_circle_circle ---

def test_circle_circle_two_points():
    r = intersect_circle_circle((0, 0), 10, (10, 0), 10)
    assert r.status is S.INTERSECTION
    assert len(r.points) == 2
    (p, q) = r.points
    assert abs(p.x - 5) < 1e-12 and abs(p.y - 8.660254037844386) < 1e-9
    assert abs(q.x - 5) < 1e-12 and abs(q.y + 8.660254037844386) < 1e-9


def test_circle_circle_tangents_are_perpendicular_to_radius():
    p = intersect_circle_circle((0, 0), 10, (10, 0), 10).points[0]
    assert abs(p.tangent_a[0] - p.y) < 1e-12 and abs(p.tangent_a[1] + p.x) < 1e-12
    assert abs(p.tangent_b[0] - p.y) < 1e-12 and abs(p.tangent_b[1] + (p.x - 10)) < 1e-12


def test_circle_circle_arguments():
    r = intersect_circle_circle((100, 100), 100, (150, 100), 100)
    assert close_all(r.parameters_a, [1.318116071652818, -1.318116071652818], 1e-12)
    r = intersect_circle_circle((100, 90), 80, (120, 90), 70)
    assert close_all(r.parameters_a, [0.9350850413935946, -0.93508504139359], 1e-12)


def test_circle_circle_touching_externally():
    r = intersect_circle_circle((100, 100), 100, (300, 100), 100)
    assert r.status is S.INTERSECTION
    assert close_all(r.parameters_a, [0.0], 1e-12)
    assert r.points[0].point == (200.0, 100.0)


def test_circle_circle_touching_internally():
    r = intersect_circle_circle((0, 0), 10, (5, 0), 5)
    assert len(r.points) == 1
    assert abs(r.points[0].x - 10) < 1e-12


def test_circle_circle_far_apart():
    assert intersect_circle_circle((0, 0), 1, (10, 0), 1).status is S.NO_INTERSECTION_OUTSIDE
    assert intersect_circle_circle((100, 100), 100, (500, 100), 100).status is S.NO_INTERSECTION_OUTSIDE


def test_circle_circle_containment():
    assert intersect_circle_circle((100, 100), 10, (130, 100), 100).status is S.NO_INTERSECTION_INSIDE
    assert intersect_circle_circle((100, 100), 100, (100, 100), 10).status is S.NO_INTERSECTION_OUTSIDE
    assert intersect_circle_circle((100, 100), 10, (100, 100), 100).status is S.NO_INTERSECTION_INSIDE


def test_circle_circle_identical():
    assert intersect_circle_circle((3, 4), 5, (3, 4), 5).status is S.NO_INTERSECTION_COINCIDENT


# --- bezout ---

def test_bezout_of_identical_conics_is_zero():
    e = [2500.0, 0.0, 10000.0, -500000.0, -2000000.0, 1.125e8]
    assert bezout(e, e).is_zero()


# --- intersect_ellipse_ellipse ---

def test_ellipse_ellipse_two_points():
    c1, c2 = (100, 100), (200, 100)
    r = intersect_ellipse_ellipse(c1, 100, 50, c2, 60, 80)
    assert r.status is S.INTERSECTION
    assert len(r.points) == 2
    for p in r.points:
        assert on_ellipse(p.point, c1, 100, 50)
        assert on_ellipse(p.point, c2, 60, 80)
        assert abs(p.x - 149.604) < 1e-2
    assert abs(r.points[0].y + r.points[1].y - 200) < 1e-6


def test_ellipse_ellipse_parameters_are_eccentric_angles():
    c1, c2 = (100, 100), (200, 100)
    for p in intersect_ellipse_ellipse(c1, 100, 50, c2, 60, 80).points:
        q = (c1[0] + 100*math.cos(p.parameter_a), c1[1] + 50*math.sin(p.parameter_a))
        assert abs(q[0] - p.x) < 1e-6 and abs(q[1] - p.y) < 1e-6
        q = (c2[0] + 60*math.cos(p.parameter_b), c2[1] + 80*math.sin(p.parameter_b))
        assert abs(q[0] - p.x) < 1e-6 and abs(q[1] - p.y) < 1e-6


def test_ellipse_ellipse_crossed_reports_each_point_once():
    r = intersect_ellipse_ellipse((0, 0), 4, 2, (0, 0), 2, 4)
    assert r.status is S.INTERSECTION
    assert len(r.points) == 4
    k = math.sqrt(16/5)
    for sx in (-1, 1):
        for sy in (-1, 1):
            assert any(abs(p.x - sx*k) < 1e-6 and abs(p.y - sy*k) < 1e-6 for p in r.points)


def test_ellipse_ellipse_coincident():
    r = intersect_ellipse_ellipse((100, 100), 100, 50, (100, 100), 100, 50)
    assert r.status is S.NO_INTERSECTION_COINCIDENT


def test_ellipse_ellipse_disjoint():
    r = intersect_ellipse_ellipse((0, 0), 10, 10, (100, 0), 10, 10)
    assert r.status is S.NO_INTERSECTION
    assert not r.points


def test_ellipse_ellipse_degenerate():
    assert intersect_ellipse_ellipse((0, 0), 0, 10, (5, 0), 10, 10).status is S.NO_INTERSECTION


def test_circle_ellipse():
    c1, c2 = (100, 100), (160, 100)
    r = intersect_circle_ellipse(c1, 50, c2, 30, 60)
    assert len(r.points) == 2
    for p in r.points:
        assert on_ellipse(p.point, c1, 50, 50)
        assert on_ellipse(p.point, c2, 30, 60)
        assert abs(p.x - 135.653) < 1e-2
    s = intersect_ellipse_circle(c2, 30, 60, c1, 50)
    assert close_all(sorted(p.y for p in s.points), sorted(p.y for p in r.points), 1e-6)


# --- conic × line ---

def test_circle_line_keeps_line_first_parameters():
    assert intersect_circle_line((0, 0), 10, (-20, 0), (20, 0)) == intersect_line_circle((-20, 0), (20, 0), (0, 0), 10)
    r = intersect_circle_line((0, 0), 10, (-20, 0), (20, 0))
    assert close_all(r.parameters_a, [0.25, 0.75], 1e-12)


def test_ellipse_line_keeps_line_first_parameters():
    r = intersect_ellipse_line((0, 0), 10, 5, (-20, 0), (20, 0))
    assert r == intersect_line_ellipse((-20, 0), (20, 0), (0, 0), 10, 5)

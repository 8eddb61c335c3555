"""Tests for geom/geometry.py pure functions and boundary validation."""
import math
import pytest
from geom.geometry import (
    GeometryError, check_points, check_radius,
    almost_zero, almost_equal, clamp, sub, scale, lerp, distance, distance_sq, perp, atan2,
    ellipse_angle, ellipse_tangent, argument_on_line, rect_corners,
    bezier_point, bezier_tangent, bezier_coefficients,
)
from isect import intersect_line_line, intersect_line_circle, intersect_quad_point, intersect_path_line
from geom.types import LineTo


# --- validation ---

def test_check_points_rejects_nan():
    with pytest.raises(GeometryError, match="Non-finite coordinate"):
        check_points((0.0, 0.0), (math.nan, 1.0))


def test_check_points_rejects_wrong_arity():
    with pytest.raises(GeometryError, match="Expected"):
        check_points((1.0, 2.0, 3.0))


def test_check_radius_rejects_negative():
    with pytest.raises(GeometryError, match="Negative radius"):
        check_radius(-1.0)


def test_check_radius_names_tolerance():
    with pytest.raises(GeometryError, match="Non-finite tolerance"):
        check_radius(math.inf, "tolerance")


def test_public_functions_validate_input():
    with pytest.raises(GeometryError, match="Non-finite"):
        intersect_line_line((0, 0), (math.nan, 1), (0, 1), (1, 0))
    with pytest.raises(GeometryError, match="Negative radius"):
        intersect_line_circle((0, 0), (1, 1), (0, 0), -1.0)
    with pytest.raises(GeometryError, match="Negative tolerance"):
        intersect_quad_point((0, 0), (1, 1), (2, 0), (1, 0), -0.5)


def test_path_must_start_with_moveto():
    with pytest.raises(GeometryError, match="MoveTo"):
        intersect_path_line([LineTo((1.0, 1.0))], (0, 0), (1, 0))


def test_degenerate_input_is_not_an_error():
    r = intersect_line_circle((1, 1), (1, 1), (0, 0), 0.0)
    assert not r.points


# --- scalar helpers ---

def test_almost_zero_and_equal():
    assert almost_zero(1e-9)
    assert not almost_zero(1e-7)
    assert almost_equal(1.0, 1.0 + 1e-9)


def test_clamp():
    assert clamp(-1.0, 0.0, 1.0) == 0.0
    assert clamp(2.0, 0.0, 1.0) == 1.0
    assert clamp(0.25, 0.0, 1.0) == 0.25
    assert clamp(math.nan, 0.0, 1.0) == 0.0


# --- vectors ---

def test_vector_helpers():
    assert sub((3, 4), (1, 1)) == (2, 3)
    assert scale((1, -2), 3) == (3, -6)
    assert lerp((0, 0), (10, 20), 0.25) == (2.5, 5.0)
    assert distance_sq((0, 0), (3, 4)) == 25
    assert abs(distance((0, 0), (3, 4)) - 5.0) < 1e-12
    assert perp((1, 2)) == (2, -1)


def test_atan2_of_zero_vector():
    assert atan2(0.0, 0.0) == 0.0
    assert abs(atan2(1.0, 0.0) - math.pi/2) < 1e-12


# --- conic helpers ---

def test_ellipse_angle_is_eccentric_angle():
    p = (10 + 20*math.cos(0.3), 5 + 10*math.sin(0.3))
    assert abs(ellipse_angle((10, 5), 20, 10, p) - 0.3) < 1e-12


def test_ellipse_tangent_matches_circle_perp():
    c = (2.0, 3.0); p = (2.0 + 3.0, 3.0 + 4.0)
    t = ellipse_tangent(c, 5.0, 5.0, p)
    q = perp(sub(p, c))
    assert abs(t[0] - q[0]) < 1e-12
    assert abs(t[1] - q[1]) < 1e-12


# --- lines and boxes ---

def test_argument_on_line_uses_dominant_axis():
    assert argument_on_line((0, 0), (10, 1), (5, 100)) == 0.5
    assert argument_on_line((0, 0), (1, 10), (100, 5)) == 0.5
    assert argument_on_line((2, 2), (2, 2), (5, 5)) == 0.0


def test_rect_corners_order():
    tl, tr, br, bl = rect_corners((10, 10), (0, 0))
    assert (tl, tr, br, bl) == ((0, 0), (10, 0), (10, 10), (0, 10))


# --- Bézier helpers ---

def test_bezier_coefficients_quadratic(hump):
    xs, ys = bezier_coefficients(hump)
    assert xs == [0.0, 2.0, 0.0]
    assert ys == [-4.0, 4.0, 0.0]


def test_bezier_coefficients_cubic(arch):
    xs, ys = bezier_coefficients(arch)
    assert xs == [-20.0, 30.0, 0.0, 0.0]
    assert ys == [0.0, -30.0, 30.0, 0.0]


def test_bezier_point_and_tangent(arch):
    p = bezier_point(arch, 0.5)
    assert abs(p[0] - 5.0) < 1e-12
    assert abs(p[1] - 7.5) < 1e-12
    t = bezier_tangent(arch, 0.5)
    # x' = 60t - 60t², y' = 30 - 60t
    assert abs(t[0] - 15.0) < 1e-12
    assert abs(t[1] - 0.0) < 1e-12


def test_bezier_endpoints(hump):
    assert bezier_point(hump, 0.0) == hump[0]
    assert bezier_point(hump, 1.0) == hump[-1]

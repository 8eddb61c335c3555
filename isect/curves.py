"""Quadratic and cubic Bézier curves against lines, ellipses, circles, and points.

Control points are passed as separate Point arguments; internally every
algorithm works on the curve's monomial form and is shared by both degrees.
"""
import logging
import math
from typing import Sequence
from geom.constants import EPSILON
from geom.geometry import (
    check_points, check_radius, bezier_point, bezier_tangent, bezier_coefficients,
    argument_on_line, distance_sq, sub, ellipse_angle, ellipse_tangent,
)
from geom.polynomial import Polynomial
from geom.types import Point
from .result import IntersectionStatus as S, IntersectionPoint, IntersectionResult
from .points import intersect_point_ellipse

logger = logging.getLogger(__name__)

# ============================================================
# Curve × Line
# ============================================================
def _line_roots(ctrl: Sequence[Point], a0: Point, a1: Point) -> Polynomial:
    """Curve substituted into the implicit line equation n·p + cl = 0."""
    xs, ys = bezier_coefficients(ctrl)
    nx = a0[1]-a1[1]; ny = a1[0]-a0[0]
    cl = a0[0]*a1[1]-a1[0]*a0[1]
    return Polynomial(*(nx*cx+ny*cy for cx, cy in zip(xs, ys)))+cl

def _within_segment(p: Point, a0: Point, a1: Point, epsilon: float) -> bool:
    min_x, max_x = sorted((a0[0], a1[0])); min_y, max_y = sorted((a0[1], a1[1]))
    in_x = min_x-epsilon <= p[0] <= max_x+epsilon
    in_y = min_y-epsilon <= p[1] <= max_y+epsilon
    if a0[0] == a1[0]:
        return in_y
    if a0[1] == a1[1]:
        return in_x
    return in_x and in_y

def _curve_line(ctrl: Sequence[Point], a0: Point, a1: Point, epsilon: float) -> IntersectionResult:
    check_points(*ctrl, a0, a1)
    if a0 == a1:
        return IntersectionResult(S.NO_INTERSECTION)
    poly = _line_roots(ctrl, a0, a1)
    if poly.is_zero():
        logger.debug("curve lies on the line through %s, %s", a0, a1)
        return IntersectionResult(S.NO_INTERSECTION_COINCIDENT)
    tb = sub(a1, a0); points = []
    for t in poly.roots_in_interval(0.0, 1.0):
        p = bezier_point(ctrl, t)
        if _within_segment(p, a0, a1, epsilon):
            points.append(IntersectionPoint(p, t, bezier_tangent(ctrl, t), 0,
                                            argument_on_line(a0, a1, p), tb, 0))
    return IntersectionResult.of(points)

def _line_curve(
    a0: Point, a1: Point, ctrl: Sequence[Point], max_t: float, epsilon: float,
) -> IntersectionResult:
    check_points(a0, a1, *ctrl)
    if a0 == a1:
        return IntersectionResult(S.NO_INTERSECTION)
    poly = _line_roots(ctrl, a0, a1)
    if poly.is_zero():
        logger.debug("curve lies on the line through %s, %s", a0, a1)
        return IntersectionResult(S.NO_INTERSECTION_COINCIDENT)
    ta = sub(a1, a0); points = []
    for t in poly.roots_in_interval(0.0, 1.0):
        p = bezier_point(ctrl, t)
        u = argument_on_line(a0, a1, p)
        if -epsilon <= u <= max_t+epsilon:
            points.append(IntersectionPoint(p, u, ta, 0, t, bezier_tangent(ctrl, t), 0))
    return IntersectionResult.of(points)

def intersect_quad_line(p0: Point, p1: Point, p2: Point, a0: Point, a1: Point,
                        epsilon: float = EPSILON) -> IntersectionResult:
    """Intersect quadratic curve p with segment a0-a1; parameter_a is the curve t."""
    return _curve_line((p0, p1, p2), a0, a1, epsilon)

def intersect_cubic_line(p0: Point, p1: Point, p2: Point, p3: Point, a0: Point, a1: Point,
                         epsilon: float = EPSILON) -> IntersectionResult:
    """Intersect cubic curve p with segment a0-a1; parameter_a is the curve t."""
    return _curve_line((p0, p1, p2, p3), a0, a1, epsilon)

def intersect_line_quad(a0: Point, a1: Point, p0: Point, p1: Point, p2: Point,
                        max_t: float = 1.0, epsilon: float = EPSILON) -> IntersectionResult:
    """Intersect ray a0 → a1, limited to t in [0, max_t], with quadratic curve p."""
    return _line_curve(a0, a1, (p0, p1, p2), max_t, epsilon)

def intersect_line_cubic(a0: Point, a1: Point, p0: Point, p1: Point, p2: Point, p3: Point,
                         max_t: float = 1.0, epsilon: float = EPSILON) -> IntersectionResult:
    """Intersect ray a0 → a1, limited to t in [0, max_t], with cubic curve p."""
    return _line_curve(a0, a1, (p0, p1, p2, p3), max_t, epsilon)

# ============================================================
# Curve × Ellipse / Circle
# ============================================================
def _curve_ellipse(ctrl: Sequence[Point], c: Point, rx: float, ry: float) -> IntersectionResult:
    check_points(*ctrl, c); check_radius(rx); check_radius(ry)
    if rx == 0 or ry == 0:
        logger.debug("degenerate ellipse rx=%g ry=%g", rx, ry)
        return IntersectionResult(S.NO_INTERSECTION_OUTSIDE)
    xs, ys = bezier_coefficients(ctrl)
    x = Polynomial(*xs)-c[0]; y = Polynomial(*ys)-c[1]
    rxrx = rx*rx; ryry = ry*ry
    poly = x*x*ryry+y*y*rxrx-rxrx*ryry
    points = []
    for t in poly.roots_in_interval(0.0, 1.0):
        p = bezier_point(ctrl, t)
        points.append(IntersectionPoint(p, t, bezier_tangent(ctrl, t), 0,
                                        ellipse_angle(c, rx, ry, p), ellipse_tangent(c, rx, ry, p), 0))
    if points:
        return IntersectionResult(S.INTERSECTION, tuple(points))
    # no crossing: the whole curve is on the same side as its start point
    inside = intersect_point_ellipse(ctrl[0], c, rx, ry).status is S.NO_INTERSECTION_INSIDE
    return IntersectionResult(S.NO_INTERSECTION_INSIDE if inside else S.NO_INTERSECTION_OUTSIDE)

def intersect_quad_ellipse(p0: Point, p1: Point, p2: Point, c: Point, rx: float, ry: float) -> IntersectionResult:
    """Intersect quadratic curve p with ellipse (c, rx, ry)."""
    return _curve_ellipse((p0, p1, p2), c, rx, ry)

def intersect_quad_circle(p0: Point, p1: Point, p2: Point, c: Point, r: float) -> IntersectionResult:
    """Intersect quadratic curve p with circle (c, r)."""
    return _curve_ellipse((p0, p1, p2), c, r, r)

def intersect_cubic_ellipse(p0: Point, p1: Point, p2: Point, p3: Point,
                            c: Point, rx: float, ry: float) -> IntersectionResult:
    """Intersect cubic curve p with ellipse (c, rx, ry)."""
    return _curve_ellipse((p0, p1, p2, p3), c, rx, ry)

def intersect_cubic_circle(p0: Point, p1: Point, p2: Point, p3: Point, c: Point, r: float) -> IntersectionResult:
    """Intersect cubic curve p with circle (c, r)."""
    return _curve_ellipse((p0, p1, p2, p3), c, r, r)

def intersect_ellipse_quad(c: Point, rx: float, ry: float, p0: Point, p1: Point, p2: Point) -> IntersectionResult:
    """intersect_quad_ellipse with the ellipse as A."""
    return _curve_ellipse((p0, p1, p2), c, rx, ry).swapped()

def intersect_circle_quad(c: Point, r: float, p0: Point, p1: Point, p2: Point) -> IntersectionResult:
    """intersect_quad_circle with the circle as A."""
    return _curve_ellipse((p0, p1, p2), c, r, r).swapped()

def intersect_ellipse_cubic(c: Point, rx: float, ry: float,
                            p0: Point, p1: Point, p2: Point, p3: Point) -> IntersectionResult:
    """intersect_cubic_ellipse with the ellipse as A."""
    return _curve_ellipse((p0, p1, p2, p3), c, rx, ry).swapped()

def intersect_circle_cubic(c: Point, r: float, p0: Point, p1: Point, p2: Point, p3: Point) -> IntersectionResult:
    """intersect_cubic_circle with the circle as A."""
    return _curve_ellipse((p0, p1, p2, p3), c, r, r).swapped()

# ============================================================
# Curve × Point
# ============================================================
def _curve_point(ctrl: Sequence[Point], c: Point, r: float) -> IntersectionResult:
    """Closest curve point(s) to c within tolerance radius r.

    Candidates are the critical points of the squared distance plus both
    end points; equally close candidates (within EPSILON) are all kept.
    """
    check_points(*ctrl, c); check_radius(r, "tolerance")
    xs, ys = bezier_coefficients(ctrl)
    x = Polynomial(*xs)-c[0]; y = Polynomial(*ys)-c[1]
    candidates = sorted({*(x*x+y*y).derivative().roots_in_interval(0.0, 1.0), 0.0, 1.0})
    rr = r*r; best = math.inf; points = []
    for t in candidates:
        p = bezier_point(ctrl, t)
        dd = distance_sq(p, c)
        if dd >= rr:
            continue
        if abs(dd-best) < EPSILON:
            points.append(IntersectionPoint(p, t, bezier_tangent(ctrl, t)))
        elif dd < best:
            best = dd
            points = [IntersectionPoint(p, t, bezier_tangent(ctrl, t))]
    return IntersectionResult.of(points)

def intersect_quad_point(p0: Point, p1: Point, p2: Point, c: Point, r: float) -> IntersectionResult:
    """Test quadratic curve p against point c with tolerance radius r."""
    return _curve_point((p0, p1, p2), c, r)

def intersect_cubic_point(p0: Point, p1: Point, p2: Point, p3: Point, c: Point, r: float) -> IntersectionResult:
    """Test cubic curve p against point c with tolerance radius r."""
    return _curve_point((p0, p1, p2, p3), c, r)

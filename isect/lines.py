"""Intersections of straight segments and rays with lines, points, circles, and ellipses."""
import logging
import math
from geom.constants import EPSILON
from geom.geometry import (
    check_points, check_radius, almost_zero, almost_equal, clamp,
    lerp, sub, perp, atan2, argument_on_line, ellipse_angle, ellipse_tangent,
)
from geom.types import Point
from .result import IntersectionStatus as S, IntersectionPoint, IntersectionResult, BasicIntersectionResult
from .points import intersect_point_circle, intersect_point_ellipse

logger = logging.getLogger(__name__)

# ============================================================
# Line × Line
# ============================================================
def intersect_ray_line(
    a0: Point, a1: Point, b0: Point, b1: Point,
    max_t: float = 1.0, epsilon: float = EPSILON,
) -> IntersectionResult:
    """Intersect ray a0 → a1 (parameter in [0, max_t]) with segment b0-b1.

    A crossing outside either range is still reported, with status
    NO_INTERSECTION, at the point where the carrier lines meet. Collinear
    inputs report their overlap as two points with NO_INTERSECTION_COINCIDENT.
    """
    check_points(a0, a1, b0, b1)
    (a0x, a0y), (a1x, a1y), (b0x, b0y), (b1x, b1y) = a0, a1, b0, b1
    adx = a1x-a0x; ady = a1y-a0y; bdx = b1x-b0x; bdy = b1y-b0y
    ta = (adx, ady); tb = (bdx, bdy)
    ua_t = bdx*(a0y-b0y)-bdy*(a0x-b0x)
    ub_t = adx*(a0y-b0y)-ady*(a0x-b0x)
    u_b = bdy*adx-bdx*ady

    if not almost_zero(u_b):
        ua = ua_t/u_b; ub = ub_t/u_b
        p = (a0x+ua*adx, a0y+ua*ady)
        inside = -epsilon <= ua <= max_t+epsilon and -epsilon <= ub <= 1+epsilon
        return IntersectionResult(S.INTERSECTION if inside else S.NO_INTERSECTION,
                                  (IntersectionPoint(p, ua, ta, 0, ub, tb, 0),))

    if not (almost_zero(ua_t) or almost_zero(ub_t)):
        return IntersectionResult(S.NO_INTERSECTION_PARALLEL)

    a_is_point = almost_zero(adx) and almost_zero(ady)
    b_is_point = almost_zero(bdx) and almost_zero(bdy)
    if a_is_point and b_is_point:
        if almost_equal(a0x, b0x) and almost_equal(a0y, b0y):
            return IntersectionResult(S.INTERSECTION, (IntersectionPoint(a0, 0.0, ta, 0, 0.0, tb, 0),))
        return IntersectionResult(S.NO_INTERSECTION_PARALLEL)
    if a_is_point:
        ub = argument_on_line(b0, b1, a0)
        if almost_zero(ua_t) and -epsilon <= ub <= 1+epsilon:
            return IntersectionResult(S.INTERSECTION, (IntersectionPoint(a0, 0.0, ta, 0, ub, tb, 0),))
        return IntersectionResult(S.NO_INTERSECTION_PARALLEL)
    if b_is_point:
        ua = argument_on_line(a0, a1, b0)
        if almost_zero(ub_t) and -epsilon <= ua <= max_t+epsilon:
            return IntersectionResult(S.INTERSECTION, (IntersectionPoint(b0, ua, ta, 0, 0.0, tb, 0),))
        return IntersectionResult(S.NO_INTERSECTION_PARALLEL)

    # collinear: overlap of b projected onto a
    at0 = argument_on_line(a0, a1, b0); at1 = argument_on_line(a0, a1, b1)
    if at0 > at1:
        at0, at1 = at1, at0
    if at0 < max_t+epsilon and at1 > -epsilon:
        at0 = clamp(at0, 0.0, max_t); at1 = clamp(at1, 0.0, max_t)
        p0 = lerp(a0, a1, at0); p1 = lerp(a0, a1, at1)
        logger.debug("coincident segments overlap on t=[%g, %g]", at0, at1)
        return IntersectionResult(S.NO_INTERSECTION_COINCIDENT, (
            IntersectionPoint(p0, at0, ta, 0, argument_on_line(b0, b1, p0), tb, 0),
            IntersectionPoint(p1, at1, ta, 0, argument_on_line(b0, b1, p1), tb, 0),
        ))
    return IntersectionResult(S.NO_INTERSECTION_PARALLEL)

def intersect_line_line(a0: Point, a1: Point, b0: Point, b1: Point, epsilon: float = EPSILON) -> IntersectionResult:
    """Intersect segments a0-a1 and b0-b1."""
    return intersect_ray_line(a0, a1, b0, b1, 1.0, epsilon)

def intersect_ray_ray(a0: Point, a1: Point, b0: Point, b1: Point) -> IntersectionResult:
    """Intersect the infinite lines through a0, a1 and b0, b1."""
    check_points(a0, a1, b0, b1)
    (a0x, a0y), (a1x, a1y), (b0x, b0y), (b1x, b1y) = a0, a1, b0, b1
    adx = a1x-a0x; ady = a1y-a0y; bdx = b1x-b0x; bdy = b1y-b0y
    ua_t = bdx*(a0y-b0y)-bdy*(a0x-b0x)
    ub_t = adx*(a0y-b0y)-ady*(a0x-b0x)
    u_b = bdy*adx-bdx*ady
    if not almost_zero(u_b):
        ua = ua_t/u_b
        p = (a0x+ua*adx, a0y+ua*ady)
        return IntersectionResult(S.INTERSECTION,
                                  (IntersectionPoint(p, ua, (adx, ady), 0, ub_t/u_b, (bdx, bdy), 0),))
    if almost_zero(ua_t) or almost_zero(ub_t):
        return IntersectionResult(S.NO_INTERSECTION_COINCIDENT)
    return IntersectionResult(S.NO_INTERSECTION_PARALLEL)

# ============================================================
# Line × Point
# ============================================================
def intersect_line_point(a0: Point, a1: Point, c: Point, r: float) -> IntersectionResult:
    """Closest point of segment a0-a1 to c, if it lies within tolerance radius r."""
    check_points(a0, a1, c); check_radius(r, "tolerance")
    (x0, y0), (x1, y1), (cx, cy) = a0, a1, c
    dx = x1-x0; dy = y1-y0
    a = dx*dx+dy*dy
    t = 0.0 if a == 0 else clamp(-(dx*(x0-cx)+dy*(y0-cy))/a, 0.0, 1.0)
    p = (x0+t*dx, y0+t*dy)
    if (p[0]-cx)**2+(p[1]-cy)**2 <= r*r:
        return IntersectionResult(S.INTERSECTION, (IntersectionPoint(p, t, (dx, dy)),))
    return IntersectionResult(S.NO_INTERSECTION)

# ============================================================
# Line × Circle / Ellipse
# ============================================================
def intersect_line_circle(a0: Point, a1: Point, c: Point, r: float, epsilon: float = EPSILON) -> IntersectionResult:
    """Intersect segment a0-a1 with the circle (c, r).

    parameter_a is the segment t, parameter_b the angle on the circle.
    Without a crossing the status tells whether the segment lies inside or
    outside the circle.
    """
    check_points(a0, a1, c); check_radius(r)
    (x0, y0), (x1, y1), (cx, cy) = a0, a1, c
    dx = x1-x0; dy = y1-y0
    a = dx*dx+dy*dy
    if a == 0:
        logger.debug("zero-length segment against circle, testing as point")
        return intersect_point_circle(a0, c, r)
    b = 2*(dx*(x0-cx)+dy*(y0-cy))
    cc = cx*cx+cy*cy+x0*x0+y0*y0-2*(cx*x0+cy*y0)-r*r
    deter = b*b-4*a*cc
    min_t = -epsilon; max_t = 1+epsilon

    def hit(t):
        p = (x0+t*dx, y0+t*dy)
        return IntersectionPoint(p, t, (dx, dy), 0, atan2(p[1]-cy, p[0]-cx), perp(sub(p, c)), 0)

    if deter < -epsilon:
        return IntersectionResult(S.NO_INTERSECTION_OUTSIDE)
    if deter > epsilon:
        e = math.sqrt(deter)
        u1 = (-b+e)/(2*a); u2 = (-b-e)/(2*a)
        if not (min_t <= u1 <= max_t) and not (min_t <= u2 <= max_t):
            same_side = (u1 < min_t and u2 < min_t) or (u1 > max_t and u2 > max_t)
            return IntersectionResult(S.NO_INTERSECTION_OUTSIDE if same_side else S.NO_INTERSECTION_INSIDE)
        return IntersectionResult(S.INTERSECTION,
                                  tuple(hit(t) for t in sorted((u1, u2)) if min_t <= t <= max_t))
    t = -b/(2*a)
    if min_t <= t <= max_t:
        return IntersectionResult(S.INTERSECTION, (hit(t),))
    return IntersectionResult(S.NO_INTERSECTION_OUTSIDE)

def intersect_line_circle_basic(a0: Point, a1: Point, c: Point, r: float, epsilon: float = EPSILON) -> BasicIntersectionResult:
    """intersect_line_circle without tangents or parameters on the circle."""
    return intersect_line_circle(a0, a1, c, r, epsilon).basic()

def intersect_line_ellipse(
    a0: Point, a1: Point, c: Point, rx: float, ry: float, epsilon: float = EPSILON,
) -> IntersectionResult:
    """Intersect segment a0-a1 with the axis-aligned ellipse (c, rx, ry).

    The segment is scaled into the ellipse's unit-circle space, which
    reduces the problem to a quadratic in t.
    """
    check_points(a0, a1, c); check_radius(rx); check_radius(ry)
    if rx == 0 or ry == 0:
        logger.debug("degenerate ellipse rx=%g ry=%g", rx, ry)
        return IntersectionResult(S.NO_INTERSECTION_OUTSIDE)
    rxrx = rx*rx; ryry = ry*ry
    dx = a1[0]-a0[0]; dy = a1[1]-a0[1]
    ex = a0[0]-c[0]; ey = a0[1]-c[1]
    a = dx*dx/rxrx+dy*dy/ryry
    if a == 0:
        logger.debug("zero-length segment against ellipse, testing as point")
        return intersect_point_ellipse(a0, c, rx, ry)
    b = dx*ex/rxrx+dy*ey/ryry
    cc = ex*ex/rxrx+ey*ey/ryry-1
    d = b*b-a*cc
    min_t = -epsilon; max_t = 1+epsilon

    def hit(t):
        p = lerp(a0, a1, t)
        return IntersectionPoint(p, t, (dx, dy), 0, ellipse_angle(c, rx, ry, p), ellipse_tangent(c, rx, ry, p), 0)

    if d < -epsilon:
        return IntersectionResult(S.NO_INTERSECTION_OUTSIDE)
    if d > 0:
        root = math.sqrt(d)
        t0 = (-b-root)/a; t1 = (-b+root)/a
        if not (min_t <= t0 <= max_t) and not (min_t <= t1 <= max_t):
            same_side = (t0 < min_t and t1 < min_t) or (t0 > max_t and t1 > max_t)
            return IntersectionResult(S.NO_INTERSECTION_OUTSIDE if same_side else S.NO_INTERSECTION_INSIDE)
        return IntersectionResult(S.INTERSECTION, tuple(hit(t) for t in (t0, t1) if min_t <= t <= max_t))
    t = -b/a
    if min_t <= t <= max_t:
        return IntersectionResult(S.INTERSECTION, (hit(t),))
    return IntersectionResult(S.NO_INTERSECTION_OUTSIDE)

def intersect_line_ellipse_basic(
    a0: Point, a1: Point, c: Point, rx: float, ry: float, epsilon: float = EPSILON,
) -> BasicIntersectionResult:
    """intersect_line_ellipse without tangents or parameters on the ellipse."""
    return intersect_line_ellipse(a0, a1, c, rx, ry, epsilon).basic()

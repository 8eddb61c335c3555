"""Circle and ellipse intersections, including the Bezout resultant of two conics."""
import logging
import math
from typing import Sequence
from geom.constants import EPSILON
from geom.geometry import (
    check_points, check_radius, almost_zero, almost_equal, lerp,
    atan2, perp, sub, ellipse_angle, ellipse_tangent,
)
from geom.polynomial import Polynomial
from geom.types import Point
from .constants import DUPLICATE_TOLERANCE
from .result import IntersectionStatus as S, IntersectionPoint, IntersectionResult
from .lines import intersect_line_circle, intersect_line_ellipse

logger = logging.getLogger(__name__)

# ============================================================
# Circle × Circle
# ============================================================
def intersect_circle_circle(c1: Point, r1: float, c2: Point, r2: float) -> IntersectionResult:
    """Intersect two circles via their radical line.

    Parameters are the angles of each point on circle 1 (A) and circle 2 (B).
    Touching circles yield a single point.
    """
    check_points(c1, c2); check_radius(r1); check_radius(r2)
    r_max = r1+r2; r_min = abs(r1-r2)
    dx = c2[0]-c1[0]; dy = c2[1]-c1[1]; d = math.sqrt(dx*dx+dy*dy)
    if d > r_max:
        return IntersectionResult(S.NO_INTERSECTION_OUTSIDE)
    if d < r_min:
        return IntersectionResult(S.NO_INTERSECTION_INSIDE if r1 < r2 else S.NO_INTERSECTION_OUTSIDE)
    if almost_zero(d) and almost_equal(r1, r2):
        logger.debug("coincident circles at %s r=%g", c1, r1)
        return IntersectionResult(S.NO_INTERSECTION_COINCIDENT)

    a = (r1*r1-r2*r2+d*d)/(2*d)
    h = math.sqrt(max(0.0, r1*r1-a*a))
    px, py = lerp(c1, c2, a/d); b = h/d
    hits = [(px-b*dy, py+b*dx)]
    if not (almost_equal(d, r_max) or almost_equal(d, r_min)):
        hits.append((px+b*dy, py-b*dx))
    return IntersectionResult(S.INTERSECTION, tuple(
        IntersectionPoint(p, atan2(p[1]-c1[1], p[0]-c1[0]), perp(sub(p, c1)), 0,
                          atan2(p[1]-c2[1], p[0]-c2[0]), perp(sub(p, c2)), 0)
        for p in hits))

# ============================================================
# Ellipse × Ellipse
# ============================================================
def bezout(e1: Sequence[float], e2: Sequence[float]) -> Polynomial:
    """Resultant in y of two conics given as [A, B, C, D, E, F].

    A conic is A x² + B x y + C y² + D x + E y + F = 0; the result is a
    quartic whose real roots are the candidate y coordinates.
    """
    AB = e1[0]*e2[1]-e2[0]*e1[1]
    AC = e1[0]*e2[2]-e2[0]*e1[2]
    AD = e1[0]*e2[3]-e2[0]*e1[3]
    AE = e1[0]*e2[4]-e2[0]*e1[4]
    AF = e1[0]*e2[5]-e2[0]*e1[5]
    BC = e1[1]*e2[2]-e2[1]*e1[2]
    BE = e1[1]*e2[4]-e2[1]*e1[4]
    BF = e1[1]*e2[5]-e2[1]*e1[5]
    CD = e1[2]*e2[3]-e2[2]*e1[3]
    DE = e1[3]*e2[4]-e2[3]*e1[4]
    DF = e1[3]*e2[5]-e2[3]*e1[5]
    BFpDE = BF+DE; BEmCD = BE-CD
    return Polynomial(
        AB*BC-AC*AC,
        AB*BEmCD+AD*BC-2*AC*AE,
        AB*BFpDE+AD*BEmCD-AE*AE-2*AC*AF,
        AB*DF+AD*BFpDE-2*AE*AF,
        AD*DF-AF*AF,
    )

def _ellipse_conic(c: Point, rx: float, ry: float) -> list[float]:
    cx, cy = c; rxrx = rx*rx; ryry = ry*ry
    return [ryry, 0.0, rxrx, -2*ryry*cx, -2*rxrx*cy, ryry*cx*cx+rxrx*cy*cy-rxrx*ryry]

def _conic_value(e: Sequence[float], x: float, y: float) -> float:
    return (e[0]*x+e[1]*y+e[3])*x+(e[2]*y+e[4])*y+e[5]

def intersect_ellipse_ellipse(
    c1: Point, rx1: float, ry1: float, c2: Point, rx2: float, ry2: float,
) -> IntersectionResult:
    """Intersect two axis-aligned ellipses.

    Candidates from the Bezout quartic are kept only when they satisfy both
    implicit equations within a norm-relative tolerance, which discards the
    spurious solutions the elimination introduces.
    """
    check_points(c1, c2)
    for r in (rx1, ry1, rx2, ry2):
        check_radius(r)
    if 0 in (rx1, ry1, rx2, ry2):
        logger.debug("degenerate ellipse in ellipse-ellipse test")
        return IntersectionResult(S.NO_INTERSECTION)
    a = _ellipse_conic(c1, rx1, ry1); b = _ellipse_conic(c2, rx2, ry2)
    y_poly = bezout(a, b)
    if y_poly.is_zero():
        logger.debug("coincident ellipses at %s", c1)
        return IntersectionResult(S.NO_INTERSECTION_COINCIDENT)
    norm0 = (a[0]*a[0]+2*a[1]*a[1]+a[2]*a[2])*EPSILON
    norm1 = (b[0]*b[0]+2*b[1]*b[1]+b[2]*b[2])*EPSILON

    scale = max(rx1, ry1, rx2, ry2)*DUPLICATE_TOLERANCE
    points = []
    for y in y_poly.roots():
        x_poly = Polynomial(a[0], a[3]+y*a[1], a[5]+y*(a[4]+y*a[2]))
        for x in x_poly.roots():
            if abs(_conic_value(a, x, y)) >= norm0 or abs(_conic_value(b, x, y)) >= norm1:
                continue
            # repeated quartic roots yield the same crossing twice
            if any(abs(q.x-x) <= scale and abs(q.y-y) <= scale for q in points):
                continue
            p = (x, y)
            points.append(IntersectionPoint(
                p, ellipse_angle(c1, rx1, ry1, p), ellipse_tangent(c1, rx1, ry1, p), 0,
                ellipse_angle(c2, rx2, ry2, p), ellipse_tangent(c2, rx2, ry2, p), 0))
    return IntersectionResult.of(points)

def intersect_circle_ellipse(c1: Point, r1: float, c2: Point, rx2: float, ry2: float) -> IntersectionResult:
    """Circle (c1, r1) against ellipse (c2, rx2, ry2)."""
    return intersect_ellipse_ellipse(c1, r1, r1, c2, rx2, ry2)

def intersect_ellipse_circle(c1: Point, rx1: float, ry1: float, c2: Point, r2: float) -> IntersectionResult:
    """Ellipse (c1, rx1, ry1) against circle (c2, r2)."""
    return intersect_ellipse_ellipse(c1, rx1, ry1, c2, r2, r2)

# ============================================================
# Conic × Line
# ============================================================
def intersect_circle_line(c: Point, r: float, a0: Point, a1: Point, epsilon: float = EPSILON) -> IntersectionResult:
    """Same result as intersect_line_circle: parameter_a is still the segment t."""
    return intersect_line_circle(a0, a1, c, r, epsilon)

def intersect_ellipse_line(
    c: Point, rx: float, ry: float, a0: Point, a1: Point, epsilon: float = EPSILON,
) -> IntersectionResult:
    """Same result as intersect_line_ellipse: parameter_a is still the segment t."""
    return intersect_line_ellipse(a0, a1, c, rx, ry, epsilon)

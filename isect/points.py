"""Point classification against circles and ellipses."""
import logging
from geom.constants import EPSILON
from geom.geometry import (
    check_points, check_radius, distance, distance_sq, lerp, sub, perp, atan2,
    ellipse_angle, ellipse_tangent,
)
from geom.types import Point
from .result import IntersectionStatus as S, IntersectionPoint, IntersectionResult

logger = logging.getLogger(__name__)


def intersect_point_circle(p: Point, c: Point, r: float) -> IntersectionResult:
    """Classify p against the circle (c, r).

    A point on the boundary (within EPSILON) is reported as one
    intersection whose parameter_b is its angle on the circle.
    """
    check_points(p, c); check_radius(r)
    d = distance(p, c)
    if abs(d-r) < EPSILON:
        return IntersectionResult(S.INTERSECTION, (
            IntersectionPoint(p, 0.0, (0.0, 0.0), 0, atan2(p[1]-c[1], p[0]-c[0]), perp(sub(p, c)), 0),))
    return IntersectionResult(S.NO_INTERSECTION_INSIDE if d < r else S.NO_INTERSECTION_OUTSIDE)

def intersect_point_ellipse(p: Point, c: Point, rx: float, ry: float) -> IntersectionResult:
    """Classify p against the axis-aligned ellipse (c, rx, ry)."""
    check_points(p, c); check_radius(rx); check_radius(ry)
    if rx == 0 or ry == 0:
        logger.debug("degenerate ellipse rx=%g ry=%g", rx, ry)
        return IntersectionResult(S.NO_INTERSECTION_OUTSIDE)
    det = ((p[0]-c[0])/rx)**2+((p[1]-c[1])/ry)**2
    if abs(det-1) < EPSILON:
        return IntersectionResult(S.INTERSECTION, (
            IntersectionPoint(p, 0.0, (0.0, 0.0), 0, ellipse_angle(c, rx, ry, p), ellipse_tangent(c, rx, ry, p), 0),))
    return IntersectionResult(S.NO_INTERSECTION_INSIDE if det < 1 else S.NO_INTERSECTION_OUTSIDE)

def intersect_circle_point(cc: Point, cr: float, pc: Point, pr: float) -> IntersectionResult:
    """Test the circle (cc, cr) against point pc with tolerance radius pr.

    Reports the circle point nearest to pc when it lies within pr.
    """
    check_points(cc, pc); check_radius(cr); check_radius(pr, "tolerance")
    c_dist = distance(cc, pc)
    if c_dist < EPSILON:
        return IntersectionResult(S.NO_INTERSECTION_INSIDE)
    p = lerp(cc, pc, cr/c_dist)
    if distance_sq(p, pc) <= pr*pr:
        return IntersectionResult(S.INTERSECTION, (
            IntersectionPoint(p, atan2(p[1]-cc[1], p[0]-cc[0]), perp(sub(p, cc)), 0),))
    return IntersectionResult(S.NO_INTERSECTION_INSIDE if c_dist < cr else S.NO_INTERSECTION_OUTSIDE)

"""Paths: walk MoveTo/LineTo/QuadTo/CubicTo/ClosePath streams segment by segment.

The segment index counts every segment of the path, MoveTo included, so
segment_a / segment_b map straight back into the caller's sequence.
"""
import logging
import math
from typing import Iterable, Iterator
from geom.constants import EPSILON
from geom.geometry import GeometryError, check_points, check_radius, distance_sq
from geom.types import Point, MoveTo, LineTo, QuadTo, CubicTo, ClosePath, PathSegment
from .result import IntersectionStatus as S, IntersectionPoint, IntersectionResult
from .lines import intersect_ray_line, intersect_line_line, intersect_line_circle, intersect_line_point
from .curves import (
    intersect_line_quad, intersect_line_cubic, intersect_quad_line, intersect_cubic_line,
    intersect_quad_circle, intersect_cubic_circle, intersect_quad_point, intersect_cubic_point,
)

logger = logging.getLogger(__name__)

# ============================================================
# Path Walking
# ============================================================
def iter_segments(path: Iterable[PathSegment]) -> Iterator[tuple[int, tuple[Point, ...]]]:
    """Yield (segment index, control points) for every drawing segment.

    Control points start at the current point: two for a line (ClosePath
    included), three for a quadratic, four for a cubic curve.
    """
    first = last = None
    for i, seg in enumerate(path):
        if isinstance(seg, MoveTo):
            check_points(seg.p)
            first = last = seg.p
            continue
        if last is None:
            raise GeometryError(f"Path must start with MoveTo, got {seg!r}")
        if isinstance(seg, LineTo):
            ctrl = (last, seg.p)
        elif isinstance(seg, QuadTo):
            ctrl = (last, seg.p1, seg.p2)
        elif isinstance(seg, CubicTo):
            ctrl = (last, seg.p1, seg.p2, seg.p3)
        elif isinstance(seg, ClosePath):
            ctrl = (last, first)
        else:
            raise GeometryError(f"Unknown path segment: {seg!r}")
        check_points(*ctrl)
        last = ctrl[-1]
        yield i, ctrl

# ============================================================
# Line × Path
# ============================================================
def intersect_line_path(a0: Point, a1: Point, path: Iterable[PathSegment], max_t: float = 1.0) -> IntersectionResult:
    """Cast the ray a0 → a1 through a path and keep hits with parameter_a <= max_t.

    Without a kept hit the status classifies a0: OUTSIDE when the ray meets
    nothing, TANGENT when it only runs along a straight segment, INSIDE when
    it meets the path beyond max_t.
    """
    check_points(a0, a1)
    points = []; count = 0; has_tangent = False
    for i, ctrl in iter_segments(path):
        if len(ctrl) == 2:
            r = intersect_ray_line(a0, a1, *ctrl, math.inf)
        elif len(ctrl) == 3:
            r = intersect_line_quad(a0, a1, *ctrl, math.inf)
        else:
            r = intersect_line_cubic(a0, a1, *ctrl, math.inf)
        if r.status is S.NO_INTERSECTION_COINCIDENT:
            has_tangent = True
        elif r.status is S.INTERSECTION:
            count += len(r.points)
            points.extend(p.with_segment_b(i) for p in r.points if p.parameter_a <= max_t)
    if points:
        return IntersectionResult(S.INTERSECTION, tuple(points))
    if count:
        return IntersectionResult(S.NO_INTERSECTION_INSIDE)
    return IntersectionResult(S.NO_INTERSECTION_TANGENT if has_tangent else S.NO_INTERSECTION_OUTSIDE)

def intersect_path_line(path: Iterable[PathSegment], a0: Point, a1: Point) -> IntersectionResult:
    """Intersect every path segment with segment a0-a1; the path is A."""
    points = []
    for i, ctrl in iter_segments(path):
        if len(ctrl) == 2:
            r = intersect_line_line(*ctrl, a0, a1)
        elif len(ctrl) == 3:
            r = intersect_quad_line(*ctrl, a0, a1)
        else:
            r = intersect_cubic_line(*ctrl, a0, a1)
        if r.status is S.INTERSECTION:
            points.extend(p.with_segment_a(i) for p in r.points)
    return IntersectionResult.of(points)

# ============================================================
# Path × Circle / Point
# ============================================================
def intersect_path_circle(path: Iterable[PathSegment], c: Point, r: float) -> IntersectionResult:
    """Intersect every path segment with the circle (c, r); the path is A."""
    points = []
    for i, ctrl in iter_segments(path):
        if len(ctrl) == 2:
            res = intersect_line_circle(*ctrl, c, r)
        elif len(ctrl) == 3:
            res = intersect_quad_circle(*ctrl, c, r)
        else:
            res = intersect_cubic_circle(*ctrl, c, r)
        if res.status is S.INTERSECTION:
            points.extend(p.with_segment_a(i) for p in res.points)
    return IntersectionResult.of(points)

def intersect_path_point(path: Iterable[PathSegment], p: Point, tolerance: float) -> IntersectionResult:
    """Closest path point(s) to p within tolerance.

    parameter_a is the segment-local t plus the segment index, so it orders
    hits along the whole path. Equally close hits (within EPSILON) are all kept.
    """
    check_points(p); check_radius(tolerance, "tolerance")
    best = math.inf; points = []
    for i, ctrl in iter_segments(path):
        if len(ctrl) == 2:
            res = intersect_line_point(*ctrl, p, tolerance)
        elif len(ctrl) == 3:
            res = intersect_quad_point(*ctrl, p, tolerance)
        else:
            res = intersect_cubic_point(*ctrl, p, tolerance)
        for hit in res.points:
            dd = distance_sq(hit.point, p)
            found = IntersectionPoint(hit.point, hit.parameter_a+i, segment_a=i)
            if abs(dd-best) < EPSILON:
                points.append(found)
            elif dd < best:
                best = dd; points = [found]
    if not points:
        logger.debug("no path point within %g of %s", tolerance, p)
    return IntersectionResult.of(points)

"""Polygons, rectangles, and axis-aligned boxes as sequences of line segments.

Each composite is split into its edges, the matching primitive × line
algorithm runs per edge, and the hits are folded into one result with the
edge index written into segment_b (segment_a when A is the composite).
Only edges whose own status is INTERSECTION contribute points.
"""
from typing import Callable, Sequence
from geom.geometry import check_points, rect_corners
from geom.types import Point
from .result import IntersectionStatus as S, IntersectionPoint, IntersectionResult
from .lines import intersect_line_line
from .conics import intersect_circle_line, intersect_ellipse_line
from .curves import intersect_quad_line, intersect_cubic_line

Edge = tuple[Point, Point]

# ============================================================
# Edge Helpers
# ============================================================
def polygon_edges(points: Sequence[Point]) -> list[Edge]:
    """Closed polygon edges i → (i+1) % n."""
    check_points(*points)
    n = len(points)
    return [(points[i], points[(i+1) % n]) for i in range(n)]

def rectangle_edges(r0: Point, r1: Point) -> list[Edge]:
    """Edges of the box spanned by corners r0, r1, clockwise from the top-left corner."""
    check_points(r0, r1)
    tl, tr, br, bl = rect_corners(r0, r1)
    return [(tl, tr), (tr, br), (br, bl), (bl, tl)]

def _edge_points(results: Sequence[IntersectionResult]) -> list[IntersectionPoint]:
    return [p.with_segment_b(i) for i, r in enumerate(results) if r.status is S.INTERSECTION for p in r.points]

def _fold(results: Sequence[IntersectionResult], fallback: S = S.NO_INTERSECTION) -> IntersectionResult:
    points = _edge_points(results)
    if points:
        return IntersectionResult(S.INTERSECTION, tuple(points))
    return IntersectionResult(fallback)

def _fold_edges_a(edges: Sequence[Edge], against: Callable[[Point, Point], IntersectionResult]) -> IntersectionResult:
    """Composite A: run `against` per edge of A, keep its segment_b, tag segment_a."""
    points = []
    for i, (a0, a1) in enumerate(edges):
        points.extend(p.with_segment_a(i) for p in against(a0, a1).points)
    return IntersectionResult.of(points)

# ============================================================
# Line × Composite
# ============================================================
def intersect_line_polygon(a0: Point, a1: Point, points: Sequence[Point]) -> IntersectionResult:
    """Intersect segment a0-a1 with every edge of a closed polygon."""
    return _fold([intersect_line_line(a0, a1, b0, b1) for b0, b1 in polygon_edges(points)])

def intersect_line_aabb(a0: Point, a1: Point, min_x: float, min_y: float, max_x: float, max_y: float) -> IntersectionResult:
    """Intersect segment a0-a1 with the box [min_x, max_x] × [min_y, max_y]."""
    edges = rectangle_edges((min_x, min_y), (max_x, max_y))
    return _fold([intersect_line_line(a0, a1, b0, b1) for b0, b1 in edges])

def intersect_aabb_line(min_x: float, min_y: float, max_x: float, max_y: float, a0: Point, a1: Point) -> IntersectionResult:
    """intersect_line_aabb with the box as A; segment_a is the edge index."""
    return intersect_line_aabb(a0, a1, min_x, min_y, max_x, max_y).swapped()

def intersect_line_rectangle(a0: Point, a1: Point, r0: Point, r1: Point) -> IntersectionResult:
    """Intersect segment a0-a1 with the rectangle spanned by corners r0, r1."""
    check_points(r0, r1)
    return intersect_line_aabb(a0, a1, min(r0[0], r1[0]), min(r0[1], r1[1]), max(r0[0], r1[0]), max(r0[1], r1[1]))

def intersect_rectangle_line(r0: Point, r1: Point, a0: Point, a1: Point) -> IntersectionResult:
    """intersect_line_rectangle with the rectangle as A."""
    return intersect_line_rectangle(a0, a1, r0, r1).swapped()

# ============================================================
# Composite × Composite
# ============================================================
def intersect_polygon_polygon(points_a: Sequence[Point], points_b: Sequence[Point]) -> IntersectionResult:
    """Every edge of polygon A against polygon B; segment_a/segment_b are the edge indices."""
    return _fold_edges_a(polygon_edges(points_a), lambda a0, a1: intersect_line_polygon(a0, a1, points_b))

def intersect_polygon_rectangle(points: Sequence[Point], r0: Point, r1: Point) -> IntersectionResult:
    """Every polygon edge against the rectangle spanned by r0, r1."""
    return _fold_edges_a(polygon_edges(points), lambda a0, a1: intersect_line_rectangle(a0, a1, r0, r1))

def intersect_rectangle_rectangle(a0: Point, a1: Point, b0: Point, b1: Point) -> IntersectionResult:
    """Rectangles given by opposite corners; edges start at the top-left corner."""
    return _fold_edges_a(rectangle_edges(a0, a1), lambda e0, e1: intersect_line_rectangle(e0, e1, b0, b1))

# ============================================================
# Conic × Composite
# ============================================================
def intersect_circle_polygon(c: Point, r: float, points: Sequence[Point]) -> IntersectionResult:
    """Circle against each polygon edge.

    Points keep the line-first layout of intersect_circle_line. Without a
    hit the status is that of the last edge (NO_INTERSECTION for an empty
    polygon).
    """
    results = [intersect_circle_line(c, r, b0, b1) for b0, b1 in polygon_edges(points)]
    return _fold(results, results[-1].status if results else S.NO_INTERSECTION)

def intersect_circle_rectangle(c: Point, r: float, r0: Point, r1: Point) -> IntersectionResult:
    """Circle against each rectangle edge; without a hit the status is that of the top edge."""
    results = [intersect_circle_line(c, r, b0, b1) for b0, b1 in rectangle_edges(r0, r1)]
    return _fold(results, results[0].status)

def intersect_ellipse_polygon(c: Point, rx: float, ry: float, points: Sequence[Point]) -> IntersectionResult:
    """Ellipse against each polygon edge; without a hit the status is that of the last edge."""
    results = [intersect_ellipse_line(c, rx, ry, b0, b1) for b0, b1 in polygon_edges(points)]
    return _fold(results, results[-1].status if results else S.NO_INTERSECTION)

def intersect_ellipse_rectangle(c: Point, rx: float, ry: float, r0: Point, r1: Point) -> IntersectionResult:
    """Ellipse against each rectangle edge."""
    return _fold([intersect_ellipse_line(c, rx, ry, b0, b1) for b0, b1 in rectangle_edges(r0, r1)])

# ============================================================
# Bézier × Composite
# ============================================================
def intersect_quad_polygon(p0: Point, p1: Point, p2: Point, points: Sequence[Point]) -> IntersectionResult:
    """Quadratic curve p against each polygon edge."""
    return _fold([intersect_quad_line(p0, p1, p2, b0, b1) for b0, b1 in polygon_edges(points)])

def intersect_quad_rectangle(p0: Point, p1: Point, p2: Point, r0: Point, r1: Point) -> IntersectionResult:
    """Quadratic curve p against each rectangle edge."""
    return _fold([intersect_quad_line(p0, p1, p2, b0, b1) for b0, b1 in rectangle_edges(r0, r1)])

def intersect_cubic_polygon(p0: Point, p1: Point, p2: Point, p3: Point, points: Sequence[Point]) -> IntersectionResult:
    """Cubic curve p against each polygon edge."""
    return _fold([intersect_cubic_line(p0, p1, p2, p3, b0, b1) for b0, b1 in polygon_edges(points)])

def intersect_cubic_rectangle(p0: Point, p1: Point, p2: Point, p3: Point, r0: Point, r1: Point) -> IntersectionResult:
    """Cubic curve p against each rectangle edge."""
    return _fold([intersect_cubic_line(p0, p1, p2, p3, b0, b1) for b0, b1 in rectangle_edges(r0, r1)])

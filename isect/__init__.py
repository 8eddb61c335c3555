"""2D intersection engine: one function per primitive pair, plus composites and paths."""
import logging

from .constants import TOLERANCE, COLLAPSED_TOLERANCE, DUPLICATE_TOLERANCE
from .result import (
    IntersectionStatus, IntersectionPoint, IntersectionResult,
    BasicIntersectionPoint, BasicIntersectionResult,
)
from .points import intersect_point_circle, intersect_point_ellipse, intersect_circle_point
from .lines import (
    intersect_ray_line, intersect_line_line, intersect_ray_ray, intersect_line_point,
    intersect_line_circle, intersect_line_circle_basic,
    intersect_line_ellipse, intersect_line_ellipse_basic,
)
from .conics import (
    intersect_circle_circle, bezout, intersect_ellipse_ellipse,
    intersect_circle_ellipse, intersect_ellipse_circle,
    intersect_circle_line, intersect_ellipse_line,
)
from .curves import (
    intersect_quad_line, intersect_cubic_line, intersect_line_quad, intersect_line_cubic,
    intersect_quad_ellipse, intersect_quad_circle, intersect_cubic_ellipse, intersect_cubic_circle,
    intersect_ellipse_quad, intersect_circle_quad, intersect_ellipse_cubic, intersect_circle_cubic,
    intersect_quad_point, intersect_cubic_point,
)
from .beziers import (
    resultant, intersect_quad_quad, intersect_quad_cubic, intersect_cubic_quad, intersect_cubic_cubic,
)
from .shapes import (
    polygon_edges, rectangle_edges,
    intersect_line_polygon, intersect_line_aabb, intersect_aabb_line,
    intersect_line_rectangle, intersect_rectangle_line,
    intersect_polygon_polygon, intersect_polygon_rectangle, intersect_rectangle_rectangle,
    intersect_circle_polygon, intersect_circle_rectangle,
    intersect_ellipse_polygon, intersect_ellipse_rectangle,
    intersect_quad_polygon, intersect_quad_rectangle,
    intersect_cubic_polygon, intersect_cubic_rectangle,
)
from .paths import (
    iter_segments, intersect_line_path, intersect_path_line, intersect_path_circle, intersect_path_point,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

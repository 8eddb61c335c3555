"""Leaf geometry layer: points, path segments, vector helpers, and polynomials."""
import logging

from .constants import EPSILON, REAL_THRESHOLD
from .types import Point, MoveTo, LineTo, QuadTo, CubicTo, ClosePath, PathSegment
from .geometry import (
    GeometryError, check_points, check_radius,
    almost_zero, almost_equal, clamp,
    sub, scale, lerp, distance, distance_sq, perp, atan2,
    ellipse_angle, ellipse_tangent,
    argument_on_line, rect_corners,
    bezier_point, bezier_tangent, bezier_coefficients,
)
from .polynomial import Polynomial

logging.getLogger(__name__).addHandler(logging.NullHandler())

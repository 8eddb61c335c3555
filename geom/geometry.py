"""Pure 2D vector helpers, Bézier evaluation, and input validation."""
import math
from typing import Sequence
from .constants import REAL_THRESHOLD
from .types import Point

# ============================================================
# Error Type
# ============================================================
class GeometryError(ValueError):
    """Raised for impossible geometry operations."""

# ============================================================
# Validation
# ============================================================
def check_points(*pts: Point) -> None:
    """Raise GeometryError unless every argument is an (x, y) pair of finite numbers."""
    for p in pts:
        if len(p) != 2:
            raise GeometryError(f"Expected (x, y), got {p!r}")
        for v in p:
            if not math.isfinite(v):
                raise GeometryError(f"Non-finite coordinate: {v}")

def check_radius(r: float, what: str = "radius") -> None:
    """Raise GeometryError for a radius (or tolerance) that is negative or not finite."""
    if not math.isfinite(r):
        raise GeometryError(f"Non-finite {what}: {r}")
    if r < 0:
        raise GeometryError(f"Negative {what}: {r}")

# ============================================================
# Scalar Predicates
# ============================================================
def almost_zero(a: float, eps: float = REAL_THRESHOLD) -> bool:
    """True when |a| is within eps."""
    return abs(a) < eps

def almost_equal(a: float, b: float, eps: float = REAL_THRESHOLD) -> bool:
    return abs(a - b) < eps

def clamp(v: float, lo: float, hi: float) -> float:
    """Clamp v into [lo, hi]; NaN maps to lo."""
    return lo if not v >= lo else hi if v > hi else v

# ============================================================
# Vector Arithmetic
# ============================================================
def sub(p: Point, q: Point) -> Point:
    return (p[0]-q[0], p[1]-q[1])

def scale(p: Point, s: float) -> Point:
    return (p[0]*s, p[1]*s)

def lerp(p: Point, q: Point, t: float) -> Point:
    """Point at fraction t along p → q."""
    return (p[0]+(q[0]-p[0])*t, p[1]+(q[1]-p[1])*t)

def distance_sq(p: Point, q: Point) -> float:
    dx = q[0]-p[0]; dy = q[1]-p[1]
    return dx*dx+dy*dy

def distance(p: Point, q: Point) -> float:
    """Euclidean distance between p and q."""
    return math.sqrt(distance_sq(p, q))

def perp(v: Point) -> Point:
    """Vector v rotated by -90 degrees: (x, y) → (y, -x)."""
    return (v[1], -v[0])

def atan2(y: float, x: float) -> float:
    """math.atan2, but 0.0 when both arguments are almost zero."""
    if almost_zero(y) and almost_zero(x):
        return 0.0
    return math.atan2(y, x)

# ============================================================
# Conic Helpers
# ============================================================
def ellipse_angle(c: Point, rx: float, ry: float, p: Point) -> float:
    """Eccentric angle of p on the ellipse centered at c, so that p = c + (rx cos θ, ry sin θ)."""
    return atan2((p[1]-c[1])/ry, (p[0]-c[0])/rx)

def ellipse_tangent(c: Point, rx: float, ry: float, p: Point) -> Point:
    """Tangent at boundary point p, matching perp(p - c) when rx == ry."""
    return ((p[1]-c[1])*rx/ry, -(p[0]-c[0])*ry/rx)

# ============================================================
# Line Helpers
# ============================================================
def argument_on_line(a0: Point, a1: Point, p: Point) -> float:
    """Parameter t of p projected on a0 → a1, measured along the dominant axis."""
    w = a1[0]-a0[0]; h = a1[1]-a0[1]
    if abs(w) > abs(h):
        return (p[0]-a0[0])/w
    if h == 0:
        return 0.0
    return (p[1]-a0[1])/h

def rect_corners(r0: Point, r1: Point) -> tuple[Point, Point, Point, Point]:
    """Corners of the box spanned by r0 and r1: top-left, top-right, bottom-right, bottom-left."""
    x0, x1 = min(r0[0], r1[0]), max(r0[0], r1[0])
    y0, y1 = min(r0[1], r1[1]), max(r0[1], r1[1])
    return (x0, y0), (x1, y0), (x1, y1), (x0, y1)

# ============================================================
# Bézier Curves
# ============================================================
def bezier_point(ctrl: Sequence[Point], t: float) -> Point:
    """Evaluate a Bézier curve of any degree at t (de Casteljau)."""
    pts = list(ctrl)
    while len(pts) > 1:
        pts = [lerp(p, q, t) for p, q in zip(pts, pts[1:])]
    return pts[0]

def bezier_tangent(ctrl: Sequence[Point], t: float) -> Point:
    """Derivative of a Bézier curve at t."""
    n = len(ctrl)-1
    if n == 0:
        return (0.0, 0.0)
    hodograph = [scale(sub(q, p), n) for p, q in zip(ctrl, ctrl[1:])]
    return bezier_point(hodograph, t)

def bezier_coefficients(ctrl: Sequence[Point]) -> tuple[list[float], list[float]]:
    """Monomial coefficients of a Bézier curve, highest degree first, as (xs, ys).

    Quadratic: c2 = p0-2p1+p2, c1 = 2(p1-p0), c0 = p0.
    """
    n = len(ctrl)-1
    xs, ys = [], []
    for k in range(n, -1, -1):
        cx = cy = 0.0
        for i in range(k+1):
            w = (-1)**(k-i)*math.comb(k, i)
            cx += w*ctrl[i][0]; cy += w*ctrl[i][1]
        xs.append(math.comb(n, k)*cx); ys.append(math.comb(n, k)*cy)
    return xs, ys

"""Bézier × Bézier intersection by resultant elimination.

Curve A is A(t), curve B is B(s). Eliminating t from A(t) - B(s) = 0 gives
one polynomial in s (degree 4, 6, or 9). Each of its roots is checked by
solving the x and y equations of A independently: a root is kept only when
both yield the same t within TOLERANCE, which drops the spurious roots that
elimination introduces. Accepted (t, s) pairs are then polished jointly on
A(t) - B(s) = 0 with scipy's least_squares.
"""
import logging
from typing import Sequence
import numpy as np
from scipy.optimize import least_squares
from geom.constants import EPSILON
from geom.geometry import check_points, bezier_point, bezier_tangent, bezier_coefficients
from geom.polynomial import Polynomial
from geom.types import Point
from .constants import TOLERANCE, COLLAPSED_TOLERANCE
from .result import IntersectionStatus as S, IntersectionPoint, IntersectionResult
from .curves import _curve_point

logger = logging.getLogger(__name__)

# ============================================================
# Resultant
# ============================================================
def _bezout_matrix(f: list[Polynomial], g: list[Polynomial]) -> list[list[Polynomial]]:
    """Cayley matrix of (f(x)g(y) - f(y)g(x)) / (x - y); coefficients lowest degree first."""
    m = len(f)-1
    B = [[Polynomial(0.0) for _ in range(m)] for _ in range(m)]
    for a in range(1, m+1):
        for b in range(a):
            c = f[a]*g[b]-f[b]*g[a]
            for k in range(a-b):
                B[b+k][a-1-k] = B[b+k][a-1-k]+c
    return B

def _det(M: list[list[Polynomial]]) -> Polynomial:
    """Determinant by cofactor expansion along the first row."""
    if len(M) == 1:
        return M[0][0]
    total = Polynomial(0.0)
    for j, entry in enumerate(M[0]):
        minor = [row[:j]+row[j+1:] for row in M[1:]]
        term = entry*_det(minor)
        total = total-term if j % 2 else total+term
    return total

def resultant(ctrl_a: Sequence[Point], ctrl_b: Sequence[Point]) -> Polynomial:
    """Polynomial in s whose roots are the parameters on curve B where it meets curve A."""
    axs, ays = bezier_coefficients(ctrl_a)
    bx = Polynomial(*bezier_coefficients(ctrl_b)[0]); by = Polynomial(*bezier_coefficients(ctrl_b)[1])
    axs.reverse(); ays.reverse()
    m = len(axs)-1
    while m > 0 and abs(axs[m]) <= EPSILON and abs(ays[m]) <= EPSILON:
        m -= 1
    if m == 0:
        return Polynomial(1.0)
    f = [Polynomial(axs[0])-bx]+[Polynomial(c) for c in axs[1:m+1]]
    g = [Polynomial(ays[0])-by]+[Polynomial(c) for c in ays[1:m+1]]
    return _det(_bezout_matrix(f, g))

# ============================================================
# Back-substitution
# ============================================================
def _match_t(axs: list[float], ays: list[float], p: Point) -> float | None:
    """Parameter t on curve A with A(t) == p, or None."""
    x_poly = Polynomial(*axs[:-1], axs[-1]-p[0])
    y_poly = Polynomial(*ays[:-1], ays[-1]-p[1])
    lo = -TOLERANCE; hi = 1+TOLERANCE
    y_roots = y_poly.roots()
    if x_poly.degree == 0:
        ts = [t for t in y_roots if lo <= t <= hi]
    elif y_poly.degree == 0:
        ts = [t for t in x_poly.roots() if lo <= t <= hi]
    else:
        ts = [tx for tx in x_poly.roots() if lo <= tx <= hi
              and any(abs(tx-ty) < TOLERANCE for ty in y_roots)]
    if not ts:
        return None
    return min(max(ts[0], 0.0), 1.0)

def _refine(ctrl_a: Sequence[Point], ctrl_b: Sequence[Point], t: float, s: float) -> tuple[float, float]:
    """Polish (t, s) so that A(t) and B(s) agree to full precision (Levenberg-Marquardt on A - B)."""
    def residuals(x):
        pa = bezier_point(ctrl_a, x[0]); pb = bezier_point(ctrl_b, x[1])
        return np.array([pa[0]-pb[0], pa[1]-pb[1]])

    def jacobian(x):
        da = bezier_tangent(ctrl_a, x[0]); db = bezier_tangent(ctrl_b, x[1])
        return np.array([[da[0], -db[0]], [da[1], -db[1]]])

    result = least_squares(residuals, np.array([t, s]), jac=jacobian, method="lm",
                           xtol=1e-15, ftol=1e-15, gtol=1e-15)
    if not result.success:
        return t, s
    return float(result.x[0]), float(result.x[1])

def _collapsed(ctrl_a: Sequence[Point], ctrl_b: Sequence[Point]) -> IntersectionResult:
    """Curve A is a single point: report where it lies on curve B."""
    p = ctrl_a[0]
    hits = _curve_point(ctrl_b, p, COLLAPSED_TOLERANCE).points
    return IntersectionResult.of(IntersectionPoint(p, 0.0, (0.0, 0.0), 0, h.parameter_a, h.tangent_a, 0)
                                 for h in hits)

def _curve_curve(
    ctrl_a: Sequence[Point], ctrl_b: Sequence[Point], t_min: float = 0.0, t_max: float = 1.0,
) -> IntersectionResult:
    check_points(*ctrl_a, *ctrl_b)
    axs, ays = bezier_coefficients(ctrl_a)
    if all(abs(c) <= EPSILON for c in axs[:-1]+ays[:-1]):
        logger.debug("curve %s collapses to a point", ctrl_a)
        return _collapsed(ctrl_a, ctrl_b)
    res = resultant(ctrl_a, ctrl_b)
    if res.is_zero():
        logger.debug("coincident curves %s and %s", ctrl_a, ctrl_b)
        return IntersectionResult(S.NO_INTERSECTION_COINCIDENT)
    points = []
    for s in res.roots_in_interval(t_min-TOLERANCE, t_max+TOLERANCE):
        s = min(max(s, t_min), t_max)
        t = _match_t(axs, ays, bezier_point(ctrl_b, s))
        if t is None:
            logger.debug("rejected spurious resultant root s=%g", s)
            continue
        t, s = _refine(ctrl_a, ctrl_b, t, s)
        t = min(max(t, 0.0), 1.0); s = min(max(s, t_min), t_max)
        points.append(IntersectionPoint(bezier_point(ctrl_a, t), t, bezier_tangent(ctrl_a, t), 0,
                                        s, bezier_tangent(ctrl_b, s), 0))
    return IntersectionResult.of(points)

# ============================================================
# Public API
# ============================================================
def intersect_quad_quad(a0: Point, a1: Point, a2: Point, b0: Point, b1: Point, b2: Point) -> IntersectionResult:
    """Intersect quadratic curves a and b (quartic resultant)."""
    return _curve_curve((a0, a1, a2), (b0, b1, b2))

def intersect_quad_cubic(a0: Point, a1: Point, a2: Point,
                         b0: Point, b1: Point, b2: Point, b3: Point) -> IntersectionResult:
    """Intersect quadratic curve a with cubic curve b (degree 6 resultant)."""
    return _curve_curve((a0, a1, a2), (b0, b1, b2, b3))

def intersect_cubic_quad(a0: Point, a1: Point, a2: Point, a3: Point,
                         b0: Point, b1: Point, b2: Point) -> IntersectionResult:
    """Intersect cubic curve a with quadratic curve b (degree 6 resultant)."""
    return _curve_curve((a0, a1, a2, a3), (b0, b1, b2))

def intersect_cubic_cubic(
    a0: Point, a1: Point, a2: Point, a3: Point,
    b0: Point, b1: Point, b2: Point, b3: Point,
    t_min: float = 0.0, t_max: float = 1.0,
) -> IntersectionResult:
    """Intersect cubic curves a and b (degree 9 resultant).

    t_min and t_max restrict the parameter range searched on curve b.
    """
    return _curve_curve((a0, a1, a2, a3), (b0, b1, b2, b3), t_min, t_max)

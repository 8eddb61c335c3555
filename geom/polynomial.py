"""Univariate real polynomials with closed-form root extraction up to degree 4."""
import math
from typing import Optional
import numpy as np
from scipy.optimize import brentq
from .constants import EPSILON, REAL_THRESHOLD


class Polynomial:
    """Immutable polynomial; coefficients are given highest degree first.

    Leading coefficients with |c| <= EPSILON are dropped on construction, so
    `degree` never counts a near-zero leading term.
    """
    __slots__ = ("coefs",)

    def __init__(self, *coefs: float):
        cs = [float(c) for c in coefs] or [0.0]
        i = 0
        while i < len(cs)-1 and abs(cs[i]) <= EPSILON:
            i += 1
        self.coefs: tuple[float, ...] = tuple(cs[i:])

    @property
    def degree(self) -> int:
        return len(self.coefs)-1

    def is_zero(self) -> bool:
        return self.degree == 0 and abs(self.coefs[0]) <= EPSILON

    def __call__(self, x: float) -> float:
        """Evaluate at x (Horner)."""
        r = 0.0
        for c in self.coefs:
            r = r*x+c
        return r

    def __repr__(self) -> str:
        return f"Polynomial{self.coefs!r}"

    def __eq__(self, other) -> bool:
        return isinstance(other, Polynomial) and self.coefs == other.coefs

    def __hash__(self) -> int:
        return hash(self.coefs)

    # ============================================================
    # Arithmetic
    # ============================================================
    @staticmethod
    def _coerce(other) -> "Polynomial":
        return other if isinstance(other, Polynomial) else Polynomial(other)

    def __add__(self, other) -> "Polynomial":
        a, b = self.coefs, self._coerce(other).coefs
        n = max(len(a), len(b))
        a = (0.0,)*(n-len(a))+a; b = (0.0,)*(n-len(b))+b
        return Polynomial(*(x+y for x, y in zip(a, b)))

    __radd__ = __add__

    def __neg__(self) -> "Polynomial":
        return Polynomial(*(-c for c in self.coefs))

    def __sub__(self, other) -> "Polynomial":
        return self+(-self._coerce(other))

    def __rsub__(self, other) -> "Polynomial":
        return self._coerce(other)+(-self)

    def __mul__(self, other) -> "Polynomial":
        if not isinstance(other, Polynomial):
            return Polynomial(*(c*other for c in self.coefs))
        a, b = self.coefs, other.coefs
        out = [0.0]*(len(a)+len(b)-1)
        for i, x in enumerate(a):
            for j, y in enumerate(b):
                out[i+j] += x*y
        return Polynomial(*out)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Polynomial":
        return Polynomial(*(c/scalar for c in self.coefs))

    def derivative(self) -> "Polynomial":
        n = self.degree
        if n == 0:
            return Polynomial(0.0)
        return Polynomial(*(c*(n-i) for i, c in enumerate(self.coefs[:-1])))

    # ============================================================
    # Roots
    # ============================================================
    def roots(self) -> list[float]:
        """Real roots. A constant polynomial has none, even when it is zero."""
        n = self.degree
        if n == 0:
            return []
        if n == 1:
            return [-self.coefs[1]/self.coefs[0]]
        if n == 2:
            return self._quadratic_roots()
        if n == 3:
            return self._cubic_roots()
        if n == 4:
            return self._quartic_roots()
        return self._eigen_roots()

    def _quadratic_roots(self) -> list[float]:
        a, b, c = self.coefs
        b /= a; c /= a
        d = b*b-4*c
        if abs(d) <= EPSILON:
            return [-0.5*b]
        if d < 0:
            return []
        e = math.sqrt(d)
        return [0.5*(-b+e), 0.5*(-b-e)]

    def _cubic_roots(self) -> list[float]:
        c3, c2, c1, c0 = self.coefs
        c2 /= c3; c1 /= c3; c0 /= c3
        a = (3*c1-c2*c2)/3
        b = (2*c2*c2*c2-9*c1*c2+27*c0)/27
        offset = c2/3; half_b = b/2
        discrim = b*b/4+a*a*a/27
        if abs(discrim) <= EPSILON:
            discrim = 0.0
        if discrim > 0:
            e = math.sqrt(discrim)
            return [math.cbrt(-half_b+e)+math.cbrt(-half_b-e)-offset]
        if discrim < 0:
            dist = math.sqrt(-a/3)
            angle = math.atan2(math.sqrt(-discrim), -half_b)/3
            cos, sin = math.cos(angle), math.sin(angle); sqrt3 = math.sqrt(3)
            return [2*dist*cos-offset,
                    -dist*(cos+sqrt3*sin)-offset,
                    -dist*(cos-sqrt3*sin)-offset]
        tmp = -math.cbrt(half_b)
        if tmp == 0:
            return [-offset]
        # the second root is a double root, reported once
        return [2*tmp-offset, -tmp-offset]

    def _quartic_roots(self) -> list[float]:
        c4, c3, c2, c1, c0 = self.coefs
        c3 /= c4; c2 /= c4; c1 /= c4; c0 /= c4
        resolvent = Polynomial(1.0, -c2, c3*c1-4*c0, -c3*c3*c0+4*c2*c0-c1*c1)
        y = resolvent._cubic_roots()[0]
        discrim = c3*c3/4-c2+y
        if abs(discrim) <= EPSILON:
            discrim = 0.0
        roots = []
        if discrim > 0:
            e = math.sqrt(discrim)
            t1 = 0.75*c3*c3-e*e-2*c2
            t2 = (4*c3*c2-8*c1-c3*c3*c3)/(4*e)
            plus = t1+t2; minus = t1-t2
            if abs(plus) <= EPSILON: plus = 0.0
            if abs(minus) <= EPSILON: minus = 0.0
            if plus >= 0:
                f = math.sqrt(plus)
                roots += [-c3/4+(e+f)/2, -c3/4+(e-f)/2]
            if minus >= 0:
                f = math.sqrt(minus)
                roots += [-c3/4+(f-e)/2, -c3/4-(f+e)/2]
        elif discrim == 0:
            t2 = y*y-4*c0
            if t2 >= -EPSILON:
                t2 = 2*math.sqrt(max(t2, 0.0))
                t1 = 3*c3*c3/4-2*c2
                if t1+t2 >= EPSILON:
                    d = math.sqrt(t1+t2)
                    roots += [-c3/4+d/2, -c3/4-d/2]
                if t1-t2 >= EPSILON:
                    d = math.sqrt(t1-t2)
                    roots += [-c3/4+d/2, -c3/4-d/2]
        return roots

    def _eigen_roots(self) -> list[float]:
        found = np.roots(self.coefs)
        real = found.real[np.abs(found.imag) <= REAL_THRESHOLD]
        return sorted(float(r) for r in real)

    def bracketed_root(self, lo: float, hi: float) -> Optional[float]:
        """Root in [lo, hi] (Brent's method), or None when the sign does not change."""
        lo_val = self(lo); hi_val = self(hi)
        if abs(lo_val) <= EPSILON:
            return lo
        if abs(hi_val) <= EPSILON:
            return hi
        if lo_val*hi_val > 0:
            return None
        return float(brentq(self, lo, hi, xtol=1e-15))

    def roots_in_interval(self, lo: float, hi: float) -> list[float]:
        """Sorted real roots within [lo, hi], allowing EPSILON slack at both ends."""
        if self.degree <= 4:
            return sorted(min(max(r, lo), hi) for r in self.roots()
                          if lo-EPSILON <= r <= hi+EPSILON)
        # bracket by the extrema: the polynomial is monotone between them
        bounds = [lo, *self.derivative().roots_in_interval(lo, hi), hi]
        roots = []
        for a, b in zip(bounds, bounds[1:]):
            if b <= a:
                continue
            r = self.bracketed_root(a, b)
            if r is not None and not (roots and abs(r-roots[-1]) <= EPSILON):
                roots.append(r)
        return roots

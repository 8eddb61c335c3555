"""Tests for geom/polynomial.py."""
from geom.polynomial import Polynomial


def close_all(found, expected, tol):
    return len(found) == len(expected) and all(abs(a - b) < tol for a, b in zip(found, expected))


# --- construction ---

def test_trims_near_zero_leading_coefficients():
    p = Polynomial(0.0, 1e-12, 2.0, 3.0)
    assert p.degree == 1
    assert p.coefs == (2.0, 3.0)


def test_zero_polynomial():
    p = Polynomial(0.0, 0.0, 0.0)
    assert p.is_zero()
    assert p.degree == 0
    assert p.roots() == []


def test_evaluate_horner():
    assert Polynomial(1, 2, 3)(2.0) == 11.0


# --- arithmetic ---

def test_multiply_polynomials():
    assert Polynomial(1, 1)*Polynomial(1, -1) == Polynomial(1, 0, -1)


def test_scalar_on_either_side():
    assert 2 + Polynomial(1, 1) == Polynomial(1, 3)
    assert 1 - Polynomial(1, 1) == Polynomial(-1, 0)
    assert 3*Polynomial(1, 2) == Polynomial(3, 6)
    assert Polynomial(2, 4)/2 == Polynomial(1, 2)


def test_subtraction_cancels_leading_term():
    p = Polynomial(1, 2, 3) - Polynomial(1, 0, 0)
    assert p.degree == 1
    assert p == Polynomial(2, 3)


def test_derivative():
    assert Polynomial(1, 2, 3, 4).derivative() == Polynomial(3, 4, 3)
    assert Polynomial(5).derivative().is_zero()


# --- roots ---

def test_linear_root():
    assert Polynomial(2, -4).roots() == [2.0]


def test_quadratic_roots():
    assert sorted(Polynomial(1, -3, 2).roots()) == [1.0, 2.0]


def test_quadratic_double_root_reported_once():
    assert Polynomial(1, -2, 1).roots() == [1.0]


def test_quadratic_no_real_roots():
    assert Polynomial(1, 0, 1).roots() == []


def test_cubic_three_roots():
    # (x-1)(x-2)(x-3)
    assert close_all(sorted(Polynomial(1, -6, 11, -6).roots()), [1, 2, 3], 1e-9)


def test_cubic_one_real_root():
    assert close_all(Polynomial(1, 0, 0, -1).roots(), [1.0], 1e-12)


def test_cubic_double_root():
    # (x-1)²(x+2)
    assert close_all(sorted(Polynomial(1, 0, -3, 2).roots()), [-2.0, 1.0], 1e-9)


def test_quartic_four_roots():
    # (x-1)(x-2)(x-3)(x-4)
    assert close_all(sorted(Polynomial(1, -10, 35, -50, 24).roots()), [1, 2, 3, 4], 1e-7)


def test_quartic_no_real_roots():
    assert Polynomial(1, 0, 2, 0, 1).roots() == []


def test_quintic_eigenvalue_roots():
    # (x-1)(x-2)(x-3)(x-4)(x-5)
    p = Polynomial(1, -15, 85, -225, 274, -120)
    assert close_all(p.roots(), [1, 2, 3, 4, 5], 1e-6)


# --- roots_in_interval ---

def test_roots_in_interval_low_degree_clamps():
    assert Polynomial(1, -1, 0).roots_in_interval(0.0, 1.0) == [0.0, 1.0]
    assert Polynomial(1, -1).roots_in_interval(0.0, 0.5) == []


def test_roots_in_interval_high_degree_full_precision():
    p = Polynomial(1, -15, 85, -225, 274, -120)
    assert close_all(p.roots_in_interval(0.0, 2.5), [1.0, 2.0], 1e-10)


# --- bracketed_root ---

def test_bracketed_root_without_sign_change():
    assert Polynomial(1, 0, 1).bracketed_root(-1.0, 1.0) is None


def test_bracketed_root_returns_endpoint_root():
    assert Polynomial(1, -1).bracketed_root(1.0, 2.0) == 1.0


def test_bracketed_root_interior_root():
    r = Polynomial(1, 0, -2).bracketed_root(0.0, 2.0)
    assert abs(r - 2**0.5) < 1e-12

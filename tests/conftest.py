"""Shared test fixtures for intersection engine tests."""
import pytest
from geom.types import MoveTo, LineTo, ClosePath


@pytest.fixture(scope="session")
def square():
    """10 × 10 polygon with its first corner at the origin."""
    return [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)]


@pytest.fixture(scope="session")
def shifted_square(square):
    """square moved by (5, 5)."""
    return [(x+5.0, y+5.0) for x, y in square]


@pytest.fixture(scope="session")
def square_path(square):
    """square as a closed path: MoveTo, three LineTo, ClosePath (indices 0..4)."""
    p0, p1, p2, p3 = square
    return [MoveTo(p0), LineTo(p1), LineTo(p2), LineTo(p3), ClosePath()]


@pytest.fixture(scope="session")
def hump():
    """Quadratic (0,0)-(1,2)-(2,0): x = 2t, y = 4t(1-t)."""
    return ((0.0, 0.0), (1.0, 2.0), (2.0, 0.0))


@pytest.fixture(scope="session")
def arch():
    """Cubic (0,0)-(0,10)-(10,10)-(10,0): x = 30t² - 20t³, y = 30t(1-t)."""
    return ((0.0, 0.0), (0.0, 10.0), (10.0, 10.0), (10.0, 0.0))


@pytest.fixture(scope="session")
def flat_cubic():
    """Cubic with evenly spaced control points on y = 5: x = -5 + 22.5t."""
    return ((-5.0, 5.0), (2.5, 5.0), (10.0, 5.0), (17.5, 5.0))

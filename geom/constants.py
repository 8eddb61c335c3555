"""Numeric policy constants shared by the polynomial solver and every intersection algorithm.

A value v counts as zero iff |v| <= EPSILON.
"""

EPSILON = 1.0 / (1 << 33)      # ~1.16e-10, well above double rounding noise
REAL_THRESHOLD = 1e-8          # almost_zero / almost_equal on coordinates

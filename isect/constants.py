"""Tolerances used by the intersection algorithms.

EPSILON (geom.constants) widens parameter ranges; the values here are
specific to elimination-based curve and conic intersection.
"""

TOLERANCE = 1e-4             # x-root vs y-root agreement when back-substituting a resultant root
COLLAPSED_TOLERANCE = 1e-9   # distance at which a curve collapsed to a point lies on the other curve
DUPLICATE_TOLERANCE = 1e-6   # relative distance at which two conic crossings are the same point

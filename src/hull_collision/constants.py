# MIT License (see LICENSE)
"""
Numerical constants used by the GJK and EPA routines.

The defaults are tuned for hulls whose extents are of order 1 (meters).
Most of them can be overridden per query through GjkConfig.
"""
from __future__ import annotations

# Upper bound on GJK iterations.
MAX_ITERATIONS: int = 50

# EPA stops once a new support point advances the closest face by less
# than this distance.
EPA_TOLERANCE: float = 1e-5

# Upper bound on EPA expansions. Exceeding it reports a non-converged contact.
EPA_MAX_ITERATIONS: int = 128

# Relative overshoot used when a degenerate simplex is padded with a point
# just past the origin: b + (1 + eps) * (o - b).
SIMPLEX_EPS: float = 1e-4

# Offset of the synthesized point perpendicular to a 2-point simplex.
PERPENDICULAR_OFFSET: float = 0.1

# Vectors shorter than this are treated as zero (zero-area faces,
# coincident support points).
DEGENERATE_EPS: float = 1e-12

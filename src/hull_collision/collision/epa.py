# MIT License (see LICENSE)
"""
Expanding Polytope Algorithm (EPA) for penetration depth calculation.

This module implements EPA to find the penetration vector and contact points
of two intersecting convex hulls. EPA triangulates the GJK simplex into a
polytope and iteratively adds support points in the direction of the face
closest to the origin until that face lies on the boundary of the Minkowski
difference.

EPA should only be called after GJK reports a hit. The outcome is written
into a Collision record; the return value tells how the expansion ended:
- CONVERGED: the closest face stopped moving (tolerance reached, or the new
  support point is already a polytope vertex).
- NOT_CONVERGED: the iteration cap was hit; the record holds the best
  estimate found so far.
- DEGENERATE: every polytope face has zero area; the record holds a zero
  penetration vector instead of NaN values.

Usage:
    hit, simplex, _ = gjk_intersect(hull_a, hull_b)
    if hit:
        status = epa_penetration(simplex, hull_a, hull_b, collision)
"""
from __future__ import annotations
import logging

import numpy as np

from ..constants import DEGENERATE_EPS, EPA_MAX_ITERATIONS, EPA_TOLERANCE
from ..errors import DegenerateFaceError
from ..types import Face, SupportPoint
from ..util import barycentric, cartesian, f64, norm
from .contact import Collision, EpaStatus
from .gjk import PointCloud, Vec3, support
from .simplex import Simplex

logger = logging.getLogger(__name__)


def epa_penetration(
    simplex: Simplex,
    hull_a: PointCloud,
    hull_b: PointCloud,
    collision: Collision,
    tol: float = EPA_TOLERANCE,
    max_iters: int = EPA_MAX_ITERATIONS,
) -> EpaStatus:
    """
    Compute penetration vector and contact points with the Expanding Polytope Algorithm.

    Args:
        simplex: Simplex from GJK with 2-4 vertices. It is triangulated and
            expanded in place.
        hull_a: World-space vertices of hull A, shape (N, 3).
        hull_b: World-space vertices of hull B, shape (M, 3).
        collision: Record to fill (normal, contact points, penetration vector).
        tol: Convergence tolerance for depth refinement. Default 1e-5.
        max_iters: Maximum expansion iterations. Default 128.

    Returns:
        The EpaStatus, also stored on `collision.status`.

    Raises:
        SimplexSizeError: If the simplex cannot be triangulated.
    """
    gjk_vertices = simplex.vertices
    simplex.triangulate()

    face: Face | None = None
    p: SupportPoint | None = None
    d = 0.0

    for i in range(max_iters):
        try:
            face = simplex.find_closest_face()
        except DegenerateFaceError:
            logger.warning("EPA polytope is degenerate after %d iterations; reporting zero penetration", i)
            _write_degenerate(collision, gjk_vertices)
            collision.status = EpaStatus.DEGENERATE
            return collision.status

        # Get support point in direction of closest face normal
        p = support(hull_a, hull_b, face.normal)
        d = abs(float(np.dot(p.minkowski, face.normal)))

        # Converged when the face no longer moves, or the point is already known
        if d - face.distance < tol or not simplex.extend(p):
            logger.debug("EPA converged after %d iterations, depth %.6g", i + 1, d)
            _write_contact(collision, face, p, d)
            collision.status = EpaStatus.CONVERGED
            return collision.status

    logger.warning(
        "EPA did not converge within %d iterations; last face distance %.6g, support distance %.6g",
        max_iters, face.distance, d,
    )
    _write_contact(collision, face, p, d)
    collision.status = EpaStatus.NOT_CONVERGED
    return collision.status


def _write_contact(collision: Collision, face: Face, p: SupportPoint, d: float) -> None:
    """Store contact points, penetration vector and normal for a closest face."""
    bary = barycentric(p.minkowski, face[0].minkowski, face[1].minkowski, face[2].minkowski)
    collision.first_poc = cartesian(bary, face[0].from_hull_a, face[1].from_hull_a, face[2].from_hull_a)
    collision.second_poc = cartesian(bary, face[0].from_hull_b, face[1].from_hull_b, face[2].from_hull_b)
    collision.intersection_vector = d * face.normal
    collision.unit_normal = reference_normal(collision, fallback=-face.normal)


def _write_degenerate(collision: Collision, vertices: list[SupportPoint]) -> None:
    """Store a zero-depth contact at the centroid of the GJK support points."""
    collision.first_poc = np.mean([v.from_hull_a for v in vertices], axis=0)
    collision.second_poc = np.mean([v.from_hull_b for v in vertices], axis=0)
    collision.intersection_vector = np.zeros(3, dtype=np.float64)
    collision.unit_normal = reference_normal(collision, fallback=np.array([1.0, 0.0, 0.0]))


def reference_normal(collision: Collision, fallback: Vec3) -> Vec3:
    """
    Collision normal from the participants' reference positions.

    Returns the unit vector from the second object's position toward the
    first one's. This is a cheap sign choice for impulse resolution, not the
    true separating direction. When either participant has no `position`,
    or both positions coincide, `fallback` is returned instead.
    """
    pos_a = getattr(collision.first_object, "position", None)
    pos_b = getattr(collision.second_object, "position", None)
    if pos_a is not None and pos_b is not None:
        v = f64(pos_a) - f64(pos_b)
        n = norm(v)
        if n >= DEGENERATE_EPS:
            return v / n
    return f64(fallback)
